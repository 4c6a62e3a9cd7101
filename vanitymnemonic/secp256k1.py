"""Arithmetic on the secp256k1 curve: points are (x, y) tuples, None is infinity."""

from __future__ import annotations

from typing import Optional, Tuple

P = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEFFFFFC2F
N = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141
G = (
    0x79BE667EF9DCBBAC55A06295CE870B07029BFCDB2DCE28D959F2815B16F81798,
    0x483ADA7726A3C4655DA4FBFC0E1108A8FD17B448A68554199C47D08FFB10D4B8,
)

Point = Optional[Tuple[int, int]]
_Jacobian = Tuple[int, int, int]
_INFINITY: _Jacobian = (0, 1, 0)


def _to_jacobian(p: Point) -> _Jacobian:
    if p is None:
        return _INFINITY
    return (p[0], p[1], 1)


def _from_jacobian(p: _Jacobian) -> Point:
    x, y, z = p
    if z == 0:
        return None
    z_inv = pow(z, -1, P)
    z_inv2 = z_inv * z_inv % P
    return (x * z_inv2 % P, y * z_inv2 * z_inv % P)


def _double(p: _Jacobian) -> _Jacobian:
    x, y, z = p
    if z == 0 or y == 0:
        return _INFINITY
    yy = y * y % P
    s = 4 * x * yy % P
    m = 3 * x * x % P
    x3 = (m * m - 2 * s) % P
    y3 = (m * (s - x3) - 8 * yy * yy) % P
    z3 = 2 * y * z % P
    return (x3, y3, z3)


def _add(p: _Jacobian, q: _Jacobian) -> _Jacobian:
    if p[2] == 0:
        return q
    if q[2] == 0:
        return p
    x1, y1, z1 = p
    x2, y2, z2 = q
    z1z1 = z1 * z1 % P
    z2z2 = z2 * z2 % P
    u1 = x1 * z2z2 % P
    u2 = x2 * z1z1 % P
    s1 = y1 * z2 * z2z2 % P
    s2 = y2 * z1 * z1z1 % P
    if u1 == u2:
        if s1 != s2:
            return _INFINITY
        return _double(p)
    h = (u2 - u1) % P
    r = (s2 - s1) % P
    hh = h * h % P
    hhh = h * hh % P
    u1hh = u1 * hh % P
    x3 = (r * r - hhh - 2 * u1hh) % P
    y3 = (r * (u1hh - x3) - s1 * hhh) % P
    z3 = h * z1 * z2 % P
    return (x3, y3, z3)


def point_add(p: Point, q: Point) -> Point:
    """Sum of two curve points."""
    return _from_jacobian(_add(_to_jacobian(p), _to_jacobian(q)))


def scalar_mult(k: int, p: Point) -> Point:
    """k times the point p."""
    k %= N
    if k == 0 or p is None:
        return None
    base = _to_jacobian(p)
    result = _INFINITY
    for bit in bin(k)[2:]:
        result = _double(result)
        if bit == "1":
            result = _add(result, base)
    return _from_jacobian(result)


def public_point(secret: int) -> Tuple[int, int]:
    """The public point for a private scalar in 1..N-1."""
    if not 0 < secret < N:
        raise ValueError("private key out of range")
    point = scalar_mult(secret, G)
    assert point is not None
    return point


def compressed(point: Point) -> bytes:
    """The 33-byte SEC1 compressed encoding of a point."""
    if point is None:
        raise ValueError("the point at infinity has no encoding")
    x, y = point
    return bytes([2 + (y & 1)]) + x.to_bytes(32, "big")