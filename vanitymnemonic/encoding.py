"""Base58 and Bech32/Bech32m SegWit address encodings."""

from __future__ import annotations

from collections.abc import Iterable

_B58 = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"
_BECH32 = "qpzry9x8gf2tvdw0s3jn54khce6mua7l"
_BECH32M_CONST = 0x2BC830A3
_GENERATORS = (0x3B6A57B2, 0x26508E6D, 0x1EA119FA, 0x3D4233DD, 0x2A1462B3)


def b58encode(data: bytes) -> str:
    """Base58 (Bitcoin alphabet) encoding; leading zero bytes become '1'."""
    data = bytes(data)
    stripped = data.lstrip(b"\0")
    n = int.from_bytes(stripped, "big")
    digits = []
    while n:
        n, rem = divmod(n, 58)
        digits.append(_B58[rem])
    return "1" * (len(data) - len(stripped)) + "".join(reversed(digits))


def b58decode(s: str) -> bytes:
    """Decode a Base58 string; raise ValueError on a character outside the alphabet."""
    n = 0
    for c in s:
        if c not in _B58:
            raise ValueError(f"invalid Base58 character: {c!r}")
        n = n * 58 + _B58.index(c)
    body = n.to_bytes((n.bit_length() + 7) // 8, "big")
    return b"\0" * (len(s) - len(s.lstrip("1"))) + body


def _polymod(values: Iterable[int]) -> int:
    chk = 1
    for value in values:
        top = chk >> 25
        chk = (chk & 0x1FFFFFF) << 5 ^ value
        for i, gen in enumerate(_GENERATORS):
            if (top >> i) & 1:
                chk ^= gen
    return chk


def _hrp_expand(hrp: str) -> list[int]:
    return [ord(c) >> 5 for c in hrp] + [0] + [ord(c) & 31 for c in hrp]


def _convert_bits(data: Iterable[int], from_bits: int, to_bits: int, pad: bool) -> list[int]:
    acc = bits = 0
    out = []
    maxv = (1 << to_bits) - 1
    for value in data:
        acc = (acc << from_bits) | value
        bits += from_bits
        while bits >= to_bits:
            bits -= to_bits
            out.append((acc >> bits) & maxv)
    if pad and bits:
        out.append((acc << (to_bits - bits)) & maxv)
    elif not pad and (bits >= from_bits or (acc << (to_bits - bits)) & maxv):
        raise ValueError("invalid padding in bit conversion")
    return out


def segwit_decode(hrp: str, addr: str) -> tuple[int, bytes]:
    """Decode a SegWit address into (witness version, witness program)."""
    if addr.lower() != addr and addr.upper() != addr:
        raise ValueError("mixed-case bech32 string")
    addr = addr.lower()
    pos = addr.rfind("1")
    if pos < 1 or pos + 7 > len(addr) or len(addr) > 90:
        raise ValueError("malformed bech32 string")
    if addr[:pos] != hrp:
        raise ValueError(f"unexpected human-readable part: {addr[:pos]!r}")
    if any(c not in _BECH32 for c in addr[pos + 1 :]):
        raise ValueError("invalid bech32 data character")
    data = [_BECH32.index(c) for c in addr[pos + 1 :]]
    const = _polymod(_hrp_expand(hrp) + data)
    data = data[:-6]
    if not data or data[0] > 16:
        raise ValueError("invalid witness version")
    witver = data[0]
    if const != (1 if witver == 0 else _BECH32M_CONST):
        raise ValueError("invalid bech32 checksum")
    program = bytes(_convert_bits(data[1:], 5, 8, False))
    if not 2 <= len(program) <= 40 or (witver == 0 and len(program) not in (20, 32)):
        raise ValueError("invalid witness program length")
    return witver, program


def segwit_encode(hrp: str, witver: int, program: bytes) -> str:
    """Encode a witness program as a Bech32 (v0) or Bech32m (v1+) address."""
    const = 1 if witver == 0 else _BECH32M_CONST
    data = [witver] + _convert_bits(bytes(program), 8, 5, True)
    polymod = _polymod(_hrp_expand(hrp) + data + [0] * 6) ^ const
    checksum = [(polymod >> 5 * (5 - i)) & 31 for i in range(6)]
    return hrp + "1" + "".join(_BECH32[d] for d in data + checksum)