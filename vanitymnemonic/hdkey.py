"""Hierarchical key derivation: BIP32 on secp256k1 and SLIP-0010 on Ed25519."""

from __future__ import annotations

import hashlib
import hmac
import re
from collections.abc import Iterable

from .secp256k1 import N, compressed, public_point

HARDENED = 0x80000000
_INDEX = re.compile(r"[0-9]+")


class DerivationError(ValueError):
    """Raised for a malformed path or a key that cannot be derived."""


def parse_path(path: str) -> list[int]:
    """Parse "m/44'/60'/0'/0/0" into child indices; hardened ones carry bit 31."""
    parts = path.strip().split("/")
    if parts[0] != "m":
        raise DerivationError(f"derivation path must start with 'm': {path!r}")
    indices = []
    for part in parts[1:]:
        hardened = part[-1:] in ("'", "h", "H")
        digits = part[:-1] if hardened else part
        if not _INDEX.fullmatch(digits):
            raise DerivationError(f"invalid path component {part!r} in {path!r}")
        index = int(digits)
        if index >= HARDENED:
            raise DerivationError(f"path index out of range: {index}")
        indices.append(index | HARDENED if hardened else index)
    return indices


def _indices(path: str | Iterable[int]) -> list[int]:
    return parse_path(path) if isinstance(path, str) else list(path)


def _hmac512(key: bytes, data: bytes) -> tuple[bytes, bytes]:
    digest = hmac.new(key, data, hashlib.sha512).digest()
    return digest[:32], digest[32:]


def derive_secp256k1(seed: bytes, path: str | Iterable[int]) -> bytes:
    """The 32-byte BIP32 private key at a path, from a seed."""
    indices = _indices(path)
    il, chain = _hmac512(b"Bitcoin seed", bytes(seed))
    key = int.from_bytes(il, "big")
    if not 0 < key < N:
        raise DerivationError("invalid master key")
    for index in indices:
        if index & HARDENED:
            data = b"\0" + key.to_bytes(32, "big")
        else:
            data = compressed(public_point(key))
        il, chain = _hmac512(chain, data + index.to_bytes(4, "big"))
        tweak = int.from_bytes(il, "big")
        if tweak >= N:
            raise DerivationError(f"invalid child key at index {index}")
        key = (key + tweak) % N
        if key == 0:
            raise DerivationError(f"invalid child key at index {index}")
    return key.to_bytes(32, "big")


def derive_ed25519(seed: bytes, path: str | Iterable[int]) -> bytes:
    """The 32-byte SLIP-0010 Ed25519 private key at a path; all steps must be hardened."""
    indices = _indices(path)
    key, chain = _hmac512(b"ed25519 seed", bytes(seed))
    for index in indices:
        if not index & HARDENED:
            raise DerivationError("ed25519 supports hardened derivation only")
        key, chain = _hmac512(chain, b"\0" + key + index.to_bytes(4, "big"))
    return key