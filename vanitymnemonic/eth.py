"""Ethereum addresses: secp256k1 BIP32 key, Keccak-256, EIP-55 checksum."""

from __future__ import annotations

from Crypto.Hash import keccak

from .hdkey import DerivationError, derive_secp256k1
from .secp256k1 import public_point
from .words import Mnemonic


class EthAddressError(ValueError):
    """Raised when an Ethereum address cannot be derived or formatted."""


def _keccak256(data: bytes) -> bytes:
    return keccak.new(digest_bits=256, data=data).digest()


def to_checksum_address(address_bytes: bytes) -> str:
    """The 0x-prefixed EIP-55 mixed-case form of a 20-byte address."""
    if len(address_bytes) != 20:
        raise EthAddressError(f"address must be 20 bytes, got {len(address_bytes)}")
    lower = bytes(address_bytes).hex()
    digest = _keccak256(lower.encode("ascii")).hex()
    return "0x" + "".join(c.upper() if int(h, 16) >= 8 else c for c, h in zip(lower, digest))


def address_from_mnemonic_at_path(m: Mnemonic, derivation_path: str) -> str:
    """The EIP-55 address of the account at a derivation path."""
    try:
        child = derive_secp256k1(m.to_seed(), derivation_path)
    except DerivationError as exc:
        raise EthAddressError(f"derivation failed: {exc}") from exc
    x, y = public_point(int.from_bytes(child, byteorder="big"))
    digest = _keccak256(x.to_bytes(32, "big") + y.to_bytes(32, "big"))
    return to_checksum_address(digest[12:])