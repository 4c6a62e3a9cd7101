"""Solana addresses: BIP39 seed, SLIP-0010 Ed25519 key, Base58 public key."""

from __future__ import annotations

from cryptography.hazmat.primitives.asymmetric.ed25519 import Ed25519PrivateKey
from cryptography.hazmat.primitives.serialization import Encoding, PublicFormat

from .encoding import b58encode
from .hdkey import DerivationError, derive_ed25519
from .words import Mnemonic


class SolAddressError(ValueError):
    """Raised when SLIP-0010 derivation fails."""

    def __init__(self, detail: str) -> None:
        super().__init__(f"SLIP-0010 derivation failed: {detail}")


def address_from_mnemonic_at_path(m: Mnemonic, derivation_path: str) -> str:
    """The Base58 Solana address of the account at a derivation path."""
    try:
        child = derive_ed25519(m.to_seed(), derivation_path)
    except DerivationError as exc:
        raise SolAddressError(str(exc)) from exc
    public = Ed25519PrivateKey.from_private_bytes(child).public_key()
    return b58encode(public.public_bytes(Encoding.Raw, PublicFormat.Raw))