"""Bitcoin native SegWit addresses: P2WPKH (`bc1q`, BIP84) and Taproot P2TR (`bc1p`, BIP86)."""

from __future__ import annotations

import enum
import hashlib

from Crypto.Hash import RIPEMD160

from .encoding import segwit_encode
from .hdkey import DerivationError, derive_secp256k1, parse_path
from .secp256k1 import G, N, P, compressed, point_add, public_point, scalar_mult
from .words import Mnemonic


class BtcAddressKind(enum.Enum):
    """Which address type to derive; BOTH tries P2WPKH and P2TR per mnemonic."""

    P2WPKH = "p2wpkh"
    P2TR = "p2tr"
    BOTH = "both"

    def derivation_path(self) -> str:
        """The first-account path; BOTH reports the P2WPKH path."""
        return "m/86'/0'/0'/0/0" if self is BtcAddressKind.P2TR else "m/84'/0'/0'/0/0"

    def cli_label(self) -> str:
        return {"p2wpkh": "BTC-bc1q", "p2tr": "BTC-bc1p", "both": "BTC-bc1"}[self.value]


class BtcAddressError(ValueError):
    """Raised when BIP32 derivation or address construction fails."""

    def __init__(self, detail: str) -> None:
        super().__init__(f"BIP32 derivation failed: {detail}")


def _p2wpkh_address(scalar: int) -> str:
    sha = hashlib.sha256(compressed(public_point(scalar))).digest()
    return segwit_encode("bc", 0, RIPEMD160.new(sha).digest())


def _p2tr_address(scalar: int) -> str:
    x, y = public_point(scalar)
    xonly = x.to_bytes(32, "big")
    tag = hashlib.sha256(b"TapTweak").digest()
    tweak = int.from_bytes(hashlib.sha256(tag + tag + xonly).digest(), "big")
    if tweak >= N:
        raise BtcAddressError("taproot tweak out of range")
    output = point_add((x, y if y % 2 == 0 else P - y), scalar_mult(tweak, G))
    if output is None:
        raise BtcAddressError("taproot output key is the point at infinity")
    return segwit_encode("bc", 1, output[0].to_bytes(32, "big"))


def _address_from_seed(path: list[int], kind: BtcAddressKind, seed: bytes) -> str:
    if kind is BtcAddressKind.BOTH:
        raise BtcAddressError("Both mode is vanity-only")
    try:
        child = derive_secp256k1(seed, path)
    except DerivationError as exc:
        raise BtcAddressError(str(exc)) from exc
    scalar = int.from_bytes(child, byteorder="big")
    return _p2wpkh_address(scalar) if kind is BtcAddressKind.P2WPKH else _p2tr_address(scalar)


class DeriveContext:
    """Parsed derivation paths, reused across many mnemonics during a search."""

    def __init__(self, kind: BtcAddressKind) -> None:
        try:
            self._paths = {
                k: parse_path(k.derivation_path())
                for k in (BtcAddressKind.P2WPKH, BtcAddressKind.P2TR)
            }
        except DerivationError as exc:
            raise BtcAddressError(str(exc)) from exc
        self.kind = kind

    def _kinds(self) -> list[BtcAddressKind]:
        if self.kind is BtcAddressKind.BOTH:
            return [BtcAddressKind.P2WPKH, BtcAddressKind.P2TR]
        return [self.kind]

    def address_from_mnemonic(self, m: Mnemonic) -> str:
        """The single address for this kind; BOTH yields the P2WPKH one."""
        kind = self._kinds()[0]
        return _address_from_seed(self._paths[kind], kind, m.to_seed())

    def addresses_from_mnemonic(self, m: Mnemonic) -> list[str]:
        """All addresses to check for a match (BOTH gives P2WPKH then P2TR)."""
        seed = m.to_seed()
        return [_address_from_seed(self._paths[k], k, seed) for k in self._kinds()]


def address_from_mnemonic(m: Mnemonic, kind: BtcAddressKind) -> str:
    """The first-account address of the given kind for a mnemonic."""
    return DeriveContext(kind).address_from_mnemonic(m)


def validate_vanity_prefix(prefix: str, kind: BtcAddressKind) -> None:
    """Raise ValueError if a vanity prefix cannot match addresses of this kind."""
    p = "".join(c.lower() if c.isascii() else c for c in prefix.strip())
    if p and not p.startswith("bc1"):
        raise ValueError("BTC prefix must start with bc1 (native SegWit / Taproot only)")
    if kind is BtcAddressKind.P2WPKH and p.startswith("bc1q") and p[4:5] == "1":
        raise ValueError(
            "prefix \"bc1q1…\" is impossible for BIP84 P2WPKH: the 5th character cannot be '1'. "
            "Try bc1q0, bc1q2, bc1qa, or use a bc1p… prefix for Taproot"
        )
    if p.startswith("bc1p") and kind is BtcAddressKind.P2WPKH:
        raise ValueError(
            "prefix starts with bc1p but BIP84 P2WPKH (bc1q) mode is selected; "
            "use a bc1p… prefix for Taproot"
        )
    if p.startswith("bc1q") and kind is BtcAddressKind.P2TR:
        raise ValueError(
            "prefix starts with bc1q but BIP86 Taproot (bc1p) mode is selected; "
            "use a bc1q… prefix for P2WPKH"
        )