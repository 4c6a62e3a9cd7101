"""Which chain and derivation to use: ETH, SOL or one of the BTC address kinds."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Optional

from . import btc, eth, sol
from .btc import BtcAddressKind
from .words import Mnemonic

ETH_DEFAULT_PATH = "m/44'/60'/0'/0/0"
SOL_DEFAULT_PATH = "m/44'/501'/0'/0'"


class ChainFamily(enum.Enum):
    ETH = "eth"
    SOL = "sol"
    BTC = "btc"


@dataclass(frozen=True)
class Chain:
    """A chain; BTC chains also carry the address kind."""

    family: ChainFamily = ChainFamily.ETH
    btc_kind: Optional[BtcAddressKind] = None

    def __post_init__(self) -> None:
        if (self.family is ChainFamily.BTC) != (self.btc_kind is not None):
            raise ValueError("a BTC address kind is required for BTC and only for BTC")

    @classmethod
    def eth(cls) -> Chain:
        return cls(ChainFamily.ETH)

    @classmethod
    def sol(cls) -> Chain:
        return cls(ChainFamily.SOL)

    @classmethod
    def btc(cls, kind: BtcAddressKind = BtcAddressKind.P2WPKH) -> Chain:
        return cls(ChainFamily.BTC, kind)

    def derivation_path(self) -> str:
        if self.family is ChainFamily.ETH:
            return ETH_DEFAULT_PATH
        if self.family is ChainFamily.SOL:
            return SOL_DEFAULT_PATH
        return self.btc_kind.derivation_path()

    def cli_label(self) -> str:
        if self.family is ChainFamily.ETH:
            return "ETH"
        if self.family is ChainFamily.SOL:
            return "SOL"
        return self.btc_kind.cli_label()

    def max_fragment_len(self) -> int:
        """Longest vanity prefix or suffix an address body can hold."""
        return {ChainFamily.ETH: 40, ChainFamily.SOL: 44, ChainFamily.BTC: 62}[self.family]

    def normalize_address_body(self, addr: str, strict_case: bool) -> str:
        """The part of an address that vanity fragments are matched against."""
        body = addr.removeprefix("0x") if self.family is ChainFamily.ETH else addr
        return body if strict_case else body.lower()

    def address_from_mnemonic(self, m: Mnemonic) -> str:
        """The first-account address on this chain for a mnemonic."""
        if self.family is ChainFamily.ETH:
            return eth.address_from_mnemonic_at_path(m, self.derivation_path())
        if self.family is ChainFamily.SOL:
            return sol.address_from_mnemonic_at_path(m, self.derivation_path())
        if self.btc_kind is BtcAddressKind.BOTH:
            raise ValueError("BTC Both mode is only for vanity search with a bc1… prefix")
        return btc.address_from_mnemonic(m, self.btc_kind)