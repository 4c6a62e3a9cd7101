"""BIP39 mnemonics, ETH/SOL/BTC address derivation and vanity address search."""

__version__ = "0.1.0"