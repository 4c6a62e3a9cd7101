"""Command line: print a random BIP39 mnemonic or run a vanity address search."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from typing import Optional

from .chain import ChainFamily
from .vanity import VanityError, parse_vanity_cli, search_vanity_mnemonic
from .words import peel_word_flags, random_mnemonic

_USAGE = """\
Usage:
  generate-mnemonic [--words N] [-w N]
      Random BIP39 mnemonic on CPU; N defaults to 12, or 15 / 18 / 21 / 24
  generate-mnemonic [--words N] vanity [--ETH|--SOL|--BTC] [--strict] --prefix <P> [--suffix <S>] [--threads N] [--count N]
      BTC: native SegWit/Taproot only (bc1…); prefix must start with bc1
           bc1q… → P2WPKH, bc1p… → Taproot, bc1… → both
      Examples:
          generate-mnemonic vanity --BTC --prefix bc1
          generate-mnemonic vanity --BTC --prefix bc1q
          generate-mnemonic vanity --ETH --prefix dead

ETH: secp256k1 BIP32 + Keccak; SOL: SLIP-0010; BTC: BIP32 (BIP84 / BIP86).
"""

_HINTS = {
    ChainFamily.ETH: "~16× per extra hex char (ETH)",
    ChainFamily.SOL: "~58× per extra Base58 char (SOL)",
    ChainFamily.BTC: "~32× per extra Bech32 char (BTC); slow (PBKDF2 per try)",
}


def print_usage() -> None:
    """Write the usage text to standard error."""
    print(_USAGE, file=sys.stderr)


def _fail(message: str, usage: bool = True) -> int:
    print(message, file=sys.stderr)
    if usage:
        print_usage()
    return 1


def _vanity(args: Sequence[str], word_count: int) -> int:
    try:
        cfg = parse_vanity_cli(args, word_count)
    except VanityError as exc:
        return _fail(str(exc))
    print(
        f"Searching ({cfg.threads} threads, {cfg.word_count} words, "
        f"target {cfg.match_count} match(es)), {cfg.chain.cli_label()}, "
        f"path {cfg.chain.derivation_path()}, "
        f"case: {'strict' if cfg.strict_case else 'ignore'}…",
        file=sys.stderr,
    )
    print(
        f"Hint: {_HINTS[cfg.chain.family]}; mnemonics are secret keys — do not leak.",
        file=sys.stderr,
    )
    try:
        matches = search_vanity_mnemonic(cfg)
    except VanityError as exc:
        return _fail(str(exc), usage=False)
    for number, (m, addr) in enumerate(matches, start=1):
        if len(matches) > 1:
            print(f"--- #{number} ---")
        print(f"address: {addr}")
        print(f"mnemonic: {m.phrase}")
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the command; return the process exit status."""
    raw = list(sys.argv[1:] if argv is None else argv)
    try:
        word_count, args = peel_word_flags(raw)
    except ValueError as exc:
        return _fail(str(exc))

    if not args:
        print(random_mnemonic(word_count).phrase)
        return 0
    if args[0] in ("-h", "--help"):
        print_usage()
        return 0
    if args[0] == "vanity":
        return _vanity(args[1:], word_count)
    return _fail(f"Unknown argument: {args[0]}")


if __name__ == "__main__":
    sys.exit(main())