"""Vanity search: random mnemonics are derived until an address matches a prefix/suffix."""

from __future__ import annotations

import os
import re
import string
import sys
import threading
import time
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Optional

from .btc import BtcAddressError, BtcAddressKind, DeriveContext, validate_vanity_prefix
from .chain import Chain, ChainFamily
from .words import DEFAULT_WORD_COUNT, Mnemonic, entropy_byte_len, random_mnemonic

_BECH32_CHARSET = "qpzry9x8gf2tvdw0s3jn54khce6mua7l"
_BASE58_CHARS = frozenset("123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz")
_HEX_CHARS = frozenset(string.hexdigits)
_UNSIGNED = re.compile(r"\+?[0-9]+")
_PROGRESS_INTERVAL = 5.0


class VanityError(ValueError):
    """Raised for a bad vanity command line, fragment or search setup."""


@dataclass
class VanityConfig:
    """What to search for and how hard to try."""

    chain: Chain = field(default_factory=Chain)
    word_count: int = DEFAULT_WORD_COUNT
    # False matches case-insensitively; True matches exactly (EIP-55, Base58, Bech32).
    strict_case: bool = False
    prefix: str = ""
    suffix: str = ""
    threads: int = 1
    match_count: int = 1


def _ascii_lower(s: str) -> str:
    return "".join(c.lower() if c.isascii() else c for c in s)


def _is_bech32_char(c: str) -> bool:
    c = _ascii_lower(c)
    return c in ("b", "c", "1") or c in _BECH32_CHARSET


def _case(t: str, strict_case: bool) -> str:
    return t if strict_case else t.lower()


def _normalize_hex(s: str, strict_case: bool, max_len: int) -> str:
    t = s.strip().removeprefix("0x")
    if not t:
        return ""
    if not all(c in _HEX_CHARS for c in t):
        raise VanityError(f'non-hex character: "{s}"')
    if len(t) > max_len:
        raise VanityError(
            f"prefix/suffix length cannot exceed {max_len} hex characters (ETH address body)"
        )
    return _case(t, strict_case)


def _normalize_base58(s: str, strict_case: bool, max_len: int, label: str) -> str:
    t = s.strip()
    if not t:
        return ""
    if not all(c in _BASE58_CHARS for c in t):
        raise VanityError(f'non-Base58 character ({label} addresses exclude 0/O/I/l): "{s}"')
    if len(t) > max_len:
        raise VanityError(
            f"prefix/suffix length cannot exceed {max_len} Base58 characters ({label})"
        )
    return _case(t, strict_case)


def _normalize_bech32(kind: BtcAddressKind, s: str, strict_case: bool, max_len: int) -> str:
    t = s.strip()
    if not t:
        return ""
    try:
        validate_vanity_prefix(t, kind)
    except ValueError as exc:
        raise VanityError(str(exc)) from exc
    if not all(_is_bech32_char(c) for c in t):
        raise VanityError(
            f'non-Bech32 character (BTC native SegWit uses bc1 + BIP173 charset): "{s}"'
        )
    if len(t) > max_len:
        raise VanityError(
            f"prefix/suffix length cannot exceed {max_len} characters (BTC bc1 address)"
        )
    return _case(t, strict_case)


def normalize_fragment(chain: Chain, s: str, strict_case: bool) -> str:
    """Check a prefix or suffix against the chain's alphabet and bring it to matching form."""
    max_len = chain.max_fragment_len()
    if chain.family is ChainFamily.ETH:
        return _normalize_hex(s, strict_case, max_len)
    if chain.family is ChainFamily.SOL:
        return _normalize_base58(s, strict_case, max_len, "SOL")
    return _normalize_bech32(chain.btc_kind, s, strict_case, max_len)


def body_matches(body: str, prefix: str, suffix: str) -> bool:
    """Whether an address body starts with prefix and ends with suffix (empty ones match)."""
    return body.startswith(prefix) and body.endswith(suffix)


class _Search:
    """Shared state of one running search."""

    def __init__(self, cfg: VanityConfig, match_count: int) -> None:
        self.cfg = cfg
        self.match_count = match_count
        self.stop = threading.Event()
        self.lock = threading.Lock()
        self.found: list[tuple[Mnemonic, str]] = []
        self.attempts = 0

    def _count_attempt(self) -> None:
        with self.lock:
            self.attempts += 1

    def _record(self, m: Mnemonic, addr: str) -> None:
        with self.lock:
            if len(self.found) < self.match_count:
                self.found.append((m, addr))
            if len(self.found) >= self.match_count:
                self.stop.set()

    def work(self) -> None:
        cfg = self.cfg
        chain = cfg.chain
        ctx: Optional[DeriveContext] = None
        if chain.btc_kind is not None:
            try:
                ctx = DeriveContext(chain.btc_kind)
            except BtcAddressError:
                ctx = None
        while not self.stop.is_set():
            m = random_mnemonic(cfg.word_count)
            if ctx is not None:
                self._count_attempt()
            try:
                addrs = (
                    ctx.addresses_from_mnemonic(m)
                    if ctx is not None
                    else [chain.address_from_mnemonic(m)]
                )
            except ValueError:
                continue
            for addr in addrs:
                body = chain.normalize_address_body(addr, cfg.strict_case)
                if body_matches(body, cfg.prefix, cfg.suffix):
                    self._record(m, addr)
                    break

    def report_progress(self) -> None:
        start = time.monotonic()
        while not self.stop.wait(_PROGRESS_INTERVAL):
            with self.lock:
                n = self.attempts
            secs = max(time.monotonic() - start, 0.001)
            print(f"… {n} mnemonics tried ({n / secs:.1f}/s)", file=sys.stderr)


def search_vanity_mnemonic(cfg: VanityConfig) -> list[tuple[Mnemonic, str]]:
    """Search on cfg.threads threads; return cfg.match_count (mnemonic, address) pairs."""
    if not cfg.prefix and not cfg.suffix:
        raise VanityError("at least one of --prefix or --suffix is required")
    if entropy_byte_len(cfg.word_count) is None:
        raise VanityError(f"invalid word count: {cfg.word_count}")

    match_count = max(cfg.match_count, 1)
    search = _Search(cfg, match_count)

    progress = None
    if cfg.chain.btc_kind is not None:
        progress = threading.Thread(target=search.report_progress, daemon=True)
        progress.start()

    workers = [
        threading.Thread(target=search.work, daemon=True) for _ in range(max(cfg.threads, 1))
    ]
    for worker in workers:
        worker.start()
    for worker in workers:
        worker.join()

    search.stop.set()
    if progress is not None:
        progress.join()

    if len(search.found) < match_count:
        raise VanityError("worker exited before target match count was reached")
    return list(search.found)


def _set_chain(selected: Optional[Chain], new: Chain) -> Chain:
    if selected is None:
        return new
    if selected == new:
        raise VanityError("cannot repeat the same chain flag")
    raise VanityError(
        "cannot specify multiple chains or conflicting flags (--ETH / --SOL / --BTC)"
    )


def _infer_btc_kind(prefix: str) -> Optional[BtcAddressKind]:
    p = _ascii_lower(prefix.strip())
    if not p.startswith("bc1"):
        return None
    if p.startswith("bc1p"):
        return BtcAddressKind.P2TR
    if p.startswith("bc1q"):
        return BtcAddressKind.P2WPKH
    return BtcAddressKind.BOTH


def _require_bc1_prefix(prefix_raw: Optional[str]) -> None:
    if prefix_raw is None:
        return
    p = prefix_raw.strip()
    if p and not _ascii_lower(p).startswith("bc1"):
        raise VanityError("BTC vanity --prefix must start with bc1")


def _parse_unsigned(value: str, what: str) -> int:
    if not _UNSIGNED.fullmatch(value):
        raise VanityError(f"invalid {what}: {value}")
    return int(value)


_CHAIN_FLAGS = {
    "--ETH": Chain.eth,
    "--eth": Chain.eth,
    "--SOL": Chain.sol,
    "--sol": Chain.sol,
    "--BTC": Chain.btc,
    "--btc": Chain.btc,
}
_STRICT_FLAGS = ("--strict", "--case-sensitive")


def parse_vanity_cli(args: Sequence[str], word_count: int) -> VanityConfig:
    """Build a search configuration from the arguments after `vanity`."""
    strict_case = any(a in _STRICT_FLAGS for a in args)

    chain: Optional[Chain] = None
    prefix_raw: Optional[str] = None
    suffix_raw: Optional[str] = None
    threads: Optional[int] = None
    match_count: Optional[int] = None

    it = iter(args)
    for arg in it:
        if arg in _STRICT_FLAGS:
            continue
        if arg in _CHAIN_FLAGS:
            chain = _set_chain(chain, _CHAIN_FLAGS[arg]())
            continue
        if arg in ("--prefix", "-p"):
            prefix_raw = next(it, None)
            if prefix_raw is None:
                raise VanityError("--prefix requires a value")
        elif arg in ("--suffix", "-s"):
            suffix_raw = next(it, None)
            if suffix_raw is None:
                raise VanityError("--suffix requires a value")
        elif arg in ("--threads", "-j"):
            value = next(it, None)
            if value is None:
                raise VanityError("--threads requires a value")
            threads = _parse_unsigned(value, "thread count")
        elif arg in ("--count", "-n"):
            value = next(it, None)
            if value is None:
                raise VanityError("--count requires a value")
            match_count = _parse_unsigned(value, "match count")
            if match_count < 1:
                raise VanityError("--count / -n must be a positive integer >= 1")
        else:
            raise VanityError(f"unknown argument: {arg}")

    if threads is None:
        threads = os.cpu_count() or 4

    chain = chain if chain is not None else Chain()
    if prefix_raw is not None:
        inferred = _infer_btc_kind(prefix_raw)
        if inferred is not None:
            chain = Chain.btc(inferred)

    if chain.family is ChainFamily.BTC:
        _require_bc1_prefix(prefix_raw)

    prefix = normalize_fragment(chain, prefix_raw, strict_case) if prefix_raw is not None else ""
    suffix = normalize_fragment(chain, suffix_raw, strict_case) if suffix_raw is not None else ""

    return VanityConfig(
        chain=chain,
        word_count=word_count,
        strict_case=strict_case,
        prefix=prefix,
        suffix=suffix,
        threads=threads,
        match_count=match_count if match_count is not None else 1,
    )