"""BIP39 mnemonics: word counts, entropy encoding, seeds and the --words flag."""

from __future__ import annotations

import hashlib
import re
import secrets
import unicodedata
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from .wordlist import index_of, word_at

DEFAULT_WORD_COUNT = 12
_ENTROPY_BYTES = {12: 16, 15: 20, 18: 24, 21: 28, 24: 32}


class MnemonicError(ValueError):
    """Raised for an invalid word count, entropy length, word or checksum."""


def entropy_byte_len(word_count: int) -> int | None:
    """Entropy length in bytes for a BIP39 word count, or None if it is not one."""
    return _ENTROPY_BYTES.get(word_count)


def _checksum(entropy: bytes, bits: int) -> int:
    return hashlib.sha256(entropy).digest()[0] >> (8 - bits)


def _decode(words: Sequence[str]) -> bytes:
    nbytes = entropy_byte_len(len(words))
    if nbytes is None:
        raise MnemonicError(f"invalid word count: {len(words)}")
    value = 0
    for word in words:
        try:
            value = (value << 11) | index_of(word)
        except KeyError:
            raise MnemonicError(f"unknown word: {word!r}") from None
    bits = len(words) * 11 - nbytes * 8
    entropy = (value >> bits).to_bytes(nbytes, "big")
    if value & ((1 << bits) - 1) != _checksum(entropy, bits):
        raise MnemonicError("invalid checksum")
    return entropy


@dataclass(frozen=True)
class Mnemonic:
    """A checked BIP39 English mnemonic."""

    words: tuple[str, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "words", tuple(self.words))
        _decode(self.words)

    @classmethod
    def from_entropy(cls, entropy: bytes) -> Mnemonic:
        """Encode 16, 20, 24, 28 or 32 bytes of entropy as words."""
        entropy = bytes(entropy)
        if len(entropy) not in _ENTROPY_BYTES.values():
            raise MnemonicError(f"invalid entropy length: {len(entropy)}")
        bits = len(entropy) // 4
        value = (int.from_bytes(entropy, "big") << bits) | _checksum(entropy, bits)
        count = (len(entropy) * 8 + bits) // 11
        return cls(tuple(word_at((value >> s) & 0x7FF) for s in range(11 * (count - 1), -1, -11)))

    @classmethod
    def from_phrase(cls, phrase: str) -> Mnemonic:
        """Parse a whitespace-separated phrase, checking words and checksum."""
        return cls(tuple(unicodedata.normalize("NFKD", phrase).split()))

    @property
    def phrase(self) -> str:
        return " ".join(self.words)

    @property
    def entropy(self) -> bytes:
        return _decode(self.words)

    def to_seed(self, passphrase: str | None = None) -> bytes:
        """The 64-byte BIP39 seed; no passphrase is the same as an empty one."""
        salt = unicodedata.normalize("NFKD", "mnemonic" + (passphrase or ""))
        return hashlib.pbkdf2_hmac(
            "sha512", self.phrase.encode("utf-8"), salt.encode("utf-8"), 2048
        )

    def __str__(self) -> str:
        return self.phrase


def parse_word_count(s: str) -> int:
    """Parse a --words value; only BIP39 word counts are accepted."""
    if not re.fullmatch(r"\+?[0-9]+", s):
        raise ValueError(f'invalid --words value: "{s}"')
    n = int(s)
    if entropy_byte_len(n) is None:
        raise ValueError(f"--words must be 12, 15, 18, 21, or 24 (BIP39); got {n}")
    return n


def peel_word_flags(args: Iterable[str]) -> tuple[int, list[str]]:
    """Strip `--words N` / `-w N` from the arguments; later flags win."""
    word_count = DEFAULT_WORD_COUNT
    rest: list[str] = []
    it = iter(args)
    for arg in it:
        if arg in ("--words", "-w"):
            value = next(it, None)
            if value is None:
                raise ValueError("--words / -w requires a word count")
            word_count = parse_word_count(value)
        else:
            rest.append(arg)
    return word_count, rest


def random_mnemonic(word_count: int) -> Mnemonic:
    """A mnemonic of the given length from fresh system randomness."""
    nbytes = entropy_byte_len(word_count)
    if nbytes is None:
        raise MnemonicError(f"invalid word count: {word_count}")
    return Mnemonic.from_entropy(secrets.token_bytes(nbytes))