import pytest

from vanitymnemonic.encoding import b58decode
from vanitymnemonic.sol import SolAddressError, address_from_mnemonic_at_path
from vanitymnemonic.words import Mnemonic

PHRASE = (
    "abandon abandon abandon abandon abandon abandon abandon abandon "
    "abandon abandon abandon about"
)
SOL_DEFAULT_PATH = "m/44'/501'/0'/0'"


def test_abandon_mnemonic_phantom_path_matches_ed25519_hd():
    m = Mnemonic.from_phrase(PHRASE)
    addr = address_from_mnemonic_at_path(m, SOL_DEFAULT_PATH)
    assert addr == "HAgk14JpMQLgt6rVgv7cBQFJWFto5Dqxi472uT3DKpqk"


def test_other_account_is_distinct_32_byte_key():
    m = Mnemonic.from_phrase(PHRASE)
    addr = address_from_mnemonic_at_path(m, "m/44'/501'/1'/0'")
    assert addr != "HAgk14JpMQLgt6rVgv7cBQFJWFto5Dqxi472uT3DKpqk"
    assert len(b58decode(addr)) == 32


def test_non_hardened_path_raises():
    m = Mnemonic.from_phrase(PHRASE)
    with pytest.raises(SolAddressError, match="SLIP-0010 derivation failed"):
        address_from_mnemonic_at_path(m, "m/44'/501'/0'/0")


def test_malformed_path_raises():
    m = Mnemonic.from_phrase(PHRASE)
    with pytest.raises(SolAddressError):
        address_from_mnemonic_at_path(m, "not/a/path")