import pytest

from vanitymnemonic.btc import BtcAddressKind
from vanitymnemonic.chain import Chain, ChainFamily
from vanitymnemonic.words import Mnemonic

PHRASE = (
    "abandon abandon abandon abandon abandon abandon abandon abandon "
    "abandon abandon abandon about"
)
ETH_ADDR = "0x9858effd232b4033e47d90003d41ec34ecaeda94"
SOL_ADDR = "HAgk14JpMQLgt6rVgv7cBQFJWFto5Dqxi472uT3DKpqk"
P2WPKH_ADDR = "bc1qcr8te4kr609gcawutmrza0j4xv80jy8z306fyu"
P2TR_ADDR = "bc1p5cyxnuxmeuwuvkwfem96lqzszd02n6xdcjrs20cac6yqjjwudpxqkedrcr"


@pytest.fixture(scope="module")
def mnemonic():
    return Mnemonic.from_phrase(PHRASE)


def test_default_chain_is_eth():
    assert Chain() == Chain.eth()
    assert Chain().family is ChainFamily.ETH


def test_btc_requires_kind_and_others_reject_it():
    with pytest.raises(ValueError):
        Chain(ChainFamily.BTC)
    with pytest.raises(ValueError):
        Chain(ChainFamily.ETH, BtcAddressKind.P2TR)


def test_btc_defaults_to_p2wpkh():
    assert Chain.btc().btc_kind is BtcAddressKind.P2WPKH
    assert Chain.eth().btc_kind is None


def test_derivation_paths():
    assert Chain.eth().derivation_path() == "m/44'/60'/0'/0/0"
    assert Chain.sol().derivation_path() == "m/44'/501'/0'/0'"
    assert Chain.btc(BtcAddressKind.P2TR).derivation_path() == "m/86'/0'/0'/0/0"


def test_cli_labels():
    assert Chain.eth().cli_label() == "ETH"
    assert Chain.sol().cli_label() == "SOL"
    assert Chain.btc(BtcAddressKind.BOTH).cli_label() == "BTC-bc1"


def test_max_fragment_len_equals_address_body_length():
    assert Chain.eth().max_fragment_len() == len(ETH_ADDR) - 2
    assert Chain.sol().max_fragment_len() == len(SOL_ADDR)
    assert Chain.btc(BtcAddressKind.P2TR).max_fragment_len() == len(P2TR_ADDR)


def test_normalize_eth_strips_prefix_and_case():
    chain = Chain.eth()
    assert chain.normalize_address_body("0xAbCd", False) == "abcd"
    assert chain.normalize_address_body("0xAbCd", True) == "AbCd"
    assert chain.normalize_address_body("AbCd", False) == "abcd"


def test_normalize_sol_and_btc_keep_whole_address():
    assert Chain.sol().normalize_address_body(SOL_ADDR, True) == SOL_ADDR
    assert Chain.sol().normalize_address_body(SOL_ADDR, False) == SOL_ADDR.lower()
    assert Chain.btc().normalize_address_body("0xBC1Q", False) == "0xbc1q"


def test_eth_address_from_mnemonic(mnemonic):
    addr = Chain.eth().address_from_mnemonic(mnemonic)
    assert addr.lower() == ETH_ADDR
    assert addr != addr.lower()


def test_sol_address_from_mnemonic(mnemonic):
    assert Chain.sol().address_from_mnemonic(mnemonic) == SOL_ADDR


def test_btc_addresses_from_mnemonic(mnemonic):
    assert Chain.btc(BtcAddressKind.P2WPKH).address_from_mnemonic(mnemonic) == P2WPKH_ADDR
    assert Chain.btc(BtcAddressKind.P2TR).address_from_mnemonic(mnemonic) == P2TR_ADDR


def test_btc_both_is_vanity_only(mnemonic):
    with pytest.raises(ValueError, match="Both mode"):
        Chain.btc(BtcAddressKind.BOTH).address_from_mnemonic(mnemonic)