import pytest

from vanitymnemonic.hdkey import (
    HARDENED,
    DerivationError,
    derive_ed25519,
    derive_secp256k1,
    parse_path,
)

SEED = bytes(range(16))


def test_parse_eth_path():
    assert parse_path("m/44'/60'/0'/0/0") == [
        44 | HARDENED,
        60 | HARDENED,
        0 | HARDENED,
        0,
        0,
    ]


def test_parse_hardened_markers_are_equivalent():
    assert parse_path("m/44h/501H/0'") == parse_path("m/44'/501'/0'")


def test_parse_master_only():
    assert parse_path("m") == []


@pytest.mark.parametrize("bad", ["44'/0", "m/abc", "m//0", "m/-1", "m/2147483648", "x/0"])
def test_parse_rejects_malformed(bad):
    with pytest.raises(DerivationError):
        parse_path(bad)


def test_bip32_master_key():
    assert (
        derive_secp256k1(SEED, "m").hex()
        == "e8f32e723decf4051aefac8e2c93c9c5b214313817cdb01a1494b917c8436b35"
    )


def test_bip32_child_key_vector():
    assert (
        derive_secp256k1(SEED, "m/0'/1").hex()
        == "3c6cb8d0f6a264c91ea8b5030fadaa8e538b020f0a387421a12de9319dc93368"
    )


def test_slip10_ed25519_master_key():
    assert (
        derive_ed25519(SEED, "m").hex()
        == "2b4be7f19ee27bbf30c667b642d5f4aa69fd169872f8fc3059c08ebae2eb19e7"
    )


def test_string_and_index_paths_agree():
    path = "m/84'/0'/0'/0/0"
    assert derive_secp256k1(SEED, path) == derive_secp256k1(SEED, parse_path(path))
    assert derive_ed25519(SEED, "m/0'/1'") == derive_ed25519(
        SEED, [0 | HARDENED, 1 | HARDENED]
    )


def test_secp256k1_hardened_and_normal_children_differ():
    hardened = derive_secp256k1(SEED, "m/0'")
    normal = derive_secp256k1(SEED, "m/0")
    assert len(hardened) == len(normal) == 32
    assert hardened != normal
    assert hardened != derive_secp256k1(SEED, "m")


def test_ed25519_child_differs_from_master():
    child = derive_ed25519(SEED, "m/0'")
    assert len(child) == 32
    assert child != derive_ed25519(SEED, "m")


def test_ed25519_rejects_normal_derivation():
    with pytest.raises(DerivationError):
        derive_ed25519(SEED, "m/44'/60'/0'/0/0")