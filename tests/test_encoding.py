import os

import pytest

from vanitymnemonic.encoding import b58decode, b58encode, segwit_decode, segwit_encode

SOL_ADDRESS = "HAgk14JpMQLgt6rVgv7cBQFJWFto5Dqxi472uT3DKpqk"
P2WPKH = "bc1qcr8te4kr609gcawutmrza0j4xv80jy8z306fyu"
P2TR = "bc1p5cyxnuxmeuwuvkwfem96lqzszd02n6xdcjrs20cac6yqjjwudpxqkedrcr"


@pytest.mark.parametrize(
    "data", [b"", b"\0", b"\0\0\x01", b"\xff" * 32, os.urandom(32), os.urandom(7)]
)
def test_b58_round_trip(data):
    assert b58decode(b58encode(data)) == data


def test_b58_leading_zeros_become_ones():
    assert b58encode(b"\0\0") == "11"


def test_b58_empty():
    assert b58encode(b"") == ""


def test_b58_solana_address_is_32_bytes():
    decoded = b58decode(SOL_ADDRESS)
    assert len(decoded) == 32
    assert b58encode(decoded) == SOL_ADDRESS


@pytest.mark.parametrize("bad", ["0abc", "Oops", "Il", "l1"])
def test_b58_rejects_excluded_characters(bad):
    with pytest.raises(ValueError):
        b58decode(bad)


def test_segwit_v0_round_trip():
    witver, program = segwit_decode("bc", P2WPKH)
    assert witver == 0
    assert len(program) == 20
    assert segwit_encode("bc", witver, program) == P2WPKH


def test_segwit_v1_round_trip():
    witver, program = segwit_decode("bc", P2TR)
    assert witver == 1
    assert len(program) == 32
    assert segwit_encode("bc", witver, program) == P2TR


def test_segwit_decode_accepts_upper_case():
    assert segwit_decode("bc", P2WPKH.upper()) == segwit_decode("bc", P2WPKH)


def test_segwit_rejects_mixed_case():
    with pytest.raises(ValueError):
        segwit_decode("bc", "BC" + P2WPKH[2:])


def test_segwit_rejects_wrong_hrp():
    with pytest.raises(ValueError):
        segwit_decode("tb", P2WPKH)


def test_segwit_rejects_corrupted_checksum():
    corrupted = P2WPKH[:-1] + ("q" if P2WPKH[-1] != "q" else "p")
    with pytest.raises(ValueError):
        segwit_decode("bc", corrupted)


@pytest.mark.parametrize("length", [20, 32])
def test_segwit_encode_random_programs(length):
    program = os.urandom(length)
    for witver in (0, 1):
        addr = segwit_encode("bc", witver, program)
        assert segwit_decode("bc", addr) == (witver, program)


def test_segwit_encode_rejects_bad_v0_length():
    with pytest.raises(ValueError):
        segwit_encode("bc", 0, bytes(25))