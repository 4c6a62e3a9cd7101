import pytest

from vanitymnemonic.chain import Chain
from vanitymnemonic.cli import main, print_usage
from vanitymnemonic.words import Mnemonic


def test_no_arguments_prints_valid_12_word_mnemonic(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out.strip()
    m = Mnemonic.from_phrase(out)
    assert len(m.words) == 12
    assert m.phrase == out


@pytest.mark.parametrize("flags", [["--words", "24"], ["-w", "15", "-w", "24"]])
def test_words_flag_sets_length(capsys, flags):
    assert main(flags) == 0
    out = capsys.readouterr().out.strip()
    assert len(Mnemonic.from_phrase(out).words) == 24


def test_bad_word_count_fails_with_usage(capsys):
    assert main(["--words", "13"]) == 1
    err = capsys.readouterr().err
    assert "--words must be 12, 15, 18, 21, or 24 (BIP39); got 13" in err
    assert "Usage:" in err


def test_missing_word_count(capsys):
    assert main(["-w"]) == 1
    assert "--words / -w requires a word count" in capsys.readouterr().err


def test_help(capsys):
    assert main(["--help"]) == 0
    captured = capsys.readouterr()
    assert "Usage:" in captured.err
    assert captured.out == ""


def test_print_usage_mentions_vanity(capsys):
    print_usage()
    assert "generate-mnemonic vanity --ETH --prefix dead" in capsys.readouterr().err


def test_unknown_argument(capsys):
    assert main(["frobnicate"]) == 1
    err = capsys.readouterr().err
    assert "Unknown argument: frobnicate" in err
    assert "Usage:" in err


def test_vanity_without_fragment_fails(capsys):
    assert main(["vanity", "--ETH", "--threads", "1"]) == 1
    assert "at least one of --prefix or --suffix is required" in capsys.readouterr().err


def test_vanity_bad_option_fails(capsys):
    assert main(["vanity", "--count", "0"]) == 1
    err = capsys.readouterr().err
    assert "--count / -n must be a positive integer >= 1" in err
    assert "Usage:" in err


def test_vanity_single_match_output(capsys):
    assert main(["vanity", "--ETH", "--prefix", "b", "--threads", "1"]) == 0
    captured = capsys.readouterr()
    lines = captured.out.splitlines()
    assert len(lines) == 2
    assert lines[0].startswith("address: ")
    assert lines[1].startswith("mnemonic: ")
    addr = lines[0].removeprefix("address: ")
    m = Mnemonic.from_phrase(lines[1].removeprefix("mnemonic: "))
    assert addr.lower().startswith("0xb")
    assert Chain.eth().address_from_mnemonic(m) == addr
    assert "Searching (1 threads, 12 words, target 1 match(es)), ETH" in captured.err


def test_vanity_multiple_matches_are_numbered(capsys):
    assert main(["vanity", "--prefix", "c", "-j", "2", "-n", "2"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 6
    assert lines[0] == "--- #1 ---"
    assert lines[3] == "--- #2 ---"
    for address_line in (lines[1], lines[4]):
        assert address_line.lower().startswith("address: 0xc")