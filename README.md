# vanitymnemonic

Generate random BIP39 mnemonics, or search for a mnemonic whose first
Ethereum, Solana or Bitcoin address starts or ends with a chosen fragment.
Everything runs on the CPU, in pure Python apart from Keccak/RIPEMD-160
(pycryptodome) and Ed25519 (cryptography).

## Install

    pip install .

For the tests:

    pip install .[test]
    pytest

## Random mnemonic

    generate-mnemonic
    generate-mnemonic --words 24

`--words N` (or `-w N`) picks the word count: 12 (the default), 15, 18, 21
or 24. The flag may appear anywhere on the command line; the last one wins.
`generate-mnemonic --help` prints the usage text.

## Vanity search

    generate-mnemonic vanity --ETH --prefix dead
    generate-mnemonic vanity --SOL --suffix abc --count 3
    generate-mnemonic vanity --BTC --prefix bc1q
    generate-mnemonic --words 24 vanity --BTC --prefix bc1p --threads 8

Options after `vanity`:

- `--ETH`, `--SOL` or `--BTC` (lower case also accepted): the chain. ETH is
  the default. Giving two chain flags is an error.
- `--prefix P` / `-p P`, `--suffix S` / `-s S`: at least one is required.
  ETH fragments are hex (a leading `0x` is dropped), SOL fragments Base58,
  BTC fragments Bech32.
- `--strict` (or `--case-sensitive`): match case exactly (EIP-55 for ETH).
  Without it the match ignores case.
- `--threads N` / `-j N`: worker thread count. Defaults to the number of CPUs.
- `--count N` / `-n N`: stop after N matches (default 1).

Each match is printed as an `address:` line and a `mnemonic:` line; with
more than one match each pair is headed `--- #N ---`. Errors go to standard
error and the command exits with status 1.

Derivation paths:

| Chain        | Path                | Address         |
|--------------|---------------------|-----------------|
| ETH          | `m/44'/60'/0'/0/0`  | `0x…` (EIP-55)  |
| SOL          | `m/44'/501'/0'/0'`  | Base58 Ed25519  |
| BTC P2WPKH   | `m/84'/0'/0'/0/0`   | `bc1q…`         |
| BTC Taproot  | `m/86'/0'/0'/0/0`   | `bc1p…`         |

BTC prefixes must start with `bc1`. A `bc1q…` prefix searches P2WPKH, a
`bc1p…` prefix searches Taproot, and a plain `bc1…` prefix tries both for
each mnemonic. Giving a `bc1` prefix selects BTC even without `--BTC`.
A `bc1q1…` prefix is rejected, since no P2WPKH address can have `1` as its
fifth character.

Each extra character costs roughly 16× more tries for ETH (hex), 58× for
SOL (Base58) and 32× for BTC (Bech32). Key derivation is done in Python, so
searches for long fragments are slow; worker threads share one interpreter.
During a BTC search a progress line is printed to standard error every five
seconds.

The mnemonics printed are secret keys. Do not share them.

## Library use

    from vanitymnemonic.words import Mnemonic, random_mnemonic
    from vanitymnemonic.chain import Chain
    from vanitymnemonic.btc import BtcAddressKind

    m = Mnemonic.from_phrase("abandon " * 11 + "about")
    Chain.eth().address_from_mnemonic(m)
    # '0x9858EfFD232B4033E47d90003D41EC34EcaEda94'
    Chain.sol().address_from_mnemonic(m)
    # 'HAgk14JpMQLgt6rVgv7cBQFJWFto5Dqxi472uT3DKpqk'
    Chain.btc(BtcAddressKind.P2TR).address_from_mnemonic(m)
    # 'bc1p5cyxnuxmeuwuvkwfem96lqzszd02n6xdcjrs20cac6yqjjwudpxqkedrcr'

A search can be run directly:

    from vanitymnemonic.vanity import parse_vanity_cli, search_vanity_mnemonic

    cfg = parse_vanity_cli(["--ETH", "--prefix", "ab"], 12)
    for mnemonic, address in search_vanity_mnemonic(cfg):
        print(address, mnemonic.phrase)

Other modules: `vanitymnemonic.hdkey` (BIP32 and SLIP-0010 derivation),
`vanitymnemonic.encoding` (Base58 and Bech32/Bech32m SegWit),
`vanitymnemonic.secp256k1` (curve arithmetic), `vanitymnemonic.eth`,
`vanitymnemonic.sol` and `vanitymnemonic.btc` (address derivation) and
`vanitymnemonic.wordlist` (the English BIP39 wordlist).

## What it does not do

Only the first account on each chain is derived, with an empty BIP39
passphrase. There is no support for other wordlists, passphrases, legacy or
nested-SegWit Bitcoin addresses, testnets, or signing transactions.
`BtcAddressKind.BOTH` is for vanity search only; asking a chain of that kind
for a single address raises `ValueError`.