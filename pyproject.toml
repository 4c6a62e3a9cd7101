[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "vanitymnemonic"
version = "0.1.0"
description = "BIP39 mnemonics and ETH/SOL/BTC vanity address search on the CPU."
requires-python = ">=3.10"
keywords = ["bip39", "mnemonic", "vanity", "ethereum", "solana", "bitcoin", "bech32", "slip10"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security :: Cryptography",
    "Topic :: Utilities",
]
dependencies = [
    "pycryptodome",
    "cryptography",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
generate-mnemonic = "vanitymnemonic.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["vanitymnemonic"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
