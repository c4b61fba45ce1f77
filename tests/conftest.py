"""
Fixtures used in the tests
"""
import pytest

from solkey.core import SOLANA
from solkey.wallet import derive_seed

# SLIP-0010 ed25519 test vector 2 seed (64 bytes)
SLIP10_SEED_2 = \
    "fffcf9f6f3f0edeae7e4e1dedbd8d5d2cfccc9c6c3c0bdbab7b4b1aeaba8a5a29f9c999693908d8a8784817e7b7875726f6c696663605d5a5754514e4b484542"


@pytest.fixture()
def demo_mnemonic():
    return SOLANA.DEMO_MNEMONIC


@pytest.fixture()
def demo_seed(demo_mnemonic):
    return derive_seed(demo_mnemonic)


@pytest.fixture()
def slip10_seed():
    return bytes.fromhex(SLIP10_SEED_2)
