"""
Tests for the fixed-length byte buffer types
"""
from secrets import token_bytes

import pytest

from solkey.core import InvalidInputError, KeyLengthError
from solkey.data import ChainCode, PrivateKeySeed, PublicKey, Seed


@pytest.mark.parametrize("byte_type, length", [(Seed, 64), (PrivateKeySeed, 32), (ChainCode, 32), (PublicKey, 32)])
def test_lengths(byte_type, length):
    data = token_bytes(length)
    buffer = byte_type(data)
    assert buffer == data
    assert isinstance(buffer, bytes)

    with pytest.raises(KeyLengthError):
        byte_type(data[:-1])
    with pytest.raises(KeyLengthError):
        byte_type(data + b'\x00')


def test_from_hex():
    assert PublicKey.from_hex("ab" * 32) == bytes.fromhex("ab" * 32)


@pytest.mark.parametrize("bad_data", [32, "00" * 32, None, [0] * 32])
def test_rejects_non_bytes(bad_data):
    with pytest.raises(InvalidInputError):
        PrivateKeySeed(bad_data)


def test_secret_repr_is_redacted():
    secret = token_bytes(32)
    assert secret.hex() not in repr(PrivateKeySeed(secret))
    assert secret.hex() not in repr(ChainCode(secret))
    assert secret.hex() in repr(PublicKey(secret))
