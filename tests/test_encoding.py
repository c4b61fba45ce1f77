"""
Methods for testing Base58 encoding and decoding
"""
from secrets import token_bytes

import pytest

from solkey.core import AddressError
from solkey.data import encode_base58, decode_base58

KNOWN_ENCODINGS = [
    (b"", ""),
    (b"hello world", "StV1DL6CwTryKyV"),
    (bytes.fromhex("00000001"), "1112"),
    (bytes.fromhex("0000287fb4cd"), "11233QC4"),
    (bytes(32), "1" * 32),
]


@pytest.mark.parametrize("data, encoded", KNOWN_ENCODINGS)
def test_known_encodings(data, encoded):
    assert encode_base58(data) == encoded, f"Base58 encoding of {data.hex()} failed"
    assert decode_base58(encoded) == data, f"Base58 decoding of {encoded} failed"


def test_random_recovery():
    # Leading zero bytes must survive the integer conversion
    random_data = b'\x00\x00' + token_bytes(30)
    assert decode_base58(encode_base58(random_data)) == random_data


@pytest.mark.parametrize("bad_char", ["0", "O", "I", "l", "+", " "])
def test_invalid_characters(bad_char):
    with pytest.raises(AddressError):
        decode_base58("abc" + bad_char)
