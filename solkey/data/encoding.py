"""
Methods for Base58 encoding and decoding. Raw Base58 only: no version byte and no checksum
"""
import re

from solkey.core import BASE58, AddressError

__all__ = ["encode_base58", "decode_base58"]

BASE58_ALPHABET = BASE58.ALPHABET


def encode_base58(data: bytes) -> str:
    """
    We return the base58 encoding of the given bytes data
    """
    # Setup
    base = len(BASE58_ALPHABET)
    n = int.from_bytes(data, byteorder="big")
    encoded_string = ""

    # Encode into Base58
    while n > 0:
        n, temp_index = divmod(n, base)
        encoded_string = BASE58_ALPHABET[temp_index] + encoded_string

    # Handle leading zeros in the byte string
    leading_zeros = len(data) - len(data.lstrip(b'\x00'))
    return ("1" * leading_zeros) + encoded_string


def decode_base58(data: str) -> bytes:
    """
    Given a base58 encoded string, return the underlying bytes. Raises AddressError for characters outside the
    alphabet.
    """
    total = 0
    for char in data:
        char_i = BASE58_ALPHABET.find(char)
        if char_i == -1:
            raise AddressError(f"Invalid Base58 character {char!r} in {data!r}")
        total = total * 58 + char_i

    # Get bytes from integer
    decoded_bytes = total.to_bytes((total.bit_length() + 7) // 8, "big")

    # Each leading '1' represents a leading zero byte
    leading_zeros = len(re.match(r"^1*", data).group(0))
    return (b'\x00' * leading_zeros) + decoded_bytes
