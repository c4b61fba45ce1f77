"""
Tests for Ed25519 public keys and Solana address encoding
"""
import pytest

from solkey.core import AddressError, KeyLengthError
from solkey.data import PublicKey
from solkey.wallet import address_to_public_key, to_address

# SLIP-0010 ed25519 test vector 1 private keys and their public keys (without the 0x00 SLIP-0010 prefix)
KNOWN_KEYPAIRS = [
    ("2b4be7f19ee27bbf30c667b642d5f4aa69fd169872f8fc3059c08ebae2eb19e7",
     "a4b2856bfec510abab89753fac1ac0e1112364e7d250545963f135f2a33188ed",
     "C5ukMV73nk32h52MjxtnZXTrrr7rupD9CTDDRnYYDRYQ"),
    ("68e0fe46dfb67e368c75379acec591dad19df3cde26e63b93a8e704f1dade7a3",
     "8c8a13df77a28f3445213a0f432fde644acaa215fc72dcdf300d5efaa85d350c",
     "ATcCGRoY87cSJESCXbHXEX6CDWQxepAViUvVnNsELhRu"),
    ("b1d0bad404bf35da785a64ca1ac54b2617211d2777696fbffaf208f746ae84f2",
     "1932a5270f335bed617d5b935c80aedb1a35bd9fc1e31acafd5372c30f5c1187",
     "2hMz2f8WbLw5m2icKR2WVrcizvnguw8xaAnXjaeohuHQ"),
    ("8f94d394a8e8fd6b1bc2f3f49f5c47e385281d5c17e65324b0f62483e37e8793",
     "3c24da049451555d51a7014a37337aa4e12d41e485abccfa46b47dfb2af54b7a",
     "53n47S4RT9ozx5KrpH6uYfdnAjrTBJri8qZJBvRfw1Bf"),
]


@pytest.mark.parametrize("private_key, public_key, address", KNOWN_KEYPAIRS)
def test_known_public_key_and_address(private_key, public_key, address):
    pubkey, addy = to_address(bytes.fromhex(private_key))
    assert isinstance(pubkey, PublicKey)
    assert pubkey.hex() == public_key, "Public key doesn't match SLIP-0010 vector"
    assert addy == address, "Address doesn't match expected Base58 encoding"


@pytest.mark.parametrize("private_key, public_key, address", KNOWN_KEYPAIRS)
def test_address_recovers_public_key(private_key, public_key, address):
    assert address_to_public_key(address).hex() == public_key


def test_to_address_deterministic():
    private_key = bytes.fromhex(KNOWN_KEYPAIRS[0][0])
    assert to_address(private_key) == to_address(private_key)


@pytest.mark.parametrize("key_len", [0, 31, 33, 64])
def test_wrong_private_key_length(key_len):
    with pytest.raises(KeyLengthError):
        to_address(bytes(key_len))


def test_bad_address():
    with pytest.raises(AddressError):
        address_to_public_key("0OIl" + KNOWN_KEYPAIRS[0][2][4:])

    # Valid Base58 but not a 32 byte key
    with pytest.raises(KeyLengthError):
        address_to_public_key("StV1DL6CwTryKyV")
