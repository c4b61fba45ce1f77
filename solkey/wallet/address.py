"""
Solana addresses. An address is the raw Base58 encoding of the 32-byte Ed25519 public key
"""
from solkey.core import get_logger
from solkey.cryptography import ed25519_public_key
from solkey.data import PrivateKeySeed, PublicKey, encode_base58, decode_base58

logger = get_logger(__name__)

__all__ = ["to_address", "address_to_public_key"]


def to_address(private_key_seed: bytes) -> tuple[PublicKey, str]:
    """
    Returns the (public_key, address) pair for a 32-byte private key seed
    """
    public_key = ed25519_public_key(PrivateKeySeed(private_key_seed))
    address = encode_base58(public_key)
    logger.debug(f"Encoded address {address}")
    return public_key, address


def address_to_public_key(address: str) -> PublicKey:
    """
    Decode an address back to its public key. Raises AddressError for a bad character and KeyLengthError if the
    decoded value is not 32 bytes.
    """
    return PublicKey(decode_base58(address))
