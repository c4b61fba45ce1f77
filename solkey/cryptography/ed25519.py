"""
Ed25519 key generation. Seed expansion, hashing and clamping are left to libsodium through PyNaCl
"""
from nacl.signing import SigningKey

from solkey.data import PrivateKeySeed, PublicKey

__all__ = ["ed25519_public_key"]


def ed25519_public_key(seed: bytes) -> PublicKey:
    """
    Return the 32-byte Ed25519 public key for the given 32-byte private key seed
    """
    signing_key = SigningKey(bytes(PrivateKeySeed(seed)))
    return PublicKey(signing_key.verify_key.encode())
