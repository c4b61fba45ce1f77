"""
Shortcuts for the hash functions used in seeding and key derivation. Each function returns the bytes digest
"""
import hashlib
import hmac

import unicodedata

from solkey.core import BIP39, ConfigurationError

__all__ = ["hmac_sha512", "pbkdf2"]


def _require_sha512():
    if BIP39.HASH_NAME not in hashlib.algorithms_available:
        raise ConfigurationError(f"Hash algorithm {BIP39.HASH_NAME} is not available in this runtime")


# --- WALLET HASHES --- #
def hmac_sha512(key: bytes, message: bytes) -> bytes:
    _require_sha512()
    return hmac.new(key=key, msg=message, digestmod=hashlib.sha512).digest()


def pbkdf2(mnemonic: str, passphrase: str = '', iterations: int = BIP39.ITERATIONS,
           dklen: int = BIP39.DKLEN) -> bytes:
    """
    Derives a seed from a mnemonic phrase using PBKDF2-HMAC-SHA512.

    mnemonic: The space separated mnemonic phrase.
    passphrase: An optional passphrase string (default: empty string).
    iterations: Number of iterations for PBKDF2 (default: 2048).
    dklen: Length of the derived key in bytes (default: 64 bytes).
    return: The derived key as bytes.
    """
    _require_sha512()

    # Normalize the mnemonic and passphrase
    normalized_mnemonic = unicodedata.normalize(BIP39.NORMALIZATION, mnemonic)
    normalized_passphrase = unicodedata.normalize(BIP39.NORMALIZATION, passphrase)

    # Salt is "mnemonic" + normalized passphrase
    salt = f"{BIP39.SALT_PREFIX}{normalized_passphrase}".encode('utf-8')
    password_bytes = normalized_mnemonic.encode('utf-8')

    return hashlib.pbkdf2_hmac(BIP39.HASH_NAME, password_bytes, salt, iterations, dklen)
