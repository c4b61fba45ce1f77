"""
The reference constants for mnemonic seeding, SLIP-0010 derivation and Solana addresses
"""
from typing import Final

__all__ = ["BIP39", "SLIP10", "ED25519", "SOLANA", "BASE58"]


class BIP39:
    """
    PBKDF2 parameters used to stretch a mnemonic phrase into a 64-byte seed
    """
    SALT_PREFIX: Final[str] = "mnemonic"
    HASH_NAME: Final[str] = "sha512"
    ITERATIONS: Final[int] = 2048
    DKLEN: Final[int] = 64
    NORMALIZATION: Final[str] = "NFKD"


class SLIP10:
    """
    Constants for SLIP-0010 Ed25519 derivation. Only hardened children exist for this curve.
    """
    SEED_KEY: Final[bytes] = b'ed25519 seed'
    PRIVATE_PREFIX: Final[bytes] = b'\x00'
    KEY_BYTES: Final[int] = 32
    CHAIN_CODE_BYTES: Final[int] = 32
    INDEX_BYTES: Final[int] = 4

    # Hardened derivation threshold
    HARDENED_OFFSET: Final[int] = 0x80000000
    MAX_INDEX: Final[int] = 0x7fffffff


class ED25519:
    SEED_BYTES: Final[int] = 32
    PUBKEY_BYTES: Final[int] = 32


class SOLANA:
    """
    Solana BIP44 coin type and the phrase used by the demo entry point
    """
    PURPOSE: Final[int] = 44
    COIN_TYPE: Final[int] = 501
    DEFAULT_ACCOUNTS: Final[int] = 10
    DEMO_MNEMONIC: Final[str] = "legal winner thank year wave sausage worth useful legal winner thank yellow"


class BASE58:
    ALPHABET: Final[str] = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"
