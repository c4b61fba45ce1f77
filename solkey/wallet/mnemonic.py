"""
Mnemonic phrase to BIP-39 seed. The phrase is not checked against a wordlist or checksum at this layer
"""
from solkey.core import BIP39, InvalidInputError, get_logger
from solkey.cryptography import pbkdf2
from solkey.data import Seed

logger = get_logger(__name__)

__all__ = ["derive_seed", "normalize_phrase"]


def normalize_phrase(mnemonic: str | list | tuple) -> str:
    """
    Return the mnemonic as a single space separated string. Word lists are joined as given.
    Any non-empty text is accepted, whitespace included.
    """
    if isinstance(mnemonic, (list, tuple)):
        if not all(isinstance(word, str) for word in mnemonic):
            raise InvalidInputError("Mnemonic word list must contain only str words")
        mnemonic = ' '.join(mnemonic)
    if not isinstance(mnemonic, str):
        raise InvalidInputError(f"Mnemonic must be a str or list of words, received {type(mnemonic).__name__}")
    if not mnemonic:
        raise InvalidInputError("Mnemonic must not be empty")
    return mnemonic


def derive_seed(mnemonic: str | list | tuple, passphrase: str = "") -> Seed:
    """
    Returns the 64-byte seed for the mnemonic phrase and optional passphrase.

    salt = "mnemonic" + passphrase, PBKDF2-HMAC-SHA512, 2048 iterations, 64 byte output.

    Mnemonic and passphrase are NFKD normalized before UTF-8 encoding, as BIP-39 requires. ASCII text is unchanged
    by this, so for every standard wordlist the password is the raw bytes of the phrase.
    """
    phrase = normalize_phrase(mnemonic)
    if not isinstance(passphrase, str):
        raise InvalidInputError(f"Passphrase must be a str, received {type(passphrase).__name__}")

    seed = pbkdf2(mnemonic=phrase, passphrase=passphrase, iterations=BIP39.ITERATIONS, dklen=BIP39.DKLEN)
    logger.debug(f"Derived seed for {len(phrase.split())}-word mnemonic")
    return Seed(seed)
