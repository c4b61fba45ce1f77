"""
SLIP-0010 key derivation for Ed25519.

The master key and chain code are the two halves of HMAC-SHA512(key=b"ed25519 seed", msg=seed). Each child is
derived from the parent private key only:

    I = HMAC-SHA512(key=chain_code, msg=0x00 || key || ser32(index | 0x80000000))
    key, chain_code = I[:32], I[32:]

Ed25519 has no public parent derivation, so every index is hardened and the 0x00 prefix is constant.
"""
from typing import Iterable

from solkey.core import SLIP10, get_logger
from solkey.cryptography import hmac_sha512
from solkey.data import ChainCode, PrivateKeySeed, Seed
from solkey.wallet.derivation import DerivationPath, HardenedIndex

logger = get_logger(__name__)

__all__ = ["master_key", "derive_child", "derive_key"]

KEY_BYTES = SLIP10.KEY_BYTES


def _split(digest: bytes) -> tuple[PrivateKeySeed, ChainCode]:
    return PrivateKeySeed(digest[:KEY_BYTES]), ChainCode(digest[KEY_BYTES:])


def master_key(seed: bytes) -> tuple[PrivateKeySeed, ChainCode]:
    """
    Returns the master (key, chain_code) pair for a 64-byte seed
    """
    seed_hash = hmac_sha512(key=SLIP10.SEED_KEY, message=Seed(seed))
    return _split(seed_hash)


def derive_child(key: bytes, chain_code: bytes, index: int) -> tuple[PrivateKeySeed, ChainCode]:
    """
    Derive the hardened child at the given index. The raw index is hardened here; passing an index with the top bit
    already set raises DerivationPathError.
    """
    hardened = HardenedIndex(index)
    data = SLIP10.PRIVATE_PREFIX + PrivateKeySeed(key) + hardened.to_bytes()
    key_hash = hmac_sha512(key=ChainCode(chain_code), message=data)
    return _split(key_hash)


def derive_key(seed: bytes, path: DerivationPath | str | Iterable[int]) -> PrivateKeySeed:
    """
    Walk the path from the master key and return the final 32-byte private key seed. The path is fully validated
    before any HMAC is computed. An empty path returns the master key.
    """
    path = DerivationPath.coerce(path)
    seed = Seed(seed)

    key, chain_code = master_key(seed)
    for index in path:
        key, chain_code = derive_child(key, chain_code, index)

    logger.debug(f"Derived key at {path} (depth {path.depth})")
    return key
