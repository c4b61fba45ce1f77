"""
Fixed-length byte buffers used along the derivation pipeline.

Each type is a bytes subclass whose length is checked on construction, so a seed, key or chain code of the wrong
size raises KeyLengthError instead of being sliced or padded further down the line.
"""
from solkey.core import BIP39, ED25519, SLIP10, InvalidInputError, KeyLengthError

__all__ = ["FixedBytes", "Seed", "PrivateKeySeed", "ChainCode", "PublicKey"]


class FixedBytes(bytes):
    """
    Base class for immutable byte strings of a known length. Subclasses set LENGTH.
    """
    LENGTH: int = 0

    def __new__(cls, data: bytes | bytearray | memoryview):
        if not isinstance(data, (bytes, bytearray, memoryview)):
            raise InvalidInputError(f"{cls.__name__} expects bytes, received {type(data).__name__}")
        obj = super().__new__(cls, data)
        if len(obj) != cls.LENGTH:
            raise KeyLengthError(f"{cls.__name__} must be {cls.LENGTH} bytes, received {len(obj)}")
        return obj

    @classmethod
    def from_hex(cls, hex_string: str):
        return cls(bytes.fromhex(hex_string))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.hex()!r})"


class Seed(FixedBytes):
    """64-byte BIP-39 seed"""
    LENGTH = BIP39.DKLEN


class PrivateKeySeed(FixedBytes):
    """
    32-byte SLIP-0010 key. Used as an Ed25519 seed, not as a clamped scalar.
    """
    LENGTH = SLIP10.KEY_BYTES

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(<redacted>)"


class ChainCode(FixedBytes):
    LENGTH = SLIP10.CHAIN_CODE_BYTES

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(<redacted>)"


class PublicKey(FixedBytes):
    LENGTH = ED25519.PUBKEY_BYTES
