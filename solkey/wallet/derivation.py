"""
The HardenedIndex and DerivationPath classes. Every level of an Ed25519 path is hardened, so paths are validated once
here and the derivation loop only ever sees hardened indices.
"""
from typing import Iterable, Iterator

from solkey.core import SLIP10, SOLANA, DerivationPathError

__all__ = ["HardenedIndex", "DerivationPath"]

HARDENED_OFFSET = SLIP10.HARDENED_OFFSET
MAX_INDEX = SLIP10.MAX_INDEX
HARDENED_MARKERS = ("'", "h", "H")


class HardenedIndex(int):
    """
    A 32-bit child number with the hardened bit set. Constructed from the raw index in [0, 2^31).
    """

    def __new__(cls, index: int):
        if isinstance(index, HardenedIndex):
            return index
        if isinstance(index, bool) or not isinstance(index, int):
            raise DerivationPathError(f"Path index must be an int, received {type(index).__name__}")
        if not 0 <= index <= MAX_INDEX:
            raise DerivationPathError(f"Path index {index} must satisfy 0 <= index <= {MAX_INDEX}")
        return super().__new__(cls, index | HARDENED_OFFSET)

    @property
    def raw(self) -> int:
        """The index without the hardened bit"""
        return int(self) & MAX_INDEX

    def to_bytes(self, length: int = SLIP10.INDEX_BYTES, byteorder: str = "big", *, signed: bool = False) -> bytes:
        return int(self).to_bytes(length, byteorder, signed=signed)

    def __str__(self) -> str:
        return f"{self.raw}'"

    def __repr__(self) -> str:
        return f"HardenedIndex({self.raw})"


class DerivationPath:
    """
    Immutable ordered sequence of hardened indices, e.g. m/44'/501'/0'/0'. The empty path is the master key.
    """
    __slots__ = ("indices",)

    def __init__(self, indices: Iterable[int] = ()):
        if isinstance(indices, (str, bytes)):
            raise DerivationPathError("Use DerivationPath.from_string for path strings")
        self.indices: tuple[HardenedIndex, ...] = tuple(HardenedIndex(i) for i in indices)

    @classmethod
    def from_string(cls, path: str) -> "DerivationPath":
        """
        Parse a path such as "m/44'/501'/0'/0'". Each level must carry a hardened marker (' or h).
        """
        parts = path.strip().split('/')
        if parts[0] != 'm':
            raise DerivationPathError(f"Path must start with 'm': {path!r}")

        indices = []
        for part in parts[1:]:
            if not part.endswith(HARDENED_MARKERS):
                raise DerivationPathError(f"Non-hardened level {part!r} in {path!r}; Ed25519 requires hardened keys")
            digits = part[:-1]
            if not (digits.isascii() and digits.isdigit()):
                raise DerivationPathError(f"Malformed path level {part!r} in {path!r}")
            indices.append(int(digits))
        return cls(indices)

    @classmethod
    def solana(cls, account: int = 0, change: int = 0) -> "DerivationPath":
        """
        Standard Solana path m/44'/501'/account'/change'
        """
        return cls([SOLANA.PURPOSE, SOLANA.COIN_TYPE, account, change])

    @classmethod
    def coerce(cls, path: "DerivationPath | str | Iterable[int]") -> "DerivationPath":
        if isinstance(path, DerivationPath):
            return path
        if isinstance(path, str):
            return cls.from_string(path)
        return cls(path)

    def raw_indices(self) -> list[int]:
        return [i.raw for i in self.indices]

    @property
    def depth(self) -> int:
        return len(self.indices)

    # --- OVERRIDES --- #

    def __iter__(self) -> Iterator[HardenedIndex]:
        return iter(self.indices)

    def __len__(self) -> int:
        return len(self.indices)

    def __getitem__(self, item):
        return self.indices[item]

    def __eq__(self, other) -> bool:
        if not isinstance(other, DerivationPath):
            return NotImplemented
        return self.indices == other.indices

    def __hash__(self) -> int:
        return hash(self.indices)

    def __str__(self) -> str:
        return "/".join(["m"] + [str(i) for i in self.indices])

    def __repr__(self) -> str:
        return f"DerivationPath({str(self)!r})"
