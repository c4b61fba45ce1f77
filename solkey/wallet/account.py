"""
The end-to-end pipeline: mnemonic -> seed -> SLIP-0010 key -> public key -> address
"""
import json
from dataclasses import dataclass
from typing import Iterable

from solkey.core import get_logger
from solkey.data import PrivateKeySeed, PublicKey
from solkey.wallet.address import to_address
from solkey.wallet.derivation import DerivationPath
from solkey.wallet.mnemonic import derive_seed
from solkey.wallet.slip10 import derive_key

logger = get_logger(__name__)

__all__ = ["SolanaAccount", "private_key_from_mnemonic", "derive_account"]


@dataclass(frozen=True)
class SolanaAccount:
    path: DerivationPath
    private_key: PrivateKeySeed
    public_key: PublicKey
    address: str

    def to_dict(self, include_private: bool = False) -> dict:
        account_dict = {
            "path": str(self.path),
            "public_key": self.public_key.hex(),
            "address": self.address,
        }
        if include_private:
            account_dict["private_key"] = self.private_key.hex()
        return account_dict

    def to_json(self, include_private: bool = False) -> str:
        return json.dumps(self.to_dict(include_private), indent=2)


def private_key_from_mnemonic(mnemonic: str | list, passphrase: str = "",
                              path: DerivationPath | str | Iterable[int] | None = None) -> PrivateKeySeed:
    """
    Derives the 32-byte Ed25519 private key seed for a mnemonic phrase.

    Args:
        mnemonic: The space separated mnemonic phrase (or list of words)
        passphrase: Optional BIP39 passphrase (default: "")
        path: Derivation path (default: m/44'/501'/0'/0')

    Returns:
        PrivateKeySeed at the given path
    """
    # Validate the path before the PBKDF2 stretch
    path = DerivationPath.solana() if path is None else DerivationPath.coerce(path)
    seed = derive_seed(mnemonic, passphrase)
    return derive_key(seed, path)


def derive_account(mnemonic: str | list, passphrase: str = "", account: int = 0, change: int = 0) -> SolanaAccount:
    """
    Derive the Solana account at m/44'/501'/account'/change'
    """
    path = DerivationPath.solana(account, change)
    private_key = private_key_from_mnemonic(mnemonic, passphrase, path)
    public_key, address = to_address(private_key)
    logger.debug(f"Account {path}: {address}")
    return SolanaAccount(path=path, private_key=private_key, public_key=public_key, address=address)
