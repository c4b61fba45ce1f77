"""
solkey: Solana Ed25519 keys and addresses from BIP-39 mnemonics via SLIP-0010 hardened derivation
"""
from solkey.core import (SolKeyError, ConfigurationError, InvalidInputError, KeyLengthError, DerivationPathError,
                         AddressError)
from solkey.data import Seed, PrivateKeySeed, ChainCode, PublicKey
from solkey.wallet import (derive_seed, master_key, derive_child, derive_key, to_address, address_to_public_key,
                           private_key_from_mnemonic, derive_account, SolanaAccount, DerivationPath, HardenedIndex)

__version__ = "0.1.0"
