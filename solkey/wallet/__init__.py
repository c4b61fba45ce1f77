"""
Seed derivation, SLIP-0010 key derivation and Solana addresses
"""
# wallet/__init__.py
from solkey.wallet.account import *
from solkey.wallet.address import *
from solkey.wallet.derivation import *
from solkey.wallet.mnemonic import *
from solkey.wallet.slip10 import *
