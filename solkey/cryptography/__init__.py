"""
Hash functions and the Ed25519 primitive
"""
# cryptography/__init__.py


from solkey.cryptography.ed25519 import *
from solkey.cryptography.hash_functions import *
