"""
Byte buffer types and encodings used in solkey
"""

# data/__init__.py
from solkey.data.byte_types import *
from solkey.data.encoding import *
