"""
Contains the core elements that are used within solkey

Core:
    -Provides the reference constants used by the derivation pipeline
    -Provides custom exceptions for the solkey elements
    -Provides the logger factory
"""
# core/__init__.py
from solkey.core.exceptions import *
from solkey.core.formats import *
from solkey.core.logging import *
