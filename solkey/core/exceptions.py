"""
The custom exceptions used throughout solkey
"""
__all__ = ["SolKeyError", "ConfigurationError", "InvalidInputError", "KeyLengthError", "DerivationPathError",
           "AddressError"]


class SolKeyError(Exception):
    """
    Parent class for solkey errors
    """
    pass


class ConfigurationError(SolKeyError):
    """
    For when a required cryptographic primitive is unavailable in the runtime
    """
    pass


class InvalidInputError(SolKeyError):
    """
    Catchall for caller supplied data that fails validation
    """
    pass


class KeyLengthError(InvalidInputError):
    """
    For a seed, key, chain code or public key buffer of the wrong byte length
    """
    pass


class DerivationPathError(InvalidInputError):
    """
    For derivation path indices outside the 31-bit range and malformed path strings
    """
    pass


class AddressError(InvalidInputError):
    """
    For Base58 addresses that cannot be decoded
    """
    pass
