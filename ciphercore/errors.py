"""
Internal exceptions for :mod:`ciphercore`.

Cipher classes raise these with the message a user should see.
The engine boundary turns them into failed ``EncryptionResult`` values,
so none of them ever reaches a caller of the public functions.
"""


class CipherError(Exception):
    """Base error for every cipher operation."""


class KeyRequiredError(CipherError):
    """Raised when an algorithm needs key material and none was given."""

    def __init__(self, message: str = "Key is required"):
        super().__init__(message)


class InvalidKeyError(CipherError):
    """Raised when key material is present but unusable after normalisation."""

    def __init__(self, message: str = "Invalid key"):
        super().__init__(message)


class MalformedInputError(CipherError):
    """Raised when an encoded payload cannot be decoded structurally."""


class DecryptionError(CipherError):
    """Raised when a payload decodes but yields no valid plaintext."""
