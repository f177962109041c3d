"""
Errors
======
Every failure raised by alphabet_cipher derives from CipherError, which
is itself a ValueError, so callers that already catch ValueError for bad
keys keep working.
"""


class CipherError(ValueError):
    """Base class for alphabet cipher failures."""


class InvalidInput(CipherError):
    """Input cannot be processed: empty keyword, mismatched lengths."""


class NotFound(CipherError):
    """No keyword reproduces the given ciphertext from the plaintext."""
