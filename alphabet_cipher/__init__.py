"""
alphabet_cipher — The Alphabet Cipher
=====================================
A Vigenère-family substitution cipher over the letters a-z.

    encode    — keyword + plaintext  -> ciphertext
    decode    — keyword + ciphertext -> plaintext
    decipher  — ciphertext + plaintext -> shortest keyword

Classical teaching cipher. Not secure.

License: Apache 2.0
"""

__version__  = "1.0.0"
__project__  = "alphabet_cipher"

from .alphabet import ALPHABET, letter_position, position_to_letter, sanitize, is_sanitized
from .table    import TABLE, build_table, row_for, format_table
from .cipher   import AlphabetCipher, encode, decode, decipher, key_stream
from .errors   import CipherError, InvalidInput, NotFound

__all__ = [
    "ALPHABET",
    "TABLE",
    "AlphabetCipher",
    "CipherError",
    "InvalidInput",
    "NotFound",
    "build_table",
    "decipher",
    "decode",
    "encode",
    "format_table",
    "is_sanitized",
    "key_stream",
    "letter_position",
    "position_to_letter",
    "row_for",
    "sanitize",
]
