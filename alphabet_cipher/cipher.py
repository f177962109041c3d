"""
Alphabet Cipher
===============
Encode, decode and keyword recovery for the alphabet cipher, a
Vigenère-family substitution built on the shift table.

    encode("scones", "meetmebythetree")   -> "egsgqwtahuiljgs"
    decode("scones", "egsgqwtahuiljgs")   -> "meetmebythetree"
    decipher("egsgqwtahuiljgs", "meetmebythetree") -> "scones"

Every entry point sanitizes its inputs first: case and non-letters are
dropped, so round-trips only hold on already-sanitized text.

Not secure. A single known plaintext gives the keyword away, which is
exactly what decipher() does.
"""

import logging
from typing import Callable

from .alphabet import sanitize
from .errors import InvalidInput, NotFound
from .table import decipher_lookup, decode_lookup, encode_lookup

logger = logging.getLogger(__name__)


def key_stream(keyword: str, length: int) -> str:
    """Repeat `keyword` cyclically and cut it to `length` characters."""
    if not keyword:
        raise InvalidInput("Keyword is empty after sanitizing; need at least one letter a-z.")
    repeats = -(-length // len(keyword))
    return (keyword * repeats)[:length]


def transform(operation: Callable[[str, str], str], keyword: str, message: str) -> str:
    """
    Sanitize both inputs and map every (key letter, message letter) pair
    through `operation`. Output length equals the sanitized message length.
    """
    key = sanitize(keyword)
    text = sanitize(message)
    stream = key_stream(key, len(text))
    logger.debug(f"{operation.__name__}: key={len(key)} chars, message={len(text)} chars")
    return "".join(operation(k, m) for k, m in zip(stream, text))


def encode(keyword: str, message: str) -> str:
    return transform(encode_lookup, keyword, message)


def decode(keyword: str, ciphertext: str) -> str:
    return transform(decode_lookup, keyword, ciphertext)


def decipher(ciphertext: str, message: str) -> str:
    """
    Recover the shortest keyword that encodes `message` into `ciphertext`.

    The per-letter lookup rebuilds the full-length key stream; the answer
    is its shortest prefix that, repeated, reproduces the whole stream.
    Raises InvalidInput on empty or unequal-length (sanitized) inputs and
    NotFound if the recovered keyword fails to re-encode the message.
    """
    cipher = sanitize(ciphertext)
    text = sanitize(message)
    if len(cipher) != len(text):
        raise InvalidInput(
            f"Ciphertext and message differ in length after sanitizing: "
            f"{len(cipher)} vs {len(text)} letters."
        )
    if not cipher:
        raise InvalidInput("Nothing to decipher: ciphertext and message have no letters a-z.")

    expanded = "".join(decipher_lookup(c, m) for c, m in zip(cipher, text))

    # the full expanded key is always its own period
    candidate = next(expanded[:length] for length in range(1, len(expanded) + 1)
                     if key_stream(expanded[:length], len(expanded)) == expanded)

    if encode(candidate, text) != cipher:
        raise NotFound(f"Recovered keyword {candidate!r} does not reproduce the ciphertext.")
    logger.debug(f"decipher: expanded key {len(expanded)} chars -> keyword {len(candidate)} chars")
    return candidate


class AlphabetCipher:
    """
    Alphabet cipher bound to one keyword.

    The keyword is sanitized on construction; it must keep at least one
    letter a-z.
    """

    def __init__(self, keyword: str):
        key = sanitize(keyword)
        if not key:
            raise InvalidInput("Alphabet cipher keyword must contain at least one letter a-z.")
        self._keyword = key

    @property
    def keyword(self) -> str:
        return self._keyword

    @classmethod
    def recover(cls, ciphertext: str, plaintext: str) -> "AlphabetCipher":
        """Build a cipher from the shortest keyword linking the pair."""
        return cls(decipher(ciphertext, plaintext))

    def encrypt(self, plaintext: str) -> str:
        """Encrypt plaintext. Case and non-letters are dropped."""
        return encode(self._keyword, plaintext)

    def decrypt(self, ciphertext: str) -> str:
        return decode(self._keyword, ciphertext)

    def __repr__(self):
        return f"AlphabetCipher(keyword={self._keyword!r})"
