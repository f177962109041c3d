"""
Alphabet Utilities
==================
Character/position conversions over the 26 lowercase letters and the
sanitizer that strips raw input down to cipher-safe text.

Positions are zero-based offsets from 'a'. The conversions do not
validate or wrap: sanitize first, reduce modulo 26 yourself.
"""

ALPHABET      = "abcdefghijklmnopqrstuvwxyz"
ALPHABET_SIZE = len(ALPHABET)


def letter_position(ch: str) -> int:
    """Zero-based position of a letter, case-insensitive ('C' -> 2)."""
    return ord(ch.lower()) - ord("a")


def position_to_letter(pos: int) -> str:
    return chr(ord("a") + pos)


def sanitize(text: str) -> str:
    """
    Lower-case `text` and drop every character outside 'a'..'z'.

    Order of the surviving characters is preserved. Accented and other
    non-ASCII letters are dropped too.
    """
    return "".join(ch for ch in text.lower() if "a" <= ch <= "z")


def is_sanitized(text: str) -> bool:
    return sanitize(text) == text
