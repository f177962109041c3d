"""
Shift Table
===========
The 26x26 substitution matrix of the alphabet cipher.

Row L is the alphabet rotated left by the position of L, so row 'a' is
the plain alphabet and row 'c' starts "cdef...zab". The table is keyed
by the message letter and indexed by the key letter's position:

    TABLE[message_letter][letter_position(key_letter)] == cipher_letter

Encode, decode and decipher are three readings of that one relation.
"""

import logging
from typing import Optional

from .alphabet import ALPHABET, letter_position, position_to_letter

logger = logging.getLogger(__name__)


def row_for(letter: str) -> str:
    """Alphabet rotated left by the position of `letter`."""
    pos = letter_position(letter)
    return ALPHABET[pos:] + ALPHABET[:pos]


def build_table() -> dict:
    """Map every letter of the alphabet to its shift row."""
    return {letter: row_for(letter) for letter in ALPHABET}


# Pure function of the alphabet, built once.
TABLE = build_table()


def encode_lookup(key_char: str, message_char: str) -> str:
    """Cipher letter for a key letter and a plaintext letter."""
    return TABLE[message_char][letter_position(key_char)]


def decode_lookup(key_char: str, cipher_char: str) -> str:
    """
    Plaintext letter for a key letter and a cipher letter.

    Takes the column at the key position and returns the row whose entry
    in that column is the cipher letter. Each column is a permutation of
    the alphabet, so exactly one row matches.
    """
    key_pos = letter_position(key_char)
    return next(letter for letter, row in TABLE.items()
                if row[key_pos] == cipher_char)


def decipher_lookup(cipher_char: str, message_char: str) -> str:
    """Key letter that turns `message_char` into `cipher_char`."""
    return position_to_letter(TABLE[message_char].index(cipher_char))


def format_table(table: Optional[dict] = None) -> str:
    """
    Render the table as a grid for diagnostics.

    The first line lists the column letters (key positions); every
    following line is "<row letter> | <row>".
    """
    if table is None:
        table = TABLE
    header = "    " + " ".join(ALPHABET)
    rule   = "  +" + "-" * (len(header) - 3)
    lines  = [header, rule]
    for letter, row in table.items():
        lines.append(f"{letter} | " + " ".join(row))
    return "\n".join(lines)


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format=' %(message)s')
    logger.info(f"Cipher table: {len(TABLE)} rows")
    print(format_table())
