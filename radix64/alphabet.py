"""Alphabet tables for base64 encoding and decoding.

This module holds the two 64-character alphabets and the byte lookup table
the decoder runs on. Everything here is built once at import time and is
read-only afterwards.
"""

from __future__ import annotations

from enum import Enum


class CharacterSet(Enum):
    """Available encoding character sets."""

    STANDARD = "standard"
    URL_SAFE = "url_safe"


STANDARD_CHARS = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/"
URL_SAFE_CHARS = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789-_"

PAD_CHAR = "="

# Sentinels for non-data entries in DECODE_TABLE, all outside 0..63
IGNORE = 64
PAD = 65
INVALID = 66


def alphabet_for(char_set: CharacterSet) -> str:
    """Return the 64-character alphabet for a character set.

    Args:
        char_set: The character set to look up.

    Returns:
        The alphabet string, indexed by 6-bit value.
    """
    if char_set is CharacterSet.URL_SAFE:
        return URL_SAFE_CHARS
    return STANDARD_CHARS


def _build_decode_table() -> tuple[int, ...]:
    table = [INVALID] * 256

    for value, char in enumerate(STANDARD_CHARS):
        table[ord(char)] = value
    # Both alphabets decode everywhere
    table[ord("-")] = 62
    table[ord("_")] = 63

    table[ord("\r")] = IGNORE
    table[ord("\n")] = IGNORE
    table[ord(PAD_CHAR)] = PAD

    return tuple(table)


DECODE_TABLE = _build_decode_table()
