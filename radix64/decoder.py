"""Base64 decoding.

This module provides decode(), a single forward pass over the input that
accepts the standard and URL-safe alphabets interchangeably, skips CR and LF
anywhere, and stops at the first ``=``. Decoding fails fast on the first
character that is not part of the format.
"""

from __future__ import annotations

import logging
from typing import Union

from radix64.alphabet import DECODE_TABLE, IGNORE, PAD
from radix64.exceptions import InvalidByteError, InvalidLengthError

logger = logging.getLogger(__name__)

TextLike = Union[str, bytes, bytearray, memoryview]


def decode(data: TextLike) -> bytes:
    """Decode base64 text back to bytes.

    Args:
        data: The encoded text, as a string or as its ASCII bytes.

    Returns:
        The decoded bytes.

    Raises:
        InvalidByteError: If a character outside ``A-Z a-z 0-9 + - / _ =``,
            CR and LF appears, or anything but ``=``, CR and LF follows the
            first ``=``.
        InvalidLengthError: If the data characters leave a single 6-bit
            group after the last full byte triple.

    Example:
        >>> decode("Zm9v\\r\\nYmFy")
        b'foobar'
        >>> decode("-_8") == decode("+/8=")
        True
    """
    if isinstance(data, str):
        text = data
        # One '?' per non-ASCII character keeps positions; '?' is invalid
        raw = data.encode("ascii", errors="replace")
    else:
        text = None
        raw = bytes(data)

    out = bytearray()
    buf = 0
    modulus = 0

    idx = 0
    length = len(raw)
    while idx < length:
        value = DECODE_TABLE[raw[idx]]
        if value < 64:
            buf = (buf << 6 | value) & 0xFFFFFF
            modulus += 1
            if modulus == 4:
                modulus = 0
                out.append(buf >> 16)
                out.append((buf >> 8) & 0xFF)
                out.append(buf & 0xFF)
        elif value == PAD:
            break
        elif value != IGNORE:
            raise _invalid_byte(raw, text, idx)
        idx += 1

    # Terminated by padding: only more padding and line breaks may follow
    for idx in range(idx, length):
        value = DECODE_TABLE[raw[idx]]
        if value != PAD and value != IGNORE:
            raise _invalid_byte(raw, text, idx)

    if modulus == 2:
        out.append((buf >> 4) & 0xFF)
    elif modulus == 3:
        out.append((buf >> 10) & 0xFF)
        out.append((buf >> 2) & 0xFF)
    elif modulus == 1:
        logger.debug("base64 decode failed: single 6-bit group left over")
        raise InvalidLengthError()

    return bytes(out)


def _invalid_byte(raw: bytes, text: str | None, idx: int) -> InvalidByteError:
    byte = ord(text[idx]) if text is not None else raw[idx]
    logger.debug("base64 decode failed: invalid byte %d at position %d", byte, idx)
    return InvalidByteError(byte, idx)
