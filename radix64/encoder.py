"""Base64 encoding.

This module provides encode(), which turns an arbitrary byte sequence into
base64 text following a Config: alphabet, padding and optional line wrapping.
Encoding is a total function; every byte sequence has an encoding.
"""

from __future__ import annotations

from typing import Union

from radix64.alphabet import PAD_CHAR, alphabet_for
from radix64.config import STANDARD, Config

BytesLike = Union[bytes, bytearray, memoryview]


def encoded_length(length: int, config: Config = STANDARD) -> int:
    """Compute the size of the padded, wrapped output for an input length.

    Each group of up to three input bytes yields four output characters.
    When wrapping, a newline precedes every group that starts once the
    current line has reached ``config.line_length`` characters.

    Args:
        length: Number of input bytes.
        config: The encoding configuration.

    Returns:
        The number of characters encode() writes before stripping padding.
    """
    groups = (length + 2) // 3
    size = groups * 4

    if config.line_length is not None and groups > 1:
        groups_per_line = (config.line_length + 3) // 4
        size += (groups - 1) // groups_per_line * len(config.newline.sequence)

    return size


def encode(data: BytesLike, config: Config = STANDARD) -> str:
    """Encode bytes to a base64 string.

    Args:
        data: The bytes to encode.
        config: Alphabet, newline, padding and wrapping settings. Defaults
            to RFC 4648 standard base64.

    Returns:
        The encoded text. It contains only characters of the configured
        alphabet, ``=`` padding and newline characters.

    Example:
        >>> encode(b"foobar")
        'Zm9vYmFy'
        >>> encode(b"foobar", STANDARD.replace(line_length=4))
        'Zm9v\\r\\nYmFy'
    """
    data = bytes(data)
    length = len(data)
    if length == 0:
        return ""

    table = alphabet_for(config.char_set).encode("ascii")
    newline = config.newline.sequence.encode("ascii")
    line_length = config.line_length

    # Padding is written for free: the tail leaves the prefilled '=' in place
    out = bytearray(PAD_CHAR.encode("ascii") * encoded_length(length, config))
    pos = 0
    cur_length = 0

    tail = length % 3
    body = length - tail

    for i in range(0, body, 3):
        if line_length is not None and cur_length >= line_length:
            out[pos : pos + len(newline)] = newline
            pos += len(newline)
            cur_length = 0

        n = data[i] << 16 | data[i + 1] << 8 | data[i + 2]

        out[pos] = table[(n >> 18) & 63]
        out[pos + 1] = table[(n >> 12) & 63]
        out[pos + 2] = table[(n >> 6) & 63]
        out[pos + 3] = table[n & 63]
        pos += 4
        cur_length += 4

    if tail:
        if line_length is not None and cur_length >= line_length:
            out[pos : pos + len(newline)] = newline
            pos += len(newline)

        if tail == 1:
            n = data[length - 1] << 16
            out[pos] = table[(n >> 18) & 63]
            out[pos + 1] = table[(n >> 12) & 63]
        else:
            n = data[length - 2] << 16 | data[length - 1] << 8
            out[pos] = table[(n >> 18) & 63]
            out[pos + 1] = table[(n >> 12) & 63]
            out[pos + 2] = table[(n >> 6) & 63]

    text = out.decode("ascii")
    if not config.pad:
        text = text.rstrip(PAD_CHAR)

    return text
