"""radix64: Base64 binary-to-text encoding.

This package converts byte sequences to printable ASCII text and back using
the Base64 family: RFC 4648 standard, RFC 4648 base64url and RFC 2045 MIME.

Main Components:
    - encode: bytes to text, following a Config
    - decode: text to bytes, tolerant of either alphabet and of line breaks
    - Config: alphabet, newline, padding and line-wrap settings
    - STANDARD, URL_SAFE, MIME: preset configurations
    - Base64: codec bound to one configuration
    - Exceptions: DecodeError and its InvalidByteError/InvalidLengthError variants

Example:
    >>> from radix64 import MIME, decode, encode
    >>> text = encode(b"any carnal pleasure", MIME)
    >>> decode(text)
    b'any carnal pleasure'
"""

from radix64.alphabet import STANDARD_CHARS, URL_SAFE_CHARS, CharacterSet
from radix64.codec import Base64
from radix64.config import MIME, STANDARD, URL_SAFE, Config, Newline
from radix64.decoder import decode
from radix64.encoder import encode, encoded_length
from radix64.exceptions import (
    ConfigurationError,
    DecodeError,
    InvalidByteError,
    InvalidLengthError,
    Radix64Error,
)

__version__ = "0.1.0"

__all__ = [
    # Operations
    "encode",
    "decode",
    "encoded_length",
    "Base64",
    # Configuration
    "Config",
    "CharacterSet",
    "Newline",
    "STANDARD",
    "URL_SAFE",
    "MIME",
    "STANDARD_CHARS",
    "URL_SAFE_CHARS",
    # Exceptions
    "Radix64Error",
    "ConfigurationError",
    "DecodeError",
    "InvalidByteError",
    "InvalidLengthError",
]
