"""Base64 codec bound to a configuration.

This module provides a small namespaced utility around encode() and decode()
for callers that want to carry one configuration around.
"""

from __future__ import annotations

from radix64.config import MIME, STANDARD, URL_SAFE, Config
from radix64.decoder import TextLike, decode
from radix64.encoder import BytesLike, encode


class Base64:
    """Base64 encoder/decoder for a fixed configuration.

    Encoding follows the bound configuration. Decoding does not need one:
    it accepts standard and URL-safe text, padded or not, wrapped or not.

    Attributes:
        config: The configuration used by encode().
    """

    def __init__(self, config: Config = STANDARD) -> None:
        """Initialize the codec.

        Args:
            config: Encoding configuration. Defaults to RFC 4648 standard.
        """
        self.config = config

    @classmethod
    def standard(cls) -> Base64:
        """Create a codec for RFC 4648 standard base64."""
        return cls(STANDARD)

    @classmethod
    def url_safe(cls) -> Base64:
        """Create a codec for RFC 4648 base64url (unpadded)."""
        return cls(URL_SAFE)

    @classmethod
    def mime(cls) -> Base64:
        """Create a codec for RFC 2045 MIME base64 (76-column CRLF lines)."""
        return cls(MIME)

    def encode(self, data: BytesLike) -> str:
        """Encode bytes to a base64 string using the bound configuration.

        Args:
            data: The bytes to encode.

        Returns:
            The encoded text.
        """
        return encode(data, self.config)

    def decode(self, base64_str: TextLike) -> bytes:
        """Decode a base64 string to bytes.

        Args:
            base64_str: The base64 text to decode.

        Returns:
            The decoded bytes.

        Raises:
            DecodeError: If the text is not valid base64.
        """
        return decode(base64_str)

    def __repr__(self) -> str:
        return f"Base64({self.config!r})"
