"""Encoding configuration for radix64.

This module defines the Config value object passed to every encode call,
the newline styles used for line wrapping, and the three named presets.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from enum import Enum
from typing import Any

from radix64.alphabet import CharacterSet
from radix64.exceptions import ConfigurationError


class Newline(Enum):
    """Available newline types.

    The value of each member is the sequence written between wrapped lines.
    """

    LF = "\n"
    CRLF = "\r\n"

    @property
    def sequence(self) -> str:
        """The newline characters as text."""
        return self.value


@dataclass(frozen=True)
class Config:
    """Configuration parameters for encoding.

    Attributes:
        char_set: Character set to encode with.
        newline: Newline written between lines, only used when wrapping.
        pad: True to pad output with ``=`` characters.
        line_length: Wrap lines after this many characters, or None to
            disable line wrapping.

    Raises:
        ConfigurationError: If line_length is not a positive integer.
    """

    char_set: CharacterSet = CharacterSet.STANDARD
    newline: Newline = Newline.CRLF
    pad: bool = True
    line_length: int | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.char_set, CharacterSet):
            raise ConfigurationError(f"unknown character set: {self.char_set!r}")
        if not isinstance(self.newline, Newline):
            raise ConfigurationError(f"unknown newline: {self.newline!r}")
        if self.line_length is not None:
            # bool is an int subclass
            if isinstance(self.line_length, bool) or not isinstance(self.line_length, int):
                raise ConfigurationError(
                    f"line_length must be an integer, got {type(self.line_length).__name__}"
                )
            if self.line_length < 1:
                raise ConfigurationError(f"line_length must be at least 1, got {self.line_length}")

    def replace(self, **changes: Any) -> Config:
        """Return a copy of this configuration with some fields changed.

        Args:
            **changes: Field names and their new values.

        Returns:
            A new Config. The original is left untouched.

        Example:
            >>> STANDARD.replace(pad=False).pad
            False
        """
        return dataclasses.replace(self, **changes)


# RFC 4648 standard base64
STANDARD = Config(char_set=CharacterSet.STANDARD, newline=Newline.CRLF, pad=True, line_length=None)

# RFC 4648 base64url
URL_SAFE = Config(char_set=CharacterSet.URL_SAFE, newline=Newline.CRLF, pad=False, line_length=None)

# RFC 2045 MIME base64
MIME = Config(char_set=CharacterSet.STANDARD, newline=Newline.CRLF, pad=True, line_length=76)
