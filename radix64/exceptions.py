"""Exception classes for radix64.

This module defines custom exception types used throughout the radix64 library.
"""

from __future__ import annotations


class Radix64Error(Exception):
    """Base exception class for all radix64 errors."""

    pass


class ConfigurationError(Radix64Error):
    """Exception raised when an encoding configuration is invalid."""

    pass


class DecodeError(Radix64Error):
    """Base exception for input that cannot be decoded."""

    pass


class InvalidByteError(DecodeError):
    """Exception raised when the input contains a character outside the format.

    Attributes:
        byte: The value of the offending byte (or code point for text input).
        position: Zero-based index of the offending byte in the input.
    """

    def __init__(self, byte: int, position: int) -> None:
        super().__init__(byte, position)
        self.byte = byte
        self.position = position

    def __str__(self) -> str:
        return f"Invalid character '{self.byte}' at position {self.position}"


class InvalidLengthError(DecodeError):
    """Exception raised when the data characters leave an undecodable group."""

    def __str__(self) -> str:
        return "Invalid length"
