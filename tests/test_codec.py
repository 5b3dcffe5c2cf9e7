"""Round-trip tests for the Base64 codec.

This module checks that decoding undoes encoding for every combination of
alphabet, newline, padding and line length.
"""

from __future__ import annotations

import pickle

import pytest
from hypothesis import given, strategies as st

from radix64 import (
    MIME,
    STANDARD,
    URL_SAFE,
    Base64,
    CharacterSet,
    Config,
    InvalidByteError,
    InvalidLengthError,
    Newline,
    decode,
    encode,
)

configs = st.builds(
    Config,
    st.sampled_from(CharacterSet),
    st.sampled_from(Newline),
    st.booleans(),
    st.none() | st.integers(min_value=1, max_value=100),
)


@given(data=st.binary(max_size=512), config=configs)
def test_round_trip(data: bytes, config: Config) -> None:
    """Test that decode(encode(v)) == v for any bytes and any configuration."""
    assert decode(encode(data, config)) == data


@given(data=st.binary(min_size=1, max_size=99))
def test_round_trip_standard(data: bytes) -> None:
    """Test random payloads under the standard configuration."""
    assert decode(encode(data, STANDARD)) == data


def test_round_trip_all_byte_values() -> None:
    """Test that every byte value survives the MIME configuration."""
    data = bytes(range(256)) * 4
    assert decode(encode(data, MIME)) == data


def test_codec_presets() -> None:
    """Test the preset constructors."""
    assert Base64().config is STANDARD
    assert Base64.standard().config is STANDARD
    assert Base64.url_safe().config is URL_SAFE
    assert Base64.mime().config is MIME


def test_codec_encode_uses_bound_config() -> None:
    """Test that encode follows the codec's configuration."""
    assert Base64.standard().encode(bytes([251, 255])) == "+/8="
    assert Base64.url_safe().encode(bytes([251, 255])) == "-_8"
    assert Base64(STANDARD.replace(line_length=4)).encode(b"foobar") == "Zm9v\r\nYmFy"


def test_codec_decode_accepts_any_variant() -> None:
    """Test that decode does not depend on the codec's configuration."""
    codec = Base64.mime()

    assert codec.decode("-_8") == bytes([251, 255])
    assert codec.decode(b"Zm9v\nYmFy") == b"foobar"


def test_codec_repr() -> None:
    """Test the codec representation names its configuration."""
    assert repr(Base64.url_safe()).startswith("Base64(Config(")


def test_decode_errors_pickle() -> None:
    """Test that decode errors survive pickling, e.g. across process pools."""
    error = pickle.loads(pickle.dumps(InvalidByteError(36, 2)))
    assert isinstance(error, InvalidByteError)
    assert error.byte == 36
    assert error.position == 2
    assert str(error) == "Invalid character '36' at position 2"

    error = pickle.loads(pickle.dumps(InvalidLengthError()))
    assert isinstance(error, InvalidLengthError)
    assert str(error) == "Invalid length"


def test_raised_decode_error_pickles() -> None:
    """Test that an error raised by decode round-trips through pickle."""
    with pytest.raises(InvalidByteError) as exc_info:
        decode("Zm9v\r\n$")

    error = pickle.loads(pickle.dumps(exc_info.value))
    assert (error.byte, error.position) == (ord("$"), 6)
