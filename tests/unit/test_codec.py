"""
Unit tests for the base64 body codec.
"""

import binascii

import pytest

from interceptchain.codec import DecodeError, decode, encode
from interceptchain.errors import InterceptorError


class TestEncode:
    """Tests for encode()."""

    def test_encode_text(self):
        """Test standard alphabet with padding."""
        assert encode("GET_USER") == "R0VUX1VTRVI="
        assert encode("John") == "Sm9obg=="

    def test_encode_preserves_type(self):
        """Test bytes in, bytes out."""
        assert encode(b"GET_USER") == b"R0VUX1VTRVI="

    def test_encode_empty(self):
        """Test that an empty body encodes to an empty body."""
        assert encode("") == ""
        assert encode(b"") == b""


class TestDecode:
    """Tests for decode()."""

    @pytest.mark.parametrize("value", ["sample", "", "héllo wörld", b"\x00\xffraw"])
    def test_round_trip(self, value):
        """Test decode(encode(x)) == x."""
        assert decode(encode(value)) == value

    def test_invalid_character(self):
        """Test that characters outside the alphabet are rejected."""
        with pytest.raises(DecodeError) as exc_info:
            decode("GET_USER")

        assert exc_info.value.data == "GET_USER"
        assert isinstance(exc_info.value.__cause__, binascii.Error)

    def test_bad_padding(self):
        """Test that unpadded input is rejected."""
        with pytest.raises(DecodeError):
            decode("Sample")

    def test_not_utf8(self):
        """Test that decoded bytes must be UTF-8 for a text body."""
        with pytest.raises(DecodeError, match="UTF-8"):
            decode(encode(b"\xff\xfe").decode("ascii"))

    def test_non_ascii_input(self):
        """Test that non-ASCII text is a decode error, not a crash."""
        with pytest.raises(DecodeError):
            decode("ñññ=")

    def test_error_hierarchy(self):
        """Test DecodeError is both an InterceptorError and a ValueError."""
        assert issubclass(DecodeError, InterceptorError)
        assert issubclass(DecodeError, ValueError)
