"""Unit tests for zig-zag varint utilities."""

from __future__ import annotations

import pytest

from protoserdes.codec.varint import decode_varint, encode_varint, zigzag_decode, zigzag_encode


class TestZigZag:
    """Test zig-zag mapping."""

    def test_small_values(self) -> None:
        """Test that small magnitudes map to small values."""
        assert zigzag_encode(0) == 0
        assert zigzag_encode(-1) == 1
        assert zigzag_encode(1) == 2
        assert zigzag_encode(-2) == 3
        assert zigzag_encode(2) == 4

    def test_int64_limits(self) -> None:
        """Test the extremes of the int64 range."""
        assert zigzag_encode((1 << 63) - 1) == (1 << 64) - 2
        assert zigzag_encode(-(1 << 63)) == (1 << 64) - 1

    def test_out_of_range(self) -> None:
        """Test values outside int64 are rejected."""
        with pytest.raises(ValueError, match="64-bit"):
            zigzag_encode(1 << 63)

        with pytest.raises(ValueError, match="64-bit"):
            zigzag_encode(-(1 << 63) - 1)

    def test_decode_inverts_encode(self) -> None:
        """Test zigzag_decode() inverts zigzag_encode()."""
        for value in (0, 1, -1, 63, -64, 1000, -1000, (1 << 63) - 1, -(1 << 63)):
            assert zigzag_decode(zigzag_encode(value)) == value


class TestEncodeVarint:
    """Test varint encoding."""

    def test_single_byte(self) -> None:
        """Test values that fit in one byte."""
        assert encode_varint(0) == b"\x00"
        assert encode_varint(1) == b"\x02"
        assert encode_varint(-1) == b"\x01"
        assert encode_varint(63) == b"\x7e"
        assert encode_varint(-64) == b"\x7f"

    def test_multi_byte(self) -> None:
        """Test values needing continuation bytes."""
        assert encode_varint(64) == b"\x80\x01"
        assert encode_varint(200) == b"\x90\x03"

    def test_max_length(self) -> None:
        """Test the largest values use 10 bytes."""
        assert len(encode_varint(-(1 << 63))) == 10
        assert len(encode_varint((1 << 63) - 1)) == 10


class TestDecodeVarint:
    """Test varint decoding."""

    def test_decode_with_offset(self) -> None:
        """Test decoding from the middle of a buffer."""
        data = b"\xff\xff\x90\x03\x02"

        assert decode_varint(data, 2) == (200, 2)
        assert decode_varint(data, 4) == (1, 1)

    def test_negative_value(self) -> None:
        """Test odd zig-zag values decode as negative."""
        assert decode_varint(b"\x03") == (-2, 1)

    def test_truncated(self) -> None:
        """Test a buffer ending inside a varint."""
        with pytest.raises(IndexError, match="Truncated"):
            decode_varint(b"\xfe\xfe")

        with pytest.raises(IndexError, match="Truncated"):
            decode_varint(b"")

    def test_overflow_tenth_byte(self) -> None:
        """Test the tenth byte may only carry one bit."""
        data = b"\xff" * 9 + b"\x02"

        with pytest.raises(ValueError, match="overflows"):
            decode_varint(data)

    def test_overflow_too_long(self) -> None:
        """Test varints longer than 10 bytes."""
        with pytest.raises(ValueError, match="longer than"):
            decode_varint(b"\x80" * 11)

    def test_int64_limits_round_trip(self) -> None:
        """Test the extremes of the int64 range survive a round trip."""
        for value in ((1 << 63) - 1, -(1 << 63)):
            assert decode_varint(encode_varint(value)) == (value, 10)
