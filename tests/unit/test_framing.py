"""Unit tests for wire format framing."""

from __future__ import annotations

import pytest

from protoserdes.exceptions import FormatError
from protoserdes.framing import MAGIC_BYTE, WireHeader, frame_message, unframe_message


class TestFrameMessage:
    """Test wire header construction."""

    def test_frame_layout(self) -> None:
        """Test magic byte, big-endian schema ID, index array, payload."""
        framed = frame_message(b"payload", 0x01020304, b"\x02\x04")

        assert framed == b"\x00\x01\x02\x03\x04\x02\x04payload"

    def test_frame_empty_payload(self) -> None:
        """Test framing an empty payload (default protobuf message)."""
        framed = frame_message(b"", 0, b"\x02\x04")

        assert framed == bytes([0, 0, 0, 0, 0, 2, 4])

    def test_schema_id_bounds(self) -> None:
        """Test schema ID bounds checking."""
        frame_message(b"", 0, b"\x00")
        frame_message(b"", 0xFFFFFFFF, b"\x00")

        with pytest.raises(ValueError, match="Schema ID must be"):
            frame_message(b"", -1, b"\x00")

        with pytest.raises(ValueError, match="Schema ID must be"):
            frame_message(b"", 1 << 32, b"\x00")


class TestUnframeMessage:
    """Test wire header validation and stripping."""

    @pytest.mark.parametrize(
        ("header_bytes", "index_path"),
        [
            (b"\x00\x00\x00\x00\x00\x00", (0,)),
            (b"\x00\x00\x00\x00\x00\x02\x02", (1,)),
            (b"\x00\x00\x00\x00\x00\x02\x04", (2,)),
            (b"\x00\x00\x00\x00\x00\x04\x00\x00", (0, 0)),
            (b"\x00\x00\x00\x00\x00\x04\x00\x04", (0, 2)),
            (b"\x00\x00\x00\x00\x00\x04\x04\x04", (2, 2)),
            (b"\x00\x00\x00\x00\x00\x06\x02\x04\x06", (1, 2, 3)),
            (b"\x00\x00\x00\x00\x00\x04\x02\x90\x03", (1, 200)),
        ],
    )
    def test_payload_recovered(
        self, header_bytes: bytes, index_path: tuple[int, ...], sample_payload: bytes
    ) -> None:
        """Test the payload starts right after the index array."""
        header, payload = unframe_message(header_bytes + sample_payload)

        assert payload == sample_payload
        assert header.index_path == index_path
        assert header.payload_offset == len(header_bytes)
        assert header.schema_id == 0

    def test_schema_id_decoded(self) -> None:
        """Test the schema ID is read big-endian."""
        header, payload = unframe_message(b"\x00\x00\x00\x01\x00\x00rest")

        assert header == WireHeader(schema_id=256, index_path=(0,), payload_offset=6)
        assert payload == b"rest"

    def test_header_only(self) -> None:
        """Test a frame with an empty payload."""
        header, payload = unframe_message(b"\x00\x00\x00\x00\x07\x00")

        assert header.schema_id == 7
        assert payload == b""


class TestUnframeErrors:
    """Test malformed wire headers."""

    def test_too_small(self) -> None:
        """Test frames shorter than six bytes."""
        for data in (b"", b"\x00", b"\x00\x00\x00\x00\x00"):
            with pytest.raises(FormatError, match="too small"):
                unframe_message(data)

    def test_too_small_checked_before_magic(self) -> None:
        """Test the size check runs before the magic byte check."""
        with pytest.raises(FormatError, match="too small"):
            unframe_message(b"\x01\x00")

    def test_unknown_magic_byte(self) -> None:
        """Test a nonzero first byte."""
        with pytest.raises(FormatError, match="magic byte"):
            unframe_message(b"\x01\x00\x00\x00\x00\x00")

    def test_message_index_length_only(self) -> None:
        """Test an array length without the values."""
        with pytest.raises(FormatError, match="Unable to decode value in message index array"):
            unframe_message(b"\x00\x00\x00\x00\x00\x02")

    def test_message_index_missing_byte(self) -> None:
        """Test an array with fewer values than its length."""
        with pytest.raises(FormatError, match="Unable to decode value in message index array"):
            unframe_message(b"\x00\x00\x00\x00\x00\x04\x00")

    def test_invalid_array_length(self) -> None:
        """Test a negative array length."""
        with pytest.raises(FormatError, match="Unable to decode message index array"):
            unframe_message(b"\x00\x00\x00\x00\x00\x03\x00")

    def test_truncated_array_length(self) -> None:
        """Test an array length varint running off the end."""
        with pytest.raises(FormatError, match="Unable to decode message index array"):
            unframe_message(b"\x00\x00\x00\x00\x00\xfe\xfe")

    def test_magic_byte_constant(self) -> None:
        """Test the magic byte is zero."""
        assert MAGIC_BYTE == 0
