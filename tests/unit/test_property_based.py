"""Property-based tests using hypothesis."""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from protoserdes.codec import decode_index_array, decode_varint, encode_index_array, encode_varint
from protoserdes.exceptions import FormatError
from protoserdes.framing import frame_message, unframe_message

index_paths = st.lists(st.integers(min_value=0, max_value=2**31 - 1), min_size=1, max_size=8)


class TestVarintProperties:
    """Property-based tests for varints."""

    @given(value=st.integers(min_value=-(2**63), max_value=2**63 - 1))
    def test_varint_roundtrip(self, value: int) -> None:
        """Test decode inverts encode and consumes every byte."""
        encoded = encode_varint(value)

        assert decode_varint(encoded) == (value, len(encoded))


class TestIndexArrayProperties:
    """Property-based tests for the message index array."""

    @given(path=index_paths)
    def test_index_array_roundtrip(self, path: list[int]) -> None:
        """Test decode inverts encode and consumes exactly the encoded bytes."""
        encoded = encode_index_array(path)
        decoded, consumed = decode_index_array(encoded + b"\xff\xff")

        assert decoded == path
        assert consumed == len(encoded)


class TestFramingProperties:
    """Property-based tests for framing."""

    @given(
        path=index_paths,
        schema_id=st.integers(min_value=0, max_value=2**32 - 1),
        payload=st.binary(max_size=200),
    )
    def test_frame_unframe_roundtrip(self, path: list[int], schema_id: int, payload: bytes) -> None:
        """Test framing round-trip."""
        framed = frame_message(payload, schema_id, encode_index_array(path))
        header, unframed = unframe_message(framed)

        assert unframed == payload
        assert header.schema_id == schema_id
        assert list(header.index_path) == path

    @given(first=st.integers(min_value=1, max_value=255), rest=st.binary(min_size=5, max_size=50))
    def test_nonzero_magic_byte_rejected(self, first: int, rest: bytes) -> None:
        """Test any nonzero first byte is rejected regardless of content."""
        with pytest.raises(FormatError, match="magic byte"):
            unframe_message(bytes([first]) + rest)

    @given(data=st.binary(max_size=5))
    def test_short_frames_rejected(self, data: bytes) -> None:
        """Test frames shorter than six bytes are rejected as too small."""
        with pytest.raises(FormatError, match="too small"):
            unframe_message(data)
