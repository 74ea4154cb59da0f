"""Zig-zag varint encoding and decoding.

This module provides the signed variable-length integers used by the message
index array. The byte layout matches Go's ``binary.PutVarint`` /
``binary.Varint`` and the Java/C# Schema Registry serializers: the signed
value is zig-zag mapped to an unsigned integer, which is then written
7 bits at a time, least significant group first, with the high bit of each
byte set when more bytes follow.
"""

from __future__ import annotations

MAX_VARINT_LEN = 10  # bytes needed for a 64-bit value

_INT64_MIN = -(1 << 63)
_INT64_MAX = (1 << 63) - 1


def zigzag_encode(value: int) -> int:
    """Map a signed 64-bit integer to an unsigned one.

    Small magnitudes map to small results: 0 -> 0, -1 -> 1, 1 -> 2, -2 -> 3.

    Args:
        value: Signed integer in the int64 range

    Returns:
        Unsigned zig-zag value

    Raises:
        ValueError: If value does not fit in a signed 64-bit integer
    """
    if value < _INT64_MIN or value > _INT64_MAX:
        raise ValueError(f"Value {value} does not fit in a signed 64-bit integer")

    if value < 0:
        return ((-value) << 1) - 1
    return value << 1


def zigzag_decode(value: int) -> int:
    """Inverse of zigzag_encode().

    Args:
        value: Unsigned zig-zag value

    Returns:
        Signed integer
    """
    return (value >> 1) ^ -(value & 1)


def encode_varint(value: int) -> bytes:
    """Encode a signed integer as a zig-zag varint.

    Args:
        value: Signed integer in the int64 range

    Returns:
        1 to 10 encoded bytes

    Raises:
        ValueError: If value does not fit in a signed 64-bit integer

    Example:
        >>> encode_varint(1)
        b'\\x02'
        >>> encode_varint(200)
        b'\\x90\\x03'
    """
    remaining = zigzag_encode(value)

    result = bytearray()
    while remaining >= 0x80:
        result.append((remaining & 0x7F) | 0x80)
        remaining >>= 7
    result.append(remaining)

    return bytes(result)


def decode_varint(data: bytes, offset: int = 0) -> tuple[int, int]:
    """Decode one zig-zag varint starting at offset.

    Args:
        data: Buffer to read from
        offset: Position of the first varint byte

    Returns:
        Tuple of (value, bytes_consumed)

    Raises:
        IndexError: If the buffer ends before the varint is terminated
        ValueError: If the varint overflows a 64-bit integer
    """
    unsigned = 0
    shift = 0

    for i in range(MAX_VARINT_LEN):
        position = offset + i
        if position >= len(data):
            raise IndexError(
                f"Truncated varint: buffer ended after {i} byte{'s' if i != 1 else ''}"
            )

        byte = data[position]
        if byte < 0x80:
            # The tenth byte may only carry the 64th bit
            if i == MAX_VARINT_LEN - 1 and byte > 1:
                raise ValueError("Varint overflows a 64-bit integer")
            unsigned |= byte << shift
            return zigzag_decode(unsigned), i + 1

        unsigned |= (byte & 0x7F) << shift
        shift += 7

    raise ValueError(f"Varint longer than {MAX_VARINT_LEN} bytes")
