"""Schema Registry wire format framing.

The frame structure is:
- [Magic byte (1 byte, 0x00)] [Schema ID (4 bytes, big-endian)]
  [Message index array (varint, variable)] [Payload]
"""

from __future__ import annotations

import struct
from dataclasses import dataclass

from ..codec.index import decode_index_array
from ..exceptions import FormatError

MAGIC_BYTE = 0
WIRE_PREFIX_LEN = 5  # magic byte + schema ID
MIN_FRAME_LEN = WIRE_PREFIX_LEN + 1  # at least one index array byte

_SCHEMA_ID_MAX = 0xFFFFFFFF


@dataclass(frozen=True)
class WireHeader:
    """Decoded wire format header.

    Attributes:
        schema_id: Registry-assigned schema ID
        index_path: Message index path (root-to-leaf)
        payload_offset: Offset of the first payload byte in the frame
    """

    schema_id: int
    index_path: tuple[int, ...]
    payload_offset: int


def frame_message(payload: bytes, schema_id: int, index_bytes: bytes) -> bytes:
    """Prepend the wire format header to an encoded payload.

    Args:
        payload: Encoded protobuf message
        schema_id: Registry-assigned schema ID (0 to 2**32 - 1)
        index_bytes: Encoded message index array (see encode_index_array)

    Returns:
        Framed message

    Raises:
        ValueError: If schema_id is out of range

    Example:
        >>> frame_message(b"", 1, b"\\x00")
        b'\\x00\\x00\\x00\\x00\\x01\\x00'
    """
    if not 0 <= schema_id <= _SCHEMA_ID_MAX:
        raise ValueError(f"Schema ID must be 0-{_SCHEMA_ID_MAX}, got {schema_id}")

    result = bytearray()
    result.append(MAGIC_BYTE)
    result.extend(struct.pack(">I", schema_id))
    result.extend(index_bytes)
    result.extend(payload)

    return bytes(result)


def unframe_message(framed: bytes) -> tuple[WireHeader, bytes]:
    """Validate and strip the wire format header.

    Args:
        framed: Framed message

    Returns:
        Tuple of (header, payload)

    Raises:
        FormatError: If the frame is too small, has an unknown magic byte,
            or carries a malformed message index array

    Example:
        >>> header, payload = unframe_message(b"\\x00\\x00\\x00\\x00\\x07\\x02\\x04hi")
        >>> header.schema_id, header.index_path, payload
        (7, (2,), b'hi')
    """
    if len(framed) < MIN_FRAME_LEN:
        raise FormatError(
            f"Message too small ({len(framed)} bytes). This message was not produced "
            f"with a Confluent Schema Registry serializer"
        )

    if framed[0] != MAGIC_BYTE:
        raise FormatError(
            f"Unknown magic byte {framed[0]:#04x}. This message was not produced "
            f"with a Confluent Schema Registry serializer"
        )

    schema_id = struct.unpack(">I", framed[1:WIRE_PREFIX_LEN])[0]

    index_path, consumed = decode_index_array(framed, WIRE_PREFIX_LEN)
    payload_offset = WIRE_PREFIX_LEN + consumed

    header = WireHeader(
        schema_id=schema_id,
        index_path=tuple(index_path),
        payload_offset=payload_offset,
    )
    return header, framed[payload_offset:]
