"""Message index paths and the message index array header.

A schema file may declare several message types, nested to any depth. The
index path locates one of them: the position of its top-level ancestor among
the file's messages, followed by the position among ``nested_types`` at each
nesting level down to the message itself.

On the wire the path is written as a zig-zag varint element count followed by
the zig-zag varint elements. The path ``[0]`` (first top-level message) is
written as the single byte ``0x00``, an empty array, which readers interpret
as ``[0]``.
"""

from __future__ import annotations

from collections import deque
from typing import Sequence

from google.protobuf.descriptor import Descriptor

from ..exceptions import FormatError, SchemaError
from .varint import decode_varint, encode_varint

DEFAULT_INDEX_PATH = (0,)


def create_index_path(descriptor: Descriptor) -> list[int]:
    """Compute the index path of a message type within its schema file.

    Args:
        descriptor: Protobuf message descriptor

    Returns:
        Index path in root-to-leaf order

    Raises:
        SchemaError: If the descriptor cannot be found under its parent

    Example:
        >>> create_index_path(Outer.Inner.DESCRIPTOR)
        [0, 1]
    """
    path: deque[int] = deque()

    # Walk up the nested message tree, recording each child's position.
    current = descriptor
    while current.containing_type is not None:
        child = current
        current = child.containing_type
        for idx, node in enumerate(current.nested_types):
            if node.full_name == child.full_name:
                path.appendleft(idx)
                break
        else:
            raise SchemaError(f"Nested message {child.full_name} not found in {current.full_name}")

    for idx, name in enumerate(descriptor.file.message_types_by_name):
        if name == current.name:
            path.appendleft(idx)
            break
    else:
        raise SchemaError(f"Message {current.full_name} not found in file {descriptor.file.name}")

    return list(path)


def encode_index_array(path: Sequence[int]) -> bytes:
    """Encode an index path as a message index array header.

    Args:
        path: Index path (non-negative integers, root-to-leaf)

    Returns:
        Encoded header bytes

    Example:
        >>> encode_index_array([0])
        b'\\x00'
        >>> encode_index_array([1, 2, 3])
        b'\\x06\\x02\\x04\\x06'
    """
    if tuple(path) == DEFAULT_INDEX_PATH:
        # First top-level message: just 0
        return encode_varint(0)

    result = bytearray(encode_varint(len(path)))
    for index in path:
        result.extend(encode_varint(index))

    return bytes(result)


def decode_index_array(data: bytes, offset: int = 0) -> tuple[list[int], int]:
    """Decode a message index array header.

    Args:
        data: Buffer containing the header
        offset: Position of the first header byte

    Returns:
        Tuple of (index_path, bytes_consumed). An empty array decodes as [0].

    Raises:
        FormatError: If the array length is negative or any varint is
            truncated or overflows
    """
    try:
        length, consumed = decode_varint(data, offset)
    except (IndexError, ValueError) as e:
        raise FormatError(f"Unable to decode message index array: {e}") from e

    if length < 0:
        raise FormatError(f"Unable to decode message index array: negative length {length}")

    if length == 0:
        return list(DEFAULT_INDEX_PATH), consumed

    path: list[int] = []
    for i in range(length):
        try:
            index, read = decode_varint(data, offset + consumed)
        except (IndexError, ValueError) as e:
            raise FormatError(
                f"Unable to decode value in message index array (element {i}): {e}"
            ) from e
        consumed += read
        path.append(index)

    return path, consumed
