"""Wire codec for protoserdes.

This module provides the zig-zag varints and the message index array used in
the Schema Registry wire format header.
"""

from __future__ import annotations

from .index import create_index_path, decode_index_array, encode_index_array
from .varint import decode_varint, encode_varint, zigzag_decode, zigzag_encode

__all__ = [
    "create_index_path",
    "encode_index_array",
    "decode_index_array",
    "encode_varint",
    "decode_varint",
    "zigzag_encode",
    "zigzag_decode",
]
