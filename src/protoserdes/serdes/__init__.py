"""Protobuf serializer and deserializer with Schema Registry framing."""

from __future__ import annotations

from .deserializer import ProtobufDeserializer
from .resolver import SchemaResolver, file_descriptor_to_schema_str
from .serializer import ProtobufSerializer

__all__ = [
    "ProtobufSerializer",
    "ProtobufDeserializer",
    "SchemaResolver",
    "file_descriptor_to_schema_str",
]
