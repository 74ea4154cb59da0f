"""protoserdes: Confluent Schema Registry wire format for Protocol Buffers

A Python library for framing protobuf messages the way Schema Registry aware
Kafka producers and consumers expect: a magic byte, the registry-assigned
schema ID, and a message index array locating the message type within its
schema file, followed by the protobuf payload.

Key Features:
- Byte-exact wire format compatible with the Java, Go and C# serializers
- Schema ID resolution with per-subject caching
- Recursive registration of imported schema files as references
- Pluggable subject naming strategies
- Pydantic-validated configuration

Quick Start:
    >>> from protoserdes import ProtobufDeserializer, ProtobufSerializer, SerializationContext
    >>> from protoserdes.registry import InMemoryRegistryClient
    >>>
    >>> serializer = ProtobufSerializer(Order, InMemoryRegistryClient())
    >>> data = serializer(Order(id=7), SerializationContext("orders"))
    >>> order = ProtobufDeserializer(Order)(data)
"""

from __future__ import annotations

from .codec import create_index_path, decode_index_array, encode_index_array
from .config import SerializerConfig
from .exceptions import (
    ConfigurationError,
    FormatError,
    ProtoserdesError,
    RegistryError,
    SchemaError,
    SchemaNotFoundError,
)
from .framing import MAGIC_BYTE, WireHeader, frame_message, unframe_message
from .naming import (
    MessageField,
    ReferenceSubjectNameStrategy,
    SerializationContext,
    SubjectNameStrategy,
)
from .serdes import ProtobufDeserializer, ProtobufSerializer, SchemaResolver

__version__ = "0.1.0"

__all__ = [
    # Core API
    "ProtobufSerializer",
    "ProtobufDeserializer",
    "SchemaResolver",
    "SerializerConfig",
    # Naming
    "SerializationContext",
    "MessageField",
    "SubjectNameStrategy",
    "ReferenceSubjectNameStrategy",
    # Wire codec
    "create_index_path",
    "encode_index_array",
    "decode_index_array",
    "MAGIC_BYTE",
    "WireHeader",
    "frame_message",
    "unframe_message",
    # Exceptions
    "ProtoserdesError",
    "FormatError",
    "ConfigurationError",
    "SchemaError",
    "RegistryError",
    "SchemaNotFoundError",
    # Version
    "__version__",
]
