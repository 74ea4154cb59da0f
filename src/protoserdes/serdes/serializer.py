"""Protobuf serializer with Schema Registry framing.

This module provides ProtobufSerializer, which encodes protobuf messages and
prepends the wire format header: magic byte, schema ID and the message index
array locating the message type within its schema file.
"""

from __future__ import annotations

from typing import Any, Generic, Mapping, Optional, TypeVar

from google.protobuf.message import Message

from ..codec.index import create_index_path, encode_index_array
from ..config import SerializerConfig
from ..framing.basic import frame_message
from ..naming import SerializationContext
from ..registry.client import RegistryClient
from .resolver import SchemaResolver

M = TypeVar("M", bound=Message)


class ProtobufSerializer(Generic[M]):
    """Serializer for one protobuf message type.

    The message index array is computed once at construction, since it is
    fixed for a message type. The schema ID is resolved per call (it depends
    on the serialization context) and cached per subject.

    Configuration properties:

    +-------------------------------------+----------+--------------------------------------+
    | Property Name                       | Type     | Default                              |
    +=====================================+==========+======================================+
    | ``auto.register.schemas``           | bool     | True                                 |
    | ``use.latest.version``              | bool     | False                                |
    | ``skip.known.types``                | bool     | False                                |
    | ``subject.name.strategy``           | str/func | "topic"                              |
    | ``reference.subject.name.strategy`` | str/func | "reference-path"                     |
    +-------------------------------------+----------+--------------------------------------+

    Args:
        message_class: Generated protobuf message class
        registry: Registry client
        config: SerializerConfig, dotted-key mapping, or None for defaults

    Raises:
        ConfigurationError: If config is invalid
        SchemaError: If the message type cannot be located in its file

    Examples:
        ```python
        from protoserdes import ProtobufSerializer, SerializationContext
        from protoserdes.registry import InMemoryRegistryClient

        serializer = ProtobufSerializer(Order, InMemoryRegistryClient())
        data = serializer(Order(id=7), SerializationContext("orders"))
        ```
    """

    def __init__(
        self,
        message_class: type[M],
        registry: RegistryClient,
        config: SerializerConfig | Mapping[str, Any] | None = None,
    ) -> None:
        self.message_class = message_class
        self.resolver = SchemaResolver(registry, config)
        self.index_path = create_index_path(message_class.DESCRIPTOR)
        self.index_bytes = encode_index_array(self.index_path)

    def serialize(self, message: Optional[M], ctx: SerializationContext) -> Optional[bytes]:
        """Encode a message in the Schema Registry wire format.

        Args:
            message: Message to encode, or None (passed through as None)
            ctx: Serialization context (topic and message field)

        Returns:
            Framed message bytes

        Raises:
            TypeError: If message is not an instance of the bound message class
            RegistryError: If the schema ID cannot be resolved
            google.protobuf.message.EncodeError: If the message cannot be encoded
        """
        if message is None:
            return None

        if not isinstance(message, self.message_class):
            raise TypeError(
                f"message must be of type {self.message_class.__name__}, "
                f"got {type(message).__name__}"
            )

        schema_id = self.resolver.resolve_schema_id(ctx, message.DESCRIPTOR)
        payload = message.SerializeToString()

        return frame_message(payload, schema_id, self.index_bytes)

    def __call__(self, message: Optional[M], ctx: SerializationContext) -> Optional[bytes]:
        return self.serialize(message, ctx)
