"""Protobuf deserializer for Schema Registry framed messages."""

from __future__ import annotations

from typing import Generic, Optional, TypeVar

from google.protobuf.message import Message

from ..framing.basic import WireHeader, unframe_message

M = TypeVar("M", bound=Message)


class ProtobufDeserializer(Generic[M]):
    """Deserializer for one protobuf message type.

    Protobuf payloads are self-describing once the target type is known, so no
    registry is consulted: the header is validated and skipped, and the
    payload is decoded into message_class.

    Examples:
        ```python
        from protoserdes import ProtobufDeserializer

        deserializer = ProtobufDeserializer(Order)
        order = deserializer(kafka_message.value())
        ```
    """

    def __init__(self, message_class: type[M]) -> None:
        self.message_class = message_class

    def deserialize(self, data: Optional[bytes]) -> Optional[M]:
        """Decode a framed message.

        Args:
            data: Framed message bytes, or None (passed through as None)

        Returns:
            Decoded message

        Raises:
            FormatError: If the wire header is malformed
            google.protobuf.message.DecodeError: If the payload cannot be decoded
        """
        if data is None:
            return None

        _, message = self.deserialize_with_header(data)
        return message

    def deserialize_with_header(self, data: bytes) -> tuple[WireHeader, M]:
        """Decode a framed message and return its header as well.

        Args:
            data: Framed message bytes

        Returns:
            Tuple of (header, message)

        Raises:
            FormatError: If the wire header is malformed
            google.protobuf.message.DecodeError: If the payload cannot be decoded
        """
        header, payload = unframe_message(data)
        return header, self.message_class.FromString(payload)

    def __call__(self, data: Optional[bytes]) -> Optional[M]:
        return self.deserialize(data)
