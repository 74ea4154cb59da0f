#!/usr/bin/env python3
"""Basic usage example for protoserdes.

This example demonstrates:
1. Serializing a protobuf message in the Schema Registry wire format
2. Inspecting the wire header
3. Deserializing back to the message type
"""

from __future__ import annotations

from google.protobuf.timestamp_pb2 import Timestamp

from protoserdes import (
    ProtobufDeserializer,
    ProtobufSerializer,
    SerializationContext,
    unframe_message,
)
from protoserdes.registry import InMemoryRegistryClient


def main() -> None:
    """Run the basic usage example."""
    print("=" * 60)
    print("protoserdes Basic Usage Example")
    print("=" * 60)
    print()

    registry = InMemoryRegistryClient()
    serializer = ProtobufSerializer(Timestamp, registry)
    deserializer = ProtobufDeserializer(Timestamp)
    ctx = SerializationContext("events")

    print("1. Serializing a Timestamp for topic 'events'...")
    msg = Timestamp(seconds=1_700_000_000, nanos=250)
    data = serializer(msg, ctx)
    assert data is not None
    print(f"   Framed size: {len(data)} bytes")
    print(f"   Hex: {data.hex()}")
    print(f"   Registered subjects: {registry.subjects()}")
    print()

    print("2. Inspecting the wire header...")
    header, payload = unframe_message(data)
    print(f"   Schema ID: {header.schema_id}")
    print(f"   Message index: {list(header.index_path)}")
    print(f"   Payload: {len(payload)} bytes")
    print()

    print("3. Deserializing...")
    decoded = deserializer(data)
    print(f"   Round-trip successful: {decoded == msg}")
    print()


if __name__ == "__main__":
    main()
