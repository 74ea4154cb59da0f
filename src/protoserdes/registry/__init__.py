"""Schema registry client abstraction layer.

This module provides a client-agnostic interface for schema registries,
enabling:

- **Testing without a registry service**: InMemoryRegistryClient
- **Any HTTP client**: wrap it in a RegistryClient adapter
- **Swappable backends**: switch clients without changing serializer code

## Quick Start

```python
from protoserdes import ProtobufSerializer, SerializationContext
from protoserdes.registry import InMemoryRegistryClient

registry = InMemoryRegistryClient()
serializer = ProtobufSerializer(Order, registry)
data = serializer(order, SerializationContext("orders"))
```
"""

from __future__ import annotations

from .client import RegisteredSchema, RegistryClient, SchemaReference, SchemaType
from .mock import InMemoryRegistryClient

__all__ = [
    "RegistryClient",
    "RegisteredSchema",
    "SchemaReference",
    "SchemaType",
    "InMemoryRegistryClient",
]
