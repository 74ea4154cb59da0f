"""In-memory schema registry for testing without a registry service.

This module provides InMemoryRegistryClient, which mimics the observable
behaviour of a Schema Registry:

- Schema IDs are global: identical schema documents share one ID across subjects
- Versions are per subject, starting at 1
- Registration is idempotent
- Unknown subjects and schemas raise SchemaNotFoundError
"""

from __future__ import annotations

import logging
import threading
from collections import Counter
from typing import Sequence

from ..exceptions import SchemaNotFoundError
from .client import RegisteredSchema, RegistryClient, SchemaReference, SchemaType

logger = logging.getLogger(__name__)

_SchemaKey = tuple[str, SchemaType, tuple[SchemaReference, ...]]


class InMemoryRegistryClient(RegistryClient):
    """Schema registry held in process memory.

    Perfect for unit tests and offline development: the serializer talks to it
    exactly as it would to a real registry client, and ``calls`` records how
    many times each operation was invoked.

    Attributes:
        calls: Counter of operation names ("register_schema", "lookup_schema",
            "get_latest_schema")
        requests: (operation, subject) pairs in call order

    Examples:
        ```python
        from protoserdes import ProtobufSerializer, SerializationContext
        from protoserdes.registry import InMemoryRegistryClient

        registry = InMemoryRegistryClient()
        serializer = ProtobufSerializer(Order, registry)
        data = serializer(order, SerializationContext("orders"))

        assert registry.calls["register_schema"] == 1
        ```
    """

    def __init__(self) -> None:
        self.calls: Counter[str] = Counter()
        self.requests: list[tuple[str, str]] = []
        self._lock = threading.Lock()
        self._next_id = 1
        self._ids: dict[_SchemaKey, int] = {}
        self._subjects: dict[str, list[RegisteredSchema]] = {}

    def register_schema(
        self,
        subject: str,
        schema_str: str,
        schema_type: SchemaType,
        references: Sequence[SchemaReference],
    ) -> RegisteredSchema:
        """Register a schema under subject (idempotent)."""
        key = (schema_str, SchemaType(schema_type), tuple(references))

        with self._lock:
            self.calls["register_schema"] += 1
            self.requests.append(("register_schema", subject))

            existing = self._find(subject, key)
            if existing is not None:
                return existing

            schema_id = self._ids.get(key)
            if schema_id is None:
                schema_id = self._next_id
                self._next_id += 1
                self._ids[key] = schema_id

            versions = self._subjects.setdefault(subject, [])
            schema = RegisteredSchema(
                schema_id=schema_id,
                version=len(versions) + 1,
                subject=subject,
                schema_str=schema_str,
                schema_type=key[1],
                references=key[2],
            )
            versions.append(schema)

        logger.debug(
            "Schema registered.",
            extra={"subject": subject, "schema_id": schema.schema_id, "version": schema.version},
        )
        return schema

    def lookup_schema(
        self,
        subject: str,
        schema_str: str,
        schema_type: SchemaType,
        references: Sequence[SchemaReference],
    ) -> RegisteredSchema:
        """Find a schema registered under subject."""
        key = (schema_str, SchemaType(schema_type), tuple(references))

        with self._lock:
            self.calls["lookup_schema"] += 1
            self.requests.append(("lookup_schema", subject))

            if subject not in self._subjects:
                raise SchemaNotFoundError(f"Subject '{subject}' not found")

            existing = self._find(subject, key)
            if existing is None:
                raise SchemaNotFoundError(f"Schema not found under subject '{subject}'")

            return existing

    def get_latest_schema(self, subject: str) -> RegisteredSchema:
        """Fetch the latest schema registered under subject."""
        with self._lock:
            self.calls["get_latest_schema"] += 1
            self.requests.append(("get_latest_schema", subject))

            versions = self._subjects.get(subject)
            if not versions:
                raise SchemaNotFoundError(f"Subject '{subject}' not found")

            return versions[-1]

    def subjects(self) -> list[str]:
        """Return all registered subjects, sorted."""
        with self._lock:
            return sorted(self._subjects)

    def _find(self, subject: str, key: _SchemaKey) -> RegisteredSchema | None:
        for schema in self._subjects.get(subject, []):
            if (schema.schema_str, schema.schema_type, schema.references) == key:
                return schema
        return None
