"""Abstract interface for schema registry clients.

The serializer only needs three registry operations: register a schema under a
subject, look up a schema already registered under a subject, and fetch the
latest schema of a subject. This module defines that narrow interface so any
client (the HTTP client of a Kafka library, a caching wrapper, or the
in-memory registry used for testing) can be plugged in.

Design Pattern: Adapter Pattern
- RegistryClient: Abstract interface
- InMemoryRegistryClient: In-process implementation (testing, offline development)
"""

from __future__ import annotations

import enum
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Sequence


class SchemaType(str, enum.Enum):
    """Schema formats known to the registry."""

    PROTOBUF = "PROTOBUF"
    AVRO = "AVRO"
    JSON = "JSON"


@dataclass(frozen=True)
class SchemaReference:
    """Reference from a schema to another registered schema.

    Attributes:
        name: Import path used by the referencing schema (e.g. ``common/money.proto``)
        subject: Subject the referenced schema is registered under
        version: Version of the referenced schema under that subject
    """

    name: str
    subject: str
    version: int


@dataclass(frozen=True)
class RegisteredSchema:
    """A schema as stored by the registry.

    Attributes:
        schema_id: Registry-assigned schema ID (embedded in the wire header)
        version: Version of the schema under subject
        subject: Subject the schema is registered under
        schema_str: Schema document
        schema_type: Schema format
        references: Schemas this schema depends on
    """

    schema_id: int
    version: int
    subject: str
    schema_str: str
    schema_type: SchemaType = SchemaType.PROTOBUF
    references: tuple[SchemaReference, ...] = field(default_factory=tuple)


class RegistryClient(ABC):
    """Abstract interface for schema registry clients.

    Implementations raise RegistryError (or their own transport errors) on
    failure; the serializer propagates them unchanged.

    Examples:
        ```python
        from protoserdes.registry import InMemoryRegistryClient, SchemaType

        registry = InMemoryRegistryClient()
        schema = registry.register_schema("orders-value", schema_str, SchemaType.PROTOBUF, [])
        print(schema.schema_id, schema.version)
        ```
    """

    @abstractmethod
    def register_schema(
        self,
        subject: str,
        schema_str: str,
        schema_type: SchemaType,
        references: Sequence[SchemaReference],
    ) -> RegisteredSchema:
        """Register a schema under subject.

        Registration is idempotent: registering the same schema (and
        references) again returns the existing ID and version.

        Args:
            subject: Subject to register under
            schema_str: Schema document
            schema_type: Schema format
            references: Schemas the document depends on

        Returns:
            The registered schema

        Raises:
            RegistryError: If registration fails
        """
        pass

    @abstractmethod
    def lookup_schema(
        self,
        subject: str,
        schema_str: str,
        schema_type: SchemaType,
        references: Sequence[SchemaReference],
    ) -> RegisteredSchema:
        """Find a schema already registered under subject.

        Args:
            subject: Subject to search
            schema_str: Schema document
            schema_type: Schema format
            references: Schemas the document depends on

        Returns:
            The registered schema

        Raises:
            RegistryError: If the schema is not registered under subject
        """
        pass

    @abstractmethod
    def get_latest_schema(self, subject: str) -> RegisteredSchema:
        """Fetch the latest schema registered under subject.

        Args:
            subject: Subject to fetch

        Returns:
            The latest registered schema

        Raises:
            RegistryError: If subject has no registered schema
        """
        pass
