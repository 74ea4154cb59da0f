"""Schema ID resolution with a per-subject cache.

The resolver turns a message descriptor into the schema ID written into the
wire header. Depending on configuration it either fetches the latest schema of
the subject, or registers/looks up the message's schema file after resolving
every imported file as a schema reference (depth-first, so that dependencies
are known to the registry before the schemas that import them).
"""

from __future__ import annotations

import base64
import logging
from typing import Any, Mapping, Optional

from google.protobuf.descriptor import Descriptor, FileDescriptor

from ..config import SerializerConfig
from ..helpers.lock import RWLock
from ..naming import SerializationContext
from ..registry.client import RegisteredSchema, RegistryClient, SchemaReference, SchemaType

logger = logging.getLogger(__name__)

KNOWN_TYPES_PREFIX = "google/protobuf/"


def file_descriptor_to_schema_str(file_descriptor: FileDescriptor) -> str:
    """Encode a schema file for the registry.

    Args:
        file_descriptor: Protobuf file descriptor

    Returns:
        Base64 encoded serialized FileDescriptorProto
    """
    return base64.standard_b64encode(file_descriptor.serialized_pb).decode("ascii")


def is_known_type(path: str) -> bool:
    """Return True for well-known types shipped with protobuf (``google/protobuf/*.proto``)."""
    return path.startswith(KNOWN_TYPES_PREFIX)


class SchemaResolver:
    """Resolves and caches schema IDs per subject.

    Once a subject's ID is cached it is never invalidated: schema evolution
    during the lifetime of a resolver is not observed.

    Attributes:
        registry: Registry client (borrowed, not owned)
        config: Validated serializer configuration

    Examples:
        ```python
        from protoserdes.naming import SerializationContext
        from protoserdes.registry import InMemoryRegistryClient
        from protoserdes.serdes import SchemaResolver

        resolver = SchemaResolver(InMemoryRegistryClient())
        schema_id = resolver.resolve_schema_id(
            SerializationContext("orders"), Order.DESCRIPTOR
        )
        ```
    """

    def __init__(
        self,
        registry: RegistryClient,
        config: SerializerConfig | Mapping[str, Any] | None = None,
    ) -> None:
        """Initialize the resolver.

        Args:
            registry: Registry client
            config: SerializerConfig, dotted-key mapping, or None for defaults

        Raises:
            ConfigurationError: If config is invalid
        """
        if not isinstance(config, SerializerConfig):
            config = SerializerConfig.from_mapping(config)

        self.registry = registry
        self.config = config
        self._subject_name_func = config.subject_name_func()
        self._reference_subject_name_func = config.reference_subject_name_func()
        self._known_subjects: dict[str, int] = {}
        self._known_subjects_lock = RWLock()

    def subject_for(self, ctx: SerializationContext, descriptor: Descriptor) -> str:
        """Compute the subject of a message type in a serialization context."""
        return self._subject_name_func(ctx, descriptor.full_name)

    def cached_schema_id(self, subject: str) -> Optional[int]:
        """Return the cached schema ID of subject, or None."""
        with self._known_subjects_lock.read():
            return self._known_subjects.get(subject)

    def resolve_schema_id(self, ctx: SerializationContext, descriptor: Descriptor) -> int:
        """Resolve the schema ID to embed for a message type.

        Args:
            ctx: Serialization context (topic and message field)
            descriptor: Descriptor of the message type being serialized

        Returns:
            Registry-assigned schema ID

        Raises:
            RegistryError: If the registry cannot resolve the schema (any
                error raised by the registry client is propagated unchanged)
        """
        subject = self.subject_for(ctx, descriptor)

        schema_id = self.cached_schema_id(subject)
        if schema_id is not None:
            return schema_id

        logger.debug(
            "Schema ID cache miss.",
            extra={"subject": subject, "record_name": descriptor.full_name},
        )

        if self.config.use_latest_version:
            logger.debug("Fetching latest schema.", extra={"subject": subject})
            schema = self.registry.get_latest_schema(subject)
        else:
            file_descriptor = descriptor.file
            references = self.resolve_dependencies(ctx, file_descriptor)
            schema = self._register_or_lookup(
                subject, file_descriptor_to_schema_str(file_descriptor), references
            )

        with self._known_subjects_lock.write():
            # Racing resolutions of one subject store the same ID
            self._known_subjects[subject] = schema.schema_id

        logger.debug(
            "Schema ID resolved.",
            extra={"subject": subject, "schema_id": schema.schema_id, "version": schema.version},
        )
        return schema.schema_id

    def resolve_dependencies(
        self, ctx: SerializationContext, file_descriptor: FileDescriptor
    ) -> list[SchemaReference]:
        """Resolve the imports of a schema file as registry references.

        Imports of imports are resolved (and registered, when auto-registering)
        first, but only the direct imports of file_descriptor are returned,
        in import order.

        Args:
            ctx: Serialization context
            file_descriptor: Schema file whose imports are resolved

        Returns:
            References for the direct imports of file_descriptor

        Raises:
            RegistryError: If any import cannot be registered or looked up.
                Imports registered before the failure stay registered.
        """
        references: list[SchemaReference] = []

        for dependency in file_descriptor.dependencies:
            if self.config.skip_known_types and is_known_type(dependency.name):
                continue

            dependency_references = self.resolve_dependencies(ctx, dependency)
            subject = self._reference_subject_name_func(ctx, dependency.name)
            schema_str = file_descriptor_to_schema_str(dependency)

            if self.config.auto_register_schemas:
                self.registry.register_schema(
                    subject, schema_str, SchemaType.PROTOBUF, dependency_references
                )
            schema = self.registry.lookup_schema(
                subject, schema_str, SchemaType.PROTOBUF, dependency_references
            )

            references.append(
                SchemaReference(name=dependency.name, subject=subject, version=schema.version)
            )

        return references

    def _register_or_lookup(
        self, subject: str, schema_str: str, references: list[SchemaReference]
    ) -> RegisteredSchema:
        if self.config.auto_register_schemas:
            logger.debug("Registering schema.", extra={"subject": subject})
            return self.registry.register_schema(
                subject, schema_str, SchemaType.PROTOBUF, references
            )

        logger.debug("Looking up schema.", extra={"subject": subject})
        return self.registry.lookup_schema(subject, schema_str, SchemaType.PROTOBUF, references)
