"""Configuration for the protobuf serializer.

This module provides SerializerConfig, a Pydantic model validated from the
dotted-key configuration mapping used by Schema Registry serializers in every
language (``auto.register.schemas``, ``use.latest.version``, ...).
"""

from __future__ import annotations

from typing import Any, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, StrictBool, ValidationError, model_validator

from .exceptions import ConfigurationError
from .naming import (
    ReferenceSubjectNameStrategy,
    SubjectNameFunc,
    SubjectNameStrategy,
    resolve_strategy,
)

AUTO_REGISTER_SCHEMAS = "auto.register.schemas"
USE_LATEST_VERSION = "use.latest.version"
SKIP_KNOWN_TYPES = "skip.known.types"
SUBJECT_NAME_STRATEGY = "subject.name.strategy"
REFERENCE_SUBJECT_NAME_STRATEGY = "reference.subject.name.strategy"

_TYPE_ERRORS = {
    AUTO_REGISTER_SCHEMAS: f"{AUTO_REGISTER_SCHEMAS} must be a boolean value",
    USE_LATEST_VERSION: f"{USE_LATEST_VERSION} must be a boolean value",
    SKIP_KNOWN_TYPES: f"{SKIP_KNOWN_TYPES} must be a boolean value",
    SUBJECT_NAME_STRATEGY: (
        f"{SUBJECT_NAME_STRATEGY} must be one of "
        f"{', '.join(repr(s.value) for s in SubjectNameStrategy)} or a callable"
    ),
    REFERENCE_SUBJECT_NAME_STRATEGY: (
        f"{REFERENCE_SUBJECT_NAME_STRATEGY} must be one of "
        f"{', '.join(repr(s.value) for s in ReferenceSubjectNameStrategy)} or a callable"
    ),
}


class SerializerConfig(BaseModel):
    """Protobuf serializer configuration.

    Fields can be given by their dotted configuration key (see from_mapping())
    or by attribute name.

    Attributes:
        auto_register_schemas: Register schemas (and references) that are not
            yet known to the registry (default True)
        use_latest_version: Use the latest registered schema of the subject
            instead of the message's own schema (default False). Cannot be
            combined with auto_register_schemas.
        skip_known_types: Do not resolve ``google/protobuf/`` imports as
            schema references (default False)
        subject_name_strategy: Strategy name ("topic", "topic-record",
            "record") or callable(ctx, record_name) -> subject (default "topic")
        reference_subject_name_strategy: Strategy name ("reference-path") or
            callable(ctx, import_path) -> subject (default "reference-path")

    Examples:
        ```python
        from protoserdes.config import SerializerConfig

        # Look up pre-registered schemas only
        config = SerializerConfig.from_mapping({"auto.register.schemas": False})

        # Always serialize against the latest version of the subject
        config = SerializerConfig.from_mapping({
            "auto.register.schemas": False,
            "use.latest.version": True,
            "subject.name.strategy": "record",
        })
        ```
    """

    model_config = ConfigDict(
        # Accept both dotted keys and attribute names
        populate_by_name=True,
        # Strategies may be arbitrary callables
        arbitrary_types_allowed=True,
        extra="forbid",
        frozen=True,
    )

    auto_register_schemas: StrictBool = Field(default=True, alias=AUTO_REGISTER_SCHEMAS)
    use_latest_version: StrictBool = Field(default=False, alias=USE_LATEST_VERSION)
    skip_known_types: StrictBool = Field(default=False, alias=SKIP_KNOWN_TYPES)
    subject_name_strategy: Union[SubjectNameStrategy, SubjectNameFunc] = Field(
        default=SubjectNameStrategy.TOPIC, alias=SUBJECT_NAME_STRATEGY
    )
    reference_subject_name_strategy: Union[ReferenceSubjectNameStrategy, SubjectNameFunc] = Field(
        default=ReferenceSubjectNameStrategy.REFERENCE_PATH, alias=REFERENCE_SUBJECT_NAME_STRATEGY
    )

    def __init__(self, **data: Any) -> None:
        """Validate configuration given by dotted key or attribute name.

        Raises:
            ConfigurationError: If keys are unrecognized, a value has the
                wrong type, or mutually exclusive options are both enabled
        """
        try:
            super().__init__(**data)
        except ValidationError as e:
            raise ConfigurationError(_describe(e)) from e

    @model_validator(mode="before")
    @classmethod
    def check_known_keys(cls, data: Any) -> Any:
        if isinstance(data, Mapping):
            known = set(_TYPE_ERRORS) | set(cls.model_fields)
            unrecognized = sorted(str(key) for key in data if key not in known)
            if unrecognized:
                raise ValueError(f"Unrecognized properties: {', '.join(unrecognized)}")
        return data

    @model_validator(mode="after")
    def check_exclusive(self) -> SerializerConfig:
        if self.use_latest_version and self.auto_register_schemas:
            raise ValueError(f"cannot enable both {USE_LATEST_VERSION} and {AUTO_REGISTER_SCHEMAS}")
        return self

    @model_validator(mode="after")
    def check_strategies(self) -> SerializerConfig:
        for key, strategy, strategy_type in (
            (SUBJECT_NAME_STRATEGY, self.subject_name_strategy, SubjectNameStrategy),
            (
                REFERENCE_SUBJECT_NAME_STRATEGY,
                self.reference_subject_name_strategy,
                ReferenceSubjectNameStrategy,
            ),
        ):
            try:
                resolve_strategy(strategy, strategy_type)
            except ValueError as e:
                raise ValueError(_TYPE_ERRORS[key]) from e
        return self

    @classmethod
    def from_mapping(cls, conf: Optional[Mapping[str, Any]] = None) -> SerializerConfig:
        """Validate a dotted-key configuration mapping.

        Missing keys take their defaults.

        Args:
            conf: Configuration mapping, or None for all defaults

        Returns:
            Validated configuration

        Raises:
            ConfigurationError: If keys are unrecognized, a value has the
                wrong type, or mutually exclusive options are both enabled
        """
        return cls(**dict(conf or {}))

    def subject_name_func(self) -> SubjectNameFunc:
        """Return the subject naming strategy as a callable."""
        return resolve_strategy(self.subject_name_strategy, SubjectNameStrategy)

    def reference_subject_name_func(self) -> SubjectNameFunc:
        """Return the reference subject naming strategy as a callable."""
        return resolve_strategy(self.reference_subject_name_strategy, ReferenceSubjectNameStrategy)


def _describe(error: ValidationError) -> str:
    """Build a configuration error message from a Pydantic validation error.

    Args:
        error: Validation error raised by SerializerConfig

    Returns:
        Message for the first failing field
    """
    first = error.errors()[0]

    if first["type"] == "value_error":
        return str(first["ctx"]["error"])

    key = str(first["loc"][0]) if first["loc"] else ""
    return _TYPE_ERRORS.get(key, first["msg"])
