"""Subject naming strategies for protoserdes.

This module provides:
- SerializationContext: topic and message field of a send
- SubjectNameStrategy: subject names for message schemas
- ReferenceSubjectNameStrategy: subject names for imported schema files
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Callable, Union


class MessageField(str, enum.Enum):
    """Kafka message part being serialized."""

    KEY = "key"
    VALUE = "value"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class SerializationContext:
    """Context of a single serialization call.

    Attributes:
        topic: Kafka topic the message is produced to
        field: Message part, MessageField.KEY or MessageField.VALUE

    Example:
        >>> ctx = SerializationContext("orders", MessageField.VALUE)
    """

    topic: str
    field: str = MessageField.VALUE


SubjectNameFunc = Callable[[SerializationContext, str], str]


class SubjectNameStrategy(str, enum.Enum):
    """Built-in subject naming strategies for message schemas.

    +---------------+------------------------------+
    | Strategy      | Subject                      |
    +===============+==============================+
    | topic         | {topic name}-{message field} |
    | topic-record  | {topic name}-{record name}   |
    | record        | {record name}                |
    +---------------+------------------------------+
    """

    TOPIC = "topic"
    TOPIC_RECORD = "topic-record"
    RECORD = "record"

    def subject(self, ctx: SerializationContext, record_name: str) -> str:
        """Compute the subject for a message.

        Args:
            ctx: Serialization context
            record_name: Fully-qualified protobuf message name

        Returns:
            Subject name
        """
        if self is SubjectNameStrategy.TOPIC:
            return f"{ctx.topic}-{ctx.field}"
        if self is SubjectNameStrategy.TOPIC_RECORD:
            return f"{ctx.topic}-{record_name}"
        return record_name

    def __call__(self, ctx: SerializationContext, record_name: str) -> str:
        return self.subject(ctx, record_name)


class ReferenceSubjectNameStrategy(str, enum.Enum):
    """Built-in subject naming strategies for schema references."""

    REFERENCE_PATH = "reference-path"

    def subject(self, ctx: SerializationContext, import_path: str) -> str:
        """Use the import path (e.g. ``common/money.proto``) as the subject."""
        return import_path

    def __call__(self, ctx: SerializationContext, import_path: str) -> str:
        return self.subject(ctx, import_path)


def resolve_strategy(
    strategy: Union[str, SubjectNameFunc],
    strategy_type: type[enum.Enum] = SubjectNameStrategy,
) -> SubjectNameFunc:
    """Turn a configured strategy into a callable.

    Args:
        strategy: Strategy name, enum member, or callable(ctx, name) -> subject
        strategy_type: Enum of built-in strategies the name belongs to

    Returns:
        Callable computing the subject

    Raises:
        ValueError: If strategy is an unknown name or a member of another
            strategy enum
    """
    if isinstance(strategy, strategy_type):
        return strategy  # type: ignore[return-value]
    if isinstance(strategy, enum.Enum):
        # e.g. a SubjectNameStrategy given where a reference strategy is expected
        raise ValueError(
            f"Invalid subject name strategy: {strategy!r} is not a {strategy_type.__name__}"
        )
    if isinstance(strategy, str):
        return strategy_type(strategy)  # type: ignore[return-value]
    if callable(strategy):
        return strategy
    raise ValueError(f"Invalid subject name strategy: {strategy!r}")
