"""Exception hierarchy for protoserdes.

This module defines all custom exceptions used throughout the package.
All exceptions inherit from ProtoserdesError for easy catching of any protoserdes-specific error.

Errors raised by the protobuf runtime (``google.protobuf.message.DecodeError``,
``google.protobuf.message.EncodeError``) and by third-party registry clients are
not wrapped; they reach the caller unchanged.
"""

from __future__ import annotations


class ProtoserdesError(Exception):
    """Base exception for all protoserdes errors."""

    pass


class FormatError(ProtoserdesError):
    """Raised when a byte buffer is not a valid Schema Registry wire message.

    Examples:
        - Buffer shorter than magic byte + schema ID + one index byte
        - Unknown magic byte (message from another serializer)
        - Truncated or overflowing varint in the message index array
        - Negative message index array length
    """

    pass


class ConfigurationError(ProtoserdesError, ValueError):
    """Raised when serializer configuration is invalid.

    Examples:
        - Unrecognized configuration keys
        - Wrong value type for a recognized key
        - Mutually exclusive options enabled together
    """

    pass


class SchemaError(ProtoserdesError):
    """Raised when a message descriptor cannot be located in its schema file."""

    pass


class RegistryError(ProtoserdesError):
    """Raised when a schema registry operation fails.

    Examples:
        - Subject has no registered schema
        - Schema is not registered under the subject (lookup mode)
        - Transport failure in a registry client
    """

    pass


class SchemaNotFoundError(RegistryError):
    """Raised when a subject or schema is unknown to the registry."""

    pass
