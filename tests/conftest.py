"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import pytest

from protoserdes.naming import MessageField, SerializationContext
from protoserdes.registry import InMemoryRegistryClient


@pytest.fixture
def registry() -> InMemoryRegistryClient:
    """Empty in-memory schema registry."""
    return InMemoryRegistryClient()


@pytest.fixture
def ctx() -> SerializationContext:
    """Serialization context for the value of topic 'test'."""
    return SerializationContext("test", MessageField.VALUE)


@pytest.fixture
def sample_payload() -> bytes:
    """Sample binary payload for testing."""
    return b"\x08\xe8\x01\x12\x05hello"
