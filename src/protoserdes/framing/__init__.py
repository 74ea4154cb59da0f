"""Message framing utilities for protoserdes.

This module provides the Schema Registry wire format header: magic byte,
schema ID and message index array.
"""

from __future__ import annotations

from .basic import MAGIC_BYTE, WireHeader, frame_message, unframe_message

__all__ = [
    "MAGIC_BYTE",
    "WireHeader",
    "frame_message",
    "unframe_message",
]
