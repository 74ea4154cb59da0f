"""Wire header inspection CLI command."""

from __future__ import annotations

from ..framing.basic import MAGIC_BYTE, unframe_message


def parse_hex(text: str) -> bytes:
    """Parse hex input, ignoring whitespace, colons and an optional 0x prefix.

    Args:
        text: Hex string such as ``"00 00 00 00 07 02 04"`` or ``"0x00000000070204"``

    Returns:
        Decoded bytes

    Raises:
        ValueError: If text is not valid hex
    """
    cleaned = "".join(text.split()).replace(":", "")
    if cleaned.lower().startswith("0x"):
        cleaned = cleaned[2:]
    return bytes.fromhex(cleaned)


def inspect_frame(data: bytes) -> None:
    """Print a breakdown of a Schema Registry framed message.

    Args:
        data: Framed message bytes

    Raises:
        FormatError: If the wire header is malformed
    """
    header, payload = unframe_message(data)

    index_bytes = data[5 : header.payload_offset]
    index_hex = " ".join(f"{b:02x}" for b in index_bytes)

    print(f"{'=' * 19} Schema Registry frame {'=' * 19}")
    print(f"Total size{'.' * 34}{len(data)} bytes")
    print(f"        magic byte{'.' * 26}{MAGIC_BYTE:#04x}")
    print(f"        schema id{'.' * 27}{header.schema_id}")
    print(f"        message index{'.' * 23}{list(header.index_path)} [{index_hex}]")
    print(f"        header length{'.' * 23}{header.payload_offset} bytes")
    print(f"        payload{'.' * 29}{len(payload)} bytes")
    print()
