"""Command-line interface for protoserdes."""
