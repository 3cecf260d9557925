"""
Core type definitions for cttt-parser.

This module holds the marker literal shared by every entry point and the
type aliases used across parsing and validation.
"""

from collections.abc import Iterable

# Marker token that identifies a directive comment, matched case-insensitively
NAMESPACE = "@cttt"

# Characters allowed in a command identifier (after "@cttt."): Unicode letters,
# digits, "_" and "-"
COMMAND_CHARS = r"\w\-"

CommandSet = Iterable[str]
