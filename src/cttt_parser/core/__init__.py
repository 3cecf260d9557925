"""
Core constants and type definitions for cttt-parser.
"""

from cttt_parser.core.types import COMMAND_CHARS, NAMESPACE, CommandSet

__all__ = ["NAMESPACE", "COMMAND_CHARS", "CommandSet"]
