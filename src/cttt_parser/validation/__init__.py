"""
Strict-mode validation of directive comment commands.
"""

from cttt_parser.validation.strict import (
    find_unknown_commands,
    parse_strict,
    validate_commands,
)

__all__ = ["find_unknown_commands", "parse_strict", "validate_commands"]
