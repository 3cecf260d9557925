"""
Argument splitting for directive comments.
"""


def split_arguments(args_str: str | None) -> list[str]:
    """
    Split a raw argument list into trimmed, non-empty tokens.

    Params:
        args_str: Text between the parentheses, or None when there was no list

    Returns:
        Tokens in their original order; empty tokens (trailing commas,
        blank input) are discarded

    Examples:
        "a, b , c,," -> ["a", "b", "c"]
        "   " -> []
    """
    if not args_str or not args_str.strip():
        return []

    parts = (part.strip() for part in args_str.split(","))
    return [part for part in parts if part]
