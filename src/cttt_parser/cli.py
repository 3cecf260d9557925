"""cttt-parser command line entry point.

Reads one or more files (``-`` for stdin), extracts their directive comments
and prints a single JSON array holding one ``{"path", "comments"}`` object per
input (``{"path", "errors"}`` for strict violations). With ``--allow`` or
``--strict`` every command must appear in the allow-list; violations are
printed and the exit status is 1.
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from cttt_parser.exceptions import CtttParserError, UnknownCommandError
from cttt_parser.parsing.parser import parse
from cttt_parser.validation.strict import parse_strict


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cttt-parser",
        description="Extract @cttt directive comments from source files",
    )
    parser.add_argument("paths", nargs="+", help="Files to scan ('-' reads stdin)")
    parser.add_argument(
        "--allow",
        action="append",
        default=[],
        metavar="COMMAND",
        help="Permitted command name (repeatable, enables strict mode)",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Reject unknown commands even when no --allow is given",
    )
    parser.add_argument("--compact", action="store_true", help="Print single-line JSON")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    return parser


def read_source(path: str) -> str:
    """Read a file, or stdin for '-'."""
    if path == "-":
        return sys.stdin.read()
    return Path(path).read_text(encoding="utf-8")


def scan(path: str, source: str, allowed: list[str] | None) -> dict:
    """
    Scan one source and build its JSON-ready result.

    Raises:
        GrammarError: If the source holds a malformed directive
    """
    try:
        if allowed is None:
            comments = parse(source)
        else:
            comments = parse_strict(source, allowed)
    except UnknownCommandError as e:
        return {"path": path, "errors": [error.model_dump(mode="json") for error in e.errors]}

    return {"path": path, "comments": [comment.model_dump(mode="json") for comment in comments]}


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.debug:
        logging.basicConfig(
            level=logging.DEBUG,
            format="[%(name)s] %(levelname)s: %(message)s",
            stream=sys.stderr,
        )

    allowed = args.allow if (args.allow or args.strict) else None

    results = []
    for path in args.paths:
        try:
            results.append(scan(path, read_source(path), allowed))
        except OSError as e:
            print(f"error: cannot read {path}: {e}", file=sys.stderr)
            return 1
        except UnicodeDecodeError as e:
            print(f"error: {path} is not valid UTF-8: {e}", file=sys.stderr)
            return 1
        except CtttParserError as e:
            print(f"error: {path}: {e}", file=sys.stderr)
            return 1

    indent = None if args.compact else 2
    print(json.dumps(results, indent=indent))

    return 1 if any("errors" in result for result in results) else 0
