"""Command-line inspector: load loose data, build it, print the tree.

Provides the ``struct-inspect`` entry point via ``main()``.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import IO, Any

from .builder import BuilderOptions, RecursiveStructureBuilder
from .errors import StructCoreError
from .loader import load_file, load_text
from .model import FixedList, Map, Structure

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Formatting helpers
# ---------------------------------------------------------------------------

def _fmt_inline(value: Structure) -> str:
    """Format a single value for compact one-line display."""
    if isinstance(value, Map):
        return "Map {" + ", ".join(f"{k!r}: {_fmt_inline(v)}" for k, v in value.items()) + "}"
    if isinstance(value, FixedList):
        return "FixedList [" + ", ".join(_fmt_inline(v) for v in value) + "]"
    return repr(value)


def _fmt_inspect(value: Structure, indent: int = 0) -> str:
    """Pretty-print a structure, one entry per line."""
    pad = "  " * indent
    if isinstance(value, Map):
        if value.is_empty():
            return "Map {}"
        lines = ["Map {"]
        for k, v in value.items():
            lines.append(f"{pad}  {k!r}: {_fmt_inspect(v, indent + 1)}")
        lines.append(pad + "}")
        return "\n".join(lines)

    if isinstance(value, FixedList):
        if value.is_empty():
            return "FixedList []"
        lines = ["FixedList ["]
        for i, v in enumerate(value):
            lines.append(f"{pad}  {i}: {_fmt_inspect(v, indent + 1)}")
        lines.append(pad + "]")
        return "\n".join(lines)

    return _fmt_inline(value)


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="struct-inspect",
        description="Build a Map / FixedList structure from a JSON or YAML document.",
    )
    parser.add_argument(
        "path", nargs="?", help="Input file (.json, .yaml, .yml); stdin if omitted"
    )
    parser.add_argument(
        "--format",
        choices=("json", "yaml"),
        default="json",
        help="Format of stdin input (default: json)",
    )
    parser.add_argument(
        "--max-depth", type=int, default=None, help="Maximum nesting depth"
    )
    parser.add_argument(
        "--inline", action="store_true", help="Print the structure on one line"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )
    return parser


def _read_input(args: argparse.Namespace, stdin: IO[str]) -> Any:
    if args.path:
        return load_file(args.path)
    return load_text(stdin.read(), args.format)


def main(
    argv: list[str] | None = None,
    stdin: IO[str] | None = None,
    stdout: IO[str] | None = None,
) -> int:
    """Run ``struct-inspect``; returns the process exit code."""
    args = _build_parser().parse_args(argv)
    dest = stdout or sys.stdout

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    builder = RecursiveStructureBuilder(BuilderOptions(max_depth=args.max_depth))
    try:
        data = _read_input(args, stdin or sys.stdin)
        structure = builder.build(data)
    except StructCoreError as exc:
        logger.debug("struct-inspect failed", exc_info=True)
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    print(_fmt_inline(structure) if args.inline else _fmt_inspect(structure), file=dest)
    return 0


if __name__ == "__main__":
    sys.exit(main())
