"""Command line diagnostics for pts matrices and groups."""

from __future__ import annotations

import argparse
import json
import sys
from typing import Any

from .core.errors import PtsError
from .core.logging import get_logger, setup_logging
from .math import Group

logger = get_logger(__name__)


def _matrix(text: str) -> Group:
    rows = json.loads(text)
    if not isinstance(rows, list):
        raise ValueError("Expected a JSON array of rows")
    return Group.from_array(rows)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pts",
        description="Run a Group operation on a JSON matrix such as '[[1, 2], [3, 4]]'.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log at DEBUG level regardless of PTS_LOG_LEVEL.",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    centroid = commands.add_parser("centroid", help="Mean of all rows.")
    centroid.add_argument("matrix", help="JSON array of rows.")

    bbox = commands.add_parser("bbox", help="Per-component minimum and maximum.")
    bbox.add_argument("matrix", help="JSON array of rows.")

    zip_cmd = commands.add_parser("zip", help="Transpose rows into columns.")
    zip_cmd.add_argument("matrix", help="JSON array of rows.")
    zip_cmd.add_argument(
        "--default",
        type=float,
        help="Value used for rows too short to have a column.",
    )
    zip_cmd.add_argument(
        "--longest",
        action="store_true",
        help="Size the output by the longest row instead of the first.",
    )

    multiply = commands.add_parser("multiply", help="Matrix product of two JSON matrices.")
    multiply.add_argument("matrix", help="Left-hand JSON array of rows.")
    multiply.add_argument("other", help="Right-hand JSON array of rows.")
    multiply.add_argument(
        "--transposed",
        action="store_true",
        help="The right-hand matrix is given as its transpose.",
    )
    multiply.add_argument(
        "--elementwise",
        action="store_true",
        help="Multiply matching entries instead.",
    )

    segments = commands.add_parser("segments", help="Cut the rows into overlapping segments.")
    segments.add_argument("matrix", help="JSON array of rows.")
    segments.add_argument("--size", type=int, default=2, help="Rows per segment (default: 2).")
    segments.add_argument("--stride", type=int, default=1, help="Step between segments (default: 1).")
    segments.add_argument(
        "--loop-back",
        action="store_true",
        help="Wrap around to the first rows instead of dropping a short tail.",
    )
    return parser


def _run(args: argparse.Namespace) -> Any:
    group = _matrix(args.matrix)
    logger.debug("Running %s on %d rows", args.command, len(group))

    if args.command == "centroid":
        return group.centroid()
    if args.command == "bbox":
        return group.bounding_box()
    if args.command == "zip":
        return group.zip(args.default, args.longest)
    if args.command == "multiply":
        return group.matrix_multiply(_matrix(args.other), args.transposed, args.elementwise)
    return "\n".join(str(segment) for segment in group.segments(args.size, args.stride, args.loop_back))


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    setup_logging(level="DEBUG" if args.verbose else None)

    try:
        result = _run(args)
    except (PtsError, TypeError, ValueError) as exc:
        # json.JSONDecodeError is a ValueError
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    print(result)
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
