import argparse
import codecs
import os
import sys
from typing import Sequence

from .distance import check_edit_distance, compute_edit_distance


def run_distance(args: argparse.Namespace) -> int:
    distance = compute_edit_distance(
        os.fsencode(args.a), os.fsencode(args.b), args.bytes, encoding=args.encoding
    )
    print(distance)
    return 0


def run_check(args: argparse.Namespace) -> int:
    within = check_edit_distance(
        os.fsencode(args.a),
        os.fsencode(args.b),
        args.max_distance,
        args.bytes,
        encoding=args.encoding,
    )
    print("true" if within else "false")
    return 0 if within else 1


def add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("a", help="First string")
    parser.add_argument("b", help="Second string")
    parser.add_argument(
        "--bytes",
        action="store_true",
        help="Compare encoded bytes instead of characters (exact for ASCII only)",
    )
    parser.add_argument(
        "--encoding", default="utf-8", help="Encoding of the argument bytes"
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="levenshtein_engine",
        description="Levenshtein edit distance between two strings",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    distance_parser = subparsers.add_parser(
        "distance", help="Print the edit distance between two strings"
    )
    add_common_arguments(distance_parser)
    distance_parser.set_defaults(func=run_distance)

    check_parser = subparsers.add_parser(
        "check", help="Exit 0 if two strings are within an edit distance"
    )
    add_common_arguments(check_parser)
    check_parser.add_argument(
        "--max-distance", "-k", type=int, required=True, help="Maximum edit distance"
    )
    check_parser.set_defaults(func=run_check)

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if getattr(args, "max_distance", 0) < 0:
        parser.error("--max-distance must be non-negative")
    try:
        codecs.lookup(args.encoding)
    except LookupError:
        parser.error(f"unknown encoding: {args.encoding}")
    try:
        return args.func(args)
    except UnicodeError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
