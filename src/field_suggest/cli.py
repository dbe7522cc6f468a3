"""Command-line access to edit distance and name suggestions."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
import logging
import sys
from typing import Any

import orjson
from pydantic import ValidationError

from field_suggest.config import Settings, get_settings
from field_suggest.errors import FieldSuggestError
from field_suggest.levenshtein import find_best_suggestion, levenshtein_distance, rank_suggestions
from field_suggest.observability import configure_logging
from field_suggest.resolver import resolve_name


logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_NO_MATCH = 1
EXIT_CONFIG_ERROR = 3


def build_argument_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="field-suggest",
        description="Compute edit distances and suggest the closest known name",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Write a single JSON document to stdout instead of plain text",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    distance_parser = subparsers.add_parser("distance", help="Print the Levenshtein distance between A and B")
    distance_parser.add_argument("a")
    distance_parser.add_argument("b")

    suggest_parser = subparsers.add_parser("suggest", help="Print the closest candidate, if close enough")
    suggest_parser.add_argument("input")
    suggest_parser.add_argument("candidates", nargs="*", metavar="CANDIDATE")

    rank_parser = subparsers.add_parser("rank", help="Print every qualifying candidate, closest first")
    rank_parser.add_argument("input")
    rank_parser.add_argument("candidates", nargs="*", metavar="CANDIDATE")
    rank_parser.add_argument("--limit", type=int, default=None, help="Maximum number of candidates to print")

    resolve_parser = subparsers.add_parser("resolve", help="Exit 0 if NAME is a candidate, else explain the miss")
    resolve_parser.add_argument("name")
    resolve_parser.add_argument("candidates", nargs="*", metavar="CANDIDATE")
    resolve_parser.add_argument("--kind", default="field", help="Noun used in the error message (default: field)")

    return parser


def _write(payload: dict[str, Any], text: str | None, *, as_json: bool) -> None:
    if as_json:
        sys.stdout.write(orjson.dumps(payload).decode("utf-8") + "\n")
    elif text is not None:
        sys.stdout.write(text + "\n")


def _run_distance(args: argparse.Namespace) -> int:
    value = levenshtein_distance(args.a, args.b)
    _write({"a": args.a, "b": args.b, "distance": value}, str(value), as_json=args.json)
    return EXIT_OK


def _run_suggest(args: argparse.Namespace) -> int:
    suggestion = find_best_suggestion(args.input, args.candidates)
    _write({"input": args.input, "suggestion": suggestion}, suggestion, as_json=args.json)
    if suggestion is None:
        logger.info("No suggestion for %r among %d candidates", args.input, len(args.candidates))
        return EXIT_NO_MATCH
    return EXIT_OK


def _run_rank(args: argparse.Namespace) -> int:
    ranked = rank_suggestions(args.input, args.candidates, limit=args.limit)
    payload = {
        "input": args.input,
        "suggestions": [{"candidate": item.candidate, "distance": item.distance} for item in ranked],
    }
    text = "\n".join(f"{item.candidate}\t{item.distance}" for item in ranked) or None
    _write(payload, text, as_json=args.json)
    return EXIT_OK if ranked else EXIT_NO_MATCH


def _run_resolve(args: argparse.Namespace, settings: Settings) -> int:
    try:
        resolved = resolve_name(
            args.name,
            args.candidates,
            kind=args.kind,
            max_listed=settings.max_listed_candidates,
        )
    except FieldSuggestError as exc:
        logger.error("%s", exc)
        payload = {
            "name": args.name,
            "found": False,
            "suggestion": getattr(exc, "suggestion", None),
            "error": str(exc),
        }
        _write(payload, None, as_json=args.json)
        return EXIT_NO_MATCH
    _write({"name": resolved, "found": True}, resolved, as_json=args.json)
    return EXIT_OK


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_argument_parser()
    args = parser.parse_args(argv)

    if args.command == "rank" and args.limit is not None and args.limit < 0:
        parser.error("--limit must be >= 0")

    try:
        settings = get_settings()
    except ValidationError as exc:
        configure_logging()
        logger.error("Invalid configuration: %s", exc)
        return EXIT_CONFIG_ERROR

    configure_logging(
        settings.log_level,
        settings.log_json,
        logger_levels=settings.get_logger_levels(),
    )

    if args.command == "distance":
        return _run_distance(args)
    if args.command == "suggest":
        return _run_suggest(args)
    if args.command == "rank":
        return _run_rank(args)
    return _run_resolve(args, settings)


if __name__ == "__main__":
    sys.exit(main())
