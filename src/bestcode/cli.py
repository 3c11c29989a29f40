"""Command line interface for the bestcode helpers."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence

from .core.result import Result
from .greeting import hello, welcome
from .text import DEFAULT_SUFFIX, DEFAULT_TRUNCATE_LENGTH, capitalize, slugify, truncate

LOGGER = logging.getLogger(__name__)

_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def _positive_int(raw: str) -> int:
    try:
        value = int(raw)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer '{raw}'") from exc
    if value < 1:
        raise argparse.ArgumentTypeError("value must be greater than 0")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bestcode", description="Validated greeting and string helpers"
    )
    parser.add_argument(
        "--log-level",
        choices=_LOG_LEVELS,
        default="WARNING",
        type=str.upper,
        help="Verbosity of diagnostic logging written to stderr",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("demo", help="print a tour of sample calls")

    hello_parser = subparsers.add_parser("hello", help="greet someone")
    hello_parser.add_argument("name", help="Name of the person to greet")
    hello_parser.add_argument("-g", "--greeting", help="Greeting word (default: Hello)")
    hello_parser.add_argument(
        "--preserve-case", action="store_true", help="Keep the greeting's casing as typed"
    )
    hello_parser.add_argument("--max-length", type=_positive_int, help="Longest accepted message")

    welcome_parser = subparsers.add_parser("welcome", help="welcome someone with the current time")
    welcome_parser.add_argument("name", help="Name of the person to welcome")
    welcome_parser.add_argument("-l", "--locale", help="Locale used for the timestamp (default: fr-FR)")
    welcome_parser.add_argument(
        "--no-timestamp",
        dest="include_timestamp",
        action="store_false",
        help="Leave the current time out of the message",
    )
    welcome_parser.add_argument("--max-length", type=_positive_int, help="Longest accepted message")

    capitalize_parser = subparsers.add_parser("capitalize", help="upper-case the first character")
    capitalize_parser.add_argument("text", help="Text to capitalize")
    capitalize_parser.add_argument(
        "--preserve-case", action="store_true", help="Do not lower-case the remaining characters"
    )
    capitalize_parser.add_argument("--max-length", type=_positive_int, help="Longest accepted input")

    slugify_parser = subparsers.add_parser("slugify", help="build a URL friendly slug")
    slugify_parser.add_argument("text", help="Text to convert")
    slugify_parser.add_argument("--max-length", type=_positive_int, help="Longest slug (default: 100)")

    truncate_parser = subparsers.add_parser("truncate", help="shorten text with a suffix")
    truncate_parser.add_argument("text", help="Text to shorten")
    truncate_parser.add_argument(
        "-n",
        "--max-length",
        type=int,
        default=DEFAULT_TRUNCATE_LENGTH,
        help="Longest result before the suffix is applied (default: 100)",
    )
    truncate_parser.add_argument("-s", "--suffix", default=DEFAULT_SUFFIX, help="Suffix marking the cut")

    return parser


def _emit(result: Result[str, Exception]) -> int:
    if result.success:
        print(result.value)
        return 0
    error = result.error
    tag = error.field.value if error.field is not None else "error"
    print(f"error [{tag}]: {error.message}", file=sys.stderr)
    return 1


def _config(**options: object) -> dict[str, object]:
    return {key: value for key, value in options.items() if value is not None}


def run_demo() -> None:
    """Print a handful of sample calls and their outcomes."""

    samples = [
        ("hello('Relia', 'Bonjour')", hello("Relia", "Bonjour")),
        ("welcome('Ada')", welcome("Ada")),
        ("capitalize('hello world')", capitalize("hello world")),
        ("slugify('Hello World! Comment ça va?')", slugify("Hello World! Comment ça va?")),
        ("truncate('This sentence is far too long to keep', 20)", truncate("This sentence is far too long to keep", 20)),
        ("hello(123)", hello(123)),
        ("hello('   ')", hello("   ")),
        ("hello('John<script>')", hello("John<script>")),
        ("slugify('!!!')", slugify("!!!")),
    ]

    for call, result in samples:
        if result.success:
            print(f"ok     {call} -> {result.value!r}")
        else:
            print(f"failed {call} -> [{result.error.field.value}] {result.error.message}")


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), format="%(levelname)s %(name)s: %(message)s")

    if args.command == "demo":
        try:
            run_demo()
        except Exception:
            LOGGER.exception("demo failed unexpectedly")
            return 1
        return 0
    if args.command == "hello":
        config = _config(preserve_case=args.preserve_case or None, max_length=args.max_length)
        return _emit(hello(args.name, args.greeting, config))
    if args.command == "welcome":
        config = _config(
            locale=args.locale,
            include_timestamp=args.include_timestamp,
            max_length=args.max_length,
        )
        return _emit(welcome(args.name, config))
    if args.command == "capitalize":
        config = _config(preserve_case=args.preserve_case or None, max_length=args.max_length)
        return _emit(capitalize(args.text, config))
    if args.command == "slugify":
        return _emit(slugify(args.text, _config(max_length=args.max_length)))
    if args.command == "truncate":
        return _emit(truncate(args.text, args.max_length, args.suffix))
    parser.error("no command provided")
    return 2


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
