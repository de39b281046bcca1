"""Command line entry point for xatcoder."""

from __future__ import annotations

import argparse
import sys
from typing import NoReturn, Optional, Sequence

from .clipboard import PyperclipClipboard
from .config import settings
from .errors import UsageError, XatcoderError
from .extractor import ContentExtractor
from .fetcher import Fetcher
from .models import InvocationArgs, Language
from .pipeline import Pipeline

HELP_FLAGS = ("-h", "--help")
LANGUAGES = [language.value for language in Language]


class _ArgumentParser(argparse.ArgumentParser):
    """Raise instead of exiting so callers decide how to report usage errors."""

    def error(self, message: str) -> NoReturn:
        raise UsageError(message)


def _positive_float(value: str) -> float:
    try:
        number = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a number: {value!r}")
    if number <= 0:
        raise argparse.ArgumentTypeError(f"must be greater than zero: {value!r}")
    return number


def _option_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(add_help=False)
    parser.add_argument(
        "--timeout",
        type=_positive_float,
        default=settings.timeout,
        help="Request timeout in seconds (default: %(default)s).",
    )
    parser.add_argument(
        "--strict-status",
        action="store_true",
        default=settings.strict_status,
        help="Fail on HTTP 4xx/5xx responses instead of using their body.",
    )
    parser.add_argument(
        "--impersonate",
        default=settings.impersonate,
        metavar="BROWSER",
        help="Browser fingerprint for curl_cffi, e.g. chrome120.",
    )
    return parser


def build_parser() -> argparse.ArgumentParser:
    """Parser used to render usage and help text."""
    parser = _ArgumentParser(
        prog="xatcoder",
        description="Copy the problem statement of a page to the clipboard.",
        parents=[_option_parser()],
        add_help=False,
    )
    parser.add_argument("-h", "--help", action="store_true", help="Show this help message and exit.")
    parser.add_argument("url", help="Target URL")
    parser.add_argument(
        "language",
        nargs="?",
        default=settings.default_language,
        choices=LANGUAGES,
        help="Statement language (default: %(default)s).",
    )
    return parser


def parse_args(argv: Sequence[str]) -> InvocationArgs:
    """Turn the argument list (without the program name) into InvocationArgs.

    The first element is always the URL and the second, unless it is a
    ``--`` option, the language. Further positionals are ignored; unknown
    options and bad option values raise ``UsageError``.
    """
    if not argv:
        raise UsageError("URL required")

    url, rest = argv[0], list(argv[1:])
    language = settings.default_language
    if rest and not rest[0].startswith("--"):
        language = rest.pop(0)
    if language not in LANGUAGES:
        raise UsageError(f"Language must be 'ja' or 'en', got {language!r}")

    options, extras = _option_parser().parse_known_args(rest)
    unknown = [arg for arg in extras if arg.startswith("-")]
    if unknown:
        raise UsageError(f"unrecognized arguments: {' '.join(unknown)}")

    return InvocationArgs(
        url=url,
        language=Language(language),
        timeout=options.timeout,
        strict_status=options.strict_status,
        impersonate=options.impersonate,
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    if len(argv) == 1 and argv[0] in HELP_FLAGS:
        print(build_parser().format_help())
        return 0

    try:
        args = parse_args(argv)
    except UsageError as exc:
        print(build_parser().format_usage().rstrip(), file=sys.stderr)
        print(f"[ERROR] {exc}", file=sys.stderr)
        return 2

    try:
        with Fetcher(
            timeout=args.timeout,
            strict_status=args.strict_status,
            impersonate=args.impersonate,
        ) as fetcher:
            Pipeline(fetcher, ContentExtractor(), PyperclipClipboard()).run(args)
    except XatcoderError as exc:
        print(f"[ERROR] {exc}", file=sys.stderr)
        return 1

    print(f"Copied!: {args.url}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
