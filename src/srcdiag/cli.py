from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from .diagnostic import Diagnostic, Level
from .errors import DiagnosticError
from .log import setup_logging
from .messages import MESSAGES, load_catalog
from .spans import SourceBuffer, SourceRange

LOGGER = logging.getLogger(__name__)


def _span(text: str) -> tuple[int, int]:
    begin, sep, end = text.partition(":")
    if not sep:
        raise argparse.ArgumentTypeError(f"expected BEGIN:END, got {text!r}")
    try:
        return int(begin), int(end)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected integer offsets, got {text!r}") from None


def _argument(text: str) -> tuple[str, str]:
    name, sep, value = text.partition("=")
    if not sep or not name:
        raise argparse.ArgumentTypeError(f"expected NAME=VALUE, got {text!r}")
    return name, value


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(prog="srcdiag", description="Render a clang-style diagnostic for a source file")
    ap.add_argument("file", help="Source file the diagnostic points into")
    ap.add_argument("--begin", type=int, required=True, help="Start offset of the primary location")
    ap.add_argument("--end", type=int, required=True, help="End offset (exclusive) of the primary location")
    ap.add_argument("--level", default="error", choices=[lvl.value for lvl in Level])
    ap.add_argument("--reason", default="unexpected_token", help="Message template key")
    ap.add_argument(
        "--arg",
        dest="arguments",
        type=_argument,
        action="append",
        default=[],
        help="Template argument NAME=VALUE (repeatable)",
    )
    ap.add_argument(
        "--highlight",
        type=_span,
        action="append",
        default=[],
        help="Secondary range BEGIN:END (repeatable)",
    )
    ap.add_argument("--catalog", help="JSON file of reason -> template merged over the defaults")
    ap.add_argument("--json", action="store_true", help="Print the diagnostic as JSON")
    ap.add_argument("-v", "--verbose", action="store_true", help="Log debug output to stderr")
    args = ap.parse_args(argv)

    setup_logging(logging.DEBUG if args.verbose else logging.WARNING)

    try:
        catalog = MESSAGES
        if args.catalog:
            catalog = MESSAGES.merged(load_catalog(args.catalog))
        path = Path(args.file).expanduser()
        buffer = SourceBuffer(str(args.file), path.read_text(encoding="utf-8"))
        LOGGER.debug("read %s (%d lines)", path, buffer.line_count)
        diag = Diagnostic.create(
            args.level,
            args.reason,
            dict(args.arguments),
            SourceRange(buffer, args.begin, args.end),
            [SourceRange(buffer, b, e) for b, e in args.highlight],
            catalog=catalog,
        )
        lines = diag.render()
        message = diag.message()
    except (DiagnosticError, OSError, ValueError) as exc:
        print(f"srcdiag: error: {exc}", file=sys.stderr)
        return 1

    if args.json:
        payload = {"header": lines[0], "level": str(diag.level), "message": message, "lines": lines[1:]}
        print(json.dumps(payload, indent=2, sort_keys=True))
    else:
        for line in lines:
            print(line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
