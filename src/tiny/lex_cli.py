"""tinylex: scan a TINY source file and print the listing."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .lexer import open_lexer
from .listing import log_error
from .tokens import TokenType


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Scan a TINY source file")
    ap.add_argument("path", help="TINY source (.tny is appended when no extension is given)")
    ap.add_argument(
        "--no-echo",
        dest="echo_source",
        action="store_false",
        help="Do not echo source lines into the listing",
    )
    ap.add_argument(
        "--no-trace",
        dest="trace_scan",
        action="store_false",
        help="Do not print a trace record for each token",
    )
    ap.add_argument(
        "--tokens",
        action="store_true",
        help="Print a tab-separated token table instead of the classic listing",
    )
    ap.add_argument(
        "--strict",
        action="store_true",
        help="Exit with status 1 if any ERROR token was produced",
    )
    args = ap.parse_args(argv)

    path = source_path(args.path)
    listing = sys.stdout
    if args.tokens:
        args.echo_source = args.trace_scan = False

    errors = 0
    try:
        with open_lexer(
            path,
            listing=listing,
            echo_source=args.echo_source,
            trace_scan=args.trace_scan,
        ) as lexer:
            print(f"\nCOMPILATION: {path}", file=listing)
            for tok in lexer:
                if tok.kind == TokenType.ERROR:
                    errors += 1
                if args.tokens:
                    print(f"{tok.kind.name}\t{tok.lexeme!r}\t(line {tok.line}, col {tok.col})")
            read_error = lexer.buffer.read_error
    except FileNotFoundError:
        print(f"File {path} not found", file=sys.stderr)
        return 1
    except OSError as e:
        log_error(f"cannot open {path}: {e}")
        return 1

    if read_error is not None:
        log_error(f"read failed after line {lexer.lineno}: {read_error}")
        return 1
    if args.strict and errors:
        log_error(f"{errors} lexical error(s) in {path}")
        return 1
    return 0


def source_path(name: str) -> Path:
    """Append the default .tny extension when the name has no dot at all."""
    return Path(name if "." in name else name + ".tny")


if __name__ == "__main__":
    raise SystemExit(main())
