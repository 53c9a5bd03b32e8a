"""Command-line interface for the Monkey lexer."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from monkey.errors import CLIError, Diagnostic, MonkeyError, format_diagnostic, illegal_diagnostics
from monkey.lexer import Lexer
from monkey.serialization import format_tokens, tokens_to_json


def build_parser() -> argparse.ArgumentParser:
    """Build argparse command tree for the Monkey CLI."""
    parser = argparse.ArgumentParser(prog="monkey", description="Monkey lexer tooling")
    subparsers = parser.add_subparsers(dest="command", required=True)

    tokens_parser = subparsers.add_parser("tokens", help="Print the token stream of Monkey source")
    tokens_parser.add_argument("input", nargs="?", help="Input source file")
    tokens_parser.add_argument("--code", help="Inline Monkey source string")
    tokens_parser.add_argument("--json", action="store_true", help="Emit tokens as a JSON array")
    tokens_parser.add_argument(
        "--strict",
        action="store_true",
        help="Report ILLEGAL tokens on stderr and exit with status 1.",
    )

    return parser


def run(argv: list[str] | None = None) -> int:
    """Run CLI and return shell exit code."""
    args = build_parser().parse_args(argv)

    try:
        if args.command == "tokens":
            source = _resolve_source(args.input, args.code)
            tokens = Lexer(source).tokenize()
            if args.json:
                print(tokens_to_json(tokens))
            else:
                sys.stdout.write(format_tokens(tokens))

            if args.strict:
                diagnostics = illegal_diagnostics(tokens)
                for diag in diagnostics:
                    print(format_diagnostic(diag), file=sys.stderr)
                if diagnostics:
                    return 1
            return 0

        raise CLIError(code="CLI001", message=f"Unsupported command '{args.command}'.")

    except CLIError as err:
        diag = Diagnostic(code=err.code, message=err.message, hint="Run monkey --help for usage.")
        print(format_diagnostic(diag), file=sys.stderr)
        return 2
    except MonkeyError as err:
        print(format_diagnostic(err.to_diagnostic()), file=sys.stderr)
        return 1


def _resolve_source(input_path: str | None, inline_code: str | None) -> bytes:
    if input_path and inline_code is not None:
        raise CLIError(code="CLI002", message="Use either input file path or --code, not both.")
    if input_path:
        try:
            return Path(input_path).read_bytes()
        except OSError as err:
            raise CLIError(code="CLI003", message=f"Cannot read '{input_path}': {err.strerror}.") from err
    if inline_code is not None:
        # same bytes a file holding this text would give
        return inline_code.encode("utf-8", "surrogateescape")
    raise CLIError(code="CLI002", message="No source provided. Pass input file path or --code.")


if __name__ == "__main__":
    raise SystemExit(run())
