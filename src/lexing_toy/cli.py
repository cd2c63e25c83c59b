"""lexing_toy CLI entry point.

Usage:
    lexing-toy [-v] [repl]              Start the interactive prompt
    lexing-toy [-v] tokenize <file>     Display the token stream of every line

Options:
    -v, --verbose                       Log debug output to stderr (before the command)
    -h, --help                          Show this message
    --version                           Show the version
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

from lexing_toy.lexer import Lexer
from lexing_toy.repl import Repl, render_token


def main(argv: list[str] | None = None) -> int:
    args = list(argv if argv is not None else sys.argv[1:])

    # Options are only recognised before the command
    while args and args[0] in ("-v", "--verbose"):
        args.pop(0)
        _enable_debug_logging()

    command = args[0] if args else "repl"

    if command in ("--help", "-h"):
        print(__doc__.strip())
        return 0

    if command == "--version":
        from lexing_toy import __version__
        print(f"lexing_toy {__version__}")
        return 0

    if command == "repl":
        Repl().run()
        return 0

    if command == "tokenize":
        if len(args) < 2:
            print(f"Error: command '{command}' requires a file argument")
            return 1
        filepath = Path(args[1])
        if not filepath.exists():
            print(f"Error: file not found: {filepath}")
            return 1
        try:
            source = filepath.read_bytes().decode("utf-8")
        except UnicodeDecodeError as e:
            print(f"Error: {filepath} is not valid UTF-8: {e.reason} at byte {e.start}")
            return 1
        return _cmd_tokenize(source, str(filepath))

    print(f"Error: unknown command '{command}'")
    print(__doc__.strip())
    return 1


def _cmd_tokenize(source: str, filename: str) -> int:
    """Display the token stream of each line, reporting every failing line."""
    status = 0
    for lineno, line in enumerate(source.split("\n"), start=1):
        line = line.removesuffix("\r")
        result = Lexer(line).tokenize()
        for tok in result.tokens:
            print(f"{lineno}:{render_token(tok)}")
        if result.error is not None:
            print(f"{filename}:{lineno}:{result.error.offset + 1}: {result.error.message}")
            status = 1
    return status


def _enable_debug_logging() -> None:
    logging.basicConfig(format="%(name)s: %(message)s")
    logging.getLogger("lexing_toy").setLevel(logging.DEBUG)


if __name__ == "__main__":
    sys.exit(main())
