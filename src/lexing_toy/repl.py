"""Interactive prompt: read a line, lex it, print the tokens, repeat.

The loop owns its input and output streams and calls the stateless lexer
once per line. It ends on end-of-input or a quit command.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, fields
from typing import TextIO

from lexing_toy.lexer import Lexer, LexResult, Token, TokenType
from lexing_toy.utils.logger import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class ReplConfig:
    """Immutable prompt configuration.

    Attributes:
        prompt: Text written before each line is read
        quit_commands: Lines that end the loop (compared after stripping)
        show_offsets: Prefix every rendered token with its column
    """

    prompt: str = "> "
    quit_commands: tuple[str, ...] = ("quit", "exit")
    show_offsets: bool = True

    @classmethod
    def from_dict(cls, config_dict: dict) -> ReplConfig:
        """Create a ReplConfig from a mapping, ignoring unknown keys."""
        known = {f.name for f in fields(cls)}
        values = {k: v for k, v in config_dict.items() if k in known}
        if "quit_commands" in values:
            values["quit_commands"] = tuple(values["quit_commands"])
        return cls(**values)


def render_token(token: Token, show_offsets: bool = True) -> str:
    """Format one token as ``<offset>: <KIND> [<value>]``."""
    match token.type:
        case TokenType.LPAREN | TokenType.RPAREN:
            text = token.type.name
        case TokenType.IDENTIFIER | TokenType.INTEGER:
            text = f"{token.type.name} {token.value}"
    if show_offsets:
        return f"{token.offset}: {text}"
    return text


def render_result(result: LexResult, source: str, show_offsets: bool = True) -> list[str]:
    """Format a whole line's result: its tokens, then the error with a caret."""
    lines = [render_token(t, show_offsets) for t in result.tokens]
    if result.error is not None:
        # Keep tabs so the caret lines up with the echoed source
        pad = "".join("\t" if c == "\t" else " " for c in source[: result.error.offset])
        lines.append(f"error: {result.error}")
        lines.append(f"  {source}")
        lines.append(f"  {pad}^")
    return lines


class Repl:
    """Read-lex-print loop over a pair of text streams.

    Usage::

        failures = Repl().run()   # stdin / stdout
    """

    def __init__(
        self,
        config: ReplConfig | None = None,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
    ) -> None:
        self.config = config or ReplConfig()
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout

    def run(self) -> int:
        """Loop until end-of-input or a quit command.

        Returns the number of lines that ended in a lexical error.
        """
        logger.debug("prompt loop started")
        failures = 0

        while True:
            self.stdout.write(self.config.prompt)
            self.stdout.flush()

            line = self.stdin.readline()
            if not line:
                self.stdout.write("\n")
                break

            line = line.rstrip("\r\n")
            stripped = line.strip()
            if stripped in self.config.quit_commands:
                break
            if not stripped:
                continue

            if not self.handle_line(line).ok:
                failures += 1

        logger.debug("prompt loop finished with %d failing line(s)", failures)
        return failures

    def handle_line(self, line: str) -> LexResult:
        """Lex one line and write its rendering."""
        result = Lexer(line).tokenize()
        for text in render_result(result, line, self.config.show_offsets):
            self.stdout.write(text + "\n")
        return result
