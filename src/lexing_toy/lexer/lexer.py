"""Toy lexer: hand-written, single-pass tokenizer for one line of source.

Token grammar::

    LParen   ::= '('
    RParen   ::= ')'
    Id       ::= IdStart IdCont*
    IdStart  ::= <alphabetic> | '_'
    IdCont   ::= IdStart | Digit
    IntLit   ::= Digit+
    Token    ::= LParen | RParen | Id | IntLit

    Whitespace ::= ' ' | '\\t' | '\\n'
    Line       ::= (Whitespace? Token)* Whitespace?

Design decisions:
- Tokens are produced lazily; every ``iter()`` starts a fresh scan.
- The three token classes have disjoint first characters, so one
  character of lookahead is enough and nothing is ever backtracked.
- Scanning stops at the first invalid character. Tokens already yielded
  stay valid; ``Lexer.tokenize`` returns them together with the error.
"""

from __future__ import annotations

import unicodedata
from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum, auto

from lexing_toy.lexer.tokens import PUNCTUATION, Token, TokenType
from lexing_toy.utils.logger import get_logger

logger = get_logger(__name__)

WHITESPACE = frozenset(" \t\n")

# Unicode Alphabetic: letters (L*), letter numbers (Nl) and the combining
# marks (Mn, Mc) that carry vowel signs. Mn/Mc also admit a few
# non-alphabetic accents such as U+0301.
ALPHABETIC_CATEGORIES = frozenset({"Lu", "Ll", "Lt", "Lm", "Lo", "Nl", "Mn", "Mc"})

# Circled letters are Alphabetic but categorised as symbols (So)
ALPHABETIC_SYMBOL_RANGES = (
    (0x24B6, 0x24E9),
    (0x1F130, 0x1F149),
    (0x1F150, 0x1F169),
    (0x1F170, 0x1F189),
)


class LexError(Exception):
    """Raised on the first character that cannot start a token."""

    def __init__(self, offset: int, character: str) -> None:
        self.offset = offset
        self.character = character
        self.message = f"invalid character {character!r}"
        super().__init__(f"{offset}: {self.message}")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LexError):
            return NotImplemented
        return (self.offset, self.character) == (other.offset, other.character)

    def __hash__(self) -> int:
        return hash((self.offset, self.character))


class LexState(Enum):
    """Scanner states.

    - START: Between tokens
    - IN_IDENTIFIER: Extending an identifier
    - IN_NUMBER: Extending an integer literal
    """

    START = auto()
    IN_IDENTIFIER = auto()
    IN_NUMBER = auto()


def is_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


def is_alphabetic(ch: str) -> bool:
    if unicodedata.category(ch) in ALPHABETIC_CATEGORIES:
        return True
    code = ord(ch)
    return any(lo <= code <= hi for lo, hi in ALPHABETIC_SYMBOL_RANGES)


def is_ident_start(ch: str) -> bool:
    return ch == "_" or is_alphabetic(ch)


def is_ident_cont(ch: str) -> bool:
    return is_ident_start(ch) or is_digit(ch)


@dataclass(frozen=True)
class LexResult:
    """Everything one line produced: its tokens, then the error if any."""

    tokens: tuple[Token, ...]
    error: LexError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def raise_for_error(self) -> None:
        if self.error is not None:
            raise self.error


class Lexer:
    """Tokenizes one line of source into a lazy stream of `Token` objects.

    Usage::

        for token in Lexer("(add 1 2)"):
            ...

        result = Lexer("a$b").tokenize()   # tokens + LexError, never raises
    """

    def __init__(self, source: str) -> None:
        self.source = source

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def __iter__(self) -> Iterator[Token]:
        """Start a new scan. Raises `LexError` on the first bad character."""
        return self._scan()

    def tokenize(self) -> LexResult:
        """Drain a scan, collecting tokens up to the first error."""
        tokens: list[Token] = []
        try:
            for token in self:
                tokens.append(token)
        except LexError as e:
            return LexResult(tuple(tokens), e)
        return LexResult(tuple(tokens))

    # ------------------------------------------------------------------
    # Scanning
    # ------------------------------------------------------------------

    def _scan(self) -> Iterator[Token]:
        source = self.source
        logger.debug("lexing %r", source)

        state = LexState.START
        start = 0
        pos = 0

        while pos < len(source):
            ch = source[pos]

            if state is LexState.IN_IDENTIFIER:
                if is_ident_cont(ch):
                    pos += 1
                    continue
                yield Token(TokenType.IDENTIFIER, source[start:pos], start)
                state = LexState.START
                continue  # re-examine ch from START

            if state is LexState.IN_NUMBER:
                if is_digit(ch):
                    pos += 1
                    continue
                yield Token(TokenType.INTEGER, source[start:pos], start)
                state = LexState.START
                continue

            if ch in WHITESPACE:
                pos += 1
            elif ch in PUNCTUATION:
                yield Token(PUNCTUATION[ch], ch, pos)
                pos += 1
            elif is_ident_start(ch):
                state = LexState.IN_IDENTIFIER
                start = pos
                pos += 1
            elif is_digit(ch):
                state = LexState.IN_NUMBER
                start = pos
                pos += 1
            else:
                logger.debug("invalid character %r at offset %d", ch, pos)
                raise LexError(pos, ch)

        # Flush the token still pending at end of line
        if state is LexState.IN_IDENTIFIER:
            yield Token(TokenType.IDENTIFIER, source[start:pos], start)
        elif state is LexState.IN_NUMBER:
            yield Token(TokenType.INTEGER, source[start:pos], start)


def tokenize(source: str) -> LexResult:
    """Lex one line, returning its tokens and the terminal error, if any."""
    return Lexer(source).tokenize()
