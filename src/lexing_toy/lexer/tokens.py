"""Token types and Token dataclass for the toy lexer."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class TokenType(Enum):
    """Every distinct token the toy lexer can produce."""

    # Punctuation
    LPAREN = auto()
    RPAREN = auto()

    # Words
    IDENTIFIER = auto()
    INTEGER = auto()


# Source text of the single-character tokens
PUNCTUATION: dict[str, TokenType] = {
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
}


@dataclass(frozen=True, slots=True)
class Token:
    """A single token produced by the lexer.

    ``value`` is always the exact source text of the token, so integer
    literals keep any leading zeros. ``offset`` is the zero-based column
    of the token's first character.
    """

    type: TokenType
    value: str
    offset: int

    @property
    def end(self) -> int:
        """Column just past the last character of the token."""
        return self.offset + len(self.value)

    @property
    def int_value(self) -> int:
        if self.type is not TokenType.INTEGER:
            raise TypeError(f"{self.type.name} token has no integer value")
        return int(self.value)

    def __repr__(self) -> str:
        if self.type in (TokenType.LPAREN, TokenType.RPAREN):
            return f"Token({self.type.name}, {self.offset})"
        return f"Token({self.type.name}, {self.value!r}, {self.offset})"
