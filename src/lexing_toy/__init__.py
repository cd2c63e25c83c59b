"""lexing_toy: a minimal interactive tokenizer for parens, identifiers and integers."""

from lexing_toy.lexer import LexError, Lexer, LexResult, Token, TokenType, tokenize

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "Lexer",
    "LexError",
    "LexResult",
    "Token",
    "TokenType",
    "tokenize",
]
