"""Toy lexer: parens, identifiers and integer literals, one line at a time."""

from lexing_toy.lexer.tokens import Token, TokenType
from lexing_toy.lexer.lexer import LexError, Lexer, LexResult, LexState, tokenize

__all__ = ["Token", "TokenType", "Lexer", "LexError", "LexResult", "LexState", "tokenize"]
