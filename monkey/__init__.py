"""Monkey language lexer package."""

from __future__ import annotations

from monkey.lexer import Lexer, tokenize
from monkey.tokens import KEYWORDS, Token, TokenType, lookup_ident


__all__ = [
    "KEYWORDS",
    "Lexer",
    "Token",
    "TokenType",
    "lookup_ident",
    "tokenize",
]
