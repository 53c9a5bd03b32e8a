"""Token definitions for Monkey lexical analysis."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping


class TokenType(Enum):
    """Closed set of token kinds; each value is the kind's display string."""

    ILLEGAL = "ILLEGAL"
    EOF = "EOF"

    IDENT = "IDENT"
    INT = "INT"

    ASSIGN = "="
    PLUS = "+"
    MINUS = "-"
    BANG = "!"
    STAR = "*"
    SLASH = "/"
    LT = "<"
    GT = ">"
    EQ = "=="
    NEQ = "!="

    COMMA = ","
    SEMICOLON = ";"
    LPAREN = "("
    RPAREN = ")"
    LBRACE = "{"
    RBRACE = "}"

    FUNCTION = "FUNCTION"
    LET = "LET"
    TRUE = "TRUE"
    FALSE = "FALSE"
    IF = "IF"
    ELSE = "ELSE"
    RETURN = "RETURN"

    def __str__(self) -> str:
        return self.value


KEYWORDS: Mapping[str, TokenType] = MappingProxyType(
    {
        "fn": TokenType.FUNCTION,
        "let": TokenType.LET,
        "true": TokenType.TRUE,
        "false": TokenType.FALSE,
        "if": TokenType.IF,
        "else": TokenType.ELSE,
        "return": TokenType.RETURN,
    }
)


def lookup_ident(ident: str) -> TokenType:
    """Resolve an identifier to its keyword kind, or IDENT."""
    return KEYWORDS.get(ident, TokenType.IDENT)


@dataclass(frozen=True)
class Token:
    """A single lexical token and the source text that produced it."""

    token_type: TokenType
    value: str

    def to_dict(self) -> dict[str, Any]:
        """Serialize the token to a JSON-compatible mapping."""
        return {"type": self.token_type.value, "literal": self.value}

    def __str__(self) -> str:
        return f"{self.token_type.name}({self.value!r})"


def token_from_char(token_type: TokenType, ch: str) -> Token:
    """Build a token whose literal is exactly one source character."""
    if len(ch) != 1:
        raise ValueError(f"Expected a single character, got {ch!r}.")
    return Token(token_type=token_type, value=ch)


def token_from_text(token_type: TokenType, text: str) -> Token:
    """Build a token from a source slice of any length (empty for EOF)."""
    return Token(token_type=token_type, value=text)
