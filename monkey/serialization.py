"""Serialization helpers for token streams."""

from __future__ import annotations

import json
from typing import Any, Iterable

from monkey.errors import MonkeyError
from monkey.tokens import Token, TokenType


def tokens_to_json(tokens: Iterable[Token], indent: int = 2) -> str:
    """Serialize a token stream to JSON text."""
    payload: list[dict[str, Any]] = [token.to_dict() for token in tokens]
    return json.dumps(payload, indent=indent)


def tokens_from_json(payload: str) -> list[Token]:
    """Deserialize a token stream from JSON text."""
    data = json.loads(payload)
    if not isinstance(data, list):
        raise MonkeyError(
            code="SER002",
            message="Token stream must be a JSON array.",
            hint="Expected the output of tokens_to_json.",
        )
    return [_token_from_dict(item) for item in data]


def _token_from_dict(item: Any) -> Token:
    try:
        type_name = item["type"]
        literal = item["literal"]
    except (KeyError, TypeError) as err:
        raise MonkeyError(
            code="SER002",
            message=f"Malformed token entry {item!r}.",
            hint='Each token is an object with "type" and "literal" keys.',
        ) from err
    if not isinstance(literal, str):
        raise MonkeyError(
            code="SER002",
            message=f"Token literal must be a string, got {literal!r}.",
            hint='Each token is an object with "type" and "literal" keys.',
        )
    try:
        token_type = TokenType(type_name)
    except ValueError as err:
        raise MonkeyError(
            code="SER001",
            message=f"Unknown token type {type_name!r}.",
            hint="Token types are serialized by their display string, e.g. '==' or 'IDENT'.",
        ) from err
    return Token(token_type=token_type, value=literal)


def format_tokens(tokens: Iterable[Token]) -> str:
    """Render one NAME('literal') line per token."""
    return "".join(f"{token}\n" for token in tokens)
