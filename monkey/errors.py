"""Diagnostics and exception hierarchy for the Monkey front end."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable

from monkey.tokens import Token, TokenType


@dataclass(frozen=True)
class Diagnostic:
    """Machine-readable diagnostic."""

    code: str
    message: str
    hint: str = ""

    def to_dict(self) -> dict[str, Any]:
        """Serialize the diagnostic for JSON output."""
        return {
            "code": self.code,
            "message": self.message,
            "hint": self.hint,
        }


class MonkeyError(Exception):
    """Base error carrying a diagnostic code."""

    def __init__(self, code: str, message: str, hint: str = "") -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.hint = hint

    def to_diagnostic(self) -> Diagnostic:
        """Convert exception into serializable diagnostic."""
        return Diagnostic(code=self.code, message=self.message, hint=self.hint)

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


class CLIError(MonkeyError):
    """Raised by CLI usage failures."""


def illegal_diagnostics(tokens: Iterable[Token]) -> list[Diagnostic]:
    """Report every ILLEGAL token in a stream as a LEX001 diagnostic.

    The lexer keeps errors in-band; this is for consumers that want to halt
    on them.
    """
    return [
        Diagnostic(
            code="LEX001",
            message=f"Illegal character {token.value!r}.",
            hint="Remove the character; Monkey has no string, float or comment syntax.",
        )
        for token in tokens
        if token.token_type is TokenType.ILLEGAL
    ]


def format_diagnostic(diag: Diagnostic) -> str:
    """Format diagnostic into a stable human-readable line."""
    hint = f" Hint: {diag.hint}" if diag.hint else ""
    return f"{diag.code}: {diag.message}{hint}"
