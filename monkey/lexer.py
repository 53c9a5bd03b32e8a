"""Monkey lexical analyzer."""

from __future__ import annotations

from typing import Final, Iterator

from monkey.tokens import Token, TokenType, lookup_ident, token_from_char, token_from_text


# Marks the cursor as past the last character. Never a member of any
# character class below, so a literal NUL in the input stays ILLEGAL.
END: Final[str] = ""

_WHITESPACE: Final[frozenset[str]] = frozenset(" \t\n\r")

_SINGLE_CHAR_TOKENS: Final[dict[str, TokenType]] = {
    ";": TokenType.SEMICOLON,
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
    ",": TokenType.COMMA,
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "/": TokenType.SLASH,
    "*": TokenType.STAR,
    "<": TokenType.LT,
    ">": TokenType.GT,
    "{": TokenType.LBRACE,
    "}": TokenType.RBRACE,
}

# Characters that may start a two-character operator, keyed to
# (second character, two-character kind, one-character kind).
_PAIR_TOKENS: Final[dict[str, tuple[str, TokenType, TokenType]]] = {
    "=": ("=", TokenType.EQ, TokenType.ASSIGN),
    "!": ("=", TokenType.NEQ, TokenType.BANG),
}


def is_letter(ch: str) -> bool:
    """ASCII letters and underscore. Digits are not identifier characters."""
    return "a" <= ch <= "z" or "A" <= ch <= "Z" or ch == "_"


def is_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


class Lexer:
    """Pulls Monkey tokens out of source text one at a time.

    ``ch`` is always the character at ``position`` (or ``END`` once the
    cursor has run off the input) and ``read_position`` is always
    ``position + 1``.
    """

    def __init__(self, source: str | bytes) -> None:
        if isinstance(source, bytes):
            # latin-1 maps every byte to exactly one character
            source = source.decode("latin-1")
        self.source: Final[str] = source
        self.position = 0
        self.read_position = 0
        self.ch = END
        self._advance()

    def next_token(self) -> Token:
        """Return the next token and move the cursor past it.

        Once the input is exhausted every call returns a fresh EOF token.
        Unrecognized characters come back as ILLEGAL tokens; this method
        never raises.
        """
        self._skip_whitespace()
        ch = self.ch

        if ch in _PAIR_TOKENS:
            second, pair_type, single_type = _PAIR_TOKENS[ch]
            if self._peek() == second:
                self._advance()
                token = token_from_text(pair_type, ch + self.ch)
            else:
                token = token_from_char(single_type, ch)
        elif ch in _SINGLE_CHAR_TOKENS:
            token = token_from_char(_SINGLE_CHAR_TOKENS[ch], ch)
        elif ch == END:
            token = token_from_text(TokenType.EOF, "")
        elif is_letter(ch):
            # the reader already left the cursor on the following character
            literal = self._read_identifier()
            return token_from_text(lookup_ident(literal), literal)
        elif is_digit(ch):
            return token_from_text(TokenType.INT, self._read_number())
        else:
            token = token_from_char(TokenType.ILLEGAL, ch)

        self._advance()
        return token

    def tokenize(self) -> list[Token]:
        """Scan the remaining input and return the token stream, EOF last."""
        return list(self)

    def __iter__(self) -> Iterator[Token]:
        while True:
            token = self.next_token()
            yield token
            if token.token_type is TokenType.EOF:
                return

    def _advance(self) -> None:
        if self.read_position >= len(self.source):
            self.ch = END
        else:
            self.ch = self.source[self.read_position]
        self.position = self.read_position
        self.read_position += 1

    def _peek(self) -> str:
        if self.read_position >= len(self.source):
            return END
        return self.source[self.read_position]

    def _skip_whitespace(self) -> None:
        while self.ch in _WHITESPACE:
            self._advance()

    def _read_identifier(self) -> str:
        start = self.position
        while is_letter(self.ch):
            self._advance()
        return self.source[start:self.position]

    def _read_number(self) -> str:
        start = self.position
        while is_digit(self.ch):
            self._advance()
        return self.source[start:self.position]


def tokenize(source: str | bytes) -> list[Token]:
    """Tokenize full source and return the token stream."""
    return Lexer(source).tokenize()
