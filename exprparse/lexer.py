"""Tokenizer for arithmetic expressions over integers."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from .grammar import ParseError, Symbol

_DIGITS = frozenset("0123456789")

_OPERATORS = {
    "+": Symbol.PLUS,
    "-": Symbol.MINUS,
    "*": Symbol.DOT,
    "/": Symbol.DIV,
    "(": Symbol.LEFTPAR,
    ")": Symbol.RIGHTPAR,
}


class LexerError(ParseError):
    """Raised when the input holds a character no token starts with."""


@dataclass(frozen=True)
class Token:
    """A lexical token: its grammar symbol and the text it was read from."""

    kind: Symbol
    text: str


class Lexer:
    """Reads tokens from a line of text; input ends at a NUL or newline."""

    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0

    def _at_end(self) -> bool:
        return self._pos >= len(self._text) or self._text[self._pos] in ("\0", "\n")

    def next_token(self) -> Token | None:
        """Return the next token, or None once the input is exhausted."""
        if self._at_end():
            return None
        start = self._pos
        char = self._text[start]
        if char in _DIGITS:
            end = start
            while end < len(self._text) and self._text[end] in _DIGITS:
                end += 1
            self._pos = end
            return Token(Symbol.NUM, self._text[start:end])
        try:
            kind = _OPERATORS[char]
        except KeyError:
            raise LexerError(f"symbol not recognized: {char!r} at position {start}") from None
        self._pos = start + 1
        return Token(kind, char)

    def __iter__(self) -> Iterator[Token]:
        while (token := self.next_token()) is not None:
            yield token


def tokenize(text: str) -> list[Token]:
    """Return every token of ``text`` in order."""
    return list(Lexer(text))