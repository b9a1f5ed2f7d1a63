"""Grammar symbols, productions and the two expression grammars."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class ParseError(Exception):
    """Raised when input does not belong to the expression language."""


class Symbol(IntEnum):
    """Terminals, nonterminals and special markers of the expression grammar."""

    NUM = 0
    LEFTPAR = 1
    RIGHTPAR = 2
    PLUS = 3
    MINUS = 4
    DOT = 5
    DIV = 6

    EXPR = 7
    TERM = 8
    FACTOR = 9

    EXPRP = 10
    TERMP = 11

    EMPTY = 12
    END = 13

    def is_terminal(self) -> bool:
        """True for the symbols a lexer can produce."""
        return Symbol.NUM <= self <= Symbol.DIV

    def is_variable(self) -> bool:
        """True for nonterminals, including the top-down helper variables."""
        return Symbol.EXPR <= self <= Symbol.TERMP


TERMINALS: tuple[Symbol, ...] = tuple(s for s in Symbol if s.is_terminal())
VARIABLES: tuple[Symbol, ...] = tuple(s for s in Symbol if s.is_variable())
START_SYMBOL = Symbol.EXPR

_SYMBOL_CHARS = {
    Symbol.PLUS: "+",
    Symbol.MINUS: "-",
    Symbol.DOT: "*",
    Symbol.DIV: "/",
    Symbol.LEFTPAR: "(",
    Symbol.RIGHTPAR: ")",
}


def symbol_char(symbol: Symbol) -> str:
    """Return the character that spells an operator or parenthesis symbol."""
    try:
        return _SYMBOL_CHARS[Symbol(symbol)]
    except KeyError:
        raise ValueError(f"symbol {Symbol(symbol).name} has no single character") from None


@dataclass(frozen=True)
class Production:
    """A grammar rule ``head -> body``."""

    head: Symbol
    body: tuple[Symbol, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "body", tuple(self.body))

    def __str__(self) -> str:
        body = " ".join(s.name for s in self.body) or "EMPTY"
        return f"{self.head.name} -> {body}"


def _rule(head: Symbol, *body: Symbol) -> Production:
    return Production(head, body)


S = Symbol

TOP_DOWN_GRAMMAR: tuple[Production, ...] = (
    _rule(S.EXPR, S.TERM, S.EXPRP),
    _rule(S.EXPRP, S.PLUS, S.TERM, S.EXPRP),
    _rule(S.EXPRP, S.MINUS, S.TERM, S.EXPRP),
    _rule(S.EXPRP, S.EMPTY),
    _rule(S.TERM, S.FACTOR, S.TERMP),
    _rule(S.TERMP, S.DOT, S.FACTOR, S.TERMP),
    _rule(S.TERMP, S.DIV, S.FACTOR, S.TERMP),
    _rule(S.TERMP, S.EMPTY),
    _rule(S.FACTOR, S.NUM),
    _rule(S.FACTOR, S.LEFTPAR, S.EXPR, S.RIGHTPAR),
)
"""Right-recursive grammar without left recursion, for LL parsing."""

BOTTOM_UP_GRAMMAR: tuple[Production, ...] = (
    _rule(S.EXPR, S.EXPR, S.PLUS, S.TERM),
    _rule(S.EXPR, S.EXPR, S.MINUS, S.TERM),
    _rule(S.EXPR, S.TERM),
    _rule(S.TERM, S.TERM, S.DOT, S.FACTOR),
    _rule(S.TERM, S.TERM, S.DIV, S.FACTOR),
    _rule(S.TERM, S.FACTOR),
    _rule(S.FACTOR, S.LEFTPAR, S.EXPR, S.RIGHTPAR),
    _rule(S.FACTOR, S.NUM),
)
"""Left-recursive grammar for LR parsing."""

del S