"""Recursive-descent parser for the right-recursive expression grammar."""

from __future__ import annotations

from .grammar import ParseError, Symbol
from .lexer import Lexer, Token


class PredictiveParser:
    """One procedure per nonterminal, driven by a single token of lookahead.

    Running out of input in the middle of a rule is not an error by itself:
    each procedure simply stops when no token is left. Only a token that
    cannot start or continue the current rule, or a required terminal that
    never arrives, is reported as a syntax error.
    """

    def __init__(self, text: str) -> None:
        self._lexer = Lexer(text)
        self.lookahead: Token | None = self._lexer.next_token()

    def _error(self, expected: str) -> ParseError:
        if self.lookahead is None:
            return ParseError(f"syntax error: expected {expected}, found end of input")
        return ParseError(f"syntax error: expected {expected}, found {self.lookahead.text!r}")

    def parse(self) -> bool:
        """Parse the whole input; raise ParseError if anything is left over."""
        self.expr()
        if self.lookahead is not None:
            raise self._error("end of input")
        return True

    def expr(self) -> None:
        """expr -> term expr'"""
        self.term()
        self.expr_prime()

    def expr_prime(self) -> None:
        """expr' -> + term expr' | - term expr' | empty"""
        while self.lookahead is not None and self.lookahead.kind in (Symbol.PLUS, Symbol.MINUS):
            self.match(self.lookahead.kind)
            self.term()

    def term(self) -> None:
        """term -> factor term'"""
        self.factor()
        self.term_prime()

    def term_prime(self) -> None:
        """term' -> * factor term' | / factor term' | empty"""
        while self.lookahead is not None and self.lookahead.kind in (Symbol.DOT, Symbol.DIV):
            self.match(self.lookahead.kind)
            self.factor()

    def factor(self) -> None:
        """factor -> NUM | ( expr )"""
        if self.lookahead is None:
            return
        if self.lookahead.kind == Symbol.NUM:
            self.match(Symbol.NUM)
        elif self.lookahead.kind == Symbol.LEFTPAR:
            self.match(Symbol.LEFTPAR)
            self.expr()
            self.match(Symbol.RIGHTPAR)
        else:
            raise self._error("a number or '('")

    def match(self, symbol: Symbol) -> None:
        """Consume the lookahead if it is ``symbol``; otherwise raise ParseError."""
        symbol = Symbol(symbol)
        if self.lookahead is None or self.lookahead.kind != symbol:
            raise self._error(symbol.name)
        self.lookahead = self._lexer.next_token()


def parse(text: str) -> bool:
    """Parse ``text`` by recursive descent; raise ParseError on a syntax error."""
    return PredictiveParser(text).parse()