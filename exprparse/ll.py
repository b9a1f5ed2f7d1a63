"""FIRST and FOLLOW sets, the LL(1) parse table and a table-driven parser."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from .grammar import START_SYMBOL, TERMINALS, TOP_DOWN_GRAMMAR, ParseError, Production, Symbol
from .lexer import Lexer
from .stack import SymbolStack

ParseTable = dict[tuple[Symbol, Symbol], Production]


def derives_empty(symbol: Symbol, grammar: Sequence[Production] = TOP_DOWN_GRAMMAR) -> bool:
    """True if some rule of ``symbol`` has the empty string as its body."""
    symbol = Symbol(symbol)
    if symbol.is_terminal():
        return False
    return any(p.head == symbol and p.body[:1] == (Symbol.EMPTY,) for p in grammar)


def _first(symbol: Symbol, grammar: Sequence[Production], visiting: frozenset[Symbol]) -> set[Symbol]:
    if symbol.is_terminal():
        return {symbol}
    if symbol in visiting:
        return set()
    visiting = visiting | {symbol}
    result: set[Symbol] = set()
    for production in grammar:
        if production.head != symbol:
            continue
        if production.body[:1] == (Symbol.EMPTY,):
            result.add(Symbol.EMPTY)
            continue
        for part in production.body:
            result |= _first(part, grammar, visiting)
            if not derives_empty(part, grammar):
                break
    return result


def first(symbol: Symbol, grammar: Sequence[Production] = TOP_DOWN_GRAMMAR) -> frozenset[Symbol]:
    """Return the FIRST set of a grammar symbol; it may hold ``Symbol.EMPTY``."""
    return frozenset(_first(Symbol(symbol), grammar, frozenset()))


def _follow(symbol: Symbol, grammar: Sequence[Production], visiting: frozenset[Symbol]) -> set[Symbol]:
    if symbol in visiting:
        return set()
    visiting = visiting | {symbol}
    result: set[Symbol] = set()
    if symbol == START_SYMBOL:
        result.add(Symbol.END)
    for production in grammar:
        body = production.body
        for position, part in enumerate(body):
            if part != symbol:
                continue
            if position < len(body) - 1:
                following = first(body[position + 1], grammar)
                if Symbol.EMPTY in following:
                    result |= _follow(production.head, grammar, visiting)
                result |= following - {Symbol.EMPTY}
                break
            if production.head != symbol:
                result |= _follow(production.head, grammar, visiting)
                break
    return result


def follow(symbol: Symbol, grammar: Sequence[Production] = TOP_DOWN_GRAMMAR) -> frozenset[Symbol]:
    """Return the FOLLOW set of a grammar symbol; ``Symbol.END`` marks end of input."""
    return frozenset(_follow(Symbol(symbol), grammar, frozenset()))


def first_of_production(
    production: Production, grammar: Sequence[Production] = TOP_DOWN_GRAMMAR
) -> frozenset[Symbol]:
    """Return the FIRST set of the body of ``production``."""
    if production.body == (Symbol.EMPTY,):
        return frozenset({Symbol.EMPTY})
    result: set[Symbol] = set()
    for part in production.body:
        result |= first(part, grammar)
        if not derives_empty(part, grammar):
            break
    return frozenset(result)


def build_parse_table(grammar: Sequence[Production] = TOP_DOWN_GRAMMAR) -> ParseTable:
    """Map (variable, terminal) pairs to the production to expand; later rules win."""
    table: ParseTable = {}
    for production in grammar:
        starts = first_of_production(production, grammar)
        targets: Iterable[Symbol] = starts
        if Symbol.EMPTY in starts:
            targets = starts | follow(production.head, grammar)
        for terminal in TERMINALS:
            if terminal in targets:
                table[(production.head, terminal)] = production
    return table


def parse(text: str, grammar: Sequence[Production] = TOP_DOWN_GRAMMAR) -> bool:
    """Parse ``text`` with the table-driven LL(1) method.

    Raises ParseError on a syntax error. Returns False when the start symbol
    is fully derived but input remains. Once input runs out, nonterminals
    left on the stack are discarded; a terminal left there is an error.
    """
    table = build_parse_table(grammar)
    lexer = Lexer(text)
    stack = SymbolStack()
    stack.push(START_SYMBOL)
    token = lexer.next_token()

    while not stack.is_empty():
        top = stack.peek()
        if token is None:
            if top.is_terminal():
                raise ParseError(f"unexpected end of input, expected {top.name}")
            while not stack.is_empty() and not stack.peek().is_terminal():
                stack.pop()
        elif top == Symbol.EMPTY:
            stack.pop()
        elif top.is_terminal():
            if top != token.kind:
                raise ParseError(f"expected {top.name}, found {token.text!r}")
            stack.pop()
            token = lexer.next_token()
        else:
            production = table.get((top, token.kind))
            if production is None:
                raise ParseError(f"no rule for {top.name} on {token.text!r}")
            stack.pop()
            stack.push_production(production)

    return token is None