"""Closure and goto over sets of LR(0) items."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from .grammar import BOTTOM_UP_GRAMMAR, Production, Symbol
from .items import Item, ItemSet


def _production(grammar: Sequence[Production], number: int) -> Production:
    try:
        return grammar[number]
    except IndexError:
        raise ValueError(f"no production numbered {number} in the grammar") from None


def closure(item_set: Iterable[Item], grammar: Sequence[Production] = BOTTOM_UP_GRAMMAR) -> ItemSet:
    """Return the LR(0) closure of ``item_set``.

    Whenever the dot stands before a variable, every production of that
    variable is added with the dot at its start, until nothing new appears.
    The given set is left unchanged.
    """
    result = ItemSet(item_set)
    pending = list(result)
    while pending:
        item = pending.pop()
        body = _production(grammar, item.production).body
        if item.dot >= len(body):
            continue
        following = body[item.dot]
        if not following.is_variable():
            continue
        for number, production in enumerate(grammar):
            if production.head != following:
                continue
            fresh = Item(number, 0)
            if fresh not in result:
                result.add(fresh)
                pending.append(fresh)
    return result


def goto(
    item_set: Iterable[Item], symbol: Symbol, grammar: Sequence[Production] = BOTTOM_UP_GRAMMAR
) -> ItemSet:
    """Return the closure of the items reached by moving the dot over ``symbol``."""
    symbol = Symbol(symbol)
    moved = ItemSet()
    for item in item_set:
        body = _production(grammar, item.production).body
        if item.dot < len(body) and body[item.dot] == symbol:
            moved.add(Item(item.production, item.dot + 1))
    return closure(moved, grammar)