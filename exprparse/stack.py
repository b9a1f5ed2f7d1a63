"""Stack of grammar symbols used by the table-driven LL parser."""

from __future__ import annotations

from collections.abc import Iterator

from .grammar import Production, Symbol


class SymbolStack:
    """LIFO stack; iteration runs from the top down."""

    def __init__(self) -> None:
        self._items: list[Symbol] = []

    def push(self, symbol: Symbol) -> None:
        """Put one symbol on top."""
        self._items.append(symbol)

    def push_production(self, production: Production) -> None:
        """Push the body of ``production`` so that its first symbol is on top."""
        self._items.extend(reversed(production.body))

    def peek(self) -> Symbol:
        """Return the top symbol without removing it."""
        if not self._items:
            raise IndexError("stack of labels is empty")
        return self._items[-1]

    def pop(self) -> Symbol:
        """Remove and return the top symbol."""
        if not self._items:
            raise IndexError("stack of labels is empty")
        return self._items.pop()

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Symbol]:
        return reversed(self._items)

    def __str__(self) -> str:
        return " ".join(str(int(s)) for s in self)