"""LR(0) items, sets of items and collections of item sets."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

MAX_DOT = 31
"""Highest dot position an item may carry."""


@dataclass(frozen=True, order=True)
class Item:
    """A production number with the position of the dot in its body."""

    production: int
    dot: int

    def __post_init__(self) -> None:
        if self.production < 0:
            raise ValueError(f"production number must not be negative: {self.production}")
        if not 0 <= self.dot <= MAX_DOT:
            raise ValueError(f"dot position must lie in 0..{MAX_DOT}: {self.dot}")


class ItemSet:
    """A set of items grouped by production, iterated in (production, dot) order."""

    def __init__(self, items: Iterable[Item] = ()) -> None:
        self._dots: dict[int, set[int]] = {}
        for item in items:
            self.add(item)

    def add(self, item: Item) -> None:
        """Insert ``item``; adding one already present changes nothing."""
        self._dots.setdefault(item.production, set()).add(item.dot)

    def __contains__(self, item: object) -> bool:
        if not isinstance(item, Item):
            return False
        return item.dot in self._dots.get(item.production, ())

    def discard(self, item: Item) -> None:
        """Remove ``item`` if present."""
        dots = self._dots.get(item.production)
        if dots is None:
            return
        dots.discard(item.dot)
        if not dots:
            del self._dots[item.production]

    def union(self, other: Iterable[Item]) -> ItemSet:
        """Return a new set holding the items of both sets."""
        result = ItemSet(self)
        for item in other:
            result.add(item)
        return result

    __or__ = union

    def dots(self, production: int) -> frozenset[int]:
        """Dot positions present for ``production``."""
        return frozenset(self._dots.get(production, ()))

    def productions(self) -> list[int]:
        """Production numbers with at least one item, in ascending order."""
        return sorted(self._dots)

    def __iter__(self) -> Iterator[Item]:
        snapshot = [
            Item(production, dot)
            for production in sorted(self._dots)
            for dot in sorted(self._dots[production])
        ]
        return iter(snapshot)

    def __len__(self) -> int:
        return sum(len(dots) for dots in self._dots.values())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ItemSet):
            return NotImplemented
        return self._dots == other._dots

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        inner = ", ".join(f"({i.production}, {i.dot})" for i in self)
        return f"ItemSet([{inner}])"

    def __str__(self) -> str:
        lines = []
        for production in self.productions():
            mask = sum(1 << dot for dot in self._dots[production])
            lines.append(f"production: {production}\nitemSet: {mask}\nset: {mask:b}")
        return "\n".join(lines)


class ItemCollection:
    """Item sets held by identity; the most recently added comes first."""

    def __init__(self) -> None:
        self._sets: list[ItemSet] = []

    def add(self, item_set: ItemSet) -> None:
        """Put ``item_set`` at the front of the collection."""
        self._sets.insert(0, item_set)

    def remove(self, item_set: ItemSet) -> None:
        """Drop ``item_set`` (matched by identity); a set not held is ignored."""
        for index, held in enumerate(self._sets):
            if held is item_set:
                del self._sets[index]
                return

    def clear(self) -> None:
        """Empty every held item set, then the collection itself."""
        for held in self._sets:
            held._dots.clear()
        self._sets.clear()

    def __iter__(self) -> Iterator[ItemSet]:
        return iter(list(self._sets))

    def __len__(self) -> int:
        return len(self._sets)