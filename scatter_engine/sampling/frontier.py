# scatter_engine/sampling/frontier.py
from __future__ import annotations
from typing import List

from ..core.utils.rng import RandomSource


class Frontier:
    """Active list of output indices still used as spawn centres.

    Order carries no meaning, so removal swaps the last entry into the hole.
    """

    __slots__ = ("_items",)

    def __init__(self):
        self._items: List[int] = []

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def __getitem__(self, slot: int) -> int:
        return self._items[slot]

    def add(self, index: int) -> None:
        self._items.append(index)

    def pick(self, rng: RandomSource) -> int:
        """Uniformly random slot. Frontier must be non-empty."""
        return rng.randint(0, len(self._items) - 1)

    def remove_at(self, slot: int) -> int:
        items = self._items
        removed = items[slot]
        last = items.pop()
        if slot < len(items):
            items[slot] = last
        return removed
