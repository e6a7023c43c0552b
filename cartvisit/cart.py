"""The cart: an ordered container that drives visitors over its entries.

Not thread-safe. Callers sharing a cart across threads serialise ``append``,
``clear`` and ``run_pass`` themselves; other readers use ``snapshot``.
"""

from __future__ import annotations

import logging

from .entries import Entry
from .visitor import CartVisitor

logger = logging.getLogger(__name__)


class Cart:
    def __init__(self) -> None:
        self._entries: list[Entry] = []

    def __len__(self) -> int:
        return len(self._entries)

    def __bool__(self) -> bool:
        return bool(self._entries)

    def append(self, entry: Entry) -> None:
        self._entries.append(entry)
        logger.debug("Appended %s %r (%d in cart)", entry.kind.value, entry.name, len(self))

    def clear(self) -> None:
        logger.debug("Clearing %d entries", len(self))
        self._entries = []

    def snapshot(self) -> tuple[Entry, ...]:
        """Independent, read-only copy of the entries in insertion order."""
        return tuple(self._entries)

    def run_pass(self, visitor: CartVisitor) -> None:
        """Visit every entry in insertion order. Read the result off ``visitor``."""
        entries = self.snapshot()
        logger.debug("Pass of %s over %d entries", type(visitor).__name__, len(entries))
        for entry in entries:
            entry.accept(visitor)
