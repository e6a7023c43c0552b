"""The dispatch capability: one operation per entry variant.

A computation implements ``CartVisitor``; an entry routes itself to the
matching method through ``dispatch``. Visitors receive the full entry record
so variant-specific attributes are observable, and must not mutate it.
"""

from __future__ import annotations

from typing import Protocol, assert_never

from .entries import Book, Clothing, Electronics, Entry


class CartVisitor(Protocol):
    def visit_book(self, book: Book) -> None: ...

    def visit_electronics(self, electronics: Electronics) -> None: ...

    def visit_clothing(self, clothing: Clothing) -> None: ...


def dispatch(entry: Entry, visitor: CartVisitor) -> None:
    """Call the one ``visit_*`` method of ``visitor`` that matches ``entry``.

    The match is exhaustive over ``Entry``; a new variant without a case here
    fails type checking at ``assert_never``.
    """
    match entry:
        case Book():
            visitor.visit_book(entry)
        case Electronics():
            visitor.visit_electronics(entry)
        case Clothing():
            visitor.visit_clothing(entry)
        case _:
            assert_never(entry)
