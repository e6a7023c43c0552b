"""Computations over a cart, each a visitor with its own accumulator.

An accumulator is valid for exactly one pass. The ``run_*`` helpers build a
fresh one per call, so callers normally never touch the classes directly.
"""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import TYPE_CHECKING, assert_never

from .entries import Book, Clothing, Electronics, Entry
from .money import DEFAULT_CURRENCY, format_amount

if TYPE_CHECKING:
    from .cart import Cart

logger = logging.getLogger(__name__)

# Discount rules, applied per entry and never combined across entries.
BOOK_RATE = Decimal("0.95")
CLOTHING_RATE = Decimal("0.90")
ELECTRONICS_THRESHOLD = Decimal("200")
ELECTRONICS_FLAT_OFF = Decimal("20")


# ---------------------------------------------------------------------------
# Print details
# ---------------------------------------------------------------------------


class PrintDetailsVisitor:
    """Collects one readable line per visited entry, in visit order."""

    def __init__(self, currency: str = DEFAULT_CURRENCY) -> None:
        self.currency = currency
        self._lines: list[str] = []

    @property
    def lines(self) -> list[str]:
        return list(self._lines)

    def _money(self, value: Decimal) -> str:
        return f"{self.currency}{format_amount(value)}"

    def _tail(self, entry: Entry) -> str:
        return (
            f"{self._money(entry.unit_price)} x {entry.quantity}"
            f" = {self._money(entry.subtotal)}"
        )

    def visit_book(self, book: Book) -> None:
        self._lines.append(f"[Book] {book.name} by {book.author} - {self._tail(book)}")

    def visit_electronics(self, electronics: Electronics) -> None:
        self._lines.append(
            f"[Electronics] {electronics.name} - {electronics.brand} - {self._tail(electronics)}"
        )

    def visit_clothing(self, clothing: Clothing) -> None:
        self._lines.append(
            f"[Clothing] {clothing.name} (size {clothing.size}) - {self._tail(clothing)}"
        )


# ---------------------------------------------------------------------------
# Totals
# ---------------------------------------------------------------------------


class TotalPriceVisitor:
    """Sum of subtotals, no discounts or tax."""

    def __init__(self) -> None:
        self._total = Decimal("0")

    @property
    def total(self) -> Decimal:
        return self._total

    def visit_book(self, book: Book) -> None:
        self._total += book.subtotal

    def visit_electronics(self, electronics: Electronics) -> None:
        self._total += electronics.subtotal

    def visit_clothing(self, clothing: Clothing) -> None:
        self._total += clothing.subtotal


def discounted_subtotal(entry: Entry) -> Decimal:
    """Apply the variant's own discount rule to one entry's subtotal.

    Book: 5% off. Electronics: 20 off when the subtotal exceeds 200.
    Clothing: 10% off.
    """
    subtotal = entry.subtotal
    match entry:
        case Book():
            return subtotal * BOOK_RATE
        case Electronics():
            if subtotal > ELECTRONICS_THRESHOLD:
                return subtotal - ELECTRONICS_FLAT_OFF
            return subtotal
        case Clothing():
            return subtotal * CLOTHING_RATE
        case _:
            assert_never(entry)


class DiscountVisitor:
    """Sum of independently discounted subtotals."""

    def __init__(self) -> None:
        self._total = Decimal("0")

    @property
    def discounted_total(self) -> Decimal:
        return self._total

    def visit_book(self, book: Book) -> None:
        self._total += discounted_subtotal(book)

    def visit_electronics(self, electronics: Electronics) -> None:
        self._total += discounted_subtotal(electronics)

    def visit_clothing(self, clothing: Clothing) -> None:
        self._total += discounted_subtotal(clothing)


# ---------------------------------------------------------------------------
# One-call helpers: fresh accumulator per pass
# ---------------------------------------------------------------------------


def run_print_details(cart: Cart, currency: str = DEFAULT_CURRENCY) -> list[str]:
    visitor = PrintDetailsVisitor(currency)
    cart.run_pass(visitor)
    return visitor.lines


def run_total(cart: Cart) -> Decimal:
    visitor = TotalPriceVisitor()
    cart.run_pass(visitor)
    logger.debug("Total over %d entries: %s", len(cart), visitor.total)
    return visitor.total


def run_discounted_total(cart: Cart) -> Decimal:
    visitor = DiscountVisitor()
    cart.run_pass(visitor)
    logger.debug("Discounted total over %d entries: %s", len(cart), visitor.discounted_total)
    return visitor.discounted_total
