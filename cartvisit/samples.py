"""Seed entries used by ``cartvisit --sample`` and the tests."""

from decimal import Decimal

from .cart import Cart
from .entries import Book, Clothing, Electronics, Entry


def sample_entries() -> tuple[Entry, ...]:
    return (
        Book("The Art of Java", "Ada Coder", Decimal("29.99"), 1),
        Electronics("Smartphone X", "PhoneCo", Decimal("699.00"), 1),
        Clothing("T-Shirt", "M", Decimal("19.50"), 2),
    )


def seed(cart: Cart) -> Cart:
    for entry in sample_entries():
        cart.append(entry)
    return cart
