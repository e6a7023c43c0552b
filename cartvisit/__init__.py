"""cartvisit: computations over a shopping cart by double dispatch."""

from .cart import Cart
from .computations import (
    DiscountVisitor,
    PrintDetailsVisitor,
    TotalPriceVisitor,
    discounted_subtotal,
    run_discounted_total,
    run_print_details,
    run_total,
)
from .entries import (
    Book,
    Clothing,
    Electronics,
    Entry,
    EntryKind,
    create_entry,
    try_create_entry,
)
from .errors import Err, InvalidEntry, Ok, Result
from .visitor import CartVisitor, dispatch

__all__ = [
    # Entries
    "Book", "Clothing", "Electronics", "Entry", "EntryKind",
    "create_entry", "try_create_entry",
    # Dispatch
    "CartVisitor", "dispatch",
    # Cart
    "Cart",
    # Computations
    "DiscountVisitor", "PrintDetailsVisitor", "TotalPriceVisitor",
    "discounted_subtotal", "run_discounted_total", "run_print_details", "run_total",
    # Errors
    "Err", "InvalidEntry", "Ok", "Result",
]
