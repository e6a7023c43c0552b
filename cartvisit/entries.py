"""Catalog entries: the closed set of things a cart can hold.

There are exactly three variants and the set is deliberately closed:

- Book: carries an author
- Electronics: carries a brand
- Clothing: carries a size

Every variant shares ``name``, ``unit_price`` and ``quantity``. Entries are
frozen; ``subtotal`` is derived on demand and never stored.

Adding a fourth variant means adding a ``visit_*`` method to every visitor
and a case to ``dispatch``. That cost is what buys the ability to add new
computations without touching this module.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import TYPE_CHECKING, assert_never

from .errors import Err, InvalidEntry, Ok, Result

if TYPE_CHECKING:
    from .visitor import CartVisitor


class EntryKind(Enum):
    BOOK = "Book"
    ELECTRONICS = "Electronics"
    CLOTHING = "Clothing"

    @classmethod
    def parse(cls, tag: str) -> EntryKind:
        """Resolve a display tag such as ``"book"`` or ``"Electronics"``."""
        for kind in cls:
            if kind.value.lower() == tag.strip().lower():
                return kind
        raise InvalidEntry("kind", tag, f"expected one of {[k.value for k in cls]}")


def to_decimal(value: Decimal | int | float | str) -> Decimal:
    """Convert a caller-supplied price to Decimal.

    Floats go through ``str`` so that ``19.99`` stays ``Decimal("19.99")``.
    """
    match value:
        case bool():
            raise InvalidEntry("unit_price", value, "not a number")
        case Decimal():
            return value
        case int() | str():
            try:
                return Decimal(value)
            except InvalidOperation:
                raise InvalidEntry("unit_price", value, "not a number") from None
        case float():
            return Decimal(str(value))
        case _:
            raise InvalidEntry("unit_price", value, "not a number")


class _Priced:
    """Shared behaviour for the entry variants.

    Subclasses are frozen dataclasses declaring ``name``, ``unit_price`` and
    ``quantity``; this mixin validates them and provides derived values.
    """

    name: str
    unit_price: Decimal
    quantity: int

    def __post_init__(self) -> None:
        price = to_decimal(self.unit_price)
        if not price.is_finite():
            raise InvalidEntry("unit_price", self.unit_price, "must be finite")
        if price < 0:
            raise InvalidEntry("unit_price", self.unit_price, "must be >= 0")
        if isinstance(self.quantity, bool) or not isinstance(self.quantity, int):
            raise InvalidEntry("quantity", self.quantity, "must be an integer")
        if self.quantity < 1:
            raise InvalidEntry("quantity", self.quantity, "must be >= 1")
        if price.is_zero():
            price = price.copy_abs()
        # Frozen: normalise the price in place once, at construction.
        object.__setattr__(self, "unit_price", price)

    @property
    def subtotal(self) -> Decimal:
        return self.unit_price * self.quantity

    def accept(self, visitor: CartVisitor) -> None:
        """Route to the ``visit_*`` method of ``visitor`` matching this variant."""
        from .visitor import dispatch

        dispatch(self, visitor)  # type: ignore[arg-type]


@dataclass(frozen=True)
class Book(_Priced):
    name: str
    author: str
    unit_price: Decimal
    quantity: int

    @property
    def kind(self) -> EntryKind:
        return EntryKind.BOOK

    @property
    def detail(self) -> str:
        return self.author


@dataclass(frozen=True)
class Electronics(_Priced):
    name: str
    brand: str
    unit_price: Decimal
    quantity: int

    @property
    def kind(self) -> EntryKind:
        return EntryKind.ELECTRONICS

    @property
    def detail(self) -> str:
        return self.brand


@dataclass(frozen=True)
class Clothing(_Priced):
    name: str
    size: str
    unit_price: Decimal
    quantity: int

    @property
    def kind(self) -> EntryKind:
        return EntryKind.CLOTHING

    @property
    def detail(self) -> str:
        return self.size


# Union of all entry variants
Entry = Book | Electronics | Clothing


def create_entry(
    kind: EntryKind | str,
    name: str,
    detail: str,
    unit_price: Decimal | int | float | str,
    quantity: int,
) -> Entry:
    """Build the variant named by ``kind``.

    ``detail`` lands in the variant's own attribute (author, brand or size).
    Raises InvalidEntry when the price or quantity is out of range, or when
    ``kind`` names no known variant.
    """
    if isinstance(kind, str):
        kind = EntryKind.parse(kind)
    price = to_decimal(unit_price)
    match kind:
        case EntryKind.BOOK:
            return Book(name=name, author=detail, unit_price=price, quantity=quantity)
        case EntryKind.ELECTRONICS:
            return Electronics(name=name, brand=detail, unit_price=price, quantity=quantity)
        case EntryKind.CLOTHING:
            return Clothing(name=name, size=detail, unit_price=price, quantity=quantity)
        case _:
            assert_never(kind)


def try_create_entry(
    kind: EntryKind | str,
    name: str,
    detail: str,
    unit_price: Decimal | int | float | str,
    quantity: int,
) -> Result[Entry, InvalidEntry]:
    """Like ``create_entry`` but returns ``Err`` instead of raising."""
    try:
        return Ok(create_entry(kind, name, detail, unit_price, quantity))
    except InvalidEntry as e:
        return Err(e)
