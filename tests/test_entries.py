import dataclasses
from decimal import Decimal

import pytest

from cartvisit import (
    Book,
    Clothing,
    Electronics,
    EntryKind,
    Err,
    InvalidEntry,
    Ok,
    create_entry,
    try_create_entry,
)
from cartvisit.entries import to_decimal


def test_book_fields() -> None:
    b = Book("Dune", "Frank Herbert", Decimal("10.00"), 2)
    assert b.name == "Dune"
    assert b.author == "Frank Herbert"
    assert b.detail == "Frank Herbert"
    assert b.kind is EntryKind.BOOK
    assert b.kind.value == "Book"
    assert b.subtotal == Decimal("20.00")


def test_variant_details() -> None:
    assert Electronics("Phone", "Acme", Decimal("1"), 1).detail == "Acme"
    assert Clothing("Shirt", "XL", Decimal("1"), 1).detail == "XL"
    assert Electronics("Phone", "Acme", Decimal("1"), 1).kind is EntryKind.ELECTRONICS
    assert Clothing("Shirt", "XL", Decimal("1"), 1).kind is EntryKind.CLOTHING


def test_int_price_becomes_decimal() -> None:
    b = Book("Dune", "Frank Herbert", 10, 3)  # type: ignore[arg-type]
    assert isinstance(b.unit_price, Decimal)
    assert b.subtotal == Decimal("30")


def test_zero_price_allowed() -> None:
    assert Clothing("Sock", "S", Decimal("0"), 1).subtotal == 0


def test_entries_are_frozen() -> None:
    b = Book("Dune", "Frank Herbert", Decimal("10.00"), 2)
    with pytest.raises(dataclasses.FrozenInstanceError):
        b.quantity = 5  # type: ignore[misc]


class TestInvalidEntry:
    def test_negative_price(self):
        with pytest.raises(InvalidEntry) as exc:
            Book("Dune", "Frank Herbert", Decimal("-0.01"), 1)
        assert exc.value.field == "unit_price"

    @pytest.mark.parametrize("qty", [0, -3])
    def test_quantity_below_one(self, qty: int):
        with pytest.raises(InvalidEntry) as exc:
            Electronics("Phone", "Acme", Decimal("5"), qty)
        assert exc.value.field == "quantity"

    def test_non_integer_quantity(self):
        with pytest.raises(InvalidEntry):
            Clothing("Shirt", "M", Decimal("5"), 1.5)  # type: ignore[arg-type]
        with pytest.raises(InvalidEntry):
            Clothing("Shirt", "M", Decimal("5"), True)

    @pytest.mark.parametrize("price", ["NaN", "Infinity"])
    def test_non_finite_price(self, price: str):
        with pytest.raises(InvalidEntry):
            Book("Dune", "Frank Herbert", Decimal(price), 1)

    def test_is_a_value_error(self):
        with pytest.raises(ValueError):
            Book("Dune", "Frank Herbert", Decimal("-1"), 1)


class TestCreateEntry:
    def test_by_enum(self):
        e = create_entry(EntryKind.ELECTRONICS, "Laptop", "Acme", Decimal("250.00"), 1)
        assert e == Electronics("Laptop", "Acme", Decimal("250.00"), 1)

    @pytest.mark.parametrize(
        "tag, cls",
        [("book", Book), ("ELECTRONICS", Electronics), (" Clothing ", Clothing)],
    )
    def test_by_tag(self, tag: str, cls: type):
        assert isinstance(create_entry(tag, "x", "y", "1.00", 1), cls)

    def test_detail_goes_to_variant_attribute(self):
        c = create_entry("clothing", "Jacket", "L", "20.00", 3)
        assert isinstance(c, Clothing)
        assert c.size == "L"

    def test_float_price_keeps_its_digits(self):
        b = create_entry("book", "Dune", "Frank Herbert", 19.99, 1)
        assert b.unit_price == Decimal("19.99")

    def test_unknown_kind(self):
        with pytest.raises(InvalidEntry) as exc:
            create_entry("furniture", "Chair", "-", "10", 1)
        assert exc.value.field == "kind"

    def test_try_create_ok(self):
        match try_create_entry("book", "Dune", "Frank Herbert", "10.00", 2):
            case Ok(entry):
                assert entry.subtotal == Decimal("20.00")
            case Err(e):
                pytest.fail(f"unexpected error: {e}")

    def test_try_create_err(self):
        result = try_create_entry("book", "Dune", "Frank Herbert", "10.00", 0)
        assert isinstance(result, Err)
        assert result.error.field == "quantity"


def test_to_decimal_rejects_garbage() -> None:
    with pytest.raises(InvalidEntry):
        to_decimal("twelve")
    with pytest.raises(InvalidEntry):
        to_decimal(True)


def test_negative_zero_price_is_normalised() -> None:
    e = Electronics("Free", "Acme", Decimal("-0"), 1)
    assert not e.unit_price.is_signed()
    assert not e.subtotal.is_signed()


def test_create_entry_rejects_non_kind() -> None:
    with pytest.raises(AssertionError):
        create_entry(42, "Chair", "-", "10", 1)  # type: ignore[arg-type]
