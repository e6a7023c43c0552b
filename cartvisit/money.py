"""Amount formatting shared by the computations and the renderer."""

from decimal import ROUND_HALF_UP, Decimal, localcontext

DEFAULT_CURRENCY = "Rs."

_CENTS = Decimal("0.01")


def quantize(value: Decimal) -> Decimal:
    """Round to two fractional digits, halves away from zero.

    Precision grows with the magnitude of ``value`` so large amounts never
    trap InvalidOperation.
    """
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, value.adjusted() + 3)
        return value.quantize(_CENTS, rounding=ROUND_HALF_UP)


def format_amount(value: Decimal) -> str:
    """``Decimal("19") -> "19.00"``, ``Decimal("28.4905") -> "28.49"``."""
    return str(quantize(value))
