"""Text rendering of cart views from Jinja2 templates."""

from __future__ import annotations

from collections.abc import Sequence
from decimal import Decimal
from pathlib import Path
import typing

import jinja2

from .entries import Entry
from .money import DEFAULT_CURRENCY, format_amount

TEMPLATE_DIR = Path(__file__).parent / "templates"

_env = jinja2.Environment(
    loader=jinja2.FileSystemLoader(TEMPLATE_DIR),
    keep_trailing_newline=True,
    trim_blocks=True,
    lstrip_blocks=True,
)
_env.filters["amount"] = format_amount


def render(template_name: str, **kwargs: typing.Any) -> str:
    return _env.get_template(template_name).render(**kwargs)


def render_listing(entries: Sequence[Entry], currency: str = DEFAULT_CURRENCY) -> str:
    """Numbered cart rows: ``00 - Book | The Art of Java | Rs.29.99 x1``."""
    return render("listing.j2", entries=entries, currency=currency)


def render_details(lines: Sequence[str]) -> str:
    return render("details.j2", lines=lines)


def render_total(total: Decimal, currency: str = DEFAULT_CURRENCY) -> str:
    return render("total.j2", total=total, currency=currency)


def render_discounted(discounted: Decimal, currency: str = DEFAULT_CURRENCY) -> str:
    return render("discounted.j2", discounted=discounted, currency=currency)


def render_summary(
    lines: Sequence[str],
    total: Decimal,
    discounted: Decimal,
    currency: str = DEFAULT_CURRENCY,
) -> str:
    """Every view in one block: detail lines, then both totals."""
    return render(
        "summary.j2",
        lines=lines,
        total=total,
        discounted=discounted,
        currency=currency,
    )
