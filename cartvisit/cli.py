import argparse
import dataclasses
import logging
import sys
from collections.abc import Sequence

from cartvisit.cart import Cart
from cartvisit.computations import run_discounted_total, run_print_details, run_total
from cartvisit.config import Settings
from cartvisit.entries import Entry, EntryKind, try_create_entry
from cartvisit.errors import Err, Ok
from cartvisit.report import (
    render_details,
    render_discounted,
    render_listing,
    render_summary,
    render_total,
)
from cartvisit.samples import seed

logger = logging.getLogger(__name__)

ITEM_FORMAT = "KIND:NAME:DETAIL:PRICE:QTY"


def parse_item(raw: str) -> Entry | str:
    """Turn one ``--item`` argument into an Entry, or an error message.

    Mirrors the add-item form: the name is required, an empty detail becomes
    ``-``, the price must be a number and the quantity an integer.
    """
    parts = raw.split(":")
    if len(parts) != 5:
        return f"Expected {ITEM_FORMAT}, got {raw!r}"
    kind, name, detail, price, qty = (p.strip() for p in parts)

    try:
        EntryKind.parse(kind)
    except ValueError:
        return f"Unknown kind {kind!r}; choose from {', '.join(k.value for k in EntryKind)}"
    if not name:
        return "Name is required"
    if not detail:
        detail = "-"
    try:
        float(price)
    except ValueError:
        return f"Invalid number for price: {price!r}"
    try:
        quantity = int(qty)
    except ValueError:
        return f"Invalid number for quantity: {qty!r}"

    match try_create_entry(kind, name, detail, price, quantity):
        case Ok(entry):
            return entry
        case Err(e):
            return str(e)


def build_cart(items: Sequence[str], *, sample: bool) -> Cart | str:
    cart = Cart()
    if sample:
        seed(cart)
    for raw in items:
        match parse_item(raw):
            case str(err):
                return err
            case entry:
                cart.append(entry)
    return cart


def handle_view(command: str, cart: Cart, currency: str) -> int:
    match command:
        case "list":
            sys.stdout.write(render_listing(cart.snapshot(), currency))
        case "details":
            sys.stdout.write(render_details(run_print_details(cart, currency)))
        case "total":
            sys.stdout.write(render_total(run_total(cart), currency))
        case "discount":
            sys.stdout.write(render_discounted(run_discounted_total(cart), currency))
        case "summary":
            sys.stdout.write(
                render_summary(
                    run_print_details(cart, currency),
                    run_total(cart),
                    run_discounted_total(cart),
                    currency,
                )
            )
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cartvisit",
        description="Run print, total and discount computations over a cart",
    )
    parser.add_argument(
        "--currency",
        type=str,
        help="Prefix for printed amounts (default: CARTVISIT_CURRENCY or Rs.).",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        choices=["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"],
        help="Logging level (default: CARTVISIT_LOG_LEVEL or WARNING).",
    )
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    views = {
        "list": "Print the numbered cart listing.",
        "details": "Print one detail line per entry.",
        "total": "Print the total price without discounts.",
        "discount": "Print the total with per-item discounts applied.",
        "summary": "Print details, total and discounted total together.",
    }
    for name, help_text in views.items():
        sub = subparsers.add_parser(name, help=help_text)
        sub.add_argument(
            "--item",
            action="append",
            default=[],
            metavar=ITEM_FORMAT,
            help="Add an entry, e.g. book:Dune:Frank Herbert:9.99:2. Repeatable.",
        )
        sub.add_argument(
            "--sample",
            action="store_true",
            default=False,
            help="Start from the three sample entries.",
        )
    return parser


def run(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    match Settings.from_env():
        case Ok(settings):
            pass
        case Err(e):
            print(f"Error loading settings: {e}", file=sys.stderr)
            return 2

    if args.log_level:
        settings = dataclasses.replace(settings, log_level=args.log_level)
    logging.basicConfig(
        level=settings.log_level_number,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    currency = args.currency if args.currency is not None else settings.currency

    match args.command:
        case None:
            parser.print_help()
            return 1
        case command:
            match build_cart(args.item, sample=args.sample):
                case str(err):
                    print(err, file=sys.stderr)
                    return 2
                case Cart() as cart:
                    logger.info("Running %s over %d entries", command, len(cart))
                    return handle_view(command, cart, currency)
    return 1


def main() -> int:
    """Synchronous entry point for the console script."""
    try:
        return run()
    except KeyboardInterrupt:
        print("\nOperation cancelled by user.", file=sys.stderr)
        return 130


if __name__ == "__main__":
    sys.exit(main())
