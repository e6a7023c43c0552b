"""Error taxonomy and the Result type used at fallible seams.

The core has exactly one recoverable failure: an entry whose price or
quantity breaks the entry invariant. Everything else is total.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")
E = TypeVar("E", bound=Exception)


class InvalidEntry(ValueError):
    """Raised when an entry would violate ``unit_price >= 0`` or ``quantity >= 1``."""

    def __init__(self, field: str, value: object, reason: str) -> None:
        super().__init__(f"invalid {field} {value!r}: {reason}")
        self.field = field
        self.value = value
        self.reason = reason


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T


@dataclass(frozen=True)
class Err(Generic[E]):
    error: E


Result = Ok[T] | Err[E]
