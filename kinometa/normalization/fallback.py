"""Ordered-candidate combinators for per-field fallback chains.

Each chain (local vs. alternate name, primary vs. secondary community
rating, decimal vs. percentage critic rating) is written as an ordered list
of candidates passed to one of these helpers, so precedence reads top to
bottom at the call site.
"""

from typing import Callable, Optional, TypeVar

T = TypeVar("T")


def is_blank(value: Optional[str]) -> bool:
    """True for None, empty and whitespace-only strings."""
    return value is None or not value.strip()


def first_non_blank(*candidates: Optional[str], default: Optional[str] = None) -> Optional[str]:
    """Return the first candidate that is not blank.

    Args:
        candidates: Strings in precedence order.
        default: Returned when every candidate is blank.
    """
    for candidate in candidates:
        if not is_blank(candidate):
            return candidate
    return default


def first_positive(*candidates: Optional[float]) -> Optional[float]:
    """Return the first candidate greater than zero; zero counts as missing."""
    for candidate in candidates:
        if candidate is not None and candidate > 0:
            return candidate
    return None


def first_parsed(value: str, *parsers: Callable[[str], Optional[T]]) -> Optional[T]:
    """Apply parsers in order and return the first non-None result."""
    for parser in parsers:
        result = parser(value)
        if result is not None:
            return result
    return None
