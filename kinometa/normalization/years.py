"""Free-text year parsing.

Upstream year fields look like ``"2010"``, ``"2010-2015"`` or ``"2010-..."``
(a series still airing). The first and last years are found by two
independent scans, one from each end of the string.
"""

import re
from typing import Optional

import structlog

from kinometa.models.canonical import YearRange
from kinometa.normalization.fallback import is_blank

logger = structlog.get_logger(__name__)

OPEN_ENDED_SUFFIX = "-..."

_MAX_YEAR_DIGITS = 4
_MIN_TRAILING_DIGITS = 2
_INTEGER_RE = re.compile(r"[+-]?\d+")
# Range of the upstream's 32-bit year field.
_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1


def _as_integer(text: str) -> Optional[int]:
    if not _INTEGER_RE.fullmatch(text):
        return None
    value = int(text)
    if not _INT32_MIN <= value <= _INT32_MAX:
        return None
    return value


def first_year(text: Optional[str]) -> Optional[int]:
    """Leading year of a year string.

    A pure integer is returned as-is. Otherwise up to four leading digits
    are read; no leading digit, or five or more, gives None.
    """
    if is_blank(text):
        return None

    text = text.strip()
    value = _as_integer(text)
    if value is not None:
        return value

    digits = 0
    while digits < len(text) and text[digits].isdecimal():
        digits += 1
        if digits > _MAX_YEAR_DIGITS:
            return None

    if digits == 0:
        return None
    return int(text[:digits])


def last_year(text: Optional[str]) -> Optional[int]:
    """Trailing year of a year string.

    A pure integer is returned as-is. Otherwise two to four trailing digits
    are read; a single trailing digit, or five or more, gives None.
    """
    if is_blank(text):
        return None

    text = text.strip()
    value = _as_integer(text)
    if value is not None:
        return value

    digits = 0
    while digits < len(text) and text[-1 - digits].isdecimal():
        digits += 1
        if digits > _MAX_YEAR_DIGITS:
            return None

    if digits < _MIN_TRAILING_DIGITS:
        return None
    return int(text[-digits:])


def is_continuing(text: Optional[str]) -> bool:
    """True when the year string marks an ongoing run."""
    return text is not None and text.endswith(OPEN_ENDED_SUFFIX)


def parse_year_range(text: Optional[str]) -> Optional[YearRange]:
    """Parse a year string into a YearRange.

    Returns None for blank input or when no first year can be found.

    Examples:
        "2010"      -> YearRange(first=2010, last=2010, is_open_ended=False)
        "2010-2015" -> YearRange(first=2010, last=2015, is_open_ended=False)
        "2010-..."  -> YearRange(first=2010, last=None, is_open_ended=True)
    """
    if is_blank(text):
        return None

    value = _as_integer(text.strip())
    if value is not None:
        return YearRange(first=value, last=value, is_open_ended=False)

    first = first_year(text)
    if first is None:
        logger.debug("year_range_unparseable", year=text)
        return None

    return YearRange(
        first=first,
        last=last_year(text),
        is_open_ended=is_continuing(text),
    )
