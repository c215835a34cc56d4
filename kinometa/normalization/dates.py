"""Release date resolution.

A film payload carries five competing release dates. The resolver starts
from the one matching the title's locale of origin and lowers it to any
earlier candidate. When nothing parses it falls back to January 1st of the
first year in the free-text year field.
"""

import re
from dataclasses import dataclass
from datetime import MAXYEAR, MINYEAR, datetime, timezone
from typing import Optional

import structlog

from kinometa.models.raw import RawFilm
from kinometa.normalization.years import first_year, last_year

logger = structlog.get_logger(__name__)

_ISO_INSTANT_RE = re.compile(
    r"(?P<stamp>\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2})"
    r"(?:\.(?P<fraction>\d{1,7}))?"
    r"(?P<offset>Z|[+-]\d{2}:\d{2})?",
    re.ASCII,
)


def parse_date(text: Optional[str]) -> Optional[datetime]:
    """Parse a strict ISO-8601 extended date-time into an aware UTC datetime.

    Accepts ``2010-07-22T00:00:00``, optional fractional seconds (up to
    seven digits, truncated to microseconds) and an optional ``Z`` or
    ``+HH:MM`` offset. Values without an offset are taken as UTC. Anything
    else, date-only strings included, returns None.
    """
    if text is None:
        return None

    match = _ISO_INSTANT_RE.fullmatch(text)
    if match is None:
        logger.debug("date_unparseable", value=text)
        return None

    fraction = (match["fraction"] or "").ljust(6, "0")[:6]
    offset = match["offset"] or "Z"
    if offset == "Z":
        offset = "+00:00"

    try:
        parsed = datetime.fromisoformat(f"{match['stamp']}.{fraction}{offset}")
        return parsed.astimezone(timezone.utc)
    except (ValueError, OverflowError):
        logger.debug("date_out_of_range", value=text)
        return None


def _utc_date(year: int, month: int, day: int) -> Optional[datetime]:
    if not MINYEAR <= year <= MAXYEAR:
        return None
    return datetime(year, month, day, tzinfo=timezone.utc)


@dataclass(frozen=True)
class PremiereCandidates:
    """The five release dates of a film payload, as raw strings."""

    primary_market: Optional[str] = None
    worldwide: Optional[str] = None
    digital: Optional[str] = None
    physical_disc: Optional[str] = None
    premium_disc: Optional[str] = None

    @classmethod
    def from_film(cls, film: RawFilm) -> "PremiereCandidates":
        return cls(
            primary_market=film.premiere_ru,
            worldwide=film.premiere_world,
            digital=film.premiere_digital,
            physical_disc=film.premiere_dvd,
            premium_disc=film.premiere_blu_ray,
        )

    def ordered(self) -> list[Optional[str]]:
        """Candidates in comparison order."""
        return [
            self.primary_market,
            self.worldwide,
            self.digital,
            self.physical_disc,
            self.premium_disc,
        ]


def resolve_year_date(year: Optional[str]) -> Optional[datetime]:
    """January 1st of the first year in a year string, or None."""
    first = first_year(year)
    if first is None:
        return None
    return _utc_date(first, 1, 1)


def resolve_end_date(year: Optional[str]) -> Optional[datetime]:
    """December 31st of the last year in a year string, or None."""
    last = last_year(year)
    if last is None:
        return None
    return _utc_date(last, 12, 31)


def resolve_premiere_date(
    candidates: PremiereCandidates,
    year: Optional[str],
    origin_is_local: bool,
) -> Optional[datetime]:
    """Pick the authoritative release date.

    The primary candidate is the primary-market date for locally originated
    titles and the worldwide date otherwise. Every candidate, the primary
    included, then replaces the result if it parses and is strictly earlier.

    A primary candidate that does not parse is never replaced by a
    secondary one: the comparison needs an existing result. Such payloads
    go straight to the year fallback.

    Args:
        candidates: The five raw release date strings.
        year: Free-text year field used when no candidate resolves.
        origin_is_local: Whether the title originates in the local market.

    Returns:
        The resolved date as an aware UTC datetime, or None.
    """
    primary = candidates.primary_market if origin_is_local else candidates.worldwide
    result = parse_date(primary)

    for candidate in candidates.ordered():
        parsed = parse_date(candidate)
        if parsed is not None and result is not None and parsed < result:
            result = parsed

    if result is not None:
        return result

    fallback = resolve_year_date(year)
    if fallback is not None:
        logger.debug("premiere_date_from_year", year=year)
    return fallback
