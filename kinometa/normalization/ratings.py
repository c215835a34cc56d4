"""Rating rescaling onto the catalog's ten-point scale."""

import math
from typing import Optional

import structlog

from kinometa.normalization.fallback import first_parsed, first_positive, is_blank

logger = structlog.get_logger(__name__)


def _parse_decimal(text: str) -> Optional[float]:
    if "_" in text:
        return None
    try:
        value = float(text)
    except ValueError:
        return None
    return value if math.isfinite(value) else None


def _parse_percentage(text: str) -> Optional[float]:
    if "_" in text:
        return None
    try:
        percent = int(text.replace("%", ""))
    except ValueError:
        return None
    return percent * 0.1


def normalize_critic_rating(text: Optional[str]) -> Optional[float]:
    """Convert a critic rating string to the ten-point scale.

    Decimal strings are assumed to be on the ten-point scale already and are
    returned unchanged; ``"85%"`` becomes ``8.5``. Anything else gives None.
    """
    if is_blank(text):
        return None

    rating = first_parsed(text, _parse_decimal, _parse_percentage)
    if rating is None:
        logger.debug("critic_rating_unparseable", value=text)
    return rating


def select_community_rating(
    primary: Optional[float],
    secondary: Optional[float],
) -> Optional[float]:
    """Prefer the primary community rating, then the secondary; zero means missing."""
    return first_positive(primary, secondary)
