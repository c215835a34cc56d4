"""Normalization of raw catalog payloads into canonical records.

Leaf helpers (years, dates, ratings, fallback) are plain functions; the
components that need provider identity (names, persons, images, films,
search) are classes constructed with a Settings instance.
"""

from kinometa.normalization.dates import (
    PremiereCandidates,
    parse_date,
    resolve_end_date,
    resolve_premiere_date,
    resolve_year_date,
)
from kinometa.normalization.fallback import (
    first_non_blank,
    first_parsed,
    first_positive,
    is_blank,
)
from kinometa.normalization.films import FilmNormalizer, official_rating
from kinometa.normalization.images import ImageCollector
from kinometa.normalization.names import LocaleNameSelector
from kinometa.normalization.persons import PersonNormalizer, person_type_for
from kinometa.normalization.pipeline import NormalizationPipeline, build_default_pipeline
from kinometa.normalization.ratings import normalize_critic_rating, select_community_rating
from kinometa.normalization.search import SearchResultNormalizer
from kinometa.normalization.trailers import normalize_trailers
from kinometa.normalization.years import (
    first_year,
    is_continuing,
    last_year,
    parse_year_range,
)

__all__ = [
    # Years
    "parse_year_range",
    "first_year",
    "last_year",
    "is_continuing",
    # Dates
    "PremiereCandidates",
    "parse_date",
    "resolve_premiere_date",
    "resolve_year_date",
    "resolve_end_date",
    # Ratings
    "normalize_critic_rating",
    "select_community_rating",
    # Fallback
    "is_blank",
    "first_non_blank",
    "first_positive",
    "first_parsed",
    # Components
    "LocaleNameSelector",
    "PersonNormalizer",
    "person_type_for",
    "ImageCollector",
    "FilmNormalizer",
    "official_rating",
    "SearchResultNormalizer",
    "normalize_trailers",
    # Pipeline
    "NormalizationPipeline",
    "build_default_pipeline",
]
