"""
Data Models.

This module defines the data structures used throughout kinometa:

- raw: Upstream payload models (camelCase aliases, all fields optional)
- canonical: Normalized records handed to the media catalog

Example:
    from kinometa.models import RawFilmEnvelope, CanonicalMovie

    envelope = RawFilmEnvelope.model_validate(payload)
"""

from kinometa.models.raw import (
    RawModel,
    RawFilm,
    RawRating,
    RawExternalId,
    RawImage,
    RawImages,
    RawFilmEnvelope,
    RawPerson,
    RawStaff,
    RawTrailer,
    RawVideoResponse,
    RawSearchFilm,
    RawSearchResponse,
)
from kinometa.models.canonical import (
    ImageType,
    PersonType,
    SeriesStatus,
    YearRange,
    CanonicalFilm,
    CanonicalMovie,
    CanonicalSeries,
    CanonicalPerson,
    CanonicalImage,
    MediaUrl,
    CanonicalSearchResult,
)

__all__ = [
    # Raw
    "RawModel",
    "RawFilm",
    "RawRating",
    "RawExternalId",
    "RawImage",
    "RawImages",
    "RawFilmEnvelope",
    "RawPerson",
    "RawStaff",
    "RawTrailer",
    "RawVideoResponse",
    "RawSearchFilm",
    "RawSearchResponse",
    # Canonical
    "ImageType",
    "PersonType",
    "SeriesStatus",
    "YearRange",
    "CanonicalFilm",
    "CanonicalMovie",
    "CanonicalSeries",
    "CanonicalPerson",
    "CanonicalImage",
    "MediaUrl",
    "CanonicalSearchResult",
]
