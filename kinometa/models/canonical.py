"""Canonical records consumed by the downstream media catalog.

Every record is a frozen value object created fresh per normalization call.
Field names follow the catalog's vocabulary, not the upstream API's.
"""

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


class ImageType(str, Enum):
    """Display slot an image is offered for."""
    PRIMARY = "primary"
    BACKDROP = "backdrop"


class PersonType(str, Enum):
    """Role category of a cast or crew member."""
    ACTOR = "actor"
    DIRECTOR = "director"
    WRITER = "writer"
    COMPOSER = "composer"
    PRODUCER = "producer"
    UNCLASSIFIED = ""


class SeriesStatus(str, Enum):
    """Airing status of a series."""
    CONTINUING = "continuing"
    ENDED = "ended"


class CanonicalModel(BaseModel):
    """Base model for canonical records."""

    model_config = ConfigDict(frozen=True)


# =============================================================================
# Year Range
# =============================================================================


class YearRange(CanonicalModel):
    """Parsed form of a free-text year such as ``2010``, ``2010-2015`` or ``2010-...``."""

    first: Optional[int] = None
    last: Optional[int] = None
    is_open_ended: bool = False

    @model_validator(mode="after")
    def open_ended_has_no_last(self) -> "YearRange":
        if self.is_open_ended and self.last is not None:
            raise ValueError("an open-ended year range cannot have a last year")
        return self


# =============================================================================
# Films
# =============================================================================


class CanonicalFilm(CanonicalModel):
    """Fields shared by movies and series."""

    provider_ids: dict[str, str] = Field(default_factory=dict)
    name: Optional[str] = None
    original_name: str = ""
    premiere_date: Optional[datetime] = None
    overview: Optional[str] = None
    tagline: Optional[str] = None
    production_locations: Optional[list[str]] = None
    genres: list[str] = Field(default_factory=list)
    official_rating: Optional[str] = None
    community_rating: Optional[float] = None
    critic_rating: Optional[float] = None


class CanonicalMovie(CanonicalFilm):
    """A feature film."""


class CanonicalSeries(CanonicalFilm):
    """A series; adds the run's end date and airing status."""

    end_date: Optional[datetime] = None
    status: SeriesStatus = SeriesStatus.ENDED


# =============================================================================
# People
# =============================================================================


class CanonicalPerson(CanonicalModel):
    """A person, either from a person detail payload or a film's staff list."""

    provider_ids: dict[str, str] = Field(default_factory=dict)
    name: Optional[str] = None
    birth_date: Optional[datetime] = None
    death_date: Optional[datetime] = None
    production_locations: Optional[list[str]] = None
    image_url: Optional[str] = None

    # Staff entries only
    role: Optional[str] = None
    role_type: Optional[PersonType] = None
    sort_order: Optional[int] = None


# =============================================================================
# Media
# =============================================================================


class CanonicalImage(CanonicalModel):
    """A remote image offered to the catalog."""

    type: ImageType
    url: str
    language: Optional[str] = None
    width: Optional[int] = None
    height: Optional[int] = None
    provider_name: Optional[str] = None


class MediaUrl(CanonicalModel):
    """A trailer link."""

    name: Optional[str] = None
    url: Optional[str] = None


# =============================================================================
# Search
# =============================================================================


class CanonicalSearchResult(CanonicalModel):
    """A candidate shown to the user when identifying an item."""

    provider_ids: dict[str, str] = Field(default_factory=dict)
    name: Optional[str] = None
    image_url: Optional[str] = None
    premiere_date: Optional[datetime] = None
    overview: Optional[str] = None
    search_provider_name: Optional[str] = None
