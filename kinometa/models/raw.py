"""Pydantic models for raw catalog payloads.

The upstream API speaks camelCase JSON; every model accepts those names via
aliases as well as the snake_case field names. Unknown keys are ignored and
all fields are optional, since upstream coverage is patchy. Instances are
frozen: a payload is never modified once received.
"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel


class RawModel(BaseModel):
    """Base model for upstream payloads."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        frozen=True,
    )


def _flatten_labels(value: Any, key: str) -> Any:
    """Turn ``[{"country": "X"}, ...]`` into ``["X", ...]``, dropping nulls."""
    if value is None:
        return None
    if not isinstance(value, list):
        return value

    labels = []
    for item in value:
        if isinstance(item, dict):
            item = item.get(key)
        if item is not None:
            labels.append(item)
    return labels


# =============================================================================
# Film
# =============================================================================


class RawFilm(RawModel):
    """Film or series data block of a film response."""

    film_id: Optional[int] = None
    name_ru: Optional[str] = None
    name_en: Optional[str] = None
    description: Optional[str] = None
    slogan: Optional[str] = None
    poster_url: Optional[str] = None
    year: Optional[str] = None

    countries: Optional[list[str]] = None
    genres: Optional[list[str]] = None

    rating_age_limits: Optional[int] = None
    rating_mpaa: Optional[str] = None

    # Release date candidates
    premiere_ru: Optional[str] = None
    premiere_world: Optional[str] = None
    premiere_digital: Optional[str] = None
    premiere_dvd: Optional[str] = None
    premiere_blu_ray: Optional[str] = None

    @field_validator("countries", mode="before")
    @classmethod
    def flatten_countries(cls, value: Any) -> Any:
        return _flatten_labels(value, "country")

    @field_validator("genres", mode="before")
    @classmethod
    def flatten_genres(cls, value: Any) -> Any:
        return _flatten_labels(value, "genre")

    @field_validator("year", mode="before")
    @classmethod
    def year_as_text(cls, value: Any) -> Any:
        # Single years sometimes arrive as bare JSON numbers
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value


class RawRating(RawModel):
    """Rating block: two community scales plus a critic rating string."""

    model_config = ConfigDict(coerce_numbers_to_str=True)

    rating: Optional[float] = None
    rating_imdb: Optional[float] = None
    rating_film_critics: Optional[str] = None


class RawExternalId(RawModel):
    """Cross-reference ids held by other rating authorities."""

    imdb_id: Optional[str] = None


class RawImage(RawModel):
    """A single gallery entry."""

    url: Optional[str] = None
    language: Optional[str] = None
    width: Optional[int] = None
    height: Optional[int] = None


class RawImages(RawModel):
    """Poster and backdrop galleries."""

    posters: Optional[list[Optional[RawImage]]] = None
    backdrops: Optional[list[Optional[RawImage]]] = None


class RawFilmEnvelope(RawModel):
    """Top-level film response with its sibling sub-records."""

    data: Optional[RawFilm] = None
    rating: Optional[RawRating] = None
    external_id: Optional[RawExternalId] = None
    images: Optional[RawImages] = None


# =============================================================================
# People
# =============================================================================


class RawPerson(RawModel):
    """Person detail response."""

    person_id: Optional[int] = None
    name_ru: Optional[str] = None
    name_en: Optional[str] = None
    birthday: Optional[str] = None
    death: Optional[str] = None
    birthplace: Optional[str] = None
    poster_url: Optional[str] = None


class RawStaff(RawModel):
    """A cast or crew entry of a film's staff list."""

    staff_id: Optional[int] = None
    name_ru: Optional[str] = None
    name_en: Optional[str] = None
    poster_url: Optional[str] = None
    profession_text: Optional[str] = None
    profession_key: Optional[str] = None


# =============================================================================
# Videos
# =============================================================================


class RawTrailer(RawModel):
    """A trailer or teaser link."""

    name: Optional[str] = None
    url: Optional[str] = None
    site: Optional[str] = None


class RawVideoResponse(RawModel):
    """Video list response."""

    trailers: Optional[list[Optional[RawTrailer]]] = None


# =============================================================================
# Search
# =============================================================================


class RawSearchFilm(RawModel):
    """Lightweight film entry of a keyword search; carries no date candidates."""

    film_id: Optional[int] = None
    name_ru: Optional[str] = None
    name_en: Optional[str] = None
    description: Optional[str] = None
    poster_url: Optional[str] = None
    year: Optional[str] = None

    @field_validator("year", mode="before")
    @classmethod
    def year_as_text(cls, value: Any) -> Any:
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value


class RawSearchResponse(RawModel):
    """Keyword search response."""

    keyword: Optional[str] = None
    films: Optional[list[Optional[RawSearchFilm]]] = None
