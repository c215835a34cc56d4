"""Film and series normalizers.

Composes the name, date, rating and year helpers into CanonicalMovie and
CanonicalSeries records.
"""

from datetime import datetime
from typing import Any, Optional

import structlog

from kinometa.config import Settings, get_settings
from kinometa.models.canonical import CanonicalMovie, CanonicalSeries, SeriesStatus
from kinometa.models.raw import RawExternalId, RawFilm, RawFilmEnvelope
from kinometa.normalization.dates import (
    PremiereCandidates,
    resolve_end_date,
    resolve_premiere_date,
)
from kinometa.normalization.fallback import is_blank
from kinometa.normalization.names import LocaleNameSelector
from kinometa.normalization.ratings import normalize_critic_rating, select_community_rating
from kinometa.normalization.years import is_continuing

logger = structlog.get_logger(__name__)


def official_rating(age_limit: Optional[int], mpaa: Optional[str]) -> Optional[str]:
    """Content rating: ``"16+"`` from a positive age limit, else the MPAA string verbatim."""
    if age_limit is not None and age_limit > 0:
        return f"{age_limit}+"
    return mpaa


def _unique(values: list[str]) -> list[str]:
    return list(dict.fromkeys(values))


class FilmNormalizer:
    """Builds canonical movie and series records from film responses."""

    def __init__(self, settings: Optional[Settings] = None):
        """Initialize the film normalizer.

        Args:
            settings: Provider settings shared with the name selector.
        """
        self._settings = settings or get_settings()
        self._names = LocaleNameSelector(self._settings)

    def premiere_date(self, film: RawFilm) -> Optional[datetime]:
        """Resolved release date of a film data block."""
        return resolve_premiere_date(
            PremiereCandidates.from_film(film),
            film.year,
            self._names.is_origin_local(film.countries),
        )

    def provider_ids(
        self, film: RawFilm, external_id: Optional[RawExternalId] = None
    ) -> dict[str, str]:
        ids = {}
        if film.film_id is not None:
            ids[self._settings.provider_id] = str(film.film_id)
        if external_id is not None and not is_blank(external_id.imdb_id):
            ids[self._settings.imdb_provider_id] = external_id.imdb_id
        return ids

    def _common_fields(self, envelope: RawFilmEnvelope) -> dict[str, Any]:
        film = envelope.data

        fields: dict[str, Any] = {
            "provider_ids": self.provider_ids(film, envelope.external_id),
            "name": self._names.local_name(film.name_ru, film.name_en),
            "original_name": self._names.original_name_if_distinct(
                film.name_ru, film.name_en, film.countries
            ),
            "premiere_date": self.premiere_date(film),
            "overview": film.description,
            "tagline": None if is_blank(film.slogan) else film.slogan,
            "production_locations": list(film.countries) if film.countries is not None else None,
            "genres": _unique(film.genres) if film.genres is not None else [],
            "official_rating": official_rating(film.rating_age_limits, film.rating_mpaa),
        }

        if envelope.rating is not None:
            fields["community_rating"] = select_community_rating(
                envelope.rating.rating, envelope.rating.rating_imdb
            )
            fields["critic_rating"] = normalize_critic_rating(
                envelope.rating.rating_film_critics
            )

        return fields

    def to_movie(self, envelope: Optional[RawFilmEnvelope]) -> Optional[CanonicalMovie]:
        """Normalize a film response as a movie; None when the data block is missing."""
        if envelope is None or envelope.data is None:
            return None

        movie = CanonicalMovie(**self._common_fields(envelope))
        logger.debug("movie_normalized", film_id=envelope.data.film_id)
        return movie

    def to_series(self, envelope: Optional[RawFilmEnvelope]) -> Optional[CanonicalSeries]:
        """Normalize a film response as a series.

        The end date is December 31st of the last year in the year field and
        the series is continuing iff the year field is open-ended.
        """
        if envelope is None or envelope.data is None:
            return None

        film = envelope.data
        series = CanonicalSeries(
            **self._common_fields(envelope),
            end_date=resolve_end_date(film.year),
            status=SeriesStatus.CONTINUING if is_continuing(film.year) else SeriesStatus.ENDED,
        )
        logger.debug("series_normalized", film_id=film.film_id, status=series.status.value)
        return series
