"""Search result normalizers.

Full film responses resolve their premiere date from all five candidates;
keyword-search entries carry only a year and use the year fallback.
"""

from typing import Optional

from kinometa.config import Settings, get_settings
from kinometa.models.canonical import CanonicalSearchResult
from kinometa.models.raw import RawFilmEnvelope, RawSearchFilm, RawSearchResponse
from kinometa.normalization.dates import resolve_year_date
from kinometa.normalization.films import FilmNormalizer
from kinometa.normalization.names import LocaleNameSelector


class SearchResultNormalizer:
    """Builds CanonicalSearchResult records."""

    def __init__(self, settings: Optional[Settings] = None):
        self._settings = settings or get_settings()
        self._names = LocaleNameSelector(self._settings)
        self._films = FilmNormalizer(self._settings)

    def _provider_ids(self, film_id: Optional[int]) -> dict[str, str]:
        if film_id is None:
            return {}
        return {self._settings.provider_id: str(film_id)}

    def from_film(self, envelope: Optional[RawFilmEnvelope]) -> Optional[CanonicalSearchResult]:
        """Search result for a full film response."""
        if envelope is None or envelope.data is None:
            return None

        film = envelope.data
        return CanonicalSearchResult(
            provider_ids=self._provider_ids(film.film_id),
            name=self._names.local_name(film.name_ru, film.name_en),
            image_url=film.poster_url,
            premiere_date=self._films.premiere_date(film),
            overview=film.description,
            search_provider_name=self._settings.provider_name,
        )

    def from_search_film(self, raw: Optional[RawSearchFilm]) -> Optional[CanonicalSearchResult]:
        """Search result for a keyword-search entry."""
        if raw is None:
            return None

        return CanonicalSearchResult(
            provider_ids=self._provider_ids(raw.film_id),
            name=self._names.local_name(raw.name_ru, raw.name_en),
            image_url=raw.poster_url,
            premiere_date=resolve_year_date(raw.year),
            overview=raw.description,
            search_provider_name=self._settings.provider_name,
        )

    def from_search_response(
        self, response: Optional[RawSearchResponse]
    ) -> list[CanonicalSearchResult]:
        """All results of a keyword search, in upstream order."""
        if response is None or response.films is None:
            return []

        results = (self.from_search_film(film) for film in response.films)
        return [result for result in results if result is not None]
