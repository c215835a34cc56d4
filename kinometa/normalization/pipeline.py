"""Normalization pipeline for raw catalog payloads.

Provides transformer registration and execution so the fetch collaborator
has a single entry point: hand over a record kind and the deserialized
JSON, get back canonical records.
"""

from typing import Any, Callable, Optional

import structlog
from pydantic import BaseModel, ValidationError

from kinometa.config import Settings, get_settings
from kinometa.core.exceptions import PayloadValidationError, UnknownRecordKindError
from kinometa.models.raw import (
    RawFilmEnvelope,
    RawPerson,
    RawSearchFilm,
    RawSearchResponse,
    RawStaff,
    RawVideoResponse,
)
from kinometa.normalization.films import FilmNormalizer
from kinometa.normalization.images import ImageCollector
from kinometa.normalization.persons import PersonNormalizer
from kinometa.normalization.search import SearchResultNormalizer
from kinometa.normalization.trailers import normalize_trailers

logger = structlog.get_logger(__name__)

Transformer = Callable[[Any], Any]


def validate_payload(kind: str, model: type[BaseModel], raw_data: Any) -> Optional[BaseModel]:
    """Validate a deserialized payload into a raw model.

    None passes through as None. Raw model instances are returned as-is.

    Raises:
        PayloadValidationError: If the payload does not match the model.
    """
    if raw_data is None or isinstance(raw_data, model):
        return raw_data
    try:
        return model.model_validate(raw_data)
    except ValidationError as e:
        raise PayloadValidationError(
            kind,
            f"Payload does not match {model.__name__}",
            {"errors": e.errors(include_url=False)},
        ) from e


class NormalizationPipeline:
    """Pipeline for normalizing raw payloads by record kind.

    Registers transformers by kind and applies them to raw data to produce
    canonical records.
    """

    def __init__(self):
        """Initialize the normalization pipeline."""
        self._transformers: dict[str, Transformer] = {}

    def register_transformer(self, kind: str, transformer: Transformer) -> None:
        """Register a transformer for a record kind.

        Args:
            kind: Record kind identifier (e.g., "movie", "staff").
            transformer: Callable that turns a raw payload into canonical output.
        """
        self._transformers[kind] = transformer

    def normalize(self, kind: str, raw_data: Any) -> Any:
        """Normalize raw data to canonical records.

        Args:
            kind: Record kind of the payload.
            raw_data: Deserialized JSON payload or raw model.

        Returns:
            A canonical record, a list of them, or None for a missing payload.

        Raises:
            UnknownRecordKindError: If no transformer is registered for the kind.
            PayloadValidationError: If the payload does not match the raw model.
        """
        if kind not in self._transformers:
            raise UnknownRecordKindError(kind, self.list_kinds())

        result = self._transformers[kind](raw_data)
        logger.debug(
            "payload_normalized",
            kind=kind,
            empty=result is None or result == [],
        )
        return result

    def has_transformer(self, kind: str) -> bool:
        """Check if a transformer is registered for a record kind."""
        return kind in self._transformers

    def list_kinds(self) -> list[str]:
        """List all record kinds with registered transformers."""
        return list(self._transformers.keys())


def build_default_pipeline(settings: Optional[Settings] = None) -> NormalizationPipeline:
    """Create a pipeline with every built-in record kind registered.

    Kinds: movie, series, person, person_image, staff, images, trailers,
    film_search_result (full film payload), search_film (keyword-search
    entry), search.
    """
    settings = settings or get_settings()
    films = FilmNormalizer(settings)
    persons = PersonNormalizer(settings)
    images = ImageCollector(settings)
    search = SearchResultNormalizer(settings)

    def staff(raw_data: Any):
        entries = raw_data
        if isinstance(raw_data, dict):
            entries = raw_data.get("items")
        if entries is None:
            return persons.normalize_staff_list(None)
        return persons.normalize_staff_list(
            [validate_payload("staff", RawStaff, entry) for entry in entries]
        )

    pipeline = NormalizationPipeline()
    pipeline.register_transformer(
        "movie", lambda raw: films.to_movie(validate_payload("movie", RawFilmEnvelope, raw))
    )
    pipeline.register_transformer(
        "series", lambda raw: films.to_series(validate_payload("series", RawFilmEnvelope, raw))
    )
    pipeline.register_transformer(
        "person",
        lambda raw: persons.normalize_person(validate_payload("person", RawPerson, raw)),
    )
    pipeline.register_transformer(
        "person_image",
        lambda raw: images.person_image(validate_payload("person_image", RawPerson, raw)),
    )
    pipeline.register_transformer("staff", staff)
    pipeline.register_transformer(
        "images",
        lambda raw: images.collect_film_images(validate_payload("images", RawFilmEnvelope, raw)),
    )
    pipeline.register_transformer(
        "trailers",
        lambda raw: normalize_trailers(validate_payload("trailers", RawVideoResponse, raw)),
    )
    pipeline.register_transformer(
        "film_search_result",
        lambda raw: search.from_film(
            validate_payload("film_search_result", RawFilmEnvelope, raw)
        ),
    )
    pipeline.register_transformer(
        "search_film",
        lambda raw: search.from_search_film(validate_payload("search_film", RawSearchFilm, raw)),
    )
    pipeline.register_transformer(
        "search",
        lambda raw: search.from_search_response(
            validate_payload("search", RawSearchResponse, raw)
        ),
    )
    return pipeline
