"""Image aggregation and classification.

Only URLs are handled here; downloading belongs to the host application.
"""

from typing import Iterable, Optional

from kinometa.config import Settings, get_settings
from kinometa.models.canonical import CanonicalImage, ImageType
from kinometa.models.raw import RawFilmEnvelope, RawImage, RawPerson


class ImageCollector:
    """Collects poster, gallery and portrait URLs into CanonicalImage records."""

    def __init__(self, settings: Optional[Settings] = None):
        self._settings = settings or get_settings()

    def _gallery(
        self, entries: Optional[Iterable[Optional[RawImage]]], image_type: ImageType
    ) -> list[CanonicalImage]:
        if entries is None:
            return []
        return [
            CanonicalImage(
                type=image_type,
                url=entry.url,
                language=entry.language,
                width=entry.width,
                height=entry.height,
                provider_name=self._settings.provider_name,
            )
            for entry in entries
            if entry is not None and entry.url is not None
        ]

    def collect_film_images(self, envelope: Optional[RawFilmEnvelope]) -> list[CanonicalImage]:
        """Images of a film in display priority order.

        Main poster first, then gallery posters, then backdrops.
        """
        if envelope is None:
            return []

        images = []

        if envelope.data is not None and envelope.data.poster_url is not None:
            images.append(
                CanonicalImage(
                    type=ImageType.PRIMARY,
                    url=envelope.data.poster_url,
                    language=self._settings.metadata_language,
                    provider_name=self._settings.provider_name,
                )
            )

        if envelope.images is not None:
            images.extend(self._gallery(envelope.images.posters, ImageType.PRIMARY))
            images.extend(self._gallery(envelope.images.backdrops, ImageType.BACKDROP))

        return images

    def person_image(self, raw: Optional[RawPerson]) -> Optional[CanonicalImage]:
        """Portrait of a person, or None when there is no portrait URL."""
        if raw is None or not raw.poster_url:
            return None

        return CanonicalImage(
            type=ImageType.PRIMARY,
            url=raw.poster_url,
            provider_name=self._settings.provider_name,
        )
