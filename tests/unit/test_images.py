"""Unit tests for image aggregation."""

import pytest

from kinometa.models.canonical import ImageType
from kinometa.models.raw import RawFilmEnvelope, RawPerson
from kinometa.normalization.images import ImageCollector


@pytest.fixture
def collector(settings):
    return ImageCollector(settings)


class TestCollectFilmImages:
    """Test film image ordering and classification."""

    def test_display_priority_order(self, collector, film_payload):
        """Main poster, gallery poster, backdrop, in that order."""
        images = collector.collect_film_images(RawFilmEnvelope.model_validate(film_payload))

        assert [(image.type, image.url) for image in images] == [
            (ImageType.PRIMARY, "https://example.org/posters/301.jpg"),
            (ImageType.PRIMARY, "https://example.org/posters/301-alt.jpg"),
            (ImageType.BACKDROP, "https://example.org/backdrops/301.jpg"),
        ]

    def test_main_poster_metadata(self, collector, film_payload):
        """The main poster has the metadata language and no dimensions."""
        main = collector.collect_film_images(RawFilmEnvelope.model_validate(film_payload))[0]

        assert main.language == "ru"
        assert main.width is None
        assert main.height is None
        assert main.provider_name == "Kinopoisk"

    def test_gallery_keeps_dimensions(self, collector, film_payload):
        """Gallery entries keep their language and size."""
        poster = collector.collect_film_images(RawFilmEnvelope.model_validate(film_payload))[1]

        assert poster.language == "en"
        assert (poster.width, poster.height) == (1000, 1500)

    def test_null_urls_dropped(self, collector):
        """Gallery entries without a URL are dropped."""
        envelope = RawFilmEnvelope.model_validate(
            {
                "data": {"filmId": 1},
                "images": {
                    "posters": [{"url": None}, None, {"url": "https://example.org/p.jpg"}],
                    "backdrops": None,
                },
            }
        )

        images = collector.collect_film_images(envelope)

        assert [image.url for image in images] == ["https://example.org/p.jpg"]

    def test_missing_galleries(self, collector):
        """A film without galleries or poster has no images."""
        assert collector.collect_film_images(RawFilmEnvelope.model_validate({"data": {}})) == []
        assert collector.collect_film_images(None) == []


class TestPersonImage:
    """Test person portraits."""

    def test_portrait(self, collector, person_payload):
        """A portrait URL becomes a primary image."""
        image = collector.person_image(RawPerson.model_validate(person_payload))

        assert image.type is ImageType.PRIMARY
        assert image.url == "https://example.org/actor_posters/7836.jpg"

    @pytest.mark.parametrize("poster_url", [None, ""])
    def test_no_portrait(self, collector, poster_url):
        """No portrait URL, no image."""
        assert collector.person_image(RawPerson(poster_url=poster_url)) is None
        assert collector.person_image(None) is None
