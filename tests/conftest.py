"""
Pytest Configuration and Shared Fixtures.

This module provides common fixtures for all tests:

- settings: Explicit provider settings, independent of the environment
- film_payload: Upstream film response for a foreign title
- local_film_payload: Upstream film response for a locally originated title
- staff_payload: Upstream staff list
- person_payload: Upstream person detail response
"""

import pytest

from kinometa.config import Settings


@pytest.fixture
def settings() -> Settings:
    """Return settings with fixed provider identity for testing."""
    return Settings(
        provider_name="Kinopoisk",
        provider_id="KinopoiskUnofficial",
        imdb_provider_id="Imdb",
        metadata_language="ru",
        origin_country="Россия",
    )


@pytest.fixture
def film_payload() -> dict:
    """Return a film response for a US title."""
    return {
        "data": {
            "filmId": 301,
            "nameRu": "Матрица",
            "nameEn": "The Matrix",
            "year": "1999",
            "description": "Хакер узнаёт правду о мире.",
            "slogan": "Добро пожаловать в реальный мир",
            "posterUrl": "https://example.org/posters/301.jpg",
            "countries": [{"country": "США"}, {"country": "Австралия"}],
            "genres": [{"genre": "фантастика"}, {"genre": "боевик"}],
            "ratingAgeLimits": 16,
            "ratingMpaa": "r",
            "premiereRu": "1999-10-14T00:00:00",
            "premiereWorld": "1999-03-31T00:00:00",
            "premiereDigital": None,
            "premiereDvd": "2000-02-08T00:00:00",
            "premiereBluRay": "2008-10-14T00:00:00",
        },
        "rating": {
            "rating": 8.5,
            "ratingImdb": 8.7,
            "ratingFilmCritics": "88%",
        },
        "externalId": {"imdbId": "tt0133093"},
        "images": {
            "posters": [
                {
                    "url": "https://example.org/posters/301-alt.jpg",
                    "language": "en",
                    "width": 1000,
                    "height": 1500,
                }
            ],
            "backdrops": [
                {
                    "url": "https://example.org/backdrops/301.jpg",
                    "language": None,
                    "width": 1920,
                    "height": 1080,
                }
            ],
        },
    }


@pytest.fixture
def local_film_payload() -> dict:
    """Return a film response for a locally originated series."""
    return {
        "data": {
            "filmId": 77044,
            "nameRu": "Кухня",
            "nameEn": "Kitchen",
            "year": "2012-2016",
            "countries": [{"country": "Россия"}],
            "genres": [{"genre": "комедия"}],
            "ratingAgeLimits": 0,
            "ratingMpaa": None,
        },
        "rating": {"rating": 0, "ratingImdb": 7.9, "ratingFilmCritics": None},
    }


@pytest.fixture
def staff_payload() -> list[dict]:
    """Return a staff list with one unnamed entry."""
    return [
        {
            "staffId": 1,
            "nameRu": "Киану Ривз",
            "nameEn": "Keanu Reeves",
            "professionText": "Актеры",
            "professionKey": "ACTOR",
            "posterUrl": "https://example.org/staff/1.jpg",
        },
        {
            "staffId": 2,
            "nameRu": "",
            "nameEn": "",
            "professionText": "Актеры",
            "professionKey": "ACTOR",
        },
        {
            "staffId": 3,
            "nameRu": None,
            "nameEn": "Joel Silver",
            "professionText": None,
            "professionKey": "PRODUCER_USSR",
        },
        {
            "staffId": 4,
            "nameRu": "Билл Поуп",
            "professionText": "Операторы",
            "professionKey": "OPERATOR",
        },
    ]


@pytest.fixture
def person_payload() -> dict:
    """Return a person detail response."""
    return {
        "personId": 7836,
        "nameRu": "Киану Ривз",
        "nameEn": "Keanu Reeves",
        "birthday": "1964-09-02T00:00:00",
        "death": None,
        "birthplace": "Бейрут, Ливан",
        "posterUrl": "https://example.org/actor_posters/7836.jpg",
    }
