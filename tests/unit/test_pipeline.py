"""Unit tests for the normalization pipeline and the CLI entry point."""

import json
from datetime import datetime, timezone

import pytest

from kinometa.core.exceptions import (
    NormalizationInputError,
    PayloadValidationError,
    UnknownRecordKindError,
)
from kinometa.models.canonical import CanonicalMovie, CanonicalSearchResult, CanonicalSeries
from kinometa.models.raw import RawFilmEnvelope
from kinometa.normalization.pipeline import NormalizationPipeline, build_default_pipeline


@pytest.fixture
def pipeline(settings):
    return build_default_pipeline(settings)


class TestNormalizationPipeline:
    """Test transformer registration and dispatch."""

    def test_register_and_normalize(self):
        """A registered transformer receives the raw payload."""
        pipeline = NormalizationPipeline()
        pipeline.register_transformer("echo", lambda raw: raw["value"])

        assert pipeline.has_transformer("echo") is True
        assert pipeline.normalize("echo", {"value": 3}) == 3

    def test_unknown_kind(self):
        """Unknown kinds raise with the known kinds attached."""
        pipeline = NormalizationPipeline()
        pipeline.register_transformer("movie", lambda raw: raw)

        with pytest.raises(UnknownRecordKindError) as exc_info:
            pipeline.normalize("album", {})

        assert exc_info.value.details == {"known_kinds": ["movie"]}


class TestDefaultPipeline:
    """Test the built-in record kinds."""

    def test_kinds(self, pipeline):
        """Every built-in kind is registered."""
        assert set(pipeline.list_kinds()) == {
            "movie",
            "series",
            "person",
            "person_image",
            "staff",
            "images",
            "trailers",
            "film_search_result",
            "search_film",
            "search",
        }

    def test_movie_from_dict(self, pipeline, film_payload):
        """Dict payloads are validated and normalized."""
        movie = pipeline.normalize("movie", film_payload)

        assert isinstance(movie, CanonicalMovie)
        assert movie.name == "Матрица"

    def test_series_from_model(self, pipeline, local_film_payload):
        """Raw model instances are accepted as-is."""
        series = pipeline.normalize(
            "series", RawFilmEnvelope.model_validate(local_film_payload)
        )

        assert isinstance(series, CanonicalSeries)

    def test_missing_payload(self, pipeline):
        """A None payload gives None."""
        assert pipeline.normalize("movie", None) is None

    def test_staff_list_and_items_wrapper(self, pipeline, staff_payload):
        """Staff accepts a bare list or an items wrapper."""
        bare = pipeline.normalize("staff", staff_payload)
        wrapped = pipeline.normalize("staff", {"items": staff_payload})

        assert [p.sort_order for p in bare] == [1, 2, 3]
        assert bare == wrapped

    def test_staff_none_is_programmer_error(self, pipeline):
        """A missing staff list raises."""
        with pytest.raises(NormalizationInputError):
            pipeline.normalize("staff", None)

    def test_invalid_payload(self, pipeline):
        """Payloads of the wrong shape raise PayloadValidationError."""
        with pytest.raises(PayloadValidationError) as exc_info:
            pipeline.normalize("movie", {"data": {"filmId": "not-a-number"}})

        assert exc_info.value.record_kind == "movie"
        assert exc_info.value.details["errors"]

    def test_images(self, pipeline, film_payload):
        """The images kind returns the ordered image list."""
        assert len(pipeline.normalize("images", film_payload)) == 3

    def test_film_search_result(self, pipeline, film_payload):
        """Full film payloads become search results with the candidate-based date."""
        result = pipeline.normalize("film_search_result", film_payload)

        assert isinstance(result, CanonicalSearchResult)
        assert result.provider_ids == {"KinopoiskUnofficial": "301"}
        assert result.premiere_date == datetime(1999, 3, 31, tzinfo=timezone.utc)

    def test_search_film_entry(self, pipeline):
        """Keyword-search entries take their premiere date from the year."""
        result = pipeline.normalize(
            "search_film", {"filmId": 42, "nameEn": "Brother", "year": 1997}
        )

        assert isinstance(result, CanonicalSearchResult)
        assert result.name == "Brother"
        assert result.premiere_date == datetime(1997, 1, 1, tzinfo=timezone.utc)


class TestMain:
    """Test the command line entry point."""

    @pytest.fixture(autouse=True)
    def isolated_settings(self, monkeypatch):
        """Keep the cached settings from leaking between tests."""
        from kinometa.config import get_settings

        monkeypatch.setenv("KINOMETA_LOG_FORMAT", "console")
        get_settings.cache_clear()
        yield
        get_settings.cache_clear()

    def test_prints_canonical_json(self, tmp_path, capsys, film_payload):
        """The canonical record is printed as JSON."""
        from main import main

        payload_path = tmp_path / "film.json"
        payload_path.write_text(json.dumps(film_payload, ensure_ascii=False), encoding="utf-8")

        exit_code = main(["movie", str(payload_path)])

        output = json.loads(capsys.readouterr().out)
        assert exit_code == 0
        assert output["name"] == "Матрица"
        assert output["premiere_date"].startswith("1999-03-31T00:00:00")

    def test_invalid_payload_exit_code(self, tmp_path):
        """Validation failures give exit code 1."""
        from main import main

        payload_path = tmp_path / "film.json"
        payload_path.write_text(json.dumps({"data": {"filmId": "x"}}), encoding="utf-8")

        assert main(["movie", str(payload_path)]) == 1

    def test_unreadable_file_exit_code(self, tmp_path):
        """A missing file gives exit code 1."""
        from main import main

        assert main(["movie", str(tmp_path / "missing.json")]) == 1
