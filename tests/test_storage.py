import json

import pytest
from pydantic import ValidationError

from timefunc.schemas.series_id import MAX_NAME_LENGTH, validate_series_id
from timefunc.storage.local_storage import LocalStorage

from tests.conftest import T0, make_series


def test_local_storage_round_trips_series(tmp_path):
    """@brief Verify a series is persisted as JSON and restored in order.

    @details Ensures the storage path respects environment overrides and that
    reconstruction preserves sample order and exact timestamp/value pairs.
    """
    series = make_series(1.25, -3.5, 1e-9)

    storage = LocalStorage()
    file_path = storage.save_series("prices", series)

    saved_path = tmp_path / "series" / "prices" / "prices.json"
    assert file_path == str(saved_path)

    with saved_path.open("r", encoding="utf-8") as file_obj:
        payload = json.load(file_obj)

    assert payload == series.model_dump(mode="json")
    assert storage.load_series(file_path) == series


def test_local_storage_uses_explicit_folder(tmp_path):
    storage = LocalStorage(folder=str(tmp_path / "custom"))

    file_path = storage.save_series("series_a", make_series(1.0))

    assert file_path == str(tmp_path / "custom" / "series_a" / "series_a.json")


@pytest.mark.parametrize(
    "series_id", ["", "../escape", "a/b", "bad id", ".hidden", "a" * (MAX_NAME_LENGTH + 1), True]
)
def test_local_storage_rejects_unsafe_series_id(series_id):
    with pytest.raises(ValueError, match="series id"):
        LocalStorage().save_series(series_id, make_series(1.0))


def test_local_storage_load_rejects_invalid_payload(tmp_path):
    """@brief Verify load_series validates payload shape and types."""
    saved_path = tmp_path / "invalid.json"
    with saved_path.open("w", encoding="utf-8") as file_obj:
        json.dump({"data": [{"timestamp": T0, "value": "high"}]}, file_obj)

    with pytest.raises(ValidationError):
        LocalStorage().load_series(str(saved_path))


def test_local_storage_load_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        LocalStorage().load_series(str(tmp_path / "missing.json"))


@pytest.mark.parametrize("series_id, expected", [("cpi.v2", "cpi.v2"), ("  sensor-7_a ", "sensor-7_a"), (42, "42")])
def test_series_id_accepts_single_path_component(series_id, expected):
    assert validate_series_id(series_id) == expected
