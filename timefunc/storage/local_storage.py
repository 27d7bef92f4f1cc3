from __future__ import annotations

import json
import logging
from pathlib import Path

from timefunc.schemas.series_id import SeriesId, validate_series_id
from timefunc.schemas.time_series import TimeSeries
from timefunc.storage.storage import Storage
from timefunc.utils.env import get_series_data_folder

_LOGGER = logging.getLogger(__name__)


class LocalStorage(Storage):
    def __init__(self, folder: str | None = None) -> None:
        """@brief Initialize local storage rooted at `folder`.

        @param folder Optional root folder; defaults to `SERIES_DATA_FOLDER`.
        """
        self._folder = Path(folder or get_series_data_folder())

    def save_series(self, series_id: SeriesId, series: TimeSeries) -> str:
        """@brief Save a series locally as a JSON file.

        @param series_id Identifier for the time series.
        @param series Series to persist.
        @return Filesystem path where the series was stored.
        """
        series_id = validate_series_id(series_id)
        series_folder = self._folder / series_id
        series_folder.mkdir(parents=True, exist_ok=True)
        file_path = series_folder / f"{series_id}.json"

        with file_path.open("w", encoding="utf-8") as file_obj:
            json.dump(series.model_dump(mode="json"), file_obj)

        _LOGGER.info("Saved %d sample(s) of '%s' to %s", len(series), series_id, file_path)
        return str(file_path)

    def load_series(self, path: str) -> TimeSeries:
        """@brief Load a series from a JSON file.

        @param path Filesystem path to the persisted series.
        @return Deserialized series payload.
        @throws FileNotFoundError If the target file does not exist.
        @throws ValidationError If file contents do not match `TimeSeries`.
        """
        file_path = Path(path)
        with file_path.open("r", encoding="utf-8") as file_obj:
            raw_data = json.load(file_obj)

        series = TimeSeries.model_validate(raw_data)
        _LOGGER.info("Loaded %d sample(s) from %s", len(series), file_path)
        return series
