from abc import ABC, abstractmethod

from timefunc.schemas.time_series import TimeSeries


class Storage(ABC):
    @abstractmethod
    def save_series(self, series_id: str, series: TimeSeries) -> str:
        """@brief Persist a series as an ordered list of samples.

        @param series_id Identifier for the time series.
        @param series Series to persist.
        @return Location where the series was stored.
        """
        raise NotImplementedError

    @abstractmethod
    def load_series(self, path: str) -> TimeSeries:
        """@brief Load a previously persisted series.

        @param path Location returned by `save_series`.
        @return Deserialized series, in stored order.
        """
        raise NotImplementedError
