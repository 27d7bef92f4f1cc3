import logging
from typing import Iterable

import numpy as np
from pydantic import BaseModel, Field, model_validator

from timefunc.core.errors import EmptySeries, InvalidSeries, OutOfOrderInsert
from timefunc.schemas.sample import Sample

_LOGGER = logging.getLogger(__name__)


class TimeSeries(BaseModel):
    r"""@brief Ordered collection of `Sample`s for a single step/linear function.

    @details Each sample is valid from the previous timestamp (exclusive) to
    its own timestamp (inclusive); the first sample is valid for zero time.

    @verbatim
                    .B
              |    /\    |
              |   /  \   |
              |  /    \  |
              | /      \ |
             A./        \.C
    __________|__________|_________
    Invalid   |  Valid   |  Invalid
    @endverbatim

    @note Construction does not enforce ordering so that unordered input can
    be assembled in bulk and fixed with `repair()`. Queries are only defined
    on a series that passes `verify()`.
    """

    data: list[Sample] = Field(
        default_factory=list,
        description="Samples ordered by strictly increasing timestamp",
    )

    @model_validator(mode="before")
    @classmethod
    def coerce_timestamps_values(cls, data: object) -> object:
        """@brief Coerce separate `timestamps`/`values` arrays into `data` objects.

        @param data Raw input to the model validator.
        @return Original input or a dict containing a `data` list of samples.
        @throws ValueError If `timestamps` and `values` lengths differ.
        """
        if not isinstance(data, dict) or "data" in data:
            return data

        if "timestamps" in data or "values" in data:
            timestamps = data.get("timestamps")
            values = data.get("values")

            if timestamps is None or values is None:
                return data

            if len(timestamps) != len(values):
                raise ValueError("timestamps and values must have the same length.")

            return {
                "data": [
                    {"timestamp": timestamp, "value": value}
                    for timestamp, value in zip(timestamps, values)
                ]
            }

        return data

    @classmethod
    def from_pairs(cls, pairs: Iterable[tuple[int, float]]) -> "TimeSeries":
        """@brief Build a series from raw (timestamp, value) pairs, as given.

        @param pairs Pairs in any order; call `repair()` afterwards if unsorted.
        @return New series holding one sample per pair.
        """
        return cls(data=[Sample.of(t, v) for t, v in pairs])

    def __len__(self) -> int:
        return len(self.data)

    @property
    def timestamps(self) -> list[int]:
        return [sample.timestamp for sample in self.data]

    @property
    def values(self) -> list[float]:
        return [sample.value for sample in self.data]

    def first(self) -> Sample:
        if not self.data:
            raise EmptySeries("TimeSeries has no samples.")
        return self.data[0]

    def last(self) -> Sample:
        if not self.data:
            raise EmptySeries("TimeSeries has no samples.")
        return self.data[-1]

    def push(self, sample: Sample) -> None:
        """@brief Append a sample that strictly follows the current last sample.

        @param sample Sample to append.
        @return None.
        @throws OutOfOrderInsert If `sample.timestamp` is not greater than the
        last timestamp. The series is left unchanged.
        """
        if self.data and self.data[-1].timestamp >= sample.timestamp:
            _LOGGER.debug(
                "Rejected sample at %s; last timestamp is %s",
                sample.timestamp,
                self.data[-1].timestamp,
            )
            raise OutOfOrderInsert(
                "Attempting to add a sample to the TimeSeries that is out of order."
            )
        self.data.append(sample)

    def insert_unordered(self, sample: Sample) -> None:
        """@brief Append without ordering checks; `repair()` must follow."""
        self.data.append(sample)

    def is_deduped(self) -> bool:
        """@brief Check that no two adjacent samples share a timestamp.

        @note Assumes the series is sorted.
        """
        return all(
            prev.timestamp != curr.timestamp
            for prev, curr in zip(self.data, self.data[1:])
        )

    def is_sorted(self) -> bool:
        return all(
            prev.timestamp <= curr.timestamp
            for prev, curr in zip(self.data, self.data[1:])
        )

    def verify(self) -> None:
        """@brief Verify the series is sorted by timestamp and deduplicated.

        @return None.
        @throws InvalidSeries If any adjacent pair is out of order or shares a
        timestamp.
        """
        if not (self.is_sorted() and self.is_deduped()):
            raise InvalidSeries("TimeSeries is invalid.")

    def dedup(self) -> None:
        """@brief Keep the first sample of each run of equal adjacent timestamps.

        @note Assumes the series is sorted; does not reorder.
        """
        deduped: list[Sample] = []
        for sample in self.data:
            if deduped and deduped[-1].timestamp == sample.timestamp:
                continue
            deduped.append(sample)
        self.data = deduped

    def repair(self) -> None:
        """@brief Sort by timestamp, then drop duplicate timestamps."""
        before = len(self.data)
        self.data.sort(key=lambda sample: sample.timestamp)
        self.dedup()
        if len(self.data) != before:
            _LOGGER.debug(
                "Repair dropped %d duplicate sample(s)", before - len(self.data)
            )

    def domain(self) -> tuple[int, int]:
        """@brief Return `(first timestamp, last timestamp)`.

        @throws EmptySeries If the series has no samples.
        """
        return self.first().timestamp, self.last().timestamp

    def value_range(self) -> tuple[float, float]:
        """@brief Return `(min value, max value)` across all samples.

        @throws EmptySeries If the series has no samples.
        """
        if not self.data:
            raise EmptySeries("TimeSeries has no samples.")
        values = np.fromiter(
            (sample.value for sample in self.data),
            dtype=float,
            count=len(self.data),
        )
        return float(np.min(values)), float(np.max(values))
