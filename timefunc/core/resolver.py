from bisect import bisect_left
from dataclasses import dataclass
from typing import Union

from timefunc.core.errors import EmptySeries, OutOfRange
from timefunc.schemas.time_series import TimeSeries


@dataclass(frozen=True)
class Found:
    """Exact timestamp match at `index`."""

    index: int


@dataclass(frozen=True)
class NotFound:
    """No match; `index` is where the timestamp would be inserted to keep order."""

    index: int


SearchResult = Union[Found, NotFound]


class IndexResolver:
    """@brief Map query timestamps to sample positions under several boundary policies.

    @details Every policy is a small transform over a single binary search
    result (`Found` / `NotFound`), so none of them does index arithmetic on an
    ambiguous integer.
    """

    def __init__(self, series: TimeSeries) -> None:
        """@brief Bind the resolver to a valid series.

        @param series Series that passes `verify()`.
        """
        self.series = series

    def search(self, time: int) -> SearchResult:
        """@brief Binary search for `time` among the sample timestamps.

        @param time Query Unix timestamp.
        @return `Found(i)` on an exact hit, otherwise `NotFound(j)` with the
        insertion position (`0` before every sample, `len` after every sample).
        """
        data = self.series.data
        index = bisect_left(data, time, key=lambda sample: sample.timestamp)
        if index < len(data) and data[index].timestamp == time:
            return Found(index)
        return NotFound(index)

    def _require_samples(self) -> int:
        length = len(self.series)
        if length == 0:
            raise EmptySeries("Cannot resolve an index in an empty TimeSeries.")
        return length

    def index_safe(self, time: int) -> int:
        """@brief Closest index at or after `time`, clamped to the last index.

        @note Returns `0` for any time before the first sample.
        """
        length = self._require_samples()
        result = self.search(time)
        if isinstance(result, Found):
            return result.index
        return min(result.index, length - 1)

    def index_above(self, time: int) -> int:
        """@brief Index of the first sample strictly after `time`.

        @return May equal `len(series)` when no sample follows `time`.
        """
        self._require_samples()
        result = self.search(time)
        if isinstance(result, Found):
            return result.index + 1
        return result.index

    def index_below(self, time: int) -> int:
        """@brief Index of the last sample strictly before `time`.

        @throws OutOfRange If no sample precedes `time`.
        """
        self._require_samples()
        below = self.search(time).index - 1
        if below < 0:
            raise OutOfRange(f"No sample precedes timestamp {time}.")
        return below

    def fractional_index(self, time: int) -> float:
        """@brief Real-valued position of `time`, linear in elapsed seconds.

        @param time Query Unix timestamp.
        @return `i` on an exact hit, otherwise `(j - 1) + elapsed / step`
        between the bracketing samples `j - 1` and `j`.
        @throws OutOfRange If `time` falls outside the recorded domain.
        """
        length = self._require_samples()
        result = self.search(time)
        if isinstance(result, Found):
            return float(result.index)

        index = result.index
        if index == 0 or index == length:
            raise OutOfRange(f"Timestamp {time} is outside the recorded domain.")

        lower = self.series.data[index - 1]
        upper = self.series.data[index]
        fraction = (time - lower.timestamp) / lower.seconds_until(upper)
        return (index - 1) + fraction
