import math
from datetime import timedelta
from typing import Callable, Iterator

import numpy as np

from timefunc.core.errors import OutOfRange, UndefinedAggregate
from timefunc.core.interpolator import ValueInterpolator
from timefunc.core.resolver import IndexResolver
from timefunc.schemas.sample import Sample
from timefunc.schemas.time_series import TimeSeries
from timefunc.utils.timestamp import to_seconds

SECONDS_PER_YEAR = 365 * 24 * 60 * 60

Duration = int | timedelta


def _trapezoid_area(points: list[Sample]) -> float:
    """@brief Area under straight segments joining consecutive points."""
    timestamps = np.fromiter((p.timestamp for p in points), dtype=np.int64, count=len(points))
    values = np.fromiter((p.value for p in points), dtype=float, count=len(points))
    return float(np.sum(np.diff(timestamps) * (values[:-1] + values[1:]) / 2.0))


def _positive(duration: Duration) -> int:
    seconds = to_seconds(duration)
    if seconds <= 0:
        raise ValueError("duration must be a positive number of seconds.")
    return seconds


def _finite(result: float, what: str) -> float:
    if not math.isfinite(result):
        raise UndefinedAggregate(f"{what} overflows to a non-finite value.")
    return float(result)


class Aggregator:
    """@brief Windowed aggregates over a valid series.

    @details Every window ends at the query time `time` and starts at
    `time - duration`. Step variants snap both ends to the closest available
    indices and do not interpolate; interpolated variants use exact times.
    None of the methods mutate the series.
    """

    def __init__(self, series: TimeSeries) -> None:
        """@brief Bind the aggregator to a valid series.

        @param series Series that passes `verify()`.
        """
        self.series = series
        self.resolver = IndexResolver(series)
        self.interpolator = ValueInterpolator(series, self.resolver)

    def _window(self, start: int, end: int) -> tuple[np.ndarray, np.ndarray]:
        """@brief Left values and elapsed seconds of each pair in `[start, end]`."""
        window = self.series.data[start:end + 1]
        timestamps = np.fromiter((s.timestamp for s in window), dtype=np.int64, count=len(window))
        values = np.fromiter((s.value for s in window), dtype=float, count=len(window))
        return values[:-1], np.diff(timestamps)

    def moving_average(self, time: int, duration: Duration) -> float:
        """@brief Time-weighted average over the window, using nearest indices.

        @param time End of the window (Unix seconds).
        @param duration Positive window length.
        @return Average over the spanned samples; the spanned time may differ
        from `duration` because the ends snap to recorded samples.
        @throws ValueError If `duration` is not positive.
        """
        start = self.resolver.index_safe(time - _positive(duration))
        end = self.resolver.index_safe(time)
        if start == end:
            return self.series.data[end].value
        if end == 0:
            return self.series.first().value

        values, elapsed = self._window(start, end)
        return _finite(np.sum(values * elapsed) / np.sum(elapsed), "Moving average")

    def integral(self, time: int, duration: Duration) -> float:
        """@brief Exact area under the interpolated curve over `[time - duration, time]`.

        @param time End of the window (Unix seconds).
        @param duration Positive window length.
        @return Trapezoidal area in value-seconds.
        @throws OutOfRange If the window is not inside the recorded domain.
        @throws ValueError If `duration` is not positive.
        """
        seconds = _positive(duration)
        start_time = time - seconds
        first, last = self.series.domain()
        if start_time < first or time > last:
            raise OutOfRange(
                f"Window [{start_time}, {time}] is outside the recorded domain [{first}, {last}]."
            )

        start_point = Sample(timestamp=start_time, value=self.interpolator.interpolated_value(start_time))
        end_point = Sample(timestamp=time, value=self.interpolator.interpolated_value(time))

        first_interior = self.resolver.index_above(start_time)
        last_interior = self.resolver.index_below(time)
        # empty when both ends fall inside the same interval
        interior = self.series.data[first_interior:last_interior + 1]

        return _finite(_trapezoid_area([start_point, *interior, end_point]), "Integral")

    def average_interpolated(self, time: int, duration: Duration) -> float:
        """@brief Linear interpolated average of the function over the window."""
        return self.integral(time, duration) / _positive(duration)

    def rms(self, duration: Duration, time: int) -> float:
        """@brief Normalized RMS of the relative deviation from the moving average.

        @details Uses nearest indices, no interpolation. A window that snaps to
        a single index is widened to the interval ending there.

        @param duration Positive window length.
        @param time End of the window (Unix seconds).
        @return Root of the time-weighted mean of `((value - avg) / avg) ** 2`,
        or `0.0` when fewer than two intervals precede `time`.
        @throws UndefinedAggregate If the moving average over the window is zero
        or the result is not finite.
        @throws ValueError If `duration` is not positive.
        """
        seconds = _positive(duration)
        end = self.resolver.index_safe(time)
        start = self.resolver.index_safe(time - seconds)
        if end < 2:
            return 0.0
        if start == end:
            start = end - 1

        average = self.moving_average(time, duration)
        if average == 0:
            raise UndefinedAggregate("Relative RMS is undefined when the moving average is zero.")

        values, elapsed = self._window(start, end)
        relative_square = ((values - average) / average) ** 2
        return _finite(np.sqrt(np.sum(relative_square * elapsed) / np.sum(elapsed)), "Relative RMS")

    def inflation(self, duration: Duration, time: int) -> float:
        """@brief Annualized rate of change between the nearest indices.

        @details The rate is `(start / end - 1)` scaled to a year, so a value
        falling from `start` to `end` gives a positive rate.

        @param duration Positive window length.
        @param time End of the window (Unix seconds).
        @return Annualized rate, or `0.0` when no sample precedes `time`.
        @throws UndefinedAggregate If the end value is zero or the rate is not finite.
        @throws ValueError If `duration` is not positive.
        """
        seconds = _positive(duration)
        end = self.resolver.index_safe(time)
        if end == 0:
            return 0.0
        start = self.resolver.index_safe(time - seconds)
        if start == end:
            start = end - 1

        start_sample = self.series.data[start]
        end_sample = self.series.data[end]
        return _annualize(start_sample.value, end_sample.value, start_sample.seconds_until(end_sample))

    def inflation_interpolated(self, duration: Duration, time: int) -> float:
        """@brief Annualized rate of change between interpolated values at exact times.

        @note Outside the domain the interpolator extrapolates the first/last
        value as a constant.
        """
        seconds = _positive(duration)
        start = self.interpolator.interpolated_value(time - seconds)
        end = self.interpolator.interpolated_value(time)
        return _annualize(start, end, seconds)

    def _derive(self, aggregate: Callable[[int], float]) -> Iterator[Sample]:
        for sample in self.series.data[1:]:
            yield Sample.of(sample.timestamp, aggregate(sample.timestamp))

    def _derive_series(self, aggregate: Callable[[int], float]) -> TimeSeries:
        derived = TimeSeries()
        for sample in self._derive(aggregate):
            derived.push(sample)
        return derived

    def rms_series(self, duration: Duration) -> TimeSeries:
        """@brief `rms` evaluated at every timestamp from the second sample onward."""
        return self._derive_series(lambda time: self.rms(duration, time))

    def inflation_series(self, duration: Duration) -> TimeSeries:
        return self._derive_series(lambda time: self.inflation(duration, time))

    def inflation_interpolated_series(self, duration: Duration) -> TimeSeries:
        return self._derive_series(lambda time: self.inflation_interpolated(duration, time))


def _annualize(start: float, end: float, seconds: int) -> float:
    if end == 0:
        raise UndefinedAggregate("Rate of change is undefined when the end value is zero.")
    return _finite((start / end - 1.0) * SECONDS_PER_YEAR / seconds, "Rate of change")
