from timefunc.core.resolver import Found, IndexResolver
from timefunc.schemas.time_series import TimeSeries


class ValueInterpolator:
    """@brief Point-value queries on a series, as a step or a linear function."""

    def __init__(self, series: TimeSeries, resolver: IndexResolver | None = None) -> None:
        """@brief Bind the interpolator to a valid series.

        @param series Series that passes `verify()`.
        @param resolver Optional resolver over the same series.
        """
        self.series = series
        self.resolver = resolver or IndexResolver(series)

    def step_value(self, time: int) -> float:
        """@brief Value of the sample whose interval owns `time`.

        @details That is the sample at or after `time`; beyond the last
        timestamp the last value is returned.
        """
        return self.series.data[self.resolver.index_safe(time)].value

    def interpolated_value(self, time: int) -> float:
        """@brief Linearly interpolated value at `time`.

        @param time Query Unix timestamp.
        @return Exact sample value on a hit, first/last value outside the
        domain, otherwise a linear blend of the bracketing samples.
        @throws EmptySeries If the series has no samples.
        """
        data = self.series.data
        result = self.resolver.search(time)
        if isinstance(result, Found):
            return data[result.index].value

        if result.index == 0:
            return self.series.first().value
        if result.index == len(data):
            return self.series.last().value

        lower = data[result.index - 1]
        upper = data[result.index]
        slope = (upper.value - lower.value) / lower.seconds_until(upper)
        return slope * (time - lower.timestamp) + lower.value
