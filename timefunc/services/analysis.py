from typing import Callable

from timefunc.core.aggregator import Aggregator
from timefunc.core.interpolator import ValueInterpolator
from timefunc.schemas.queries import AggregateQuery, DeriveQuery, ValueQuery
from timefunc.schemas.responses import AggregateResponse, ValueResponse
from timefunc.schemas.time_series import TimeSeries


class AnalysisService:
    """@brief Evaluate value, aggregate and derived-series queries on request payloads."""

    def value(self, query: ValueQuery) -> ValueResponse:
        """@brief Evaluate the series at a single instant.

        @param query Series payload, query time and interpolation mode.
        @return Response carrying the resolved value.
        """
        interpolator = ValueInterpolator(query.series.to_time_series())
        if query.mode == "step":
            value = interpolator.step_value(query.at)
        else:
            value = interpolator.interpolated_value(query.at)
        return ValueResponse(at=query.at, mode=query.mode, value=value)

    def aggregate(self, query: AggregateQuery) -> AggregateResponse:
        """@brief Evaluate one windowed aggregate ending at `query.at`.

        @param query Series payload, window end, window length and aggregate name.
        @return Response carrying the aggregate value.
        @throws TimeSeriesError If the window cannot be evaluated on the series.
        """
        aggregator = Aggregator(query.series.to_time_series())
        operations: dict[str, Callable[[], float]] = {
            "moving_average": lambda: aggregator.moving_average(query.at, query.duration),
            "integral": lambda: aggregator.integral(query.at, query.duration),
            "average_interpolated": lambda: aggregator.average_interpolated(query.at, query.duration),
            "rms": lambda: aggregator.rms(query.duration, query.at),
            "inflation": lambda: aggregator.inflation(query.duration, query.at),
            "inflation_interpolated": lambda: aggregator.inflation_interpolated(query.duration, query.at),
        }
        return AggregateResponse(
            aggregate=query.aggregate,
            at=query.at,
            duration=query.duration,
            value=operations[query.aggregate](),
        )

    def derive(self, query: DeriveQuery) -> TimeSeries:
        """@brief Map an aggregate across every sample from the second onward."""
        aggregator = Aggregator(query.series.to_time_series())
        if query.aggregate == "rms":
            return aggregator.rms_series(query.duration)
        if query.aggregate == "inflation":
            return aggregator.inflation_series(query.duration)
        return aggregator.inflation_interpolated_series(query.duration)
