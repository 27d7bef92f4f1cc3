from timefunc.schemas.queries import AggregateQuery, DeriveQuery, PlotQuery, ValueQuery
from timefunc.schemas.responses import AggregateResponse, ValueResponse
from timefunc.schemas.sample import Sample
from timefunc.schemas.series_data import SeriesData
from timefunc.schemas.time_series import TimeSeries

__all__ = [
    "AggregateQuery",
    "AggregateResponse",
    "DeriveQuery",
    "PlotQuery",
    "Sample",
    "SeriesData",
    "TimeSeries",
    "ValueQuery",
    "ValueResponse",
]
