from typing import Literal

from pydantic import BaseModel, Field, field_validator

from timefunc.schemas.series_data import SeriesData

ValueMode = Literal["step", "interpolated"]

AggregateName = Literal[
    "moving_average",
    "integral",
    "average_interpolated",
    "rms",
    "inflation",
    "inflation_interpolated",
]

DerivedName = Literal["rms", "inflation", "inflation_interpolated"]


def _validate_duration(duration: int) -> int:
    if isinstance(duration, bool) or not isinstance(duration, int):
        raise ValueError("duration must be an integer number of seconds.")
    if duration <= 0:
        raise ValueError("duration must be greater than 0.")
    return duration


class ValueQuery(BaseModel):
    series: SeriesData
    at: int = Field(..., description="Unix timestamp to evaluate the series at")
    mode: ValueMode = Field(default="interpolated")


class AggregateQuery(BaseModel):
    series: SeriesData
    at: int = Field(..., description="Unix timestamp at which the window ends")
    duration: int = Field(..., description="Window length in seconds")
    aggregate: AggregateName

    @field_validator("duration", mode="before")
    @classmethod
    def validate_duration(cls, duration: int) -> int:
        """@brief Validate the window length as a positive integer."""
        return _validate_duration(duration)


class DeriveQuery(BaseModel):
    series: SeriesData
    duration: int = Field(..., description="Window length in seconds")
    aggregate: DerivedName

    @field_validator("duration", mode="before")
    @classmethod
    def validate_duration(cls, duration: int) -> int:
        """@brief Validate the window length as a positive integer."""
        return _validate_duration(duration)


class PlotQuery(BaseModel):
    series: SeriesData
    title: str = Field(default="series", min_length=1)
