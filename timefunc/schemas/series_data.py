from math import isfinite

from pydantic import BaseModel, Field, field_validator, model_validator

from timefunc.schemas.sample import Sample
from timefunc.schemas.time_series import TimeSeries


class SeriesData(BaseModel):

    timestamps: list[int] = Field(
        ...,
        description="Timestamp values should be in the unix timestamp format",
    )
    values: list[float] = Field(...)
    repair: bool = Field(
        default=False,
        description="Sort and deduplicate the samples instead of rejecting unordered input.",
    )

    @field_validator("timestamps", mode="before")
    @classmethod
    def validate_timestamps(cls, timestamps: list[int]) -> list[int]:
        """@brief Validate timestamps input for type and value constraints.

        @param timestamps List of Unix timestamps to validate.
        @return Validated timestamps list.
        """
        if not isinstance(timestamps, list):
            return timestamps
        for timestamp in timestamps:
            if isinstance(timestamp, bool) or not isinstance(timestamp, int):
                raise ValueError("Input list must contain only integer Unix timestamps.")
            if timestamp < 0:
                raise ValueError(
                    "Input list must contain only non-negative Unix timestamps."
                )
        return timestamps

    @field_validator("values", mode="before")
    @classmethod
    def validate_values(cls, values: list[float]) -> list[float]:
        """@brief Validate values input for type and finite constraints.

        @param values List of numeric values to validate.
        @return Validated values list.
        """
        if not isinstance(values, list):
            return values
        validated: list[float] = []
        for value in values:
            if value is None:
                raise ValueError(
                    "Input list cannot contain None, NaN, or infinite values."
                )
            if isinstance(value, bool) or not isinstance(value, (float, int)):
                raise ValueError("Input list must contain only float or int values.")
            if not isfinite(value):
                raise ValueError(
                    "Input list cannot contain None, NaN, or infinite values."
                )
            validated.append(float(value))
        return validated

    @model_validator(mode="after")
    def validate_lengths(self) -> "SeriesData":
        """@brief Validate that timestamps and values pair up one to one.

        @return The validated SeriesData instance.
        """
        if len(self.timestamps) != len(self.values):
            raise ValueError("timestamps and values must have the same length.")
        if not self.timestamps:
            raise ValueError("Input list must contain at least 1 data point.")

        return self

    def to_time_series(self) -> TimeSeries:
        """@brief Convert input lists into a valid TimeSeries.

        @return TimeSeries that passes `verify()`.
        @throws InvalidSeries If the input is unordered and `repair` is off.
        """
        series = TimeSeries(
            data=[
                Sample(timestamp=timestamp, value=value)
                for timestamp, value in zip(self.timestamps, self.values)
            ]
        )
        if self.repair:
            series.repair()
        series.verify()
        return series
