from datetime import datetime, timezone
from math import isfinite

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Sample(BaseModel):
    """@brief Immutable (timestamp, value) pair stored in a `TimeSeries`.

    @details The value is the one holding over the interval that ends at
    `timestamp` and starts just after the previous sample's timestamp.

    @note Validation rules:
    `timestamp` must be a non-negative integer Unix timestamp (0 is valid),
    and `value` must be a finite numeric value.
    """

    model_config = ConfigDict(frozen=True)

    timestamp: int = Field(
        ..., description="Unix timestamp, in seconds, at which the value was recorded"
    )
    value: float = Field(
        ..., description="Value of the series as of `timestamp`"
    )

    @field_validator("timestamp", mode="before")
    @classmethod
    def validate_timestamp(cls, timestamp: int) -> int:
        """@brief Validate timestamp type and Unix timestamp boundaries."""
        if isinstance(timestamp, bool) or not isinstance(timestamp, int):
            raise ValueError("timestamp must be an integer Unix timestamp.")
        if timestamp < 0:
            raise ValueError("timestamp must be greater than or equal to 0.")
        try:
            datetime.fromtimestamp(timestamp, tz=timezone.utc)
        except (OverflowError, OSError, ValueError) as exc:
            raise ValueError("timestamp is not a valid Unix timestamp.") from exc
        return timestamp

    @field_validator("value", mode="before")
    @classmethod
    def validate_value(cls, value: float) -> float:
        """@brief Validate value as finite numeric measurement."""
        if value is None:
            raise ValueError("value cannot be None, NaN, or infinite.")
        if isinstance(value, bool) or not isinstance(value, (float, int)):
            raise ValueError("value must be a float or int.")
        if not isfinite(value):
            raise ValueError("value cannot be None, NaN, or infinite.")
        return float(value)

    @classmethod
    def of(cls, timestamp: int, value: float) -> "Sample":
        return cls(timestamp=timestamp, value=value)

    def seconds_until(self, other: "Sample") -> int:
        """@brief Elapsed seconds from this sample to `other` (negative if earlier)."""
        return other.timestamp - self.timestamp
