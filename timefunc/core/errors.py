class TimeSeriesError(ValueError):
    """@brief Base class for failures raised by the time-series store and queries."""


class OutOfOrderInsert(TimeSeriesError):
    """@brief Raised by `push` when a sample does not strictly follow the last one.

    @note The series is left unchanged when this is raised.
    """


class InvalidSeries(TimeSeriesError):
    """@brief Raised by `verify` for unsorted or duplicated timestamps."""


class OutOfRange(TimeSeriesError):
    """@brief Raised when a query time falls outside the recorded domain."""


class EmptySeries(TimeSeriesError):
    """@brief Raised when a query needs at least one sample and none exist."""


class UndefinedAggregate(TimeSeriesError):
    """@brief Raised when a relative aggregate would divide by a zero value."""
