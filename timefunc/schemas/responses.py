from pydantic import BaseModel

from timefunc.schemas.queries import AggregateName, ValueMode


class ValueResponse(BaseModel):
    """@brief Value of a series at a single instant.

    @var at: Queried Unix timestamp.
    @var mode: `step` or `interpolated`.
    @var value: Resulting value.
    """

    at: int
    mode: ValueMode
    value: float


class AggregateResponse(BaseModel):
    aggregate: AggregateName
    at: int
    duration: int
    value: float
