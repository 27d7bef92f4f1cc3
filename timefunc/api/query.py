from fastapi import APIRouter

from timefunc.schemas import (
    AggregateQuery,
    AggregateResponse,
    DeriveQuery,
    TimeSeries,
    ValueQuery,
    ValueResponse,
)
from timefunc.services.analysis import AnalysisService

router = APIRouter(tags=["Query"])


@router.post("/value", response_model=ValueResponse)
def value(payload: ValueQuery) -> ValueResponse:
    """@brief Evaluate a series at a single instant (step or interpolated)."""
    return AnalysisService().value(payload)


@router.post("/aggregate", response_model=AggregateResponse)
def aggregate(payload: AggregateQuery) -> AggregateResponse:
    """@brief Evaluate a windowed aggregate ending at `payload.at`.

    @param payload Series data, window end, window length and aggregate name.
    @return Aggregate response; domain errors are mapped to HTTP 422.
    """
    return AnalysisService().aggregate(payload)


@router.post("/derive", response_model=TimeSeries)
def derive(payload: DeriveQuery) -> TimeSeries:
    return AnalysisService().derive(payload)
