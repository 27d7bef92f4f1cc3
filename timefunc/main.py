import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from timefunc.api.query import router as query_router
from timefunc.core.errors import TimeSeriesError
from timefunc.utils.error import value_error_details
from timefunc.utils.log import configure_logging
from timefunc.views.plot import router as plot_router

_LOGGER = logging.getLogger(__name__)

configure_logging()

app = FastAPI(title="Time Function Analysis API")
app.include_router(query_router)
app.include_router(plot_router)


@app.exception_handler(TimeSeriesError)
async def handle_time_series_error(
    request: Request, exc: TimeSeriesError
) -> JSONResponse:
    """@brief Return a 422 when a query cannot be evaluated on the posted series.

    @param request Incoming request associated with the failure.
    @param exc Domain error raised by the store, resolver or aggregator.
    @return JSONResponse with HTTP 422 and a validation-style error detail.
    """
    _LOGGER.warning("Rejected %s: %s", request.url.path, exc)
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_CONTENT,
        content={"detail": value_error_details(exc)},
    )
