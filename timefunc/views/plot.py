from fastapi import APIRouter
from fastapi.responses import HTMLResponse

from timefunc.schemas import PlotQuery
from timefunc.services.plot import PlotService

router = APIRouter(tags=["View"])


@router.post("/plot", response_class=HTMLResponse)
def plot(payload: PlotQuery) -> HTMLResponse:
    """@brief Render a line chart for the posted series.

    @param payload Series data and chart title.
    @return HTMLResponse containing the rendered Plotly page.
    """
    html = PlotService.render_series(payload.title, payload.series.to_time_series())
    return HTMLResponse(content=html)
