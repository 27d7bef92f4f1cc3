import logging
from pathlib import Path

import plotly.graph_objects as go

from timefunc.schemas.series_id import validate_series_id
from timefunc.schemas.time_series import TimeSeries
from timefunc.utils.env import get_plot_folder
from timefunc.utils.params import get_plot_params
from timefunc.utils.timestamp import to_datetime

_LOGGER = logging.getLogger(__name__)


class PlotService:
    def __init__(self, folder: str | None = None) -> None:
        """@brief Initialize plotting with an output folder for saved charts.

        @param folder Optional output folder; defaults to `PLOT_FOLDER`.
        """
        self._folder = Path(folder or get_plot_folder())

    @staticmethod
    def render_series(title: str, series: TimeSeries) -> str:
        """@brief Render a Plotly line chart from a `TimeSeries`.

        @details Only the domain, the value range and the raw samples are read.

        @param title Chart title.
        @param series Non-empty series to visualize.
        @return Full HTML document containing the rendered chart.
        @throws EmptySeries If the series has no samples.
        """
        params = get_plot_params()
        first, last = series.domain()
        low, high = series.value_range()

        figure = go.Figure(
            go.Scatter(
                x=[to_datetime(timestamp) for timestamp in series.timestamps],
                y=series.values,
                mode="lines",
                line={"color": params["line_color"]},
            )
        )
        figure.update_traces(
            customdata=series.timestamps,
            hovertemplate=(
                "Date and Time (UTC): %{x}<br>"
                "Timestamp: %{customdata}<br>"
                "Value: %{y}<extra></extra>"
            ),
        )
        figure.update_layout(
            title=title,
            xaxis_title="Date and Time (UTC)",
            yaxis_title="Value",
            template=params["template"],
            width=params["width"],
            height=params["height"],
        )
        figure.update_xaxes(range=[to_datetime(first), to_datetime(last)])
        figure.update_yaxes(range=[low, high])

        return figure.to_html(full_html=True, include_plotlyjs="cdn")

    def save(self, title: str, series: TimeSeries) -> str:
        """@brief Render a chart and write it to `<folder>/<title>.html`.

        @return Filesystem path of the written document.
        @throws ValueError If `title` is not a single safe file name.
        """
        title = validate_series_id(title, kind="plot title")
        html = self.render_series(title, series)
        self._folder.mkdir(parents=True, exist_ok=True)
        file_path = self._folder / f"{title}.html"
        file_path.write_text(html, encoding="utf-8")
        _LOGGER.info("Wrote chart '%s' to %s", title, file_path)
        return str(file_path)
