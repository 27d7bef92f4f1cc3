import pytest

from timefunc.schemas import Sample, TimeSeries
from timefunc.utils.params import load_params

T0 = 1_700_000_000
STEP = 60


@pytest.fixture(autouse=True)
def _default_test_env(monkeypatch: pytest.MonkeyPatch, tmp_path):
    """@brief Provide stable default env values for the test suite.

    @details
    Ensures local environment changes do not make tests flaky. Individual tests
    may still override these values with `monkeypatch.setenv(...)` when needed.
    """
    monkeypatch.setenv("LOG_LEVEL", "INFO")
    monkeypatch.setenv("SERIES_DATA_FOLDER", str(tmp_path / "series"))
    monkeypatch.setenv("PLOT_FOLDER", str(tmp_path / "images"))
    load_params.cache_clear()
    yield
    load_params.cache_clear()


def make_series(*values: float, step: int = STEP, start: int = T0) -> TimeSeries:
    """@brief Build a valid series with evenly spaced samples."""
    series = TimeSeries()
    for index, value in enumerate(values):
        series.push(Sample(timestamp=start + index * step, value=value))
    return series


@pytest.fixture
def peak_series() -> TimeSeries:
    """@brief Samples (t0, 1.0), (t0+60s, 2.0), (t0+120s, 1.0)."""
    return make_series(1.0, 2.0, 1.0)
