import pytest
from pydantic import ValidationError

from timefunc.core.errors import InvalidSeries
from timefunc.schemas import Sample, SeriesData

from tests.conftest import T0


def test_to_time_series_keeps_valid_input():
    series = SeriesData(timestamps=[T0, T0 + 60], values=[1, 2.5]).to_time_series()

    assert series.data == [Sample.of(T0, 1.0), Sample.of(T0 + 60, 2.5)]


def test_to_time_series_rejects_unordered_input():
    payload = SeriesData(timestamps=[T0 + 60, T0], values=[1.0, 2.0])

    with pytest.raises(InvalidSeries):
        payload.to_time_series()


def test_to_time_series_repairs_when_requested():
    payload = SeriesData(
        timestamps=[T0 + 60, T0, T0], values=[1.0, 2.0, 3.0], repair=True
    )

    series = payload.to_time_series()

    assert series.data == [Sample.of(T0, 2.0), Sample.of(T0 + 60, 1.0)]


@pytest.mark.parametrize(
    "timestamps, values",
    [
        ([T0, -1], [1.0, 2.0]),
        ([T0, True], [1.0, 2.0]),
        ([T0, T0 + 60], [1.0, float("nan")]),
        ([T0, T0 + 60], [1.0, None]),
        ([], []),
    ],
)
def test_series_data_rejects_invalid_input(timestamps, values):
    with pytest.raises(ValidationError):
        SeriesData(timestamps=timestamps, values=values)
