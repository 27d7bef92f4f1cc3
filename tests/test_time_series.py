import pytest
from pydantic import ValidationError

from timefunc.core.errors import EmptySeries, InvalidSeries, OutOfOrderInsert
from timefunc.schemas import Sample, TimeSeries

from tests.conftest import T0, make_series


def test_push_appends_samples_in_order():
    series = TimeSeries()
    series.push(Sample(timestamp=T0, value=1.0))
    series.push(Sample(timestamp=T0 + 60, value=2.0))

    assert len(series) == 2
    assert series.timestamps == [T0, T0 + 60]
    assert series.values == [1.0, 2.0]


@pytest.mark.parametrize("timestamp", [T0 + 60, T0 + 59, T0])
def test_push_rejects_samples_not_after_last(timestamp):
    """@brief Validate push rejects equal or earlier timestamps.

    @details Ensures OutOfOrderInsert is raised and the series is unchanged.
    """
    series = make_series(1.0, 2.0)
    before = list(series.data)

    with pytest.raises(OutOfOrderInsert):
        series.push(Sample(timestamp=timestamp, value=9.0))

    assert series.data == before


def test_verify_accepts_strictly_increasing_series():
    make_series(1.0, 2.0, 3.0).verify()
    TimeSeries().verify()


@pytest.mark.parametrize(
    "pairs",
    [
        [(T0 + 60, 1.0), (T0, 2.0)],
        [(T0, 1.0), (T0, 2.0)],
        [(T0, 1.0), (T0 + 60, 2.0), (T0 + 60, 3.0)],
    ],
)
def test_verify_rejects_unsorted_or_duplicated_series(pairs):
    series = TimeSeries.from_pairs(pairs)

    with pytest.raises(InvalidSeries):
        series.verify()

    assert len(series) == len(pairs)


def test_dedup_keeps_first_sample_of_each_run():
    series = TimeSeries.from_pairs(
        [(T0, 1.0), (T0, 2.0), (T0 + 60, 3.0), (T0 + 60, 4.0), (T0 + 60, 5.0)]
    )

    series.dedup()

    assert series.data == [Sample.of(T0, 1.0), Sample.of(T0 + 60, 3.0)]
    assert series.is_deduped()


def test_dedup_does_not_reorder():
    series = TimeSeries.from_pairs([(T0 + 60, 1.0), (T0, 2.0)])

    series.dedup()

    assert series.timestamps == [T0 + 60, T0]


def test_repair_sorts_and_deduplicates_bulk_input():
    """@brief Validate repair restores a valid series from unordered input.

    @details Samples are force-inserted out of order with duplicates; after
    repair the series verifies and holds one sample per distinct timestamp.
    """
    timestamps = [T0 + 300, T0, T0 + 120, T0 + 60, T0 + 120, T0, T0 + 240]
    series = TimeSeries()
    for index, timestamp in enumerate(timestamps):
        series.insert_unordered(Sample(timestamp=timestamp, value=float(index)))

    series.repair()

    series.verify()
    assert len(series) == len(set(timestamps))
    assert series.timestamps == sorted(set(timestamps))


def test_repair_keeps_first_inserted_duplicate():
    series = TimeSeries.from_pairs([(T0 + 60, 5.0), (T0, 1.0), (T0 + 60, 7.0)])

    series.repair()

    assert series.data == [Sample.of(T0, 1.0), Sample.of(T0 + 60, 5.0)]


def test_domain_and_value_range():
    series = make_series(3.0, -1.5, 8.25, 2.0)

    assert series.domain() == (T0, T0 + 180)
    assert series.value_range() == (-1.5, 8.25)


def test_domain_and_value_range_require_samples():
    series = TimeSeries()

    with pytest.raises(EmptySeries):
        series.domain()
    with pytest.raises(EmptySeries):
        series.value_range()


def test_series_accepts_parallel_timestamps_and_values():
    series = TimeSeries.model_validate(
        {"timestamps": [T0, T0 + 60], "values": [1, 2.5]}
    )

    assert series.data == [Sample.of(T0, 1.0), Sample.of(T0 + 60, 2.5)]


def test_series_rejects_mismatched_lengths():
    with pytest.raises(ValidationError, match="same length"):
        TimeSeries.model_validate({"timestamps": [T0, T0 + 60], "values": [1.0]})


@pytest.mark.parametrize(
    "timestamp, value",
    [
        (True, 1.0),
        (-1, 1.0),
        ("1700000000", 1.0),
        (T0, float("nan")),
        (T0, float("inf")),
        (T0, None),
        (T0, False),
    ],
)
def test_sample_rejects_invalid_input(timestamp, value):
    with pytest.raises(ValidationError):
        Sample(timestamp=timestamp, value=value)


def test_sample_is_immutable():
    sample = Sample.of(T0, 1.0)

    with pytest.raises(ValidationError):
        sample.value = 2.0


def test_from_pairs_validates_each_pair():
    with pytest.raises(ValidationError):
        TimeSeries.from_pairs([(T0, 1.0), (T0 + 60, float("nan"))])
