from datetime import datetime, timedelta, timezone


def make_timestamps(count: int, start: int = 1700000000, step: int = 1) -> list[int]:
    """@brief Generate a list of evenly spaced Unix timestamps.

    @param count (int): The number of timestamps to generate.
    @param start (int, optional): The starting Unix timestamp. Defaults to 1700000000.
    @param step (int, optional): Seconds between consecutive timestamps. Defaults to 1.

    @returns list[int]: A list of `count` timestamps starting from `start`.
    """
    return list(range(start, start + count * step, step))


def to_seconds(duration: int | timedelta) -> int:
    """@brief Normalize a duration to whole seconds.

    @param duration Either an integer number of seconds or a `timedelta`.
    @return Whole seconds; fractional seconds are truncated toward zero.
    """
    if isinstance(duration, timedelta):
        return int(duration.total_seconds())
    if isinstance(duration, bool) or not isinstance(duration, int):
        raise ValueError("duration must be an integer number of seconds or a timedelta.")
    return duration


def to_datetime(timestamp: int) -> datetime:
    return datetime.fromtimestamp(timestamp, tz=timezone.utc)
