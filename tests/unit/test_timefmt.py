"""Unit tests for time string helpers."""

import pytest

from cinepair.utils.timefmt import format_duration, minutes_to_time, time_to_minutes


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("00:00", 0),
        ("09:00", 540),
        ("9:05", 545),
        ("12:30", 750),
        (" 21:00 ", 1260),
    ],
)
def test_time_to_minutes(value, expected):
    assert time_to_minutes(value) == expected


@pytest.mark.parametrize("value", ["", "9am", "12-30", "1230", "12:3"])
def test_time_to_minutes_rejects_malformed(value):
    with pytest.raises(ValueError):
        time_to_minutes(value)


@pytest.mark.parametrize(
    ("minutes", "expected"),
    [
        (0, "00:00"),
        (545, "09:05"),
        (1439, "23:59"),
        (1530, "25:30"),
    ],
)
def test_minutes_to_time(minutes, expected):
    assert minutes_to_time(minutes) == expected


def test_format_duration():
    assert format_duration(240) == "4h 0m"
    assert format_duration(95) == "1h 35m"
    assert format_duration(0) == "0h 0m"
