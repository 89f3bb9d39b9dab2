from datetime import date, datetime, timedelta, timezone

import pytest

from availability_report.errors import InvalidTimestamp
from availability_report.time_utils import (
    build_date_window,
    parse_timestamp,
    real_dates,
    with_placeholder,
)


def test_window_matches_worked_example():
    window = build_date_window("2024-01-10T00:00:00Z")

    assert window == (
        "2024-01-10",
        "2024-01-09",
        "2024-01-08",
        "2024-01-07",
        "2024-01-06",
        "2024-01-05",
        "2024-01-04",
    )


@pytest.mark.parametrize(
    "anchor",
    [
        "2024-03-01T12:00:00Z",
        "2024-01-01T00:00:00+00:00",
        "2023-12-31T23:59:59Z",
        "2024-11-03T08:00:00Z",
    ],
)
def test_window_is_seven_strictly_descending_days(anchor):
    window = build_date_window(anchor)
    parsed = [date.fromisoformat(d) for d in window]

    assert len(window) == 7
    assert len(set(window)) == 7
    assert parsed[0] == parse_timestamp(anchor).date()
    for newer, older in zip(parsed, parsed[1:]):
        assert newer - older == timedelta(days=1)


def test_window_crosses_leap_day():
    window = build_date_window("2024-03-02T10:00:00Z")

    assert window[:3] == ("2024-03-02", "2024-03-01", "2024-02-29")


def test_window_truncates_in_utc():
    # 23:30 at UTC-05:00 is already the next day in UTC.
    window = build_date_window("2024-01-09T23:30:00-05:00")

    assert window[0] == "2024-01-10"


def test_window_accepts_datetime_objects():
    naive = build_date_window(datetime(2024, 1, 10, 22, 0))
    aware = build_date_window(datetime(2024, 1, 10, 22, 0, tzinfo=timezone(timedelta(hours=3))))

    assert naive[0] == "2024-01-10"
    assert aware[0] == "2024-01-10"


def test_window_accepts_published_human_format():
    window = build_date_window("10 Jan 2024, 06:30:00 UTC")

    assert window[0] == "2024-01-10"
    assert window[-1] == "2024-01-04"


def test_window_custom_size():
    assert build_date_window("2024-01-10T00:00:00Z", days=3) == (
        "2024-01-10",
        "2024-01-09",
        "2024-01-08",
    )


@pytest.mark.parametrize("anchor", ["", "yesterday", "2024-13-45", None, 1704844800])
def test_invalid_anchor_raises(anchor):
    with pytest.raises(InvalidTimestamp):
        build_date_window(anchor)


def test_empty_window_rejected():
    with pytest.raises(ValueError):
        build_date_window("2024-01-10T00:00:00Z", days=0)


def test_placeholder_helpers():
    window = build_date_window("2024-01-10T00:00:00Z")
    titled = with_placeholder(window)

    assert titled[0] == ""
    assert len(titled) == 8
    assert real_dates(titled) == window


@pytest.mark.parametrize("days", [1_000_000, 10**12])
def test_window_out_of_date_range_raises(days):
    with pytest.raises(InvalidTimestamp, match="window"):
        build_date_window("2024-01-10T00:00:00Z", days=days)
