from datetime import date, datetime, timezone

import pytest

from utils.loads import parse_delivery_date


@pytest.mark.parametrize("value", [None, "", "   ", "Invalid date", "not a date", True, float("inf")])
def test_unusable_delivery_dates_mean_active(value):
    assert parse_delivery_date(value) is None


def test_parses_iso_date_and_datetime():
    assert parse_delivery_date("2026-10-05") == datetime(2026, 10, 5)
    assert parse_delivery_date("2026-10-05T16:45:00Z") == datetime(2026, 10, 5, 16, 45, tzinfo=timezone.utc)


def test_passes_through_dates():
    stamp = datetime(2026, 10, 5, 9, 30)
    assert parse_delivery_date(stamp) is stamp
    assert parse_delivery_date(date(2026, 10, 5)) == datetime(2026, 10, 5)


def test_numbers_are_epoch_milliseconds():
    assert parse_delivery_date(1790000000000) == datetime(2026, 9, 21, 14, 13, 20, tzinfo=timezone.utc)
