from __future__ import annotations

from datetime import date, datetime, timedelta, timezone

from portal.utils import date_utils
from portal.utils.date_utils import calculate_age, parse_date_string


def test_age_before_birthday():
    assert calculate_age(date(2000, 6, 15), as_of=date(2024, 6, 14)) == 23


def test_age_on_birthday():
    assert calculate_age(date(2000, 6, 15), as_of=date(2024, 6, 15)) == 24


def test_age_earlier_month():
    assert calculate_age(date(2000, 12, 1), as_of=date(2024, 6, 15)) == 23


def test_leap_day_birthday():
    assert calculate_age(date(2004, 2, 29), as_of=date(2023, 2, 28)) == 18
    assert calculate_age(date(2004, 2, 29), as_of=date(2023, 3, 1)) == 19


def test_future_birth_date_is_negative():
    assert calculate_age(date(2030, 1, 1), as_of=date(2024, 6, 15)) == -6


def test_parse_date_string_formats():
    assert parse_date_string("2024-06-15") == date(2024, 6, 15)
    assert parse_date_string("15-06-2024") == date(2024, 6, 15)
    assert parse_date_string("15/06/2024") == date(2024, 6, 15)
    assert parse_date_string("June 15") is None


class EveningInUtc(datetime):
    """2024-06-15 20:00 UTC, which is already the 16th in India."""

    @classmethod
    def now(cls, tz=None):
        moment = datetime(2024, 6, 15, 20, 0, tzinfo=timezone.utc)
        if tz is None:
            return moment.astimezone(timezone(timedelta(hours=5, minutes=30))).replace(tzinfo=None)
        return moment.astimezone(tz)


def test_utc_today_ignores_local_zone(monkeypatch):
    monkeypatch.setattr(date_utils, "datetime", EveningInUtc)

    assert date_utils.utc_today() == date(2024, 6, 15)


def test_utcnow_is_naive_utc(monkeypatch):
    monkeypatch.setattr(date_utils, "datetime", EveningInUtc)

    assert date_utils.utcnow() == datetime(2024, 6, 15, 20, 0)
    assert date_utils.utcnow().tzinfo is None
