from datetime import date, datetime, timedelta, timezone

from price_catalog.core.dates import to_utc_date, utc_now


def test_utc_now_is_timezone_aware():
    assert utc_now().tzinfo == timezone.utc


def test_to_utc_date_converts_offset_instants():
    # 23:30 en UTC-05:00 ya es el día siguiente en UTC
    instant = datetime(2024, 3, 10, 23, 30, tzinfo=timezone(timedelta(hours=-5)))
    assert to_utc_date(instant) == date(2024, 3, 11)


def test_to_utc_date_treats_naive_as_utc():
    assert to_utc_date(datetime(2024, 3, 10, 23, 59)) == date(2024, 3, 10)
