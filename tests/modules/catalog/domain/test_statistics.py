# tests/modules/catalog/domain/test_statistics.py
"""
Tests para: compute_daily_averages
Tipo: Unitario (Domain)
"""
from datetime import date, datetime, timedelta, timezone
from decimal import Decimal

from price_catalog.modules.catalog.domain.entities import CatalogItem
from price_catalog.modules.catalog.domain.statistics import (
    compute_daily_averages,
    group_prices_by_day,
)

TODAY = date(2024, 5, 20)
NOON = datetime(2024, 5, 20, 12, 0, tzinfo=timezone.utc)


def _item(item_id, price, created_at):
    return CatalogItem.create_new(item_id, f"title{item_id}", Decimal(price), created_at)


def test_today_is_excluded_regardless_of_value():
    """
    Given: Dos artículos de ayer (100, 100) y uno de hoy (200)
    Then: Solo aparece ayer con 100.00
    """
    yesterday = NOON - timedelta(days=1)
    items = [
        _item(1, "100", yesterday),
        _item(2, "100", yesterday),
        _item(3, "200", NOON),
    ]

    result = compute_daily_averages(items, TODAY)

    assert result == {TODAY - timedelta(days=1): Decimal("100.00")}


def test_only_today_items_gives_empty_mapping():
    items = [_item(1, "200", NOON), _item(2, "300", NOON + timedelta(hours=3))]

    assert compute_daily_averages(items, TODAY) == {}


def test_no_items_gives_empty_mapping():
    assert compute_daily_averages([], TODAY) == {}


def test_each_day_gets_its_own_average():
    d1 = NOON - timedelta(days=1)
    d2 = NOON - timedelta(days=2)
    items = [
        _item(1, "100", d1),
        _item(2, "200", d1),
        _item(3, "100", d2),
        _item(4, "100", d2),
        _item(5, "101", d2),
    ]

    result = compute_daily_averages(items, TODAY)

    assert result == {
        d1.date(): Decimal("150.00"),
        d2.date(): Decimal("100.33"),
    }


def test_average_is_scaled_to_two_places():
    d1 = NOON - timedelta(days=1)
    result = compute_daily_averages([_item(1, "100", d1)], TODAY)

    assert result[d1.date()].as_tuple().exponent == -2


def test_grouping_uses_utc_calendar_date():
    # 01:00 en UTC+03:00 es 22:00 del día anterior en UTC
    local = datetime(2024, 5, 19, 1, 0, tzinfo=timezone(timedelta(hours=3)))
    grouped = group_prices_by_day([_item(1, "20", local)])

    assert list(grouped) == [date(2024, 5, 18)]


def test_today_argument_drives_exclusion_not_data():
    # Con otro "hoy", los artículos de NOON pasan a ser históricos
    items = [_item(1, "200", NOON)]

    result = compute_daily_averages(items, TODAY + timedelta(days=1))

    assert result == {TODAY: Decimal("200.00")}
