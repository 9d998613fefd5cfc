"""Unit tests for time, money and paging helpers."""

from datetime import datetime, timezone
from decimal import Decimal

import pytest

from cbody_ops.util.helpers import (
    as_utc,
    finance_day_start,
    format_datetime,
    parse_bool,
    parse_datetime,
    parse_list,
    parse_paging,
    to_decimal,
    to_float,
)


pytestmark = pytest.mark.unit


class TestFinanceDayStart:
    """Finance days run 06:00 to 06:00 Bangkok time (UTC+7)."""

    def test_before_six_belongs_to_previous_day(self):
        """05:00 Bangkok on the 10th is still the finance day of the 9th."""
        now = datetime(2025, 1, 9, 22, 0, tzinfo=timezone.utc)

        assert finance_day_start(now) == datetime(2025, 1, 8, 23, 0, tzinfo=timezone.utc)

    def test_after_six_starts_same_day(self):
        """07:00 Bangkok on the 10th started at 06:00 Bangkok that day."""
        now = datetime(2025, 1, 10, 0, 0, tzinfo=timezone.utc)

        assert finance_day_start(now) == datetime(2025, 1, 9, 23, 0, tzinfo=timezone.utc)

    def test_exactly_six_is_the_boundary(self):
        now = datetime(2025, 1, 9, 23, 0, tzinfo=timezone.utc)

        assert finance_day_start(now) == now


class TestDatetimes:

    def test_naive_values_are_taken_as_utc(self):
        naive = datetime(2025, 3, 1, 12, 30)

        assert as_utc(naive).tzinfo == timezone.utc
        assert format_datetime(naive) == "2025-03-01T12:30:00+00:00"

    def test_parse_accepts_z_suffix(self):
        assert parse_datetime("2025-03-01T12:30:00Z") == datetime(2025, 3, 1, 12, 30, tzinfo=timezone.utc)

    def test_parse_empty_is_none(self):
        assert parse_datetime("") is None
        assert parse_datetime(None) is None

    def test_parse_garbage_raises(self):
        with pytest.raises(ValueError):
            parse_datetime("yesterday")


class TestMoney:

    def test_to_decimal_rounds_half_up(self):
        assert to_decimal("10.005") == Decimal("10.01")
        assert to_decimal(None) == Decimal("0.00")

    def test_to_float_keeps_none(self):
        assert to_float(None) is None
        assert to_float(Decimal("12.345")) == 12.35


class TestArgs:

    def test_paging_is_clamped(self):
        assert parse_paging({"page": "0", "limit": "500"}) == (1, 100)
        assert parse_paging({"page": "x", "limit": ""}) == (1, 20)

    def test_paging_custom_limit_key(self):
        assert parse_paging({"page_size": "5"}, limit_key="page_size") == (1, 5)

    def test_parse_bool(self):
        assert parse_bool("true") is True
        assert parse_bool("0") is False
        assert parse_bool(None) is None

    def test_parse_list_accepts_comma_separated(self):
        assert parse_list({"status": "pending, confirmed"}, "status") == ["pending", "confirmed"]
