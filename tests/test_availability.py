"""Tests for the business-hours availability check."""

from datetime import date

import pytest

from core.domain.language import Language
from core.services.availability import (
    BUSINESS_HOURS,
    OrderStatus,
    business_hours_label,
    check_availability,
    is_available,
    order_status,
    parse_hour,
)


class TestAvailabilityRule:
    def test_business_hours_are_nine_through_seventeen(self):
        assert list(BUSINESS_HOURS) == list(range(9, 18))
        assert business_hours_label() == "09:00 - 17:00"

    @pytest.mark.parametrize("time_of_day", ["09:00", "12:15", "17:30", "17:59", "9:00"])
    def test_available(self, time_of_day):
        assert check_availability(time_of_day).available is True

    @pytest.mark.parametrize("time_of_day", ["08:59", "18:00", "23:00", "00:00"])
    def test_outside_hours(self, time_of_day):
        assert check_availability(time_of_day).available is False

    @pytest.mark.parametrize("time_of_day", ["abc", "", "10", "ab:00", ":30", "-9:00", "No especificada"])
    def test_unparseable_never_raises(self, time_of_day):
        result = check_availability(time_of_day)
        assert result.available is False
        assert result.status is OrderStatus.PENDING

    def test_integer_hours(self):
        assert is_available(9)
        assert is_available(17)
        assert not is_available(18)

    def test_parse_hour(self):
        assert parse_hour("08:59") == 8
        assert parse_hour("abc") is None

    def test_surrounding_whitespace_in_hour_is_ignored(self):
        assert parse_hour(" 9:00") == 9
        assert check_availability(" 9:00").available is True

    def test_signed_hour_is_rejected(self):
        assert parse_hour("+9:00") is None
        assert check_availability("+9:00").available is False


class TestAvailabilityMessages:
    def test_confirmation_echoes_date_and_time(self):
        result = check_availability("10:00", date(2024, 12, 3))
        assert "CONFIRMED" in result.message
        assert "03/12/2024" in result.message
        assert "10:00" in result.message

    def test_rejection_suggests_fallback_windows(self):
        result = check_availability("20:00")
        assert "09:00 - 12:00" in result.message
        assert "14:00 - 17:00" in result.message

    def test_spanish_messages(self):
        assert "CONFIRMADA" in check_availability("10:00", "01/01/2025", language=Language.SPANISH).message
        assert "NO DISPONIBLE" in check_availability("07:00", language=Language.SPANISH).message


class TestOrderStatus:
    def test_status_follows_availability(self):
        assert order_status("10:00") is OrderStatus.CONFIRMED
        assert order_status("19:00") is OrderStatus.PENDING

    def test_labels(self):
        assert OrderStatus.CONFIRMED.label() == "Confirmed"
        assert OrderStatus.PENDING.label(Language.SPANISH) == "Pendiente"
