"""Tests for header clock formatting."""

from datetime import datetime

from tusk.core.clock import format_datetime

MOMENT = datetime(2024, 3, 9, 14, 5, 7)


class TestFormatDatetime:
    def test_defaults(self, config):
        assert format_datetime(MOMENT, config) == "02:05 PM 03/09/2024"

    def test_date_orders(self, config):
        config.set("time_format", "%H:%M")
        config.set("time_order", "YmdHms")
        assert format_datetime(MOMENT, config) == "14:05 2024/03/09"
        config.set("time_order", "DmyHms")
        assert format_datetime(MOMENT, config) == "14:05 09/03/2024"

    def test_unknown_order_uses_month_first(self, config):
        config.set("time_order", "bogus")
        assert format_datetime(MOMENT, config).endswith("03/09/2024")
