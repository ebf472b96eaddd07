"""Clock text shown in the launcher header."""

from __future__ import annotations

from datetime import datetime

from tusk.core.config import Config

DATE_FORMATS = {
    "MdyHms": "%m/%d/%Y",
    "YmdHms": "%Y/%m/%d",
    "DmyHms": "%d/%m/%Y",
}


def format_datetime(dt: datetime, config: Config) -> str:
    """Return ``"<time> <date>"`` using the configured format and date order."""
    date_fmt = DATE_FORMATS.get(config.get("time_order"), DATE_FORMATS["MdyHms"])
    return f"{dt.strftime(config.get('time_format'))} {dt.strftime(date_fmt)}"


def get_current_time(config: Config) -> str:
    return format_datetime(datetime.now().astimezone(), config)
