from __future__ import annotations

from datetime import date, datetime

from ..core.constants import ISO_DATE_FORMAT
from ..core.exceptions import ValidationError


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    try:
        return datetime.strptime(value.strip(), ISO_DATE_FORMAT).date()
    except (AttributeError, ValueError):
        raise ValidationError("Ngày tháng không hợp lệ. Vui lòng sử dụng định dạng YYYY-MM-DD") from None


def to_day(value: date | datetime | str) -> date:
    """Normalize a date-like value to day granularity.

    datetime values lose their time component; strings must be YYYY-MM-DD.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        return parse_iso_date(value)
    raise ValidationError(f"Ngày tháng không hợp lệ: {value!r}")


def format_iso_date(value: date | datetime) -> str:
    return to_day(value).strftime(ISO_DATE_FORMAT)


def weekday_index(value: date) -> int:
    """0 = Sunday ... 6 = Saturday."""
    return (value.weekday() + 1) % 7


def today_local() -> date:
    """Current local date.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return date.today()
