from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Optional, Sequence

from ..common.datetime_utils import today_local, weekday_index
from ..core.constants import DEFAULT_DAY_NAMES, SUNDAY_TOKENS
from ..core.exceptions import ValidationError

logger = logging.getLogger(__name__)


class ScheduleMatcher:
    """Decide whether a free-text weekly schedule meets on a given day.

    Schedules are stored as loose text such as "2, 4, 6 (18:00 - 20:00)",
    "Thứ 3, Thứ 5" or "CN". Matching is a tolerant substring search, not a
    parser: text that matches nothing is simply "not scheduled" and nothing
    here ever raises on bad schedule data.

    Note: numeric tokens are matched as plain substrings, so a time range like
    "(18:00 - 20:00)" also contains "2"; stored schedules rely on this being lenient.
    """

    def __init__(self, day_names: Sequence[str] = DEFAULT_DAY_NAMES, *, sunday_tokens: Sequence[str] = SUNDAY_TOKENS):
        if len(day_names) != 7:
            raise ValidationError("Bảng tên thứ phải có đúng 7 phần tử (Chủ nhật ... Thứ 7)")
        self._day_names = tuple(str(name) for name in day_names)
        self._sunday_tokens = tuple(t.lower() for t in sunday_tokens)

    @property
    def day_names(self) -> tuple[str, ...]:
        return self._day_names

    def day_name(self, reference_date: date | datetime) -> str:
        return self._day_names[weekday_index(_as_day(reference_date))]

    def is_scheduled_on(self, schedule: Optional[str], reference_date: date | datetime) -> bool:
        if not schedule or not isinstance(schedule, str):
            return False

        try:
            day = _as_day(reference_date)
        except (AttributeError, TypeError):
            logger.debug("Unusable reference date %r for schedule %r", reference_date, schedule)
            return False

        index = weekday_index(day)
        text = schedule.lower()

        if self._day_names[index].lower() in text:
            return True
        if index == 0:
            return any(token in text for token in self._sunday_tokens)
        return str(index + 1) in text

    def is_scheduled_today(self, schedule: Optional[str], *, today: Optional[date] = None) -> bool:
        return self.is_scheduled_on(schedule, today or today_local())


def _as_day(value: date | datetime) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    raise TypeError(f"Expected date, got {type(value)!r}")


_default_matcher = ScheduleMatcher()


def is_scheduled_on(schedule: Optional[str], reference_date: date | datetime) -> bool:
    """Module-level shortcut using the default (Vietnamese) day-name table."""
    return _default_matcher.is_scheduled_on(schedule, reference_date)
