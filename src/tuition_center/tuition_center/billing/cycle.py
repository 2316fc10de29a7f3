from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timedelta
from enum import Enum
from typing import Optional

from ..common.datetime_utils import to_day
from ..common.validators import require_non_negative_int
from ..core.constants import (
    DAYS_PER_WEEK,
    MONTHLY_CYCLE_DAYS,
    NOMINAL_SESSIONS_PER_MONTH,
    SESSIONS_PER_WEEK,
)


class CycleKind(str, Enum):
    TIME = "time"
    SESSIONS = "sessions"
    DAILY = "daily"


@dataclass(frozen=True)
class CycleType:
    """Chu kỳ thanh toán (theo tháng hoặc theo số buổi)."""

    code: str
    kind: CycleKind
    label: str
    sessions: Optional[int] = None
    aliases: tuple[str, ...] = field(default_factory=tuple)

    @property
    def is_session_based(self) -> bool:
        return self.kind == CycleKind.SESSIONS

    @property
    def billable_sessions(self) -> int:
        """Sessions charged for one cycle when fees are priced per session."""
        if self.kind == CycleKind.SESSIONS and self.sessions:
            return self.sessions
        if self.kind == CycleKind.DAILY:
            return 1
        return NOMINAL_SESSIONS_PER_MONTH


MONTHLY = CycleType(code="monthly", kind=CycleKind.TIME, label="1 tháng", aliases=("1-thang",))
SESSION_8 = CycleType(code="session-8", kind=CycleKind.SESSIONS, label="8 buổi", sessions=8, aliases=("8-buoi",))
SESSION_10 = CycleType(code="session-10", kind=CycleKind.SESSIONS, label="10 buổi", sessions=10, aliases=("10-buoi",))
DAILY = CycleType(code="daily", kind=CycleKind.DAILY, label="Theo ngày", aliases=("theo-ngay",))

CYCLE_TYPES: dict[str, CycleType] = {}


def register_cycle_type(cycle_type: CycleType) -> CycleType:
    for code in (cycle_type.code, *cycle_type.aliases):
        CYCLE_TYPES[code.lower()] = cycle_type
    return cycle_type


for _ct in (MONTHLY, SESSION_8, SESSION_10, DAILY):
    register_cycle_type(_ct)


def get_cycle_type(code: Optional[str]) -> Optional[CycleType]:
    if not code or not isinstance(code, str):
        return None
    return CYCLE_TYPES.get(code.strip().lower())


def _resolve(cycle_type: CycleType | str | None) -> Optional[CycleType]:
    if isinstance(cycle_type, CycleType):
        return cycle_type
    return get_cycle_type(cycle_type)


def compute_end_date(
    start: date | datetime | str,
    cycle_type: CycleType | str | None,
    completed_sessions: int = 0,
) -> date:
    """End date of a payment cycle starting on ``start``.

    - monthly: start + 30 days (fixed, not calendar-month aware)
    - session cycles: start + ceil(sessions * 7 / 3) days, i.e. an estimate assuming
      3 sessions per week. It ignores the class's real schedule and the completed
      session count; callers needing exact dates must consult the schedule.
    - unknown/daily: start unchanged (no progression)
    """

    day = to_day(start)
    require_non_negative_int(completed_sessions, "Số buổi đã học")

    ct = _resolve(cycle_type)
    if ct is None or ct.kind == CycleKind.DAILY:
        return day

    if ct.kind == CycleKind.TIME:
        return day + timedelta(days=MONTHLY_CYCLE_DAYS)

    if not ct.sessions:
        return day
    # Integer ceiling avoids float drift (8 * 7 / 3 = 18.67 -> 19).
    days = -(-ct.sessions * DAYS_PER_WEEK // SESSIONS_PER_WEEK)
    return day + timedelta(days=days)


@dataclass(frozen=True)
class BillingCycle:
    """Value object: a billing window. The end date is always recomputed from inputs."""

    start_date: date
    cycle_type: CycleType | str
    completed_sessions: int = 0

    @property
    def resolved_type(self) -> Optional[CycleType]:
        return _resolve(self.cycle_type)

    @property
    def end_date(self) -> date:
        return compute_end_date(self.start_date, self.cycle_type, self.completed_sessions)

    @property
    def remaining_sessions(self) -> Optional[int]:
        ct = self.resolved_type
        if ct is None or not ct.is_session_based or not ct.sessions:
            return None
        return max(ct.sessions - int(self.completed_sessions), 0)

    def is_active_on(self, day: date | datetime) -> bool:
        return self.start_date <= to_day(day) <= self.end_date
