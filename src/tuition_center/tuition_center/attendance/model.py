from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..common.datetime_utils import format_iso_date
from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class AttendanceRecord:
    """Thực thể miền (domain): Điểm danh một học viên trong một ngày.

    (student_id, attend_date) is the record's key; re-marking overwrites the status.
    """

    student_id: int
    attend_date: date
    status: AttendanceStatus | str
    attendance_id: Optional[int] = None

    def to_dict(self) -> dict:
        return {
            "id": self.attendance_id,
            "studentId": self.student_id,
            "date": format_iso_date(self.attend_date),
            "status": self.status.value if isinstance(self.status, AttendanceStatus) else self.status,
        }
