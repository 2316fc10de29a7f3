from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional

from ..core.enums import AttendanceStatus

STATUS_LABELS = {
    AttendanceStatus.PRESENT.value: "Có mặt",
    AttendanceStatus.ABSENT.value: "Vắng mặt",
    AttendanceStatus.TEACHER_ABSENT.value: "GV nghỉ",
}


def format_attendance_status(status: AttendanceStatus | str) -> str:
    """Display label for a status code; unknown codes are returned unchanged."""
    if status is None:
        return ""
    code = status.value if isinstance(status, AttendanceStatus) else status
    if not isinstance(code, str):
        return str(code)
    return STATUS_LABELS.get(code, code)


@dataclass(frozen=True)
class AttendanceSummary:
    present: int = 0
    absent: int = 0
    teacher_absent: int = 0

    @property
    def total(self) -> int:
        return self.present + self.absent + self.teacher_absent

    def to_dict(self) -> dict:
        return {
            "present": self.present,
            "absent": self.absent,
            "teacherAbsent": self.teacher_absent,
            "total": self.total,
        }


def summarize_attendance(records: Optional[Iterable]) -> AttendanceSummary:
    """Count records per status; records with unrecognized statuses are ignored."""
    counts = {status: 0 for status in AttendanceStatus}
    for r in records or ():
        raw = getattr(r, "status", None)
        if raw is None and isinstance(r, dict):
            raw = r.get("status")
        try:
            counts[AttendanceStatus(raw)] += 1
        except ValueError:
            continue

    return AttendanceSummary(
        present=counts[AttendanceStatus.PRESENT],
        absent=counts[AttendanceStatus.ABSENT],
        teacher_absent=counts[AttendanceStatus.TEACHER_ABSENT],
    )
