from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Callable, Optional

from ..classes.repository import ClassRepository
from ..common.datetime_utils import to_day, today_local
from ..common.validators import require_positive_int
from ..core.constants import ATTENDANCE_TODAY_QUERY
from ..core.enums import AttendanceStatus
from ..core.exceptions import NotFoundError
from ..schedules.matcher import ScheduleMatcher
from ..students.repository import StudentRepository
from .formatting import format_attendance_status
from .model import AttendanceRecord
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


class AttendanceRecorder:
    """Use case: mark one student's attendance for one day."""

    def __init__(
        self,
        attendance: AttendanceRepository,
        students: Optional[StudentRepository] = None,
        *,
        on_invalidate: Optional[Callable[[str], None]] = None,
    ):
        self._attendance = attendance
        self._students = students
        self._on_invalidate = on_invalidate

    def mark_attendance(
        self,
        student_id: int,
        status: AttendanceStatus | str,
        attend_date: date | datetime | str | None = None,
    ) -> AttendanceRecord:
        # Validate everything before touching storage.
        status = AttendanceStatus.parse(status)
        student_id = require_positive_int(student_id, "ID học sinh")
        day = to_day(attend_date) if attend_date is not None else today_local()

        if self._students is not None and self._students.get_by_id(student_id) is None:
            raise NotFoundError("Không tìm thấy học sinh với ID này")

        record = self._attendance.upsert(student_id=student_id, attend_date=day, status=status)
        logger.info("Marked student %s as %s on %s", student_id, status.value, day)

        if self._on_invalidate:
            self._on_invalidate(ATTENDANCE_TODAY_QUERY)
        return record

    def history(self, student_id: int) -> list[dict]:
        rows = self._attendance.list_for_student(require_positive_int(student_id, "ID học sinh"))
        return [dict(r.to_dict(), label=format_attendance_status(r.status)) for r in rows]


@dataclass(frozen=True)
class TodayRoster:
    day: date
    day_name: str
    marked: list[dict] = field(default_factory=list)
    pending: list[dict] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "date": self.day.strftime("%Y-%m-%d"),
            "dayName": self.day_name,
            "markedAttendance": self.marked,
            "studentsForToday": self.pending,
        }


class TodayAttendanceService:
    """Read model: who should be marked today and who already is."""

    def __init__(
        self,
        attendance: AttendanceRepository,
        classes: ClassRepository,
        students: StudentRepository,
        *,
        matcher: Optional[ScheduleMatcher] = None,
    ):
        self._attendance = attendance
        self._classes = classes
        self._students = students
        self._matcher = matcher or ScheduleMatcher()

    def build(self, day: Optional[date] = None) -> TodayRoster:
        day = day or today_local()
        marked_records = self._attendance.list_for_date(day)
        marked_ids = {r.student_id for r in marked_records}

        pending: list[dict] = []
        for tuition_class in self._classes.list_all():
            if not self._matcher.is_scheduled_on(tuition_class.schedule, day):
                continue

            for student in self._students.list_by_class(tuition_class.class_id):
                if not student.is_active or student.student_id in marked_ids:
                    continue
                pending.append(
                    {
                        "studentId": student.student_id,
                        "name": student.name,
                        "code": student.code,
                        "classId": tuition_class.class_id,
                        "className": tuition_class.name,
                        "schedule": tuition_class.schedule,
                    }
                )

        marked: list[dict] = []
        for r in marked_records:
            row = dict(r.to_dict(), label=format_attendance_status(r.status))
            student = self._students.get_by_id(r.student_id)
            if student:
                row["studentName"] = student.name
                row["studentCode"] = student.code
            marked.append(row)

        logger.debug("Roster for %s: %d pending, %d marked", day, len(pending), len(marked))
        return TodayRoster(day=day, day_name=self._matcher.day_name(day), marked=marked, pending=pending)
