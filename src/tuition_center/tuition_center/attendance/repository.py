from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from ..core.enums import AttendanceStatus
from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    def upsert(self, *, student_id: int, attend_date: date, status: AttendanceStatus) -> AttendanceRecord:
        """Create or overwrite the record for (student_id, attend_date).

        Last write wins; the pair is a unique key in storage.
        """

        raise NotImplementedError

    def get_for_student_and_date(self, student_id: int, attend_date: date) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def list_for_date(self, attend_date: date) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def list_for_student(self, student_id: int) -> Sequence[AttendanceRecord]:
        raise NotImplementedError
