from datetime import date

import pytest

from src.tuition_center.tuition_center.attendance.mysql_attendance_repository import _to_record
from src.tuition_center.tuition_center.core.enums import AttendanceStatus
from src.tuition_center.tuition_center.core.exceptions import ValidationError


def _row(status):
    return {"attendance_id": 1, "student_id": 7, "attend_date": date(2024, 3, 1), "status": status}


def test_known_status_becomes_enum():
    rec = _to_record(_row("teacher_absent"))

    assert rec.status is AttendanceStatus.TEACHER_ABSENT
    assert rec.to_dict() == {"id": 1, "studentId": 7, "date": "2024-03-01", "status": "teacher_absent"}


def test_unknown_stored_status_is_kept_raw():
    rec = _to_record(_row("makeup"))

    assert rec.status == "makeup"
    assert rec.to_dict()["status"] == "makeup"


def test_write_path_stays_strict():
    with pytest.raises(ValidationError):
        AttendanceStatus.parse("makeup")
