from datetime import date

from src.tuition_center.tuition_center.attendance.formatting import format_attendance_status, summarize_attendance
from src.tuition_center.tuition_center.attendance.model import AttendanceRecord
from src.tuition_center.tuition_center.core.enums import AttendanceStatus


def test_known_statuses_have_labels():
    assert format_attendance_status("present") == "Có mặt"
    assert format_attendance_status("absent") == "Vắng mặt"
    assert format_attendance_status(AttendanceStatus.TEACHER_ABSENT) == "GV nghỉ"


def test_unknown_statuses_pass_through():
    assert format_attendance_status("makeup") == "makeup"
    assert format_attendance_status("") == ""
    assert format_attendance_status(None) == ""
    assert format_attendance_status(42) == "42"


def test_summarize_counts_known_statuses():
    records = [
        AttendanceRecord(student_id=1, attend_date=date(2024, 3, 1), status=AttendanceStatus.PRESENT),
        AttendanceRecord(student_id=2, attend_date=date(2024, 3, 1), status=AttendanceStatus.ABSENT),
        {"status": "present"},
        {"status": "teacher_absent"},
        {"status": "makeup"},
    ]

    summary = summarize_attendance(records)

    assert summary.present == 2
    assert summary.absent == 1
    assert summary.teacher_absent == 1
    assert summary.total == 4
    assert summary.to_dict()["teacherAbsent"] == 1


def test_summarize_empty_input():
    assert summarize_attendance(None).total == 0
    assert summarize_attendance([]).to_dict() == {"present": 0, "absent": 0, "teacherAbsent": 0, "total": 0}
