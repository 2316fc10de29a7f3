from __future__ import annotations

from datetime import date
from typing import Optional

import pytest

from src.tuition_center.tuition_center.attendance.model import AttendanceRecord
from src.tuition_center.tuition_center.classes.model import TuitionClass
from src.tuition_center.tuition_center.core.enums import AttendanceStatus, StudentStatus
from src.tuition_center.tuition_center.settings.model import Setting
from src.tuition_center.tuition_center.students.model import Student


class InMemorySettings:
    """Mimics the UNIQUE setting_key table: one row per key."""

    def __init__(self, rows: Optional[list[Setting]] = None):
        self.rows: dict[str, Setting] = {s.key: s for s in rows or []}
        self.list_calls = 0
        self.writes = 0

    def list_all(self):
        self.list_calls += 1
        return list(self.rows.values())

    def get(self, key):
        return self.rows.get(key)

    def create(self, *, key, value, description=None):
        if key in self.rows:
            raise RuntimeError(f"Duplicate entry '{key}' for key 'uq_settings_key'")
        self.writes += 1
        self.rows[key] = Setting(key=key, value=value, description=description)
        return self.rows[key]

    def update(self, *, key, value):
        current = self.rows.get(key)
        if current is None:
            return None
        self.writes += 1
        self.rows[key] = Setting(key=key, value=value, description=current.description)
        return self.rows[key]

    def upsert(self, *, key, value, description=None):
        current = self.rows.get(key)
        self.writes += 1
        self.rows[key] = Setting(
            key=key,
            value=value,
            description=description if description is not None else (current.description if current else None),
        )
        return self.rows[key]

    def delete(self, *, key):
        if key not in self.rows:
            return False
        self.writes += 1
        del self.rows[key]
        return True


class InMemoryAttendance:
    """Keyed by (student_id, attend_date) like the UNIQUE index in storage."""

    def __init__(self):
        self.rows: dict[tuple[int, date], AttendanceRecord] = {}
        self.upsert_calls = 0
        self._id = 0

    def upsert(self, *, student_id, attend_date, status):
        self.upsert_calls += 1
        existing = self.rows.get((student_id, attend_date))
        if existing:
            attendance_id = existing.attendance_id
        else:
            self._id += 1
            attendance_id = self._id
        rec = AttendanceRecord(
            attendance_id=attendance_id,
            student_id=student_id,
            attend_date=attend_date,
            status=AttendanceStatus(status),
        )
        self.rows[(student_id, attend_date)] = rec
        return rec

    def get_for_student_and_date(self, student_id, attend_date):
        return self.rows.get((student_id, attend_date))

    def list_for_date(self, attend_date):
        return [r for (_, d), r in sorted(self.rows.items()) if d == attend_date]

    def list_for_student(self, student_id):
        items = [r for r in self.rows.values() if r.student_id == student_id]
        items.sort(key=lambda r: r.attend_date, reverse=True)
        return items


class InMemoryClasses:
    def __init__(self, classes: list[TuitionClass]):
        self._classes = {c.class_id: c for c in classes}

    def list_all(self):
        return list(self._classes.values())

    def get_by_id(self, class_id):
        return self._classes.get(class_id)


class InMemoryStudents:
    def __init__(self, students: list[Student]):
        self._students = {s.student_id: s for s in students}

    def get_by_id(self, student_id):
        return self._students.get(student_id)

    def list_by_class(self, class_id):
        return [s for s in self._students.values() if s.class_id == class_id]


def make_student(student_id: int, class_id: int, *, status=StudentStatus.ACTIVE, name: Optional[str] = None) -> Student:
    return Student(
        student_id=student_id,
        name=name or f"Học viên {student_id}",
        code=f"HV{student_id:03d}",
        phone="0901234567",
        class_id=class_id,
        payment_cycle="8-buoi",
        status=status,
    )


@pytest.fixture
def classes_repo():
    return InMemoryClasses(
        [
            TuitionClass(class_id=1, name="Toán 9", fee=200000, schedule="2, 4, 6 (18:00 - 20:00)", location="P1", payment_cycle="8-buoi"),
            TuitionClass(class_id=2, name="Anh văn", fee=1500000, schedule="Thứ 3, Thứ 5", location="P2", payment_cycle="1-thang"),
            TuitionClass(class_id=3, name="Vẽ", fee=100000, schedule="CN", location="P3", payment_cycle="theo-ngay"),
        ]
    )


@pytest.fixture
def students_repo():
    return InMemoryStudents(
        [
            make_student(1, 1, name="An"),
            make_student(2, 1, status=StudentStatus.INACTIVE),
            make_student(3, 1, name="Bình"),
            make_student(4, 2),
            make_student(5, 3),
        ]
    )


@pytest.fixture
def attendance_repo():
    return InMemoryAttendance()


@pytest.fixture
def settings_repo():
    return InMemorySettings()
