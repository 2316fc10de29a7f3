from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..core.enums import AttendanceStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import AttendanceRecord
from .repository import AttendanceRepository


def _to_record(r: dict) -> AttendanceRecord:
    return AttendanceRecord(
        attendance_id=int(r["attendance_id"]),
        student_id=int(r["student_id"]),
        attend_date=r["attend_date"],
        status=AttendanceStatus.from_stored(r["status"]),
    )


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def upsert(self, *, student_id: int, attend_date: date, status: AttendanceStatus) -> AttendanceRecord:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO attendance(student_id, attend_date, status)
                VALUES(%s,%s,%s)
                ON DUPLICATE KEY UPDATE status=VALUES(status)
                """,
                (int(student_id), attend_date, status.value),
            )
            cur.execute(
                """
                SELECT attendance_id, student_id, attend_date, status
                FROM attendance
                WHERE student_id=%s AND attend_date=%s
                """,
                (int(student_id), attend_date),
            )
            return _to_record(fetchone(cur))

    def get_for_student_and_date(self, student_id: int, attend_date: date) -> Optional[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT attendance_id, student_id, attend_date, status
                FROM attendance
                WHERE student_id=%s AND attend_date=%s
                """,
                (int(student_id), attend_date),
            )
            r = fetchone(cur)
            return _to_record(r) if r else None

    def list_for_date(self, attend_date: date) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT attendance_id, student_id, attend_date, status
                FROM attendance
                WHERE attend_date=%s
                ORDER BY student_id
                """,
                (attend_date,),
            )
            return [_to_record(r) for r in fetchall(cur)]

    def list_for_student(self, student_id: int) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT attendance_id, student_id, attend_date, status
                FROM attendance
                WHERE student_id=%s
                ORDER BY attend_date DESC
                """,
                (int(student_id),),
            )
            return [_to_record(r) for r in fetchall(cur)]
