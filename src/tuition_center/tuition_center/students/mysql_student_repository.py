from __future__ import annotations

from typing import Optional, Sequence

from ..core.enums import StudentStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Student
from .repository import StudentRepository


def _to_student(r: dict) -> Student:
    return Student(
        student_id=int(r["student_id"]),
        name=r["name"],
        code=r["code"],
        phone=r.get("phone") or "",
        class_id=int(r["class_id"]),
        payment_cycle=r["payment_cycle"],
        status=StudentStatus(r.get("status") or StudentStatus.ACTIVE.value),
    )


class MySQLStudentRepository(StudentRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, student_id: int) -> Optional[Student]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT student_id, name, code, phone, class_id, payment_cycle, status
                FROM students
                WHERE student_id=%s
                """,
                (int(student_id),),
            )
            r = fetchone(cur)
            return _to_student(r) if r else None

    def list_by_class(self, class_id: int) -> Sequence[Student]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT student_id, name, code, phone, class_id, payment_cycle, status
                FROM students
                WHERE class_id=%s
                ORDER BY student_id
                """,
                (int(class_id),),
            )
            return [_to_student(r) for r in fetchall(cur)]
