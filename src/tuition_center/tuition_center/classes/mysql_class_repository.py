from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import TuitionClass
from .repository import ClassRepository


def _to_class(r: dict) -> TuitionClass:
    return TuitionClass(
        class_id=int(r["class_id"]),
        name=r["name"],
        fee=int(r["fee"]),
        schedule=r.get("schedule") or "",
        location=r.get("location") or "",
        payment_cycle=r.get("payment_cycle"),
    )


class MySQLClassRepository(ClassRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[TuitionClass]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT class_id, name, fee, schedule, location, payment_cycle
                FROM classes
                ORDER BY class_id
                """
            )
            return [_to_class(r) for r in fetchall(cur)]

    def get_by_id(self, class_id: int) -> Optional[TuitionClass]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT class_id, name, fee, schedule, location, payment_cycle
                FROM classes
                WHERE class_id=%s
                """,
                (int(class_id),),
            )
            r = fetchone(cur)
            return _to_class(r) if r else None
