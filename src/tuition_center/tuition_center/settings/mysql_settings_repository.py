from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Setting
from .repository import SettingsRepository


def _to_setting(r: dict) -> Setting:
    return Setting(
        key=r["setting_key"],
        value=r["setting_value"],
        description=r.get("description"),
    )


class MySQLSettingsRepository(SettingsRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[Setting]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT setting_key, setting_value, description
                FROM settings
                ORDER BY setting_key
                """
            )
            return [_to_setting(r) for r in fetchall(cur)]

    def get(self, key: str) -> Optional[Setting]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT setting_key, setting_value, description FROM settings WHERE setting_key=%s",
                (key,),
            )
            r = fetchone(cur)
            return _to_setting(r) if r else None

    def create(self, *, key: str, value: str, description: Optional[str] = None) -> Setting:
        # Duplicate keys surface as mysql.connector.IntegrityError from the UNIQUE index.
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "INSERT INTO settings(setting_key, setting_value, description) VALUES(%s,%s,%s)",
                (key, value, description),
            )
        return Setting(key=key, value=value, description=description)

    def update(self, *, key: str, value: str) -> Optional[Setting]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("UPDATE settings SET setting_value=%s WHERE setting_key=%s", (value, key))
            cur.execute(
                "SELECT setting_key, setting_value, description FROM settings WHERE setting_key=%s",
                (key,),
            )
            r = fetchone(cur)
            return _to_setting(r) if r else None

    def upsert(self, *, key: str, value: str, description: Optional[str] = None) -> Setting:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO settings(setting_key, setting_value, description)
                VALUES(%s,%s,%s)
                ON DUPLICATE KEY UPDATE
                    setting_value=VALUES(setting_value),
                    description=COALESCE(VALUES(description), description)
                """,
                (key, value, description),
            )
            cur.execute(
                "SELECT setting_key, setting_value, description FROM settings WHERE setting_key=%s",
                (key,),
            )
            return _to_setting(fetchone(cur))

    def delete(self, *, key: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM settings WHERE setting_key=%s", (key,))
            return cur.rowcount > 0
