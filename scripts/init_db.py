from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.tuition_center.tuition_center.database.bootstrap import apply_schema, list_tables, migrate_fee_policy_casing
from src.tuition_center.tuition_center.database.connection import DatabaseConnection, DBConfig


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    conn = DatabaseConnection(DBConfig.from_dict(dict(settings.DB_CONFIG)))

    schema_path = REPO_ROOT / "database" / "schema.sql"
    apply_schema(conn, schema_path=schema_path)
    migrated = migrate_fee_policy_casing(conn)
    tables = list_tables(conn)
    cfg = conn.config
    print(
        "OK: Applied schema.sql -> "
        f"{cfg.user}@{cfg.host}:{cfg.port}/{cfg.database} "
        f"(tables={len(tables)}, fee policy rows migrated={migrated})"
    )


if __name__ == "__main__":
    main()
