from __future__ import annotations

import importlib
import logging
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask, g, has_request_context

from config import get_settings_module

from .core.constants import DEFAULT_DAY_NAMES
from .database.bootstrap import apply_schema, list_tables, migrate_fee_policy_casing

from .container import Container, build_container
from .attendance.controller import register as register_attendance
from .billing.controller import register as register_billing
from .settings.controller import register as register_settings

logger = logging.getLogger(__name__)

INVALIDATE_HEADER = "X-Invalidate-Queries"


def queue_invalidation(key: str) -> None:
    """Collect query keys dependent views must refetch; sent back as a response header."""
    if not has_request_context():
        logger.debug("Invalidate %s (outside request)", key)
        return
    pending = g.setdefault("invalidated_queries", [])
    if key not in pending:
        pending.append(key)


def create_app(*, container: Optional[Container] = None, settings_module: Optional[str] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    logging.basicConfig(
        level=logging.DEBUG if app.config["DEBUG"] else logging.INFO,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    if container is None:
        db_config = getattr(settings, "DB_CONFIG")
        logger.info(
            "settings=%s db=%s@%s:%s/%s",
            settings_module,
            db_config.get("user"),
            db_config.get("host"),
            db_config.get("port", 3306),
            db_config.get("database"),
        )

        container = build_container(
            db_config=db_config,
            day_names=getattr(settings, "DAY_NAMES", DEFAULT_DAY_NAMES),
            on_invalidate=queue_invalidation,
        )

        if bool(getattr(settings, "AUTO_INIT_DB", False)):
            schema_path = Path(__file__).resolve().parents[3] / "database" / "schema.sql"
            apply_schema(container.conn, schema_path=schema_path)
            migrate_fee_policy_casing(container.conn)
            logger.info("schema ready (tables=%d)", len(list_tables(container.conn)))

    @app.after_request
    def _send_invalidations(response):
        pending = g.pop("invalidated_queries", None)
        if pending and response.status_code < 400:
            response.headers[INVALIDATE_HEADER] = ", ".join(pending)
        return response

    app.extensions["tuition_center"] = container

    register_settings(app, container)
    register_attendance(app, container)
    register_billing(app, container)

    return app
