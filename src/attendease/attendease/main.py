from __future__ import annotations

import importlib
import logging
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .database.bootstrap import apply_schema, apply_seed_sql, ensure_demo_accounts, list_tables

from .container import Container, build_container
from .academics.controller import register as register_academics
from .attendance.controller import register as register_attendance
from .reports.controller import register as register_reports
from .students.controller import register as register_students
from .teachers.controller import register as register_teachers
from .users.controller import register as register_users

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"

logger = logging.getLogger(__name__)


def _database_dir() -> Path:
    return Path(__file__).resolve().parents[3] / "database"


def create_app(container: Optional[Container] = None) -> Flask:
    """Application factory.

    Passing a ``container`` skips every database step (tests hand in one built
    over in-memory repositories).
    """

    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    logging.basicConfig(level=getattr(settings, "LOG_LEVEL", "INFO"), format=LOG_FORMAT)

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

        if bool(getattr(settings, "AUTO_INIT_DB", False)):
            apply_schema(db_config, schema_path=_database_dir() / "schema.sql")
            logger.info("schema ready (tables=%d)", len(list_tables(db_config)))
        if bool(getattr(settings, "AUTO_SEED_DB", False)):
            apply_seed_sql(db_config, seed_path=_database_dir() / "seed.sql")
            ensure_demo_accounts(db_config)
            logger.info("demo seed ready")

        container = build_container(db_config=db_config)

    register_users(app, container)
    register_academics(app, container)
    register_teachers(app, container)
    register_students(app, container)
    register_attendance(app, container)
    register_reports(app, container)

    return app
