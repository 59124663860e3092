from __future__ import annotations

import importlib
import logging
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .attendance.controller import register as register_attendance
from .common.datetime_utils import parse_clock_time
from .container import Container, build_container
from .core.constants import DEFAULT_GEOFENCE_RADIUS_METERS, DEFAULT_LOW_WORK_HOURS, DEFAULT_WORK_END, DEFAULT_WORK_START
from .database.bootstrap import apply_schema, list_tables
from .employees.controller import register as register_employees

logger = logging.getLogger(__name__)


def _policy_from_settings(settings) -> dict:
    return {
        "radius_meters": float(getattr(settings, "GEOFENCE_RADIUS_METERS", DEFAULT_GEOFENCE_RADIUS_METERS)),
        "work_start": parse_clock_time(getattr(settings, "WORK_START", DEFAULT_WORK_START)),
        "work_end": parse_clock_time(getattr(settings, "WORK_END", DEFAULT_WORK_END)),
        "low_work_hours": float(getattr(settings, "LOW_WORK_HOURS", DEFAULT_LOW_WORK_HOURS)),
    }


def create_app(settings_module: Optional[str] = None, *, container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
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

        if bool(getattr(settings, "AUTO_INIT_DB", False)):
            schema_path = Path(__file__).resolve().parents[3] / "database" / "schema.sql"
            apply_schema(db_config, schema_path=schema_path)
            logger.info("schema ready (tables=%d)", len(list_tables(db_config)))

        container = build_container(db_config=db_config, **_policy_from_settings(settings))

    register_employees(app, container)
    register_attendance(app, container)

    return app
