from __future__ import annotations

import importlib

from attendance_tracker.config import get_settings_module

from attendance_tracker.database.bootstrap import DEFAULT_SCHEMA_PATH, apply_schema, list_tables
from attendance_tracker.database.connection import DBConfig


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    db = DBConfig.from_mapping(dict(settings.DB_CONFIG))

    apply_schema(db, schema_path=DEFAULT_SCHEMA_PATH)
    tables = list_tables(db)
    print(f"OK: Applied schema.sql -> {db.describe()} (tables={len(tables)})")


if __name__ == "__main__":
    main()
