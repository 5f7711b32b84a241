from __future__ import annotations

import importlib
import logging

from dotenv import load_dotenv

from timerwork.config import get_settings_module
from timerwork.database.bootstrap import apply_schema, list_tables
from timerwork.database.connection import DatabaseConnection, DBConfig

logger = logging.getLogger("timerwork.init_db")


def main() -> None:
    load_dotenv(override=False)
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")

    settings = importlib.import_module(get_settings_module())
    conn = DatabaseConnection(DBConfig.from_dict(dict(settings.DB_CONFIG)))
    conn.wait_until_ready(
        attempts=int(getattr(settings, "DB_CONNECT_ATTEMPTS", 30)),
        delay=float(getattr(settings, "DB_CONNECT_DELAY", 2)),
    )

    apply_schema(conn)
    tables = list_tables(conn)
    logger.info("Applied schema.sql -> %s (tables=%d)", conn.config.describe(), len(tables))


if __name__ == "__main__":
    main()
