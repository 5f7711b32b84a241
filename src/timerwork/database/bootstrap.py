from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Iterable, Optional

import mysql.connector

from .connection import DatabaseConnection

logger = logging.getLogger(__name__)

SCHEMA_PATH = Path(__file__).resolve().parent / "schema.sql"

# Columns added after the first release; applied to tables created by older schemas.
COLUMN_MIGRATIONS = (
    ("work_weeks", "week_goal_minutes", "INT NOT NULL DEFAULT 2400"),
)


def _strip_create_db_and_use(sql: str) -> str:
    # Keep schema.sql compatible regardless of DB name.
    sql = re.sub(r"(?im)^\s*CREATE\s+DATABASE\b.*?;\s*$", "", sql)
    sql = re.sub(r"(?im)^\s*USE\b.*?;\s*$", "", sql)
    return sql


def iter_sql_statements(sql: str) -> Iterable[str]:
    # Minimal SQL splitter for schema files (handles ';' inside quotes).
    buf: list[str] = []
    in_single = False
    in_double = False
    escape = False

    for ch in sql:
        if escape:
            buf.append(ch)
            escape = False
            continue

        if ch == "\\":
            buf.append(ch)
            escape = True
            continue

        if ch == "'" and not in_double:
            in_single = not in_single
            buf.append(ch)
            continue

        if ch == '"' and not in_single:
            in_double = not in_double
            buf.append(ch)
            continue

        if ch == ";" and not in_single and not in_double:
            stmt = "".join(buf).strip()
            buf.clear()
            if stmt:
                yield stmt
            continue

        buf.append(ch)

    tail = "".join(buf).strip()
    if tail:
        yield tail


def ensure_database_exists(conn_factory: DatabaseConnection) -> None:
    name = conn_factory.config.database
    conn = conn_factory.connect(with_database=False)
    try:
        cur = conn.cursor()
        cur.execute(
            f"CREATE DATABASE IF NOT EXISTS `{name}` CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci;"
        )
        conn.commit()
    finally:
        conn.close()


def _column_exists(cur, database: str, table: str, column: str) -> bool:
    cur.execute(
        """
        SELECT COUNT(*) FROM information_schema.COLUMNS
        WHERE TABLE_SCHEMA=%s AND TABLE_NAME=%s AND COLUMN_NAME=%s
        """,
        (database, table, column),
    )
    row = cur.fetchone()
    return bool(row and row[0])


def apply_migrations(cur, database: str) -> None:
    for table, column, ddl in COLUMN_MIGRATIONS:
        if _column_exists(cur, database, table, column):
            continue
        try:
            cur.execute(f"ALTER TABLE `{table}` ADD COLUMN `{column}` {ddl}")
            logger.info("Added column %s.%s", table, column)
        except mysql.connector.Error as e:
            logger.warning("Could not add %s column: %s", column, e)


def apply_schema(conn_factory: DatabaseConnection, *, schema_path: Optional[Path] = None) -> None:
    ensure_database_exists(conn_factory)

    schema_path = Path(schema_path or SCHEMA_PATH)
    sql = _strip_create_db_and_use(schema_path.read_text(encoding="utf-8"))

    conn = conn_factory.connect()
    try:
        cur = conn.cursor()
        for stmt in iter_sql_statements(sql):
            cur.execute(stmt)
        apply_migrations(cur, conn_factory.config.database)
        conn.commit()
    finally:
        conn.close()


def list_tables(conn_factory: DatabaseConnection) -> list[str]:
    conn = conn_factory.connect()
    try:
        cur = conn.cursor()
        cur.execute("SHOW TABLES")
        return [row[0] for row in cur.fetchall()]
    finally:
        conn.close()
