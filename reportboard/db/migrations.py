from __future__ import annotations

from datetime import datetime
from typing import Any, Optional

from sqlalchemy.engine import Connection, Engine

from reportboard.core.logging import get_logger
from reportboard.db.database import engine

MIGRATION_KEY_LIKES = "0001_report_likes"
MIGRATION_KEY_LIKES_EMPLOYEE_INDEX = "0002_likes_employee_index"

log = get_logger(__name__)


# ----------------- helpers -----------------

def _exec(conn: Connection, sql: str, params: Optional[dict[str, Any]] = None):
    conn.exec_driver_sql(sql, params or {})

def _table_exists(conn: Connection, name: str) -> bool:
    row = conn.exec_driver_sql(
        "SELECT 1 FROM sqlite_master WHERE type='table' AND name=?", (name,)
    ).fetchone()
    return row is not None

def _ensure_schema_migrations_table(conn: Connection):
    _exec(
        conn,
        """
        CREATE TABLE IF NOT EXISTS schema_migrations (
            key TEXT PRIMARY KEY,
            applied_at TEXT NOT NULL
        )
        """,
    )

def _is_applied(conn: Connection, key: str) -> bool:
    row = conn.exec_driver_sql(
        "SELECT 1 FROM schema_migrations WHERE key=?", (key,)
    ).fetchone()
    return row is not None

def _mark_applied(conn: Connection, key: str):
    conn.exec_driver_sql(
        "INSERT OR IGNORE INTO schema_migrations (key, applied_at) VALUES (?, ?)",
        (key, datetime.now().isoformat()),
    )


# ----------------- migrations -----------------

def _apply_likes(conn: Connection):
    """
    Databases created before likes existed: add the likes table and the
    (report_id, employee_id) lookup index. The pair is not unique.
    """
    if not _table_exists(conn, "likes"):
        _exec(
            conn,
            """
            CREATE TABLE likes (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                report_id INTEGER NOT NULL,
                employee_id INTEGER NOT NULL,
                FOREIGN KEY(report_id) REFERENCES reports(id) ON DELETE CASCADE,
                FOREIGN KEY(employee_id) REFERENCES employees(id) ON DELETE CASCADE
            )
            """,
        )
    _exec(conn, "CREATE INDEX IF NOT EXISTS ix_likes_report_employee ON likes (report_id, employee_id)")

def _apply_likes_employee_index(conn: Connection):
    # favorites lists filter on employee_id alone
    _exec(conn, "CREATE INDEX IF NOT EXISTS ix_likes_employee_id ON likes (employee_id)")


_MIGRATIONS = (
    (MIGRATION_KEY_LIKES, _apply_likes),
    (MIGRATION_KEY_LIKES_EMPLOYEE_INDEX, _apply_likes_employee_index),
)


# ----------------- public -----------------

def safe_run_migrations(bind: Engine = engine) -> list[str]:
    """
    Called at startup. Each step is idempotent; returns the keys applied in this run.
    """
    if bind.dialect.name != "sqlite":
        log.warning("migrations skipped for dialect {}", bind.dialect.name)
        return []

    applied: list[str] = []
    with bind.begin() as conn:
        _ensure_schema_migrations_table(conn)
        for key, step in _MIGRATIONS:
            if _is_applied(conn, key):
                continue
            step(conn)
            _mark_applied(conn, key)
            applied.append(key)
            log.info("migration applied: {}", key)
    return applied
