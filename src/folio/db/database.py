"""SQLite database connection and schema management.

Provides connection management and schema initialization for folio.
"""

from __future__ import annotations

import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Generator

import structlog

logger = structlog.get_logger(__name__)

# Default database location
DEFAULT_DB_PATH = Path("db/folio.db")

# Current database path (module-level, set by init_db)
_db_path: Path | None = None


def init_db(db_path: Path | None = None) -> None:
    """Initialize database with schema.

    Creates the database file and all required tables if they don't exist.

    Args:
        db_path: Path to database file. Defaults to db/folio.db
    """
    global _db_path
    _db_path = Path(db_path) if db_path else DEFAULT_DB_PATH

    # Ensure directory exists
    _db_path.parent.mkdir(parents=True, exist_ok=True)

    with get_db() as conn:
        _create_schema(conn)

    logger.info("database.initialized", path=str(_db_path))


@contextmanager
def get_db() -> Generator[sqlite3.Connection, None, None]:
    """Get database connection as context manager.

    Everything executed inside one ``with get_db()`` block is a single
    transaction: committed on success, rolled back on any exception.

    Yields:
        SQLite connection with row factory set to sqlite3.Row

    Example:
        with get_db() as conn:
            rows = conn.execute("SELECT * FROM pages").fetchall()
    """
    db_path = _db_path or DEFAULT_DB_PATH

    # Ensure directory exists
    db_path.parent.mkdir(parents=True, exist_ok=True)

    conn = sqlite3.connect(db_path)
    conn.row_factory = sqlite3.Row
    conn.execute("PRAGMA foreign_keys = ON")

    try:
        yield conn
        conn.commit()
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


def _create_schema(conn: sqlite3.Connection) -> None:
    """Create database schema.

    Uses IF NOT EXISTS for idempotency.
    """
    conn.executescript(
        """
        -- One page per user; url is public and unique across users
        CREATE TABLE IF NOT EXISTS pages (
            user_id TEXT PRIMARY KEY,
            url TEXT NOT NULL UNIQUE,
            theme TEXT NOT NULL,
            data TEXT,
            created_at TEXT NOT NULL DEFAULT (datetime('now')),
            updated_at TEXT NOT NULL DEFAULT (datetime('now'))
        );

        -- Projects are keyed by (user_id, project_id); project_id is the slug
        CREATE TABLE IF NOT EXISTS projects (
            user_id TEXT NOT NULL REFERENCES pages(user_id) ON DELETE CASCADE,
            project_id TEXT NOT NULL,
            project_name TEXT NOT NULL,
            display_order INTEGER NOT NULL DEFAULT 0 CHECK(display_order >= 0),
            data TEXT,
            created_at TEXT NOT NULL DEFAULT (datetime('now')),
            updated_at TEXT NOT NULL DEFAULT (datetime('now')),
            PRIMARY KEY (user_id, project_id)
        );

        CREATE INDEX IF NOT EXISTS idx_projects_order ON projects(user_id, display_order);
        """
    )
