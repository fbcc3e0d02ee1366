"""Repository functions for projects table.

Projects are keyed by (user_id, project_id), where project_id is the slug
minted at creation. The slug never changes, even when the project is
renamed.

owned_project_ids() and set_display_order() take an open connection so a
whole reorder batch can run inside one transaction.
"""

from __future__ import annotations

import json
import sqlite3
from dataclasses import dataclass
from typing import Any

import structlog

from folio.core.errors import PageNotFoundError, ProjectNotFoundError, SlugConflictError
from folio.db.database import get_db

logger = structlog.get_logger(__name__)

_COLUMNS = "user_id, project_id, project_name, display_order, created_at, updated_at"


@dataclass
class ProjectRecord:
    """Project record from database (without content)."""

    user_id: str
    project_id: str
    project_name: str
    display_order: int
    created_at: str
    updated_at: str


def insert_project(
    user_id: str,
    project_id: str,
    project_name: str,
    display_order: int = 0,
) -> None:
    """Insert a new project.

    Args:
        user_id: Owner of the project
        project_id: Slug, unique per owner
        project_name: Display name
        display_order: Position in the owner's list

    Raises:
        SlugConflictError: If the owner already has a project with this slug
        PageNotFoundError: If the owner has no page
    """
    try:
        with get_db() as conn:
            conn.execute(
                """
                INSERT INTO projects (user_id, project_id, project_name, display_order)
                VALUES (?, ?, ?, ?)
                """,
                (user_id, project_id, project_name, display_order),
            )
    except sqlite3.IntegrityError as e:
        if "UNIQUE" in str(e):
            raise SlugConflictError(project_id) from e
        if "FOREIGN KEY" in str(e):
            raise PageNotFoundError() from e
        raise

    logger.debug("projects.inserted", user_id=user_id, project_id=project_id)


def project_exists(user_id: str, project_id: str) -> bool:
    """Check whether the owner already has a project with this slug."""
    with get_db() as conn:
        row = conn.execute(
            "SELECT 1 FROM projects WHERE user_id = ? AND project_id = ?",
            (user_id, project_id),
        ).fetchone()

    return row is not None


def get_project(user_id: str, project_id: str) -> ProjectRecord | None:
    """Get one of the owner's projects.

    Returns:
        ProjectRecord if found, None otherwise
    """
    with get_db() as conn:
        row = conn.execute(
            f"SELECT {_COLUMNS} FROM projects WHERE user_id = ? AND project_id = ?",
            (user_id, project_id),
        ).fetchone()

    if row is None:
        return None

    return _row_to_record(row)


def list_projects(user_id: str) -> list[ProjectRecord]:
    """Get all of the owner's projects ordered by display_order."""
    with get_db() as conn:
        rows = conn.execute(
            f"SELECT {_COLUMNS} FROM projects WHERE user_id = ? "
            "ORDER BY display_order ASC, created_at ASC",
            (user_id,),
        ).fetchall()

    return [_row_to_record(row) for row in rows]


def rename_project(user_id: str, project_id: str, project_name: str) -> bool:
    """Change a project's display name (the slug is kept).

    Returns:
        True if updated, False if not found
    """
    with get_db() as conn:
        cursor = conn.execute(
            """
            UPDATE projects SET project_name = ?, updated_at = datetime('now')
            WHERE user_id = ? AND project_id = ?
            """,
            (project_name, user_id, project_id),
        )

    return cursor.rowcount > 0


def update_project_data(user_id: str, project_id: str, data: dict[str, Any]) -> bool:
    """Replace project content.

    Returns:
        True if updated, False if not found
    """
    with get_db() as conn:
        cursor = conn.execute(
            """
            UPDATE projects SET data = ?, updated_at = datetime('now')
            WHERE user_id = ? AND project_id = ?
            """,
            (json.dumps(data), user_id, project_id),
        )

    updated = cursor.rowcount > 0
    if updated:
        logger.debug("projects.data_updated", user_id=user_id, project_id=project_id)

    return updated


def get_project_data(user_id: str, project_id: str) -> dict[str, Any] | None:
    """Get project content.

    Returns:
        Stored content, or None if there is no such project or no content yet
    """
    with get_db() as conn:
        row = conn.execute(
            "SELECT data FROM projects WHERE user_id = ? AND project_id = ?",
            (user_id, project_id),
        ).fetchone()

    if row is None or row["data"] is None:
        return None

    return json.loads(row["data"])


def delete_project(user_id: str, project_id: str) -> bool:
    """Delete a project.

    Returns:
        True if deleted, False if not found
    """
    with get_db() as conn:
        cursor = conn.execute(
            "DELETE FROM projects WHERE user_id = ? AND project_id = ?",
            (user_id, project_id),
        )

    deleted = cursor.rowcount > 0
    if deleted:
        logger.debug("projects.deleted", user_id=user_id, project_id=project_id)

    return deleted


def owned_project_ids(conn: sqlite3.Connection, user_id: str, project_ids: list[str]) -> set[str]:
    """Return the subset of project_ids that belong to user_id."""
    if not project_ids:
        return set()

    placeholders = ", ".join("?" for _ in project_ids)
    rows = conn.execute(
        f"SELECT project_id FROM projects WHERE user_id = ? AND project_id IN ({placeholders})",
        (user_id, *project_ids),
    ).fetchall()

    return {row["project_id"] for row in rows}


def set_display_order(
    conn: sqlite3.Connection, user_id: str, project_id: str, display_order: int
) -> None:
    """Write one project's position on an open connection.

    Raises:
        ProjectNotFoundError: If the project vanished since it was checked
    """
    cursor = conn.execute(
        """
        UPDATE projects SET display_order = ?, updated_at = datetime('now')
        WHERE user_id = ? AND project_id = ?
        """,
        (display_order, user_id, project_id),
    )
    if cursor.rowcount == 0:
        raise ProjectNotFoundError()


def _row_to_record(row) -> ProjectRecord:
    """Convert database row to ProjectRecord."""
    return ProjectRecord(
        user_id=row["user_id"],
        project_id=row["project_id"],
        project_name=row["project_name"],
        display_order=row["display_order"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )
