"""Repository functions for pages table.

Provides CRUD operations for the pages table. Page content (the validated
profile document) is stored as JSON in the data column.
"""

from __future__ import annotations

import json
import sqlite3
from dataclasses import dataclass
from typing import Any

import structlog

from folio.core.errors import PageAlreadyExistsError, UrlAlreadyTakenError
from folio.db.database import get_db

logger = structlog.get_logger(__name__)


@dataclass
class PageRecord:
    """Page record from database (without content)."""

    user_id: str
    url: str
    theme: str
    created_at: str
    updated_at: str


def insert_page(
    user_id: str,
    url: str,
    theme: str,
    data: dict[str, Any] | None = None,
) -> PageRecord:
    """Insert a new page.

    Args:
        user_id: Owner of the page
        url: Public URL slug of the page
        theme: Theme name
        data: Validated profile content as a JSON-compatible dict

    Returns:
        The stored PageRecord

    Raises:
        PageAlreadyExistsError: If the user already has a page
        UrlAlreadyTakenError: If another page uses the URL
    """
    try:
        with get_db() as conn:
            conn.execute(
                "INSERT INTO pages (user_id, url, theme, data) VALUES (?, ?, ?, ?)",
                (user_id, url, theme, _dump(data)),
            )
    except sqlite3.IntegrityError as e:
        if "pages.user_id" in str(e):
            raise PageAlreadyExistsError() from e
        if "pages.url" in str(e):
            raise UrlAlreadyTakenError() from e
        raise

    logger.debug("pages.inserted", user_id=user_id, url=url)
    return get_page(user_id)


def get_page(user_id: str) -> PageRecord | None:
    """Get a user's page.

    Returns:
        PageRecord if found, None otherwise
    """
    with get_db() as conn:
        row = conn.execute(
            "SELECT user_id, url, theme, created_at, updated_at FROM pages WHERE user_id = ?",
            (user_id,),
        ).fetchone()

    if row is None:
        return None

    return _row_to_record(row)


def get_page_by_url(url: str) -> PageRecord | None:
    """Get a page by its public URL."""
    with get_db() as conn:
        row = conn.execute(
            "SELECT user_id, url, theme, created_at, updated_at FROM pages WHERE url = ?",
            (url,),
        ).fetchone()

    if row is None:
        return None

    return _row_to_record(row)


def update_page_theme(user_id: str, theme: str) -> bool:
    """Update page theme.

    Returns:
        True if updated, False if the user has no page
    """
    with get_db() as conn:
        cursor = conn.execute(
            "UPDATE pages SET theme = ?, updated_at = datetime('now') WHERE user_id = ?",
            (theme, user_id),
        )

    updated = cursor.rowcount > 0
    if updated:
        logger.debug("pages.theme_updated", user_id=user_id, theme=theme)

    return updated


def update_page_url(user_id: str, url: str) -> bool:
    """Update page URL.

    Returns:
        True if updated, False if the user has no page

    Raises:
        UrlAlreadyTakenError: If another page uses the URL
    """
    try:
        with get_db() as conn:
            cursor = conn.execute(
                "UPDATE pages SET url = ?, updated_at = datetime('now') WHERE user_id = ?",
                (url, user_id),
            )
    except sqlite3.IntegrityError as e:
        raise UrlAlreadyTakenError() from e

    updated = cursor.rowcount > 0
    if updated:
        logger.debug("pages.url_updated", user_id=user_id, url=url)

    return updated


def update_page_data(user_id: str, data: dict[str, Any]) -> bool:
    """Replace page content.

    Returns:
        True if updated, False if the user has no page
    """
    with get_db() as conn:
        cursor = conn.execute(
            "UPDATE pages SET data = ?, updated_at = datetime('now') WHERE user_id = ?",
            (_dump(data), user_id),
        )

    updated = cursor.rowcount > 0
    if updated:
        logger.debug("pages.data_updated", user_id=user_id)

    return updated


def get_page_data(user_id: str) -> dict[str, Any] | None:
    """Get page content.

    Returns:
        Stored content, or None if there is no page or no content yet
    """
    with get_db() as conn:
        row = conn.execute(
            "SELECT data FROM pages WHERE user_id = ?", (user_id,)
        ).fetchone()

    if row is None or row["data"] is None:
        return None

    return json.loads(row["data"])


def delete_page(user_id: str) -> bool:
    """Delete a user's page and, by cascade, all of its projects.

    Returns:
        True if deleted, False if not found
    """
    with get_db() as conn:
        cursor = conn.execute("DELETE FROM pages WHERE user_id = ?", (user_id,))

    deleted = cursor.rowcount > 0
    if deleted:
        logger.debug("pages.deleted", user_id=user_id)

    return deleted


def _dump(data: dict[str, Any] | None) -> str | None:
    return json.dumps(data) if data is not None else None


def _row_to_record(row) -> PageRecord:
    """Convert database row to PageRecord."""
    return PageRecord(
        user_id=row["user_id"],
        url=row["url"],
        theme=row["theme"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )
