"""Project service: project subpage lifecycle.

Responsibilities:
- Create projects under a unique, immutable slug
- Rename, delete and list projects
- Validate and store uploaded project YAML, serve it back for download
- Reorder an owner's projects in one transaction
"""

from __future__ import annotations

from functools import partial
from typing import Iterable

import structlog

from folio.config.app_config import load_app_config
from folio.core.errors import PageNotFoundError, ProjectNotFoundError
from folio.core.pipeline import process_project
from folio.core.reorder import ReorderEntry, apply_reorder
from folio.core.schema import ProjectDocument
from folio.core.slug import mint_slug
from folio.core.yaml_codec import encode
from folio.db import pages_repository, projects_repository
from folio.db.database import get_db
from folio.db.projects_repository import ProjectRecord

logger = structlog.get_logger(__name__)


async def create_project(user_id: str, project_name: str, display_order: int = 0) -> ProjectRecord:
    """Create a project and mint its slug from the display name.

    Args:
        user_id: Owner
        project_name: Display name
        display_order: Initial position

    Returns:
        The stored ProjectRecord

    Raises:
        PageNotFoundError: If the owner has no page yet
        SlugExhaustedError: If no free slug could be stored
    """
    if pages_repository.get_page(user_id) is None:
        raise PageNotFoundError()

    config = load_app_config().slugs
    slug = await mint_slug(
        project_name,
        exists_fn=partial(projects_repository.project_exists, user_id),
        insert_fn=lambda candidate: projects_repository.insert_project(
            user_id, candidate, project_name, display_order
        ),
        max_attempts=config.max_attempts,
        max_conflicts=config.max_conflict_retries,
        fallback=config.empty_fallback,
    )

    logger.info("projects.created", user_id=user_id, project_id=slug)
    return get_project(user_id, slug)


def list_projects(user_id: str) -> list[ProjectRecord]:
    return projects_repository.list_projects(user_id)


def get_project(user_id: str, project_id: str) -> ProjectRecord:
    """Get one of the owner's projects or raise ProjectNotFoundError."""
    record = projects_repository.get_project(user_id, project_id)
    if record is None:
        raise ProjectNotFoundError()
    return record


def rename_project(user_id: str, project_id: str, project_name: str) -> ProjectRecord:
    """Change the display name; the slug stays as minted."""
    if not projects_repository.rename_project(user_id, project_id, project_name):
        raise ProjectNotFoundError()
    return get_project(user_id, project_id)


def delete_project(user_id: str, project_id: str) -> None:
    if not projects_repository.delete_project(user_id, project_id):
        raise ProjectNotFoundError()
    logger.info("projects.deleted", user_id=user_id, project_id=project_id)


def update_project_content(user_id: str, project_id: str, raw_text: str) -> ProjectDocument:
    """Validate uploaded project YAML and store it.

    Returns:
        The validated document
    """
    document = process_project(raw_text)
    if not projects_repository.update_project_data(
        user_id, project_id, document.model_dump(mode="json", exclude_none=True)
    ):
        raise ProjectNotFoundError()

    logger.info("projects.content_updated", user_id=user_id, project_id=project_id)
    return document


def get_project_content(user_id: str, project_id: str) -> ProjectDocument:
    """Load stored project content.

    Raises:
        ProjectNotFoundError: If there is no such project or no content yet
    """
    data = projects_repository.get_project_data(user_id, project_id)
    if data is None:
        raise ProjectNotFoundError()
    return ProjectDocument.model_validate(data)


def download_project_content(user_id: str, project_id: str) -> str:
    """Return stored project content as YAML text."""
    return encode(get_project_content(user_id, project_id))


async def reorder_projects(user_id: str, entries: Iterable[ReorderEntry]) -> None:
    """Apply a batch of new positions atomically.

    Raises:
        InvalidReorderError: Malformed batch
        NotFoundError: Any id not owned by user_id; nothing is written
    """
    entries = list(entries)
    with get_db() as conn:
        # Take the write lock before the ownership check
        conn.execute("BEGIN IMMEDIATE")
        await apply_reorder(
            user_id,
            entries,
            ownership_check_fn=partial(projects_repository.owned_project_ids, conn),
            apply_fn=partial(projects_repository.set_display_order, conn),
        )

    logger.info("projects.reordered", user_id=user_id, count=len(entries))


def get_public_project(url: str, project_id: str) -> tuple[ProjectRecord, ProjectDocument | None]:
    """Look up a project on a published page.

    Returns:
        (record, content) where content is None until YAML was uploaded

    Raises:
        PageNotFoundError: If no page uses the URL
        ProjectNotFoundError: If the page has no such project
    """
    page = pages_repository.get_page_by_url(url)
    if page is None:
        raise PageNotFoundError("Page not found")

    record = get_project(page.user_id, project_id)
    data = projects_repository.get_project_data(page.user_id, project_id)
    return record, ProjectDocument.model_validate(data) if data is not None else None
