"""Page service: profile page lifecycle.

Responsibilities:
- Check URLs against the reserved list and themes against the known list
- Create a page, optionally with initial YAML content
- Validate and store uploaded profile YAML
- Serve current content back as YAML for download
- Resolve published pages by public URL
"""

from __future__ import annotations

from dataclasses import dataclass

import structlog

from folio.config.app_config import load_app_config
from folio.core.errors import (
    InvalidThemeError,
    PageNotFoundError,
    ReservedUrlError,
)
from folio.core.pipeline import process_profile
from folio.core.schema import ProfileDocument
from folio.core.yaml_codec import encode
from folio.db import pages_repository, projects_repository
from folio.db.pages_repository import PageRecord
from folio.db.projects_repository import ProjectRecord

logger = structlog.get_logger(__name__)


def check_reserved_url(url: str, reserved: tuple[str, ...]) -> None:
    """Reject URLs that collide with application routes.

    Matching is exact and case-insensitive; reserved words as substrings
    ("api-docs") are allowed.

    Raises:
        ReservedUrlError: If the URL is reserved
    """
    if url.lower() in reserved:
        raise ReservedUrlError()


def check_theme(theme: str, themes: tuple[str, ...]) -> None:
    """Raises InvalidThemeError if theme is not one of themes."""
    if theme not in themes:
        raise InvalidThemeError(theme, themes)


def create_page(user_id: str, url: str, theme: str, data: str | None = None) -> PageRecord:
    """Create the user's page.

    Args:
        user_id: Owner
        url: Public URL slug
        theme: Theme name
        data: Optional initial profile YAML

    Returns:
        The stored PageRecord

    Raises:
        ReservedUrlError, InvalidThemeError: On rejected settings
        YamlSyntaxError, InvalidDocumentError: On bad initial content
        PageAlreadyExistsError, UrlAlreadyTakenError: On storage conflicts
    """
    config = load_app_config().pages
    check_reserved_url(url, config.reserved_urls)
    check_theme(theme, config.themes)

    content = None
    if data:
        content = process_profile(data).model_dump(mode="json", exclude_none=True)

    record = pages_repository.insert_page(user_id, url, theme, content)
    logger.info("pages.created", user_id=user_id, url=url, with_content=content is not None)
    return record


def get_page(user_id: str) -> PageRecord:
    """Get the user's page or raise PageNotFoundError."""
    record = pages_repository.get_page(user_id)
    if record is None:
        raise PageNotFoundError()
    return record


def update_theme(user_id: str, theme: str) -> PageRecord:
    check_theme(theme, load_app_config().pages.themes)
    if not pages_repository.update_page_theme(user_id, theme):
        raise PageNotFoundError()
    return get_page(user_id)


def update_url(user_id: str, url: str) -> PageRecord:
    check_reserved_url(url, load_app_config().pages.reserved_urls)
    if not pages_repository.update_page_url(user_id, url):
        raise PageNotFoundError()
    logger.info("pages.url_changed", user_id=user_id, url=url)
    return get_page(user_id)


def update_page_content(user_id: str, raw_text: str) -> ProfileDocument:
    """Validate uploaded profile YAML and store it.

    Nothing is written unless the whole document is valid.

    Returns:
        The validated document
    """
    document = process_profile(raw_text)
    if not pages_repository.update_page_data(
        user_id, document.model_dump(mode="json", exclude_none=True)
    ):
        raise PageNotFoundError()

    logger.info("pages.content_updated", user_id=user_id)
    return document


def get_page_content(user_id: str) -> ProfileDocument:
    """Load stored profile content.

    Raises:
        PageNotFoundError: If there is no page or it has no content yet
    """
    data = pages_repository.get_page_data(user_id)
    if data is None:
        raise PageNotFoundError()
    return ProfileDocument.model_validate(data)


def download_page_content(user_id: str) -> str:
    """Return stored profile content as YAML text."""
    return encode(get_page_content(user_id))


def delete_page(user_id: str) -> None:
    """Delete the user's page together with all projects."""
    if not pages_repository.delete_page(user_id):
        raise PageNotFoundError()
    logger.info("pages.deleted", user_id=user_id)


@dataclass
class PublicPage:
    """Everything a visitor sees on a published page."""

    page: PageRecord
    profile: ProfileDocument | None
    projects: list[ProjectRecord]


def get_public_page(url: str) -> PublicPage:
    """Look up a published page by its public URL.

    Raises:
        PageNotFoundError: If no page uses the URL
    """
    record = pages_repository.get_page_by_url(url)
    if record is None:
        raise PageNotFoundError("Page not found")

    data = pages_repository.get_page_data(record.user_id)
    return PublicPage(
        page=record,
        profile=ProfileDocument.model_validate(data) if data is not None else None,
        projects=projects_repository.list_projects(record.user_id),
    )
