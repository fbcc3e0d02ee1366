"""Pydantic schemas for Web API.

Request bodies and responses for pages, projects and errors. Document
content itself travels as raw YAML text and is validated by the pipeline,
not by these schemas.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Annotated, Any

from pydantic import BaseModel, Field, StringConstraints

PageUrl = Annotated[
    str,
    StringConstraints(min_length=3, max_length=30, pattern=r"^[a-z0-9-]+$"),
]
ProjectName = Annotated[
    str,
    StringConstraints(strip_whitespace=True, min_length=1, max_length=100),
]


# =============================================================================
# PAGE SCHEMAS
# =============================================================================


class PageCreate(BaseModel):
    """Request body for creating a page."""

    url: PageUrl
    theme: str = Field(..., min_length=1)
    data: str | None = None


class PageThemeUpdate(BaseModel):
    theme: str = Field(..., min_length=1)


class PageUrlUpdate(BaseModel):
    url: PageUrl


class PageResponse(BaseModel):
    """Response for a page (content excluded)."""

    user_id: str
    url: str
    theme: str
    created_at: str
    updated_at: str

    model_config = {"from_attributes": True}


# =============================================================================
# PROJECT SCHEMAS
# =============================================================================


class ProjectCreate(BaseModel):
    """Request body for creating a project."""

    project_name: ProjectName
    display_order: int = Field(default=0, ge=0)


class ProjectRename(BaseModel):
    project_name: ProjectName


class ProjectResponse(BaseModel):
    """Response for a project (content excluded)."""

    user_id: str
    project_id: str
    project_name: str
    display_order: int
    created_at: str
    updated_at: str

    model_config = {"from_attributes": True}


class ProjectListResponse(BaseModel):
    projects: list[ProjectResponse]
    count: int


class ProjectOrderEntry(BaseModel):
    project_id: str = Field(..., min_length=1, max_length=100)
    display_order: int = Field(..., ge=0)


class ReorderRequest(BaseModel):
    """Request body for reordering projects."""

    project_orders: list[ProjectOrderEntry] = Field(..., min_length=1)


# =============================================================================
# CONTENT SCHEMAS
# =============================================================================


class DataUpdate(BaseModel):
    """Request body carrying raw YAML content."""

    data: str = Field(..., min_length=1)


class MessageResponse(BaseModel):
    message: str


# =============================================================================
# PUBLIC SCHEMAS
# =============================================================================


class PublicProjectSummary(BaseModel):
    project_id: str
    project_name: str


class PublicPageResponse(BaseModel):
    """A published page as seen by visitors."""

    url: str
    theme: str
    profile: dict[str, Any] | None = None
    projects: list[PublicProjectSummary]


class PublicProjectResponse(BaseModel):
    project_id: str
    project_name: str
    content: dict[str, Any] | None = None


# =============================================================================
# ERROR / HEALTH SCHEMAS
# =============================================================================


class ErrorDetail(BaseModel):
    field: str
    issue: str


class ErrorBody(BaseModel):
    code: str
    message: str
    details: list[ErrorDetail] | None = None


class ErrorResponse(BaseModel):
    error: ErrorBody


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = "ok"
    version: str = "0.1.0"
    timestamp: str = Field(default_factory=lambda: datetime.now(timezone.utc).isoformat())
