"""Public read-only endpoints for published pages."""

from fastapi import APIRouter

from folio.core import pages, projects
from folio.web.schemas import PublicPageResponse, PublicProjectResponse, PublicProjectSummary

router = APIRouter(prefix="/api/public", tags=["public"])


@router.get("/{url}", response_model=PublicPageResponse)
async def view_page(url: str) -> PublicPageResponse:
    """Published page with profile content and project list."""
    public = pages.get_public_page(url)
    return PublicPageResponse(
        url=public.page.url,
        theme=public.page.theme,
        profile=public.profile.model_dump(mode="json", exclude_none=True) if public.profile else None,
        projects=[
            PublicProjectSummary(project_id=p.project_id, project_name=p.project_name)
            for p in public.projects
        ],
    )


@router.get("/{url}/{project_id}", response_model=PublicProjectResponse)
async def view_project(url: str, project_id: str) -> PublicProjectResponse:
    record, content = projects.get_public_project(url, project_id)
    return PublicProjectResponse(
        project_id=record.project_id,
        project_name=record.project_name,
        content=content.model_dump(mode="json", exclude_none=True) if content else None,
    )
