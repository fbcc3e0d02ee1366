"""Project endpoints.

/reorder is declared before /{project_id} so it is not captured as an id.
"""

import structlog
from fastapi import APIRouter, Depends, Response, status

from folio.core import projects
from folio.core.reorder import ReorderEntry
from folio.web.deps import get_user_id
from folio.web.responses import yaml_attachment
from folio.web.schemas import (
    DataUpdate,
    MessageResponse,
    ProjectCreate,
    ProjectListResponse,
    ProjectRename,
    ProjectResponse,
    ReorderRequest,
)

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/api/projects", tags=["projects"])


@router.post("", response_model=ProjectResponse, status_code=status.HTTP_201_CREATED)
async def create_project(body: ProjectCreate, user_id: str = Depends(get_user_id)) -> ProjectResponse:
    """Create a project; its id is a slug derived from the name."""
    record = await projects.create_project(user_id, body.project_name, body.display_order)
    return ProjectResponse.model_validate(record)


@router.get("", response_model=ProjectListResponse)
async def list_projects(user_id: str = Depends(get_user_id)) -> ProjectListResponse:
    """List the caller's projects in display order."""
    items = [ProjectResponse.model_validate(r) for r in projects.list_projects(user_id)]
    return ProjectListResponse(projects=items, count=len(items))


@router.put("/reorder", response_model=MessageResponse)
async def reorder_projects(body: ReorderRequest, user_id: str = Depends(get_user_id)) -> MessageResponse:
    """Apply new display positions to several projects at once.

    Either every position is applied or none is.
    """
    entries = [ReorderEntry(id=e.project_id, position=e.display_order) for e in body.project_orders]
    await projects.reorder_projects(user_id, entries)
    return MessageResponse(message="Projects reordered successfully")


@router.get("/{project_id}", response_model=ProjectResponse)
async def get_project(project_id: str, user_id: str = Depends(get_user_id)) -> ProjectResponse:
    return ProjectResponse.model_validate(projects.get_project(user_id, project_id))


@router.put("/{project_id}", response_model=ProjectResponse)
async def rename_project(
    project_id: str,
    body: ProjectRename,
    user_id: str = Depends(get_user_id),
) -> ProjectResponse:
    """Rename a project. The project id stays the same."""
    record = projects.rename_project(user_id, project_id, body.project_name)
    return ProjectResponse.model_validate(record)


@router.delete("/{project_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_project(project_id: str, user_id: str = Depends(get_user_id)) -> Response:
    projects.delete_project(user_id, project_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/{project_id}/data", response_model=MessageResponse)
async def upload_data(
    project_id: str,
    body: DataUpdate,
    user_id: str = Depends(get_user_id),
) -> MessageResponse:
    """Replace project content with uploaded YAML."""
    projects.update_project_content(user_id, project_id, body.data)
    return MessageResponse(message="Project data updated successfully")


@router.get("/{project_id}/data")
async def download_data(project_id: str, user_id: str = Depends(get_user_id)) -> Response:
    """Download project content as YAML."""
    text = projects.download_project_content(user_id, project_id)
    logger.info("projects.downloaded", user_id=user_id, project_id=project_id)
    return yaml_attachment(text, f"{project_id}.yaml")
