"""Page endpoints.

Each user owns at most one page. Content is uploaded and downloaded as
YAML text; everything else is JSON.
"""

import structlog
from fastapi import APIRouter, Depends, Response, status

from folio.core import pages
from folio.web.deps import get_user_id
from folio.web.responses import yaml_attachment
from folio.web.schemas import (
    DataUpdate,
    MessageResponse,
    PageCreate,
    PageResponse,
    PageThemeUpdate,
    PageUrlUpdate,
)

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/api/pages", tags=["pages"])


@router.post("", response_model=PageResponse, status_code=status.HTTP_201_CREATED)
async def create_page(body: PageCreate, user_id: str = Depends(get_user_id)) -> PageResponse:
    """Create the caller's page, optionally with initial profile YAML."""
    record = pages.create_page(user_id, body.url, body.theme, body.data)
    return PageResponse.model_validate(record)


@router.get("", response_model=PageResponse)
async def get_page(user_id: str = Depends(get_user_id)) -> PageResponse:
    return PageResponse.model_validate(pages.get_page(user_id))


@router.put("", response_model=PageResponse)
async def update_theme(body: PageThemeUpdate, user_id: str = Depends(get_user_id)) -> PageResponse:
    """Change the page theme."""
    return PageResponse.model_validate(pages.update_theme(user_id, body.theme))


@router.delete("", status_code=status.HTTP_204_NO_CONTENT)
async def delete_page(user_id: str = Depends(get_user_id)) -> Response:
    """Delete the page and all of its projects."""
    pages.delete_page(user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/url", response_model=PageResponse)
async def update_url(body: PageUrlUpdate, user_id: str = Depends(get_user_id)) -> PageResponse:
    """Move the page to a new public URL."""
    return PageResponse.model_validate(pages.update_url(user_id, body.url))


@router.post("/data", response_model=MessageResponse)
async def upload_data(body: DataUpdate, user_id: str = Depends(get_user_id)) -> MessageResponse:
    """Replace page content with uploaded profile YAML.

    The whole document is validated first; on any issue nothing is stored
    and every issue is returned in the error details.
    """
    pages.update_page_content(user_id, body.data)
    return MessageResponse(message="Page data updated successfully")


@router.get("/data")
async def download_data(user_id: str = Depends(get_user_id)) -> Response:
    """Download page content as YAML."""
    text = pages.download_page_content(user_id)
    logger.info("pages.downloaded", user_id=user_id)
    return yaml_attachment(text, "page.yaml")
