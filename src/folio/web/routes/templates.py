"""Template endpoints: starter YAML for new pages and projects."""

from fastapi import APIRouter, Response

from folio.core.schema import DocumentKind
from folio.core.templates import render_template
from folio.web.responses import yaml_attachment

router = APIRouter(prefix="/api/templates", tags=["templates"])


@router.get("/{kind}")
async def get_template(kind: DocumentKind) -> Response:
    """Download the starter YAML for "profile" or "project"."""
    return yaml_attachment(render_template(kind), f"{kind.value}-template.yaml")
