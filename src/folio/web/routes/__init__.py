"""Route handlers for Web API."""

from folio.web.routes.health import router as health_router
from folio.web.routes.pages import router as pages_router
from folio.web.routes.projects import router as projects_router
from folio.web.routes.public import router as public_router
from folio.web.routes.templates import router as templates_router

__all__ = [
    "health_router",
    "pages_router",
    "projects_router",
    "public_router",
    "templates_router",
]
