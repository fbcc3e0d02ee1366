"""Exception handlers mapping folio errors to HTTP responses.

Every error body has the shape:

    {"error": {"code": "...", "message": "...", "details": [{field, issue}]}}

The status code comes from the error class, never from its message.
"""

import structlog
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from folio.core.errors import FolioError
from folio.web.schemas import ErrorBody, ErrorDetail, ErrorResponse

logger = structlog.get_logger(__name__)


def _error_response(status_code: int, body: ErrorBody) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(error=body).model_dump(exclude_none=True),
    )


async def handle_folio_error(request: Request, exc: FolioError) -> JSONResponse:
    if exc.http_status >= 500:
        logger.error("api.error", path=request.url.path, code=exc.code, error=exc.message)
    else:
        logger.info("api.rejected", path=request.url.path, code=exc.code)

    details = exc.details()
    return _error_response(
        exc.http_status,
        ErrorBody(
            code=exc.code,
            message=exc.message,
            details=[ErrorDetail(**d) for d in details] if details is not None else None,
        ),
    )


async def handle_request_validation(request: Request, exc: RequestValidationError) -> JSONResponse:
    details = [
        ErrorDetail(
            # Drop the leading "body" / "path" / "header" segment
            field=".".join(str(part) for part in err["loc"][1:]),
            issue=err["msg"],
        )
        for err in exc.errors()
    ]
    return _error_response(
        400,
        ErrorBody(code="VALIDATION_ERROR", message="Request validation failed", details=details),
    )


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(FolioError, handle_folio_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation)
