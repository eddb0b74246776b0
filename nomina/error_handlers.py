"""
Global exception handlers: the only place errors become HTTP responses.

- NominaError → its ``http_status`` with ``{"error": message}``; database
  and internal errors expose only a generic message.
- RequestValidationError (malformed body or path) → 422 with field details.
- Anything else → 500, never leaking internals.
"""
import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from nomina.errors import NominaError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""

    @app.exception_handler(NominaError)
    async def nomina_error_handler(request: Request, exc: NominaError):
        if exc.http_status >= 500:
            logger.error(
                "%s on %s: %s",
                exc.code,
                request.url.path,
                exc.message,
                extra={"error_code": exc.code, "path": request.url.path},
            )
        else:
            logger.warning(
                "%s on %s: %s",
                exc.code,
                request.url.path,
                exc.message,
                extra={"error_code": exc.code, "path": request.url.path},
            )
        return JSONResponse(status_code=exc.http_status, content=exc.to_response())

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        logger.warning("Invalid request on %s: %s", request.url.path, exc.errors())
        return JSONResponse(
            status_code=422,
            content={
                "error": "invalid request data",
                "details": [
                    {
                        "field": ".".join(str(loc) for loc in e["loc"]),
                        "message": e["msg"],
                        "type": e["type"],
                    }
                    for e in exc.errors()
                ],
            },
        )

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.error("Unhandled exception on %s", request.url.path, exc_info=exc)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "internal server error"},
        )
