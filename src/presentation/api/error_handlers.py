"""Application-level exception handlers. Every error body is {"error": message}."""

from fastapi import Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from infrastructure.config import get_logger
from presentation.api.v1.adapter import InvalidJSONBody

logger = get_logger(__name__)


async def invalid_json_handler(request: Request, exc: InvalidJSONBody):
    logger.warning(f"⚠️ Invalid JSON body on {request.method}", extra={"path": request.url.path})
    return JSONResponse(status_code=400, content={"error": "Invalid JSON body"})


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.error(
        f"❌ Unhandled exception on {request.method}: {exc}",
        extra={"path": request.url.path},
        exc_info=True,
    )
    return JSONResponse(status_code=500, content={"error": "Internal server error"})
