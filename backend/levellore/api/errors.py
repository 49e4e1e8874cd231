from pathlib import Path
from typing import Optional

from fastapi import Request
from fastapi.responses import FileResponse, JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
import logging

from ..core.exceptions import LevelLoreError

logger = logging.getLogger(__name__)


def _error_response(request: Request, status_code: int, message: str, headers=None, **extra):
    content = {
        "success": False,
        "message": message,
        "status_code": status_code,
        "path": str(request.url.path)
    }
    content.update(extra)
    return JSONResponse(status_code=status_code, content=content, headers=headers)


def _client_shell(request: Request) -> Optional[Path]:
    """index.html of the configured client, for non-API GETs that matched nothing"""
    static_dir = request.app.state.services.settings.STATIC_DIR
    api_prefix = request.app.state.services.settings.API_PREFIX
    if not static_dir or request.method != "GET" or request.url.path.startswith(api_prefix):
        return None
    index = Path(static_dir) / "index.html"
    return index if index.is_file() else None


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Handle HTTP exceptions with structured error response"""
    if exc.status_code == 404:
        index = _client_shell(request)
        if index is not None:
            return FileResponse(index)

    logger.warning(f"HTTP {exc.status_code}: {exc.detail} - {request.url.path}")
    return _error_response(
        request, exc.status_code, str(exc.detail), headers=getattr(exc, "headers", None)
    )


async def levellore_exception_handler(request: Request, exc: LevelLoreError):
    """Handle service errors raised by the domain layer"""
    if exc.status_code >= 500:
        logger.error(f"{type(exc).__name__}: {exc.message} - {request.url.path}")
    else:
        logger.warning(f"HTTP {exc.status_code}: {exc.message} - {request.url.path}")

    headers = {"WWW-Authenticate": "Bearer"} if exc.status_code == 401 else None
    return _error_response(request, exc.status_code, exc.message, headers=headers)


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Malformed or missing request bodies are client errors (400)"""
    errors = [
        {
            "loc": [str(part) for part in error.get("loc", ())],
            "msg": error.get("msg", ""),
            "type": error.get("type", "")
        }
        for error in exc.errors()
    ]
    logger.warning(f"Validation error: {errors} - {request.url.path}")

    if errors:
        first = errors[0]
        field = ".".join(part for part in first["loc"] if part != "body") or "body"
        message = f"Invalid request: {field}: {first['msg']}"
    else:
        message = "Invalid request"

    return _error_response(request, 400, message, errors=errors)


async def general_exception_handler(request: Request, exc: Exception):
    """Handle unexpected exceptions"""
    logger.error(f"Unexpected error: {str(exc)} - {request.url.path}", exc_info=True)

    return _error_response(request, 500, "Internal server error")
