"""
Global exception handler - turns unexpected errors into a JSON 500 response.
HTTPException subclasses never reach here; FastAPI handles them itself.
"""

import logging

from fastapi import Request
from fastapi.responses import JSONResponse

from app.core.config import config

logger = logging.getLogger(__name__)


async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        f"Unhandled error on {request.method} {request.url.path}: {exc}",
        exc_info=exc,
    )

    detail = "Internal server error"
    if not config.is_production:
        detail = f"{detail}: {exc}"

    return JSONResponse(
        status_code=500,
        content={"success": False, "detail": detail},
    )
