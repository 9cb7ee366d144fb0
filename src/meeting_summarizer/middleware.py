"""
HTTP middleware: CORS, request body size ceiling, and request validation
errors mapped to the API's 400 bodies.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exception_handlers import request_validation_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger(__name__)

# Path -> error body for a missing, malformed or wrongly typed request body
VALIDATION_ERROR_MESSAGES = {
    "/api/summarize": "Transcript is required",
    "/api/share": "Recipients and summary are required",
}


class BodySizeLimitMiddleware(BaseHTTPMiddleware):
    """Reject requests whose declared Content-Length exceeds the ceiling."""

    def __init__(self, app, max_body_bytes: int):
        super().__init__(app)
        self.max_body_bytes = max_body_bytes

    async def dispatch(self, request, call_next):
        content_length = request.headers.get("content-length")
        if content_length is not None:
            try:
                size = int(content_length)
            except ValueError:
                return JSONResponse(status_code=400, content={"error": "Invalid Content-Length"})
            if size > self.max_body_bytes:
                logger.warning(f"Rejected request body of {size} bytes (limit {self.max_body_bytes})")
                return JSONResponse(status_code=413, content={"error": "Request body too large"})
        return await call_next(request)


async def validation_error_handler(request: Request, exc: RequestValidationError):
    """Answer body validation failures on the API routes with a 400."""
    message = VALIDATION_ERROR_MESSAGES.get(request.url.path)
    if message is None:
        return await request_validation_exception_handler(request, exc)

    logger.warning(f"Rejected malformed request to {request.url.path}: {len(exc.errors())} error(s)")
    return JSONResponse(status_code=400, content={"error": message})


def setup_middleware(app: FastAPI, max_body_bytes: int) -> None:
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_middleware(BodySizeLimitMiddleware, max_body_bytes=max_body_bytes)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )
