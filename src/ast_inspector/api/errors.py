"""Mapping of core errors to HTTP responses."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from ast_inspector.api.schemas import ErrorResponse
from ast_inspector.core.errors import InspectorError

logger = logging.getLogger(__name__)


async def inspector_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Reject the request with 400; nothing was persisted, so nothing to undo."""
    kind = type(exc).__name__
    logger.warning("%s %s rejected (%s): %s", request.method, request.url.path, kind, exc)
    body = ErrorResponse(error=str(exc), kind=kind)
    return JSONResponse(status_code=400, content=body.model_dump())


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(InspectorError, inspector_error_handler)
