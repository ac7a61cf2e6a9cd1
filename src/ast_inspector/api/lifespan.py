from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    registry = app.state.registry
    # Load the default grammar up front so the first request does not pay for it.
    registry.get()
    logger.info("AST inspector ready (default language: %s)", registry.default_language)
    yield
    logger.info("AST inspector shutting down")
