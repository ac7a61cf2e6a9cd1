from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ast_inspector import __version__
from ast_inspector.api.errors import register_error_handlers
from ast_inspector.api.lifespan import lifespan
from ast_inspector.api.middleware import RequestLoggingMiddleware
from ast_inspector.api.routes.health import router as health_router
from ast_inspector.api.routes.root import router as root_router
from ast_inspector.api.routes.tree import router as tree_router
from ast_inspector.config import Settings, get_settings
from ast_inspector.core.parsing import ParserRegistry


def create_app(settings: Settings | None = None, registry: ParserRegistry | None = None) -> FastAPI:
    settings = settings or get_settings()

    app = FastAPI(
        title="AST Inspector API",
        description="Parse code, run tree-sitter queries, and inspect node relationships.",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.registry = registry or ParserRegistry(settings.language)

    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Origin", "X-Requested-With", "Content-Type", "Accept"],
    )
    register_error_handlers(app)

    app.include_router(root_router, include_in_schema=False)
    app.include_router(health_router, include_in_schema=False)
    app.include_router(tree_router)

    return app
