from __future__ import annotations

from fastapi import Request

from ast_inspector.config import Settings
from ast_inspector.core.parsing import ParserRegistry


def get_registry(request: Request) -> ParserRegistry:
    """Return the ``ParserRegistry`` built once for this application."""
    registry: ParserRegistry = request.app.state.registry
    return registry


def get_app_settings(request: Request) -> Settings:
    """Return the ``Settings`` this application was created with."""
    settings: Settings = request.app.state.settings
    return settings
