from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends

from ast_inspector import __version__
from ast_inspector.api.dependencies import get_registry
from ast_inspector.api.schemas import LanguagesResponse
from ast_inspector.core.languages import supported_languages
from ast_inspector.core.parsing import ParserRegistry

router = APIRouter()


@router.get("/")
async def root() -> dict[str, Any]:
    """Root discovery endpoint: API directory for programmatic and human clients."""
    return {
        "meta": {
            "title": "AST Inspector API",
            "description": "Parse code, run tree-sitter queries, and inspect node relationships.",
            "version": __version__,
        },
        "links": {
            "self": "/",
            "parse": "/parse",
            "query": "/query",
            "relationship": "/getRelationship",
            "languages": "/languages",
            "openapi": "/openapi.json",
            "docs": "/docs",
        },
    }


@router.get("/languages", response_model=LanguagesResponse)
async def languages(registry: ParserRegistry = Depends(get_registry)) -> LanguagesResponse:
    return LanguagesResponse(
        default=registry.default_language,
        supported=supported_languages(),
        loaded=registry.loaded(),
    )
