from fastapi import APIRouter, Depends

from ast_inspector.api.dependencies import get_app_settings, get_registry
from ast_inspector.api.schemas import (
    ErrorResponse,
    ParseRequest,
    QueryRequest,
    QueryResponse,
    RelationshipRequest,
    RelationshipResponse,
)
from ast_inspector.config import Settings
from ast_inspector.core.operations import lookup_relationship, parse_and_project, query_and_project
from ast_inspector.core.parsing import ParserRegistry
from ast_inspector.core.projection import ProjectedNode

router = APIRouter(tags=["tree"], responses={400: {"model": ErrorResponse}})


@router.post("/parse", response_model=ProjectedNode)
async def parse(
    body: ParseRequest,
    registry: ParserRegistry = Depends(get_registry),
    settings: Settings = Depends(get_app_settings),
) -> ProjectedNode:
    """Parse ``code`` and return the whole projected syntax tree."""
    return parse_and_project(registry.get(body.language), body.code, settings.max_depth)


@router.post("/query", response_model=QueryResponse)
async def query(
    body: QueryRequest,
    registry: ParserRegistry = Depends(get_registry),
    settings: Settings = Depends(get_app_settings),
) -> QueryResponse:
    """Run a tree-sitter pattern query and return one projected tree per capture."""
    matches = query_and_project(registry.get(body.language), body.code, body.query, settings.max_depth)
    return QueryResponse(matches=matches)


@router.post("/getRelationship", response_model=RelationshipResponse)
async def get_relationship(
    body: RelationshipRequest,
    registry: ParserRegistry = Depends(get_registry),
) -> RelationshipResponse:
    path = lookup_relationship(
        registry.get(body.language),
        body.code,
        body.source_node_key,
        body.target_node_key,
    )
    return RelationshipResponse(
        relationship=path.render(),
        steps=[step.value for step in path.steps],
        reachable=path.reachable,
    )
