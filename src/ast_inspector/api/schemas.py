from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from ast_inspector.core.projection import ProjectedNode


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ParseRequest(_CamelModel):
    code: str
    language: str | None = None


class QueryRequest(_CamelModel):
    code: str
    query: str
    language: str | None = None


class RelationshipRequest(_CamelModel):
    """Both keys are a byte offset (``"12"``) or a span (``"3:9"``)."""

    model_config = ConfigDict(coerce_numbers_to_str=True)

    code: str
    source_node_key: str
    target_node_key: str
    language: str | None = None


class QueryResponse(_CamelModel):
    matches: list[ProjectedNode]


class RelationshipResponse(_CamelModel):
    relationship: str
    steps: list[str]
    reachable: bool


class ErrorResponse(BaseModel):
    error: str
    kind: str


class HealthResponse(BaseModel):
    status: str = "ok"


class LanguagesResponse(BaseModel):
    default: str
    supported: list[str]
    loaded: list[str]
