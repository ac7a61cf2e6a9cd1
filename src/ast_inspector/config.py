import os
from dataclasses import dataclass, field

from ast_inspector.core.languages import DEFAULT_LANGUAGE
from ast_inspector.core.projection import DEFAULT_MAX_DEPTH


def _split_origins(raw: str) -> list[str]:
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


@dataclass(frozen=True)
class Settings:
    language: str = DEFAULT_LANGUAGE
    cors_origins: list[str] = field(default_factory=lambda: ["*"])
    log_level: str = "info"
    max_depth: int = DEFAULT_MAX_DEPTH


def get_settings() -> Settings:
    """Read settings from ``AST_INSPECTOR_*`` environment variables."""
    return Settings(
        language=os.getenv("AST_INSPECTOR_LANGUAGE", DEFAULT_LANGUAGE),
        cors_origins=_split_origins(os.getenv("AST_INSPECTOR_CORS_ORIGINS", "*")),
        log_level=os.getenv("AST_INSPECTOR_LOG_LEVEL", "info").lower(),
        max_depth=int(os.getenv("AST_INSPECTOR_MAX_DEPTH", str(DEFAULT_MAX_DEPTH))),
    )
