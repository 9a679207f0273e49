"""
Validation - regras declarativas e extrator de IDs do YouTube.

Código puro, sem dependências de framework.
"""

from .rules import Field, Rule, Schema, ValidationResult
from .youtube import (
    extract_youtube_video_id,
    build_embed_url,
    build_watch_url,
    build_thumbnail_url,
)

__all__ = [
    "Field",
    "Rule",
    "Schema",
    "ValidationResult",
    "extract_youtube_video_id",
    "build_embed_url",
    "build_watch_url",
    "build_thumbnail_url",
]
