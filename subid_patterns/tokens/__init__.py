"""Placeholder token definitions and registry."""

from subid_patterns.tokens.base import (
    Literal,
    Placeholder,
    PlaceholderKind,
    RenderContext,
    Segment,
    TokenGenerator,
)
from subid_patterns.tokens.registry import TokenRegistry

__all__ = [
    "Literal",
    "Placeholder",
    "PlaceholderKind",
    "RenderContext",
    "Segment",
    "TokenGenerator",
    "TokenRegistry",
]
