"""
subid-patterns - Sub-ID Pattern Templating Engine

Renders tracking Sub-IDs from patterns such as ``ABC-{random4digits}``,
checks new patterns against the ones already registered, and suggests
free patterns from a fixed template library.
"""

from subid_patterns.catalog import TEMPLATE_LIBRARY, VARIABLES, Variable, describe_pattern
from subid_patterns.decoder import DecodedSubID, SubIDDecoder
from subid_patterns.parser import parse
from subid_patterns.renderer import PatternRenderer, render
from subid_patterns.submission import (
    AuthoringSession,
    AuthoringState,
    WebsiteRecord,
    build_submission,
)
from subid_patterns.suggester import PatternSuggester, suggest
from subid_patterns.validator import PatternValidator, ValidationResult, validate

__version__ = "0.1.0"

__all__ = [
    "AuthoringSession",
    "AuthoringState",
    "DecodedSubID",
    "PatternRenderer",
    "PatternSuggester",
    "PatternValidator",
    "SubIDDecoder",
    "TEMPLATE_LIBRARY",
    "VARIABLES",
    "ValidationResult",
    "Variable",
    "WebsiteRecord",
    "build_submission",
    "describe_pattern",
    "parse",
    "render",
    "suggest",
    "validate",
]
