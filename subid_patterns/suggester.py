"""Collision-free pattern suggestions."""

import logging
from collections.abc import Collection, Sequence

from subid_patterns.catalog import TEMPLATE_LIBRARY
from subid_patterns.config import SuggestionConfig, load_default_config
from subid_patterns.parser import build_token
from subid_patterns.random_source import RandomSource, SystemRandomSource
from subid_patterns.tokens.base import PlaceholderKind
from subid_patterns.tokens.runs import ALPHANUMERIC

logger = logging.getLogger(__name__)


class PatternSuggester:
    """Suggests a pattern not already registered by another website.

    Library templates are tried in order. When all of them are taken a
    fallback ``{randNchars}-XXXX`` is synthesized with a random literal
    suffix. The fallback is only likely to be free, not guaranteed: after
    ``max_attempts`` colliding candidates the last one is returned anyway.
    """

    def __init__(
        self,
        templates: Sequence[str] = TEMPLATE_LIBRARY,
        source: RandomSource | None = None,
        config: SuggestionConfig | None = None,
    ):
        """Initialize suggester.

        Args:
            templates: Ordered candidate patterns
            source: Random source for fallback suffixes
            config: Suggestion configuration (defaults to the built-in suggestion settings)
        """
        self.templates = tuple(templates)
        self.source = source or SystemRandomSource()
        self.config = config or load_default_config().suggestion

    def suggest(self, existing: Collection[str]) -> str:
        """Return the first template absent from ``existing``.

        Args:
            existing: Patterns already registered

        Returns:
            Pattern string (never a rendered Sub-ID)
        """
        for template in self.templates:
            if template not in existing:
                logger.info(f"Suggesting library template {template!r}")
                return template

        logger.info(
            f"All {len(self.templates)} library templates are taken, "
            f"synthesizing a fallback pattern"
        )
        return self.fallback(existing)

    def fallback(self, existing: Collection[str]) -> str:
        """Synthesize a random fallback pattern."""
        prefix = build_token(PlaceholderKind.CHARS, self.config.fallback_length)
        candidate = prefix

        for attempt in range(1, self.config.max_attempts + 1):
            suffix = self.source.draw(ALPHANUMERIC, self.config.suffix_length)
            candidate = f"{prefix}-{suffix}" if suffix else prefix
            if candidate not in existing:
                logger.debug(f"Fallback {candidate!r} accepted on attempt {attempt}")
                return candidate

        logger.warning(
            f"Fallback pattern {candidate!r} collides with an existing pattern "
            f"after {self.config.max_attempts} attempt(s); returning it anyway"
        )
        return candidate


def suggest(
    existing: Collection[str],
    *,
    source: RandomSource | None = None,
    config: SuggestionConfig | None = None,
) -> str:
    """Suggest a free pattern (see ``PatternSuggester.suggest``)."""
    return PatternSuggester(source=source, config=config).suggest(existing)
