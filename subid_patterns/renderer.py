"""Sub-ID renderer."""

import logging
from typing import Sequence

from subid_patterns.clock import Clock, SystemClock
from subid_patterns.config import RenderConfig, load_default_config
from subid_patterns.parser import parse
from subid_patterns.random_source import RandomSource, SystemRandomSource
from subid_patterns.tokens.base import Literal, RenderContext, Segment
from subid_patterns.tokens.registry import TokenRegistry

logger = logging.getLogger(__name__)


class PatternRenderer:
    """Expands pattern placeholders into concrete Sub-IDs."""

    def __init__(
        self,
        source: RandomSource | None = None,
        clock: Clock | None = None,
        config: RenderConfig | None = None,
        registry: TokenRegistry | None = None,
    ):
        """Initialize renderer.

        Args:
            source: Random source (defaults to OS entropy)
            clock: Clock for date/timestamp tokens (defaults to system clock)
            config: Render configuration (defaults to the built-in render settings)
            registry: Token registry (defaults to builtin generators)
        """
        self.config = config or load_default_config().render
        self.source = source or SystemRandomSource()
        self.clock = clock or SystemClock(utc=self.config.utc)
        self.registry = registry or TokenRegistry()

    def render(self, pattern: str) -> str:
        """Render one Sub-ID.

        Every placeholder occurrence gets its own draw; literal text is
        copied unchanged. Malformed tokens are literal text, so this never
        fails on user input.

        Args:
            pattern: Pattern string

        Returns:
            Rendered Sub-ID

        Example:
            >>> PatternRenderer().render("ABC-{random4digits}")  # doctest: +SKIP
            'ABC-0731'
        """
        return self.render_segments(parse(pattern))

    def render_segments(self, segments: Sequence[Segment]) -> str:
        """Render already-parsed segments."""
        context = RenderContext(
            source=self.source,
            now=self.clock.now(),
            timestamp_unit=self.config.timestamp_unit,
        )

        parts = []
        for segment in segments:
            if isinstance(segment, Literal):
                parts.append(segment.text)
            else:
                generator = self.registry.get(segment.kind)
                parts.append(generator.generate(segment.param, context))

        return "".join(parts)

    def render_batch(self, pattern: str, count: int) -> list[str]:
        """Render ``count`` independent Sub-IDs from one pattern.

        The pattern is parsed once. Results are not deduplicated.

        Args:
            pattern: Pattern string
            count: Number of Sub-IDs to render

        Returns:
            List of rendered Sub-IDs
        """
        segments = parse(pattern)
        logger.debug(f"Rendering {count} Sub-ID(s) from {pattern!r}")
        return [self.render_segments(segments) for _ in range(count)]


def render(
    pattern: str,
    *,
    source: RandomSource | None = None,
    clock: Clock | None = None,
    config: RenderConfig | None = None,
) -> str:
    """Render one Sub-ID from a pattern (see ``PatternRenderer.render``)."""
    return PatternRenderer(source=source, clock=clock, config=config).render(pattern)
