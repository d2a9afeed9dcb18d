"""Sub-ID decoder."""

import re
from dataclasses import dataclass

from subid_patterns.exceptions import SubIDDecodeError
from subid_patterns.parser import parse
from subid_patterns.tokens.base import Literal, Placeholder
from subid_patterns.tokens.registry import TokenRegistry


@dataclass
class DecodedSubID:
    """Decoded Sub-ID components."""

    raw_value: str
    components: list[tuple[str, str]]

    def __getitem__(self, index: int) -> tuple[str, str]:
        """Get ``(token, text)`` of the index-th placeholder."""
        return self.components[index]

    def values_for(self, token: str) -> list[str]:
        """Get the text of every occurrence of ``token``."""
        return [text for source, text in self.components if source == token]


class SubIDDecoder:
    """Matches rendered Sub-IDs against the pattern they came from.

    Example:
        >>> decoder = SubIDDecoder("ABC-{random4digits}-{year}")
        >>> decoder.decode("ABC-0042-2024").components
        [('{random4digits}', '0042'), ('{year}', '2024')]
    """

    def __init__(self, pattern: str, registry: TokenRegistry | None = None):
        """Initialize decoder.

        Args:
            pattern: Pattern the Sub-IDs were rendered from
            registry: Token registry (defaults to builtin generators)
        """
        self.pattern = pattern
        self.registry = registry or TokenRegistry()
        self.placeholders: list[Placeholder] = []
        self.regex = self._compile()

    def _compile(self) -> re.Pattern[str]:
        parts = []
        for segment in parse(self.pattern):
            if isinstance(segment, Literal):
                parts.append(re.escape(segment.text))
            else:
                self.placeholders.append(segment)
                generator = self.registry.get(segment.kind)
                parts.append(f"({generator.regex(segment.param)})")
        return re.compile("".join(parts))

    def matches(self, value: str) -> bool:
        """Check whether ``value`` could have been rendered from the pattern."""
        return self.regex.fullmatch(value) is not None

    def decode(self, value: str) -> DecodedSubID:
        """Split a rendered Sub-ID into per-placeholder values.

        Args:
            value: Rendered Sub-ID

        Returns:
            Decoded components

        Raises:
            SubIDDecodeError: If the value does not match the pattern
        """
        match = self.regex.fullmatch(value)
        if not match:
            raise SubIDDecodeError(value, self.pattern)

        return DecodedSubID(
            raw_value=value,
            components=[
                (placeholder.token, text)
                for placeholder, text in zip(self.placeholders, match.groups())
            ],
        )
