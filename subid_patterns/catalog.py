"""Static pattern data: the suggestion template library and the variable palette."""

from dataclasses import dataclass

from subid_patterns.parser import parse
from subid_patterns.tokens.base import Literal
from subid_patterns.tokens.registry import TokenRegistry

# Suggestion candidates, tried in order.
TEMPLATE_LIBRARY: tuple[str, ...] = (
    "{hex6}-{random4digits}",
    "{date}-{rand6chars}",
    "SUB-{random4digits}-{random3letters}",
    "{year}{month}-{random5digits}",
    "ID-{uuidSegment}",
    "{random3letters}-{timestamp}",
    "TRK-{year}-{hex8}",
    "{rand8chars}",
)


@dataclass(frozen=True)
class Variable:
    """An insertable token offered to pattern authors."""

    token: str
    description: str


VARIABLES: tuple[Variable, ...] = (
    Variable("{random4digits}", "Random 4-digit number"),
    Variable("{random3letters}", "Random 3 uppercase letters"),
    Variable("{timestamp}", "Current Unix timestamp"),
    Variable("{uuidSegment}", "First 8 chars of UUID"),
    Variable("{rand6chars}", "Random 6 alphanumeric chars"),
    Variable("{date}", "Current date (YYYYMMDD)"),
    Variable("{year}", "Current year (YYYY)"),
    Variable("{month}", "Current month (MM)"),
    Variable("{day}", "Current day of month (DD)"),
    Variable("{hex6}", "Random 6 hex digits"),
)


def describe_pattern(
    pattern: str, registry: TokenRegistry | None = None
) -> list[tuple[str, str]]:
    """Explain each segment of a pattern.

    Args:
        pattern: Pattern string
        registry: Token registry (defaults to builtin generators)

    Returns:
        ``(source text, description)`` pairs in pattern order

    Example:
        >>> describe_pattern("ABC-{random4digits}")
        [('ABC-', 'Literal text'), ('{random4digits}', 'Random 4-digit number')]
    """
    registry = registry or TokenRegistry()
    described = []
    for segment in parse(pattern):
        if isinstance(segment, Literal):
            described.append((segment.text, "Literal text"))
        else:
            generator = registry.get(segment.kind)
            described.append((segment.token, generator.describe(segment.param)))
    return described
