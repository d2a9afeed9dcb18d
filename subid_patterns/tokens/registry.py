"""Token generator registry."""

from subid_patterns.exceptions import UnknownTokenKindError
from subid_patterns.tokens.base import PlaceholderKind, TokenGenerator
from subid_patterns.tokens.dates import (
    DateToken,
    DayToken,
    MonthToken,
    TimestampToken,
    YearToken,
)
from subid_patterns.tokens.identifiers import UUIDSegmentToken
from subid_patterns.tokens.runs import (
    AlphanumericRunToken,
    DigitRunToken,
    HexRunToken,
    LetterRunToken,
)


class TokenRegistry:
    """Registry mapping placeholder kinds to generators.

    Every kind has a builtin generator. An instance can override individual
    kinds with ``register``, which only affects renderers using that instance.
    """

    BUILTIN_TOKENS: dict[PlaceholderKind, type[TokenGenerator]] = {
        PlaceholderKind.DIGITS: DigitRunToken,
        PlaceholderKind.LETTERS: LetterRunToken,
        PlaceholderKind.CHARS: AlphanumericRunToken,
        PlaceholderKind.TIMESTAMP: TimestampToken,
        PlaceholderKind.DATE: DateToken,
        PlaceholderKind.YEAR: YearToken,
        PlaceholderKind.MONTH: MonthToken,
        PlaceholderKind.DAY: DayToken,
        PlaceholderKind.UUID_SEGMENT: UUIDSegmentToken,
        PlaceholderKind.HEX: HexRunToken,
    }

    def __init__(self) -> None:
        """Initialize registry."""
        self.tokens: dict[PlaceholderKind, TokenGenerator] = {}

    @classmethod
    def load(cls, kind: PlaceholderKind | str) -> TokenGenerator:
        """Load a builtin generator.

        Args:
            kind: Placeholder kind, or its value (e.g. 'uuidSegment')

        Returns:
            Generator instance

        Raises:
            UnknownTokenKindError: If the kind is not recognized

        Example:
            >>> TokenRegistry.load("hex").describe(6)
            'Random 6 hex digits'
        """
        available = [k.value for k in cls.BUILTIN_TOKENS]
        if isinstance(kind, str):
            try:
                kind = PlaceholderKind(kind)
            except ValueError:
                raise UnknownTokenKindError(kind, available) from None

        if kind not in cls.BUILTIN_TOKENS:
            raise UnknownTokenKindError(kind, available)

        return cls.BUILTIN_TOKENS[kind]()

    def register(self, kind: PlaceholderKind, generator: TokenGenerator) -> None:
        """Override the generator for a kind.

        Args:
            kind: Placeholder kind
            generator: Generator instance
        """
        self.tokens[kind] = generator

    def get(self, kind: PlaceholderKind) -> TokenGenerator:
        """Get the generator for a kind, preferring registered overrides."""
        if kind in self.tokens:
            return self.tokens[kind]
        return self.load(kind)
