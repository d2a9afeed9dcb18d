"""Base token interface and segment models."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Union

from subid_patterns.random_source import RandomSource


class PlaceholderKind(Enum):
    """Generator kinds a placeholder token can name."""

    DIGITS = "digits"
    LETTERS = "letters"
    CHARS = "chars"
    TIMESTAMP = "timestamp"
    DATE = "date"
    YEAR = "year"
    MONTH = "month"
    DAY = "day"
    UUID_SEGMENT = "uuidSegment"
    HEX = "hex"

    @property
    def parameterized(self) -> bool:
        """True if the token embeds a run length."""
        return self in (
            PlaceholderKind.DIGITS,
            PlaceholderKind.LETTERS,
            PlaceholderKind.CHARS,
            PlaceholderKind.HEX,
        )


@dataclass(frozen=True)
class Literal:
    """Text copied verbatim into every rendered Sub-ID."""

    text: str


@dataclass(frozen=True)
class Placeholder:
    """A recognized token.

    Attributes:
        kind: Generator kind
        param: Run length for parameterized kinds, otherwise None
        token: Source text of the token, braces included
    """

    kind: PlaceholderKind
    param: int | None = None
    token: str = ""


Segment = Union[Literal, Placeholder]


@dataclass(frozen=True)
class RenderContext:
    """Inputs shared by every token of a single render call.

    The clock is read once per call so that ``{date}`` and ``{year}`` can
    never straddle midnight within one Sub-ID.
    """

    source: RandomSource
    now: datetime
    timestamp_unit: str = "milliseconds"


class TokenGenerator(ABC):
    """Base class for placeholder generators."""

    kind: PlaceholderKind

    @abstractmethod
    def generate(self, param: int | None, context: RenderContext) -> str:
        """Produce the value substituted for one token occurrence.

        Args:
            param: Run length (None for unparameterized kinds)
            context: Random source and clock reading for this render

        Returns:
            Generated text
        """
        pass

    @abstractmethod
    def regex(self, param: int | None) -> str:
        """Regular expression matching any value ``generate`` can produce.

        Args:
            param: Run length (None for unparameterized kinds)

        Returns:
            Regex source without anchors or capturing groups
        """
        pass

    @abstractmethod
    def describe(self, param: int | None) -> str:
        """Human-readable description of the token."""
        pass
