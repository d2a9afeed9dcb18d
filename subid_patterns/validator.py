"""Pattern uniqueness validator."""

from collections.abc import Collection
from dataclasses import dataclass

from subid_patterns.parser import placeholders, unrecognized_tokens

CONFLICT_MESSAGE = (
    "This format pattern is already used by another website. "
    "Please use a unique pattern."
)


@dataclass
class ValidationResult:
    """Pattern validation result.

    ``valid`` depends only on exact-string membership in the existing set.
    Warnings are advisory and never change it.
    """

    valid: bool
    error: str | None = None
    warnings: list[str] | None = None

    def __post_init__(self) -> None:
        """Initialize warnings list."""
        if self.warnings is None:
            self.warnings = []

    @property
    def ok(self) -> bool:
        """Alias of ``valid``."""
        return self.valid

    @property
    def reason(self) -> str:
        """Conflict reason, or an empty string when valid."""
        return self.error or ""


class PatternValidator:
    """Checks candidate patterns against a set of registered patterns.

    The existing collection is only read, never copied or mutated; results
    are correct for its contents at the time ``validate`` is called.
    """

    def __init__(self, existing: Collection[str]):
        """Initialize validator.

        Args:
            existing: Patterns already registered by other websites
        """
        self.existing = existing

    def validate(self, pattern: str) -> ValidationResult:
        """Validate a pattern.

        Args:
            pattern: Candidate pattern string

        Returns:
            Validation result
        """
        warnings = self._warnings(pattern)

        if pattern in self.existing:
            return ValidationResult(valid=False, error=CONFLICT_MESSAGE, warnings=warnings)

        return ValidationResult(valid=True, warnings=warnings)

    def _warnings(self, pattern: str) -> list[str]:
        if not pattern:
            return []

        warnings = []
        unknown = unrecognized_tokens(pattern)
        if unknown:
            warnings.append(
                f"Unrecognized token(s) will be copied literally: {', '.join(unknown)}"
            )
        if not placeholders(pattern):
            warnings.append(
                "Pattern contains no placeholders; every Sub-ID will be identical"
            )
        return warnings


def validate(pattern: str, existing: Collection[str]) -> ValidationResult:
    """Validate a pattern against existing patterns (see ``PatternValidator``)."""
    return PatternValidator(existing).validate(pattern)
