"""
Submission boundary for new websites.

A website record ``{name, formatPattern}`` is handed to the external store
only when the name is non-empty and the pattern is not already registered.
``AuthoringSession`` drives the add-website form:

    EMPTY --edit--> VALID | INVALID --submit--> EMPTY

EDITING is held only while a new pattern is being validated; validation runs
synchronously on every edit, so callers observe VALID or INVALID afterwards.
"""

import logging
from collections.abc import Collection
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from subid_patterns.exceptions import SubmissionRejectedError
from subid_patterns.renderer import PatternRenderer
from subid_patterns.validator import PatternValidator, ValidationResult

logger = logging.getLogger(__name__)

NAME_REQUIRED = "Website name is required"
PATTERN_REQUIRED = "Format pattern is required"


class WebsiteRecord(BaseModel):
    """Record emitted to the external store on a successful submission."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    name: str = Field(min_length=1, description="Website display name")
    format_pattern: str = Field(
        alias="formatPattern", min_length=1, description="Sub-ID format pattern"
    )

    def to_payload(self) -> dict[str, str]:
        """Serialize with the store's field names."""
        return self.model_dump(by_alias=True)


def submission_blocker(
    name: str, format_pattern: str, existing: Collection[str]
) -> Optional[str]:
    """Return why a submission is not allowed, or None if it is."""
    if not name.strip():
        return NAME_REQUIRED
    if not format_pattern:
        return PATTERN_REQUIRED

    result = PatternValidator(existing).validate(format_pattern)
    if not result.valid:
        return result.reason
    return None


def build_submission(
    name: str, format_pattern: str, existing: Collection[str]
) -> Optional[WebsiteRecord]:
    """
    Build a website record if the submission is allowed.

    Args:
        name: Website name (surrounding whitespace is dropped)
        format_pattern: Pattern string
        existing: Patterns already registered

    Returns:
        WebsiteRecord, or None if the name is empty or the pattern is taken
    """
    blocker = submission_blocker(name, format_pattern, existing)
    if blocker is not None:
        logger.debug(f"Submission of {format_pattern!r} blocked: {blocker}")
        return None

    return WebsiteRecord(name=name.strip(), format_pattern=format_pattern)


class AuthoringState(Enum):
    """States of the add-website form."""

    EMPTY = "empty"
    EDITING = "editing"
    VALID = "valid"
    INVALID = "invalid"


class AuthoringSession:
    """Add-website form state, re-validated on every pattern edit."""

    def __init__(
        self,
        existing: Collection[str],
        renderer: Optional[PatternRenderer] = None,
    ):
        """
        Initialize session.

        Args:
            existing: Patterns already registered (read, never mutated)
            renderer: Renderer used for previews
        """
        self.existing = existing
        self.validator = PatternValidator(existing)
        self.renderer = renderer or PatternRenderer()
        self.reset()

    def reset(self) -> None:
        """Clear the form."""
        self.name = ""
        self.pattern = ""
        self.state = AuthoringState.EMPTY
        self.result: Optional[ValidationResult] = None

    def set_name(self, name: str) -> None:
        self.name = name

    def edit(self, pattern: str) -> AuthoringState:
        """Replace the pattern text and re-validate it.

        Args:
            pattern: New pattern text

        Returns:
            State after validation
        """
        self.pattern = pattern
        if not pattern:
            self.state = AuthoringState.EMPTY
            self.result = None
            return self.state

        self.state = AuthoringState.EDITING
        self.result = self.validator.validate(pattern)
        self.state = AuthoringState.VALID if self.result.valid else AuthoringState.INVALID
        return self.state

    def insert(self, token: str) -> AuthoringState:
        """Append a palette token to the pattern."""
        return self.edit(self.pattern + token)

    @property
    def error(self) -> str:
        """Current conflict message, empty when there is none."""
        return self.result.reason if self.result else ""

    @property
    def warnings(self) -> list[str]:
        return list(self.result.warnings or []) if self.result else []

    @property
    def preview(self) -> str:
        """A fresh sample Sub-ID for the current pattern."""
        return self.renderer.render(self.pattern)

    @property
    def can_submit(self) -> bool:
        return self.state is AuthoringState.VALID and bool(self.name.strip())

    def submit(self) -> WebsiteRecord:
        """
        Emit the website record and reset the form.

        The pattern is validated again against the current contents of the
        existing collection, which may have changed since the last edit.

        Returns:
            WebsiteRecord for the external store

        Raises:
            SubmissionRejectedError: If the name is empty or the pattern is
                empty or already registered
        """
        blocker = submission_blocker(self.name, self.pattern, self.existing)
        if blocker is not None:
            if self.pattern:
                self.edit(self.pattern)
            raise SubmissionRejectedError(blocker)

        record = WebsiteRecord(name=self.name.strip(), format_pattern=self.pattern)
        logger.info(f"Website {record.name!r} submitted with pattern {record.format_pattern!r}")
        self.reset()
        return record
