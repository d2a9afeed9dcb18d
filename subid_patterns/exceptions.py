"""Custom exceptions with helpful error messages."""


class SubIDPatternError(Exception):
    """Base exception for subid-patterns errors."""

    pass


class UnknownTokenKindError(SubIDPatternError):
    """No token generator is registered for the requested kind."""

    def __init__(self, kind: object, available: list[str]):
        self.kind = kind
        super().__init__(
            f"Unknown placeholder kind: {kind!r}. "
            f"Available: {', '.join(available)}"
        )


class SubmissionRejectedError(SubIDPatternError):
    """A website record was submitted while the authoring form is gated."""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(
            f"Submission rejected: {reason}\n\n"
            f"Suggestions:\n"
            f"1. Enter a website name\n"
            f"2. Change the format pattern, or call suggest() for a free one"
        )


class SubIDDecodeError(SubIDPatternError, ValueError):
    """A Sub-ID value does not match the pattern it is decoded against."""

    def __init__(self, value: str, pattern: str):
        self.value = value
        self.pattern = pattern
        super().__init__(f"Sub-ID {value!r} does not match pattern {pattern!r}")


class ConfigError(SubIDPatternError, ValueError):
    """Configuration file could not be read or validated."""

    def __init__(self, path: object, detail: str):
        self.path = path
        super().__init__(
            f"Invalid configuration in {path}: {detail}\n\n"
            f"Suggestions:\n"
            f"1. Check the TOML syntax\n"
            f"2. Run 'subid-patterns init' to write a fresh default file"
        )
