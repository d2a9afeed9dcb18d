"""Clock-driven tokens: Unix timestamp and date components."""

from subid_patterns.tokens.base import PlaceholderKind, RenderContext, TokenGenerator


class TimestampToken(TokenGenerator):
    """``{timestamp}``: Unix time, milliseconds by default.

    The unit comes from ``RenderConfig.timestamp_unit``; parsers of rendered
    Sub-IDs must agree on it.
    """

    kind = PlaceholderKind.TIMESTAMP

    def generate(self, param: int | None, context: RenderContext) -> str:
        seconds = context.now.timestamp()
        if context.timestamp_unit == "seconds":
            return str(int(seconds))
        return str(int(seconds * 1000))

    def regex(self, param: int | None) -> str:
        return "[0-9]+"

    def describe(self, param: int | None) -> str:
        return "Current Unix timestamp"


class DateToken(TokenGenerator):
    """``{date}``: compact YYYYMMDD."""

    kind = PlaceholderKind.DATE

    def generate(self, param: int | None, context: RenderContext) -> str:
        now = context.now
        return f"{now.year:04d}{now.month:02d}{now.day:02d}"

    def regex(self, param: int | None) -> str:
        return "[0-9]{8}"

    def describe(self, param: int | None) -> str:
        return "Current date (YYYYMMDD)"


class YearToken(TokenGenerator):
    kind = PlaceholderKind.YEAR

    def generate(self, param: int | None, context: RenderContext) -> str:
        return f"{context.now.year:04d}"

    def regex(self, param: int | None) -> str:
        return "[0-9]{4}"

    def describe(self, param: int | None) -> str:
        return "Current year (YYYY)"


class MonthToken(TokenGenerator):
    kind = PlaceholderKind.MONTH

    def generate(self, param: int | None, context: RenderContext) -> str:
        return f"{context.now.month:02d}"

    def regex(self, param: int | None) -> str:
        return "(?:0[1-9]|1[0-2])"

    def describe(self, param: int | None) -> str:
        return "Current month (MM)"


class DayToken(TokenGenerator):
    kind = PlaceholderKind.DAY

    def generate(self, param: int | None, context: RenderContext) -> str:
        return f"{context.now.day:02d}"

    def regex(self, param: int | None) -> str:
        return "(?:0[1-9]|[12][0-9]|3[01])"

    def describe(self, param: int | None) -> str:
        return "Current day of month (DD)"
