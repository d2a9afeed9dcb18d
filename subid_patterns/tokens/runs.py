"""Random run tokens: digits, letters, alphanumerics and hex."""

import string

from subid_patterns.tokens.base import PlaceholderKind, RenderContext, TokenGenerator

UPPERCASE_LETTERS = string.ascii_uppercase
ALPHANUMERIC = string.ascii_uppercase + string.digits
HEX_DIGITS = "0123456789ABCDEF"


def run_length(param: int | None) -> int:
    """Clamp a token parameter to a usable run length."""
    return max(0, param or 0)


class DigitRunToken(TokenGenerator):
    """``{randomNdigits}``: N independent decimal digits.

    Read as a number the run is uniform over ``[0, 10**N)`` and keeps its
    leading zeros, e.g. N=4 gives "0000".."9999".
    """

    kind = PlaceholderKind.DIGITS

    def generate(self, param: int | None, context: RenderContext) -> str:
        return context.source.draw(string.digits, run_length(param))

    def regex(self, param: int | None) -> str:
        return f"[0-9]{{{run_length(param)}}}"

    def describe(self, param: int | None) -> str:
        return f"Random {run_length(param)}-digit number"


class LetterRunToken(TokenGenerator):
    """``{randomNletters}``: N uppercase ASCII letters."""

    kind = PlaceholderKind.LETTERS

    def generate(self, param: int | None, context: RenderContext) -> str:
        return context.source.draw(UPPERCASE_LETTERS, run_length(param))

    def regex(self, param: int | None) -> str:
        return f"[A-Z]{{{run_length(param)}}}"

    def describe(self, param: int | None) -> str:
        return f"Random {run_length(param)} uppercase letters"


class AlphanumericRunToken(TokenGenerator):
    """``{randNchars}``: N characters from A-Z and 0-9."""

    kind = PlaceholderKind.CHARS

    def generate(self, param: int | None, context: RenderContext) -> str:
        return context.source.draw(ALPHANUMERIC, run_length(param))

    def regex(self, param: int | None) -> str:
        return f"[A-Z0-9]{{{run_length(param)}}}"

    def describe(self, param: int | None) -> str:
        return f"Random {run_length(param)} alphanumeric chars"


class HexRunToken(TokenGenerator):
    """``{hexN}``: N uppercase hexadecimal digits."""

    kind = PlaceholderKind.HEX

    def generate(self, param: int | None, context: RenderContext) -> str:
        return context.source.draw(HEX_DIGITS, run_length(param))

    def regex(self, param: int | None) -> str:
        return f"[0-9A-F]{{{run_length(param)}}}"

    def describe(self, param: int | None) -> str:
        return f"Random {run_length(param)} hex digits"
