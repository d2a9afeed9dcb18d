"""Placeholder grammar and pattern parser.

A pattern is split in one left-to-right pass into ``Literal`` and
``Placeholder`` segments. Rendering works on the segments, never on the
substituted text, so a generated value that happens to look like a token is
never expanded a second time.

Recognized tokens (case-sensitive, N is a run of ASCII digits)::

    {randomNdigits}  {randomNletters}  {randNchars}  {hexN}
    {timestamp}  {date}  {year}  {month}  {day}  {uuidSegment}

Anything else, including malformed tokens such as ``{randomdigits}`` or
``{hex}``, is literal text.
"""

import logging
import re

from subid_patterns.tokens.base import Literal, Placeholder, PlaceholderKind, Segment

logger = logging.getLogger(__name__)

TOKEN_REGEX = re.compile(
    r"\{(?:"
    r"random(?P<digits>[0-9]+)digits"
    r"|random(?P<letters>[0-9]+)letters"
    r"|rand(?P<chars>[0-9]+)chars"
    r"|hex(?P<hex>[0-9]+)"
    r"|(?P<word>timestamp|date|year|month|day|uuidSegment)"
    r")\}"
)

# Brace-delimited words that look like tokens; used to flag typos.
CANDIDATE_REGEX = re.compile(r"\{[A-Za-z][A-Za-z0-9_]*\}")

PARAMETER_GROUPS: dict[str, PlaceholderKind] = {
    "digits": PlaceholderKind.DIGITS,
    "letters": PlaceholderKind.LETTERS,
    "chars": PlaceholderKind.CHARS,
    "hex": PlaceholderKind.HEX,
}

WORD_KINDS: dict[str, PlaceholderKind] = {
    "timestamp": PlaceholderKind.TIMESTAMP,
    "date": PlaceholderKind.DATE,
    "year": PlaceholderKind.YEAR,
    "month": PlaceholderKind.MONTH,
    "day": PlaceholderKind.DAY,
    "uuidSegment": PlaceholderKind.UUID_SEGMENT,
}


def _placeholder(match: re.Match[str]) -> Placeholder:
    word = match.group("word")
    if word is not None:
        return Placeholder(kind=WORD_KINDS[word], token=match.group(0))

    for group, kind in PARAMETER_GROUPS.items():
        value = match.group(group)
        if value is not None:
            return Placeholder(kind=kind, param=int(value), token=match.group(0))

    raise ValueError(f"Unrecognized placeholder token: {match.group(0)}")


def parse(pattern: str) -> list[Segment]:
    """Split a pattern into literal and placeholder segments.

    Args:
        pattern: Pattern string

    Returns:
        Segments in source order; ``[]`` for an empty pattern

    Example:
        >>> parse("ABC-{random4digits}")
        [Literal(text='ABC-'), Placeholder(kind=<PlaceholderKind.DIGITS: 'digits'>, param=4, token='{random4digits}')]
    """
    segments: list[Segment] = []
    position = 0

    for match in TOKEN_REGEX.finditer(pattern):
        if match.start() > position:
            segments.append(Literal(pattern[position : match.start()]))
        segments.append(_placeholder(match))
        position = match.end()

    if position < len(pattern):
        segments.append(Literal(pattern[position:]))

    logger.debug(f"Parsed {pattern!r} into {len(segments)} segment(s)")
    return segments


def placeholders(pattern: str) -> list[Placeholder]:
    """Return the recognized placeholders of a pattern, in order."""
    return [s for s in parse(pattern) if isinstance(s, Placeholder)]


def unrecognized_tokens(pattern: str) -> list[str]:
    """Return ``{word}`` runs that will render literally.

    Example:
        >>> unrecognized_tokens("{Date}-{random4digits}-{foo}")
        ['{Date}', '{foo}']
    """
    found: list[str] = []
    for segment in parse(pattern):
        if isinstance(segment, Literal):
            found.extend(CANDIDATE_REGEX.findall(segment.text))
    return found


def build_token(kind: PlaceholderKind, param: int | None = None) -> str:
    """Build the source text of a token.

    Args:
        kind: Placeholder kind
        param: Run length, required for parameterized kinds

    Returns:
        Token text, e.g. ``{rand10chars}``

    Raises:
        ValueError: If a parameterized kind is given no parameter
    """
    if not kind.parameterized:
        return f"{{{kind.value}}}"

    if param is None:
        raise ValueError(f"Placeholder kind {kind.value!r} requires a run length")

    count = max(0, param)
    if kind is PlaceholderKind.DIGITS:
        return f"{{random{count}digits}}"
    if kind is PlaceholderKind.LETTERS:
        return f"{{random{count}letters}}"
    if kind is PlaceholderKind.CHARS:
        return f"{{rand{count}chars}}"
    return f"{{hex{count}}}"
