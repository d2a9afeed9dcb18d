"""UUID fragment token."""

import uuid

from subid_patterns.tokens.base import PlaceholderKind, RenderContext, TokenGenerator

SEGMENT_LENGTH = 8


class UUIDSegmentToken(TokenGenerator):
    """``{uuidSegment}``: first 8 hex chars of a random v4 UUID, uppercased.

    The UUID is built from 128 bits of the render's random source, so a
    seeded source gives reproducible fragments. Uniqueness is statistical
    only (32 bits).
    """

    kind = PlaceholderKind.UUID_SEGMENT

    def generate(self, param: int | None, context: RenderContext) -> str:
        value = uuid.UUID(int=context.source.randbelow(1 << 128), version=4)
        return value.hex[:SEGMENT_LENGTH].upper()

    def regex(self, param: int | None) -> str:
        return f"[0-9A-F]{{{SEGMENT_LENGTH}}}"

    def describe(self, param: int | None) -> str:
        return "First 8 chars of UUID"
