"""Tests for PatternRenderer and render()."""

import re
from datetime import datetime

import pytest

from subid_patterns import PatternRenderer, render
from subid_patterns.clock import FixedClock
from subid_patterns.config import RenderConfig
from subid_patterns.random_source import SeededRandomSource
from subid_patterns.tokens import PlaceholderKind, RenderContext, TokenRegistry
from subid_patterns.tokens.runs import HexRunToken


class TestRenderLiterals:
    """Tests for literal pass-through."""

    @pytest.mark.parametrize(
        "pattern",
        ["", "ABC", "ABC-123", "{foo}-{bar}", "{hex}", "{{}}", "ünïcødé {Year}"],
    )
    def test_literal_pass_through(self, pattern: str) -> None:
        """Test that patterns without tokens render to themselves."""
        assert render(pattern) == pattern

    def test_empty_pattern(self) -> None:
        assert render("") == ""


class TestRenderLengthContracts:
    """Tests for rendered run lengths."""

    def test_digits(self) -> None:
        value = render("ABC-{random4digits}")

        assert re.fullmatch(r"ABC-[0-9]{4}", value)

    def test_letters(self) -> None:
        assert re.fullmatch(r"[A-Z]{3}", render("{random3letters}"))

    def test_chars(self) -> None:
        assert re.fullmatch(r"[A-Z0-9]{6}", render("{rand6chars}"))

    def test_hex(self) -> None:
        assert re.fullmatch(r"[0-9A-F]{8}", render("{hex8}"))

    def test_uuid_segment(self) -> None:
        assert re.fullmatch(r"ID-[0-9A-F]{8}", render("ID-{uuidSegment}"))

    def test_zero_length_runs(self) -> None:
        """Test that N=0 runs render as empty strings."""
        assert render("a{random0digits}b{hex0}c{rand0chars}d{random0letters}") == "abcd"

    def test_long_run(self) -> None:
        """Test that long runs are not truncated."""
        assert len(render("{random100digits}")) == 100

    def test_run_beyond_int_str_digit_limit(self) -> None:
        """Test that very long digit runs render in full."""
        value = render("{random5000digits}")

        assert re.fullmatch(r"[0-9]{5000}", value)


class TestRenderDates:
    """Tests for clock-driven tokens on a fixed clock."""

    def test_date(self, fixed_clock) -> None:
        assert render("{date}", clock=fixed_clock) == "20240307"

    def test_year(self, fixed_clock) -> None:
        assert render("{year}", clock=fixed_clock) == "2024"

    def test_month(self, fixed_clock) -> None:
        assert render("{month}", clock=fixed_clock) == "03"

    def test_day(self, fixed_clock) -> None:
        assert render("{day}", clock=fixed_clock) == "07"

    def test_combined(self, fixed_clock) -> None:
        assert render("{year}/{month}/{day}-{date}", clock=fixed_clock) == "2024/03/07-20240307"

    def test_timestamp_units(self) -> None:
        """Test that the configured unit is used."""
        clock = FixedClock(datetime.fromtimestamp(1_700_000_000))

        assert render("{timestamp}", clock=clock) == "1700000000000"
        assert (
            render("{timestamp}", clock=clock, config=RenderConfig(timestamp_unit="seconds"))
            == "1700000000"
        )

    def test_clock_read_once_per_render(self) -> None:
        """Test that all date tokens share one clock reading."""

        class CountingClock(FixedClock):
            reads = 0

            def now(self) -> datetime:
                CountingClock.reads += 1
                return super().now()

        clock = CountingClock(datetime(2024, 12, 31, 23, 59, 59))
        assert render("{date}{year}{month}{day}{timestamp}", clock=clock).startswith(
            "2024123120241231"
        )
        assert CountingClock.reads == 1


class TestRenderIndependence:
    """Tests that every placeholder occurrence is drawn independently."""

    def test_repeated_token_draws_separately(self, scripted_source) -> None:
        """Test that two identical tokens in one pattern get their own draws."""
        source = scripted_source(0, 0, 0, 1, 0, 0, 0, 2, 0, 0, 0, 3, 0, 0, 0, 4)
        renderer = PatternRenderer(source=source)

        assert renderer.render("{random4digits}-{random4digits}") == "0001-0002"
        assert renderer.render("{random4digits}-{random4digits}") == "0003-0004"
        assert source.calls == [10] * 16

    def test_no_shared_draw_with_system_randomness(self) -> None:
        """Test that two slots are not always equal across many renders."""
        values = [render("{random4digits}-{random4digits}").split("-") for _ in range(20)]

        assert any(left != right for left, right in values)
        assert len({v for pair in values for v in pair}) > 1

    def test_generated_text_is_not_reexpanded(self) -> None:
        """Test that output resembling a token is not substituted again."""
        registry = TokenRegistry()

        class TokenLookalike(HexRunToken):
            def generate(self, param: int | None, context: RenderContext) -> str:
                return "{year}"

        registry.register(PlaceholderKind.HEX, TokenLookalike())
        renderer = PatternRenderer(registry=registry)

        assert renderer.render("{hex4}-{year}").startswith("{year}-")


class TestRenderDeterminism:
    """Tests for reproducibility with injected sources."""

    def test_seeded_source_reproducible(self, fixed_clock) -> None:
        pattern = "SUB-{random4digits}-{random3letters}-{hex6}-{uuidSegment}-{date}"
        first = render(pattern, source=SeededRandomSource(42), clock=fixed_clock)
        second = render(pattern, source=SeededRandomSource(42), clock=fixed_clock)

        assert first == second

    def test_scripted_source_exact_output(self, scripted_source, fixed_clock) -> None:
        """Test exact output for a scripted source."""
        source = scripted_source(0, 4, 2, 0, 1, 2, 15, 14)
        value = render("X{random3digits}{random3letters}{hex2}-{date}", source=source, clock=fixed_clock)

        assert value == "X042ABCFE-20240307"


class TestRenderBatch:
    """Tests for PatternRenderer.render_batch()."""

    def test_batch_count(self) -> None:
        values = PatternRenderer().render_batch("ABC-{random4digits}", 5)

        assert len(values) == 5
        assert all(re.fullmatch(r"ABC-[0-9]{4}", v) for v in values)

    def test_batch_zero(self) -> None:
        assert PatternRenderer().render_batch("{hex4}", 0) == []

    def test_batch_not_deduplicated(self) -> None:
        """Test that a literal pattern yields identical entries."""
        assert PatternRenderer().render_batch("SAME", 3) == ["SAME", "SAME", "SAME"]


class TestRendererDefaults:
    """Tests for PatternRenderer.__init__()."""

    def test_utc_config_selects_utc_clock(self) -> None:
        renderer = PatternRenderer(config=RenderConfig(utc=True))

        assert renderer.clock.utc is True

    def test_explicit_clock_wins(self, fixed_clock) -> None:
        renderer = PatternRenderer(clock=fixed_clock, config=RenderConfig(utc=True))

        assert renderer.clock is fixed_clock
