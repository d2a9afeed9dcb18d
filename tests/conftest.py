"""Pytest configuration and shared fixtures."""

from datetime import datetime
from typing import Callable, Iterable

import pytest

from subid_patterns.clock import FixedClock
from subid_patterns.random_source import RandomSource, SeededRandomSource


class ScriptedRandomSource(RandomSource):
    """Returns scripted values (modulo the bound) and records every call."""

    def __init__(self, values: Iterable[int]):
        self.values = list(values)
        self.calls: list[int] = []

    def randbelow(self, n: int) -> int:
        if not self.values:
            raise AssertionError("Scripted random source exhausted")
        self.calls.append(n)
        return self.values.pop(0) % n


@pytest.fixture
def fixed_clock() -> FixedClock:
    """Clock frozen at 2024-03-07 09:05:03 local time."""
    return FixedClock(datetime(2024, 3, 7, 9, 5, 3))


@pytest.fixture
def seeded_source() -> SeededRandomSource:
    return SeededRandomSource(1234)


@pytest.fixture
def scripted_source() -> Callable[..., ScriptedRandomSource]:
    """Factory for sources returning the given values in order."""

    def factory(*values: int) -> ScriptedRandomSource:
        return ScriptedRandomSource(values)

    return factory
