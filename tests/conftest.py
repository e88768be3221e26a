from __future__ import annotations

from typing import Iterable, List

import pytest

from mini_fuzzgen_py.core.corpus import Corpus
from mini_fuzzgen_py.core.rands import RandomSource
from mini_fuzzgen_py.core.state import FuzzState


class ConstantRand(RandomSource):
    """Always draws the same value (clamped into range)."""

    def __init__(self, value: int = 0) -> None:
        self.value = value
        self.calls: List[int] = []

    def below(self, bound: int) -> int:
        self.calls.append(bound)
        return min(self.value, bound - 1)


class ScriptedRand(RandomSource):
    """Replays a fixed sequence of below() results and records the bounds asked for."""

    def __init__(self, values: Iterable[int]) -> None:
        self.values = list(values)
        self.calls: List[int] = []

    def below(self, bound: int) -> int:
        self.calls.append(bound)
        value = self.values.pop(0)
        assert 0 <= value < bound
        return value


@pytest.fixture
def zero_state() -> FuzzState:
    return FuzzState(rand=ConstantRand(0), corpus=Corpus())


@pytest.fixture
def seeded_state() -> FuzzState:
    return FuzzState.with_seed(1234)
