from __future__ import annotations

import logging
from typing import Any

import pytest

from mini_fuzzgen_py.core.monitor import GenerationMonitor
from mini_fuzzgen_py.core.seeding import seed_corpus, seed_dummies
from mini_fuzzgen_py.core.state import FuzzState
from mini_fuzzgen_py.errors import FuzzGenError, GenerationError
from mini_fuzzgen_py.generators import RandBytesGenerator, RandPrintablesGenerator
from mini_fuzzgen_py.generators.base import SizedGenerator
from mini_fuzzgen_py.inputs import BytesInput


class ExhaustedGenerator(SizedGenerator):
    """Fails every other call, like a grammar that runs out of productions."""

    def __init__(self, max_size: int) -> None:
        super().__init__(max_size)
        self.calls = 0

    def generate(self, state: Any) -> BytesInput:
        self.calls += 1
        if self.calls % 2 == 0:
            raise GenerationError("grammar exhausted")
        return BytesInput(b"ok")


def test_seed_corpus_adds_generated_inputs(seeded_state) -> None:
    stats = GenerationMonitor()
    ids = seed_corpus(seeded_state, RandPrintablesGenerator(16), 10, stats=stats)
    assert ids == list(range(1, 11))
    assert len(seeded_state.corpus) == 10
    assert len(stats.records) == 10
    assert stats.dummy_count == 0


def test_seed_corpus_falls_back_to_dummy(seeded_state, caplog) -> None:
    stats = GenerationMonitor()
    with caplog.at_level(logging.WARNING):
        seed_corpus(seeded_state, ExhaustedGenerator(3), 4, stats=stats)
    assert [i.bytes() for i in seeded_state.corpus] == [b"ok", b"\x00\x00\x00", b"ok", b"\x00\x00\x00"]
    assert stats.dummy_count == 2
    assert "grammar exhausted" in caplog.text


def test_seed_corpus_without_fallback_raises(seeded_state) -> None:
    with pytest.raises(GenerationError):
        seed_corpus(seeded_state, ExhaustedGenerator(3), 2, fallback_to_dummy=False)
    assert len(seeded_state.corpus) == 1
    assert issubclass(GenerationError, FuzzGenError)


def test_seed_corpus_is_reproducible() -> None:
    s1 = FuzzState.with_seed(11)
    s2 = FuzzState.with_seed(11)
    seed_corpus(s1, RandBytesGenerator(40), 5)
    seed_corpus(s2, RandBytesGenerator(40), 5)
    assert list(s1.corpus) == list(s2.corpus)


def test_seed_dummies_uses_no_entropy(zero_state) -> None:
    ids = seed_dummies(zero_state, RandBytesGenerator(100), 3)
    assert ids == [1, 2, 3]
    assert all(i.bytes() == bytes(64) for i in zero_state.corpus)
    assert zero_state.rand.calls == []


def test_negative_num_rejected(zero_state) -> None:
    with pytest.raises(ValueError):
        seed_corpus(zero_state, RandBytesGenerator(4), -1)
    with pytest.raises(ValueError):
        seed_dummies(zero_state, RandBytesGenerator(4), -1)
