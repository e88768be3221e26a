from __future__ import annotations

import pytest

from mini_fuzzgen_py.core.rands import StdRand


def test_below_stays_in_range() -> None:
    rand = StdRand(42)
    for bound in (1, 2, 7, 256, 10_000):
        for _ in range(200):
            assert 0 <= rand.below(bound) < bound


def test_below_rejects_non_positive_bound() -> None:
    rand = StdRand(1)
    with pytest.raises(ValueError):
        rand.below(0)
    with pytest.raises(ValueError):
        rand.below(-3)


def test_choose_uses_below_and_rejects_empty() -> None:
    rand = StdRand(5)
    items = b"abc"
    assert all(rand.choose(items) in items for _ in range(50))
    with pytest.raises(ValueError):
        rand.choose(b"")


def test_same_seed_same_sequence() -> None:
    a = StdRand.with_seed(99)
    b = StdRand.with_seed(99)
    assert [a.below(1000) for _ in range(20)] == [b.below(1000) for _ in range(20)]
    assert a.next() == b.next()


def test_set_seed_restarts_sequence() -> None:
    rand = StdRand(7)
    first = [rand.below(256) for _ in range(10)]
    rand.set_seed(7)
    assert [rand.below(256) for _ in range(10)] == first
    assert rand.seed == 7


def test_between_is_inclusive() -> None:
    rand = StdRand(3)
    values = {rand.between(2, 4) for _ in range(300)}
    assert values == {2, 3, 4}
    assert rand.between(5, 5) == 5
    with pytest.raises(ValueError):
        rand.between(4, 2)


def test_unseeded_rand_gets_a_seed() -> None:
    rand = StdRand()
    assert isinstance(rand.seed, int)
    assert "StdRand(seed=" in repr(rand)


def test_fuzz_state_exposes_rand() -> None:
    from mini_fuzzgen_py.core.state import FuzzState, HasRand

    state = FuzzState.with_seed(8)
    assert isinstance(state, HasRand)
    assert isinstance(state.rand, StdRand)
    assert len(state.corpus) == 0
