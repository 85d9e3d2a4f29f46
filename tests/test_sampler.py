import random
from collections import Counter

from colorfloor.game import weighted_sample


class _FixedDraw:
    def __init__(self, value: float) -> None:
        self.value = value

    def uniform(self, a: float, b: float) -> float:
        return self.value


def test_dominant_weight_always_wins():
    rng = random.Random(7)
    pool = [("a", 10), ("b", 0), ("c", 0)]
    picks = Counter(weighted_sample(pool, 1, rng)[0] for _ in range(500))
    assert picks == {"a": 500}


def test_all_zero_weights_keep_original_order():
    pool = [("a", 0), ("b", 0), ("c", 0)]
    assert weighted_sample(pool, 3, random.Random(1)) == ["a", "b", "c"]


def test_zero_weight_is_skipped_even_when_draw_is_zero():
    pool = [("zero", 0), ("heavy", 5)]
    assert weighted_sample(pool, 1, _FixedDraw(0.0)) == ["heavy"]


def test_draw_at_upper_bound_picks_last_positive_item():
    pool = [("a", 1), ("b", 2), ("c", 0)]
    assert weighted_sample(pool, 1, _FixedDraw(3.0)) == ["b"]


def test_no_duplicates_and_bounded_length():
    rng = random.Random(99)
    pool = [(i, rng.random() * 5) for i in range(20)]
    for count in (0, 1, 5, 20, 50):
        result = weighted_sample(pool, count, rng)
        assert len(result) == min(count, len(pool))
        assert len(set(result)) == len(result)


def test_empty_pool_returns_nothing():
    assert weighted_sample([], 3) == []


def test_heavier_items_are_picked_more_often():
    rng = random.Random(3)
    pool = [("light", 1), ("heavy", 9)]
    picks = Counter(weighted_sample(pool, 1, rng)[0] for _ in range(2000))
    assert picks["heavy"] > picks["light"] * 4


def test_pool_is_not_mutated():
    pool = [("a", 1), ("b", 1)]
    weighted_sample(pool, 2, random.Random(0))
    assert pool == [("a", 1), ("b", 1)]
