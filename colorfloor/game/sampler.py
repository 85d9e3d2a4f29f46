import random
from typing import Sequence, TypeVar

T = TypeVar("T")


def weighted_sample(
    pool: Sequence[tuple[T, float]], count: int, rng: random.Random | None = None
) -> list[T]:
    """Pick up to ``count`` unique items, each draw proportional to weight.

    When every remaining weight is zero the first remaining item is taken,
    so a zero-weight item is never reached through the random draw.
    """
    rng = rng or random
    remaining = list(pool)
    result: list[T] = []

    for _ in range(count):
        if not remaining:
            break

        total = sum(weight for _, weight in remaining)
        if total <= 0:
            item, _ = remaining.pop(0)
            result.append(item)
            continue

        pick = rng.uniform(0, total)
        running = 0.0
        chosen = 0
        for idx, (_, weight) in enumerate(remaining):
            running += weight
            if weight > 0 and pick <= running:
                chosen = idx
                break
        else:
            # float rounding can leave pick a hair above the final running sum
            chosen = max(i for i, (_, w) in enumerate(remaining) if w > 0)

        item, _ = remaining.pop(chosen)
        result.append(item)

    return result
