import math
from typing import Mapping

from ..config import DISTANCE_CAP_MARGIN
from ..models import Pad, Vec3


def compute_pad_distances(
    pads: list[Pad], player_positions: Mapping[str, Vec3 | None]
) -> list[float]:
    """Distance from each pad to its closest player, ``inf`` if nobody has a body."""
    positions = [p for p in player_positions.values() if p is not None]
    distances = []
    for pad in pads:
        closest = math.inf
        for position in positions:
            d = math.dist(pad.position, position)
            if d < closest:
                closest = d
        distances.append(closest)
    return distances


def compute_pad_weights(
    distances: list[float], cap_margin: float = DISTANCE_CAP_MARGIN
) -> list[float]:
    """Farther pads weigh more, up to ``mean + cap_margin``; every weight is at least 1."""
    finite = [d for d in distances if d != math.inf]
    average = sum(finite) / len(finite) if finite else 0.0
    cap = average + cap_margin

    weights = []
    for d in distances:
        effective = d if d != math.inf else 0.0
        weights.append(min(effective, cap) + 1)
    return weights


def weigh_pads(
    pads: list[Pad],
    player_positions: Mapping[str, Vec3 | None],
    cap_margin: float = DISTANCE_CAP_MARGIN,
) -> list[tuple[Pad, float]]:
    distances = compute_pad_distances(pads, player_positions)
    return list(zip(pads, compute_pad_weights(distances, cap_margin)))
