import math

from ..models import RoundSettings


class DifficultyProfile:
    """Correct-pad fraction and tick interval as a round escalates."""

    def __init__(self, settings: RoundSettings | None = None):
        self.settings = settings or RoundSettings()

    @property
    def initial_interval(self) -> float:
        return self.settings.initial_target_interval

    def fraction(self, round_index: int) -> float:
        s = self.settings
        value = s.start_target_fraction - (round_index - 1) * s.fraction_decrease_per_round
        # rounding absorbs float drift such as 0.3 - 2 * 0.05 == 0.19999999999999998
        return max(s.min_target_fraction, round(value, 9))

    def num_correct(self, total_pads: int, fraction: float) -> int:
        if total_pads <= 0:
            return 0
        return max(1, math.floor(total_pads * fraction))

    def next_interval(self, previous_interval: float) -> float:
        s = self.settings
        return max(s.min_target_interval, previous_interval - s.interval_decrease_per_tick)
