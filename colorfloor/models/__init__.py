from .color import Color, PALETTE, get_color
from .game import (
    Elimination,
    Phase,
    PlayerInfo,
    RoundSettings,
    RoundStage,
    RoundState,
    RoundStatus,
    RoundSummary,
)
from .arena import ArenaLayout, MapTemplate, Pad, PadContainer, RoundMap, Screen, ScreenContainer, Vec3
from .history import EliminationRecord, RoundRecord

__all__ = [
    "Color", "PALETTE", "get_color",
    "Elimination", "Phase", "PlayerInfo", "RoundSettings", "RoundStage", "RoundState", "RoundStatus", "RoundSummary",
    "ArenaLayout", "MapTemplate", "Pad", "PadContainer", "RoundMap", "Screen", "ScreenContainer", "Vec3",
    "EliminationRecord", "RoundRecord",
]
