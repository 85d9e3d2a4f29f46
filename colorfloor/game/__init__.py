from .difficulty import DifficultyProfile
from .sampler import weighted_sample
from .weighting import compute_pad_distances, compute_pad_weights, weigh_pads
from .errors import MissingMapAsset, RoundError
from .round_engine import RoundEngine
from .session_loop import SessionLoop
from .arena import ArenaWorld, load_layout
from .notifier import ArenaNotifier
from .history import SqlRoundRecorder

__all__ = [
    "DifficultyProfile", "weighted_sample",
    "compute_pad_distances", "compute_pad_weights", "weigh_pads",
    "MissingMapAsset", "RoundError", "RoundEngine", "SessionLoop",
    "ArenaWorld", "load_layout", "ArenaNotifier", "SqlRoundRecorder",
]
