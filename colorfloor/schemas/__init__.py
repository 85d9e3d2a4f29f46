from .player import JoinRequest, Token, TokenData
from .status import ArenaStatus, EliminationPublic, PlayerPublic, RoundDetail, RoundPublic

__all__ = [
    "JoinRequest", "Token", "TokenData",
    "ArenaStatus", "EliminationPublic", "PlayerPublic", "RoundDetail", "RoundPublic",
]
