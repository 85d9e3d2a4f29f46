from .utils import create_access_token, create_player_token, decode_player_token

__all__ = ["create_access_token", "create_player_token", "decode_player_token"]
