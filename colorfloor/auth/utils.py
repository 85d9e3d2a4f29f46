from datetime import datetime, timedelta, timezone
import jwt
from jwt.exceptions import InvalidTokenError
from colorfloor.config import SECRET_KEY, ALGORITHM, ACCESS_TOKEN_EXPIRE_MINUTES
from colorfloor.schemas import TokenData


def create_access_token(data: dict, expires_delta: timedelta | None = None):
    to_encode = data.copy()
    if expires_delta:
        expire = datetime.now(timezone.utc) + expires_delta
    else:
        expire = datetime.now(timezone.utc) + timedelta(minutes=ACCESS_TOKEN_EXPIRE_MINUTES)
    to_encode.update({"exp": expire})
    encoded_jwt = jwt.encode(to_encode, SECRET_KEY, algorithm=ALGORITHM)
    return encoded_jwt


def create_player_token(player_id: str, name: str) -> str:
    return create_access_token({"sub": player_id, "name": name})


def decode_player_token(token: str | None) -> TokenData | None:
    """Return the player a token was issued to, or None if it is missing, expired or forged."""
    if not token:
        return None
    try:
        payload = jwt.decode(token, SECRET_KEY, algorithms=[ALGORITHM])
    except InvalidTokenError:
        return None

    player_id = payload.get("sub")
    if not player_id:
        return None
    return TokenData(player_id=player_id, name=payload.get("name") or player_id)
