from pydantic import BaseModel, Field


class JoinRequest(BaseModel):
    name: str = Field(min_length=1, max_length=32)


class Token(BaseModel):
    access_token: str
    token_type: str
    player_id: str


class TokenData(BaseModel):
    player_id: str
    name: str
