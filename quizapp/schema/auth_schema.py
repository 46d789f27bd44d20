from pydantic import BaseModel

from quizapp.schema.base import CamelModel


class LoginRequest(BaseModel):
    username: str
    password: str


class UserOut(CamelModel):
    id: int
    username: str
    full_name: str
    role: str


class LoginResponse(BaseModel):
    token: str
    user: UserOut


class TokenPayload(BaseModel):
    """Payload for Bearer Access Token"""
    sub: str  # user id
    username: str
    role: str
    exp: int
    iat: int

    @property
    def user_id(self) -> int:
        return int(self.sub)
