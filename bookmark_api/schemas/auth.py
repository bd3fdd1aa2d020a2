from typing import Annotated

from pydantic import BaseModel, EmailStr, StringConstraints

NonEmptyStr = Annotated[str, StringConstraints(min_length=1)]


class AuthDto(BaseModel):
    email: EmailStr
    password: NonEmptyStr


class TokenResponse(BaseModel):
    access_token: str
