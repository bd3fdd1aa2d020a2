from datetime import datetime
from typing import Annotated

from pydantic import BaseModel, EmailStr, StringConstraints, field_validator
from pydantic.alias_generators import to_camel

NameStr = Annotated[str, StringConstraints(strip_whitespace=True, max_length=100)]


class EditUserDto(BaseModel):
    email: EmailStr | None = None
    first_name: NameStr | None = None
    last_name: NameStr | None = None

    class Config:
        alias_generator = to_camel
        populate_by_name = True

    @field_validator('email')
    @classmethod
    def validate_email(cls, value: str | None) -> str:
        if value is None:
            raise ValueError('Email cannot be null.')
        return value


class UserResponse(BaseModel):
    id: int
    email: str
    first_name: str | None = None
    last_name: str | None = None
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
        alias_generator = to_camel
        populate_by_name = True
