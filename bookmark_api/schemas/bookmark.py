from datetime import datetime
from typing import Annotated

from pydantic import AfterValidator, BaseModel, field_validator
from pydantic.alias_generators import to_camel

MAX_DESCRIPTION_LENGTH = 2000


def _check_not_blank(value: str) -> str:
    # blank is judged on the stripped text, the caller's text is what gets stored
    if not value.strip():
        raise ValueError('Field must not be empty.')
    return value


RequiredStr = Annotated[str, AfterValidator(_check_not_blank)]


def _check_description(value: str | None) -> str | None:
    if value is not None and len(value) > MAX_DESCRIPTION_LENGTH:
        raise ValueError(f'Description must be {MAX_DESCRIPTION_LENGTH} characters or fewer.')
    return value


class CreateBookmarkDto(BaseModel):
    title: RequiredStr
    link: RequiredStr
    description: str | None = None

    @field_validator('description')
    @classmethod
    def validate_description(cls, value: str | None) -> str | None:
        return _check_description(value)


class EditBookmarkDto(BaseModel):
    title: RequiredStr | None = None
    link: RequiredStr | None = None
    description: str | None = None

    @field_validator('title', 'link')
    @classmethod
    def reject_null(cls, value: str | None) -> str:
        # only runs when the key was sent; omitting it leaves the column alone
        if value is None:
            raise ValueError('Field cannot be null.')
        return value

    @field_validator('description')
    @classmethod
    def validate_description(cls, value: str | None) -> str | None:
        return _check_description(value)


class BookmarkResponse(BaseModel):
    id: int
    title: str
    link: str
    description: str | None = None
    user_id: int
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
        alias_generator = to_camel
        populate_by_name = True
