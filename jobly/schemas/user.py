# user.py
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _validate_email_like(v: str) -> str:
    value = (v or "").strip()
    if "@" not in value:
        raise ValueError("email must contain '@'")
    left, right = value.split("@", 1)
    if not left or not right:
        raise ValueError("email must have text before and after '@'")
    return value


class UserBase(BaseModel):
    email: str
    name: Optional[str] = None

    @field_validator("email")
    @classmethod
    def _validate_email(cls, v: str) -> str:
        return _validate_email_like(v)


class UserCreate(UserBase):
    password: str = Field(min_length=5)


class UserLogin(BaseModel):
    email: str
    password: str

    @field_validator("email")
    @classmethod
    def _validate_email(cls, v: str) -> str:
        return _validate_email_like(v)


class UserRead(UserBase):
    id: int
    is_admin: bool = False

    model_config = ConfigDict(from_attributes=True)


class Token(BaseModel):
    access_token: str
    token_type: str


class TokenData(BaseModel):
    user_id: int
