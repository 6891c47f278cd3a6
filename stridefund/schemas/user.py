"""User Schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator


class UserCreate(BaseModel):
    email: str = Field(min_length=3, max_length=255, pattern=r"^[^@\s]+@[^@\s]+$")
    username: str = Field(min_length=1, max_length=50)
    full_name: str | None = Field(None, max_length=200)
    bio: str | None = Field(None, max_length=2000)

    @field_validator("username")
    @classmethod
    def strip_username(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("username cannot be empty or whitespace")
        return v


class UserUpdate(BaseModel):
    username: str | None = Field(None, min_length=1, max_length=50)
    full_name: str | None = Field(None, max_length=200)
    bio: str | None = Field(None, max_length=2000)


class UserResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    email: str
    username: str
    full_name: str | None
    bio: str | None
    created_at: datetime
