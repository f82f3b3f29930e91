from __future__ import annotations

from pydantic import BaseModel, Field


class ProfileOut(BaseModel):
    id: int
    email: str
    display_name: str | None
    is_active: bool
    api_key_prefix: str | None

    class Config:
        from_attributes = True


class ProfilePatch(BaseModel):
    display_name: str | None = Field(default=None, max_length=120)


class ApiKeyOut(BaseModel):
    api_key: str
    prefix: str
