"""Authentication server request/response shapes."""

from __future__ import annotations

from typing import Optional

from pydantic import Field

from .common import LitmusModel, LitmusRequest


class LoginRequest(LitmusRequest):
    username: str = Field(min_length=1)
    password: str = Field(min_length=1, repr=False)


class LoginResponse(LitmusModel):
    access_token: str = Field(default="", alias="accessToken")
    project_id: Optional[str] = Field(default=None, alias="projectID")
    expires_in: Optional[int] = Field(default=None, alias="expiresIn")
    token_type: Optional[str] = Field(default=None, alias="type")
