"""Project bootstrap shapes (REST authentication server).

The authentication server is not consistent about field casing between
endpoints (``projectID`` vs ``ProjectID``), so these models accept both.
"""

from __future__ import annotations

from typing import Any, List, Optional

from pydantic import AliasChoices, Field, field_validator

from .common import ErrorEntry, LitmusModel, LitmusRequest


class ProjectMember(LitmusModel):
    role: Optional[str] = Field(default=None, validation_alias=AliasChoices("role", "Role"))
    user_id: Optional[str] = Field(default=None, validation_alias=AliasChoices("userID", "UserID"))
    username: Optional[str] = Field(default=None, validation_alias=AliasChoices("username", "Username"))


class Project(LitmusModel):
    project_id: str = Field(validation_alias=AliasChoices("projectID", "ProjectID", "ID", "id"))
    name: str = Field(default="", validation_alias=AliasChoices("name", "Name"))
    created_at: Optional[int] = Field(default=None, validation_alias=AliasChoices("createdAt", "CreatedAt"))
    members: List[ProjectMember] = Field(default_factory=list, validation_alias=AliasChoices("members", "Members"))

    @field_validator("members", mode="before")
    @classmethod
    def _null_members(cls, value: Any) -> Any:
        return value or []


class ProjectList(LitmusModel):
    projects: List[Project] = Field(default_factory=list)
    total: int = Field(default=0, alias="totalNumberOfProjects")

    @field_validator("projects", mode="before")
    @classmethod
    def _null_projects(cls, value: Any) -> Any:
        return value or []


class ProjectDetails(LitmusModel):
    user_id: str = Field(default="", validation_alias=AliasChoices("ID", "userID"))
    projects: List[Project] = Field(default_factory=list, validation_alias=AliasChoices("Projects", "projects"))

    @field_validator("projects", mode="before")
    @classmethod
    def _null_projects(cls, value: Any) -> Any:
        return value or []


class CreateProjectRequest(LitmusRequest):
    project_name: str = Field(alias="projectName", min_length=1)


class RestEnvelope(LitmusModel):
    """``{"message", "data", "errors"}`` body returned by the authentication server."""

    message: Optional[str] = None
    data: Any = None
    errors: List[ErrorEntry] = Field(default_factory=list)

    @field_validator("errors", mode="before")
    @classmethod
    def _null_errors(cls, value: Any) -> Any:
        return value or []
