"""Chaos environment shapes."""

from __future__ import annotations

from typing import Any, List, Literal, Optional

from pydantic import Field, field_validator

from ..constants import DEFAULT_TAGS
from .common import LitmusModel, LitmusRequest, Pagination, UserDetails

EnvironmentType = Literal["PROD", "NON_PROD"]


class Environment(LitmusModel):
    environment_id: str = Field(alias="environmentID")
    project_id: Optional[str] = Field(default=None, alias="projectID")
    name: str = ""
    description: Optional[str] = None
    type: Optional[str] = None
    tags: List[str] = Field(default_factory=list)
    infra_ids: List[str] = Field(default_factory=list, alias="infraIDs")
    created_at: Optional[str] = Field(default=None, alias="createdAt")
    updated_at: Optional[str] = Field(default=None, alias="updatedAt")
    created_by: Optional[UserDetails] = Field(default=None, alias="createdBy")
    updated_by: Optional[UserDetails] = Field(default=None, alias="updatedBy")
    is_removed: Optional[bool] = Field(default=None, alias="isRemoved")

    @field_validator("tags", "infra_ids", mode="before")
    @classmethod
    def _null_lists(cls, value: Any) -> Any:
        return value or []


class EnvironmentList(LitmusModel):
    total: int = Field(default=0, alias="totalNoOfEnvironments")
    environments: List[Environment] = Field(default_factory=list)

    @field_validator("environments", mode="before")
    @classmethod
    def _null_environments(cls, value: Any) -> Any:
        return value or []


class EnvironmentConfig(LitmusRequest):
    """Caller-supplied options for creating an environment."""

    environment_id: Optional[str] = Field(default=None, alias="environmentID")
    type: EnvironmentType = "NON_PROD"
    description: Optional[str] = None
    tags: List[str] = Field(default_factory=lambda: list(DEFAULT_TAGS))


class EnvironmentUpdate(LitmusRequest):
    """Caller-supplied fields for updating an environment; unset fields are left unchanged."""

    name: Optional[str] = None
    type: Optional[EnvironmentType] = None
    description: Optional[str] = None
    tags: Optional[List[str]] = None


class CreateEnvironmentRequest(LitmusRequest):
    environment_id: str = Field(alias="environmentID", min_length=1)
    name: str = Field(min_length=1)
    type: EnvironmentType
    description: Optional[str] = None
    tags: List[str] = Field(default_factory=list)


class UpdateEnvironmentRequest(LitmusRequest):
    environment_id: str = Field(alias="environmentID", min_length=1)
    name: Optional[str] = None
    type: Optional[EnvironmentType] = None
    description: Optional[str] = None
    tags: Optional[List[str]] = None


class ListEnvironmentRequest(LitmusRequest):
    environment_ids: Optional[List[str]] = Field(default=None, alias="environmentIDs")
    pagination: Optional[Pagination] = None


class CreateEnvironmentData(LitmusModel):
    create_environment: Environment = Field(alias="createEnvironment")


class ListEnvironmentData(LitmusModel):
    list_environments: EnvironmentList = Field(alias="listEnvironments")


class GetEnvironmentData(LitmusModel):
    get_environment: Environment = Field(alias="getEnvironment")


class UpdateEnvironmentData(LitmusModel):
    update_environment: str = Field(alias="updateEnvironment")


class DeleteEnvironmentData(LitmusModel):
    delete_environment: str = Field(alias="deleteEnvironment")
