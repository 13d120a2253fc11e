"""Chaos infrastructure shapes."""

from __future__ import annotations

import json
from typing import Any, List, Literal, Optional

from pydantic import Field, field_validator

from ..constants import (
    DEFAULT_INFRA_NAMESPACE,
    DEFAULT_PLATFORM_NAME,
    DEFAULT_SERVICE_ACCOUNT,
    INFRASTRUCTURE_TYPE_KUBERNETES,
)
from ..utils import check_key_value_format
from .common import LitmusModel, LitmusRequest, Pagination, UserDetails

InfraScope = Literal["namespace", "cluster"]


class Infra(LitmusModel):
    infra_id: str = Field(alias="infraID")
    name: str = ""
    description: Optional[str] = None
    environment_id: Optional[str] = Field(default=None, alias="environmentID")
    platform_name: Optional[str] = Field(default=None, alias="platformName")
    is_active: Optional[bool] = Field(default=None, alias="isActive")
    is_infra_confirmed: Optional[bool] = Field(default=None, alias="isInfraConfirmed")
    infra_namespace: Optional[str] = Field(default=None, alias="infraNamespace")
    service_account: Optional[str] = Field(default=None, alias="serviceAccount")
    infra_scope: Optional[str] = Field(default=None, alias="infraScope")
    version: Optional[str] = None
    start_time: Optional[str] = Field(default=None, alias="startTime")
    last_heartbeat: Optional[str] = Field(default=None, alias="lastHeartbeat")
    no_of_experiments: Optional[int] = Field(default=None, alias="noOfExperiments")
    no_of_experiment_runs: Optional[int] = Field(default=None, alias="noOfExperimentRuns")
    tags: List[str] = Field(default_factory=list)
    created_at: Optional[str] = Field(default=None, alias="createdAt")
    updated_at: Optional[str] = Field(default=None, alias="updatedAt")
    created_by: Optional[UserDetails] = Field(default=None, alias="createdBy")
    updated_by: Optional[UserDetails] = Field(default=None, alias="updatedBy")

    @field_validator("tags", mode="before")
    @classmethod
    def _null_tags(cls, value: Any) -> Any:
        return value or []


class InfraList(LitmusModel):
    total: int = Field(default=0, alias="totalNoOfInfras")
    infras: List[Infra] = Field(default_factory=list)

    @field_validator("infras", mode="before")
    @classmethod
    def _null_infras(cls, value: Any) -> Any:
        return value or []


class Toleration(LitmusRequest):
    toleration_seconds: Optional[int] = Field(default=None, alias="tolerationSeconds")
    key: Optional[str] = None
    operator: Optional[str] = None
    effect: Optional[str] = None
    value: Optional[str] = None


def _parse_tolerations(value: Any) -> Any:
    # Accept the JSON string form used by the CLI tooling
    if isinstance(value, str):
        if not value.strip():
            return None
        try:
            return json.loads(value)
        except ValueError as exc:
            raise ValueError(f"tolerations is not valid JSON: {exc}") from exc
    return value


def _check_node_selector(value: Optional[str]) -> Optional[str]:
    if value and not check_key_value_format(value):
        raise ValueError('node selector must use the format "key1=value1,key2=value2"')
    return value or None


class InfraConfig(LitmusRequest):
    """Caller-supplied options for registering an infrastructure."""

    environment_id: str = Field(alias="environmentID", min_length=1)
    description: Optional[str] = None
    platform_name: str = Field(default=DEFAULT_PLATFORM_NAME, alias="platformName")
    namespace: str = DEFAULT_INFRA_NAMESPACE
    service_account: str = Field(default=DEFAULT_SERVICE_ACCOUNT, alias="serviceAccount")
    ns_exists: bool = Field(default=False, alias="nsExists")
    sa_exists: bool = Field(default=False, alias="saExists")
    skip_ssl: bool = Field(default=False, alias="skipSSL")
    node_selector: Optional[str] = Field(default=None, alias="nodeSelector")
    tolerations: Optional[List[Toleration]] = None
    mode: InfraScope = "namespace"
    tags: Optional[List[str]] = None

    @field_validator("tolerations", mode="before")
    @classmethod
    def _decode_tolerations(cls, value: Any) -> Any:
        return _parse_tolerations(value)

    @field_validator("node_selector")
    @classmethod
    def _validate_node_selector(cls, value: Optional[str]) -> Optional[str]:
        return _check_node_selector(value)


class RegisterInfraRequest(LitmusRequest):
    name: str = Field(min_length=1)
    environment_id: str = Field(alias="environmentID", min_length=1)
    infrastructure_type: str = Field(default=INFRASTRUCTURE_TYPE_KUBERNETES, alias="infrastructureType")
    infra_scope: InfraScope = Field(default="namespace", alias="infraScope")
    description: Optional[str] = None
    platform_name: str = Field(default=DEFAULT_PLATFORM_NAME, alias="platformName")
    infra_namespace: Optional[str] = Field(default=None, alias="infraNamespace")
    service_account: Optional[str] = Field(default=None, alias="serviceAccount")
    infra_ns_exists: Optional[bool] = Field(default=None, alias="infraNsExists")
    infra_sa_exists: Optional[bool] = Field(default=None, alias="infraSaExists")
    skip_ssl: Optional[bool] = Field(default=None, alias="skipSsl")
    node_selector: Optional[str] = Field(default=None, alias="nodeSelector")
    tolerations: Optional[List[Toleration]] = None
    tags: Optional[List[str]] = None

    @classmethod
    def from_config(cls, name: str, config: InfraConfig) -> RegisterInfraRequest:
        return cls(
            name=name,
            environment_id=config.environment_id,
            infra_scope=config.mode,
            description=config.description or f"Infrastructure created via Litmus SDK: {name}",
            platform_name=config.platform_name,
            infra_namespace=config.namespace,
            service_account=config.service_account,
            infra_ns_exists=config.ns_exists,
            infra_sa_exists=config.sa_exists,
            skip_ssl=config.skip_ssl,
            node_selector=config.node_selector,
            tolerations=config.tolerations,
            tags=config.tags,
        )


class ListInfraRequest(LitmusRequest):
    infra_ids: Optional[List[str]] = Field(default=None, alias="infraIDs")
    environment_ids: Optional[List[str]] = Field(default=None, alias="environmentIDs")
    pagination: Optional[Pagination] = None


class RegisteredInfra(LitmusModel):
    infra_id: str = Field(alias="infraID")
    name: str = ""
    token: Optional[str] = Field(default=None, repr=False)
    manifest: Optional[str] = Field(default=None, repr=False)


class ServerVersion(LitmusModel):
    key: str = ""
    value: str = ""


class ListInfraData(LitmusModel):
    list_infras: InfraList = Field(alias="listInfras")


class RegisterInfraData(LitmusModel):
    register_infra: RegisteredInfra = Field(alias="registerInfra")


class DeleteInfraData(LitmusModel):
    message: str = Field(alias="deleteInfra")


class ServerVersionData(LitmusModel):
    server_version: ServerVersion = Field(alias="getServerVersion")
