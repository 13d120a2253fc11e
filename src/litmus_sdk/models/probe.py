"""Resilience probe shapes.

A probe carries exactly one properties block, and the block must match the
probe ``type``. ``ProbeRequest`` enforces this when it is built, so a bad
request never reaches the network.
"""

from __future__ import annotations

from typing import Any, List, Literal, Optional

from pydantic import Field, field_validator, model_validator

from ..constants import INFRASTRUCTURE_TYPE_KUBERNETES
from .common import LitmusModel, LitmusRequest, UserDetails

ProbeType = Literal["httpProbe", "cmdProbe", "promProbe", "k8sProbe"]
ProbeVerdictMode = Literal["SOT", "EOT", "Edge", "Continuous", "OnChaos"]

# probe type -> (python field, remote field)
PROPERTIES_FIELD_BY_TYPE = {
    "httpProbe": ("kubernetes_http_properties", "kubernetesHTTPProperties"),
    "cmdProbe": ("kubernetes_cmd_properties", "kubernetesCMDProperties"),
    "k8sProbe": ("k8s_properties", "k8sProperties"),
    "promProbe": ("prom_properties", "promProperties"),
}


class ProbeRunProperties(LitmusRequest):
    probe_timeout: Optional[str] = Field(default=None, alias="probeTimeout")
    interval: Optional[str] = None
    retry: Optional[int] = None
    attempt: Optional[int] = None
    probe_polling_interval: Optional[str] = Field(default=None, alias="probePollingInterval")
    initial_delay: Optional[str] = Field(default=None, alias="initialDelay")
    evaluation_timeout: Optional[str] = Field(default=None, alias="evaluationTimeout")
    stop_on_failure: Optional[bool] = Field(default=None, alias="stopOnFailure")


class Comparator(LitmusRequest):
    type: str
    value: str
    criteria: str


class GetMethod(LitmusRequest):
    criteria: str
    response_code: str = Field(alias="responseCode")


class PostMethod(LitmusRequest):
    content_type: Optional[str] = Field(default=None, alias="contentType")
    body: Optional[str] = None
    body_path: Optional[str] = Field(default=None, alias="bodyPath")
    criteria: str
    response_code: str = Field(alias="responseCode")


class HTTPMethod(LitmusRequest):
    get: Optional[GetMethod] = None
    post: Optional[PostMethod] = None


class KubernetesHTTPProperties(ProbeRunProperties):
    url: str
    method: HTTPMethod
    insecure_skip_verify: Optional[bool] = Field(default=None, alias="insecureSkipVerify")


class KubernetesCMDProperties(ProbeRunProperties):
    command: str
    comparator: Comparator
    source: Optional[str] = None


class K8SProperties(ProbeRunProperties):
    group: Optional[str] = None
    version: Optional[str] = None
    resource: Optional[str] = None
    resource_names: Optional[str] = Field(default=None, alias="resourceNames")
    namespace: Optional[str] = None
    field_selector: Optional[str] = Field(default=None, alias="fieldSelector")
    label_selector: Optional[str] = Field(default=None, alias="labelSelector")
    operation: Optional[str] = None


class PROMProperties(ProbeRunProperties):
    endpoint: str
    query: Optional[str] = None
    query_path: Optional[str] = Field(default=None, alias="queryPath")
    comparator: Optional[Comparator] = None


class ProbeRequest(LitmusRequest):
    name: str = Field(min_length=1)
    type: ProbeType
    description: Optional[str] = None
    tags: Optional[List[str]] = None
    infrastructure_type: str = Field(default=INFRASTRUCTURE_TYPE_KUBERNETES, alias="infrastructureType")
    kubernetes_http_properties: Optional[KubernetesHTTPProperties] = Field(
        default=None, alias="kubernetesHTTPProperties"
    )
    kubernetes_cmd_properties: Optional[KubernetesCMDProperties] = Field(default=None, alias="kubernetesCMDProperties")
    k8s_properties: Optional[K8SProperties] = Field(default=None, alias="k8sProperties")
    prom_properties: Optional[PROMProperties] = Field(default=None, alias="promProperties")

    @model_validator(mode="after")
    def _check_properties(self) -> ProbeRequest:
        provided = [name for name, _ in PROPERTIES_FIELD_BY_TYPE.values() if getattr(self, name) is not None]
        if not provided:
            raise ValueError("no probe properties provided")
        if len(provided) > 1:
            raise ValueError("multiple probe property types provided, only one is allowed")

        expected, remote = PROPERTIES_FIELD_BY_TYPE[self.type]
        if provided[0] != expected:
            raise ValueError(f"{self.type} type requires {remote}")
        return self


class Probe(LitmusModel):
    name: str
    description: Optional[str] = None
    type: Optional[str] = None
    infrastructure_type: Optional[str] = Field(default=None, alias="infrastructureType")
    tags: List[str] = Field(default_factory=list)
    kubernetes_http_properties: Optional[KubernetesHTTPProperties] = Field(
        default=None, alias="kubernetesHTTPProperties"
    )
    kubernetes_cmd_properties: Optional[KubernetesCMDProperties] = Field(default=None, alias="kubernetesCMDProperties")
    k8s_properties: Optional[K8SProperties] = Field(default=None, alias="k8sProperties")
    prom_properties: Optional[PROMProperties] = Field(default=None, alias="promProperties")
    created_at: Optional[str] = Field(default=None, alias="createdAt")
    updated_at: Optional[str] = Field(default=None, alias="updatedAt")
    created_by: Optional[UserDetails] = Field(default=None, alias="createdBy")
    updated_by: Optional[UserDetails] = Field(default=None, alias="updatedBy")

    @field_validator("tags", mode="before")
    @classmethod
    def _null_tags(cls, value: Any) -> Any:
        return value or []


class GetProbeYAMLRequest(LitmusRequest):
    probe_name: str = Field(default="", alias="probeName")
    mode: ProbeVerdictMode = "SOT"


class AddProbeData(LitmusModel):
    probe: Probe = Field(alias="addProbe")


class ListProbeData(LitmusModel):
    probes: List[Probe] = Field(alias="listProbes")

    @field_validator("probes", mode="before")
    @classmethod
    def _null_probes(cls, value: Any) -> Any:
        return value or []


class GetProbeData(LitmusModel):
    probe: Probe = Field(alias="getProbe")


class DeleteProbeData(LitmusModel):
    deleted: bool = Field(alias="deleteProbe")


class ProbeYAMLData(LitmusModel):
    manifest: str = Field(alias="getProbeYAML")
