"""Chaos experiment and experiment run shapes."""

from __future__ import annotations

from typing import Any, List, Optional

from pydantic import Field, field_validator

from .common import LitmusModel, LitmusRequest, Pagination, UserDetails


class InfraReference(LitmusModel):
    name: str = ""
    infra_id: Optional[str] = Field(default=None, alias="infraID")
    environment_id: Optional[str] = Field(default=None, alias="environmentID")


class Experiment(LitmusModel):
    experiment_id: str = Field(alias="experimentID")
    name: str = ""
    description: Optional[str] = None
    experiment_manifest: Optional[str] = Field(default=None, alias="experimentManifest")
    cron_syntax: Optional[str] = Field(default=None, alias="cronSyntax")
    infra: Optional[InfraReference] = None
    tags: List[str] = Field(default_factory=list)
    updated_by: Optional[UserDetails] = Field(default=None, alias="updatedBy")

    @field_validator("tags", mode="before")
    @classmethod
    def _null_tags(cls, value: Any) -> Any:
        return value or []


class ExperimentList(LitmusModel):
    total: int = Field(default=0, alias="totalNoOfExperiments")
    experiments: List[Experiment] = Field(default_factory=list)

    @field_validator("experiments", mode="before")
    @classmethod
    def _null_experiments(cls, value: Any) -> Any:
        return value or []


class ExperimentRun(LitmusModel):
    experiment_run_id: str = Field(default="", alias="experimentRunID")
    experiment_id: str = Field(default="", alias="experimentID")
    experiment_name: str = Field(default="", alias="experimentName")
    project_id: Optional[str] = Field(default=None, alias="projectID")
    phase: str = ""
    resiliency_score: Optional[float] = Field(default=None, alias="resiliencyScore")
    faults_passed: Optional[int] = Field(default=None, alias="faultsPassed")
    faults_failed: Optional[int] = Field(default=None, alias="faultsFailed")
    faults_awaited: Optional[int] = Field(default=None, alias="faultsAwaited")
    faults_stopped: Optional[int] = Field(default=None, alias="faultsStopped")
    faults_na: Optional[int] = Field(default=None, alias="faultsNa")
    total_faults: Optional[int] = Field(default=None, alias="totalFaults")
    infra: Optional[InfraReference] = None
    updated_at: Optional[str] = Field(default=None, alias="updatedAt")
    updated_by: Optional[UserDetails] = Field(default=None, alias="updatedBy")


class ExperimentRunList(LitmusModel):
    total: int = Field(default=0, alias="totalNoOfExperimentRuns")
    experiment_runs: List[ExperimentRun] = Field(default_factory=list, alias="experimentRuns")

    @field_validator("experiment_runs", mode="before")
    @classmethod
    def _null_runs(cls, value: Any) -> Any:
        return value or []


class RecentRun(LitmusModel):
    experiment_run_id: str = Field(default="", alias="experimentRunID")
    phase: str = ""
    resiliency_score: Optional[float] = Field(default=None, alias="resiliencyScore")
    updated_at: Optional[str] = Field(default=None, alias="updatedAt")


class ExperimentDetails(LitmusModel):
    experiment_id: str = Field(default="", alias="experimentID")
    name: str = ""
    recent_runs: List[RecentRun] = Field(default_factory=list, alias="recentExperimentRunDetails")

    @field_validator("recent_runs", mode="before")
    @classmethod
    def _null_runs(cls, value: Any) -> Any:
        return value or []


class ExperimentStatus(LitmusModel):
    details: ExperimentDetails = Field(alias="experimentDetails")
    average_resiliency_score: Optional[float] = Field(default=None, alias="averageResiliencyScore")


class ExperimentConfig(LitmusRequest):
    """Caller-supplied options for saving an experiment."""

    experiment_id: Optional[str] = Field(default=None, alias="id")
    name: Optional[str] = None
    description: Optional[str] = None
    manifest: Optional[str] = None
    infra_id: Optional[str] = Field(default=None, alias="infraID")
    tags: Optional[List[str]] = None


class SaveChaosExperimentRequest(LitmusRequest):
    experiment_id: str = Field(alias="id", min_length=1)
    name: Optional[str] = None
    description: Optional[str] = None
    manifest: Optional[str] = None
    infra_id: Optional[str] = Field(default=None, alias="infraID")
    tags: Optional[List[str]] = None


class ListExperimentRequest(LitmusRequest):
    experiment_ids: Optional[List[str]] = Field(default=None, alias="experimentIDs")
    pagination: Optional[Pagination] = None


class ListExperimentRunRequest(LitmusRequest):
    experiment_ids: Optional[List[str]] = Field(default=None, alias="experimentIDs")
    experiment_run_ids: Optional[List[str]] = Field(default=None, alias="experimentRunIDs")
    pagination: Optional[Pagination] = None


class RunNotification(LitmusModel):
    notify_id: str = Field(default="", alias="notifyID")


class SaveExperimentData(LitmusModel):
    message: str = Field(alias="saveChaosExperiment")


class RunExperimentData(LitmusModel):
    run_chaos_experiment: RunNotification = Field(alias="runChaosExperiment")


class ExperimentListData(LitmusModel):
    list_experiment: ExperimentList = Field(alias="listExperiment")


class ExperimentRunListData(LitmusModel):
    list_experiment_run: ExperimentRunList = Field(alias="listExperimentRun")


class ExperimentRunData(LitmusModel):
    experiment_run: ExperimentRun = Field(alias="getExperimentRun")


class ExperimentStatusData(LitmusModel):
    experiment: ExperimentStatus = Field(alias="getExperiment")


class DeleteExperimentData(LitmusModel):
    is_deleted: bool = Field(alias="deleteChaosExperiment")
