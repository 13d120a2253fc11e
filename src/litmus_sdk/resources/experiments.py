"""Chaos experiment operations."""

from __future__ import annotations

import logging
from typing import Any, Mapping, Union

from .. import queries
from ..exceptions import OperationFailedError
from ..models import (
    ExperimentConfig,
    ExperimentList,
    ExperimentRun,
    ExperimentRunList,
    ExperimentStatus,
    ListExperimentRequest,
    ListExperimentRunRequest,
    SaveChaosExperimentRequest,
)
from ..models.experiment import (
    DeleteExperimentData,
    ExperimentListData,
    ExperimentRunData,
    ExperimentRunListData,
    ExperimentStatusData,
    RunExperimentData,
    SaveExperimentData,
)
from ..utils import generate_name_id
from .base import ResourceClient

logger = logging.getLogger(__name__)

ConfigInput = Union[ExperimentConfig, Mapping[str, Any], None]


class ExperimentsClient(ResourceClient):
    """Project-scoped experiment and experiment run operations."""

    def _save(self, project_id: str, request: SaveChaosExperimentRequest, error_context: str) -> str:
        data = self._graphql(
            queries.SAVE_EXPERIMENT_MUTATION,
            {"projectID": project_id, "request": request},
            SaveExperimentData,
            error_context,
        )
        return data.message

    def list(self, request: Union[ListExperimentRequest, Mapping[str, Any], None] = None) -> ExperimentList:
        project_id = self._project_id()
        request = ListExperimentRequest.parse(request)

        data = self._graphql(
            queries.LIST_EXPERIMENTS_QUERY,
            {"projectID": project_id, "request": request},
            ExperimentListData,
            "failed to list experiments",
        )
        return data.list_experiment

    def list_runs(self, request: Union[ListExperimentRunRequest, Mapping[str, Any], None] = None) -> ExperimentRunList:
        project_id = self._project_id()
        request = ListExperimentRunRequest.parse(request)

        data = self._graphql(
            queries.LIST_EXPERIMENT_RUNS_QUERY,
            {"projectID": project_id, "request": request},
            ExperimentRunListData,
            "failed to list experiment runs",
        )
        return data.list_experiment_run

    def create(self, name: str, config: ConfigInput = None) -> str:
        """Save a new experiment and return the server's message.

        The experiment ID defaults to ``name`` reduced to lower-case letters,
        digits and underscores.

        Raises:
            ValidationError: If ``name`` is empty, no project is active or ``config`` is invalid
        """
        project_id = self._project_id()
        self._require(name, "experiment name")
        config = ExperimentConfig.parse(config)

        request = SaveChaosExperimentRequest.parse(
            {
                "id": config.experiment_id or generate_name_id(name),
                "name": name,
                "description": config.description or f"Experiment created via Litmus SDK: {name}",
                "manifest": config.manifest,
                "infraID": config.infra_id,
                "tags": config.tags,
            }
        )
        message = self._save(project_id, request, "failed to create experiment")
        logger.info(f"Saved experiment {request.name} ({request.experiment_id})")
        return message

    def create_and_run(self, name: str, config: ConfigInput = None) -> str:
        """Save a new experiment, trigger a run of it and return the run's notify ID."""
        self._project_id()
        self._require(name, "experiment name")
        config = ExperimentConfig.parse(config)
        experiment_id = config.experiment_id or generate_name_id(name)

        self.create(name, config.model_copy(update={"experiment_id": experiment_id}))
        return self.run(experiment_id)

    def update(self, experiment_id: str, config: Union[ExperimentConfig, Mapping[str, Any]]) -> str:
        """Save ``config`` over the existing experiment ``experiment_id``."""
        project_id = self._project_id()
        self._require(experiment_id, "experiment ID")
        config = ExperimentConfig.parse(config)

        request = SaveChaosExperimentRequest.parse(
            {
                "id": experiment_id,
                "name": config.name,
                "description": config.description,
                "manifest": config.manifest,
                "infraID": config.infra_id,
                "tags": config.tags,
            }
        )
        return self._save(project_id, request, "failed to update experiment")

    def get(self, run_id: str) -> ExperimentRun:
        """Return the experiment run ``run_id``."""
        project_id = self._project_id()
        self._require(run_id, "experiment run ID")

        data = self._graphql(
            queries.GET_EXPERIMENT_RUN_QUERY,
            {"projectID": project_id, "experimentRunID": run_id},
            ExperimentRunData,
            "failed to get experiment run",
        )
        return data.experiment_run

    def get_run_phase(self, run_id: str) -> str:
        return self.get(run_id).phase

    def get_status(self, experiment_id: str) -> ExperimentStatus:
        project_id = self._project_id()
        self._require(experiment_id, "experiment ID")

        data = self._graphql(
            queries.GET_EXPERIMENT_STATUS_QUERY,
            {"projectID": project_id, "experimentID": experiment_id},
            ExperimentStatusData,
            "failed to get experiment status",
        )
        return data.experiment

    def run(self, experiment_id: str) -> str:
        """Trigger a run of ``experiment_id`` and return its notify ID."""
        project_id = self._project_id()
        self._require(experiment_id, "experiment ID")

        data = self._graphql(
            queries.RUN_EXPERIMENT_MUTATION,
            {"projectID": project_id, "experimentID": experiment_id},
            RunExperimentData,
            "failed to run experiment",
        )
        notify_id = data.run_chaos_experiment.notify_id
        logger.info(f"Triggered run of experiment {experiment_id} (notify ID {notify_id})")
        return notify_id

    def delete(self, experiment_id: str) -> None:
        """Delete ``experiment_id``.

        Raises:
            OperationFailedError: If the server reports the experiment was not deleted
        """
        project_id = self._project_id()
        self._require(experiment_id, "experiment ID")

        data = self._graphql(
            queries.DELETE_EXPERIMENT_MUTATION,
            {"projectID": project_id, "experimentID": experiment_id},
            DeleteExperimentData,
            "failed to delete experiment",
        )
        if not data.is_deleted:
            raise OperationFailedError(
                f"experiment {experiment_id} was not deleted",
                {"experiment_id": experiment_id},
                prefix="failed to delete experiment",
            )
        logger.info(f"Deleted experiment {experiment_id}")
