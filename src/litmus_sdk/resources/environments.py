"""Chaos environment operations."""

from __future__ import annotations

import logging
from typing import Any, Mapping, Union

from .. import queries
from ..models import (
    CreateEnvironmentRequest,
    Environment,
    EnvironmentConfig,
    EnvironmentList,
    EnvironmentUpdate,
    ListEnvironmentRequest,
    UpdateEnvironmentRequest,
)
from ..models.environment import (
    CreateEnvironmentData,
    DeleteEnvironmentData,
    GetEnvironmentData,
    ListEnvironmentData,
    UpdateEnvironmentData,
)
from ..utils import generate_name_id
from .base import ResourceClient

logger = logging.getLogger(__name__)


class EnvironmentsClient(ResourceClient):
    """Project-scoped environment operations."""

    def list(self, request: Union[ListEnvironmentRequest, Mapping[str, Any], None] = None) -> EnvironmentList:
        project_id = self._project_id()
        request = ListEnvironmentRequest.parse(request)

        data = self._graphql(
            queries.LIST_ENVIRONMENTS_QUERY,
            {"projectID": project_id, "request": request},
            ListEnvironmentData,
            "failed to list environments",
        )
        return data.list_environments

    def create(
        self,
        name: str,
        config: Union[EnvironmentConfig, Mapping[str, Any], None] = None,
    ) -> Environment:
        """Create an environment.

        The environment ID defaults to ``name`` reduced to lower-case letters,
        digits and underscores.

        Raises:
            ValidationError: If ``name`` is empty, no project is active or ``config`` is invalid
        """
        project_id = self._project_id()
        self._require(name, "environment name")
        config = EnvironmentConfig.parse(config)

        request = CreateEnvironmentRequest.parse(
            {
                "environmentID": config.environment_id or generate_name_id(name),
                "name": name,
                "type": config.type,
                "description": config.description,
                "tags": config.tags,
            }
        )
        data = self._graphql(
            queries.CREATE_ENVIRONMENT_MUTATION,
            {"projectID": project_id, "request": request},
            CreateEnvironmentData,
            "failed to create environment",
        )
        environment = data.create_environment
        logger.info(f"Created environment {environment.name} ({environment.environment_id})")
        return environment

    def get(self, environment_id: str) -> Environment:
        project_id = self._project_id()
        self._require(environment_id, "environment ID")

        data = self._graphql(
            queries.GET_ENVIRONMENT_QUERY,
            {"projectID": project_id, "environmentID": environment_id},
            GetEnvironmentData,
            "failed to get environment",
        )
        return data.get_environment

    def update(self, environment_id: str, config: Union[EnvironmentUpdate, Mapping[str, Any]]) -> str:
        """Update the fields set in ``config`` and return the server's message."""
        project_id = self._project_id()
        self._require(environment_id, "environment ID")
        update = EnvironmentUpdate.parse(config)

        request = UpdateEnvironmentRequest.parse(
            {"environmentID": environment_id, **update.model_dump(by_alias=True, exclude_none=True)}
        )
        data = self._graphql(
            queries.UPDATE_ENVIRONMENT_MUTATION,
            {"projectID": project_id, "request": request},
            UpdateEnvironmentData,
            "failed to update environment",
        )
        return data.update_environment

    def delete(self, environment_id: str) -> str:
        project_id = self._project_id()
        self._require(environment_id, "environment ID")

        data = self._graphql(
            queries.DELETE_ENVIRONMENT_MUTATION,
            {"projectID": project_id, "environmentID": environment_id},
            DeleteEnvironmentData,
            "failed to delete environment",
        )
        logger.info(f"Deleted environment {environment_id}")
        return data.delete_environment
