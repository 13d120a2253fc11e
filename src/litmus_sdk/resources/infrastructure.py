"""Chaos infrastructure operations."""

from __future__ import annotations

import logging
from typing import Any, Mapping, Union

from .. import queries
from ..exceptions import NotFoundError
from ..models import Infra, InfraConfig, InfraList, ListInfraRequest, RegisteredInfra, RegisterInfraRequest, ServerVersion
from ..models.infrastructure import DeleteInfraData, ListInfraData, RegisterInfraData, ServerVersionData
from .base import ResourceClient

logger = logging.getLogger(__name__)


class InfrastructureClient(ResourceClient):
    """Register, inspect and disconnect chaos infrastructures."""

    def list(self, request: Union[ListInfraRequest, Mapping[str, Any], None] = None) -> InfraList:
        project_id = self._project_id()
        request = ListInfraRequest.parse(request)

        data = self._graphql(
            queries.LIST_INFRAS_QUERY,
            {"projectID": project_id, "request": request},
            ListInfraData,
            "failed to list infrastructures",
        )
        return data.list_infras

    def create(self, name: str, config: Union[InfraConfig, Mapping[str, Any]]) -> RegisteredInfra:
        """Register an infrastructure and return its ID, token and install manifest.

        Raises:
            ValidationError: If ``name`` is empty, no project is active or ``config``
                lacks an environment ID or is otherwise invalid
        """
        project_id = self._project_id()
        self._require(name, "infrastructure name")
        config = InfraConfig.parse(config)

        request = RegisterInfraRequest.from_config(name, config)
        data = self._graphql(
            queries.REGISTER_INFRA_MUTATION,
            {"projectID": project_id, "request": request},
            RegisterInfraData,
            "failed to register infrastructure",
        )
        registered = data.register_infra
        logger.info(f"Registered infrastructure {registered.name} ({registered.infra_id})")
        return registered

    def get(self, infra_id: str) -> Infra:
        """Return the infrastructure ``infra_id``.

        Raises:
            NotFoundError: If the project has no infrastructure with that ID
        """
        project_id = self._project_id()
        self._require(infra_id, "infrastructure ID")

        data = self._graphql(
            queries.LIST_INFRAS_QUERY,
            {"projectID": project_id, "request": ListInfraRequest(infra_ids=[infra_id])},
            ListInfraData,
            "failed to get infrastructure",
        )
        for infra in data.list_infras.infras:
            if infra.infra_id == infra_id:
                return infra
        raise NotFoundError(f"infrastructure not found with ID: {infra_id}", {"infra_id": infra_id})

    def disconnect(self, infra_id: str) -> str:
        """Disconnect ``infra_id`` from the control plane and return the server's message."""
        project_id = self._project_id()
        self._require(infra_id, "infrastructure ID")

        data = self._graphql(
            queries.DISCONNECT_INFRA_MUTATION,
            {"projectID": project_id, "infraID": infra_id},
            DeleteInfraData,
            "failed to disconnect infrastructure",
        )
        logger.info(f"Disconnected infrastructure {infra_id}")
        return data.message

    def delete(self, infra_id: str) -> str:
        return self.disconnect(infra_id)

    def server_version(self) -> ServerVersion:
        """Return the control plane version. No token is sent."""
        data = self._graphql(
            queries.SERVER_VERSION_QUERY,
            None,
            ServerVersionData,
            "failed to get server version",
            authenticated=False,
        )
        return data.server_version
