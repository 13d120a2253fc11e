"""Resilience probe operations.

Every operation accepts an explicit ``project_id``; when omitted the active
project of the credentials is used.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Mapping, Optional, Sequence, Union

from .. import queries
from ..exceptions import OperationFailedError
from ..models import GetProbeYAMLRequest, Probe, ProbeRequest
from ..models.probe import AddProbeData, DeleteProbeData, GetProbeData, ListProbeData, ProbeYAMLData
from .base import ResourceClient

logger = logging.getLogger(__name__)


class ProbesClient(ResourceClient):
    def list(self, project_id: Optional[str] = None, probe_types: Optional[Sequence[str]] = None) -> List[Probe]:
        project_id = self._project_id(project_id)

        variables: Dict[str, Any] = {"projectID": project_id}
        if probe_types:
            variables["filter"] = {"type": list(probe_types)}

        data = self._graphql(queries.LIST_PROBES_QUERY, variables, ListProbeData, "failed to list probes")
        return data.probes

    def create(self, request: Union[ProbeRequest, Mapping[str, Any]], project_id: Optional[str] = None) -> Probe:
        """Create a probe.

        Raises:
            ValidationError: If the request does not carry exactly one properties
                block matching its ``type``
        """
        project_id = self._project_id(project_id)
        request = ProbeRequest.parse(request)

        data = self._graphql(
            queries.ADD_PROBE_MUTATION,
            {"projectID": project_id, "request": request},
            AddProbeData,
            "failed to create probe",
        )
        logger.info(f"Created {request.type} probe {request.name}")
        return data.probe

    def get(self, probe_id: str, project_id: Optional[str] = None) -> Probe:
        project_id = self._project_id(project_id)
        self._require(probe_id, "probe ID")

        data = self._graphql(
            queries.GET_PROBE_QUERY,
            {"projectID": project_id, "probeName": probe_id},
            GetProbeData,
            "failed to get probe",
        )
        return data.probe

    def delete(self, probe_id: str, project_id: Optional[str] = None) -> None:
        project_id = self._project_id(project_id)
        self._require(probe_id, "probe ID")

        data = self._graphql(
            queries.DELETE_PROBE_MUTATION,
            {"projectID": project_id, "probeName": probe_id},
            DeleteProbeData,
            "failed to delete probe",
        )
        if not data.deleted:
            raise OperationFailedError(
                f"probe {probe_id} was not deleted",
                {"probe_id": probe_id},
                prefix="failed to delete probe",
            )
        logger.info(f"Deleted probe {probe_id}")

    def get_yaml(
        self,
        probe_id: str,
        request: Union[GetProbeYAMLRequest, Mapping[str, Any], None] = None,
        project_id: Optional[str] = None,
    ) -> str:
        """Return the probe rendered as a YAML manifest for the given verdict mode.

        ``request.probe_name`` defaults to ``probe_id``.
        """
        project_id = self._project_id(project_id)
        self._require(probe_id, "probe ID")
        request = GetProbeYAMLRequest.parse(request)
        if not request.probe_name:
            request = request.model_copy(update={"probe_name": probe_id})

        data = self._graphql(
            queries.GET_PROBE_YAML_QUERY,
            {"projectID": project_id, "request": request},
            ProbeYAMLData,
            "failed to get probe YAML",
        )
        return data.manifest
