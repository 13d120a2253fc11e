"""Tests for ProbesClient."""

from __future__ import annotations

import pytest

from litmus_sdk.exceptions import OperationFailedError, ValidationError
from litmus_sdk.resources import ProbesClient

CMD_PROBE = {
    "name": "check-file",
    "type": "cmdProbe",
    "description": "file exists",
    "kubernetesCMDProperties": {
        "command": "ls /tmp/ready",
        "comparator": {"type": "string", "criteria": "contains", "value": "ready"},
        "probeTimeout": "5s",
        "interval": "1s",
    },
}


@pytest.fixture
def probes(credentials, session):
    return ProbesClient(credentials, session=session)


class TestProbes:
    def test_create(self, probes, respond, request_body):
        session = respond({"addProbe": {"name": "check-file", "type": "cmdProbe"}})

        probe = probes.create(CMD_PROBE)

        assert probe.name == "check-file"
        variables = request_body(session)["variables"]
        assert variables["projectID"] == "project-1"
        assert variables["request"]["kubernetesCMDProperties"]["command"] == "ls /tmp/ready"
        assert variables["request"]["infrastructureType"] == "Kubernetes"

    def test_create_with_mismatched_properties(self, probes, session):
        bad = dict(CMD_PROBE, type="httpProbe")

        with pytest.raises(ValidationError, match="httpProbe type requires kubernetesHTTPProperties"):
            probes.create(bad)

        session.request.assert_not_called()

    def test_explicit_project_overrides_active_project(self, probes, respond, request_body):
        session = respond({"listProbes": [{"name": "a", "type": "httpProbe"}]})

        result = probes.list(project_id="other-project", probe_types=["httpProbe"])

        assert [probe.name for probe in result] == ["a"]
        assert request_body(session)["variables"] == {
            "projectID": "other-project",
            "filter": {"type": ["httpProbe"]},
        }

    def test_list_null(self, probes, respond):
        respond({"listProbes": None})

        assert probes.list() == []

    def test_get(self, probes, respond, request_body):
        session = respond({"getProbe": {"name": "check-file", "type": "cmdProbe", "tags": None}})

        assert probes.get("check-file").tags == []
        assert request_body(session)["variables"] == {"projectID": "project-1", "probeName": "check-file"}

    def test_get_yaml_defaults_probe_name(self, probes, respond, request_body):
        session = respond({"getProbeYAML": "apiVersion: litmuschaos.io/v1alpha1"})

        assert probes.get_yaml("check-file") == "apiVersion: litmuschaos.io/v1alpha1"
        assert request_body(session)["variables"]["request"] == {"probeName": "check-file", "mode": "SOT"}

    def test_get_yaml_with_mode(self, probes, respond, request_body):
        session = respond({"getProbeYAML": "kind: probe"})

        probes.get_yaml("check-file", {"mode": "Continuous"})

        assert request_body(session)["variables"]["request"]["mode"] == "Continuous"

    def test_delete(self, probes, respond):
        respond({"deleteProbe": True})

        assert probes.delete("check-file") is None

    def test_delete_flag_false(self, probes, respond):
        respond({"deleteProbe": False})

        with pytest.raises(OperationFailedError, match="probe check-file was not deleted"):
            probes.delete("check-file")

    def test_missing_project(self, credentials_without_project, session):
        client = ProbesClient(credentials_without_project, session=session)

        with pytest.raises(ValidationError, match="project ID not set in credentials"):
            client.list()

        session.request.assert_not_called()

    @pytest.mark.parametrize("method", ["get", "delete", "get_yaml"])
    def test_empty_probe_id(self, probes, session, method):
        with pytest.raises(ValidationError, match="probe ID cannot be empty"):
            getattr(probes, method)("")

        session.request.assert_not_called()

    def test_empty_explicit_project(self, probes, session):
        with pytest.raises(ValidationError, match="project ID cannot be empty"):
            probes.get("check-file", project_id="")

        session.request.assert_not_called()
