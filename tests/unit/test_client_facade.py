"""Tests for the LitmusClient facade."""

from __future__ import annotations

import pytest

from litmus_sdk import LitmusClient, new_client
from litmus_sdk.config import ClientOptions
from litmus_sdk.exceptions import AuthenticationError, LoginValidationError, ValidationError
from litmus_sdk.resources import (
    AuthClient,
    EnvironmentsClient,
    ExperimentsClient,
    InfrastructureClient,
    ProbesClient,
    ProjectsClient,
)


@pytest.fixture
def login_ok(session, mock_response, token):
    session.request.return_value = mock_response({"accessToken": token, "projectID": "p-login"})
    return session


class TestConnect:
    def test_new_client_authenticates_once(self, login_ok, endpoint, token):
        client = new_client(endpoint, "admin", "litmus", session=login_ok)

        assert login_ok.request.call_count == 1
        assert client.credentials.token == token
        assert client.credentials.project_id == "p-login"
        assert client.auth.get_token() == token

    def test_every_resource_client_is_built_with_the_same_credentials(self, login_ok, endpoint):
        client = new_client(endpoint, "admin", "litmus", session=login_ok)

        resources = {
            "auth": AuthClient,
            "projects": ProjectsClient,
            "environments": EnvironmentsClient,
            "experiments": ExperimentsClient,
            "infrastructure": InfrastructureClient,
            "probes": ProbesClient,
        }
        for name, resource_cls in resources.items():
            resource = getattr(client, name)
            assert isinstance(resource, resource_cls)
            assert resource.credentials == client.credentials

    def test_accessors_are_read_only(self, login_ok, endpoint):
        client = new_client(endpoint, "admin", "litmus", session=login_ok)

        with pytest.raises(AttributeError):
            client.environments = None

    def test_project_id_option(self, login_ok, endpoint):
        client = new_client(endpoint, "admin", "litmus", project_id="p-chosen", session=login_ok)

        assert client.credentials.project_id == "p-chosen"

    def test_invalid_options_fail_before_network(self, session):
        with pytest.raises(LoginValidationError, match="password cannot be empty"):
            LitmusClient.connect(ClientOptions("http://localhost:8080", "admin", ""), session=session)

        session.request.assert_not_called()

    def test_rejected_login(self, session, mock_response, endpoint):
        session.request.return_value = mock_response({"error": "invalid_credentials"}, status_code=401)

        with pytest.raises(AuthenticationError, match="invalid_credentials"):
            new_client(endpoint, "admin", "wrong-pw", session=session)

    def test_timeout_reaches_resource_calls(self, session, mock_response, endpoint, token):
        session.request.side_effect = [
            mock_response({"accessToken": token, "projectID": "p1"}),
            mock_response({"data": {"deleteEnvironment": "ok"}}),
        ]

        client = new_client(endpoint, "admin", "litmus", timeout=2.5, session=session)
        client.environments.delete("e1")

        assert [c.kwargs["timeout"] for c in session.request.call_args_list] == [2.5, 2.5]


class TestNewSessions:
    def test_with_project_makes_no_request(self, login_ok, endpoint):
        client = new_client(endpoint, "admin", "litmus", session=login_ok)

        scoped = client.with_project("p-other")

        assert login_ok.request.call_count == 1
        assert scoped is not client
        assert scoped.credentials.project_id == "p-other"
        assert scoped.environments.credentials.project_id == "p-other"
        assert client.credentials.project_id == "p-login"
        assert scoped.credentials.token == client.credentials.token

    def test_with_empty_project(self, login_ok, endpoint):
        client = new_client(endpoint, "admin", "litmus", session=login_ok)

        with pytest.raises(ValidationError):
            client.with_project("")

    def test_reauthenticate_returns_fresh_client(self, session, mock_response, endpoint, token_for):
        first, second = token_for("admin"), token_for("admin-again")
        session.request.side_effect = [
            mock_response({"accessToken": first, "projectID": "p-login"}),
            mock_response({"accessToken": second, "projectID": "p-login"}),
        ]
        client = new_client(endpoint, "admin", "litmus", session=session).with_project("p-other")

        fresh = client.reauthenticate()

        assert session.request.call_count == 2
        assert fresh.credentials.token == second
        assert fresh.credentials.project_id == "p-other"
        assert client.credentials.token == first

    def test_reauthenticate_without_options(self, credentials):
        client = LitmusClient(credentials)

        with pytest.raises(LoginValidationError, match="cannot re-authenticate"):
            client.reauthenticate()

    def test_requires_credential_context(self):
        with pytest.raises(TypeError):
            LitmusClient({"endpoint": "http://localhost:8080"})

    def test_repr_hides_token(self, credentials):
        assert credentials.token not in repr(LitmusClient(credentials))
