import pytest

from litmus_sdk import queries
from litmus_sdk.exceptions import GraphQLError, ValidationError
from litmus_sdk.models import EnvironmentConfig
from litmus_sdk.resources import EnvironmentsClient


@pytest.fixture
def environments(credentials, session):
    return EnvironmentsClient(credentials, session=session)


def test_create_derives_id_and_defaults(environments, respond, request_body):
    session = respond({"createEnvironment": {"environmentID": "my_prod_env", "name": "My Prod Env", "type": "NON_PROD"}})

    environment = environments.create("My Prod Env")

    assert environment.environment_id == "my_prod_env"
    body = request_body(session)
    assert body["query"] == queries.CREATE_ENVIRONMENT_MUTATION
    assert body["variables"] == {
        "projectID": "project-1",
        "request": {
            "environmentID": "my_prod_env",
            "name": "My Prod Env",
            "type": "NON_PROD",
            "tags": ["litmus-sdk"],
        },
    }


def test_create_with_config(environments, respond, request_body):
    session = respond({"createEnvironment": {"environmentID": "prod", "name": "Production"}})

    environments.create("Production", EnvironmentConfig(environment_id="prod", type="PROD", description="live"))

    request = request_body(session)["variables"]["request"]
    assert request["environmentID"] == "prod"
    assert request["type"] == "PROD"
    assert request["description"] == "live"


def test_create_rejects_unknown_config_field(environments, session):
    with pytest.raises(ValidationError, match="invalid EnvironmentConfig"):
        environments.create("x", {"tpye": "PROD"})

    session.request.assert_not_called()


def test_list(environments, respond, request_body):
    session = respond(
        {
            "listEnvironments": {
                "totalNoOfEnvironments": 1,
                "environments": [{"environmentID": "e1", "name": "one", "tags": None, "infraIDs": ["i1"]}],
            }
        }
    )

    result = environments.list({"environment_ids": ["e1"]})

    assert result.total == 1
    assert result.environments[0].tags == []
    assert result.environments[0].infra_ids == ["i1"]
    assert request_body(session)["variables"] == {"projectID": "project-1", "request": {"environmentIDs": ["e1"]}}


def test_get(environments, respond, request_body):
    session = respond({"getEnvironment": {"environmentID": "e1", "name": "one"}})

    assert environments.get("e1").name == "one"
    assert request_body(session)["variables"] == {"projectID": "project-1", "environmentID": "e1"}


def test_update_sends_only_set_fields(environments, respond, request_body):
    session = respond({"updateEnvironment": "environment updated"})

    assert environments.update("e1", {"description": "new"}) == "environment updated"
    assert request_body(session)["variables"]["request"] == {"environmentID": "e1", "description": "new"}


def test_delete(environments, respond):
    respond({"deleteEnvironment": "environment deleted"})

    assert environments.delete("e1") == "environment deleted"


@pytest.mark.parametrize(
    "call",
    [
        lambda client: client.get(""),
        lambda client: client.update("", {"name": "x"}),
        lambda client: client.delete(""),
        lambda client: client.create(""),
    ],
)
def test_empty_identifier_makes_no_request(environments, session, call):
    with pytest.raises(ValidationError, match="cannot be empty"):
        call(environments)

    session.request.assert_not_called()


def test_missing_project_fails_fast(credentials_without_project, session):
    client = EnvironmentsClient(credentials_without_project, session=session)

    with pytest.raises(ValidationError, match="project ID not set in credentials"):
        client.list()

    session.request.assert_not_called()


def test_graphql_error_is_prefixed(environments, respond):
    respond(None, errors=[{"message": "permission_denied"}])

    with pytest.raises(GraphQLError, match="^failed to list environments: GraphQL error: permission_denied$"):
        environments.list()
