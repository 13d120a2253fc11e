import json
from unittest.mock import MagicMock, patch

import pytest
import yaml

from litmus_sdk import cli
from litmus_sdk.exceptions import AuthenticationError
from litmus_sdk.models import Project, ProjectList, ServerVersion


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch):
    for name in ("LITMUS_ENDPOINT", "LITMUS_USERNAME", "LITMUS_PASSWORD", "LITMUS_PROJECT_ID", "LITMUS_TIMEOUT"):
        monkeypatch.delenv(name, raising=False)
    with patch("litmus_sdk.cli.load_dotenv"):
        yield


@pytest.fixture
def connect():
    with patch("litmus_sdk.cli.LitmusClient.connect") as mock_connect:
        mock_connect.return_value = MagicMock()
        yield mock_connect


def test_flags_override_environment(monkeypatch):
    monkeypatch.setenv("LITMUS_ENDPOINT", "http://from-env:8080")
    monkeypatch.setenv("LITMUS_USERNAME", "env-user")
    args = cli.build_parser().parse_args(["--username", "flag-user", "--project-id", "p1", "projects", "list"])

    options = cli.options_from_args(args)

    assert options.endpoint == "http://from-env:8080"
    assert options.username == "flag-user"
    assert options.project_id == "p1"


def test_projects_list_json(connect, capsys):
    connect.return_value.projects.list.return_value = ProjectList(
        projects=[Project(project_id="p1", name="demo")], total=1
    )

    assert cli.main(["projects", "list"]) == 0

    output = json.loads(capsys.readouterr().out)
    assert output["totalNumberOfProjects"] == 1
    assert output["projects"][0]["name"] == "demo"


def test_projects_create(connect, capsys):
    connect.return_value.projects.create.return_value = Project(project_id="p1", name="my-project")

    assert cli.main(["projects", "create", "my-project"]) == 0

    connect.return_value.projects.create.assert_called_once_with("my-project")


def test_experiment_run_yaml(connect, capsys):
    connect.return_value.experiments.run.return_value = "n-1"

    assert cli.main(["--output", "yaml", "experiments", "run", "exp-1"]) == 0

    assert yaml.safe_load(capsys.readouterr().out) == {"notifyID": "n-1"}


@pytest.mark.parametrize(
    "argv, attribute",
    [
        (["environments", "list"], "environments"),
        (["experiments", "list"], "experiments"),
        (["infra", "list"], "infrastructure"),
    ],
)
def test_list_commands(connect, capsys, argv, attribute):
    getattr(connect.return_value, attribute).list.return_value = []

    assert cli.main(argv) == 0
    getattr(connect.return_value, attribute).list.assert_called_once_with()


def test_probes_list(connect, capsys):
    connect.return_value.probes.list.return_value = []

    assert cli.main(["probes", "list"]) == 0
    assert json.loads(capsys.readouterr().out) == []


def test_version_needs_no_login(connect, capsys):
    with patch("litmus_sdk.cli.InfrastructureClient") as mock_infra:
        mock_infra.return_value.server_version.return_value = ServerVersion(key="version", value="3.9.0")

        assert cli.main(["version"]) == 0

    connect.assert_not_called()
    assert json.loads(capsys.readouterr().out) == {"key": "version", "value": "3.9.0"}


def test_sdk_error_exit_code(connect, capsys):
    connect.side_effect = AuthenticationError("invalid_credentials", prefix="authentication failed")

    assert cli.main(["projects", "list"]) == 1

    assert capsys.readouterr().err.strip().endswith("Error: authentication failed: invalid_credentials")


def test_bad_timeout_env(monkeypatch, connect, capsys):
    monkeypatch.setenv("LITMUS_TIMEOUT", "later")

    assert cli.main(["projects", "list"]) == 1
    assert "LITMUS_TIMEOUT must be a number" in capsys.readouterr().err


def test_subcommand_required():
    with pytest.raises(SystemExit):
        cli.main([])
