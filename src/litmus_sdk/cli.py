#!/usr/bin/env python3
"""Command-line wrapper around the Litmus SDK.

Connection settings come from ``LITMUS_*`` environment variables (a ``.env``
file in the working directory is loaded first) and can be overridden by flags.

Usage:
    litmus-sdk projects list
    litmus-sdk --project-id p1 environments list --output yaml
    litmus-sdk experiments run my_experiment
    litmus-sdk version
"""

from __future__ import annotations

import argparse
import dataclasses
import json
import logging
import os
import sys
from typing import Any, List, Optional

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel

from .client import LitmusClient
from .config import ClientOptions, ConfigurationError
from .domain import Credential_Context
from .exceptions import LitmusSDKError
from .resources import InfrastructureClient

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="litmus-sdk",
        description="Litmus SDK - manage chaos projects, environments, experiments, infrastructures and probes",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--endpoint", help="Control plane URL (env: LITMUS_ENDPOINT)")
    parser.add_argument("--username", help="Login user name (env: LITMUS_USERNAME)")
    parser.add_argument("--password", help="Login password (env: LITMUS_PASSWORD)")
    parser.add_argument("--project-id", dest="project_id", help="Active project (env: LITMUS_PROJECT_ID)")
    parser.add_argument("--output", choices=["json", "yaml"], default="json", help="Output format (default: json)")

    commands = parser.add_subparsers(dest="command", required=True)

    projects = commands.add_parser("projects", help="Project bootstrap")
    projects_actions = projects.add_subparsers(dest="action", required=True)
    projects_actions.add_parser("list", help="List projects")
    create = projects_actions.add_parser("create", help="Create a project")
    create.add_argument("name")

    environments = commands.add_parser("environments", help="Chaos environments")
    environments.add_subparsers(dest="action", required=True).add_parser("list", help="List environments")

    experiments = commands.add_parser("experiments", help="Chaos experiments")
    experiments_actions = experiments.add_subparsers(dest="action", required=True)
    experiments_actions.add_parser("list", help="List experiments")
    run = experiments_actions.add_parser("run", help="Trigger an experiment run")
    run.add_argument("experiment_id")

    infra = commands.add_parser("infra", help="Chaos infrastructures")
    infra.add_subparsers(dest="action", required=True).add_parser("list", help="List infrastructures")

    probes = commands.add_parser("probes", help="Resilience probes")
    probes.add_subparsers(dest="action", required=True).add_parser("list", help="List probes")

    commands.add_parser("version", help="Show the control plane version")
    return parser


def options_from_args(args: argparse.Namespace) -> ClientOptions:
    """Environment-derived options with any flags given on the command line applied on top."""
    options = ClientOptions.from_env()
    overrides = {
        name: getattr(args, name)
        for name in ("endpoint", "username", "password", "project_id")
        if getattr(args, name, None) is not None
    }
    return dataclasses.replace(options, **overrides) if overrides else options


def _to_plain(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json", by_alias=True, exclude_none=True)
    if isinstance(value, list):
        return [_to_plain(item) for item in value]
    return value


def render(value: Any, output: str = "json") -> str:
    data = _to_plain(value)
    if output == "yaml":
        return yaml.safe_dump(data, sort_keys=False, default_flow_style=False).rstrip("\n")
    return json.dumps(data, indent=2)


def run_command(args: argparse.Namespace, options: ClientOptions) -> Any:
    if args.command == "version":
        # the version query is public; no login needed
        credentials = Credential_Context(endpoint=options.normalized_endpoint)
        return InfrastructureClient(credentials, timeout=options.timeout).server_version()

    client = LitmusClient.connect(options)

    if args.command == "projects":
        if args.action == "create":
            return client.projects.create(args.name)
        return client.projects.list()
    if args.command == "environments":
        return client.environments.list()
    if args.command == "experiments":
        if args.action == "run":
            return {"notifyID": client.experiments.run(args.experiment_id)}
        return client.experiments.list()
    if args.command == "infra":
        return client.infrastructure.list()
    if args.command == "probes":
        return client.probes.list()

    raise ValueError(f"unknown command: {args.command}")


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the command-line wrapper."""
    parser = build_parser()
    args = parser.parse_args(argv)

    load_dotenv()

    log_level = os.environ.get("LOG_LEVEL", "INFO").upper()
    logging.basicConfig(
        level=getattr(logging, log_level, logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        options = options_from_args(args)
        result = run_command(args, options)
    except (LitmusSDKError, ConfigurationError) as exc:
        logger.debug(f"Command {args.command} failed", exc_info=True)
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    print(render(result, args.output))
    return 0


if __name__ == "__main__":
    sys.exit(main())
