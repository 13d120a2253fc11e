"""Credential-scoped resource clients."""

from .auth import AuthClient
from .base import ResourceClient
from .environments import EnvironmentsClient
from .experiments import ExperimentsClient
from .infrastructure import InfrastructureClient
from .probes import ProbesClient
from .projects import ProjectsClient

__all__ = [
    "AuthClient",
    "EnvironmentsClient",
    "ExperimentsClient",
    "InfrastructureClient",
    "ProbesClient",
    "ProjectsClient",
    "ResourceClient",
]
