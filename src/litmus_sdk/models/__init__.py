"""Request and response models mirroring the Litmus control plane schema."""

from .auth import LoginRequest, LoginResponse
from .common import ErrorEntry, LitmusModel, LitmusRequest, Pagination, UserDetails
from .environment import (
    CreateEnvironmentRequest,
    Environment,
    EnvironmentConfig,
    EnvironmentList,
    EnvironmentUpdate,
    ListEnvironmentRequest,
    UpdateEnvironmentRequest,
)
from .experiment import (
    Experiment,
    ExperimentConfig,
    ExperimentList,
    ExperimentRun,
    ExperimentRunList,
    ExperimentStatus,
    ListExperimentRequest,
    ListExperimentRunRequest,
    SaveChaosExperimentRequest,
)
from .infrastructure import (
    Infra,
    InfraConfig,
    InfraList,
    ListInfraRequest,
    RegisteredInfra,
    RegisterInfraRequest,
    ServerVersion,
    Toleration,
)
from .probe import (
    Comparator,
    GetProbeYAMLRequest,
    K8SProperties,
    KubernetesCMDProperties,
    KubernetesHTTPProperties,
    Probe,
    ProbeRequest,
    PROMProperties,
)
from .project import CreateProjectRequest, Project, ProjectDetails, ProjectList, ProjectMember

__all__ = [
    "Comparator",
    "CreateEnvironmentRequest",
    "CreateProjectRequest",
    "Environment",
    "EnvironmentConfig",
    "EnvironmentList",
    "EnvironmentUpdate",
    "ErrorEntry",
    "Experiment",
    "ExperimentConfig",
    "ExperimentList",
    "ExperimentRun",
    "ExperimentRunList",
    "ExperimentStatus",
    "GetProbeYAMLRequest",
    "Infra",
    "InfraConfig",
    "InfraList",
    "K8SProperties",
    "KubernetesCMDProperties",
    "KubernetesHTTPProperties",
    "ListEnvironmentRequest",
    "ListExperimentRequest",
    "ListExperimentRunRequest",
    "ListInfraRequest",
    "LitmusModel",
    "LitmusRequest",
    "LoginRequest",
    "LoginResponse",
    "Pagination",
    "PROMProperties",
    "Probe",
    "ProbeRequest",
    "Project",
    "ProjectDetails",
    "ProjectList",
    "ProjectMember",
    "RegisterInfraRequest",
    "RegisteredInfra",
    "SaveChaosExperimentRequest",
    "ServerVersion",
    "Toleration",
    "UpdateEnvironmentRequest",
    "UserDetails",
]
