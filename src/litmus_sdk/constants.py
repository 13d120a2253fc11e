"""Shared constants for the Litmus SDK."""

from __future__ import annotations

# Path prefixes appended to the control plane endpoint
AUTH_API_PATH = "/auth"
GQL_API_PATH = "/api/query"

LOGIN_PATH = "/login"
CREATE_PROJECT_PATH = "/create_project"
LIST_PROJECTS_PATH = "/list_projects"
USER_WITH_PROJECT_PATH = "/get_user_with_project"

# Defaults used by ClientOptions.from_env
DEFAULT_ENDPOINT = "http://localhost:8080"
DEFAULT_USERNAME = "admin"
DEFAULT_PASSWORD = "litmus"

USER_AGENT = "litmus-sdk-python/0.1.0"

# Defaults applied to SDK-created resources
DEFAULT_TAGS = ["litmus-sdk"]
DEFAULT_PLATFORM_NAME = "default-platform"
DEFAULT_INFRA_NAMESPACE = "litmus"
DEFAULT_SERVICE_ACCOUNT = "litmus"
INFRASTRUCTURE_TYPE_KUBERNETES = "Kubernetes"
