"""Project bootstrap operations, served by the authentication server over REST."""

from __future__ import annotations

import json
import logging
from typing import Any, Optional, Type, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from ..auth import username_from_token
from ..constants import CREATE_PROJECT_PATH, LIST_PROJECTS_PATH, USER_WITH_PROJECT_PATH
from ..exceptions import DecodingError, EncodingError, LitmusSDKError, RemoteError
from ..models import CreateProjectRequest, Project, ProjectDetails, ProjectList
from ..models.project import RestEnvelope
from ..transport import send_request
from .base import ResourceClient

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)


class ProjectsClient(ResourceClient):
    """List, create and inspect projects."""

    def _rest(
        self,
        method: str,
        path: str,
        response_type: Type[M],
        error_context: str,
        body: Optional[BaseModel] = None,
        unwrap: Optional[str] = None,
    ) -> M:
        """Send one REST call and decode ``data`` from the ``{message, data, errors}`` envelope.

        ``unwrap`` names a key that, when present in ``data``, holds the payload.
        """
        url = self._credentials.auth_url(path)
        try:
            payload = None
            if body is not None:
                try:
                    payload = body.model_dump_json(by_alias=True, exclude_none=True).encode("utf-8")
                except (TypeError, ValueError) as exc:
                    raise EncodingError(f"error marshaling request: {exc}") from exc

            text = send_request(
                method,
                url,
                token=self._credentials.token,
                body=payload,
                session=self._session,
                timeout=self._timeout,
            )
            envelope = _decode_envelope(text)
            if envelope.errors:
                logger.warning(f"{error_context}: {envelope.errors[0].message}")
                raise RemoteError(envelope.errors[0].message, {"discarded_errors": len(envelope.errors) - 1})

            data: Any = envelope.data
            if unwrap and isinstance(data, dict) and unwrap in data:
                data = data[unwrap]
            try:
                return response_type.model_validate(data)
            except PydanticValidationError as exc:
                raise DecodingError(f"error unmarshaling response: {exc}", {"data": data}) from exc
        except LitmusSDKError as exc:
            raise exc.with_prefix(error_context) from exc

    def list(self) -> ProjectList:
        """Return every project visible to the authenticated user."""
        return self._rest("GET", LIST_PROJECTS_PATH, ProjectList, "failed to list projects")

    def create(self, name: str) -> Project:
        """Create a project named ``name``.

        Raises:
            ValidationError: If ``name`` is empty (no request is sent)
        """
        self._require(name, "project name")
        request = CreateProjectRequest.parse({"projectName": name})
        project = self._rest(
            "POST",
            CREATE_PROJECT_PATH,
            Project,
            "failed to create project",
            body=request,
            unwrap="createProject",
        )
        logger.info(f"Created project {project.name} ({project.project_id})")
        return project

    def get_details(self) -> ProjectDetails:
        """Return the user record of the token holder together with their projects."""
        error_context = "failed to get project details"
        try:
            username = username_from_token(self._credentials.token)
        except LitmusSDKError as exc:
            raise exc.with_prefix(error_context) from exc
        return self._rest("GET", f"{USER_WITH_PROJECT_PATH}/{username}", ProjectDetails, error_context)


def _decode_envelope(text: str) -> RestEnvelope:
    try:
        payload = json.loads(text)
    except ValueError as exc:
        raise DecodingError(f"error unmarshaling response: {exc}", {"body": text}) from exc
    if not isinstance(payload, dict):
        raise DecodingError("response was not a JSON object", {"body": text})

    # some endpoints answer with the payload itself rather than an envelope
    if not {"data", "errors", "message"} & payload.keys():
        payload = {"data": payload}

    try:
        return RestEnvelope.model_validate(payload)
    except PydanticValidationError as exc:
        raise DecodingError(f"error unmarshaling response: {exc}", {"body": text}) from exc
