"""Base classes and shared shapes for Litmus request/response models."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from ..exceptions import ValidationError


class LitmusModel(BaseModel):
    """Base for response shapes: remote camelCase aliases, unknown fields ignored."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class LitmusRequest(BaseModel):
    """Base for request shapes: unknown fields are rejected."""

    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    def to_variables(self) -> Dict[str, Any]:
        """Return the JSON-compatible dictionary sent as a GraphQL input object."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    @classmethod
    def parse(cls, value: Any) -> Any:
        """Coerce a model instance or mapping into ``cls``.

        Raises:
            ValidationError: If ``value`` has unknown fields or invalid values
        """
        if value is None:
            value = {}
        if isinstance(value, cls):
            return value
        if isinstance(value, BaseModel):
            value = value.model_dump(by_alias=True, exclude_unset=True)
        try:
            return cls.model_validate(value)
        except PydanticValidationError as exc:
            raise ValidationError(f"invalid {cls.__name__}: {_summarize(exc)}", {"errors": exc.errors()}) from exc


def _summarize(exc: PydanticValidationError) -> str:
    parts = []
    for error in exc.errors():
        location = ".".join(str(item) for item in error.get("loc", ())) or "request"
        parts.append(f"{location}: {error.get('msg')}")
    return "; ".join(parts)


class UserDetails(LitmusModel):
    username: str = ""
    email: Optional[str] = None
    user_id: Optional[str] = Field(default=None, alias="userID")


class Pagination(LitmusRequest):
    page: int = Field(default=0, ge=0)
    limit: int = Field(default=15, ge=1)


class ErrorEntry(LitmusModel):
    """One entry of a remote ``errors`` list."""

    message: str = ""
    path: Optional[List[Any]] = None
