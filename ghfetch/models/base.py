"""Common base for GitHub API records."""

from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationInfo, field_validator


class GitHubModel(BaseModel):
    """Read-only snapshot of a GitHub API object.

    Unknown JSON keys are ignored. A JSON null for a field that has a default
    decodes to that default (e.g. a null body becomes "").
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    @field_validator("*", mode="before")
    @classmethod
    def _null_to_default(cls, v: Any, info: ValidationInfo) -> Any:
        if v is not None or info.field_name is None:
            return v
        field = cls.model_fields[info.field_name]
        if field.is_required():
            return v
        return field.get_default(call_default_factory=True)
