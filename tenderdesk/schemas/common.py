"""Common schema module."""

from __future__ import annotations

from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class APIModel(BaseModel):
    """Base for wire schemas: snake_case in Python, camelCase in JSON."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


class ErrorEnvelope(BaseModel):
    message: str


class HealthResponse(BaseModel):
    status: str = "ok"
    service: str
    version: str
    database: str


class UpdateModel(APIModel):
    """Partial-update body: only supplied fields are applied.

    An explicit ``null`` for a column listed in ``non_nullable_fields`` is
    treated as "not supplied".
    """

    non_nullable_fields: ClassVar[frozenset[str]] = frozenset()

    def changes(self) -> dict[str, Any]:
        data = self.model_dump(exclude_unset=True)
        return {
            field: value
            for field, value in data.items()
            if value is not None or field not in self.non_nullable_fields
        }
