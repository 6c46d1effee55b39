"""
Shared building blocks for the I/O schemas.

Request and summary payloads speak camelCase on the wire, the convention of the
web client, while still accepting snake_case field names on input.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base schema serialised with camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class SuccessResponse(CamelModel):
    """Acknowledgement returned by mutations without a body of their own."""

    success: bool = True
