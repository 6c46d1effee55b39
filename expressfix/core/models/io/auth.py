"""
Authentication I/O models.

``AuthUser`` mirrors the user object returned by the external auth service;
unknown keys are kept so clients see the full upstream payload.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field

from .common import CamelModel


class AuthUser(BaseModel):
    """Identity resolved from a bearer token."""

    model_config = ConfigDict(extra="allow")

    id: str = Field(description="Auth service user id")
    email: Optional[str] = Field(default=None, description="Primary email address")
    user_metadata: Dict[str, Any] = Field(default_factory=dict, description="Metadata set at sign up")

    @property
    def full_name(self) -> Optional[str]:
        return self.user_metadata.get("full_name")


class SignUpRequest(CamelModel):
    """Schema for creating an account."""

    email: str = Field(min_length=3, description="Email address")
    password: str = Field(min_length=6, description="Account password")
    full_name: Optional[str] = Field(default=None, description="Display name stored in the profile")


class SignInRequest(CamelModel):
    """Schema for a password sign in."""

    email: str = Field(min_length=3)
    password: str = Field(min_length=1)
