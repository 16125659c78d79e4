"""API response models."""

from pydantic import BaseModel
from typing import Literal


class HealthResponse(BaseModel):
    """System health check response."""

    status: Literal["healthy"]  # No external dependencies to degrade
    version: str
    uptime_seconds: float
    profile: str


class ProfileResponse(BaseModel):
    """Identity of the served profile."""

    name: str
    code: str
    documentation_url: str
    strict_xsd_validation: bool
