"""
crud-api Backend — Shared Schema Helpers and Service Responses
==============================================================
"""

from typing import Any

from pydantic import BaseModel, Field


def blank_to_none(value: Any) -> Any:
    """
    Treats an empty form value as "not set" for non-text fields.

    HTML forms submit untouched inputs as "", which would otherwise fail
    to cast to a number or date.
    """
    if isinstance(value, str) and not value.strip():
        return None
    return value


class HealthResponse(BaseModel):
    """
    What:  Health check response showing service and store status.
    Who:   Returned by GET /health for monitoring and container probes.
    """
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Record store connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
