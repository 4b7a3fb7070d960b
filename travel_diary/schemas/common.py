"""
Travel Diary Backend — Shared Response Schemas
===============================================

What:  Error and health payloads shared by every router.
"""

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """
    What:  The only error body the API returns.

    Example:
        {"message": "User not found"}
        {"message": "NOT NULL constraint failed: users.email"}

    The request correlation id travels in the X-Request-ID response header,
    not in the body.
    """
    message: str = Field(description="Human-readable error description")


class HealthResponse(BaseModel):
    """Returned by GET /health for monitoring and container health checks."""
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
