"""
QuickBite Backend: Shared Response Schemas
===========================================

Response shapes used by more than one resource: the plain confirmation
message, the error body, and the health report.
"""

from pydantic import BaseModel, Field


class MessageResponse(BaseModel):
    """
    What:  Confirmation body for writes that return no resource.
    Who:   register, create order, delete order, change password.
    """
    message: str = Field(description="Human-readable confirmation")


class ErrorResponse(BaseModel):
    """
    What:  Body of every error response, whatever the status code.

    Example:
        {"error": "Incorrect password"}
    """
    error: str = Field(description="Error message, returned as raised")


class HealthResponse(BaseModel):
    status: str = Field(description="healthy or unhealthy")
    version: str = Field(description="Application version")
    datastore: str = Field(description="connected, disconnected or unconfigured")
    uptime_seconds: float = Field(description="Seconds since service started")
