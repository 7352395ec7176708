"""System-specific response schemas."""

from pydantic import BaseModel


class HealthResponse(BaseModel):
    """Liveness response for the schema service."""

    status: str
    service: str
    version: str
