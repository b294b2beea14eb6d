"""Health check API schemas."""

from datetime import datetime

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Response for GET /health (liveness). Does not touch the database."""

    status: str = Field(default="healthy", description="Service status")
    timestamp: datetime = Field(..., description="Server time (UTC, RFC 3339)")
