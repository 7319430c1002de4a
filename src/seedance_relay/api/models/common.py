"""
Common API models used across different endpoints.
"""

from pydantic import BaseModel, Field
from typing import Optional


class APIError(BaseModel):
    """Error body returned for validation and upstream failures."""
    error: str = Field(..., description="Error message")
    details: Optional[str] = Field(None, description="Underlying error detail")
    kind: Optional[str] = Field(None, description="Machine-readable error kind")

class HealthStatus(BaseModel):
    """Liveness response."""
    status: str = Field(..., description="Service status")
    timestamp: str = Field(..., description="Current server time, ISO-8601 UTC")
