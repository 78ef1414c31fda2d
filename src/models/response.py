"""Common response wrapper."""

from typing import Optional
from pydantic import BaseModel


class HealthStatus(BaseModel):
    """Body returned by GET /health."""

    status: str = "ok"
    service: str = "parking-lot"
    version: str
    environment: str
    timestamp: str
    correlation_id: Optional[str] = None
