"""Pydantic models for the JSON endpoints (HTML pages use templates)."""

from datetime import datetime, timezone
from typing import Literal

from pydantic import BaseModel, Field

HealthStatus = Literal["healthy", "degraded"]


class DatabaseComponentHealth(BaseModel):
    """Reachability of the catalog store."""

    connected: bool
    url: str = Field(description="Connection URL with the password hidden")


class HealthResponse(BaseModel):
    """Body of GET /health."""

    status: HealthStatus = Field(examples=["healthy"])
    version: str = Field(examples=["1.0.0"])
    database: DatabaseComponentHealth
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
