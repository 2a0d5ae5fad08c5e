from typing import Optional, Any
from uuid import UUID

from pydantic import AliasChoices, Field

from app.schemas.observation import CamelModel, ObservationResponse, UtcDateTime


class TraceResponse(CamelModel):
    """Schema for a trace together with its observations."""

    id: str
    project_id: UUID
    name: Optional[str] = None
    user_id: Optional[str] = None
    metadata: Optional[Any] = Field(
        default=None,
        validation_alias=AliasChoices("trace_metadata", "metadata"),
    )
    release: Optional[str] = None
    version: Optional[str] = None
    timestamp: UtcDateTime
    observations: list[ObservationResponse] = []
