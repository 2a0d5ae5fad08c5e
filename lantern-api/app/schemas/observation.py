"""
Pydantic schemas for the public observations API.

Responses use camelCase keys. ``ObservationListResponse`` is both the
endpoint's response model and the contract clients validate bodies against.
"""
import math
from datetime import datetime, timezone
from typing import Annotated, Any, Optional

from pydantic import AfterValidator, AliasChoices, BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from app.models.observation import ObservationLevel, ObservationType


def _as_utc(value: datetime) -> datetime:
    # SQLite drops the offset; stored times are always UTC
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


UtcDateTime = Annotated[datetime, AfterValidator(_as_utc)]


class CamelModel(BaseModel):
    """Base schema serialized with camelCase aliases."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
        protected_namespaces=(),
    )


class ObservationResponse(CamelModel):
    """A single observation as returned by the public API."""

    id: str
    trace_id: str
    type: ObservationType
    name: Optional[str] = None
    start_time: UtcDateTime
    end_time: Optional[UtcDateTime] = None
    completion_start_time: Optional[UtcDateTime] = None
    model: Optional[str] = None
    model_parameters: Optional[Any] = None
    input: Optional[Any] = None
    output: Optional[Any] = None
    # ORM models expose the column as observation_metadata
    metadata: Optional[Any] = Field(
        default=None,
        validation_alias=AliasChoices("observation_metadata", "metadata"),
    )
    level: ObservationLevel = ObservationLevel.DEFAULT
    status_message: Optional[str] = None
    parent_observation_id: Optional[str] = None
    version: Optional[str] = None
    prompt_tokens: int = 0
    completion_tokens: int = 0
    total_tokens: int = 0


class PaginationMeta(CamelModel):
    """Pagination details for list responses."""

    page: int
    limit: int
    total_items: int
    total_pages: int

    @classmethod
    def build(cls, page: int, limit: int, total_items: int) -> "PaginationMeta":
        return cls(
            page=page,
            limit=limit,
            total_items=total_items,
            total_pages=math.ceil(total_items / limit) if total_items else 0,
        )


class ObservationListResponse(CamelModel):
    """Schema for the observation list response."""

    data: list[ObservationResponse]
    meta: PaginationMeta
