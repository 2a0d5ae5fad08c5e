"""
Public Observations API Endpoints
"""
from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy import desc
from sqlalchemy.orm import Session
from typing import Optional

from app.core.auth import ProjectScope, get_project_scope
from app.core.database import get_db
from app.models import Observation, ObservationType, Trace
from app.schemas.observation import (
    ObservationListResponse,
    ObservationResponse,
    PaginationMeta,
)

router = APIRouter()


def scoped_observations(db: Session, scope: ProjectScope):
    """Observations whose trace belongs to the caller's project."""
    return (
        db.query(Observation)
        .join(Trace, Observation.trace_id == Trace.id)
        .filter(Trace.project_id == scope.project_id)
    )


@router.get("", response_model=ObservationListResponse)
async def list_observations(
    type: Optional[ObservationType] = None,
    name: Optional[str] = None,
    user_id: Optional[str] = Query(default=None, alias="userId"),
    trace_id: Optional[str] = Query(default=None, alias="traceId"),
    parent_observation_id: Optional[str] = Query(default=None, alias="parentObservationId"),
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=50, ge=1, le=100),
    scope: ProjectScope = Depends(get_project_scope),
    db: Session = Depends(get_db),
):
    """
    List observations of the authenticated project.

    Query parameters:
    - type: Filter by observation type (GENERATION, SPAN, EVENT)
    - name: Filter by observation name
    - userId: Filter by the user of the owning trace
    - traceId: Filter by owning trace
    - parentObservationId: Filter by parent observation
    - page: Page number, starting at 1
    - limit: Observations per page (default 50, max 100)
    """
    query = scoped_observations(db, scope)

    if type:
        query = query.filter(Observation.type == type)

    if name:
        query = query.filter(Observation.name == name)

    if user_id:
        query = query.filter(Trace.user_id == user_id)

    if trace_id:
        query = query.filter(Observation.trace_id == trace_id)

    if parent_observation_id:
        query = query.filter(Observation.parent_observation_id == parent_observation_id)

    total = query.count()

    observations = (
        query.order_by(desc(Observation.start_time), Observation.id)
        .limit(limit)
        .offset((page - 1) * limit)
        .all()
    )

    return ObservationListResponse(
        data=[ObservationResponse.model_validate(o) for o in observations],
        meta=PaginationMeta.build(page=page, limit=limit, total_items=total),
    )


@router.get("/{observation_id}", response_model=ObservationResponse)
async def get_observation(
    observation_id: str,
    scope: ProjectScope = Depends(get_project_scope),
    db: Session = Depends(get_db),
):
    """Get a specific observation by ID."""
    observation = scoped_observations(db, scope).filter(
        Observation.id == observation_id
    ).first()

    if not observation:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Observation not found"
        )

    return observation
