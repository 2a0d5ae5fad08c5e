from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from app.core.auth import ProjectScope, get_project_scope
from app.core.database import get_db
from app.models import Trace
from app.schemas.trace import TraceResponse

router = APIRouter()


@router.get("/{trace_id}", response_model=TraceResponse)
async def get_trace(
    trace_id: str,
    scope: ProjectScope = Depends(get_project_scope),
    db: Session = Depends(get_db),
):
    """Get a specific trace and its observations by ID."""
    trace = db.query(Trace).filter(
        Trace.id == trace_id,
        Trace.project_id == scope.project_id,
    ).first()
    if not trace:
        raise HTTPException(status_code=404, detail="Trace not found")
    return trace
