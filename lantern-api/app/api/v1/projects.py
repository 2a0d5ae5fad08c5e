from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session
from typing import Any, List, Optional
from uuid import UUID
import logging

from app.core.database import get_db
from app.models import ApiKey, Organization, Project
from app.schemas.observation import CamelModel
from app.services.support_chat import ChatTrigger, SupportChat, get_support_chat
from pydantic import Field


router = APIRouter()
logger = logging.getLogger("lantern.projects")


class ProjectCreate(CamelModel):
    """Schema for creating a project."""

    org_id: UUID
    name: str = Field(..., min_length=1)
    description: Optional[str] = None


class ProjectResponse(CamelModel):
    """Schema for project response."""

    id: UUID
    name: str
    description: Optional[str] = None
    org_id: UUID


class ApiKeyResponse(CamelModel):
    """A newly created key pair; the secret key is only shown once."""

    public_key: str
    secret_key: str


class ProjectCreateResponse(CamelModel):
    project: ProjectResponse
    api_key: ApiKeyResponse
    chat_commands: List[List[Any]]


@router.get("/", response_model=List[ProjectResponse])
async def list_projects(
    org_id: Optional[UUID] = Query(default=None, alias="orgId"),
    db: Session = Depends(get_db),
):
    """List projects, optionally restricted to one organization."""
    query = db.query(Project)
    if org_id:
        query = query.filter(Project.org_id == org_id)
    return query.order_by(Project.created_at).all()


@router.post("/", response_model=ProjectCreateResponse, status_code=201)
async def create_project(
    project: ProjectCreate,
    db: Session = Depends(get_db),
    chat: SupportChat = Depends(get_support_chat),
):
    """Create a project with an initial API key pair."""
    organization = db.query(Organization).filter(Organization.id == project.org_id).first()
    if not organization:
        raise HTTPException(status_code=404, detail="Organization not found")

    try:
        db_project = Project(
            org_id=project.org_id,
            name=project.name,
            description=project.description,
        )
        db.add(db_project)
        db.flush()

        api_key, secret_key = ApiKey.generate(db_project.id)
        db.add(api_key)
        db.commit()
        db.refresh(db_project)
    except Exception as e:
        db.rollback()
        logger.exception("Failed to create project %s", project.name)
        raise HTTPException(status_code=500, detail=f"Failed to create project: {str(e)}")

    logger.info("Created project %s in organization %s", db_project.id, organization.id)
    chat.run_trigger(ChatTrigger.AFTER_PROJECT_CREATION)

    return ProjectCreateResponse(
        project=ProjectResponse.model_validate(db_project),
        api_key=ApiKeyResponse(public_key=api_key.public_key, secret_key=secret_key),
        chat_commands=chat.drain(),
    )
