"""
Public API authentication.

Callers authenticate with HTTP Basic auth using an API key pair
(``public_key:secret_key``). A valid pair resolves to the project the
key belongs to, and every public endpoint scopes its queries to it.
"""
import logging
from dataclasses import dataclass
from typing import Optional
from uuid import UUID

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBasic, HTTPBasicCredentials
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.models import ApiKey

logger = logging.getLogger("lantern.auth")

basic_auth = HTTPBasic(auto_error=False)


@dataclass(frozen=True)
class ProjectScope:
    """The project an authenticated request may read from."""

    project_id: UUID
    api_key_id: UUID


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Basic"},
    )


def get_project_scope(
    credentials: Optional[HTTPBasicCredentials] = Depends(basic_auth),
    db: Session = Depends(get_db),
) -> ProjectScope:
    """Resolve the caller's project from its API key pair."""
    if credentials is None:
        raise _unauthorized("Missing authorization header")

    api_key = db.query(ApiKey).filter(ApiKey.public_key == credentials.username).first()
    if not api_key or not api_key.verify(credentials.password):
        logger.info("Rejected API key %s", credentials.username)
        raise _unauthorized("Invalid API keys")

    return ProjectScope(project_id=api_key.project_id, api_key_id=api_key.id)
