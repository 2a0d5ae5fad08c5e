import logging
import secrets
import uuid
from datetime import datetime

import bcrypt
from sqlalchemy import Column, String, DateTime, ForeignKey, Uuid
from sqlalchemy.orm import relationship

from app.core.config import settings
from app.core.database import Base

logger = logging.getLogger("lantern.auth")


def hash_secret_key(secret_key: str) -> str:
    """Hash a secret key with bcrypt; the hash carries its own salt."""
    salt = bcrypt.gensalt(rounds=settings.bcrypt_rounds)
    return bcrypt.hashpw(secret_key.encode("utf-8"), salt).decode("utf-8")


def verify_secret_key(secret_key: str, hashed_secret_key: str) -> bool:
    """Check a secret key against its bcrypt hash."""
    try:
        return bcrypt.checkpw(secret_key.encode("utf-8"), hashed_secret_key.encode("utf-8"))
    except ValueError as e:
        logger.warning("Secret key verification failed: %s", e)
        return False


class ApiKey(Base):
    """API key pair granting public API access to a single project."""

    __tablename__ = "api_keys"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    project_id = Column(Uuid(as_uuid=True), ForeignKey("projects.id"), nullable=False, index=True)
    public_key = Column(String, unique=True, nullable=False, index=True)
    hashed_secret_key = Column(String, nullable=False)
    display_secret_key = Column(String, nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    # Relationships
    project = relationship("Project", back_populates="api_keys")

    @classmethod
    def generate(cls, project_id: uuid.UUID) -> tuple["ApiKey", str]:
        """
        Create a new key pair for a project.

        Returns the unsaved model and the plaintext secret key, which is
        not stored and can only be shown once.
        """
        public_key = f"pk-lt-{uuid.uuid4()}"
        secret_key = f"sk-lt-{secrets.token_hex(16)}"
        api_key = cls(
            project_id=project_id,
            public_key=public_key,
            hashed_secret_key=hash_secret_key(secret_key),
            display_secret_key=f"{secret_key[:6]}...{secret_key[-4:]}",
        )
        return api_key, secret_key

    def verify(self, secret_key: str) -> bool:
        return verify_secret_key(secret_key, self.hashed_secret_key)
