from datetime import datetime, timezone
from sqlalchemy import Column, String, DateTime, ForeignKey, Index, JSON, Uuid
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import relationship

from app.core.database import Base

JSONType = JSON().with_variant(JSONB(), "postgresql")


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Trace(Base):
    """Trace model - a named session grouping the observations of one request."""

    __tablename__ = "traces"

    id = Column(String, primary_key=True)
    project_id = Column(Uuid(as_uuid=True), ForeignKey("projects.id"), nullable=False)
    name = Column(String)
    user_id = Column(String, index=True)
    trace_metadata = Column("metadata", JSONType)
    release = Column(String)
    version = Column(String)
    timestamp = Column(DateTime(timezone=True), default=utcnow, nullable=False)

    # Relationships
    project = relationship("Project", back_populates="traces")
    observations = relationship(
        "Observation",
        back_populates="trace",
        cascade="all, delete-orphan",
        order_by="Observation.start_time",
    )

    __table_args__ = (
        Index("idx_traces_project_timestamp", "project_id", "timestamp"),
    )
