import enum
from sqlalchemy import Column, String, Integer, DateTime, ForeignKey, Enum, Index, Text

from sqlalchemy.orm import relationship

from app.core.database import Base
from app.models.trace import JSONType, utcnow


class ObservationType(str, enum.Enum):
    """Kinds of work recorded inside a trace."""

    GENERATION = "GENERATION"
    SPAN = "SPAN"
    EVENT = "EVENT"


class ObservationLevel(str, enum.Enum):
    """Severity attached to an observation."""

    DEBUG = "DEBUG"
    DEFAULT = "DEFAULT"
    WARNING = "WARNING"
    ERROR = "ERROR"


class Observation(Base):
    """Observation model - one generation, span or event within a trace."""

    __tablename__ = "observations"

    id = Column(String, primary_key=True)
    trace_id = Column(String, ForeignKey("traces.id"), nullable=False)
    type = Column(Enum(ObservationType), nullable=False)
    name = Column(String)
    start_time = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    end_time = Column(DateTime(timezone=True))
    completion_start_time = Column(DateTime(timezone=True))
    model = Column(String)
    model_parameters = Column(JSONType)
    input = Column(JSONType)
    output = Column(JSONType)
    observation_metadata = Column("metadata", JSONType)
    level = Column(Enum(ObservationLevel), nullable=False, default=ObservationLevel.DEFAULT)
    status_message = Column(Text)
    parent_observation_id = Column(String, index=True)
    version = Column(String)
    prompt_tokens = Column(Integer, nullable=False, default=0)
    completion_tokens = Column(Integer, nullable=False, default=0)
    total_tokens = Column(Integer, nullable=False, default=0)

    # Relationships
    trace = relationship("Trace", back_populates="observations")

    __table_args__ = (
        Index("idx_observations_trace_start", "trace_id", "start_time"),
        Index("idx_observations_type", "type"),
    )
