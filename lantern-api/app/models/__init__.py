from app.models.organization import Organization, PlanType
from app.models.project import Project
from app.models.api_key import ApiKey
from app.models.trace import Trace
from app.models.observation import Observation, ObservationType, ObservationLevel

__all__ = [
    "Organization",
    "PlanType",
    "Project",
    "ApiKey",
    "Trace",
    "Observation",
    "ObservationType",
    "ObservationLevel",
]
