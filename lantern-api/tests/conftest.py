import os

# Configure an in-memory database and quiet integrations before importing app modules.
os.environ["DATABASE_URL"] = "sqlite://"
os.environ.setdefault("REDIS_URL", "redis://localhost:6379/15")
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ.pop("CRISP_WEBSITE_ID", None)
os.environ.pop("POSTHOG_API_KEY", None)

import base64
import uuid
from datetime import datetime

import fakeredis
import pytest
from fastapi.testclient import TestClient

from app.core import redis_client
from app.core.database import Base, SessionLocal, engine
from app.main import app
from app.models import ApiKey, Observation, ObservationType, Organization, Project, Trace

PROJECT_ID = uuid.UUID("7a88fb47-b4e2-43b8-a06c-a5ce950dc53a")


@pytest.fixture(autouse=True)
def database():
    """Create all tables for a test and drop them afterwards."""
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def fake_redis():
    return fakeredis.FakeAsyncRedis(server=fakeredis.FakeServer(), decode_responses=True)


@pytest.fixture
def client(fake_redis):
    redis_client.redis_client = fake_redis
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
    redis_client.redis_client = None


def _create_project(db, project_id=None, name="test-project"):
    org = Organization(name=f"{name}-org")
    db.add(org)
    db.flush()
    project = Project(id=project_id or uuid.uuid4(), org_id=org.id, name=name)
    db.add(project)
    db.flush()
    api_key, secret_key = ApiKey.generate(project.id)
    db.add(api_key)
    db.commit()
    return project, api_key.public_key, secret_key


def _basic_auth(public_key, secret_key):
    token = base64.b64encode(f"{public_key}:{secret_key}".encode()).decode()
    return {"Authorization": f"Basic {token}"}


@pytest.fixture
def auth_headers(db):
    _, public_key, secret_key = _create_project(db, project_id=PROJECT_ID)
    return _basic_auth(public_key, secret_key)


@pytest.fixture
def make_project(db):
    """Create another project and return (project, auth headers)."""

    def _make(name="other-project"):
        project, public_key, secret_key = _create_project(db, name=name)
        return project, _basic_auth(public_key, secret_key)

    return _make


@pytest.fixture
def make_trace(db):
    def _make(project_id=PROJECT_ID, **kwargs):
        values = {
            "id": str(uuid.uuid4()),
            "name": "trace-name",
            "user_id": "user-1",
            "trace_metadata": {"key": "value"},
            "release": "1.0.0",
            "version": "2.0.0",
        }
        values.update(kwargs)
        trace = Trace(project_id=project_id, **values)
        db.add(trace)
        db.commit()
        return trace

    return _make


@pytest.fixture
def make_observation(db):
    def _make(trace_id, type=ObservationType.GENERATION, **kwargs):
        values = {
            "id": str(uuid.uuid4()),
            "name": "generation-name",
            "start_time": datetime(2021, 1, 1),
            "end_time": datetime(2021, 1, 1),
            "model": "model-name",
            "model_parameters": {"key": "value"},
            "input": {"key": "input"},
            "output": {"key": "output"},
            "version": "2.0.0",
        }
        values.update(kwargs)
        observation = Observation(trace_id=trace_id, type=type, **values)
        db.add(observation)
        db.commit()
        return observation

    return _make
