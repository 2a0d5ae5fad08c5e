def test_root(client):
    response = client.get("/")
    assert response.status_code == 200
    assert response.json()["name"] == "Lantern API"


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {
        "status": "healthy",
        "database": "connected",
        "redis": "connected",
    }


def test_health_reports_failing_redis(client, fake_redis):
    from unittest.mock import AsyncMock, patch

    from redis.exceptions import ConnectionError

    with patch.object(fake_redis, "ping", AsyncMock(side_effect=ConnectionError("refused"))):
        response = client.get("/health")

    assert response.status_code == 503
    assert response.json() == {
        "status": "unhealthy",
        "database": "connected",
        "redis": "unavailable",
    }


def test_redis_url_credentials_are_not_logged():
    from app.core.redis_client import _redacted

    assert _redacted("redis://:s3cret@cache:6379/0") == "cache:6379/0"
    assert _redacted("redis://localhost:6379/0") == "redis://localhost:6379/0"
