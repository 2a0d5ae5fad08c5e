"""
Health check endpoint.

Each dependency is checked on its own so one failing backend does not hide
the state of the other. Load balancers get a 503 when anything is down.
"""
import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
import redis.asyncio as redis
from redis.exceptions import RedisError

from app.core.database import get_db
from app.core.redis_client import get_redis

router = APIRouter()
logger = logging.getLogger("lantern.health")


def check_database(db: Session) -> str:
    try:
        db.execute(text("SELECT 1"))
        return "connected"
    except SQLAlchemyError as e:
        logger.warning("Database health check failed: %s", e)
        return "unavailable"


async def check_redis(redis_conn: redis.Redis) -> str:
    try:
        await redis_conn.ping()
        return "connected"
    except (RedisError, OSError) as e:
        logger.warning("Redis health check failed: %s", e)
        return "unavailable"


@router.get("/health")
async def health_check(db: Session = Depends(get_db), redis_conn: redis.Redis = Depends(get_redis)):
    """Report database and Redis connectivity."""
    components = {
        "database": check_database(db),
        "redis": await check_redis(redis_conn),
    }
    healthy = all(state == "connected" for state in components.values())

    return JSONResponse(
        status_code=status.HTTP_200_OK if healthy else status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"status": "healthy" if healthy else "unhealthy", **components},
    )
