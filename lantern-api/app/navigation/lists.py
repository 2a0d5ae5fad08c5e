"""
Per-session detail page lists stored in Redis.

Each browser session owns one hash mapping a list key (``traces``,
``generations``, ...) to the JSON-encoded ids currently shown in that table.
"""
import json
import logging
from typing import Optional, Sequence

import redis.asyncio as redis

from app.core.config import settings

logger = logging.getLogger("lantern.navigation.lists")


class DetailPageLists:
    """Read and write the detail page lists of browser sessions."""

    def __init__(self, redis_conn: redis.Redis, ttl_seconds: int = settings.detail_page_list_ttl_seconds):
        self.redis = redis_conn
        self.ttl_seconds = ttl_seconds

    @staticmethod
    def _key(session_id: str) -> str:
        return f"detail_page_lists:{session_id}"

    @staticmethod
    def _decode(session_id: str, list_key: str, value: Optional[str]) -> Optional[list[str]]:
        """Parse a stored list; malformed entries count as missing."""
        if not value:
            return None
        try:
            ids = json.loads(value)
        except json.JSONDecodeError:
            ids = None
        if not isinstance(ids, list):
            logger.warning("Ignoring malformed list %s for session %s", list_key, session_id)
            return None
        return [str(entity_id) for entity_id in ids]

    async def get_lists(self, session_id: str) -> dict[str, list[str]]:
        raw = await self.redis.hgetall(self._key(session_id))
        lists = {}
        for list_key, value in raw.items():
            ids = self._decode(session_id, list_key, value)
            if ids is not None:
                lists[list_key] = ids
        return lists

    async def set_list(self, session_id: str, list_key: str, ids: Sequence[str]) -> None:
        key = self._key(session_id)
        async with self.redis.pipeline(transaction=True) as pipe:
            pipe.hset(key, list_key, json.dumps(list(ids)))
            pipe.expire(key, self.ttl_seconds)
            await pipe.execute()

    async def clear(self, session_id: str) -> None:
        await self.redis.delete(self._key(session_id))
