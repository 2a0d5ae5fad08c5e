"""
Analytics Service

Captures product analytics events in PostHog.
"""
import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional

import httpx

from app.core.config import settings

logger = logging.getLogger("lantern.analytics")


class AnalyticsService:
    """Service for sending events to PostHog's capture endpoint."""

    def __init__(self, api_key: Optional[str] = None, host: Optional[str] = None):
        self.api_key = api_key
        self.host = (host or "https://app.posthog.com").rstrip("/")

    @property
    def enabled(self) -> bool:
        return bool(self.api_key)

    async def capture(
        self,
        event: str,
        distinct_id: str,
        properties: Optional[Dict[str, Any]] = None,
    ) -> bool:
        """
        Capture a single event.

        Args:
            event: Event name
            distinct_id: Identifier of the user or session the event belongs to
            properties: Additional event properties

        Returns:
            True if the event was accepted, False otherwise
        """
        if not self.enabled:
            return False

        payload = {
            "api_key": self.api_key,
            "event": event,
            "distinct_id": distinct_id,
            "properties": properties or {},
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }

        try:
            async with httpx.AsyncClient() as client:
                response = await client.post(
                    f"{self.host}/capture/",
                    json=payload,
                    timeout=10.0,
                )
                return response.status_code == 200
        except httpx.HTTPError as e:
            logger.warning("Failed to capture analytics event %s: %s", event, e)
            return False


def get_analytics_service() -> AnalyticsService:
    return AnalyticsService(api_key=settings.posthog_api_key, host=settings.posthog_host)
