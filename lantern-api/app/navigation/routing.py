"""Dashboard detail page URLs and a router that records navigation."""
from typing import Callable, Optional

from app.core.config import settings

# Detail page route per list key
DETAIL_PAGE_ROUTES = {
    "traces": "/project/{project_id}/traces/{id}",
    "generations": "/project/{project_id}/generations/{id}",
    "sessions": "/project/{project_id}/sessions/{id}",
}


def detail_page_path(list_key: str, project_id: str) -> Optional[Callable[[str], str]]:
    """Build the id -> URL function for a list, or None for unknown lists."""
    template = DETAIL_PAGE_ROUTES.get(list_key)
    if template is None:
        return None

    def path(entity_id: str) -> str:
        return template.format(project_id=project_id, id=entity_id)

    return path


class RedirectRouter:
    """Router that remembers the last location pushed to it."""

    def __init__(self, base_url: str = settings.dashboard_base_url):
        self.base_url = base_url.rstrip("/")
        self.location: Optional[str] = None

    def push(self, url: str) -> None:
        self.location = f"{self.base_url}{url}"
