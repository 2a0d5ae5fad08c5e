from app.navigation.events import KeyboardEventSource, KeyEvent
from app.navigation.lists import DetailPageLists
from app.navigation.nav import (
    NAVIGATE_EVENT,
    DetailPageNav,
    Direction,
    NavControl,
    Neighbors,
    find_neighbors,
)
from app.navigation.routing import DETAIL_PAGE_ROUTES, RedirectRouter, detail_page_path

__all__ = [
    "KeyboardEventSource",
    "KeyEvent",
    "DetailPageLists",
    "NAVIGATE_EVENT",
    "DetailPageNav",
    "Direction",
    "NavControl",
    "Neighbors",
    "find_neighbors",
    "DETAIL_PAGE_ROUTES",
    "RedirectRouter",
    "detail_page_path",
]
