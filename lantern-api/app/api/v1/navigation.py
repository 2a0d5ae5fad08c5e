"""
Detail Page Navigation API Endpoints
"""
from dataclasses import asdict

from fastapi import APIRouter, BackgroundTasks, Depends, Header, HTTPException, Query, status
from pydantic import BaseModel
from typing import Callable, Dict, List, Optional
import redis.asyncio as redis

from app.core.redis_client import get_redis
from app.navigation import (
    DetailPageLists,
    DetailPageNav,
    Direction,
    KeyboardEventSource,
    KeyEvent,
    RedirectRouter,
    DETAIL_PAGE_ROUTES,
    detail_page_path,
)
from app.schemas.observation import CamelModel
from app.services.analytics_service import AnalyticsService, get_analytics_service

router = APIRouter()


class ListUpdate(BaseModel):
    """Ids currently shown in a table, in display order."""

    ids: List[str]


class ControlResponse(CamelModel):
    direction: Direction
    label: str
    shortcut: str
    disabled: bool
    href: Optional[str] = None


class NavResponse(CamelModel):
    """Controls to render; null when there is no list to navigate."""

    controls: Optional[List[ControlResponse]] = None


class ClickRequest(CamelModel):
    direction: Direction


class KeyDownRequest(CamelModel):
    key: str
    active_element: Optional[str] = None


class NavigateResponse(CamelModel):
    location: Optional[str] = None


class SessionListsResponse(CamelModel):
    lists: Dict[str, List[str]]


class BackgroundCapture:
    """Analytics sink that sends events after the response is returned."""

    def __init__(self, background_tasks: BackgroundTasks, analytics: AnalyticsService, distinct_id: str):
        self.background_tasks = background_tasks
        self.analytics = analytics
        self.distinct_id = distinct_id

    def capture(self, event: str) -> None:
        self.background_tasks.add_task(self.analytics.capture, event, self.distinct_id)


async def get_detail_page_lists(redis_conn: redis.Redis = Depends(get_redis)) -> DetailPageLists:
    return DetailPageLists(redis_conn)


def _path_for(list_key: str, project_id: str) -> Callable[[str], str]:
    path = detail_page_path(list_key, project_id)
    if path is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Unknown detail page list: {list_key}"
        )
    return path


async def _build_nav(
    list_key: str,
    current_id: str,
    project_id: str,
    session_id: str,
    lists: DetailPageLists,
    analytics_sink,
) -> tuple[DetailPageNav, RedirectRouter]:
    path = _path_for(list_key, project_id)
    redirect = RedirectRouter()
    nav = DetailPageNav(
        current_id=current_id,
        path=path,
        list_key=list_key,
        lists=await lists.get_lists(session_id),
        router=redirect,
        analytics=analytics_sink,
    )
    return nav, redirect


@router.get("/lists", response_model=SessionListsResponse)
async def get_detail_page_lists_of_session(
    session_id: str = Header(alias="X-Session-Id"),
    lists: DetailPageLists = Depends(get_detail_page_lists),
):
    """All detail page lists stored for the session."""
    return SessionListsResponse(lists=await lists.get_lists(session_id))


@router.delete("/lists", status_code=status.HTTP_204_NO_CONTENT)
async def clear_detail_page_lists(
    session_id: str = Header(alias="X-Session-Id"),
    lists: DetailPageLists = Depends(get_detail_page_lists),
):
    """Forget every list of the session, e.g. on sign-out."""
    await lists.clear(session_id)
    return None


@router.put("/lists/{list_key}", status_code=status.HTTP_204_NO_CONTENT)
async def set_detail_page_list(
    list_key: str,
    body: ListUpdate,
    session_id: str = Header(alias="X-Session-Id"),
    lists: DetailPageLists = Depends(get_detail_page_lists),
):
    """Store the ids of a table so its detail pages can be navigated."""
    if list_key not in DETAIL_PAGE_ROUTES:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Unknown detail page list: {list_key}"
        )
    await lists.set_list(session_id, list_key, body.ids)
    return None


@router.get("/lists/{list_key}/{current_id}", response_model=NavResponse)
async def get_navigation(
    list_key: str,
    current_id: str,
    project_id: str = Query(alias="projectId"),
    session_id: str = Header(alias="X-Session-Id"),
    lists: DetailPageLists = Depends(get_detail_page_lists),
):
    """Get the previous/next controls for a detail page."""
    nav, _ = await _build_nav(list_key, current_id, project_id, session_id, lists, None)
    controls = nav.render()
    if controls is None:
        return NavResponse(controls=None)
    return NavResponse(
        controls=[ControlResponse(**asdict(control)) for control in controls]
    )


@router.post("/lists/{list_key}/{current_id}/click", response_model=NavigateResponse)
async def click_navigation(
    list_key: str,
    current_id: str,
    body: ClickRequest,
    background_tasks: BackgroundTasks,
    project_id: str = Query(alias="projectId"),
    session_id: str = Header(alias="X-Session-Id"),
    lists: DetailPageLists = Depends(get_detail_page_lists),
    analytics: AnalyticsService = Depends(get_analytics_service),
):
    """Handle a click on the up or down button."""
    sink = BackgroundCapture(background_tasks, analytics, distinct_id=session_id)
    nav, redirect = await _build_nav(list_key, current_id, project_id, session_id, lists, sink)
    nav.click(body.direction)
    return NavigateResponse(location=redirect.location)


@router.post("/lists/{list_key}/{current_id}/keydown", response_model=NavigateResponse)
async def keydown_navigation(
    list_key: str,
    current_id: str,
    body: KeyDownRequest,
    project_id: str = Query(alias="projectId"),
    session_id: str = Header(alias="X-Session-Id"),
    lists: DetailPageLists = Depends(get_detail_page_lists),
):
    """Handle a key press on a detail page (k = previous, j = next)."""
    nav, redirect = await _build_nav(list_key, current_id, project_id, session_id, lists, None)
    window = KeyboardEventSource()
    with nav.mounted(window):
        window.dispatch(KeyEvent(key=body.key, active_element=body.active_element))
    return NavigateResponse(location=redirect.location)
