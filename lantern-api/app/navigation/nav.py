"""
Previous/next navigation between detail pages.

A ``DetailPageNav`` looks up the current entity in the ordered list of ids
the user was browsing (e.g. the rows of the traces table) and offers
navigation to its neighbours, through two buttons and the ``k``/``j`` keys.
"""
import enum
import logging
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Callable, Iterator, Mapping, Optional, Protocol, Sequence

from app.navigation.events import KeyboardEventSource, KeyEvent

logger = logging.getLogger("lantern.navigation")

NAVIGATE_EVENT = "navigate_detail_pages:button_click_prev_or_next"


class Router(Protocol):
    def push(self, url: str) -> None: ...


class AnalyticsSink(Protocol):
    def capture(self, event: str) -> None: ...


class Direction(str, enum.Enum):
    """Navigation controls, top to bottom."""

    UP = "up"
    DOWN = "down"


SHORTCUTS = {"k": Direction.UP, "j": Direction.DOWN}


@dataclass(frozen=True)
class Neighbors:
    previous: Optional[str]
    next: Optional[str]


@dataclass(frozen=True)
class NavControl:
    """Render state of one navigation button."""

    direction: Direction
    label: str
    shortcut: str
    disabled: bool
    href: Optional[str]


def find_neighbors(ids: Sequence[str], current_id: str) -> Neighbors:
    """
    Return the ids before and after ``current_id``.

    An id missing from the list is treated as position -1, so it has no
    previous entry and the first id of the list as next entry.
    """
    try:
        index = list(ids).index(current_id)
    except ValueError:
        index = -1

    previous_id = ids[index - 1] if index > 0 else None
    next_id = ids[index + 1] if index < len(ids) - 1 else None
    return Neighbors(previous=previous_id, next=next_id)


class DetailPageNav:
    """Navigation widget state for one detail page."""

    def __init__(
        self,
        current_id: str,
        path: Callable[[str], str],
        list_key: str,
        lists: Mapping[str, Sequence[str]],
        router: Router,
        analytics: AnalyticsSink,
    ):
        self.current_id = current_id
        self.path = path
        self.list_key = list_key
        self.lists = lists
        self.router = router
        self.analytics = analytics

    def update(self, **inputs) -> None:
        """Replace inputs; neighbours are derived from them on every access."""
        for name in ("current_id", "path", "list_key", "lists", "router"):
            if name in inputs:
                setattr(self, name, inputs.pop(name))
        if inputs:
            raise TypeError(f"Unknown inputs: {', '.join(sorted(inputs))}")

    @property
    def ids(self) -> Sequence[str]:
        return self.lists.get(self.list_key) or []

    @property
    def neighbors(self) -> Neighbors:
        return find_neighbors(self.ids, self.current_id)

    @property
    def previous_id(self) -> Optional[str]:
        return self.neighbors.previous

    @property
    def next_id(self) -> Optional[str]:
        return self.neighbors.next

    def _target(self, direction: Direction) -> Optional[str]:
        neighbors = self.neighbors
        return neighbors.previous if direction == Direction.UP else neighbors.next

    def render(self) -> Optional[list[NavControl]]:
        """Controls to show, or None when there is no list to navigate."""
        if not self.ids:
            return None

        controls = []
        for direction, label, shortcut in (
            (Direction.UP, "Navigate up", "k"),
            (Direction.DOWN, "Navigate down", "j"),
        ):
            target = self._target(direction)
            controls.append(
                NavControl(
                    direction=direction,
                    label=label,
                    shortcut=shortcut,
                    disabled=not target,
                    href=self.path(target) if target else None,
                )
            )
        return controls

    def _navigate(self, target: str) -> str:
        url = self.path(target)
        logger.debug("Navigating %s list from %s to %s", self.list_key, self.current_id, target)
        self.router.push(url)
        return url

    def click(self, direction: Direction) -> Optional[str]:
        """Handle a button click; disabled buttons do nothing."""
        target = self._target(direction)
        if not target:
            return None
        self.analytics.capture(NAVIGATE_EVENT)
        return self._navigate(target)

    def handle_key_down(self, event: KeyEvent) -> Optional[str]:
        # Typing in an input must not navigate away
        if event.in_text_input:
            return None

        direction = SHORTCUTS.get(event.key)
        if direction is None:
            return None
        target = self._target(direction)
        if not target:
            return None
        return self._navigate(target)

    def _on_key_down(self, event: KeyEvent) -> None:
        self.handle_key_down(event)

    @contextmanager
    def mounted(self, source: KeyboardEventSource) -> Iterator["DetailPageNav"]:
        """Listen for shortcuts on ``source`` while the block runs."""
        source.add_listener(self._on_key_down)
        try:
            yield self
        finally:
            source.remove_listener(self._on_key_down)
