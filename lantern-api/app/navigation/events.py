"""Keyboard events and a window-like listener registry."""
from dataclasses import dataclass
from typing import Callable, Optional


@dataclass(frozen=True)
class KeyEvent:
    """A key press together with the tag name of the focused element."""

    key: str
    active_element: Optional[str] = None

    @property
    def in_text_input(self) -> bool:
        return (self.active_element or "").lower() == "input"


KeyListener = Callable[[KeyEvent], None]


class KeyboardEventSource:
    """Dispatches key presses to the listeners currently registered."""

    def __init__(self):
        self._listeners: list[KeyListener] = []

    def add_listener(self, listener: KeyListener) -> None:
        if listener not in self._listeners:
            self._listeners.append(listener)

    def remove_listener(self, listener: KeyListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    @property
    def listener_count(self) -> int:
        return len(self._listeners)

    def dispatch(self, event: KeyEvent) -> None:
        # Copy so listeners may unregister while handling
        for listener in list(self._listeners):
            listener(event)
