"""
Support Chat Service

Drives the Crisp chat widget through its ``$crisp`` command queue: the API
returns commands and the dashboard pushes them onto ``window.$crisp``.
Without a configured website id every operation is a silent no-op.
"""
import enum
from typing import Any, Dict, List, Optional

from app.core.config import settings

CRISP_SCRIPT_URL = "https://client.crisp.chat/l.js"

CrispCommand = List[Any]


class ChatTrigger(str, enum.Enum):
    """Crisp triggers the dashboard may fire."""

    AFTER_PROJECT_CREATION = "after-project-creation"


class SupportChat:
    """Wrapper around the Crisp widget for one dashboard session."""

    def __init__(self, website_id: Optional[str]):
        self.website_id = website_id
        self.available = bool(website_id)
        self._initialized = False
        self._commands: List[CrispCommand] = []

    def initialize(self) -> Optional[Dict[str, str]]:
        """Return the widget configuration the first time it is requested."""
        if not self.available or self._initialized:
            return None
        self._initialized = True
        return {"websiteId": self.website_id, "scriptUrl": CRISP_SCRIPT_URL}

    def set_user(self, name: str, email: str, data: Dict[str, Any]) -> None:
        if not self.available:
            return
        self._commands.append(["set", "user:email", [email]])
        self._commands.append(["set", "user:nickname", [name]])
        self._commands.append(["set", "session:data", [[[key, value] for key, value in data.items()]]])

    def run_trigger(self, trigger: ChatTrigger) -> None:
        if not self.available:
            return
        self._commands.append(["do", "trigger:run", [ChatTrigger(trigger).value]])

    def open_chat(self) -> None:
        if not self.available:
            return
        self._commands.append(["do", "chat:open"])

    def drain(self) -> List[CrispCommand]:
        """Return queued commands and empty the queue."""
        commands, self._commands = self._commands, []
        return commands


def get_support_chat() -> SupportChat:
    return SupportChat(settings.crisp_website_id)
