"""
Support Chat API Endpoints

Each endpoint returns the Crisp commands the dashboard should push onto
``window.$crisp``. When chat is not configured the command list is empty.
"""
from fastapi import APIRouter, Depends
from pydantic import BaseModel
from typing import Any, Dict, List, Optional

from app.schemas.observation import CamelModel
from app.services.support_chat import ChatTrigger, SupportChat, get_support_chat

router = APIRouter()


class ChatWidgetConfig(CamelModel):
    website_id: str
    script_url: str


class ChatStatusResponse(CamelModel):
    available: bool
    config: Optional[ChatWidgetConfig] = None


class ChatCommandsResponse(CamelModel):
    available: bool
    commands: List[List[Any]]


class ChatUser(BaseModel):
    name: str
    email: str
    data: Dict[str, Any] = {}


def _commands(chat: SupportChat) -> ChatCommandsResponse:
    return ChatCommandsResponse(available=chat.available, commands=chat.drain())


@router.get("/", response_model=ChatStatusResponse)
async def get_chat_status(chat: SupportChat = Depends(get_support_chat)):
    """Whether support chat is enabled, and the widget configuration if so."""
    return ChatStatusResponse(available=chat.available, config=chat.initialize())


@router.post("/user", response_model=ChatCommandsResponse)
async def set_chat_user(user: ChatUser, chat: SupportChat = Depends(get_support_chat)):
    """Identify the signed-in user to the chat widget."""
    chat.set_user(name=user.name, email=user.email, data=user.data)
    return _commands(chat)


@router.post("/triggers/{trigger}", response_model=ChatCommandsResponse)
async def run_chat_trigger(trigger: ChatTrigger, chat: SupportChat = Depends(get_support_chat)):
    """Fire a chat trigger."""
    chat.run_trigger(trigger)
    return _commands(chat)


@router.post("/open", response_model=ChatCommandsResponse)
async def open_chat(chat: SupportChat = Depends(get_support_chat)):
    """Open the chat window."""
    chat.open_chat()
    return _commands(chat)
