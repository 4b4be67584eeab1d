# healthy_chat/routes/chat_routes.py
from typing import Optional

from fastapi import APIRouter, Cookie, Depends, Response

from healthy_chat.controllers.chat_controller import ChatController
from healthy_chat.dependencies import get_conversation_store, get_llm_client, get_recipe_catalog
from healthy_chat.models.chat import ChatRequest, ChatResponse

router = APIRouter()


@router.post("", response_model=ChatResponse, response_model_exclude_none=True)
def chat(
    request: ChatRequest,
    response: Response,
    conversation_id: Optional[str] = Cookie(None),
    store=Depends(get_conversation_store),
    catalog=Depends(get_recipe_catalog),
    llm=Depends(get_llm_client),
):
    """Send a chat message and get the reply plus recipe suggestions"""
    return ChatController.chat(request, response, conversation_id, store, catalog, llm)


@router.get("/{conversation_id}/profile")
def get_profile(conversation_id: int, store=Depends(get_conversation_store)):
    return ChatController.get_profile(conversation_id, store)


@router.get("/{conversation_id}/messages")
def get_messages(conversation_id: int, store=Depends(get_conversation_store)):
    return ChatController.get_messages(conversation_id, store)
