# healthy_chat/controllers/chat_controller.py
import logging
from typing import Any, Dict, Optional

from fastapi import HTTPException, Response

from healthy_chat.config import CONVERSATION_COOKIE, HISTORY_WINDOW
from healthy_chat.errors import LLMConfigurationError, LLMProviderError
from healthy_chat.models.chat import ChatRequest
from healthy_chat.models.profile import UserProfile
from healthy_chat.services.conversation_store import ConversationStore, user_messages
from healthy_chat.services.llm_client import LLMClient
from healthy_chat.services.meal_planner import build_weekly_plan
from healthy_chat.services.profile_extractor import extract, observe
from healthy_chat.services.prompt import build_messages
from healthy_chat.services.recipe_catalog import RecipeCatalog
from healthy_chat.services.suggestion_service import DEFAULT_MAX_SUGGESTIONS, suggest

logger = logging.getLogger(__name__)

COOKIE_MAX_AGE = 4 * 60 * 60


class ChatController:

    @staticmethod
    def chat(
        request: ChatRequest,
        response: Response,
        cookie_conversation_id: Optional[str],
        store: ConversationStore,
        catalog: RecipeCatalog,
        llm: LLMClient,
    ) -> Dict[str, Any]:
        """ One chat turn: store the message, ask the model, attach local recommendations """
        if not request.message or not request.message.strip():
            raise HTTPException(status_code=400, detail="Message is required.")

        conversation_id = store.find_existing(request.context_id, cookie_conversation_id)
        if conversation_id is None:
            conversation_id = store.create_conversation()
            response.set_cookie(
                CONVERSATION_COOKIE,
                str(conversation_id),
                max_age=COOKIE_MAX_AGE,
                httponly=True,
            )

        store.append_message(conversation_id, "user", request.message)
        history = store.get_messages(conversation_id)

        obs = observe(user_messages(history))
        profile = UserProfile.from_observation(obs)
        logger.debug("Conversation %s profile: %s", conversation_id, profile.model_dump())

        try:
            reply = llm.complete(build_messages(profile, history, HISTORY_WINDOW, obs))
        except LLMConfigurationError as e:
            raise HTTPException(status_code=500, detail=str(e))
        except LLMProviderError as e:
            raise HTTPException(status_code=e.status_code, detail={"error": "LLM error", "detail": e.detail})

        store.append_message(conversation_id, "assistant", reply.text)

        suggestions = suggest(profile, DEFAULT_MAX_SUGGESTIONS, catalog)
        result = {
            "reply": reply.text,
            "contextId": conversation_id,
            "profile": profile.model_dump(),
            "suggestions": [s.model_dump() for s in suggestions],
        }

        if request.weekly:
            plan = build_weekly_plan(profile, catalog)
            result["weekly"] = True
            result["days"] = [d.model_dump() for d in plan.days]

        return result

    @staticmethod
    def get_profile(conversation_id: int, store: ConversationStore) -> Dict[str, Any]:
        """ Profile derived from a stored conversation """
        if not store.exists(conversation_id):
            raise HTTPException(status_code=404, detail="Conversation not found")
        profile = extract(user_messages(store.get_messages(conversation_id)))
        return {"contextId": conversation_id, "profile": profile.model_dump()}

    @staticmethod
    def get_messages(conversation_id: int, store: ConversationStore) -> Dict[str, Any]:
        if not store.exists(conversation_id):
            raise HTTPException(status_code=404, detail="Conversation not found")
        messages = store.get_messages(conversation_id)
        return {"contextId": conversation_id, "messages": [m.model_dump(mode="json") for m in messages]}
