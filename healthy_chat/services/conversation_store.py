# healthy_chat/services/conversation_store.py
import logging
from datetime import datetime, timezone
from typing import Iterable, List, Optional

from healthy_chat.models.chat import ConversationMessage, Role

logger = logging.getLogger(__name__)

SEQ_KEY = "conversations:seq"


def _meta_key(conversation_id: int) -> str:
    return f"conversation:{conversation_id}"


def _messages_key(conversation_id: int) -> str:
    return f"conversation:{conversation_id}:messages"


def _parse_id(value) -> Optional[int]:
    if value is None:
        return None
    try:
        return int(str(value).strip())
    except ValueError:
        return None


class ConversationStore:
    """
    Append-only chat history in Redis.

    conversation:{id}            hash   created_at, updated_at, session_id
    conversation:{id}:messages   list   one JSON ConversationMessage per entry
    """

    def __init__(self, redis_client):
        self.redis = redis_client

    def create_conversation(self, session_id: Optional[str] = None) -> int:
        conversation_id = int(self.redis.incr(SEQ_KEY))
        self.redis.hset(
            _meta_key(conversation_id),
            mapping={
                "created_at": datetime.now(timezone.utc).isoformat(),
                "session_id": session_id or "",
            },
        )
        logger.info("Created conversation %s", conversation_id)
        return conversation_id

    def exists(self, conversation_id: int) -> bool:
        return bool(self.redis.exists(_meta_key(conversation_id)))

    def find_existing(self, *candidate_ids) -> Optional[int]:
        """First candidate (request id, cookie value, ...) naming a stored conversation."""
        for raw in candidate_ids:
            conversation_id = _parse_id(raw)
            if conversation_id is not None and self.exists(conversation_id):
                return conversation_id
        return None

    def append_message(self, conversation_id: int, role: Role, content: str) -> ConversationMessage:
        message = ConversationMessage(
            role=role,
            content=content,
            created_at=datetime.now(timezone.utc),
        )
        self.redis.rpush(_messages_key(conversation_id), message.model_dump_json())
        self.redis.hset(_meta_key(conversation_id), "updated_at", message.created_at.isoformat())
        return message

    def get_messages(self, conversation_id: int) -> List[ConversationMessage]:
        raw = self.redis.lrange(_messages_key(conversation_id), 0, -1) or []
        messages = [ConversationMessage.model_validate_json(r) for r in raw]
        messages.sort(key=lambda m: m.created_at)
        return messages


def user_messages(messages: Iterable[ConversationMessage]) -> List[str]:
    """Contents of the user's messages, oldest first."""
    ordered = sorted(messages, key=lambda m: m.created_at)
    return [m.content for m in ordered if m.role == "user"]
