# healthy_chat/dependencies.py
from healthy_chat.database import get_redis_client
from healthy_chat.services.conversation_store import ConversationStore
from healthy_chat.services.llm_client import LLMClient
from healthy_chat.services.recipe_catalog import RedisRecipeCatalog

_llm_client = LLMClient()


def get_conversation_store() -> ConversationStore:
    return ConversationStore(get_redis_client())


def get_recipe_catalog() -> RedisRecipeCatalog:
    return RedisRecipeCatalog(get_redis_client())


def get_llm_client() -> LLMClient:
    return _llm_client
