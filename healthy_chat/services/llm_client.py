# healthy_chat/services/llm_client.py
import json
import logging
from typing import Any, Callable, Dict, List, Optional

from openai import APIError, APIStatusError, OpenAI
from pydantic import BaseModel

from healthy_chat.config import (
    GROQ_API_KEY,
    GROQ_BASE_URL,
    GROQ_MODEL,
    LLM_MAX_TOKENS,
    LLM_TEMPERATURE,
    LLM_TIMEOUT_SECONDS,
)
from healthy_chat.errors import LLMConfigurationError, LLMProviderError

logger = logging.getLogger(__name__)


class LLMReply(BaseModel):
    text: str
    raw: Any = None


# ---------- reply shapes ----------

def _chat_completion_content(payload: Dict[str, Any]) -> Optional[str]:
    """{"choices": [{"message": {"content": "..."}}]}"""
    choices = payload.get("choices")
    if not isinstance(choices, list) or not choices or not isinstance(choices[0], dict):
        return None
    message = choices[0].get("message")
    if isinstance(message, dict) and isinstance(message.get("content"), str):
        return message["content"]
    return None


def _completion_text(payload: Dict[str, Any]) -> Optional[str]:
    """{"choices": [{"text": "..."}]}"""
    choices = payload.get("choices")
    if not isinstance(choices, list) or not choices or not isinstance(choices[0], dict):
        return None
    text = choices[0].get("text")
    return text if isinstance(text, str) else None


def _output_content(payload: Dict[str, Any]) -> Optional[str]:
    """{"output": [{"content": [{"text": "..."}, ...] | "..."}]}"""
    output = payload.get("output")
    if not isinstance(output, list) or not output or not isinstance(output[0], dict):
        return None
    content = output[0].get("content")
    if isinstance(content, str):
        return content or None
    if not isinstance(content, list):
        return None

    parts: List[str] = []
    for item in content:
        if isinstance(item, str):
            parts.append(item)
        elif isinstance(item, dict):
            if isinstance(item.get("text"), str):
                parts.append(item["text"])
            elif isinstance(item.get("content"), str):
                parts.append(item["content"])
    joined = "\n".join(parts).strip()
    return joined or None


# Tried in order; anything else falls back to the raw body
REPLY_SHAPES: List[Callable[[Dict[str, Any]], Optional[str]]] = [
    _chat_completion_content,
    _completion_text,
    _output_content,
]


def extract_reply_text(payload: Any) -> Optional[str]:
    """Reply text from a provider payload of a known shape, else None."""
    if not isinstance(payload, dict):
        return None
    for shape in REPLY_SHAPES:
        text = shape(payload)
        if text is not None:
            return text
    return None


# ---------- client ----------

class LLMClient:
    def __init__(
        self,
        api_key: Optional[str] = GROQ_API_KEY,
        base_url: str = GROQ_BASE_URL,
        model: str = GROQ_MODEL,
        client: Optional[OpenAI] = None,
    ):
        self.api_key = api_key
        self.base_url = base_url
        self.model = model
        self._client = client

    def _get_client(self) -> OpenAI:
        if self._client is None:
            if not self.api_key:
                raise LLMConfigurationError("Groq API key not configured.")
            self._client = OpenAI(
                api_key=self.api_key,
                base_url=self.base_url,
                timeout=LLM_TIMEOUT_SECONDS,
            )
        return self._client

    def complete(self, messages: List[Dict[str, str]]) -> LLMReply:
        client = self._get_client()
        logger.info("Calling %s with %d messages", self.model, len(messages))

        try:
            resp = client.chat.completions.create(
                model=self.model,
                messages=messages,
                temperature=LLM_TEMPERATURE,
                max_tokens=LLM_MAX_TOKENS,
            )
        except APIStatusError as e:
            body = e.response.text if e.response is not None else str(e)
            logger.warning("LLM error %s: %s", e.status_code, body)
            raise LLMProviderError(e.status_code, body) from e
        except APIError as e:
            logger.error("Error calling LLM", exc_info=True)
            raise LLMProviderError(502, str(e)) from e

        raw = resp.model_dump()
        text = extract_reply_text(raw)
        if text is None:
            logger.warning("Unrecognised reply shape, returning the raw body")
            text = json.dumps(raw, ensure_ascii=False)
        return LLMReply(text=text, raw=raw)
