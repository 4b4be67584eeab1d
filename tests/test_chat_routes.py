# tests/test_chat_routes.py
"""End-to-end tests for the HTTP routes with Redis and the model faked out."""
from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from healthy_chat.dependencies import get_conversation_store, get_llm_client, get_recipe_catalog
from healthy_chat.errors import LLMConfigurationError, LLMProviderError
from healthy_chat.services.conversation_store import ConversationStore
from healthy_chat.services.llm_client import LLMReply
from healthy_chat.services.recipe_catalog import RedisRecipeCatalog
from main import app


@pytest.fixture
def llm():
    mock = MagicMock()
    mock.complete.return_value = LLMReply(text="Salut ! Voici quelques idées.")
    return mock


@pytest.fixture
def client(fake_redis, catalog, llm):
    app.dependency_overrides[get_conversation_store] = lambda: ConversationStore(fake_redis)
    app.dependency_overrides[get_recipe_catalog] = lambda: catalog
    app.dependency_overrides[get_llm_client] = lambda: llm
    yield TestClient(app)
    app.dependency_overrides.clear()


class TestChat:

    def test_blank_message_rejected(self, client, llm):
        resp = client.post("/api/chat", json={"message": "   "})

        assert resp.status_code == 400
        llm.complete.assert_not_called()

    def test_first_message_creates_conversation(self, client, fake_redis):
        resp = client.post("/api/chat", json={"message": "Bonjour"})

        assert resp.status_code == 200
        data = resp.json()
        assert data["reply"] == "Salut ! Voici quelques idées."
        assert data["contextId"] == 1
        assert [s["id"] for s in data["suggestions"]] == [7, 2, 1]
        assert set(data["suggestions"][0]) == {"id", "title", "calories", "prep_minutes"}
        assert "days" not in data
        assert resp.cookies.get("conversation_id") == "1"
        assert len(fake_redis.lists["conversation:1:messages"]) == 2

    def test_profile_accumulates_over_turns(self, client):
        first = client.post("/api/chat", json={"message": "Je veux perdre du poids"}).json()
        second = client.post(
            "/api/chat",
            json={"message": "sans gluten, j'ai 20 minutes", "contextId": str(first["contextId"])},
        ).json()

        assert second["contextId"] == first["contextId"]
        assert second["profile"] == {
            "goal": "weight_loss",
            "allergies": ["gluten"],
            "time_available_minutes": 20,
            "cooking_level": "beginner",
            "budget": "medium",
        }
        assert [s["id"] for s in second["suggestions"]] == [2, 1, 3]

    def test_numeric_context_id_accepted(self, client):
        first = client.post("/api/chat", json={"message": "Bonjour"}).json()
        second = client.post("/api/chat", json={"message": "Encore", "contextId": first["contextId"]})
        assert second.json()["contextId"] == first["contextId"]

    def test_cookie_resumes_conversation(self, client):
        client.post("/api/chat", json={"message": "sans lait"})
        data = client.post("/api/chat", json={"message": "bonjour"}).json()

        assert data["contextId"] == 1
        assert data["profile"]["allergies"] == ["lait"]

    def test_unknown_context_id_starts_new_conversation(self, client):
        data = client.post("/api/chat", json={"message": "Bonjour", "contextId": "999"}).json()
        assert data["contextId"] == 1

    def test_model_sees_system_prompt_and_history(self, client, llm):
        client.post("/api/chat", json={"message": "sans gluten"})

        messages = llm.complete.call_args.args[0]

        assert messages[0]["role"] == "system"
        assert "allergies = gluten" in messages[0]["content"]
        assert messages[-1] == {"role": "user", "content": "sans gluten"}

    def test_weekly_plan(self, client):
        data = client.post("/api/chat", json={"message": "je veux maigrir", "weekly": True}).json()

        assert data["weekly"] is True
        assert len(data["days"]) == 7
        for day in data["days"]:
            assert {"breakfast", "lunch", "dinner"} <= set(day)
            assert set(day["lunch"]) >= {"id", "title", "calories"}

    def test_missing_api_key_is_500(self, client, llm):
        llm.complete.side_effect = LLMConfigurationError("Groq API key not configured.")

        resp = client.post("/api/chat", json={"message": "Bonjour"})

        assert resp.status_code == 500
        assert resp.json()["detail"] == "Groq API key not configured."

    def test_provider_error_status_passed_through(self, client, llm, fake_redis):
        llm.complete.side_effect = LLMProviderError(429, "rate limited")

        resp = client.post("/api/chat", json={"message": "Bonjour"})

        assert resp.status_code == 429
        assert resp.json()["detail"] == {"error": "LLM error", "detail": "rate limited"}
        # the user message is kept, no assistant reply is stored
        assert len(fake_redis.lists["conversation:1:messages"]) == 1


class TestConversationEndpoints:

    def test_profile_endpoint(self, client):
        client.post("/api/chat", json={"message": "niveau expert, 1 heure"})

        data = client.get("/api/chat/1/profile").json()

        assert data["profile"]["cooking_level"] == "advanced"
        assert data["profile"]["time_available_minutes"] == 60

    def test_messages_endpoint(self, client):
        client.post("/api/chat", json={"message": "Bonjour"})

        messages = client.get("/api/chat/1/messages").json()["messages"]

        assert [m["role"] for m in messages] == ["user", "assistant"]

    def test_unknown_conversation_is_404(self, client):
        assert client.get("/api/chat/5/profile").status_code == 404
        assert client.get("/api/chat/5/messages").status_code == 404


class TestRecipeEndpoints:

    def test_plan_is_stateless(self, client, llm):
        resp = client.post("/api/recipes/plan", json={
            "messages": ["Je veux perdre du poids", "sans gluten, j'ai 20 minutes"],
            "weekly": True,
            "max_suggestions": 2,
        })

        data = resp.json()
        assert data["profile"]["goal"] == "weight_loss"
        assert [s["id"] for s in data["suggestions"]] == [2, 1]
        assert len(data["days"]) == 7
        llm.complete.assert_not_called()

    def test_seed(self, client, fake_redis):
        app.dependency_overrides[get_recipe_catalog] = lambda: RedisRecipeCatalog(fake_redis)

        resp = client.post("/api/recipes/seed", json={"recipes": [
            {"id": 1, "title": "Chakchouka", "calories": 410, "prep_minutes": 20, "ingredients": "oeuf, tomate"},
        ]})

        assert resp.json() == {"ok": True, "count": 1}
        assert "1" in fake_redis.hashes["recipes"]

    def test_seed_rejects_empty(self, client, fake_redis):
        app.dependency_overrides[get_recipe_catalog] = lambda: RedisRecipeCatalog(fake_redis)
        assert client.post("/api/recipes/seed", json={"recipes": []}).status_code == 400


def test_root(client):
    assert client.get("/").json() == {"message": "Healthy Recipes assistant running!"}
