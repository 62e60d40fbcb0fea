"""Tests for the AGiXTSDK endpoint methods."""

import asyncio
from unittest.mock import AsyncMock, patch

import pytest

# Mark all tests as async
pytestmark = pytest.mark.asyncio


class TestProviders:
    """Test provider and embedder listings."""

    async def test_get_providers(self, server, make_client):
        server.reply({"providers": ["openai", "ezlocalai"]})

        async with make_client() as client:
            result = await client.get_providers()

        assert result == ["openai", "ezlocalai"]
        assert server.last_request.method == "GET"
        assert server.last_request.url.path == "/api/provider"
        assert server.last_request.content == b""

    async def test_get_providers_by_service(self, server, make_client):
        server.reply({"providers": ["elevenlabs"]})

        async with make_client() as client:
            result = await client.get_providers_by_service("tts")

        assert result == ["elevenlabs"]
        assert server.last_request.url.path == "/api/providers/service/tts"

    async def test_get_provider_settings(self, server, make_client):
        settings = {"MODEL_NAME": "gpt-4o", "MAX_TOKENS": 4096, "AI_TEMPERATURE": 0.7}
        server.reply({"settings": settings})

        async with make_client() as client:
            result = await client.get_provider_settings("openai")

        assert result == settings
        assert server.last_request.url.path == "/api/provider/openai"

    async def test_get_embed_providers(self, server, make_client):
        server.reply({"providers": ["default"]})

        async with make_client() as client:
            result = await client.get_embed_providers()

        assert result == ["default"]
        assert server.last_request.url.path == "/api/embedding_providers"

    async def test_get_embedders(self, server, make_client):
        embedders = {"default": {"chunk_size": 256}, "openai": {"chunk_size": 1000, "params": ["OPENAI_API_KEY"]}}
        server.reply({"embedders": embedders})

        async with make_client() as client:
            result = await client.get_embedders()

        assert result == embedders
        assert server.last_request.url.path == "/api/embedders"


class TestAgents:
    """Test agent management endpoints."""

    async def test_add_agent_returns_raw_response(self, server, make_client):
        server.reply({"message": "Agent added", "agent_file": "a1.json"})
        settings = {"provider": "openai", "nested": {"list": [1, 2.5, None, True]}}

        async with make_client() as client:
            result = await client.add_agent("a1", settings)

        assert result == {"message": "Agent added", "agent_file": "a1.json"}
        assert server.last_request.method == "POST"
        assert server.last_request.url.path == "/api/agent"
        assert server.last_json() == {"agent_name": "a1", "settings": settings}

    async def test_import_agent(self, server, make_client):
        server.reply({"message": "Agent imported"})
        settings = {"provider": "openai"}
        commands = {"Web Search": True, "Execute Python": False}

        async with make_client() as client:
            result = await client.import_agent("a1", settings, commands)

        assert result == {"message": "Agent imported"}
        assert server.last_request.method == "POST"
        assert server.last_request.url.path == "/api/agent/import"
        assert server.last_json() == {"agent_name": "a1", "settings": settings, "commands": commands}

    async def test_rename_agent(self, server, make_client):
        server.reply({"message": "Agent renamed"})

        async with make_client() as client:
            result = await client.rename_agent("old", "new")

        assert result == {"message": "Agent renamed"}
        assert server.last_request.method == "PATCH"
        assert server.last_request.url.path == "/api/agent/old"
        assert server.last_json() == {"new_name": "new"}

    async def test_update_agent_settings(self, server, make_client):
        server.reply({"message": "Agent a1 configuration updated."})
        settings = {"AI_TEMPERATURE": 0.2, "helper_agent": {"name": "h"}}

        async with make_client() as client:
            result = await client.update_agent_settings("a1", settings)

        assert result == "Agent a1 configuration updated."
        assert server.last_request.method == "PUT"
        assert server.last_request.url.path == "/api/agent/a1"
        assert server.last_json() == {"settings": settings, "agent_name": "a1"}

    async def test_update_agent_commands(self, server, make_client):
        server.reply({"message": "Agent commands updated"})
        commands = {"Web Search": True}

        async with make_client() as client:
            result = await client.update_agent_commands("a1", commands)

        assert result == "Agent commands updated"
        assert server.last_request.method == "PUT"
        assert server.last_request.url.path == "/api/agent/a1/commands"
        assert server.last_json() == {"commands": commands, "agent_name": "a1"}

    async def test_delete_agent(self, server, make_client):
        server.reply({"message": "Agent x deleted."})

        async with make_client() as client:
            result = await client.delete_agent("x")

        assert result == "Agent x deleted."
        assert server.last_request.method == "DELETE"
        assert str(server.last_request.url) == "http://agixt.test/api/agent/x"

    async def test_get_agents(self, server, make_client):
        server.reply({"agents": [{"name": "a1"}]})

        async with make_client() as client:
            result = await client.get_agents()

        assert result == [{"name": "a1"}]
        assert server.last_request.method == "GET"
        assert server.last_request.url.path == "/api/agent"

    async def test_get_agentconfig(self, server, make_client):
        agent = {"name": "a1", "settings": {"provider": "openai"}, "commands": {"Web Search": False}}
        server.reply({"agent": agent})

        async with make_client() as client:
            result = await client.get_agentconfig("a1")

        assert result == agent
        assert server.last_request.url.path == "/api/agent/a1"


class TestConversations:
    """Test conversation endpoints."""

    async def test_get_conversations_for_all_agents(self, server, make_client):
        server.reply({"conversations": ["c1", "c2"]})

        async with make_client() as client:
            result = await client.get_conversations()

        assert result == ["c1", "c2"]
        assert server.last_request.url.path == "/api/conversations"

    async def test_get_conversations_for_one_agent(self, server, make_client):
        server.reply({"conversations": ["c1"]})

        async with make_client() as client:
            result = await client.get_conversations("a1")

        assert result == ["c1"]
        assert server.last_request.url.path == "/api/a1/conversations"

    async def test_get_conversation_sends_body_on_get(self, server, make_client):
        history = [{"role": "USER", "message": "hi"}, {"role": "a1", "message": "hello"}]
        server.reply({"conversation_history": history})

        async with make_client() as client:
            result = await client.get_conversation("a1", "c1", limit=10, page=2)

        assert result == history
        assert server.last_request.method == "GET"
        assert server.last_request.url.path == "/api/conversation"
        assert server.last_json() == {"conversation_name": "c1", "agent_name": "a1", "limit": 10, "page": 2}

    async def test_get_conversation_default_paging(self, server, make_client):
        server.reply({"conversation_history": []})

        async with make_client() as client:
            await client.get_conversation("a1", "c1")

        assert server.last_json()["limit"] == 100
        assert server.last_json()["page"] == 1

    async def test_new_conversation(self, server, make_client):
        content = [{"role": "USER", "message": "seed"}]
        server.reply({"conversation_history": content})

        async with make_client() as client:
            result = await client.new_conversation("a1", "c1", content)

        assert result == content
        assert server.last_request.method == "POST"
        assert server.last_request.url.path == "/api/conversation"
        assert server.last_json() == {"conversation_name": "c1", "agent_name": "a1", "conversation_content": content}

    async def test_new_conversation_defaults_to_empty_content(self, server, make_client):
        server.reply({"conversation_history": []})

        async with make_client() as client:
            await client.new_conversation("a1", "c1")

        assert server.last_json()["conversation_content"] == []

    async def test_delete_conversation(self, server, make_client):
        server.reply({"message": "Conversation c1 deleted."})

        async with make_client() as client:
            result = await client.delete_conversation("a1", "c1")

        assert result == "Conversation c1 deleted."
        assert server.last_request.method == "DELETE"
        assert server.last_request.url.path == "/api/conversation"
        assert server.last_json() == {"conversation_name": "c1", "agent_name": "a1"}

    async def test_delete_conversation_message(self, server, make_client):
        server.reply({"message": "Message deleted."})

        async with make_client() as client:
            result = await client.delete_conversation_message("a1", "c1", "hello there")

        assert result == "Message deleted."
        assert server.last_request.method == "DELETE"
        assert server.last_request.url.path == "/api/conversation/message"
        assert server.last_json() == {"message": "hello there", "agent_name": "a1", "conversation_name": "c1"}

    async def test_update_conversation_message(self, server, make_client):
        server.reply({"message": "Message updated."})

        async with make_client() as client:
            result = await client.update_conversation_message("a1", "c1", "old text", "new text")

        assert result == "Message updated."
        assert server.last_request.method == "PUT"
        assert server.last_request.url.path == "/api/conversation/message"
        assert server.last_json() == {
            "message": "old text",
            "new_message": "new text",
            "agent_name": "a1",
            "conversation_name": "c1",
        }


class TestPrompting:
    """Test prompt_agent and its convenience wrappers."""

    async def test_prompt_agent(self, server, make_client):
        server.reply({"response": "42"})
        prompt_args = {"user_input": "6*7?", "shots": 3, "options": {"websearch": False}}

        async with make_client() as client:
            result = await client.prompt_agent("a1", "Think About It", prompt_args)

        assert result == "42"
        assert server.last_request.method == "POST"
        assert server.last_request.url.path == "/api/agent/a1/prompt"
        assert server.last_json() == {"prompt_name": "Think About It", "prompt_args": prompt_args}

    async def test_instruct(self, server, make_client):
        server.reply({"response": "done"})

        async with make_client() as client:
            result = await client.instruct("a1", "do it", "c1")

        assert result == "done"
        assert server.last_json() == {
            "prompt_name": "instruct",
            "prompt_args": {"user_input": "do it", "disable_memory": True, "conversation_name": "c1"},
        }

    async def test_chat_delegates_to_prompt_agent(self, make_client):
        async with make_client() as client:
            with patch.object(client, "prompt_agent", new_callable=AsyncMock) as mock_prompt:
                mock_prompt.return_value = "hello"

                result = await client.chat("a", "hi", "c1", 3)

        assert result == "hello"
        mock_prompt.assert_awaited_once_with(
            "a",
            "Chat",
            {"user_input": "hi", "context_results": 3, "conversation_name": "c1", "disable_memory": True},
        )

    async def test_chat_wire_format(self, server, make_client):
        server.reply({"response": "hello"})

        async with make_client() as client:
            await client.chat("a", "hi", "c1", 3)

        body = server.last_json()
        assert body["prompt_name"] == "Chat"
        assert body["prompt_args"] == {
            "user_input": "hi",
            "context_results": 3,
            "conversation_name": "c1",
            "disable_memory": True,
        }
        assert body["prompt_args"]["disable_memory"] is True

    async def test_smartchat_is_chat_with_one_context_result(self, make_client):
        async with make_client() as client:
            with patch.object(client, "chat", new_callable=AsyncMock) as mock_chat:
                mock_chat.return_value = "ok"

                result = await client.smartchat("a", "hi", "c1")

        assert result == "ok"
        mock_chat.assert_awaited_once_with("a", "hi", "c1", 1)

    async def test_smartchat_matches_chat_on_the_wire(self, server, make_client):
        server.reply({"response": "ok"})

        async with make_client() as client:
            await client.smartchat("a", "hi", "c1")
            await client.chat("a", "hi", "c1", 1)

        assert server.requests[0].content == server.requests[1].content
        assert server.requests[0].url == server.requests[1].url

    async def test_smartinstruct_is_instruct(self, server, make_client):
        server.reply({"response": "ok"})

        async with make_client() as client:
            await client.smartinstruct("a", "hi", "c1")
            await client.instruct("a", "hi", "c1")

        assert server.requests[0].content == server.requests[1].content
        assert server.last_json()["prompt_name"] == "instruct"


class TestConcurrency:
    """Test that one client can serve concurrent calls."""

    async def test_concurrent_calls_share_client(self, server, make_client):
        server.reply({"agents": [], "providers": [], "conversations": []})

        async with make_client() as client:
            results = await asyncio.gather(
                client.get_agents(),
                client.get_providers(),
                client.get_conversations(),
            )

        assert results == [[], [], []]
        assert len(server.requests) == 3
