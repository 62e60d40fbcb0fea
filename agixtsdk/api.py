"""AGiXT Python API - async client for the AGiXT agent server.

This module provides the AGiXTSDK client, which maps one method call to one
HTTP request against an AGiXT server and returns a single field of the JSON
response.

Core Components:
    - AGiXTSDK: Client holding the base URI, auth header and a shared
      httpx.AsyncClient

Endpoint Groups:
    - Providers: get_providers, get_providers_by_service, get_provider_settings,
      get_embed_providers, get_embedders
    - Agents: add_agent, import_agent, rename_agent, update_agent_settings,
      update_agent_commands, delete_agent, get_agents, get_agentconfig
    - Conversations: get_conversations, get_conversation, new_conversation,
      delete_conversation, delete_conversation_message,
      update_conversation_message
    - Prompting: prompt_agent, instruct, chat, smartinstruct, smartchat

Example:
    >>> import asyncio
    >>> from agixtsdk import AGiXTSDK
    >>>
    >>> async def main():
    ...     async with AGiXTSDK("http://localhost:7437", api_key="my-key") as client:
    ...         agents = await client.get_agents()
    ...         reply = await client.chat("gpt4free", "Hello!", "My Conversation", 4)
    ...         print(reply)
    >>>
    >>> asyncio.run(main())
"""

import re
import time
from typing import Any, TypeVar

import httpx
from pydantic import BaseModel, JsonValue, ValidationError

from agixtsdk.config import get_settings
from agixtsdk.events import RequestEvent, StatusCallback, emit_status
from agixtsdk.exceptions import (
    AGiXTError,
    AuthenticationError,
    ConfigError,
    DecodeError,
    InvalidRequestError,
    TransportError,
)
from agixtsdk.logging_config import get_logger
from agixtsdk.models import (
    AddAgentRequest,
    ConversationHistoryResponse,
    DeleteConversationMessageRequest,
    DeleteConversationRequest,
    EmbeddersResponse,
    Envelope,
    GetAgentConfigResponse,
    GetAgentsResponse,
    GetConversationRequest,
    GetConversationsResponse,
    ImportAgentRequest,
    JsonObject,
    MessageResponse,
    NewConversationRequest,
    PromptAgentRequest,
    PromptAgentResponse,
    ProviderSettingsResponse,
    ProvidersResponse,
    RenameAgentRequest,
    UpdateAgentCommandsRequest,
    UpdateAgentSettingsRequest,
    UpdateConversationMessageRequest,
)
from agixtsdk.telemetry import set_span_attributes, trace_request

logger = get_logger(__name__)

E = TypeVar("E", bound=Envelope)
R = TypeVar("R", bound=BaseModel)

# ============================================================================
# Header Helpers
# ============================================================================

_BEARER_PREFIX = re.compile(r"^\s*bearer\s+", re.IGNORECASE)

# Visible ASCII with inner spaces and tabs; a header value cannot start or end with whitespace
_HEADER_VALUE = re.compile(r"[\x21-\x7e](?:[\t\x20-\x7e]*[\x21-\x7e])?")


def normalize_base_uri(base_uri: str) -> str:
    """Return base_uri with exactly the trailing slash endpoint paths expect."""
    return base_uri if base_uri.endswith("/") else f"{base_uri}/"


def strip_bearer_prefix(api_key: str) -> str:
    """Remove a leading "Bearer " (any casing) from an API key.

    The token is sent without a scheme prefix, which is what the AGiXT
    server reads from the Authorization header.
    """
    return _BEARER_PREFIX.sub("", api_key, count=1)


def build_headers(api_key: str | None) -> dict[str, str]:
    """Build the header set sent with every request.

    Raises:
        ConfigError: If the token is empty after stripping "Bearer ", has surrounding
            whitespace or holds characters not allowed in a header value
    """
    headers = {"Content-Type": "application/json"}
    if api_key:
        token = strip_bearer_prefix(api_key)
        if not _HEADER_VALUE.fullmatch(token):
            raise ConfigError("API key is not a valid HTTP header value", setting="api_key")
        headers["Authorization"] = token
    return headers


# ============================================================================
# Request Bodies
# ============================================================================


def _build_request(model: type[R], **fields: Any) -> R:
    """Validate call arguments into a request body before anything is sent.

    Raises:
        InvalidRequestError: If a field is out of range or not JSON-serializable
    """
    try:
        return model(**fields)
    except ValidationError as e:
        first_error = e.errors()[0]
        loc = first_error.get("loc") or ()
        field = str(loc[0]) if loc else None
        raise InvalidRequestError(first_error.get("msg", str(e)), field=field) from e


# ============================================================================
# Response Decoding
# ============================================================================


def _raise_for_status(response: httpx.Response, url: str) -> None:
    """Raise TransportError (or AuthenticationError) for non-2xx responses."""
    if response.is_success:
        return

    status = response.status_code
    reason = response.reason_phrase or "request failed"
    if status in (401, 403):
        raise AuthenticationError(f"Authentication failed: {reason}", status_code=status, body=response.text, url=url)
    raise TransportError(reason, status_code=status, body=response.text, url=url)


def _decode_response(response: httpx.Response, envelope: type[E] | None) -> E | JsonValue:
    """Parse the response body and validate it into the envelope, if one is given."""
    body = response.text
    try:
        data = response.json()
    except ValueError as e:
        raise DecodeError(f"response body is not valid JSON: {e}", body=body) from e

    if envelope is None:
        return data

    try:
        return envelope.model_validate(data)
    except ValidationError as e:
        first_error = e.errors()[0]
        loc = first_error.get("loc") or ()
        field = str(loc[0]) if loc else None
        raise DecodeError(first_error.get("msg", str(e)), field=field, body=body) from e


# ============================================================================
# Client
# ============================================================================


class AGiXTSDK:
    """Async client for the AGiXT server HTTP API.

    The base URI and headers are fixed at construction and never mutated, so
    one instance can be shared by concurrent tasks. All requests go through a
    single httpx.AsyncClient owned by this object; close it with aclose() or
    use the client as an async context manager.
    """

    def __init__(
        self,
        base_uri: str | None = None,
        api_key: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        on_status: StatusCallback | None = None,
    ):
        """Initialize the AGiXT client.

        No network I/O happens here.

        Args:
            base_uri: Server root, e.g. "http://localhost:7437" (defaults to settings.base_uri)
            api_key: Optional API key; a leading "Bearer " is stripped (defaults to settings.api_key)
            timeout: Transport timeout in seconds, None for no client-side timeout
                (defaults to settings.request_timeout)
            transport: Optional httpx transport, e.g. httpx.MockTransport in tests
            on_status: Optional sync or async callback receiving RequestEvent objects

        Raises:
            ConfigError: If the API key cannot be used as a header value
        """
        settings = get_settings()
        self.base_uri = normalize_base_uri(base_uri or settings.base_uri)
        self.headers = build_headers(api_key if api_key is not None else settings.api_key)
        self.timeout = timeout if timeout is not None else settings.request_timeout
        self.on_status = on_status
        self._client = httpx.AsyncClient(headers=self.headers, timeout=self.timeout, transport=transport)

    async def __aenter__(self) -> "AGiXTSDK":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the underlying HTTP transport."""
        await self._client.aclose()

    def url_for(self, path: str) -> str:
        """Join an endpoint path (no leading slash) onto the base URI."""
        return f"{self.base_uri}{path}"

    async def _request(
        self,
        method: str,
        path: str,
        payload: BaseModel | None = None,
        envelope: type[E] | None = None,
    ) -> Any:
        """Send one request and decode the response.

        Args:
            method: HTTP verb
            path: Endpoint path relative to the base URI
            payload: Request model serialized as the JSON body, if any
            envelope: Response model to validate into; None returns the raw JSON

        Returns:
            The validated envelope, or the raw decoded JSON when no envelope is given

        Raises:
            TransportError: On connection failure or non-2xx status
            DecodeError: If the body does not match the envelope
        """
        url = self.url_for(path)
        json_body = payload.model_dump(mode="json") if payload is not None else None

        start_time = time.time()
        await emit_status(
            RequestEvent(kind="request_start", method=method, url=url, timestamp=start_time),
            self.on_status,
        )
        logger.debug(f"Sending request: {method} {url}, has_body={json_body is not None}")

        try:
            with trace_request(method, url) as span:
                try:
                    response = await self._client.request(method, url, json=json_body)
                except (httpx.HTTPError, httpx.InvalidURL) as e:
                    raise TransportError(f"{type(e).__name__}: {e}", url=url) from e

                set_span_attributes(span, **{"http.status_code": response.status_code})
                _raise_for_status(response, url)
                result = _decode_response(response, envelope)
        except AGiXTError as e:
            elapsed_time = time.time() - start_time
            logger.debug(
                f"Request failed after {elapsed_time:.3f}s: {method} {url}, error={e}, error_type={type(e).__name__}"
            )
            await emit_status(
                RequestEvent(
                    kind="request_error",
                    method=method,
                    url=url,
                    timestamp=time.time(),
                    status_code=getattr(e, "status_code", None),
                    duration_seconds=elapsed_time,
                    error=str(e),
                    error_type=type(e).__name__,
                ),
                self.on_status,
            )
            raise

        elapsed_time = time.time() - start_time
        logger.debug(f"Request completed: {method} {url}, status={response.status_code}, latency={elapsed_time:.3f}s")
        await emit_status(
            RequestEvent(
                kind="request_end",
                method=method,
                url=url,
                timestamp=time.time(),
                status_code=response.status_code,
                duration_seconds=elapsed_time,
            ),
            self.on_status,
        )
        return result

    # ------------------------------------------------------------------
    # Providers
    # ------------------------------------------------------------------

    async def get_providers(self) -> list[str]:
        """List the names of all providers the server knows."""
        response = await self._request("GET", "api/provider", envelope=ProvidersResponse)
        return response.providers

    async def get_providers_by_service(self, service: str) -> list[str]:
        """List providers offering a given service (e.g. "llm", "tts")."""
        response = await self._request("GET", f"api/providers/service/{service}", envelope=ProvidersResponse)
        return response.providers

    async def get_provider_settings(self, provider_name: str) -> JsonObject:
        """Get the default settings of a provider."""
        response = await self._request("GET", f"api/provider/{provider_name}", envelope=ProviderSettingsResponse)
        return response.settings

    async def get_embed_providers(self) -> list[str]:
        """List the names of embedding providers."""
        response = await self._request("GET", "api/embedding_providers", envelope=ProvidersResponse)
        return response.providers

    async def get_embedders(self) -> JsonObject:
        """Get the embedders and their settings, keyed by embedder name."""
        response = await self._request("GET", "api/embedders", envelope=EmbeddersResponse)
        return response.embedders

    # ------------------------------------------------------------------
    # Agents
    # ------------------------------------------------------------------

    async def add_agent(self, agent_name: str, settings: JsonObject) -> JsonValue:
        """Create an agent. Returns the server's response unmodified."""
        return await self._request(
            "POST",
            "api/agent",
            _build_request(AddAgentRequest, agent_name=agent_name, settings=settings),
        )

    async def import_agent(self, agent_name: str, settings: JsonObject, commands: JsonObject) -> JsonValue:
        """Create an agent from exported settings and commands. Returns the raw response."""
        return await self._request(
            "POST",
            "api/agent/import",
            _build_request(ImportAgentRequest, agent_name=agent_name, settings=settings, commands=commands),
        )

    async def rename_agent(self, agent_name: str, new_name: str) -> JsonValue:
        """Rename an agent. Returns the raw response."""
        return await self._request(
            "PATCH",
            f"api/agent/{agent_name}",
            _build_request(RenameAgentRequest, new_name=new_name),
        )

    async def update_agent_settings(self, agent_name: str, settings: JsonObject) -> str:
        """Replace an agent's settings and return the server's status message."""
        response = await self._request(
            "PUT",
            f"api/agent/{agent_name}",
            _build_request(UpdateAgentSettingsRequest, settings=settings, agent_name=agent_name),
            MessageResponse,
        )
        return response.message

    async def update_agent_commands(self, agent_name: str, commands: JsonObject) -> str:
        """Replace an agent's enabled commands and return the server's status message."""
        response = await self._request(
            "PUT",
            f"api/agent/{agent_name}/commands",
            _build_request(UpdateAgentCommandsRequest, commands=commands, agent_name=agent_name),
            MessageResponse,
        )
        return response.message

    async def delete_agent(self, agent_name: str) -> str:
        response = await self._request("DELETE", f"api/agent/{agent_name}", envelope=MessageResponse)
        return response.message

    async def get_agents(self) -> list[JsonValue]:
        response = await self._request("GET", "api/agent", envelope=GetAgentsResponse)
        return response.agents

    async def get_agentconfig(self, agent_name: str) -> JsonValue:
        """Get an agent's full configuration (settings, commands, ...)."""
        response = await self._request("GET", f"api/agent/{agent_name}", envelope=GetAgentConfigResponse)
        return response.agent

    # ------------------------------------------------------------------
    # Conversations
    # ------------------------------------------------------------------

    async def get_conversations(self, agent_name: str = "") -> list[str]:
        """List conversation names, for one agent or for all when agent_name is empty."""
        path = f"api/{agent_name}/conversations" if agent_name else "api/conversations"
        response = await self._request("GET", path, envelope=GetConversationsResponse)
        return response.conversations

    async def get_conversation(
        self,
        agent_name: str,
        conversation_name: str,
        limit: int = 100,
        page: int = 1,
    ) -> list[JsonValue]:
        """Get one page of a conversation's history.

        The server reads the parameters from a JSON body on a GET request,
        so that is what gets sent.

        Raises:
            InvalidRequestError: If limit or page is negative
        """
        response = await self._request(
            "GET",
            "api/conversation",
            _build_request(
                GetConversationRequest,
                conversation_name=conversation_name,
                agent_name=agent_name,
                limit=limit,
                page=page,
            ),
            ConversationHistoryResponse,
        )
        return response.conversation_history

    async def new_conversation(
        self,
        agent_name: str,
        conversation_name: str,
        conversation_content: list[JsonValue] | None = None,
    ) -> list[JsonValue]:
        """Create a conversation, optionally seeded with messages, and return its history."""
        response = await self._request(
            "POST",
            "api/conversation",
            _build_request(
                NewConversationRequest,
                conversation_name=conversation_name,
                agent_name=agent_name,
                conversation_content=conversation_content or [],
            ),
            ConversationHistoryResponse,
        )
        return response.conversation_history

    async def delete_conversation(self, agent_name: str, conversation_name: str) -> str:
        response = await self._request(
            "DELETE",
            "api/conversation",
            _build_request(DeleteConversationRequest, conversation_name=conversation_name, agent_name=agent_name),
            MessageResponse,
        )
        return response.message

    async def delete_conversation_message(self, agent_name: str, conversation_name: str, message: str) -> str:
        """Delete a message, identified by its exact text, from a conversation.

        If the conversation holds the same text more than once, which copy is
        removed is up to the server.
        """
        response = await self._request(
            "DELETE",
            "api/conversation/message",
            _build_request(
                DeleteConversationMessageRequest,
                message=message,
                agent_name=agent_name,
                conversation_name=conversation_name,
            ),
            MessageResponse,
        )
        return response.message

    async def update_conversation_message(
        self,
        agent_name: str,
        conversation_name: str,
        message: str,
        new_message: str,
    ) -> str:
        """Replace the text of a message, identified by its current text."""
        response = await self._request(
            "PUT",
            "api/conversation/message",
            _build_request(
                UpdateConversationMessageRequest,
                message=message,
                new_message=new_message,
                agent_name=agent_name,
                conversation_name=conversation_name,
            ),
            MessageResponse,
        )
        return response.message

    # ------------------------------------------------------------------
    # Prompting
    # ------------------------------------------------------------------

    async def prompt_agent(self, agent_name: str, prompt_name: str, prompt_args: JsonObject) -> str:
        """Run a named prompt template on an agent and return the agent's reply.

        Args:
            agent_name: Agent to run the prompt with
            prompt_name: Server-side prompt template, e.g. "Chat" or "instruct"
            prompt_args: Template arguments, forwarded unmodified

        Returns:
            The agent's response text

        Raises:
            InvalidRequestError: If prompt_args holds a value that is not JSON
        """
        response = await self._request(
            "POST",
            f"api/agent/{agent_name}/prompt",
            _build_request(PromptAgentRequest, prompt_name=prompt_name, prompt_args=prompt_args),
            PromptAgentResponse,
        )
        return response.response

    async def instruct(self, agent_name: str, user_input: str, conversation: str) -> str:
        """Send an instruction to an agent with memory disabled."""
        return await self.prompt_agent(
            agent_name,
            "instruct",
            {
                "user_input": user_input,
                "disable_memory": True,
                "conversation_name": conversation,
            },
        )

    async def chat(self, agent_name: str, user_input: str, conversation: str, context_results: int) -> str:
        """Chat with an agent, injecting context_results memories, with memory writes disabled."""
        return await self.prompt_agent(
            agent_name,
            "Chat",
            {
                "user_input": user_input,
                "context_results": context_results,
                "conversation_name": conversation,
                "disable_memory": True,
            },
        )

    async def smartinstruct(self, agent_name: str, user_input: str, conversation: str) -> str:
        return await self.instruct(agent_name, user_input, conversation)

    async def smartchat(self, agent_name: str, user_input: str, conversation: str) -> str:
        return await self.chat(agent_name, user_input, conversation, 1)
