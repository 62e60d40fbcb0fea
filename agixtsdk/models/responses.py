"""Response envelopes returned by the AGiXT server.

Every endpoint answers with a JSON object; the client validates it into one
of these envelopes and hands back a single field. Unknown fields are ignored,
the projected field is required.
"""

from pydantic import BaseModel, ConfigDict, JsonValue

JsonObject = dict[str, JsonValue]


class Envelope(BaseModel):
    """Base class for response envelopes."""

    model_config = ConfigDict(extra="ignore")


class ProvidersResponse(Envelope):
    providers: list[str]


class ProviderSettingsResponse(Envelope):
    settings: JsonObject


class EmbeddersResponse(Envelope):
    embedders: JsonObject


class MessageResponse(Envelope):
    """Envelope for the update/delete endpoints that answer with a status message."""

    message: str


class GetAgentsResponse(Envelope):
    agents: list[JsonValue]


class GetAgentConfigResponse(Envelope):
    agent: JsonValue


class GetConversationsResponse(Envelope):
    conversations: list[str]


class ConversationHistoryResponse(Envelope):
    """Envelope for reading or creating a conversation."""

    conversation_history: list[JsonValue]


class PromptAgentResponse(Envelope):
    response: str
