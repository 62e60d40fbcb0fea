"""Request and response models for the AGiXT HTTP API."""

from agixtsdk.models.requests import (
    AddAgentRequest,
    DeleteConversationMessageRequest,
    DeleteConversationRequest,
    GetConversationRequest,
    ImportAgentRequest,
    JsonObject,
    NewConversationRequest,
    PromptAgentRequest,
    RenameAgentRequest,
    UpdateAgentCommandsRequest,
    UpdateAgentSettingsRequest,
    UpdateConversationMessageRequest,
)
from agixtsdk.models.responses import (
    ConversationHistoryResponse,
    EmbeddersResponse,
    Envelope,
    GetAgentConfigResponse,
    GetAgentsResponse,
    GetConversationsResponse,
    MessageResponse,
    PromptAgentResponse,
    ProviderSettingsResponse,
    ProvidersResponse,
)

__all__ = [
    "JsonObject",
    # Requests
    "AddAgentRequest",
    "ImportAgentRequest",
    "RenameAgentRequest",
    "UpdateAgentSettingsRequest",
    "UpdateAgentCommandsRequest",
    "GetConversationRequest",
    "NewConversationRequest",
    "DeleteConversationRequest",
    "DeleteConversationMessageRequest",
    "UpdateConversationMessageRequest",
    "PromptAgentRequest",
    # Responses
    "Envelope",
    "ProvidersResponse",
    "ProviderSettingsResponse",
    "EmbeddersResponse",
    "MessageResponse",
    "GetAgentsResponse",
    "GetAgentConfigResponse",
    "GetConversationsResponse",
    "ConversationHistoryResponse",
    "PromptAgentResponse",
]
