"""Request bodies sent to the AGiXT server.

Each model mirrors the JSON object one endpoint expects. Mapping fields
(settings, commands, prompt_args) are passed through as-is.
"""

from typing import Annotated

from pydantic import BaseModel, Field, JsonValue

JsonObject = dict[str, JsonValue]


class AddAgentRequest(BaseModel):
    """Body for POST api/agent."""

    agent_name: str
    settings: JsonObject


class ImportAgentRequest(BaseModel):
    """Body for POST api/agent/import."""

    agent_name: str
    settings: JsonObject
    commands: JsonObject


class RenameAgentRequest(BaseModel):
    """Body for PATCH api/agent/{agent_name}."""

    new_name: str


class UpdateAgentSettingsRequest(BaseModel):
    """Body for PUT api/agent/{agent_name}."""

    settings: JsonObject
    agent_name: str


class UpdateAgentCommandsRequest(BaseModel):
    """Body for PUT api/agent/{agent_name}/commands."""

    commands: JsonObject
    agent_name: str


class GetConversationRequest(BaseModel):
    """Body for GET api/conversation (the server reads it from a GET body)."""

    conversation_name: str
    agent_name: str
    limit: Annotated[int, Field(ge=0)]
    page: Annotated[int, Field(ge=0)]


class NewConversationRequest(BaseModel):
    """Body for POST api/conversation."""

    conversation_name: str
    agent_name: str
    conversation_content: list[JsonValue]


class DeleteConversationRequest(BaseModel):
    """Body for DELETE api/conversation."""

    conversation_name: str
    agent_name: str


class DeleteConversationMessageRequest(BaseModel):
    """Body for DELETE api/conversation/message.

    The message is addressed by its literal content; if a conversation holds
    two identical messages the server decides which one is affected.
    """

    message: str
    agent_name: str
    conversation_name: str


class UpdateConversationMessageRequest(BaseModel):
    """Body for PUT api/conversation/message. Addressed by content, like deletes."""

    message: str
    new_message: str
    agent_name: str
    conversation_name: str


class PromptAgentRequest(BaseModel):
    """Body for POST api/agent/{agent_name}/prompt."""

    prompt_name: str
    prompt_args: JsonObject
