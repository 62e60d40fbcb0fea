"""
Basic usage examples for agixtsdk.

Expects an AGiXT server at AGIXT_BASE_URI (default http://localhost:7437)
and, if the server requires one, an API key in AGIXT_API_KEY.
"""

import asyncio

from agixtsdk import AGiXTSDK


async def example_providers(client: AGiXTSDK):
    """List providers and show the settings of the first one."""
    print("\n=== Providers ===\n")

    providers = await client.get_providers()
    print(f"Providers: {providers}")

    if providers:
        settings = await client.get_provider_settings(providers[0])
        print(f"Default settings for {providers[0]}: {settings}")

    print(f"LLM providers: {await client.get_providers_by_service('llm')}")


async def example_agent_lifecycle(client: AGiXTSDK):
    """Create, configure, rename and delete an agent."""
    print("\n=== Agent Lifecycle ===\n")

    print(await client.add_agent("example-agent", {"provider": "gpt4free", "AI_TEMPERATURE": 0.4}))
    print(await client.update_agent_settings("example-agent", {"provider": "gpt4free", "AI_TEMPERATURE": 0.7}))
    print(await client.rename_agent("example-agent", "renamed-agent"))

    config = await client.get_agentconfig("renamed-agent")
    print(f"Config: {config}")

    print(await client.delete_agent("renamed-agent"))


async def example_conversation(client: AGiXTSDK):
    """Chat with an agent and read the conversation back."""
    print("\n=== Conversation ===\n")

    agent_name = "gpt4free"
    conversation = "Example Conversation"

    await client.new_conversation(agent_name, conversation)

    reply = await client.smartchat(agent_name, "What is the capital of France?", conversation)
    print(f"Agent: {reply}")

    history = await client.get_conversation(agent_name, conversation, limit=10, page=1)
    for message in history:
        print(message)

    print(await client.delete_conversation(agent_name, conversation))


async def main():
    async with AGiXTSDK() as client:
        await example_providers(client)
        await example_agent_lifecycle(client)
        await example_conversation(client)


if __name__ == "__main__":
    asyncio.run(main())
