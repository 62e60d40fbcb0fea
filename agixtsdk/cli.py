"""agixt Command-Line Interface.

This module provides CLI commands for talking to an AGiXT server from the
command line using Click. Every command opens one AGiXTSDK client, makes its
calls and prints the result.

Available Commands:
    Providers:
    - providers: List providers (optionally for one service)
    - provider-settings: Show a provider's default settings
    - embed-providers: List embedding providers
    - embedders: Show embedders and their settings

    Agents:
    - agents: List agents
    - agent-config: Show an agent's configuration
    - rename-agent: Rename an agent
    - delete-agent: Delete an agent

    Conversations:
    - conversations: List conversation names
    - conversation: Show a page of a conversation's history

    Prompting:
    - prompt: Run a named prompt with arbitrary arguments
    - chat: Chat with an agent
    - instruct: Send an instruction to an agent
"""

import asyncio
import json
from collections.abc import Awaitable, Callable
from typing import Any

import click
from rich.console import Console
from rich.markup import escape

from agixtsdk._version import get_version
from agixtsdk.api import AGiXTSDK
from agixtsdk.config import get_settings
from agixtsdk.exceptions import AGiXTError

console = Console()


def parse_prompt_args(pairs: tuple[str, ...]) -> dict[str, Any]:
    """Turn ``key=value`` pairs into prompt arguments.

    Values that parse as JSON keep their JSON type (numbers, booleans, lists,
    objects); anything else is taken as a plain string.

    Raises:
        click.BadParameter: If a pair has no "="
    """
    args: dict[str, Any] = {}
    for pair in pairs:
        key, sep, raw = pair.partition("=")
        if not sep or not key:
            raise click.BadParameter(f"expected key=value, got {pair!r}", param_hint="--arg")
        try:
            args[key] = json.loads(raw)
        except ValueError:
            args[key] = raw
    return args


def _run(ctx: click.Context, call: Callable[[AGiXTSDK], Awaitable[Any]]) -> Any:
    """Open a client from the group options, run one call and close the client."""

    async def runner() -> Any:
        async with AGiXTSDK(base_uri=ctx.obj["base_uri"], api_key=ctx.obj["api_key"]) as client:
            return await call(client)

    try:
        return asyncio.run(runner())
    except AGiXTError as e:
        console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        ctx.exit(1)


def _print_result(result: Any) -> None:
    if isinstance(result, str):
        console.print(result, markup=False, highlight=False)
    else:
        console.print_json(data=result)


@click.group()
@click.option("--base-uri", "-u", default=None, help="AGiXT server URL (defaults to AGIXT_BASE_URI)")
@click.option("--api-key", "-k", default=None, help="API key (defaults to AGIXT_API_KEY)")
@click.version_option(version=get_version(), prog_name="agixt")
@click.pass_context
def cli(ctx: click.Context, base_uri: str | None, api_key: str | None) -> None:
    """agixt CLI - Command-line client for an AGiXT server.

    Use --help with any command for more information.
    """
    settings = get_settings()
    ctx.ensure_object(dict)
    ctx.obj["base_uri"] = base_uri or settings.base_uri
    ctx.obj["api_key"] = api_key if api_key is not None else settings.api_key


# ============================================================================
# Providers
# ============================================================================


@cli.command()
@click.option("--service", "-s", default=None, help="Only list providers offering this service")
@click.pass_context
def providers(ctx: click.Context, service: str | None) -> None:
    """List provider names."""
    if service:
        result = _run(ctx, lambda client: client.get_providers_by_service(service))
    else:
        result = _run(ctx, lambda client: client.get_providers())
    _print_result(result)


@cli.command()
@click.argument("provider_name")
@click.pass_context
def provider_settings(ctx: click.Context, provider_name: str) -> None:
    """Show the default settings of PROVIDER_NAME."""
    _print_result(_run(ctx, lambda client: client.get_provider_settings(provider_name)))


@cli.command()
@click.pass_context
def embed_providers(ctx: click.Context) -> None:
    """List embedding provider names."""
    _print_result(_run(ctx, lambda client: client.get_embed_providers()))


@cli.command()
@click.pass_context
def embedders(ctx: click.Context) -> None:
    """Show embedders and their settings."""
    _print_result(_run(ctx, lambda client: client.get_embedders()))


# ============================================================================
# Agents
# ============================================================================


@cli.command()
@click.pass_context
def agents(ctx: click.Context) -> None:
    """List agents."""
    _print_result(_run(ctx, lambda client: client.get_agents()))


@cli.command()
@click.argument("agent_name")
@click.pass_context
def agent_config(ctx: click.Context, agent_name: str) -> None:
    """Show the configuration of AGENT_NAME."""
    _print_result(_run(ctx, lambda client: client.get_agentconfig(agent_name)))


@cli.command()
@click.argument("agent_name")
@click.argument("new_name")
@click.pass_context
def rename_agent(ctx: click.Context, agent_name: str, new_name: str) -> None:
    """Rename AGENT_NAME to NEW_NAME."""
    _print_result(_run(ctx, lambda client: client.rename_agent(agent_name, new_name)))


@cli.command()
@click.argument("agent_name")
@click.confirmation_option(prompt="Delete this agent?")
@click.pass_context
def delete_agent(ctx: click.Context, agent_name: str) -> None:
    """Delete AGENT_NAME."""
    _print_result(_run(ctx, lambda client: client.delete_agent(agent_name)))


# ============================================================================
# Conversations
# ============================================================================


@cli.command()
@click.option("--agent", "-a", "agent_name", default="", help="Only list this agent's conversations")
@click.pass_context
def conversations(ctx: click.Context, agent_name: str) -> None:
    """List conversation names."""
    _print_result(_run(ctx, lambda client: client.get_conversations(agent_name)))


@cli.command()
@click.argument("agent_name")
@click.argument("conversation_name")
@click.option("--limit", "-l", default=100, type=click.IntRange(min=0), help="Messages per page")
@click.option("--page", "-p", default=1, type=click.IntRange(min=0), help="Page number")
@click.pass_context
def conversation(ctx: click.Context, agent_name: str, conversation_name: str, limit: int, page: int) -> None:
    """Show a page of CONVERSATION_NAME's history for AGENT_NAME."""
    _print_result(_run(ctx, lambda client: client.get_conversation(agent_name, conversation_name, limit, page)))


# ============================================================================
# Prompting
# ============================================================================


@cli.command()
@click.argument("agent_name")
@click.argument("prompt_name")
@click.option("--arg", "-A", "arg_pairs", multiple=True, help="Prompt argument as key=value (repeatable)")
@click.pass_context
def prompt(ctx: click.Context, agent_name: str, prompt_name: str, arg_pairs: tuple[str, ...]) -> None:
    """Run PROMPT_NAME on AGENT_NAME."""
    prompt_args = parse_prompt_args(arg_pairs)
    _print_result(_run(ctx, lambda client: client.prompt_agent(agent_name, prompt_name, prompt_args)))


@cli.command()
@click.argument("agent_name")
@click.argument("message")
@click.option("--conversation", "-c", default="", help="Conversation name")
@click.option("--context-results", "-r", default=1, type=click.IntRange(min=0), help="Memories to inject")
@click.pass_context
def chat(ctx: click.Context, agent_name: str, message: str, conversation: str, context_results: int) -> None:
    """Send MESSAGE to AGENT_NAME with the Chat prompt."""
    _print_result(_run(ctx, lambda client: client.chat(agent_name, message, conversation, context_results)))


@cli.command()
@click.argument("agent_name")
@click.argument("message")
@click.option("--conversation", "-c", default="", help="Conversation name")
@click.pass_context
def instruct(ctx: click.Context, agent_name: str, message: str, conversation: str) -> None:
    """Send MESSAGE to AGENT_NAME with the instruct prompt."""
    _print_result(_run(ctx, lambda client: client.instruct(agent_name, message, conversation)))


def main() -> None:
    cli(obj={})


if __name__ == "__main__":
    main()
