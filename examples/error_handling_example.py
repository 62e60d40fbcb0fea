"""
Example demonstrating error handling with agixtsdk.

The client never retries; every failure surfaces as one of the exceptions
below so the caller decides what to do.
"""

import asyncio

from agixtsdk import (
    AGiXTError,
    AGiXTSDK,
    AuthenticationError,
    ConfigError,
    DecodeError,
    RequestEvent,
    TransportError,
)


def log_event(event: RequestEvent) -> None:
    """Print every request the client makes."""
    if event.kind == "request_end":
        print(f"  {event.method} {event.url} -> {event.status_code} in {event.duration_seconds:.3f}s")
    elif event.kind == "request_error":
        print(f"  {event.method} {event.url} failed: {event.error_type}")


async def example_basic_error_handling():
    """Basic error handling example."""
    print("\n=== Basic Error Handling ===\n")

    async with AGiXTSDK(on_status=log_event) as client:
        try:
            agents = await client.get_agents()
            print(f"Success: {len(agents)} agents")

        except AuthenticationError as e:
            print(f"❌ Authentication failed: {e}")
            print("💡 Tip: Check AGIXT_API_KEY")

        except TransportError as e:
            print(f"❌ Request failed (status={e.status_code}): {e}")

        except DecodeError as e:
            print(f"❌ Unexpected response shape, field={e.field}: {e.body}")

        except AGiXTError as e:
            print(f"❌ General client error: {e}")


async def example_manual_retry(attempts: int = 3):
    """Retry a call yourself on transport errors."""
    print("\n=== Caller-side Retry ===\n")

    async with AGiXTSDK(timeout=10.0) as client:
        for attempt in range(1, attempts + 1):
            try:
                print(await client.smartinstruct("gpt4free", "Say hello", "Retry Example"))
                return
            except TransportError as e:
                print(f"Attempt {attempt} failed: {e}")
                await asyncio.sleep(2**attempt)


def example_config_error():
    """A key that cannot be sent as a header is rejected up front."""
    print("\n=== Configuration Error ===\n")

    try:
        AGiXTSDK(api_key="bad\nkey")
    except ConfigError as e:
        print(f"❌ {e}")


async def main():
    example_config_error()
    await example_basic_error_handling()
    await example_manual_retry()


if __name__ == "__main__":
    asyncio.run(main())
