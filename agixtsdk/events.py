"""Request status events for the AGiXT client.

The client emits a RequestEvent around every HTTP call so callers can observe
traffic through an optional on_status callback.
"""

import inspect
from collections.abc import Awaitable, Callable
from typing import Literal

from pydantic import BaseModel, Field

RequestEventKind = Literal[
    "request_start",
    "request_end",
    "request_error",
]


class RequestEvent(BaseModel):
    """A status event emitted for one client request.

    Use the `kind` field to discriminate; optional payload fields are
    populated depending on the event kind.
    """

    kind: RequestEventKind = Field(description="Event type discriminator")
    method: str = Field(description="HTTP verb")
    url: str = Field(description="Full request URL")
    timestamp: float | None = Field(default=None, description="Event time (e.g. time.time())")

    # request_end
    status_code: int | None = Field(default=None, description="HTTP status code of the response")
    duration_seconds: float | None = Field(default=None, description="Time spent waiting on the server")

    # request_error
    error: str | None = Field(default=None, description="Error message if the request failed")
    error_type: str | None = Field(default=None, description="Exception class name if the request failed")


StatusCallback = Callable[[RequestEvent], None] | Callable[[RequestEvent], Awaitable[None]]


async def emit_status(event: RequestEvent, on_status: StatusCallback | None) -> None:
    """Invoke on_status with the event if set; supports sync and async callbacks.

    No-op when on_status is None. Exceptions from the callback are not caught.
    """
    if on_status is None:
        return
    result = on_status(event)
    if inspect.iscoroutine(result):
        await result
