"""Pytest configuration for agixtsdk tests."""

import json

import httpx
import pytest

from agixtsdk.api import AGiXTSDK

BASE_URI = "http://agixt.test"


class FakeServer:
    """Stands in for an AGiXT server behind httpx.MockTransport.

    Records every request and answers all of them with the configured reply.
    """

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self.status_code = 200
        self.payload = {}
        self.content: bytes | None = None
        self.error: tuple[type[httpx.TransportError], str] | None = None

    def reply(self, payload=None, status_code: int = 200, content: bytes | None = None) -> None:
        self.payload = payload if payload is not None else {}
        self.status_code = status_code
        self.content = content

    def fail_with(self, error_cls: type[httpx.TransportError], message: str = "boom") -> None:
        self.error = (error_cls, message)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            error_cls, message = self.error
            raise error_cls(message, request=request)
        if self.content is not None:
            return httpx.Response(self.status_code, content=self.content)
        return httpx.Response(self.status_code, json=self.payload)

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self):
        return json.loads(self.last_request.content)


@pytest.fixture(autouse=True)
def reset_settings():
    """Reset global settings after each test to ensure test isolation."""
    yield
    # After each test, reload settings to reset to defaults
    from agixtsdk.config import reload_settings

    reload_settings()


@pytest.fixture
def server() -> FakeServer:
    return FakeServer()


@pytest.fixture
def make_client(server):
    """Factory for clients wired to the fake server."""

    def factory(base_uri: str = BASE_URI, **kwargs) -> AGiXTSDK:
        return AGiXTSDK(base_uri=base_uri, transport=httpx.MockTransport(server.handler), **kwargs)

    return factory
