# tests/conftest.py
from __future__ import annotations

import json
from typing import Any, Callable

import httpx
import pytest
from fastapi.testclient import TestClient

from api.deps import get_gateway
from main import app
from services.gateway import GatewayClient

Handler = Callable[[httpx.Request], httpx.Response]


def tool_call_reply(arguments: Any, name: str = "log_nutrition") -> dict:
    """Chat-completions body whose first choice invokes `name`."""
    if not isinstance(arguments, str):
        arguments = json.dumps(arguments)
    return {
        "choices": [
            {
                "message": {
                    "role": "assistant",
                    "content": None,
                    "tool_calls": [
                        {
                            "id": "call_1",
                            "type": "function",
                            "function": {"name": name, "arguments": arguments},
                        }
                    ],
                }
            }
        ]
    }


class Recorder:
    """MockTransport handler that records requests and replays one response."""

    def __init__(self, status_code: int = 200, **kwargs: Any) -> None:
        self.status_code = status_code
        self.kwargs = kwargs
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(self.status_code, **self.kwargs)

    @property
    def last_body(self) -> dict:
        return json.loads(self.requests[-1].content)


def make_gateway(handler: Handler, api_key: str | None = "test-key") -> GatewayClient:
    return GatewayClient(
        api_key=api_key,
        url="https://gateway.test/v1/chat/completions",
        model="test/model",
        timeout=5.0,
        transport=httpx.MockTransport(handler),
    )


@pytest.fixture
def api():
    """TestClient factory: `api(handler)` wires a stubbed gateway into the app."""
    clients: list[TestClient] = []

    def _make(handler: Handler, api_key: str | None = "test-key") -> TestClient:
        app.dependency_overrides[get_gateway] = lambda: make_gateway(handler, api_key)
        c = TestClient(app)
        clients.append(c)
        return c

    yield _make
    app.dependency_overrides.clear()
    for c in clients:
        c.close()
