# services/gateway.py
"""
Structured-completion client for the AI gateway.

One blocking round trip per call: the prompt's tool is declared and the
model is forced to invoke it, so the reply is always a function call whose
arguments are the result. No retry/backoff; a failure is raised once and
left to the caller.

Only `_request_body()` and `_tool_arguments()` know the provider's
(OpenAI-compatible) wire shape.
"""
from __future__ import annotations

import json
import logging
from typing import Any

import httpx

from core.errors import (
    CreditsExhaustedError,
    GatewayError,
    MalformedResultError,
    NoStructuredResultError,
    NotConfiguredError,
    RateLimitedError,
)
from core.prompts import StructuredPrompt

_LOG = logging.getLogger(__name__)

DEFAULT_URL = "https://ai.gateway.lovable.dev/v1/chat/completions"
DEFAULT_MODEL = "google/gemini-3-flash-preview"


class GatewayClient:
    def __init__(
        self,
        api_key: str | None,
        url: str = DEFAULT_URL,
        model: str = DEFAULT_MODEL,
        timeout: float = 30.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.api_key = api_key
        self.url = url
        self.model = model
        self.timeout = timeout
        self._transport = transport

    @classmethod
    def from_settings(cls, settings: Any) -> "GatewayClient":
        return cls(
            api_key=settings.ai_gateway_api_key,
            url=settings.ai_gateway_url,
            model=settings.ai_gateway_model,
            timeout=settings.ai_gateway_timeout,
        )

    # ───────────── public entrypoint ─────────────
    def complete(
        self,
        prompt: StructuredPrompt,
        missing_message: str | None = None,
    ) -> dict[str, Any]:
        """Run one forced tool call and return its decoded arguments."""
        if not self.api_key:
            raise NotConfiguredError()

        try:
            with httpx.Client(timeout=self.timeout, transport=self._transport) as client:
                resp = client.post(
                    self.url,
                    headers={
                        "Authorization": f"Bearer {self.api_key}",
                        "Content-Type": "application/json",
                    },
                    json=self._request_body(prompt),
                )
        except httpx.TimeoutException as exc:
            _LOG.error("AI gateway timed out after %.1fs: %s", self.timeout, exc)
            raise GatewayError() from exc
        except httpx.HTTPError as exc:
            _LOG.error("AI gateway request failed: %s", exc)
            raise GatewayError() from exc

        if resp.status_code == 429:
            raise RateLimitedError()
        if resp.status_code == 402:
            raise CreditsExhaustedError()
        if not resp.is_success:
            _LOG.error("AI gateway returned %s: %s", resp.status_code, resp.text[:500])
            raise GatewayError()

        try:
            data = resp.json()
        except ValueError as exc:
            _LOG.error("AI gateway returned a non-JSON body")
            raise GatewayError() from exc

        return self._tool_arguments(data, prompt.tool.name, missing_message)

    # ───────────── provider wire shape ─────────────
    def _request_body(self, prompt: StructuredPrompt) -> dict[str, Any]:
        tool = prompt.tool
        return {
            "model": self.model,
            "messages": [
                {"role": "system", "content": prompt.system},
                {"role": "user", "content": prompt.instruction},
            ],
            "tools": [
                {
                    "type": "function",
                    "function": {
                        "name": tool.name,
                        "description": tool.description,
                        "parameters": tool.parameters,
                    },
                }
            ],
            "tool_choice": {"type": "function", "function": {"name": tool.name}},
        }

    @staticmethod
    def _tool_arguments(
        data: Any,
        tool_name: str,
        missing_message: str | None = None,
    ) -> dict[str, Any]:
        try:
            call = data["choices"][0]["message"]["tool_calls"][0]
            fn = call["function"]
        except (KeyError, IndexError, TypeError):
            raise NoStructuredResultError(missing_message) from None
        if not isinstance(fn, dict):
            raise NoStructuredResultError(missing_message)

        if fn.get("name") != tool_name:
            _LOG.warning("Model invoked %r instead of %r", fn.get("name"), tool_name)

        raw = fn.get("arguments")
        if isinstance(raw, dict):
            return raw
        try:
            args = json.loads(raw)
        except (TypeError, ValueError) as exc:
            raise MalformedResultError(f"Malformed structured result: {exc}") from exc
        if not isinstance(args, dict):
            raise MalformedResultError("Malformed structured result: expected a JSON object")
        return args
