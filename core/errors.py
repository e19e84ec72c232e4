"""
core/errors.py
────────────────────────────────────────────────────────────────────────
Failure taxonomy for the extraction pipeline.

Each exception carries the message shown to the caller and the HTTP
status the API layer answers with. Nothing in the pipeline retries;
one request is one attempt.
"""

from __future__ import annotations


class ExtractionError(Exception):
    status_code: int = 500
    default_message: str = "Unknown error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class NotConfiguredError(ExtractionError):
    """The server-held gateway credential is missing."""

    default_message = "API key not configured"


class RateLimitedError(ExtractionError):
    status_code = 429
    default_message = "Rate limited, try again shortly"


class CreditsExhaustedError(ExtractionError):
    status_code = 402
    default_message = "AI credits exhausted"


class GatewayError(ExtractionError):
    """Any other non-success upstream status, transport failure or timeout."""

    default_message = "AI gateway error"


class NoStructuredResultError(ExtractionError):
    default_message = "No structured result returned"


class MalformedResultError(ExtractionError):
    default_message = "Malformed structured result"


class InvalidPayloadError(ExtractionError):
    """Decoded arguments did not satisfy the result model."""

    def __init__(self, fields: list[str]) -> None:
        self.fields = fields
        super().__init__(f"Invalid structured result: {', '.join(fields)}")


class InvalidRequestError(ExtractionError):
    status_code = 400
    default_message = "Invalid request"
