"""
Custom exceptions for the Oracle voice runtime.

These exceptions are intentionally simple and descriptive.
They are used across:

  - core/api/
  - runtime/agents/

Placing them at the project root (exceptions/) avoids circular imports and
keeps exception types consistent across modules.
"""

from typing import Optional


class OracleRuntimeError(Exception):
    """Base class for errors raised by the runtime."""


class UpstreamHTTPError(OracleRuntimeError):
    """
    Raised (or logged) when the Gemini call does not produce a usable answer.

    status_code is None when no HTTP response was received at all.
    """

    def __init__(self, status_code: Optional[int], body: str):
        self.status_code = status_code
        self.body = body
        msg = f"Gemini HTTP {status_code}: {body}"
        super().__init__(msg)


class UnhandledRequestError(OracleRuntimeError):
    """
    Raised when no handler accepts an inbound voice request.

    Example:
        IntentRequest with intent_name="PlayMusicIntent"  ← no handler
    """

    def __init__(self, request_type, intent_name=None):
        self.request_type = request_type
        self.intent_name = intent_name
        msg = f"No handler for request_type={request_type} intent_name={intent_name}"
        super().__init__(msg)
