"""
core.api.gemini_client

Thin async wrapper around the Gemini ``generateContent`` REST endpoint.

Used by:
  - runtime/agents/conversation_agent.py

The client never raises for upstream problems. ``generate`` returns either a
GenerationSuccess carrying the answer text or a GenerationFailure carrying the
HTTP status and raw body, and the caller decides what to say.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence, Union

import httpx

from core.conversation.models import ConversationTurn
from core.conversation.prompts import EMPTY_ANSWER
from exceptions.exceptions import UpstreamHTTPError


logger = logging.getLogger(__name__)


# -------------------------------------------------------------------
# Config + result types
# -------------------------------------------------------------------


@dataclass(frozen=True)
class GeminiConfig:
    api_key: str = ""
    model: str = "gemini-2.5-flash-lite"
    base_url: str = "https://generativelanguage.googleapis.com/v1beta"
    temperature: float = 0.7
    max_output_tokens: int = 200
    timeout_s: float = 10.0

    @property
    def endpoint(self) -> str:
        return f"{self.base_url}/models/{self.model}:generateContent"


@dataclass(frozen=True)
class GenerationSuccess:
    text: str


@dataclass(frozen=True)
class GenerationFailure:
    # None when the request never got an HTTP response (timeout, DNS, ...).
    status_code: Optional[int]
    body: str

    def to_exception(self) -> UpstreamHTTPError:
        return UpstreamHTTPError(self.status_code, self.body)


GenerationResult = Union[GenerationSuccess, GenerationFailure]


# -------------------------------------------------------------------
# Payload helpers
# -------------------------------------------------------------------


def build_request_body(
    history: Sequence[ConversationTurn],
    config: GeminiConfig,
) -> Dict[str, Any]:
    return {
        "contents": [turn.to_payload() for turn in history],
        "generationConfig": {
            "temperature": config.temperature,
            "maxOutputTokens": config.max_output_tokens,
        },
    }


def extract_answer_text(payload: Any) -> str:
    """
    Join the text of every part of the first candidate.

    Expected shape:

        {"candidates": [{"content": {"parts": [{"text": "..."}]}}]}

    Anything missing or empty falls back to a fixed sentence instead of
    raising.
    """
    if not isinstance(payload, dict):
        return EMPTY_ANSWER

    candidates = payload.get("candidates") or []
    first = candidates[0] if isinstance(candidates, list) and candidates else None
    content = first.get("content") if isinstance(first, dict) else None
    parts: List[Any] = (content.get("parts") if isinstance(content, dict) else None) or []

    text = "".join(
        str(part.get("text") or "") for part in parts if isinstance(part, dict)
    ).strip()
    return text or EMPTY_ANSWER


# -------------------------------------------------------------------
# Client
# -------------------------------------------------------------------


class GeminiClient:
    """
    Parameters
    ----------
    config:
        Endpoint, credentials and generation parameters.
    transport:
        Optional httpx transport, e.g. ``httpx.MockTransport`` in tests.
    """

    def __init__(
        self,
        config: GeminiConfig,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.config = config
        self._transport = transport

    async def generate(self, history: Sequence[ConversationTurn]) -> GenerationResult:
        """POST the transcript to Gemini and return the answer or the failure."""
        body = build_request_body(history, self.config)

        try:
            async with httpx.AsyncClient(
                timeout=self.config.timeout_s,
                transport=self._transport,
            ) as client:
                resp = await client.post(
                    self.config.endpoint,
                    params={"key": self.config.api_key},
                    json=body,
                )
        except httpx.HTTPError as exc:
            logger.warning("Gemini request failed before a response: %s", exc)
            return GenerationFailure(status_code=None, body=str(exc))

        if not resp.is_success:
            return GenerationFailure(status_code=resp.status_code, body=resp.text)

        try:
            payload = resp.json()
        except ValueError:
            return GenerationFailure(status_code=resp.status_code, body=resp.text)

        return GenerationSuccess(text=extract_answer_text(payload))
