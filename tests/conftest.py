"""Pytest configuration and fixtures.

Provides a recording fake for the Gemini endpoint built on
``httpx.MockTransport`` so no test touches the network.
"""

from __future__ import annotations

from dataclasses import dataclass, field
import json
from typing import Any, Callable

import httpx
import pytest

from core.api.gemini_client import GeminiClient, GeminiConfig
from core.conversation.history import HistoryConfig
from runtime.agents.conversation_agent import ConversationAgent
from runtime.agents.request_router import RequestRouter

# =============================================================================
# Test Doubles
# =============================================================================


@dataclass
class FakeGemini:
    """Records every generateContent request and replies with a canned response."""

    status_code: int = 200
    answer: str | None = "Gravity pulls objects together."
    raw_body: str | None = None
    requests: list[httpx.Request] = field(default_factory=list)

    @property
    def bodies(self) -> list[dict[str, Any]]:
        return [json.loads(r.content) for r in self.requests]

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.raw_body is not None:
            return httpx.Response(self.status_code, text=self.raw_body)
        if self.status_code >= 400:
            return httpx.Response(self.status_code, text="upstream exploded")
        return httpx.Response(self.status_code, json=gemini_payload(self.answer))

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)


def gemini_payload(*texts: str | None) -> dict[str, Any]:
    parts = [{"text": t} for t in texts if t is not None]
    return {"candidates": [{"content": {"role": "model", "parts": parts}}]}


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def gemini_config() -> GeminiConfig:
    return GeminiConfig(api_key="test-key", model="gemini-test")


@pytest.fixture
def fake_gemini() -> FakeGemini:
    return FakeGemini()


@pytest.fixture
def make_agent(gemini_config: GeminiConfig) -> Callable[[FakeGemini], ConversationAgent]:
    def _make(fake: FakeGemini, **kwargs: Any) -> ConversationAgent:
        client = GeminiClient(gemini_config, transport=fake.transport())
        return ConversationAgent(client, HistoryConfig(), **kwargs)

    return _make


@pytest.fixture
def agent(make_agent, fake_gemini: FakeGemini) -> ConversationAgent:
    return make_agent(fake_gemini)


@pytest.fixture
def request_router(agent: ConversationAgent) -> RequestRouter:
    return RequestRouter(agent)
