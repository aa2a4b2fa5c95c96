from __future__ import annotations

import httpx
import pytest

from core.api.gemini_client import (
    GeminiClient,
    GeminiConfig,
    GenerationFailure,
    GenerationSuccess,
    build_request_body,
    extract_answer_text,
)
from core.conversation.history import seed_history
from core.conversation.prompts import EMPTY_ANSWER
from exceptions.exceptions import UpstreamHTTPError

from conftest import FakeGemini, gemini_payload


def test_request_body_shape() -> None:
    config = GeminiConfig(temperature=0.7, max_output_tokens=200)
    body = build_request_body(seed_history(), config)

    assert body["generationConfig"] == {"temperature": 0.7, "maxOutputTokens": 200}
    assert [c["role"] for c in body["contents"]] == ["user", "model"]
    assert set(body["contents"][0]) == {"role", "parts"}
    assert body["contents"][0]["parts"][0].keys() == {"text"}


def test_extract_joins_all_parts_of_first_candidate() -> None:
    payload = gemini_payload("Gravity ", "pulls.  ")
    payload["candidates"].append({"content": {"parts": [{"text": "ignored"}]}})
    assert extract_answer_text(payload) == "Gravity pulls."


@pytest.mark.parametrize(
    "payload",
    [
        {},
        {"candidates": []},
        {"candidates": [{}]},
        {"candidates": [{"content": {}}]},
        {"candidates": [{"content": {"parts": []}}]},
        {"candidates": [{"content": {"parts": [{"text": "   "}]}}]},
        {"candidates": [{"content": {"parts": [{"inlineData": {}}]}}]},
        ["not", "a", "dict"],
    ],
)
def test_extract_falls_back_on_empty_or_malformed(payload) -> None:
    assert extract_answer_text(payload) == EMPTY_ANSWER


@pytest.mark.asyncio
async def test_generate_posts_to_model_endpoint(gemini_config: GeminiConfig) -> None:
    fake = FakeGemini(answer="Hi there.")
    client = GeminiClient(gemini_config, transport=fake.transport())

    result = await client.generate(seed_history())

    assert result == GenerationSuccess(text="Hi there.")
    (request,) = fake.requests
    assert request.method == "POST"
    assert request.url.path == "/v1beta/models/gemini-test:generateContent"
    assert request.url.params["key"] == "test-key"
    assert request.headers["content-type"] == "application/json"
    assert len(fake.bodies[0]["contents"]) == 2


@pytest.mark.asyncio
async def test_generate_returns_failure_on_http_error(gemini_config: GeminiConfig) -> None:
    fake = FakeGemini(status_code=500)
    client = GeminiClient(gemini_config, transport=fake.transport())

    result = await client.generate(seed_history())

    assert isinstance(result, GenerationFailure)
    assert result.status_code == 500
    assert result.body == "upstream exploded"

    err = result.to_exception()
    assert isinstance(err, UpstreamHTTPError)
    assert str(err) == "Gemini HTTP 500: upstream exploded"


@pytest.mark.asyncio
async def test_generate_returns_failure_on_invalid_json(gemini_config: GeminiConfig) -> None:
    fake = FakeGemini(raw_body="<html>oops</html>")
    client = GeminiClient(gemini_config, transport=fake.transport())

    result = await client.generate(seed_history())

    assert isinstance(result, GenerationFailure)
    assert result.status_code == 200


@pytest.mark.asyncio
async def test_generate_returns_failure_on_transport_error(gemini_config: GeminiConfig) -> None:
    def boom(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    client = GeminiClient(gemini_config, transport=httpx.MockTransport(boom))

    result = await client.generate(seed_history())

    assert isinstance(result, GenerationFailure)
    assert result.status_code is None
    assert "connection refused" in result.body
