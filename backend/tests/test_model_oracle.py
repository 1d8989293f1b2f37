import json

import httpx
import pytest

from nourishplate.core.errors import OracleFailure
from nourishplate.services import model_oracle
from nourishplate.services.model_oracle import (
    MEAL_GENERATION_CONFIG,
    PLAN_GENERATION_CONFIG,
    GeminiOracle,
    OpenAIOracle,
    build_default_oracle,
)


class _FakeChatCompletions:
    def __init__(self, outer):
        self.outer = outer

    def create(self, **kwargs):
        self.outer.requests.append(kwargs)
        content = self.outer.content
        return type("FakeCompletion", (), {
            "choices": [
                type("Choice", (), {"message": type("Message", (), {"content": content})})
            ]
        })()


class _FakeChat:
    def __init__(self, outer):
        self.completions = _FakeChatCompletions(outer)


class FakeOpenAI:
    def __init__(self, content):
        self.content = content
        self.requests = []
        self.chat = _FakeChat(self)


def test_openai_oracle_maps_generation_config():
    client = FakeOpenAI('{"title": "ok"}')
    oracle = OpenAIOracle("test-key", model="gpt-4o", client=client)

    assert oracle.complete("make a plan", PLAN_GENERATION_CONFIG) == '{"title": "ok"}'

    request = client.requests[0]
    assert request["model"] == "gpt-4o"
    assert request["temperature"] == 0.8
    assert request["top_p"] == 0.9
    assert request["max_tokens"] == OpenAIOracle.max_output_tokens
    assert request["response_format"] == {"type": "json_object"}
    assert request["messages"][-1] == {"role": "user", "content": "make a plan"}
    assert "top_k" not in request


def test_openai_oracle_empty_content_is_a_failure():
    oracle = OpenAIOracle("test-key", client=FakeOpenAI("   "))

    with pytest.raises(OracleFailure):
        oracle.complete("make a plan", MEAL_GENERATION_CONFIG)


def test_gemini_oracle_posts_generate_content_request():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["url"] = str(request.url)
        seen["key"] = request.headers.get("x-goog-api-key")
        seen["body"] = json.loads(request.content)
        return httpx.Response(200, json={"candidates": [{"content": {"parts": [{"text": '{"name": "Wrap"}'}]}}]})

    oracle = GeminiOracle(
        "g-key",
        model="gemini-1.5-flash",
        base_url="https://example.test/v1beta/models/",
        transport=httpx.MockTransport(handler),
    )

    assert oracle.complete("swap lunch", MEAL_GENERATION_CONFIG) == '{"name": "Wrap"}'
    assert seen["url"] == "https://example.test/v1beta/models/gemini-1.5-flash:generateContent"
    assert seen["key"] == "g-key"
    assert seen["body"]["contents"][0]["parts"][0]["text"] == "swap lunch"
    assert seen["body"]["generationConfig"] == {
        "temperature": 0.7,
        "topP": 0.85,
        "topK": 32,
        "maxOutputTokens": 2000,
        "candidateCount": 1,
    }


@pytest.mark.parametrize(
    "response",
    [
        httpx.Response(429, json={"error": {"message": "quota"}}),
        httpx.Response(200, json={"candidates": []}),
        httpx.Response(200, text="<html>oops</html>"),
    ],
)
def test_gemini_oracle_failures_raise_oracle_failure(response):
    oracle = GeminiOracle("g-key", transport=httpx.MockTransport(lambda request: response))

    with pytest.raises(OracleFailure):
        oracle.complete("plan", PLAN_GENERATION_CONFIG)


def test_gemini_oracle_timeout_is_an_oracle_failure():
    def handler(request):
        raise httpx.ReadTimeout("slow", request=request)

    oracle = GeminiOracle("g-key", transport=httpx.MockTransport(handler))

    with pytest.raises(OracleFailure) as excinfo:
        oracle.complete("plan", PLAN_GENERATION_CONFIG)

    assert "timed out" in str(excinfo.value)


def test_default_oracle_is_none_without_api_key(monkeypatch):
    monkeypatch.setattr(model_oracle.settings, "model_provider", "openai")
    monkeypatch.setattr(model_oracle.settings, "openai_api_key", None)

    assert build_default_oracle() is None


def test_default_oracle_picks_gemini_provider(monkeypatch):
    monkeypatch.setattr(model_oracle.settings, "model_provider", "gemini")
    monkeypatch.setattr(model_oracle.settings, "gemini_api_key", "g-key")

    assert isinstance(build_default_oracle(), GeminiOracle)


def test_unknown_provider_is_a_configuration_error(monkeypatch):
    monkeypatch.setattr(model_oracle.settings, "model_provider", "mystery")

    with pytest.raises(ValueError):
        build_default_oracle()
