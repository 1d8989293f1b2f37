"""Text-completion oracles used for plan generation.

Every transport problem, timeout, non-2xx status, or empty answer surfaces as
``OracleFailure`` so callers have a single error to fall back on.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Protocol

import httpx
import openai

from nourishplate.core.config import settings
from nourishplate.core.errors import OracleFailure

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = (
    "You are NourishPlate, a certified nutritionist who designs practical, varied family meal plans. "
    "You always answer with a single valid JSON object and nothing else."
)


@dataclass(frozen=True)
class GenerationConfig:
    temperature: float
    top_p: float
    top_k: int
    max_output_tokens: int


PLAN_GENERATION_CONFIG = GenerationConfig(temperature=0.8, top_p=0.9, top_k=40, max_output_tokens=32000)
MEAL_GENERATION_CONFIG = GenerationConfig(temperature=0.7, top_p=0.85, top_k=32, max_output_tokens=2000)


class ModelOracle(Protocol):
    def complete(self, prompt: str, config: GenerationConfig) -> str:
        ...


class OpenAIOracle:
    """Chat-completions backed oracle. ``top_k`` has no OpenAI equivalent and is ignored."""

    max_output_tokens = 16384

    def __init__(
        self,
        api_key: str | None = None,
        *,
        model: str | None = None,
        timeout: float | None = None,
        client=None,
    ) -> None:
        self.model = model or settings.openai_model
        self._client = client or openai.OpenAI(
            api_key=api_key or settings.openai_api_key,
            timeout=timeout or settings.oracle_timeout_seconds,
            max_retries=0,
        )

    def complete(self, prompt: str, config: GenerationConfig) -> str:
        try:
            completion = self._client.chat.completions.create(
                model=self.model,
                response_format={"type": "json_object"},
                temperature=config.temperature,
                top_p=config.top_p,
                max_tokens=min(config.max_output_tokens, self.max_output_tokens),
                messages=[
                    {"role": "system", "content": SYSTEM_PROMPT},
                    {"role": "user", "content": prompt},
                ],
            )
        except openai.APITimeoutError as exc:
            raise OracleFailure("OpenAI request timed out") from exc
        except openai.APIStatusError as exc:
            raise OracleFailure(f"OpenAI API error: {exc.status_code}", status_code=exc.status_code) from exc
        except openai.OpenAIError as exc:
            raise OracleFailure(f"OpenAI request failed: {exc}") from exc

        content = completion.choices[0].message.content if completion.choices else None
        if not content or not content.strip():
            raise OracleFailure("OpenAI returned an empty completion")
        return content


class GeminiOracle:
    """``generateContent`` REST oracle."""

    def __init__(
        self,
        api_key: str | None = None,
        *,
        model: str | None = None,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.api_key = api_key or settings.gemini_api_key
        self.model = model or settings.gemini_model
        self.base_url = (base_url or settings.gemini_api_url).rstrip("/")
        self.timeout = timeout or settings.oracle_timeout_seconds
        self._transport = transport

    def complete(self, prompt: str, config: GenerationConfig) -> str:
        url = f"{self.base_url}/{self.model}:generateContent"
        body = {
            "contents": [{"parts": [{"text": prompt}]}],
            "generationConfig": {
                "temperature": config.temperature,
                "topP": config.top_p,
                "topK": config.top_k,
                "maxOutputTokens": config.max_output_tokens,
                "candidateCount": 1,
            },
        }
        headers = {"content-type": "application/json", "X-goog-api-key": self.api_key or ""}
        try:
            with httpx.Client(timeout=self.timeout, transport=self._transport) as client:
                response = client.post(url, json=body, headers=headers)
        except httpx.TimeoutException as exc:
            raise OracleFailure("Gemini request timed out") from exc
        except httpx.HTTPError as exc:
            raise OracleFailure(f"Gemini request failed: {exc}") from exc

        if response.status_code >= 400:
            raise OracleFailure(f"Gemini API error: {response.status_code}", status_code=response.status_code)
        try:
            payload = response.json()
            text = payload["candidates"][0]["content"]["parts"][0]["text"]
        except (ValueError, KeyError, IndexError, TypeError) as exc:
            raise OracleFailure("Gemini response did not contain candidate text") from exc
        if not isinstance(text, str) or not text.strip():
            raise OracleFailure("Gemini returned an empty candidate")
        return text


def build_default_oracle() -> Optional[ModelOracle]:
    """Return the configured oracle, or None when its API key is missing."""
    provider = settings.model_provider.lower()
    if provider == "openai":
        if not settings.openai_api_key:
            logger.warning("OPENAI_API_KEY missing; meal plans will use the fallback catalog.")
            return None
        return OpenAIOracle(settings.openai_api_key)
    if provider == "gemini":
        if not settings.gemini_api_key:
            logger.warning("GEMINI_API_KEY missing; meal plans will use the fallback catalog.")
            return None
        return GeminiOracle(settings.gemini_api_key)
    raise ValueError(f"Unsupported MODEL_PROVIDER '{settings.model_provider}'")
