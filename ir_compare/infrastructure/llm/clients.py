from __future__ import annotations

import os
from dataclasses import dataclass

import httpx

from ir_compare.config.llm_config import (
    AZURE_OPENAI_DEFAULT_API_VERSION,
    GEMINI_BASE_URL,
    LLM_TEMPERATURE,
    LLM_TIMEOUT,
    LLM_TOP_P,
    ProviderName,
)
from ir_compare.shared.kernel.types import JSONObject


class LLMAPIError(Exception):
    """Provider call failed; ``status_code`` is the provider's HTTP status if any."""

    def __init__(
        self,
        message: str,
        provider: ProviderName,
        status_code: int | None = None,
        original_error: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.provider = provider
        self.status_code = status_code
        self.original_error = original_error


@dataclass(frozen=True)
class TokenUsage:
    input_tokens: int
    output_tokens: int
    total_tokens: int


@dataclass(frozen=True)
class UnifiedLLMResponse:
    content: str
    usage: TokenUsage
    model: str
    finish_reason: str


def build_azure_openai_request(prompt: str, max_tokens: int | None = None) -> JSONObject:
    request: JSONObject = {
        "messages": [{"role": "user", "content": prompt}],
        "temperature": LLM_TEMPERATURE,
        "top_p": LLM_TOP_P,
    }
    if max_tokens is not None:
        request["max_tokens"] = max_tokens
    return request


def build_gemini_request(prompt: str, max_tokens: int | None = None) -> JSONObject:
    generation_config: JSONObject = {
        "temperature": LLM_TEMPERATURE,
        "topP": LLM_TOP_P,
    }
    if max_tokens is not None:
        generation_config["maxOutputTokens"] = max_tokens
    return {
        "contents": [{"parts": [{"text": prompt}]}],
        "generationConfig": generation_config,
    }


def _as_int(value: object) -> int:
    return value if isinstance(value, int) else 0


def normalize_azure_openai_response(response: JSONObject) -> UnifiedLLMResponse:
    choices = response.get("choices")
    if not isinstance(choices, list) or not choices:
        raise LLMAPIError("Azure OpenAI response has no choices", "azure-openai")
    choice = choices[0] if isinstance(choices[0], dict) else {}
    message = choice.get("message")
    content = message.get("content") if isinstance(message, dict) else None
    usage = response.get("usage")
    usage = usage if isinstance(usage, dict) else {}
    return UnifiedLLMResponse(
        content=content if isinstance(content, str) else "",
        usage=TokenUsage(
            input_tokens=_as_int(usage.get("prompt_tokens")),
            output_tokens=_as_int(usage.get("completion_tokens")),
            total_tokens=_as_int(usage.get("total_tokens")),
        ),
        model=str(response.get("model", "")),
        finish_reason=str(choice.get("finish_reason") or ""),
    )


def normalize_gemini_response(
    response: JSONObject, model_name: str
) -> UnifiedLLMResponse:
    candidates = response.get("candidates")
    if not isinstance(candidates, list) or not candidates:
        raise LLMAPIError("Gemini response has no candidates", "gemini")
    candidate = candidates[0] if isinstance(candidates[0], dict) else {}
    content = candidate.get("content")
    parts = content.get("parts") if isinstance(content, dict) else None
    text = "".join(
        str(part.get("text", ""))
        for part in (parts if isinstance(parts, list) else [])
        if isinstance(part, dict)
    )
    usage = response.get("usageMetadata")
    usage = usage if isinstance(usage, dict) else {}
    return UnifiedLLMResponse(
        content=text,
        usage=TokenUsage(
            input_tokens=_as_int(usage.get("promptTokenCount")),
            output_tokens=_as_int(usage.get("candidatesTokenCount")),
            total_tokens=_as_int(usage.get("totalTokenCount")),
        ),
        model=model_name,
        finish_reason=str(candidate.get("finishReason") or ""),
    )


async def _post_json(
    *,
    provider: ProviderName,
    url: str,
    headers: dict[str, str],
    payload: JSONObject,
    params: dict[str, str] | None = None,
    transport: httpx.AsyncBaseTransport | None,
    timeout: float,
) -> JSONObject:
    try:
        async with httpx.AsyncClient(transport=transport, timeout=timeout) as client:
            response = await client.post(
                url, headers=headers, params=params, json=payload
            )
    except httpx.HTTPError as exc:
        raise LLMAPIError(
            f"{provider} request failed: {exc}", provider, original_error=exc
        ) from exc

    if response.status_code >= 400:
        raise LLMAPIError(
            f"{provider} API error: {response.status_code} - {response.text}",
            provider,
            status_code=response.status_code,
        )
    try:
        body = response.json()
    except ValueError as exc:
        raise LLMAPIError(
            f"{provider} returned a non-JSON body", provider, original_error=exc
        ) from exc
    if not isinstance(body, dict):
        raise LLMAPIError(f"{provider} returned an unexpected body", provider)
    return body


class AzureOpenAIClient:
    def __init__(
        self,
        *,
        endpoint: str | None = None,
        api_key: str | None = None,
        api_version: str | None = None,
        timeout: float = LLM_TIMEOUT,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.endpoint = (
            endpoint
            if endpoint is not None
            else os.getenv("AZURE_OPENAI_ENDPOINT", "")
        ).rstrip("/")
        self.api_key = (
            api_key if api_key is not None else os.getenv("AZURE_OPENAI_API_KEY", "")
        )
        self.api_version = api_version or os.getenv(
            "AZURE_OPENAI_API_VERSION", AZURE_OPENAI_DEFAULT_API_VERSION
        )
        self.timeout = timeout
        self._transport = transport

    def is_configured(self) -> bool:
        return bool(self.endpoint and self.api_key)

    async def chat(self, deployment_name: str, request: JSONObject) -> JSONObject:
        url = (
            f"{self.endpoint}/openai/deployments/{deployment_name}"
            f"/chat/completions?api-version={self.api_version}"
        )
        return await _post_json(
            provider="azure-openai",
            url=url,
            headers={"Content-Type": "application/json", "api-key": self.api_key},
            payload=request,
            transport=self._transport,
            timeout=self.timeout,
        )


class GeminiClient:
    def __init__(
        self,
        *,
        api_key: str | None = None,
        base_url: str = GEMINI_BASE_URL,
        timeout: float = LLM_TIMEOUT,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.api_key = (
            api_key if api_key is not None else os.getenv("GEMINI_API_KEY", "")
        )
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport

    def is_configured(self) -> bool:
        return bool(self.api_key)

    async def generate_content(self, model_name: str, request: JSONObject) -> JSONObject:
        url = f"{self.base_url}/models/{model_name}:generateContent"
        return await _post_json(
            provider="gemini",
            url=url,
            headers={"Content-Type": "application/json"},
            payload=request,
            params={"key": self.api_key},
            transport=self._transport,
            timeout=self.timeout,
        )


@dataclass(frozen=True)
class LLMConfigurationStatus:
    azure_openai: bool
    gemini: bool

    @property
    def has_any_provider(self) -> bool:
        return self.azure_openai or self.gemini

    def is_available(self, provider: ProviderName) -> bool:
        if provider == "azure-openai":
            return self.azure_openai
        return self.gemini


def validate_llm_configuration() -> LLMConfigurationStatus:
    return LLMConfigurationStatus(
        azure_openai=AzureOpenAIClient().is_configured(),
        gemini=GeminiClient().is_configured(),
    )
