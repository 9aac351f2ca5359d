from __future__ import annotations

import logging
import os
from collections.abc import Iterable

from ir_compare.config.llm_config import DEFAULT_LLM_MODELS, LLMModel
from ir_compare.shared.kernel.tools.logger import get_logger, log_event

from .clients import (
    AzureOpenAIClient,
    GeminiClient,
    LLMAPIError,
    LLMConfigurationStatus,
    TokenUsage,
    UnifiedLLMResponse,
    build_azure_openai_request,
    build_gemini_request,
    normalize_azure_openai_response,
    normalize_gemini_response,
    validate_llm_configuration,
)

logger = get_logger(__name__)

_TRUTHY = {"1", "true", "yes", "on"}


def _log_payloads_enabled() -> bool:
    return os.getenv("LOG_LLM_PAYLOADS", "").strip().lower() in _TRUTHY


def find_model(
    model_id: str, models: Iterable[LLMModel] = DEFAULT_LLM_MODELS
) -> LLMModel | None:
    for model in models:
        if model.id == model_id:
            return model
    return None


def available_models(
    config: LLMConfigurationStatus,
    models: Iterable[LLMModel] = DEFAULT_LLM_MODELS,
) -> list[LLMModel]:
    """Models whose provider has credentials configured."""
    return [model for model in models if config.is_available(model.provider)]


def calculate_cost(usage: TokenUsage, model: LLMModel) -> float:
    input_cost = usage.input_tokens / 1000 * model.pricing.input
    output_cost = usage.output_tokens / 1000 * model.pricing.output
    return input_cost + output_cost


async def execute_llm_request(
    model_id: str,
    prompt: str,
    *,
    azure_client: AzureOpenAIClient | None = None,
    gemini_client: GeminiClient | None = None,
) -> UnifiedLLMResponse:
    """
    Send ``prompt`` to the provider behind ``model_id``.

    Exactly one outbound call is made. Any failure surfaces as
    ``LLMAPIError`` carrying the provider and, for HTTP failures, its status.
    """
    model = find_model(model_id)
    if model is None:
        raise LLMAPIError(f"Unknown model: {model_id}", "azure-openai", 400)

    fields: dict[str, object] = {
        "model_id": model.id,
        "provider": model.provider,
        "prompt_chars": len(prompt),
    }
    if _log_payloads_enabled():
        fields["prompt"] = prompt
    log_event(
        logger,
        event="llm_request_started",
        message="sending prompt to LLM provider",
        fields=fields,
    )

    try:
        if model.provider == "azure-openai":
            client = azure_client or AzureOpenAIClient()
            if not client.is_configured():
                raise LLMAPIError(
                    "Azure OpenAI is not configured", "azure-openai", 500
                )
            raw = await client.chat(
                model.deployment_name or model.model_name,
                build_azure_openai_request(prompt, model.max_tokens),
            )
            response = normalize_azure_openai_response(raw)
        else:
            gemini = gemini_client or GeminiClient()
            if not gemini.is_configured():
                raise LLMAPIError("Gemini is not configured", "gemini", 500)
            raw = await gemini.generate_content(
                model.model_name,
                build_gemini_request(prompt, model.max_tokens),
            )
            response = normalize_gemini_response(raw, model.model_name)
    except LLMAPIError as exc:
        log_event(
            logger,
            event="llm_request_failed",
            message="LLM provider call failed",
            level=logging.ERROR,
            error_code="LLM_REQUEST_FAILED",
            fields={
                "model_id": model.id,
                "provider": exc.provider,
                "status_code": exc.status_code,
                "exception": exc.message,
            },
        )
        raise

    log_event(
        logger,
        event="llm_request_completed",
        message="LLM provider call completed",
        fields={
            "model_id": model.id,
            "provider": model.provider,
            "input_tokens": response.usage.input_tokens,
            "output_tokens": response.usage.output_tokens,
            "finish_reason": response.finish_reason,
        },
    )
    return response


__all__ = [
    "LLMAPIError",
    "TokenUsage",
    "UnifiedLLMResponse",
    "available_models",
    "calculate_cost",
    "execute_llm_request",
    "find_model",
    "validate_llm_configuration",
]
