from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from datetime import datetime, timezone

from ir_compare.agents.comparison.application.dto import (
    AnalysisOutcome,
    AnalysisResult,
    AnalysisUsage,
)
from ir_compare.agents.comparison.domain.models import CompanyList
from ir_compare.config.llm_config import LLMModel
from ir_compare.infrastructure.llm.clients import (
    LLMAPIError,
    LLMConfigurationStatus,
    TokenUsage,
    UnifiedLLMResponse,
)
from ir_compare.shared.kernel.tools.logger import get_logger, log_context, log_event

logger = get_logger(__name__)


def _analysis_id(timestamp: datetime) -> str:
    return f"analysis-{int(timestamp.timestamp() * 1000)}"


@dataclass(frozen=True)
class ComparisonOrchestrator:
    find_model_fn: Callable[[str], LLMModel | None]
    validate_configuration_fn: Callable[[], LLMConfigurationStatus]
    compose_prompt_fn: Callable[[str, CompanyList], str]
    execute_llm_request_fn: Callable[[str, str], Awaitable[UnifiedLLMResponse]]
    calculate_cost_fn: Callable[[TokenUsage, LLMModel], float]
    now_fn: Callable[[], datetime] = lambda: datetime.now(timezone.utc)

    def _error_outcome(
        self,
        *,
        companies: CompanyList,
        prompt_name: str,
        prompt_content: str,
        model_id: str,
        error: str,
        status_code: int,
    ) -> AnalysisOutcome:
        timestamp = self.now_fn()
        return AnalysisOutcome(
            result=AnalysisResult(
                id=_analysis_id(timestamp),
                companies=companies,
                prompt_name=prompt_name,
                prompt_content=prompt_content,
                model_id=model_id,
                result="",
                usage=AnalysisUsage(),
                timestamp=timestamp,
                status="error",
                error=error,
            ),
            status_code=status_code,
        )

    async def run_analysis(
        self,
        *,
        companies: CompanyList,
        prompt_name: str,
        prompt_content: str,
        model_id: str,
    ) -> AnalysisOutcome:
        failure = {
            "companies": companies,
            "prompt_name": prompt_name,
            "prompt_content": prompt_content,
            "model_id": model_id,
        }

        model = self.find_model_fn(model_id)
        if model is None:
            log_event(
                logger,
                event="analysis_model_unknown",
                message="analysis rejected due to unknown model",
                level=logging.WARNING,
                error_code="ANALYSIS_MODEL_UNKNOWN",
                fields={"model_id": model_id},
            )
            return self._error_outcome(
                **failure, error=f"Unknown model: {model_id}", status_code=400
            )

        with log_context(model_id=model.id, provider=model.provider):
            config = self.validate_configuration_fn()
            if not config.is_available(model.provider):
                log_event(
                    logger,
                    event="analysis_provider_unconfigured",
                    message="analysis rejected due to missing provider credentials",
                    level=logging.ERROR,
                    error_code="ANALYSIS_PROVIDER_UNCONFIGURED",
                )
                return self._error_outcome(
                    **failure,
                    error=f"{model.provider} is not configured",
                    status_code=500,
                )

            prompt = self.compose_prompt_fn(prompt_content, companies)
            log_event(
                logger,
                event="analysis_started",
                message="comparison analysis started",
                fields={
                    "prompt_name": prompt_name,
                    "comparison_companies": len(companies.comparison_companies),
                },
            )

            try:
                response = await self.execute_llm_request_fn(model.id, prompt)
            except LLMAPIError as exc:
                log_event(
                    logger,
                    event="analysis_llm_failed",
                    message="comparison analysis failed at the LLM provider",
                    level=logging.ERROR,
                    error_code="ANALYSIS_LLM_FAILED",
                    fields={"status_code": exc.status_code, "exception": exc.message},
                )
                return self._error_outcome(
                    **failure,
                    error=exc.message,
                    status_code=exc.status_code or 500,
                )
            except Exception as exc:
                log_event(
                    logger,
                    event="analysis_unexpected_error",
                    message="comparison analysis failed unexpectedly",
                    level=logging.ERROR,
                    error_code="ANALYSIS_UNEXPECTED_ERROR",
                    fields={"exception": str(exc)},
                )
                return self._error_outcome(
                    **failure, error="Internal server error", status_code=500
                )

            usage = AnalysisUsage(
                input_tokens=response.usage.input_tokens,
                output_tokens=response.usage.output_tokens,
                estimated_cost=self.calculate_cost_fn(response.usage, model),
            )
            timestamp = self.now_fn()
            log_event(
                logger,
                event="analysis_completed",
                message="comparison analysis completed",
                fields={
                    "input_tokens": usage.input_tokens,
                    "output_tokens": usage.output_tokens,
                    "estimated_cost": usage.estimated_cost,
                },
            )
            return AnalysisOutcome(
                result=AnalysisResult(
                    id=_analysis_id(timestamp),
                    companies=companies,
                    prompt_name=prompt_name,
                    prompt_content=prompt_content,
                    model_id=model.id,
                    result=response.content,
                    usage=usage,
                    timestamp=timestamp,
                    status="success",
                ),
                status_code=200,
            )
