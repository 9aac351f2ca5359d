from __future__ import annotations

from ir_compare.agents.comparison.application.orchestrator import (
    ComparisonOrchestrator,
)
from ir_compare.agents.comparison.application.prompt_service import compose_prompt
from ir_compare.infrastructure.llm.provider import (
    calculate_cost,
    execute_llm_request,
    find_model,
    validate_llm_configuration,
)


def build_comparison_orchestrator() -> ComparisonOrchestrator:
    return ComparisonOrchestrator(
        find_model_fn=find_model,
        validate_configuration_fn=validate_llm_configuration,
        compose_prompt_fn=compose_prompt,
        execute_llm_request_fn=lambda model_id, prompt: execute_llm_request(
            model_id, prompt
        ),
        calculate_cost_fn=calculate_cost,
    )


comparison_orchestrator = build_comparison_orchestrator()
