from .application import (
    ComparisonOrchestrator,
    build_prompt_preview,
    comparison_orchestrator,
    compose_prompt,
)
from .domain import (
    Company,
    CompanyCount,
    CompanyList,
    VariableValidation,
    expand,
    resolve,
    validate,
)

__all__ = [
    "Company",
    "CompanyCount",
    "CompanyList",
    "ComparisonOrchestrator",
    "VariableValidation",
    "build_prompt_preview",
    "comparison_orchestrator",
    "compose_prompt",
    "expand",
    "resolve",
    "validate",
]
