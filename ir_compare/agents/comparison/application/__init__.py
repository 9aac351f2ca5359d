from .dto import AnalysisOutcome, AnalysisResult, AnalysisUsage
from .factory import build_comparison_orchestrator, comparison_orchestrator
from .orchestrator import ComparisonOrchestrator
from .prompt_service import (
    PromptPreview,
    build_prompt_preview,
    compose_prompt,
    find_prompt,
    list_prompt_metadata,
    list_prompts,
)

__all__ = [
    "AnalysisOutcome",
    "AnalysisResult",
    "AnalysisUsage",
    "ComparisonOrchestrator",
    "PromptPreview",
    "build_comparison_orchestrator",
    "build_prompt_preview",
    "comparison_orchestrator",
    "compose_prompt",
    "find_prompt",
    "list_prompt_metadata",
    "list_prompts",
]
