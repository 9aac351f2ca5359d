from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from ir_compare.agents.comparison.data.prompt_loader import (
    PromptFileMetadata,
    load_all_prompts,
    prompt_metadata_list,
)
from ir_compare.agents.comparison.domain.expander import expand
from ir_compare.agents.comparison.domain.models import CompanyList, PromptTemplate
from ir_compare.agents.comparison.domain.prompt_builder import build_default_prompts
from ir_compare.agents.comparison.domain.resolver import resolve
from ir_compare.agents.comparison.domain.services import (
    count_company_slots,
    count_filled_companies,
)
from ir_compare.agents.comparison.domain.validator import (
    PlaceholderAnalysis,
    PromptStats,
    VariableValidation,
    analyze_placeholders,
    prompt_stats,
    validate,
)

PromptSource = Callable[[], list[PromptTemplate]]


def compose_prompt(template: str, companies: CompanyList) -> str:
    """Final prompt text sent to the model."""
    return resolve(template, companies)


@dataclass(frozen=True)
class PromptPreview:
    template: str
    expanded: str
    resolved: str
    validation: VariableValidation
    placeholders: PlaceholderAnalysis
    stats: PromptStats


def build_prompt_preview(template: str, companies: CompanyList) -> PromptPreview:
    """
    Preview of how ``template`` composes for ``companies``.

    ``expanded`` follows the company slots, like ``resolve`` does, so a blank
    company keeps its block. ``validation`` checks the filled companies.
    """
    return PromptPreview(
        template=template,
        expanded=expand(template, count_company_slots(companies)),
        resolved=compose_prompt(template, companies),
        validation=validate(template, count_filled_companies(companies)),
        placeholders=analyze_placeholders(template),
        stats=prompt_stats(template),
    )


def list_prompts(source: PromptSource = load_all_prompts) -> list[PromptTemplate]:
    """Templates from disk, or the built-in set when none load."""
    prompts = source()
    return prompts if prompts else build_default_prompts()


def find_prompt(
    prompt_id: str, source: PromptSource = load_all_prompts
) -> PromptTemplate | None:
    for prompt in list_prompts(source):
        if prompt.id == prompt_id:
            return prompt
    return None


def list_prompt_metadata(
    source: Callable[[], list[PromptFileMetadata]] = prompt_metadata_list,
) -> list[PromptFileMetadata]:
    metadata = source()
    if metadata:
        return metadata
    return [
        PromptFileMetadata(
            id=prompt.id,
            name=prompt.name,
            description=prompt.description,
            category=prompt.category,
            tags=prompt.tags,
        )
        for prompt in build_default_prompts()
    ]
