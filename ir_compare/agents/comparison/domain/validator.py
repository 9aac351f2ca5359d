from __future__ import annotations

from dataclasses import dataclass

from ir_compare.agents.comparison.domain.models import (
    MAX_COMPARISON_COMPANIES,
    CompanyCount,
)
from ir_compare.agents.comparison.domain.placeholders import (
    classify_placeholder,
    find_placeholders,
)
from ir_compare.config.prompt_config import MIN_PROMPT_CONTENT_CHARS


@dataclass(frozen=True)
class VariableValidation:
    is_valid: bool
    warnings: list[str]
    errors: list[str]


def validate(template: str, company_count: CompanyCount) -> VariableValidation:
    """
    Check the placeholders used in ``template`` against the filled companies.

    Referencing an unfilled base company is a warning; referencing a
    comparison company beyond the filled count is an error, because that
    content is silently dropped from the prompt.
    """
    warnings: list[str] = []
    errors: list[str] = []

    for token in find_placeholders(template):
        ref = classify_placeholder(token)
        if ref is None:
            continue
        if ref.scope == "base" and not company_count.base:
            warnings.append(
                f"{token} refers to the base company, which has not been entered"
            )
        elif ref.scope == "comparison_list" and company_count.comparison == 0:
            warnings.append(f"{token} is used but no comparison company is entered")
        elif ref.scope == "comparison" and ref.comparison_index is not None:
            index = ref.comparison_index
            if index < 1:
                errors.append(
                    f"{token} is not a valid comparison company index; "
                    f"use 1 to {MAX_COMPARISON_COMPANIES}"
                )
            elif index > MAX_COMPARISON_COMPANIES:
                errors.append(
                    f"{token} refers to comparison company {index}, "
                    f"but at most {MAX_COMPARISON_COMPANIES} are supported"
                )
            elif index > company_count.comparison:
                errors.append(
                    f"{token} refers to comparison company {index}, "
                    f"but only {company_count.comparison} are entered"
                )

    return VariableValidation(is_valid=not errors, warnings=warnings, errors=errors)


@dataclass(frozen=True)
class PlaceholderAnalysis:
    all_placeholders: list[str]
    recognized: list[str]
    unknown: list[str]

    @property
    def has_placeholders(self) -> bool:
        return bool(self.all_placeholders)


def analyze_placeholders(template: str) -> PlaceholderAnalysis:
    found = find_placeholders(template)
    recognized = [token for token in found if classify_placeholder(token)]
    unknown = [token for token in found if token not in recognized]
    return PlaceholderAnalysis(
        all_placeholders=found, recognized=recognized, unknown=unknown
    )


@dataclass(frozen=True)
class PromptStats:
    character_count: int
    word_count: int
    line_count: int
    placeholder_count: int


def prompt_stats(template: str) -> PromptStats:
    stripped = template.strip()
    return PromptStats(
        character_count=len(template),
        word_count=len(stripped.split()) if stripped else 0,
        line_count=len(template.split("\n")),
        placeholder_count=len(find_placeholders(template)),
    )


@dataclass(frozen=True)
class PromptValidation:
    is_valid: bool
    errors: list[str]


def validate_prompt(name: str, content: str) -> PromptValidation:
    errors: list[str] = []
    if not name.strip():
        errors.append("Prompt name is required")
    if not content.strip():
        errors.append("Prompt content is required")
    if len(content.strip()) < MIN_PROMPT_CONTENT_CHARS:
        errors.append(
            f"Prompt content is too short ({MIN_PROMPT_CONTENT_CHARS}+ characters recommended)"
        )
    return PromptValidation(is_valid=not errors, errors=errors)
