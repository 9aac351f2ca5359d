from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Protocol

from ir_compare.agents.comparison.domain.models import (
    MAX_COMPARISON_COMPANIES,
    Company,
    CompanyCount,
    CompanyList,
    CompanyType,
    empty_company,
)
from ir_compare.config.prompt_config import RECOMMENDED_SUMMARY_MAX_CHARS


def comparison_slots(companies: CompanyList) -> list[Company]:
    return list(companies.comparison_companies[:MAX_COMPARISON_COMPANIES])


def count_filled_companies(companies: CompanyList) -> CompanyCount:
    """Complete companies only; this is what the validator compares against."""
    return CompanyCount(
        base=companies.base_company.is_complete,
        comparison=sum(
            1 for company in companies.comparison_companies if company.is_complete
        ),
    )


def count_company_slots(companies: CompanyList) -> CompanyCount:
    """Positions to render, blank or not, capped at the comparison maximum."""
    return CompanyCount(
        base=companies.base_company.has_any_input,
        comparison=len(comparison_slots(companies)),
    )


def parse_company_text(
    raw: str, company_type: CompanyType, *, company_id: str | None = None
) -> Company:
    """First non-blank line is the company name, the rest is the IR summary."""
    lines = raw.strip().splitlines()
    name = lines[0].strip() if lines else ""
    summary = "\n".join(lines[1:]).strip()
    return Company(
        id=company_id or empty_company(company_type).id,
        name=name,
        summary=summary,
        type=company_type,
    )


@dataclass(frozen=True)
class CompanyInputValidation:
    is_valid: bool
    errors: list[str]
    warnings: list[str]


def validate_company_inputs(companies: CompanyList) -> CompanyInputValidation:
    errors: list[str] = []
    warnings: list[str] = []

    base = companies.base_company
    if not base.has_name:
        errors.append("Base company name (first line) is required")
    if not base.has_summary:
        errors.append("Base company IR summary (second line onward) is required")

    for position, company in enumerate(companies.comparison_companies, start=1):
        if not company.has_name:
            errors.append(f"Comparison company {position} name (first line) is required")
        if not company.has_summary:
            errors.append(
                f"Comparison company {position} IR summary (second line onward) is required"
            )

    if not companies.comparison_companies:
        errors.append("Enter at least one comparison company")
    elif len(companies.comparison_companies) > MAX_COMPARISON_COMPANIES:
        errors.append(
            f"At most {MAX_COMPARISON_COMPANIES} comparison companies are supported"
        )

    for company in [base, *companies.comparison_companies]:
        if len(company.summary) > RECOMMENDED_SUMMARY_MAX_CHARS:
            label = company.name.strip() or company.id
            warnings.append(
                f"Summary for {label} is {len(company.summary)} characters "
                f"(recommended: {RECOMMENDED_SUMMARY_MAX_CHARS} or fewer)"
            )

    return CompanyInputValidation(
        is_valid=not errors,
        errors=errors,
        warnings=warnings,
    )


@dataclass(frozen=True)
class InputStatus:
    base_company_filled: bool
    comparison_companies_filled: int
    total_companies_filled: int
    can_add_more: bool
    can_remove: bool


def input_status(companies: CompanyList) -> InputStatus:
    filled = count_filled_companies(companies)
    slots = len(companies.comparison_companies)
    return InputStatus(
        base_company_filled=filled.base,
        comparison_companies_filled=filled.comparison,
        total_companies_filled=filled.comparison + (1 if filled.base else 0),
        can_add_more=slots < MAX_COMPARISON_COMPANIES,
        can_remove=slots > 1,
    )


@dataclass(frozen=True)
class UsageStats:
    total_cost: float
    total_input_tokens: int
    total_output_tokens: int
    successful_analyses: int
    failed_analyses: int


class _UsageLike(Protocol):
    input_tokens: int
    output_tokens: int
    estimated_cost: float


class _AnalysisResultLike(Protocol):
    status: str
    usage: _UsageLike


def summarize_usage(results: Iterable[_AnalysisResultLike]) -> UsageStats:
    """Aggregate token usage and cost over analysis results."""
    total_cost = 0.0
    total_input = 0
    total_output = 0
    succeeded = 0
    failed = 0
    for result in results:
        total_cost += result.usage.estimated_cost
        total_input += result.usage.input_tokens
        total_output += result.usage.output_tokens
        if result.status == "success":
            succeeded += 1
        elif result.status == "error":
            failed += 1
    return UsageStats(
        total_cost=total_cost,
        total_input_tokens=total_input,
        total_output_tokens=total_output,
        successful_analyses=succeeded,
        failed_analyses=failed,
    )
