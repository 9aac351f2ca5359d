"""
Variable resolution.

``resolve`` handles two kinds of placeholders:

1. ``{summary_list}`` is rendered straight from the company *slots*, so a
   blank company keeps its block and its letter. Each block body is the
   section-aware summary content of that company;
2. the template text around it goes through a single regex pass that
   substitutes every other recognized placeholder. Replacement text is never
   rescanned, so braces inside company data stay literal.

``{comparison_corp_names}`` is resolved from data as well and lists only
companies with a name, unlike the fallback-preserving ``{summary_list}``.
"""

from __future__ import annotations

import re
from collections.abc import Sequence

from ir_compare.agents.comparison.domain.expander import (
    BLOCK_SEPARATOR,
    missing_base_block,
    summary_block,
)
from ir_compare.agents.comparison.domain.models import (
    BASE_COMPANY_LABEL,
    MAX_COMPARISON_COMPANIES,
    Company,
    CompanyList,
    comparison_label,
)
from ir_compare.agents.comparison.domain.placeholders import (
    BASE_COMPANY_NOT_ENTERED,
    COMPARISON_COMPANIES_NOT_ENTERED,
    NAME_NOT_ENTERED,
    NAMES_SEPARATOR,
    RECOGNIZED_PLACEHOLDER_PATTERN,
    SUMMARY_LIST,
    SUMMARY_NOT_ENTERED,
)
from ir_compare.agents.comparison.domain.services import (
    comparison_slots,
    count_company_slots,
)
from ir_compare.agents.comparison.domain.summary_rendering import (
    render_summary_content,
)


def _labeled_name(company: Company, letter: str) -> str:
    name = company.name.strip()
    return f"{letter}:{name if name else NAME_NOT_ENTERED}"


def _raw_summary(company: Company) -> str:
    return company.summary if company.summary.strip() else SUMMARY_NOT_ENTERED


def _content(company: Company, letter: str) -> str:
    return render_summary_content(company.summary_content, letter=letter)


def _labeled_company(company: Company, letter: str) -> str:
    return f"{_labeled_name(company, letter)}\n{_content(company, letter)}"


def _render_summary_list(companies: CompanyList) -> str:
    base = companies.base_company
    blocks = [
        summary_block(
            _labeled_name(base, BASE_COMPANY_LABEL), _content(base, BASE_COMPANY_LABEL)
        )
        if count_company_slots(companies).base
        else missing_base_block()
    ]
    for index, company in enumerate(comparison_slots(companies)):
        letter = comparison_label(index)
        blocks.append(
            summary_block(_labeled_name(company, letter), _content(company, letter))
        )
    return BLOCK_SEPARATOR.join(blocks)


def _render_base_company(base: Company) -> str:
    if not base.is_complete:
        return BASE_COMPANY_NOT_ENTERED
    return _labeled_company(base, BASE_COMPANY_LABEL)


def _render_comparison_companies(comparisons: Sequence[Company]) -> str:
    rendered = [
        _labeled_company(company, comparison_label(index))
        for index, company in enumerate(comparisons)
        if company.is_complete
    ]
    if not rendered:
        return COMPARISON_COMPANIES_NOT_ENTERED
    return "\n\n".join(rendered)


def _render_comparison_corp_names(comparisons: Sequence[Company]) -> str:
    return NAMES_SEPARATOR.join(
        f"{comparison_label(index)}:{company.name.strip()}"
        for index, company in enumerate(comparisons)
        if company.has_name
    )


def _render_field(company: Company, letter: str, field: str) -> str:
    if field == "name":
        return _labeled_name(company, letter)
    return _raw_summary(company)


def _comparison_at(
    comparisons: Sequence[Company], one_based_index: int
) -> Company | None:
    if 1 <= one_based_index <= min(len(comparisons), MAX_COMPARISON_COMPANIES):
        return comparisons[one_based_index - 1]
    return None


def _substitute(template: str, companies: CompanyList) -> str:
    base = companies.base_company
    comparisons = comparison_slots(companies)

    def _replace(match: re.Match[str]) -> str:
        aggregate = match.group("aggregate")
        if aggregate == "comparison_corp_names":
            return _render_comparison_corp_names(comparisons)
        if aggregate is not None:
            # {summary_list} never reaches this pass; see resolve().
            return match.group(0)

        combined = match.group("combined")
        if combined == "comparisonCompanies":
            return _render_comparison_companies(comparisons)
        if combined is not None:
            return _render_base_company(base)

        base_field = match.group("base_field")
        if base_field is not None:
            return _render_field(base, BASE_COMPANY_LABEL, base_field)

        comp_index = match.group("comp_index")
        if comp_index is not None:
            company = _comparison_at(comparisons, int(comp_index))
            if company is None:
                return ""
            letter = comparison_label(int(comp_index) - 1)
            return _render_field(company, letter, match.group("comp_field"))

        legacy_index = int(match.group("legacy_index"))
        company = _comparison_at(comparisons, legacy_index)
        if company is None:
            return ""
        return _labeled_company(company, comparison_label(legacy_index - 1))

    return RECOGNIZED_PLACEHOLDER_PATTERN.sub(_replace, template)


def resolve(template: str, companies: CompanyList) -> str:
    """Substitute every recognized placeholder with text from ``companies``."""
    if SUMMARY_LIST not in template:
        return _substitute(template, companies)
    summary_list = _render_summary_list(companies)
    return summary_list.join(
        _substitute(part, companies) for part in template.split(SUMMARY_LIST)
    )
