"""
Dynamic list expansion.

Rewrites the aggregate placeholders ``{summary_list}`` and
``{comparison_corp_names}`` into per-company placeholders so that the
substitution pass never needs to know how many comparison companies exist.
Expansion only looks at the company count, never at company data.
"""

from __future__ import annotations

from ir_compare.agents.comparison.domain.models import BASE_COMPANY_LABEL, CompanyCount
from ir_compare.agents.comparison.domain.placeholders import (
    BASE_CORP_NAME,
    BASE_CORP_SUMMARY,
    BLOCK_DELIMITER,
    COMPARISON_CORP_NAMES,
    NAME_NOT_ENTERED,
    NAMES_SEPARATOR,
    SUMMARY_LIST,
    SUMMARY_NOT_ENTERED,
    comp_corp_name,
    comp_corp_summary,
)

BLOCK_SEPARATOR = "\n\n"


def summary_block(header: str, body: str) -> str:
    return f"{BLOCK_DELIMITER}\n{header}\n{body}\n{BLOCK_DELIMITER}"


def missing_base_block() -> str:
    return summary_block(f"{BASE_COMPANY_LABEL}:{NAME_NOT_ENTERED}", SUMMARY_NOT_ENTERED)


def summary_list_blocks(company_count: CompanyCount) -> list[str]:
    blocks = [
        summary_block(BASE_CORP_NAME, BASE_CORP_SUMMARY)
        if company_count.base
        else missing_base_block()
    ]
    for index in range(1, company_count.comparison + 1):
        blocks.append(summary_block(comp_corp_name(index), comp_corp_summary(index)))
    return blocks


def expand_summary_list(template: str, company_count: CompanyCount) -> str:
    if SUMMARY_LIST not in template:
        return template
    expanded = BLOCK_SEPARATOR.join(summary_list_blocks(company_count))
    return template.replace(SUMMARY_LIST, expanded)


def expand_comparison_corp_names(template: str, company_count: CompanyCount) -> str:
    if COMPARISON_CORP_NAMES not in template:
        return template
    names = NAMES_SEPARATOR.join(
        comp_corp_name(index) for index in range(1, company_count.comparison + 1)
    )
    return template.replace(COMPARISON_CORP_NAMES, names)


def expand(template: str, company_count: CompanyCount) -> str:
    """Expand every aggregate placeholder for ``company_count``."""
    expanded = expand_summary_list(template, company_count)
    return expand_comparison_corp_names(expanded, company_count)
