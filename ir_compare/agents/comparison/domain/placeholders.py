"""
Placeholder grammar shared by the expander, resolver and validator.

Aggregate placeholders depend on how many companies are present and are
rewritten into per-company placeholders before substitution. Every other
recognized placeholder is substituted directly from company data.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Literal

# Aggregate placeholders
SUMMARY_LIST = "{summary_list}"
COMPARISON_CORP_NAMES = "{comparison_corp_names}"

# Combined placeholders
BASE_COMPANY = "{baseCompany}"
COMPARISON_COMPANIES = "{comparisonCompanies}"
LEGACY_BASE_COMPANY = "{基準企業}"

# Per-field placeholders
BASE_CORP_NAME = "{base_corp_name}"
BASE_CORP_SUMMARY = "{base_corp_summary}"

BLOCK_DELIMITER = "##"
NAMES_SEPARATOR = ", "

# Fallback markers
NAME_NOT_ENTERED = "（企業名未入力）"
SUMMARY_NOT_ENTERED = "（要約未入力）"
BASE_COMPANY_NOT_ENTERED = "（基準企業未入力）"
COMPARISON_COMPANIES_NOT_ENTERED = "（比較企業未入力）"
IMPORTANT_POINT_NOT_ENTERED = "（重要ポイント未入力）"
SECTION_TEXT_NOT_ENTERED = "（本文未入力）"

SECTION_POINT_LABEL = "重要ポイント"


def comp_corp_name(index: int) -> str:
    return f"{{comp{index}_corp_name}}"


def comp_corp_summary(index: int) -> str:
    return f"{{comp{index}_corp_summary}}"


def legacy_comparison_company(index: int) -> str:
    return f"{{比較企業{index}}}"


# Any braced text; classify_placeholder() decides what is recognized.
PLACEHOLDER_CANDIDATE_PATTERN = re.compile(r"\{[^}]+\}")

# Indexes are written without leading zeros; "{comp01_corp_name}" is unknown.
RECOGNIZED_PLACEHOLDER_PATTERN = re.compile(
    r"\{(?:"
    r"(?P<aggregate>summary_list|comparison_corp_names)"
    r"|(?P<combined>baseCompany|comparisonCompanies|基準企業)"
    r"|base_corp_(?P<base_field>name|summary)"
    r"|comp(?P<comp_index>0|[1-9]\d*)_corp_(?P<comp_field>name|summary)"
    r"|比較企業(?P<legacy_index>0|[1-9]\d*)"
    r")\}"
)

PlaceholderScope = Literal["aggregate", "base", "comparison", "comparison_list"]


@dataclass(frozen=True)
class PlaceholderRef:
    """What a recognized placeholder refers to.

    ``comparison_index`` is 1-based and only set for per-company comparison
    placeholders.
    """

    token: str
    scope: PlaceholderScope
    comparison_index: int | None = None


def classify_placeholder(token: str) -> PlaceholderRef | None:
    match = RECOGNIZED_PLACEHOLDER_PATTERN.fullmatch(token)
    if match is None:
        return None
    if match.group("aggregate") == "summary_list":
        return PlaceholderRef(token=token, scope="aggregate")
    if match.group("aggregate") == "comparison_corp_names":
        return PlaceholderRef(token=token, scope="comparison_list")
    combined = match.group("combined")
    if combined == "comparisonCompanies":
        return PlaceholderRef(token=token, scope="comparison_list")
    if combined is not None or match.group("base_field") is not None:
        return PlaceholderRef(token=token, scope="base")
    raw_index = match.group("comp_index") or match.group("legacy_index")
    return PlaceholderRef(
        token=token, scope="comparison", comparison_index=int(raw_index)
    )


def find_placeholders(template: str) -> list[str]:
    """Distinct ``{...}`` tokens in first-seen order."""
    seen: dict[str, None] = {}
    for match in PLACEHOLDER_CANDIDATE_PATTERN.finditer(template):
        seen.setdefault(match.group(0), None)
    return list(seen)
