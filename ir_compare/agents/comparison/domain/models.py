from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Literal

CompanyType = Literal["base", "comparison"]

MAX_COMPARISON_COMPANIES = 4
BASE_COMPANY_LABEL = "A"


def comparison_label(index: int) -> str:
    """Letter for the comparison company at 0-based ``index`` (B, C, D, E)."""
    return chr(ord("B") + index)


@dataclass(frozen=True)
class SummarySection:
    id: str
    important_point: str
    text: str


@dataclass(frozen=True)
class FlatSummary:
    text: str


@dataclass(frozen=True)
class SectionedSummary:
    sections: tuple[SummarySection, ...]


SummaryContent = FlatSummary | SectionedSummary


@dataclass(frozen=True)
class Company:
    id: str
    name: str
    summary: str
    type: CompanyType
    summary_sections: tuple[SummarySection, ...] = ()

    @property
    def summary_content(self) -> SummaryContent:
        if self.summary_sections:
            return SectionedSummary(sections=self.summary_sections)
        return FlatSummary(text=self.summary)

    @property
    def has_name(self) -> bool:
        return bool(self.name.strip())

    @property
    def has_summary(self) -> bool:
        return bool(self.summary.strip()) or bool(self.summary_sections)

    @property
    def is_complete(self) -> bool:
        return self.has_name and self.has_summary

    @property
    def has_any_input(self) -> bool:
        return self.has_name or self.has_summary


def _new_company_id(company_type: CompanyType, index: int = 0) -> str:
    return f"{company_type}-{int(datetime.now().timestamp() * 1000)}-{index}"


def empty_company(company_type: CompanyType, index: int = 0) -> Company:
    return Company(
        id=_new_company_id(company_type, index),
        name="",
        summary="",
        type=company_type,
    )


@dataclass
class CompanyList:
    """Caller-owned company inputs; the prompt engine only reads it."""

    base_company: Company
    comparison_companies: list[Company] = field(default_factory=list)

    @classmethod
    def empty(cls) -> CompanyList:
        return cls(
            base_company=empty_company("base"),
            comparison_companies=[empty_company("comparison", 1)],
        )

    def update_base_company(self, company: Company) -> None:
        self.base_company = company

    def update_comparison_company(self, index: int, company: Company) -> None:
        if 0 <= index < len(self.comparison_companies):
            self.comparison_companies[index] = company

    def add_comparison_company(self) -> bool:
        if len(self.comparison_companies) >= MAX_COMPARISON_COMPANIES:
            return False
        self.comparison_companies.append(
            empty_company("comparison", len(self.comparison_companies) + 1)
        )
        return True

    def remove_comparison_company(self, index: int) -> bool:
        if not 0 <= index < len(self.comparison_companies):
            return False
        del self.comparison_companies[index]
        return True

    def reset(self) -> None:
        fresh = CompanyList.empty()
        self.base_company = fresh.base_company
        self.comparison_companies = fresh.comparison_companies


@dataclass(frozen=True)
class CompanyCount:
    base: bool
    comparison: int


@dataclass(frozen=True)
class PromptTemplate:
    id: str
    name: str
    content: str
    description: str | None = None
    category: str | None = None
    tags: tuple[str, ...] = ()
    created_at: datetime | None = None
    updated_at: datetime | None = None
