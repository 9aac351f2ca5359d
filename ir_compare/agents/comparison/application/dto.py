from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Literal

from ir_compare.agents.comparison.domain.models import CompanyList

AnalysisStatus = Literal["pending", "success", "error"]


@dataclass(frozen=True)
class AnalysisUsage:
    input_tokens: int = 0
    output_tokens: int = 0
    estimated_cost: float = 0.0


@dataclass(frozen=True)
class AnalysisResult:
    id: str
    companies: CompanyList
    prompt_name: str
    prompt_content: str
    model_id: str
    result: str
    usage: AnalysisUsage
    timestamp: datetime
    status: AnalysisStatus
    error: str | None = None


@dataclass(frozen=True)
class AnalysisOutcome:
    result: AnalysisResult
    status_code: int

    @property
    def success(self) -> bool:
        return self.result.status == "success"
