from __future__ import annotations

from datetime import datetime

from ir_compare.agents.comparison.application.dto import (
    AnalysisResult,
    AnalysisUsage,
)
from ir_compare.agents.comparison.domain.models import Company, CompanyList
from ir_compare.agents.comparison.interface.formatters import (
    format_companies_report,
    format_prompt_report,
    format_result_report,
)


def _result() -> AnalysisResult:
    return AnalysisResult(
        id="analysis-1",
        companies=CompanyList(
            base_company=Company(id="b", name="Acme", summary="Grew 10%", type="base"),
            comparison_companies=[
                Company(id="c1", name="Beta", summary="Flat", type="comparison"),
                Company(id="c2", name="Gamma", summary="Up", type="comparison"),
            ],
        ),
        prompt_name="基本比較分析",
        prompt_content="{baseCompany}\n{comparisonCompanies}",
        model_id="azure-gpt-4o",
        result="比較した結果です。",
        usage=AnalysisUsage(input_tokens=1234, output_tokens=567, estimated_cost=0.01234),
        timestamp=datetime(2024, 5, 1, 9, 30, 0),
        status="success",
    )


def test_format_result_report_includes_usage_and_result() -> None:
    report = format_result_report(_result(), model_name="Azure GPT-4o")

    assert report.startswith("## 分析結果\n")
    assert "**実行日時**: 2024/05/01 09:30:00" in report
    assert "**使用モデル**: Azure GPT-4o" in report
    assert "- 比較企業: Beta, Gamma" in report
    assert "- 入力トークン: 1,234" in report
    assert "- 推定料金: $0.0123" in report
    assert report.endswith("---\n\n比較した結果です。")


def test_format_result_report_defaults_to_model_id() -> None:
    assert "**使用モデル**: azure-gpt-4o" in format_result_report(_result())


def test_format_prompt_report() -> None:
    assert format_prompt_report(_result()) == (
        "## 使用したプロンプト\n\n"
        "**名前**: 基本比較分析\n\n"
        "**内容**:\n"
        "{baseCompany}\n{comparisonCompanies}"
    )


def test_format_companies_report_numbers_comparison_companies() -> None:
    assert format_companies_report(_result()) == (
        "## 分析対象企業\n\n"
        "**基準企業**: Acme\n"
        "Grew 10%\n\n"
        "**比較企業**:\n"
        "1. Beta\nFlat\n\n"
        "2. Gamma\nUp"
    )
