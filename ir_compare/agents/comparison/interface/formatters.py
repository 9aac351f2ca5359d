"""Markdown copy texts for a finished analysis."""

from __future__ import annotations

from ir_compare.agents.comparison.application.dto import AnalysisResult


def _format_timestamp(result: AnalysisResult) -> str:
    return result.timestamp.strftime("%Y/%m/%d %H:%M:%S")


def format_result_report(result: AnalysisResult, *, model_name: str | None = None) -> str:
    companies = result.companies
    comparison_names = ", ".join(
        company.name for company in companies.comparison_companies
    )
    usage = result.usage
    return (
        "## 分析結果\n"
        "\n"
        f"**実行日時**: {_format_timestamp(result)}\n"
        f"**使用モデル**: {model_name or result.model_id}\n"
        f"**プロンプト**: {result.prompt_name}\n"
        "\n"
        "**対象企業**:\n"
        f"- 基準企業: {companies.base_company.name}\n"
        f"- 比較企業: {comparison_names}\n"
        "\n"
        "**使用量**:\n"
        f"- 入力トークン: {usage.input_tokens:,}\n"
        f"- 出力トークン: {usage.output_tokens:,}\n"
        f"- 推定料金: ${usage.estimated_cost:.4f}\n"
        "\n"
        "---\n"
        "\n"
        f"{result.result}"
    )


def format_prompt_report(result: AnalysisResult) -> str:
    return (
        "## 使用したプロンプト\n"
        "\n"
        f"**名前**: {result.prompt_name}\n"
        "\n"
        "**内容**:\n"
        f"{result.prompt_content}"
    )


def format_companies_report(result: AnalysisResult) -> str:
    base = result.companies.base_company
    comparisons = "\n\n".join(
        f"{position}. {company.name}\n{company.summary}"
        for position, company in enumerate(
            result.companies.comparison_companies, start=1
        )
    )
    return (
        "## 分析対象企業\n"
        "\n"
        f"**基準企業**: {base.name}\n"
        f"{base.summary}\n"
        "\n"
        "**比較企業**:\n"
        f"{comparisons}"
    )
