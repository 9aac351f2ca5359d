from __future__ import annotations

from ir_compare.agents.comparison.domain.models import PromptTemplate


def build_basic_comparison_prompt() -> PromptTemplate:
    return PromptTemplate(
        id="default-comparison",
        name="基本比較分析",
        category="comparison",
        content="""以下の企業のIR情報を比較分析してください：

基準企業: {baseCompany}

比較企業:
{comparisonCompanies}

以下の観点で比較分析を行い、共通点と差異を明確にしてください：
1. 事業戦略・方向性
2. 財務状況・業績
3. 市場環境認識
4. 今後の課題・リスク
5. 投資家への訴求ポイント""",
    )


def build_swot_prompt() -> PromptTemplate:
    return PromptTemplate(
        id="swot-analysis",
        name="SWOT分析",
        category="swot",
        content="""{baseCompany}と以下の比較企業のSWOT分析を行ってください：

比較企業:
{comparisonCompanies}

各企業について以下の4つの観点で分析し、最後に業界内での位置づけを比較してください：
- Strengths (強み)
- Weaknesses (弱み)
- Opportunities (機会)
- Threats (脅威)""",
    )


def build_summary_list_prompt() -> PromptTemplate:
    return PromptTemplate(
        id="summary-list-comparison",
        name="統合変数による比較分析",
        category="comparison",
        content="""# 命令:
以下の企業について比較分析してください。

{summary_list}

# 分析指示
基準企業：{base_corp_name}
比較企業：{comparison_corp_names}

財務指標と事業戦略の観点で分析してください。""",
    )


def build_default_prompts() -> list[PromptTemplate]:
    return [
        build_basic_comparison_prompt(),
        build_swot_prompt(),
        build_summary_list_prompt(),
    ]
