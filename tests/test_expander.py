from __future__ import annotations

from ir_compare.agents.comparison.domain.expander import expand
from ir_compare.agents.comparison.domain.models import CompanyCount


def test_expand_summary_list_with_missing_base_emits_single_fallback_block() -> None:
    expanded = expand("{summary_list}", CompanyCount(base=False, comparison=0))

    assert expanded == "##\nA:（企業名未入力）\n（要約未入力）\n##"


def test_expand_summary_list_emits_one_block_per_comparison_company() -> None:
    expanded = expand("{summary_list}", CompanyCount(base=True, comparison=2))

    assert expanded == (
        "##\n{base_corp_name}\n{base_corp_summary}\n##\n\n"
        "##\n{comp1_corp_name}\n{comp1_corp_summary}\n##\n\n"
        "##\n{comp2_corp_name}\n{comp2_corp_summary}\n##"
    )


def test_expand_comparison_corp_names_lists_per_company_placeholders() -> None:
    expanded = expand(
        "比較企業：{comparison_corp_names}", CompanyCount(base=True, comparison=3)
    )

    assert expanded == "比較企業：{comp1_corp_name}, {comp2_corp_name}, {comp3_corp_name}"


def test_expand_comparison_corp_names_is_empty_without_comparison_companies() -> None:
    assert expand("[{comparison_corp_names}]", CompanyCount(True, 0)) == "[]"


def test_expand_replaces_every_occurrence() -> None:
    expanded = expand(
        "{comparison_corp_names} / {comparison_corp_names}", CompanyCount(True, 1)
    )

    assert expanded == "{comp1_corp_name} / {comp1_corp_name}"


def test_expand_leaves_template_without_aggregates_unchanged() -> None:
    template = "基準企業: {base_corp_name}\n{unknown} and {comp1_corp_name}"

    assert expand(template, CompanyCount(base=True, comparison=4)) == template
