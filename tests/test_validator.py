from __future__ import annotations

from ir_compare.agents.comparison.domain.models import CompanyCount
from ir_compare.agents.comparison.domain.validator import (
    analyze_placeholders,
    prompt_stats,
    validate,
    validate_prompt,
)


def test_validate_flags_comparison_index_beyond_filled_count() -> None:
    result = validate("{comp3_corp_name}", CompanyCount(base=True, comparison=1))

    assert result.is_valid is False
    assert result.errors == [
        "{comp3_corp_name} refers to comparison company 3, but only 1 are entered"
    ]
    assert result.warnings == []


def test_validate_warns_when_base_is_missing() -> None:
    result = validate("{base_corp_name}", CompanyCount(base=False, comparison=1))

    assert result.is_valid is True
    assert len(result.warnings) == 1
    assert "{base_corp_name}" in result.warnings[0]


def test_validate_rejects_index_above_supported_maximum() -> None:
    result = validate("{comp5_corp_summary}", CompanyCount(base=True, comparison=4))

    assert result.is_valid is False
    assert "at most 4" in result.errors[0]


def test_validate_reports_index_zero_as_invalid_index() -> None:
    result = validate(
        "{comp0_corp_name}\n{比較企業0}", CompanyCount(base=True, comparison=2)
    )

    assert result.is_valid is False
    assert result.errors == [
        "{comp0_corp_name} is not a valid comparison company index; use 1 to 4",
        "{比較企業0} is not a valid comparison company index; use 1 to 4",
    ]


def test_validate_ignores_zero_padded_and_content_tokens() -> None:
    result = validate(
        "{comp01_corp_name} {比較企業02} {base_corp_content} {comp1_corp_content}",
        CompanyCount(base=False, comparison=0),
    )

    assert result.is_valid is True
    assert result.warnings == []


def test_analyze_placeholders_treats_zero_padded_and_content_tokens_as_unknown() -> None:
    analysis = analyze_placeholders(
        "{comp01_corp_name} {base_corp_content} {comp2_corp_content} {comp0_corp_name}"
    )

    assert analysis.recognized == ["{comp0_corp_name}"]
    assert analysis.unknown == [
        "{comp01_corp_name}",
        "{base_corp_content}",
        "{comp2_corp_content}",
    ]


def test_validate_warns_for_comparison_lists_without_companies() -> None:
    result = validate(
        "{comparison_corp_names}\n{comparisonCompanies}",
        CompanyCount(base=True, comparison=0),
    )

    assert result.is_valid is True
    assert len(result.warnings) == 2


def test_validate_reports_each_token_once() -> None:
    result = validate(
        "{comp2_corp_name} {comp2_corp_name} {比較企業2}",
        CompanyCount(base=True, comparison=1),
    )

    assert len(result.errors) == 2


def test_validate_accepts_consistent_template() -> None:
    result = validate(
        "{summary_list}\n{base_corp_name}\n{comp2_corp_summary}",
        CompanyCount(base=True, comparison=2),
    )

    assert result.is_valid is True
    assert result.warnings == []
    assert result.errors == []


def test_analyze_placeholders_separates_unknown_tokens() -> None:
    analysis = analyze_placeholders("{summary_list} {foo} {summary_list} {comp1_corp_name}")

    assert analysis.all_placeholders == ["{summary_list}", "{foo}", "{comp1_corp_name}"]
    assert analysis.recognized == ["{summary_list}", "{comp1_corp_name}"]
    assert analysis.unknown == ["{foo}"]
    assert analysis.has_placeholders is True
    assert analyze_placeholders("plain").has_placeholders is False


def test_prompt_stats_counts_text_and_placeholders() -> None:
    stats = prompt_stats("one two {baseCompany}\nthree")

    assert stats.character_count == 27
    assert stats.word_count == 4
    assert stats.line_count == 2
    assert stats.placeholder_count == 1


def test_validate_prompt_requires_name_and_meaningful_content() -> None:
    result = validate_prompt("", "short")

    assert result.is_valid is False
    assert "Prompt name is required" in result.errors
    assert any("too short" in error for error in result.errors)
    assert validate_prompt("Basic", "以下の企業のIR情報を比較分析してください：{baseCompany}").is_valid
