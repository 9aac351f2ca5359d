from __future__ import annotations

from ir_compare.agents.comparison.domain.expander import expand
from ir_compare.agents.comparison.domain.models import (
    Company,
    CompanyCount,
    CompanyList,
    SummarySection,
    comparison_label,
)
from ir_compare.agents.comparison.domain.resolver import resolve


def _base(name: str = "Acme", summary: str = "Grew 10%", **kwargs) -> Company:
    return Company(id="base-1", name=name, summary=summary, type="base", **kwargs)


def _comparison(index: int, name: str = "", summary: str = "", **kwargs) -> Company:
    return Company(
        id=f"comparison-{index}",
        name=name,
        summary=summary,
        type="comparison",
        **kwargs,
    )


def _companies(base: Company, *comparisons: Company) -> CompanyList:
    return CompanyList(base_company=base, comparison_companies=list(comparisons))


def test_resolve_without_recognized_placeholders_is_identity() -> None:
    template = "No variables here, only {unknown} and {baseCompanyX}."
    companies = _companies(_base(), _comparison(1, "Beta", "Flat"))

    assert resolve(template, companies) == template
    assert expand(template, CompanyCount(base=True, comparison=1)) == template


def test_comparison_letters_follow_position() -> None:
    assert [comparison_label(index) for index in range(4)] == ["B", "C", "D", "E"]


def test_resolve_base_name_and_summary_list() -> None:
    companies = _companies(_base(), _comparison(1, "Beta", "Flat"))

    resolved = resolve("Base: {base_corp_name}\n{summary_list}", companies)

    assert resolved == (
        "Base: A:Acme\n"
        "##\nA:Acme\nGrew 10%\n##\n\n"
        "##\nB:Beta\nFlat\n##"
    )


def test_resolve_out_of_range_comparison_tokens_to_empty_string() -> None:
    companies = _companies(
        _base(), *[_comparison(i, f"Co{i}", "text") for i in range(1, 6)]
    )

    assert resolve("[{comp5_corp_name}]", companies) == "[]"
    assert resolve("[{comp0_corp_name}]", companies) == "[]"
    assert resolve("[{comp3_corp_summary}]", _companies(_base())) == "[]"
    assert resolve("[{比較企業3}]", _companies(_base())) == "[]"


def test_comparison_corp_names_filters_while_summary_list_fills() -> None:
    companies = _companies(
        _base(),
        _comparison(1),
        _comparison(2, "Gamma", "Margins improved"),
    )

    assert resolve("{comparison_corp_names}", companies) == "C:Gamma"
    assert resolve("{summary_list}", companies) == (
        "##\nA:Acme\nGrew 10%\n##\n\n"
        "##\nB:（企業名未入力）\n（要約未入力）\n##\n\n"
        "##\nC:Gamma\nMargins improved\n##"
    )


def test_summary_list_with_empty_base_uses_fallback_block() -> None:
    companies = _companies(_base(name="", summary=""))

    assert resolve("{summary_list}", companies) == "##\nA:（企業名未入力）\n（要約未入力）\n##"


def test_summary_list_caps_comparison_blocks_at_four() -> None:
    companies = _companies(
        _base(), *[_comparison(i, f"Co{i}", "text") for i in range(1, 6)]
    )

    resolved = resolve("{summary_list}", companies)

    assert "E:Co4" in resolved
    assert "Co5" not in resolved


def test_field_placeholders_fall_back_to_markers() -> None:
    companies = _companies(_base(), _comparison(1, name="Beta"))

    assert resolve("{comp1_corp_name}", companies) == "B:Beta"
    assert resolve("{comp1_corp_summary}", companies) == "（要約未入力）"
    assert (
        resolve("{base_corp_name}", _companies(_base(name=" ")))
        == "A:（企業名未入力）"
    )


def test_sectioned_summary_renders_numbered_sections_in_summary_list() -> None:
    base = _base(
        summary="",
        summary_sections=(
            SummarySection(id="s1", important_point="Revenue up", text="Sales +10%"),
            SummarySection(id="s2", important_point="", text=""),
        ),
    )

    resolved = resolve("{summary_list}", _companies(base))

    assert resolved == (
        "##\nA:Acme\n"
        "[A:1] 重要ポイント：Revenue up\nSales +10%\n\n"
        "[A:2] 重要ポイント：（重要ポイント未入力）\n（本文未入力）\n##"
    )


def test_sectioned_summary_uses_comparison_letter() -> None:
    comparison = _comparison(
        2,
        name="Gamma",
        summary_sections=(
            SummarySection(id="s1", important_point="Cost", text="Down 5%"),
        ),
    )
    companies = _companies(_base(), _comparison(1, "Beta", "Flat"), comparison)

    resolved = resolve("{summary_list}", companies)

    assert resolved.endswith("##\nC:Gamma\n[C:1] 重要ポイント：Cost\nDown 5%\n##")
    assert resolve("{比較企業2}", companies) == (
        "C:Gamma\n[C:1] 重要ポイント：Cost\nDown 5%"
    )


def test_content_tokens_are_not_part_of_the_template_grammar() -> None:
    companies = _companies(_base(), _comparison(1, "Beta", "Flat"))

    assert resolve("x {base_corp_content} y", companies) == "x {base_corp_content} y"
    assert resolve("{comp1_corp_content}", companies) == "{comp1_corp_content}"


def test_zero_padded_indexes_are_left_untouched() -> None:
    companies = _companies(_base(), _comparison(1, "Beta", "Flat"))

    assert resolve("{comp01_corp_name} {比較企業01}", companies) == (
        "{comp01_corp_name} {比較企業01}"
    )


def test_summary_list_is_resolved_alongside_surrounding_placeholders() -> None:
    companies = _companies(_base(), _comparison(1, "Beta", "Flat"))

    resolved = resolve(
        "{base_corp_name}\n{summary_list}\n{comparison_corp_names}\n{summary_list}",
        companies,
    )

    block_list = "##\nA:Acme\nGrew 10%\n##\n\n##\nB:Beta\nFlat\n##"
    assert resolved == f"A:Acme\n{block_list}\nB:Beta\n{block_list}"


def test_summary_list_content_is_not_rescanned() -> None:
    base = _base(summary="Uses {comp1_corp_name} literally")
    companies = _companies(base, _comparison(1, "Beta", "Flat"))

    resolved = resolve("{summary_list}", companies)

    assert "Uses {comp1_corp_name} literally" in resolved


def test_summary_placeholder_keeps_raw_text_when_sections_exist() -> None:
    base = _base(
        summary="Plain summary",
        summary_sections=(SummarySection(id="s1", important_point="P", text="T"),),
    )

    assert resolve("{base_corp_summary}", _companies(base)) == "Plain summary"


def test_combined_placeholders_render_complete_companies_only() -> None:
    companies = _companies(
        _base(),
        _comparison(1, "Beta", "Flat"),
        _comparison(2, "Gamma"),
        _comparison(3, "Delta", "Expanding"),
    )

    assert resolve("{baseCompany}", companies) == "A:Acme\nGrew 10%"
    assert resolve("{comparisonCompanies}", companies) == (
        "B:Beta\nFlat\n\nD:Delta\nExpanding"
    )


def test_combined_placeholders_use_not_entered_markers() -> None:
    companies = _companies(_base(name="Acme", summary=""), _comparison(1))

    assert resolve("{baseCompany}", companies) == "（基準企業未入力）"
    assert resolve("{comparisonCompanies}", companies) == "（比較企業未入力）"


def test_legacy_placeholders_resolve_like_combined_ones() -> None:
    companies = _companies(_base(), _comparison(1, "Beta", "Flat"))

    assert resolve("{基準企業}", companies) == "A:Acme\nGrew 10%"
    assert resolve("{比較企業1}", companies) == "B:Beta\nFlat"


def test_braces_inside_company_data_are_not_rescanned() -> None:
    base = _base(summary="Mentions {comp1_corp_name} and {summary_list}")
    companies = _companies(base, _comparison(1, "Beta", "Flat"))

    resolved = resolve("{base_corp_summary}", companies)

    assert resolved == "Mentions {comp1_corp_name} and {summary_list}"


def test_resolve_does_not_mutate_companies() -> None:
    companies = _companies(_base(), _comparison(1, "Beta", "Flat"))
    before = CompanyList(
        base_company=companies.base_company,
        comparison_companies=list(companies.comparison_companies),
    )

    resolve("{summary_list}\n{comparisonCompanies}", companies)

    assert companies == before
