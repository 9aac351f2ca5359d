from __future__ import annotations

from ir_compare.agents.comparison.domain.models import (
    FlatSummary,
    SectionedSummary,
    SummaryContent,
    SummarySection,
)
from ir_compare.agents.comparison.domain.placeholders import (
    IMPORTANT_POINT_NOT_ENTERED,
    SECTION_POINT_LABEL,
    SECTION_TEXT_NOT_ENTERED,
    SUMMARY_NOT_ENTERED,
)


def _or_marker(value: str, marker: str) -> str:
    return value if value.strip() else marker


def render_section(section: SummarySection, *, letter: str, position: int) -> str:
    point = _or_marker(section.important_point, IMPORTANT_POINT_NOT_ENTERED)
    text = _or_marker(section.text, SECTION_TEXT_NOT_ENTERED)
    return f"[{letter}:{position}] {SECTION_POINT_LABEL}：{point}\n{text}"


def render_summary_content(content: SummaryContent, *, letter: str) -> str:
    """Render a company's summary; sections are numbered from 1."""
    if isinstance(content, SectionedSummary):
        return "\n\n".join(
            render_section(section, letter=letter, position=position)
            for position, section in enumerate(content.sections, start=1)
        )
    if isinstance(content, FlatSummary):
        return _or_marker(content.text, SUMMARY_NOT_ENTERED)
    raise TypeError(f"unsupported summary content: {type(content).__name__}")
