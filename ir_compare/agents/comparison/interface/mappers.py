from __future__ import annotations

from ir_compare.agents.comparison.application.dto import AnalysisOutcome
from ir_compare.agents.comparison.application.prompt_service import PromptPreview
from ir_compare.agents.comparison.data.prompt_loader import PromptFileMetadata
from ir_compare.agents.comparison.domain.models import (
    Company,
    CompanyList,
    PromptTemplate,
    SummarySection,
)
from ir_compare.agents.comparison.interface.contracts import (
    AnalysisResponseModel,
    CompanyListModel,
    CompanyModel,
    LLMModelInfo,
    ModelPricingModel,
    PlaceholderAnalysisModel,
    PromptMetadataModel,
    PromptModel,
    PromptPreviewResponse,
    PromptStatsModel,
    UsageModel,
    VariableValidationModel,
)
from ir_compare.config.llm_config import LLMModel


def to_company(model: CompanyModel) -> Company:
    sections = tuple(
        SummarySection(
            id=section.id,
            important_point=section.important_point,
            text=section.text,
        )
        for section in model.summary_sections or []
    )
    return Company(
        id=model.id,
        name=model.name,
        summary=model.summary,
        type=model.type,
        summary_sections=sections,
    )


def to_company_list(model: CompanyListModel) -> CompanyList:
    return CompanyList(
        base_company=to_company(model.base_company),
        comparison_companies=[
            to_company(company) for company in model.comparison_companies
        ],
    )


def to_analysis_response(outcome: AnalysisOutcome) -> AnalysisResponseModel:
    result = outcome.result
    if result.status != "success":
        return AnalysisResponseModel(success=False, error=result.error)
    return AnalysisResponseModel(
        success=True,
        result=result.result,
        usage=UsageModel(
            input_tokens=result.usage.input_tokens,
            output_tokens=result.usage.output_tokens,
            estimated_cost=result.usage.estimated_cost,
        ),
    )


def to_prompt_model(prompt: PromptTemplate) -> PromptModel:
    return PromptModel(
        id=prompt.id,
        name=prompt.name,
        content=prompt.content,
        description=prompt.description,
        category=prompt.category,
        tags=list(prompt.tags),
        created_at=prompt.created_at,
        updated_at=prompt.updated_at,
    )


def to_prompt_metadata_model(metadata: PromptFileMetadata) -> PromptMetadataModel:
    return PromptMetadataModel(
        id=metadata.id,
        name=metadata.name,
        description=metadata.description,
        category=metadata.category,
        tags=list(metadata.tags),
        created=metadata.created,
        updated=metadata.updated,
    )


def to_prompt_preview_response(preview: PromptPreview) -> PromptPreviewResponse:
    return PromptPreviewResponse(
        template=preview.template,
        expanded=preview.expanded,
        resolved=preview.resolved,
        validation=VariableValidationModel(
            is_valid=preview.validation.is_valid,
            warnings=preview.validation.warnings,
            errors=preview.validation.errors,
        ),
        placeholders=PlaceholderAnalysisModel(
            all_placeholders=preview.placeholders.all_placeholders,
            recognized=preview.placeholders.recognized,
            unknown=preview.placeholders.unknown,
            has_placeholders=preview.placeholders.has_placeholders,
        ),
        stats=PromptStatsModel(
            character_count=preview.stats.character_count,
            word_count=preview.stats.word_count,
            line_count=preview.stats.line_count,
            placeholder_count=preview.stats.placeholder_count,
        ),
    )


def to_model_info(model: LLMModel) -> LLMModelInfo:
    return LLMModelInfo(
        id=model.id,
        name=model.name,
        provider=model.provider,
        model_name=model.model_name,
        max_tokens=model.max_tokens,
        pricing=ModelPricingModel(
            input=model.pricing.input, output=model.pricing.output
        ),
    )
