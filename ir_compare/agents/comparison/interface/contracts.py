from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    model_config = ConfigDict(
        extra="ignore",
        alias_generator=to_camel,
        populate_by_name=True,
        protected_namespaces=(),
    )


class SummarySectionModel(_CamelModel):
    id: str = Field(..., description="Section identifier")
    important_point: str = Field("", description="Key point heading of the section")
    text: str = Field("", description="Section body text")


class CompanyModel(_CamelModel):
    id: str = Field(..., description="Company identifier")
    name: str = Field("", description="Company name (first line of the input)")
    summary: str = Field("", description="Flat IR summary text")
    type: Literal["base", "comparison"] = Field(..., description="Company role")
    summary_sections: list[SummarySectionModel] | None = Field(
        None, description="Structured IR summary; takes precedence over summary"
    )


class CompanyListModel(_CamelModel):
    base_company: CompanyModel
    comparison_companies: list[CompanyModel] = Field(default_factory=list)


class AnalysisRequestModel(_CamelModel):
    companies: CompanyListModel | None = None
    prompt: str | None = Field(None, description="Prompt template content")
    model_id: str | None = Field(None, description="Catalog model id")
    prompt_name: str | None = Field(None, description="Display name of the prompt")


class UsageModel(_CamelModel):
    input_tokens: int = 0
    output_tokens: int = 0
    estimated_cost: float = 0.0


class AnalysisResponseModel(_CamelModel):
    success: bool
    result: str | None = None
    usage: UsageModel | None = None
    error: str | None = None


class PromptModel(_CamelModel):
    id: str
    name: str
    content: str
    description: str | None = None
    category: str | None = None
    tags: list[str] = Field(default_factory=list)
    created_at: datetime | None = None
    updated_at: datetime | None = None


class PromptMetadataModel(_CamelModel):
    id: str
    name: str
    description: str | None = None
    category: str | None = None
    tags: list[str] = Field(default_factory=list)
    created: str | None = None
    updated: str | None = None


class PromptPreviewRequest(_CamelModel):
    template: str = Field(..., description="Prompt template with placeholders")
    companies: CompanyListModel


class VariableValidationModel(_CamelModel):
    is_valid: bool
    warnings: list[str]
    errors: list[str]


class PlaceholderAnalysisModel(_CamelModel):
    all_placeholders: list[str]
    recognized: list[str]
    unknown: list[str]
    has_placeholders: bool


class PromptStatsModel(_CamelModel):
    character_count: int
    word_count: int
    line_count: int
    placeholder_count: int


class PromptPreviewResponse(_CamelModel):
    template: str
    expanded: str
    resolved: str
    validation: VariableValidationModel
    placeholders: PlaceholderAnalysisModel
    stats: PromptStatsModel


class ModelPricingModel(_CamelModel):
    input: float
    output: float


class LLMModelInfo(_CamelModel):
    id: str
    name: str
    provider: Literal["azure-openai", "gemini"]
    model_name: str
    max_tokens: int
    pricing: ModelPricingModel


class ProviderStatusResponse(_CamelModel):
    status: str = "ok"
    providers: dict[str, bool]
    available_models: list[LLMModelInfo]
