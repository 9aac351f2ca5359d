from .contracts import (
    AnalysisRequestModel,
    AnalysisResponseModel,
    CompanyListModel,
    CompanyModel,
    PromptPreviewRequest,
    PromptPreviewResponse,
)
from .formatters import (
    format_companies_report,
    format_prompt_report,
    format_result_report,
)
from .mappers import to_analysis_response, to_company_list

__all__ = [
    "AnalysisRequestModel",
    "AnalysisResponseModel",
    "CompanyListModel",
    "CompanyModel",
    "PromptPreviewRequest",
    "PromptPreviewResponse",
    "format_companies_report",
    "format_prompt_report",
    "format_result_report",
    "to_analysis_response",
    "to_company_list",
]
