from .expander import expand
from .models import (
    Company,
    CompanyCount,
    CompanyList,
    FlatSummary,
    PromptTemplate,
    SectionedSummary,
    SummarySection,
)
from .resolver import resolve
from .services import count_company_slots, count_filled_companies
from .validator import VariableValidation, validate

__all__ = [
    "Company",
    "CompanyCount",
    "CompanyList",
    "FlatSummary",
    "PromptTemplate",
    "SectionedSummary",
    "SummarySection",
    "VariableValidation",
    "count_company_slots",
    "count_filled_companies",
    "expand",
    "resolve",
    "validate",
]
