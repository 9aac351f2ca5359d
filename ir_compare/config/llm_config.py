import os
from dataclasses import dataclass
from typing import Literal

from dotenv import find_dotenv, load_dotenv

load_dotenv(find_dotenv())

ProviderName = Literal["azure-openai", "gemini"]

# Provider Configs
AZURE_OPENAI_DEFAULT_API_VERSION = "2024-02-15-preview"
GEMINI_BASE_URL = os.getenv(
    "GEMINI_BASE_URL", "https://generativelanguage.googleapis.com/v1beta"
)

# Sampling Defaults
LLM_TEMPERATURE = 0.7
LLM_TOP_P = 0.95

# Connection Settings
LLM_TIMEOUT = float(os.getenv("LLM_TIMEOUT", "60"))


@dataclass(frozen=True)
class ModelPricing:
    """USD per 1K tokens."""

    input: float
    output: float


@dataclass(frozen=True)
class LLMModel:
    id: str
    name: str
    provider: ProviderName
    model_name: str
    max_tokens: int
    pricing: ModelPricing
    deployment_name: str | None = None


DEFAULT_LLM_MODELS: tuple[LLMModel, ...] = (
    LLMModel(
        id="azure-gpt-4o",
        name="Azure GPT-4o",
        provider="azure-openai",
        model_name="gpt-4o",
        deployment_name=os.getenv("AZURE_OPENAI_GPT4O_DEPLOYMENT", "gpt-4o"),
        max_tokens=4096,
        pricing=ModelPricing(input=0.0025, output=0.01),
    ),
    LLMModel(
        id="azure-gpt-4o-mini",
        name="Azure GPT-4o Mini",
        provider="azure-openai",
        model_name="gpt-4o-mini",
        deployment_name=os.getenv(
            "AZURE_OPENAI_GPT4O_MINI_DEPLOYMENT", "gpt-4o-mini"
        ),
        max_tokens=16384,
        pricing=ModelPricing(input=0.00015, output=0.0006),
    ),
    LLMModel(
        id="azure-gpt-4.1-mini",
        name="Azure GPT-4.1 Mini",
        provider="azure-openai",
        model_name="gpt-4.1-mini",
        deployment_name=os.getenv(
            "AZURE_OPENAI_GPT41_MINI_DEPLOYMENT", "gpt-4.1-mini"
        ),
        max_tokens=16384,
        pricing=ModelPricing(input=0.00015, output=0.0006),
    ),
    LLMModel(
        id="gemini-2.0-flash",
        name="Gemini 2.0 Flash",
        provider="gemini",
        model_name="gemini-2.0-flash",
        max_tokens=8192,
        # estimated
        pricing=ModelPricing(input=0.000075, output=0.0003),
    ),
    LLMModel(
        id="gemini-1.5-pro",
        name="Gemini 1.5 Pro",
        provider="gemini",
        model_name="gemini-1.5-pro",
        max_tokens=8192,
        pricing=ModelPricing(input=0.00125, output=0.005),
    ),
)
