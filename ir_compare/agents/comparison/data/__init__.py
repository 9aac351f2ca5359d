from .prompt_loader import (
    PromptFile,
    PromptFileMetadata,
    load_all_prompts,
    load_prompt_by_id,
    load_prompts_by_category,
    prompt_metadata_list,
)

__all__ = [
    "PromptFile",
    "PromptFileMetadata",
    "load_all_prompts",
    "load_prompt_by_id",
    "load_prompts_by_category",
    "prompt_metadata_list",
]
