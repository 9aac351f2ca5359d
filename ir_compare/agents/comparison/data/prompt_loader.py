"""
Prompt template files.

Templates live as Markdown files with YAML front matter::

    ---
    id: default-comparison
    name: 基本比較分析
    category: comparison
    tags: [ir, comparison]
    ---
    以下の企業のIR情報を比較分析してください ...

Bad files are logged and skipped; loading never raises.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date, datetime
from pathlib import Path

import yaml

from ir_compare.agents.comparison.domain.models import PromptTemplate
from ir_compare.config.prompt_config import PROMPT_FILE_SUFFIX, PROMPTS_DIR
from ir_compare.shared.kernel.tools.logger import get_logger, log_event

logger = get_logger(__name__)

_FRONT_MATTER_DELIMITER = "---"


@dataclass(frozen=True)
class PromptFileMetadata:
    id: str
    name: str
    description: str | None = None
    category: str | None = None
    tags: tuple[str, ...] = ()
    created: str | None = None
    updated: str | None = None


@dataclass(frozen=True)
class PromptFile:
    metadata: PromptFileMetadata
    content: str
    file_path: Path = field(compare=False)


def split_front_matter(text: str) -> tuple[dict[str, object], str]:
    """Split ``text`` into (front matter mapping, body)."""
    normalized = text.lstrip("\ufeff")
    lines = normalized.splitlines()
    if not lines or lines[0].strip() != _FRONT_MATTER_DELIMITER:
        return {}, normalized

    for index in range(1, len(lines)):
        if lines[index].strip() == _FRONT_MATTER_DELIMITER:
            raw_meta = "\n".join(lines[1:index])
            body = "\n".join(lines[index + 1 :])
            loaded = yaml.safe_load(raw_meta) if raw_meta.strip() else {}
            if not isinstance(loaded, dict):
                raise ValueError("front matter must be a mapping")
            return {str(key): value for key, value in loaded.items()}, body
    return {}, normalized


def _optional_text(value: object) -> str | None:
    if value is None:
        return None
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    text = str(value).strip()
    return text or None


def _parse_metadata(raw: dict[str, object]) -> PromptFileMetadata | None:
    prompt_id = _optional_text(raw.get("id"))
    name = _optional_text(raw.get("name"))
    if prompt_id is None or name is None:
        return None
    raw_tags = raw.get("tags")
    tags = (
        tuple(str(tag) for tag in raw_tags if str(tag).strip())
        if isinstance(raw_tags, list)
        else ()
    )
    return PromptFileMetadata(
        id=prompt_id,
        name=name,
        description=_optional_text(raw.get("description")),
        category=_optional_text(raw.get("category")),
        tags=tags,
        created=_optional_text(raw.get("created")),
        updated=_optional_text(raw.get("updated")),
    )


def available_prompt_files(prompts_dir: Path = PROMPTS_DIR) -> list[str]:
    if not prompts_dir.is_dir():
        log_event(
            logger,
            event="prompt_dir_missing",
            message="prompt templates directory not found",
            level=logging.WARNING,
            error_code="PROMPT_DIR_MISSING",
            fields={"prompts_dir": str(prompts_dir)},
        )
        return []
    return sorted(
        path.name
        for path in prompts_dir.iterdir()
        if path.is_file() and path.suffix == PROMPT_FILE_SUFFIX
    )


def load_prompt_file(
    file_name: str, prompts_dir: Path = PROMPTS_DIR
) -> PromptFile | None:
    file_path = prompts_dir / file_name
    if not file_path.is_file():
        log_event(
            logger,
            event="prompt_file_missing",
            message="prompt file not found",
            level=logging.WARNING,
            error_code="PROMPT_FILE_MISSING",
            fields={"file_name": file_name},
        )
        return None

    try:
        raw_meta, body = split_front_matter(file_path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, ValueError, yaml.YAMLError) as exc:
        log_event(
            logger,
            event="prompt_file_unreadable",
            message="prompt file could not be parsed",
            level=logging.ERROR,
            error_code="PROMPT_FILE_UNREADABLE",
            fields={"file_name": file_name, "exception": str(exc)},
        )
        return None

    metadata = _parse_metadata(raw_meta)
    if metadata is None:
        log_event(
            logger,
            event="prompt_file_invalid_metadata",
            message="prompt file front matter is missing id or name",
            level=logging.WARNING,
            error_code="PROMPT_FILE_INVALID_METADATA",
            fields={"file_name": file_name},
        )
        return None

    return PromptFile(metadata=metadata, content=body.strip(), file_path=file_path)


def load_all_prompt_files(prompts_dir: Path = PROMPTS_DIR) -> list[PromptFile]:
    prompt_files: list[PromptFile] = []
    for file_name in available_prompt_files(prompts_dir):
        prompt_file = load_prompt_file(file_name, prompts_dir)
        if prompt_file is not None:
            prompt_files.append(prompt_file)
    return prompt_files


def _parse_timestamp(value: str | None) -> datetime | None:
    if value is None:
        return None
    try:
        return datetime.fromisoformat(value)
    except ValueError:
        return None


def to_prompt_template(prompt_file: PromptFile) -> PromptTemplate:
    metadata = prompt_file.metadata
    return PromptTemplate(
        id=metadata.id,
        name=metadata.name,
        content=prompt_file.content,
        description=metadata.description,
        category=metadata.category,
        tags=metadata.tags,
        created_at=_parse_timestamp(metadata.created),
        updated_at=_parse_timestamp(metadata.updated),
    )


def load_all_prompts(prompts_dir: Path = PROMPTS_DIR) -> list[PromptTemplate]:
    return [to_prompt_template(item) for item in load_all_prompt_files(prompts_dir)]


def load_prompt_by_id(
    prompt_id: str, prompts_dir: Path = PROMPTS_DIR
) -> PromptTemplate | None:
    for prompt_file in load_all_prompt_files(prompts_dir):
        if prompt_file.metadata.id == prompt_id:
            return to_prompt_template(prompt_file)
    return None


def load_prompts_by_category(
    category: str, prompts_dir: Path = PROMPTS_DIR
) -> list[PromptTemplate]:
    return [
        to_prompt_template(item)
        for item in load_all_prompt_files(prompts_dir)
        if item.metadata.category == category
    ]


def prompt_metadata_list(prompts_dir: Path = PROMPTS_DIR) -> list[PromptFileMetadata]:
    return [item.metadata for item in load_all_prompt_files(prompts_dir)]
