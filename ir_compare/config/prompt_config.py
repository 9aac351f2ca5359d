import os
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

load_dotenv(find_dotenv())

PROJECT_ROOT = Path(__file__).resolve().parents[2]

# Markdown templates with YAML front matter
PROMPTS_DIR = Path(
    os.getenv("PROMPTS_DIR", str(PROJECT_ROOT / "prompts" / "templates"))
)
PROMPT_FILE_SUFFIX = ".md"

MIN_PROMPT_CONTENT_CHARS = 20
RECOMMENDED_SUMMARY_MAX_CHARS = 1000
