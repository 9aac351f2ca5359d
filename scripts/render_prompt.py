from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.append(str(PROJECT_ROOT))

from ir_compare.agents.comparison.application.factory import (  # noqa: E402
    comparison_orchestrator,
)
from ir_compare.agents.comparison.application.prompt_service import (  # noqa: E402
    build_prompt_preview,
    find_prompt,
)
from ir_compare.agents.comparison.interface.contracts import (  # noqa: E402
    CompanyListModel,
)
from ir_compare.agents.comparison.interface.formatters import (  # noqa: E402
    format_result_report,
)
from ir_compare.agents.comparison.interface.mappers import (  # noqa: E402
    to_company_list,
)
from ir_compare.infrastructure.llm.provider import find_model  # noqa: E402


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Resolve a comparison prompt for a set of companies."
    )
    parser.add_argument(
        "companies",
        type=Path,
        help="Path to companies JSON ({baseCompany, comparisonCompanies}).",
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        "--prompt-id",
        default="default-comparison",
        help="Template id from the prompts directory.",
    )
    source.add_argument(
        "--template-file",
        type=Path,
        help="Path to a raw template text file.",
    )
    parser.add_argument(
        "--model",
        help="Catalog model id; when given, the prompt is sent for analysis.",
    )
    return parser.parse_args()


def main() -> int:
    args = parse_args()

    if not args.companies.exists():
        raise FileNotFoundError(f"Companies file not found: {args.companies}")
    companies = to_company_list(
        CompanyListModel.model_validate_json(
            args.companies.read_text(encoding="utf-8")
        )
    )

    if args.template_file is not None:
        prompt_name = args.template_file.stem
        template = args.template_file.read_text(encoding="utf-8")
    else:
        prompt = find_prompt(args.prompt_id)
        if prompt is None:
            print(f"[render] prompt not found: {args.prompt_id}", file=sys.stderr)
            return 1
        prompt_name = prompt.name
        template = prompt.content

    preview = build_prompt_preview(template, companies)
    for warning in preview.validation.warnings:
        print(f"[render] warning: {warning}", file=sys.stderr)
    for error in preview.validation.errors:
        print(f"[render] error: {error}", file=sys.stderr)

    if not args.model:
        print(preview.resolved)
        return 0 if preview.validation.is_valid else 2

    outcome = asyncio.run(
        comparison_orchestrator.run_analysis(
            companies=companies,
            prompt_name=prompt_name,
            prompt_content=template,
            model_id=args.model,
        )
    )
    if not outcome.success:
        print(
            f"[render] analysis failed ({outcome.status_code}): {outcome.result.error}",
            file=sys.stderr,
        )
        return 1

    model = find_model(args.model)
    print(
        format_result_report(
            outcome.result, model_name=model.name if model is not None else None
        )
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
