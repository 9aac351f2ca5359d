import os
import sys
import uuid

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

# Add the project root to sys.path
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from ir_compare.agents.comparison.application.factory import comparison_orchestrator
from ir_compare.agents.comparison.application.prompt_service import (
    build_prompt_preview,
    find_prompt,
    list_prompt_metadata,
    list_prompts,
)
from ir_compare.agents.comparison.interface.contracts import (
    AnalysisRequestModel,
    AnalysisResponseModel,
    PromptPreviewRequest,
    ProviderStatusResponse,
)
from ir_compare.agents.comparison.interface.mappers import (
    to_analysis_response,
    to_company_list,
    to_model_info,
    to_prompt_metadata_model,
    to_prompt_model,
    to_prompt_preview_response,
)
from ir_compare.infrastructure.llm.provider import (
    available_models,
    validate_llm_configuration,
)
from ir_compare.shared.kernel.tools.logger import get_logger, log_context, log_event

logger = get_logger(__name__)

app = FastAPI(
    title="IR Comparison API",
    version="0.1.0",
    description="Prompt composition and LLM analysis for IR summary comparison",
)

# Set all CORS enabled origins
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["*"],
)


def _error_response(status_code: int, error: str) -> JSONResponse:
    body = AnalysisResponseModel(success=False, error=error)
    return JSONResponse(
        status_code=status_code,
        content=body.model_dump(by_alias=True, exclude_none=True),
    )


@app.middleware("http")
async def bind_request_id(request: Request, call_next):
    request_id = request.headers.get("x-request-id") or uuid.uuid4().hex
    with log_context(request_id=request_id):
        response = await call_next(request)
    response.headers["x-request-id"] = request_id
    return response


@app.get("/")
async def health_check():
    return {"status": "ok", "service": "ir-compare-core"}


@app.get("/api/prompts")
async def get_prompts(id: str | None = None, metadata: bool = False):
    if id:
        with log_context(prompt_id=id):
            prompt = find_prompt(id)
            if prompt is None:
                log_event(
                    logger,
                    event="prompt_not_found",
                    message="requested prompt template does not exist",
                    error_code="PROMPT_NOT_FOUND",
                )
                return _error_response(404, "Prompt not found")
        return to_prompt_model(prompt).model_dump(mode="json", by_alias=True)

    if metadata:
        return [
            to_prompt_metadata_model(item).model_dump(mode="json", by_alias=True)
            for item in list_prompt_metadata()
        ]

    return [
        to_prompt_model(prompt).model_dump(mode="json", by_alias=True)
        for prompt in list_prompts()
    ]


@app.post("/api/prompts/preview")
async def preview_prompt(body: PromptPreviewRequest):
    preview = build_prompt_preview(body.template, to_company_list(body.companies))
    return to_prompt_preview_response(preview).model_dump(by_alias=True)


@app.post("/api/analyze")
async def analyze(body: AnalysisRequestModel):
    if body.companies is None or not body.prompt or not body.model_id:
        return _error_response(
            400, "Missing required parameters (companies, prompt, modelId)"
        )

    with log_context(model_id=body.model_id):
        outcome = await comparison_orchestrator.run_analysis(
            companies=to_company_list(body.companies),
            prompt_name=body.prompt_name or "",
            prompt_content=body.prompt,
            model_id=body.model_id,
        )

    response = to_analysis_response(outcome)
    return JSONResponse(
        status_code=outcome.status_code,
        content=response.model_dump(by_alias=True, exclude_none=True),
    )


@app.get("/api/analyze")
async def provider_status():
    config = validate_llm_configuration()
    body = ProviderStatusResponse(
        providers={"azure-openai": config.azure_openai, "gemini": config.gemini},
        available_models=[to_model_info(model) for model in available_models(config)],
    )
    return body.model_dump(by_alias=True)


if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=8000)
