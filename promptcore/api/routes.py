"""API routes for promptcore."""

from datetime import datetime
from typing import Any, Optional

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field

from promptcore.adapters import BaseAdapter, OpenAIAdapter
from promptcore.api.auth import Caller, resolve_caller
from promptcore.api.catalog import (
    ALL_MODELS,
    LIMITED_MODELS,
    PREMIUM_MODELS,
    is_known_model,
    is_premium_model,
)
from promptcore.api.quota import TokenQuota, get_quota
from promptcore.engine import (
    PromptEngine,
    UnknownPromptKindError,
    find_missing_params,
    get_engine,
)
from promptcore.models import ContextPayload, EnhancementOptions
from promptcore.templates import DEFAULT_SYSTEM_PROMPT, SYSTEM_PROMPTS
from promptcore.utils.config import get_settings
from promptcore.utils.language import detect_language
from promptcore.utils.logger import get_logger
from promptcore.utils.metrics import estimate_tokens
from promptcore.utils.sanitization import sanitize_user_input, validate_user_input

logger = get_logger()

router = APIRouter(prefix="/api", tags=["promptcore"])

_adapter: Optional[BaseAdapter] = None


def get_adapter() -> BaseAdapter:
    """Get the shared model adapter."""
    global _adapter
    if _adapter is None:
        _adapter = OpenAIAdapter()
    return _adapter


def get_prompt_engine() -> PromptEngine:
    return get_engine()


def get_token_quota() -> TokenQuota:
    return get_quota()


# Request/Response models
class PromptRequest(BaseModel):
    """A prompt to build."""

    type: str = Field(default="ENHANCE", description="Prompt kind (e.g., 'ENHANCE', 'DEBUG')")
    params: dict[str, Any] = Field(default_factory=dict, description="Placeholder values")
    custom_templates: Optional[dict[str, Optional[str]]] = Field(
        default=None, description="Per-kind templates replacing the built-ins"
    )
    enhancement: Optional[EnhancementOptions] = Field(
        default=None, description="Structural enhancement; omitted means none"
    )
    context: Optional[ContextPayload] = Field(
        default=None, description="External context appended to the prompt"
    )


class GenerateRequest(PromptRequest):
    """A prompt to build and send to a model."""

    model: Optional[str] = Field(default=None, description="Model name; defaults to settings")


class PreviewResponse(BaseModel):
    """A built prompt without a model call."""

    kind: str
    prompt: str
    missing_params: list[str]


class GenerateResponse(BaseModel):
    """A built prompt and the model's answer."""

    type: str
    model: str
    prompt: str
    output: str
    usage: dict[str, Any]
    quota: dict[str, Any]


class PromptKindInfo(BaseModel):
    kind: str
    description: str


class ModelsResponse(BaseModel):
    models: list[str]
    premium: list[str]
    limited: list[str]
    authed: bool


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    timestamp: str
    version: str = "0.1.0"
    api_keys_configured: dict[str, bool]


def _prepare_params(params: dict[str, Any]) -> dict[str, Any]:
    """Validate user input and fill in the language when it is missing."""
    settings = get_settings()
    prepared = dict(params)

    user_input = prepared.get("userInput")
    if user_input is not None:
        if not isinstance(user_input, str):
            raise HTTPException(status_code=400, detail="userInput must be a string")
        is_valid, error = validate_user_input(user_input, settings.max_input_length)
        if not is_valid:
            raise HTTPException(status_code=400, detail=error)
        prepared["userInput"] = sanitize_user_input(user_input).sanitized

    if not prepared.get("language"):
        prepared["language"] = detect_language(prepared.get("userInput") or "") or settings.default_language

    return prepared


def _build(engine: PromptEngine, request: PromptRequest, params: dict[str, Any]) -> str:
    try:
        return engine.build_prompt(
            request.type,
            params,
            custom_templates=request.custom_templates,
            enhancement=request.enhancement,
            context=request.context,
        )
    except UnknownPromptKindError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Health check endpoint for monitoring."""
    settings = get_settings()
    return HealthResponse(
        status="healthy",
        timestamp=datetime.now().isoformat(),
        api_keys_configured=settings.validate_api_keys(),
    )


@router.get("/models", response_model=ModelsResponse)
async def list_models(caller: Caller = Depends(resolve_caller)) -> ModelsResponse:
    """List every model with its tier; premium ones are shown to everyone."""
    return ModelsResponse(
        models=sorted(ALL_MODELS),
        premium=sorted(PREMIUM_MODELS),
        limited=sorted(LIMITED_MODELS),
        authed=caller.is_authenticated,
    )


@router.get("/prompts", response_model=list[PromptKindInfo])
async def list_prompt_kinds(
    engine: PromptEngine = Depends(get_prompt_engine),
) -> list[PromptKindInfo]:
    """List the built-in prompt kinds."""
    return [
        PromptKindInfo(kind=kind, description=engine.registry.describe(kind))
        for kind in engine.registry.list_kinds()
    ]


@router.post("/prompts/preview", response_model=PreviewResponse)
async def preview_prompt(
    request: PromptRequest,
    engine: PromptEngine = Depends(get_prompt_engine),
) -> PreviewResponse:
    """Build a prompt without calling a model."""
    params = _prepare_params(request.params)
    prompt = _build(engine, request, params)
    template = engine.registry.resolve(request.type, request.custom_templates)
    return PreviewResponse(
        kind=request.type,
        prompt=prompt,
        missing_params=find_missing_params(template, params),
    )


@router.post("/generate", response_model=GenerateResponse)
async def generate(
    request: GenerateRequest,
    caller: Caller = Depends(resolve_caller),
    engine: PromptEngine = Depends(get_prompt_engine),
    quota: TokenQuota = Depends(get_token_quota),
    adapter: BaseAdapter = Depends(get_adapter),
) -> GenerateResponse:
    """Build a prompt and run it through the model.

    Model tier is checked before the prompt is built and the quota is charged
    only after every other check passes, so a bad request costs no tokens.
    """
    settings = get_settings()
    model = request.model or settings.default_model

    if not is_known_model(model):
        raise HTTPException(status_code=400, detail=f"Unknown model: {model}")
    if is_premium_model(model) and not caller.is_authenticated:
        raise HTTPException(status_code=403, detail="Premium model requires authentication")

    params = _prepare_params(request.params)
    prompt = _build(engine, request, params)

    if not adapter.api_key:
        raise HTTPException(
            status_code=500,
            detail="OPENAI_API_KEY is missing. Set it in the environment or .env and restart the server.",
        )

    tokens = max(settings.request_token_estimate, estimate_tokens(prompt))
    quota_result = quota.check_and_consume(caller.user_id, model, tokens)
    if not quota_result.allowed:
        raise HTTPException(
            status_code=429,
            detail={
                "error": "Daily token quota exceeded",
                "limit": quota_result.limit,
                "remaining": quota_result.remaining,
            },
        )

    try:
        response = await adapter.generate(
            prompt,
            system_prompt=SYSTEM_PROMPTS.get(request.type, DEFAULT_SYSTEM_PROMPT),
            model=model,
        )
    except Exception as e:
        logger.error(f"Error generating {request.type} response: {e}")
        quota.refund(caller.user_id, model, tokens)
        raise HTTPException(status_code=500, detail=str(e))

    return GenerateResponse(
        type=request.type,
        model=response.model_used,
        prompt=prompt,
        output=response.content,
        usage=response.usage.to_dict(),
        quota=quota_result.to_dict(),
    )
