"""Health check + meta endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from leafid import __version__
from leafid.config import Settings
from leafid.dependencies import get_settings
from leafid.models.responses import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health(settings: Settings = Depends(get_settings)) -> HealthResponse:
    return HealthResponse(
        status="ok",
        version=__version__,
        model=settings.model_vision,
        llm_configured=bool(settings.anthropic_api_key),
    )


@router.get("/prompts")
async def prompts() -> dict[str, str]:
    from leafid.llm.prompts import get_all_templates

    return get_all_templates()
