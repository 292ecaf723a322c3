"""POST /api/format: split analysis text into display records."""

from __future__ import annotations

from fastapi import APIRouter

from leafid.formatting import format_analysis
from leafid.models.requests import FormatRequest
from leafid.models.responses import FormatResponse

router = APIRouter()


@router.post("/format", response_model=FormatResponse)
async def format_text(req: FormatRequest) -> FormatResponse:
    return FormatResponse(records=format_analysis(req.text))
