"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class FormatRequest(BaseModel):
    text: str = Field(..., description="Free-text analysis to split into display records")
