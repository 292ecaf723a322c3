"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from leafid.models.display import DisplayRecord
from leafid.models.state import Phase, UIState


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    model: str = ""
    llm_configured: bool = False


class StateResponse(BaseModel):
    phase: Phase
    loading: bool = False
    error: str | None = None
    image: str | None = Field(default=None, description="Preview data URI")
    analysis: str = ""
    records: list[DisplayRecord] = Field(default_factory=list)

    @classmethod
    def from_state(cls, state: UIState, records: list[DisplayRecord]) -> StateResponse:
        return cls(
            phase=state.phase,
            loading=state.loading,
            error=state.error,
            image=state.image.uri if state.image else None,
            analysis=state.analysis,
            records=records,
        )


class FormatResponse(BaseModel):
    records: list[DisplayRecord] = Field(default_factory=list)
