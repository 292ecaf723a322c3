"""UI state held by the ViewController."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from leafid.models.images import EncodedImage


class Phase(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    LOADED = "loaded"
    FAILED = "failed"


@dataclass
class UIState:
    image: EncodedImage | None = None
    analysis: str = ""
    loading: bool = False
    error: str | None = None

    @property
    def phase(self) -> Phase:
        if self.loading:
            return Phase.LOADING
        if self.error:
            return Phase.FAILED
        if self.analysis:
            return Phase.LOADED
        return Phase.IDLE
