"""LangChain ChatAnthropic wrapper for image analysis."""

from __future__ import annotations

import logging
from typing import Protocol

from leafid.config import Settings, settings as default_settings
from leafid.errors import AnalysisError
from leafid.models.images import EncodedImage

logger = logging.getLogger(__name__)

NOT_CONFIGURED_MESSAGE = "LLM not configured. Set ANTHROPIC_API_KEY in .env"


class AnalysisClient(Protocol):
    async def analyze(self, image: EncodedImage, prompt: str) -> str:
        """Describe the image. Raises AnalysisError with a user-readable message."""
        ...


def _response_text(content: str | list) -> str:
    """Flatten a chat model's content into plain text."""
    if isinstance(content, str):
        return content
    parts: list[str] = []
    for block in content:
        if isinstance(block, str):
            parts.append(block)
        elif isinstance(block, dict) and block.get("type") == "text":
            parts.append(block.get("text", ""))
    return "".join(parts)


class AnthropicAnalysisClient:
    """Sends the data URI and prompt as one multimodal human message."""

    def __init__(self, config: Settings | None = None) -> None:
        self.settings = config or default_settings

    @property
    def configured(self) -> bool:
        return bool(self.settings.anthropic_api_key)

    def _build_llm(self):
        from langchain_anthropic import ChatAnthropic

        return ChatAnthropic(
            model=self.settings.model_vision,
            api_key=self.settings.anthropic_api_key,
            max_tokens=self.settings.llm_max_tokens,
            timeout=self.settings.llm_timeout,
        )

    async def analyze(self, image: EncodedImage, prompt: str) -> str:
        if not self.configured:
            raise AnalysisError(NOT_CONFIGURED_MESSAGE)

        from langchain_core.messages import HumanMessage

        message = HumanMessage(
            content=[
                {"type": "text", "text": prompt},
                {"type": "image_url", "image_url": {"url": image.uri}},
            ]
        )

        try:
            llm = self._build_llm()
            response = await llm.ainvoke([message])
        except Exception as e:
            logger.exception("Analysis call failed")
            raise AnalysisError.from_exception(e) from e

        text = _response_text(response.content).strip()
        if not text:
            raise AnalysisError("The model returned an empty analysis. Please try again.")
        return text
