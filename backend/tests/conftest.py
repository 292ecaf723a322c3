"""Shared test fixtures."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from leafid.config import Settings
from leafid.controller import ViewController
from leafid.main import create_app
from leafid.models.images import EncodedImage


# Smallest valid PNG (1x1, transparent)
PNG_BYTES = bytes.fromhex(
    "89504e470d0a1a0a0000000d49484452000000010000000108060000001f15c489"
    "0000000d4944415478da636460f85f0f0002870180eb47ba920000000049454e44ae426082"
)

SAMPLE_ANALYSIS = """1. Species Identification:
- Scientific name: Quercus alba
- Common name: White Oak
2. Additional Information:
- Uses: Timber, barrels
A long-lived hardwood."""


class FakeAnalysisClient:
    """Stands in for the model: returns queued replies or raises queued errors."""

    def __init__(self, *replies: str | Exception) -> None:
        self.replies = list(replies) or [SAMPLE_ANALYSIS]
        self.calls: list[tuple[EncodedImage, str]] = []

    async def analyze(self, image: EncodedImage, prompt: str) -> str:
        self.calls.append((image, prompt))
        reply = self.replies.pop(0) if len(self.replies) > 1 else self.replies[0]
        if isinstance(reply, Exception):
            raise reply
        return reply


@pytest.fixture
def test_settings() -> Settings:
    return Settings(anthropic_api_key="", bootstrap_on_startup=False)


@pytest.fixture
def fake_client() -> FakeAnalysisClient:
    return FakeAnalysisClient()


@pytest.fixture
def controller(fake_client, test_settings) -> ViewController:
    return ViewController(fake_client, test_settings)


@pytest.fixture
def png_bytes() -> bytes:
    return PNG_BYTES


@pytest.fixture
def client(fake_client, test_settings) -> TestClient:
    app = create_app(analysis_client=fake_client, settings=test_settings)
    return TestClient(app)
