"""Tests for the ViewController state machine."""

from __future__ import annotations

import asyncio

from leafid.controller import ViewController
from leafid.errors import AnalysisError
from leafid.llm.prompts import DEFAULT_ANALYSIS, LEAF_PROMPT
from leafid.models.display import SectionHeader
from leafid.models.images import EncodedImage, UploadedImage
from leafid.models.state import Phase
from tests.conftest import SAMPLE_ANALYSIS, FakeAnalysisClient


def _png(png_bytes: bytes) -> UploadedImage:
    return UploadedImage.from_bytes(png_bytes, "image/png", filename="leaf.png")


def test_initial_state_is_idle(controller):
    assert controller.state.phase is Phase.IDLE
    assert controller.state.image is None
    assert controller.records() == []


def test_select_analyzes_with_fixed_prompt(controller, fake_client, png_bytes):
    state = asyncio.run(controller.select(_png(png_bytes)))
    assert state.phase is Phase.LOADED
    assert state.analysis == SAMPLE_ANALYSIS
    assert state.error is None
    assert state.loading is False
    image, prompt = fake_client.calls[0]
    assert prompt == LEAF_PROMPT
    assert image == state.image
    assert image.uri.startswith("data:image/png;base64,")


def test_records_are_formatted_lazily(controller, png_bytes):
    asyncio.run(controller.select(_png(png_bytes)))
    assert controller.records()[0] == SectionHeader(title="Species Identification:")


def test_invalid_upload_keeps_previous_result(controller, fake_client, png_bytes):
    asyncio.run(controller.select(_png(png_bytes)))
    previous_image = controller.state.image

    bad = UploadedImage.from_bytes(b"%PDF", "application/pdf", filename="doc.pdf")
    state = asyncio.run(controller.select(bad))

    assert state.error == "Please upload a valid image file"
    assert state.image == previous_image
    assert state.analysis == SAMPLE_ANALYSIS
    assert state.loading is False
    assert len(fake_client.calls) == 1


def test_too_large_upload_is_rejected(controller, fake_client):
    async def _unread() -> bytes:
        return b""

    upload = UploadedImage(media_type="image/jpeg", size=21 * 1024 * 1024, reader=_unread)
    state = asyncio.run(controller.select(upload))
    assert state.error == "Image size should be less than 20MB"
    assert fake_client.calls == []


def test_read_failure_sets_error(controller, fake_client):
    async def _broken() -> bytes:
        raise OSError("handle revoked")

    upload = UploadedImage(media_type="image/png", size=4, reader=_broken)
    state = asyncio.run(controller.select(upload))
    assert state.phase is Phase.FAILED
    assert state.error == "Failed to read the image file. Please try again."
    assert state.image is None
    assert fake_client.calls == []


def test_failed_reanalyze_keeps_prior_analysis(test_settings, png_bytes):
    client = FakeAnalysisClient(SAMPLE_ANALYSIS, AnalysisError("Quota exceeded"))
    controller = ViewController(client, test_settings)

    asyncio.run(controller.select(_png(png_bytes)))
    state = asyncio.run(controller.reanalyze())

    assert state.error == "Quota exceeded"
    assert state.analysis == SAMPLE_ANALYSIS
    assert state.phase is Phase.FAILED
    assert len(client.calls) == 2
    # Same encoded image reused, no re-upload
    assert client.calls[0][0] == client.calls[1][0]


def test_new_attempt_clears_error(test_settings, png_bytes):
    client = FakeAnalysisClient(AnalysisError("Service unavailable"), "1. Retry worked")
    controller = ViewController(client, test_settings)

    assert asyncio.run(controller.select(_png(png_bytes))).error == "Service unavailable"
    state = asyncio.run(controller.reanalyze())
    assert state.error is None
    assert state.analysis == "1. Retry worked"


def test_unexpected_client_exception_is_recovered(test_settings, png_bytes):
    controller = ViewController(FakeAnalysisClient(RuntimeError("")), test_settings)
    state = asyncio.run(controller.select(_png(png_bytes)))
    assert state.error == "Failed to analyze image. Please try again."
    assert state.loading is False


def test_reanalyze_without_image(controller, fake_client):
    state = asyncio.run(controller.reanalyze())
    assert state.error == "Please upload a valid image file"
    assert fake_client.calls == []


def test_trigger_while_loading_is_ignored(controller, fake_client, png_bytes):
    controller.state.image = EncodedImage("data:image/png;base64,")
    controller.state.loading = True

    asyncio.run(controller.reanalyze())
    asyncio.run(controller.select(_png(png_bytes)))

    assert fake_client.calls == []
    assert controller.state.image.uri == "data:image/png;base64,"


def test_loading_flag_during_call(test_settings, png_bytes):
    seen: list[bool] = []

    class _Probe:
        async def analyze(self, image: EncodedImage, prompt: str) -> str:
            seen.append(controller.state.loading)
            return "ok"

    controller = ViewController(_Probe(), test_settings)
    asyncio.run(controller.select(_png(png_bytes)))
    assert seen == [True]
    assert controller.state.loading is False


def test_bootstrap_loads_default_content(controller, fake_client):
    state = asyncio.run(controller.bootstrap())
    assert state.analysis == DEFAULT_ANALYSIS
    assert state.image is not None
    assert state.image.media_type == "image/png"
    assert state.image.payload.startswith("iVBORw0KGgo")
    assert len(state.image.payload) > 10_000
    assert state.error is None
    assert state.loading is False
    assert fake_client.calls == []


def test_bootstrap_missing_asset(controller, tmp_path):
    state = asyncio.run(controller.bootstrap(tmp_path / "missing.jpg"))
    assert state.error == "Failed to load default image"
    assert state.image is None
    assert state.loading is False


def test_bootstrap_rejects_non_image_asset(controller, tmp_path):
    path = tmp_path / "default.txt"
    path.write_text("not an image")
    state = asyncio.run(controller.bootstrap(path))
    assert state.error == "Failed to load default image"
    assert state.image is None
    assert state.analysis == ""


class _SlowClient:
    """Counts how many analyze calls overlap."""

    def __init__(self) -> None:
        self.in_flight = 0
        self.max_in_flight = 0
        self.calls = 0

    async def analyze(self, image: EncodedImage, prompt: str) -> str:
        self.calls += 1
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        await asyncio.sleep(0.01)
        self.in_flight -= 1
        return SAMPLE_ANALYSIS


def _slow_upload(png_bytes: bytes, name: str) -> UploadedImage:
    async def _read() -> bytes:
        await asyncio.sleep(0.01)
        return png_bytes

    return UploadedImage(media_type="image/png", size=len(png_bytes), reader=_read, filename=name)


def test_overlapping_uploads_run_one_analysis(test_settings, png_bytes):
    client = _SlowClient()
    controller = ViewController(client, test_settings)

    async def _run():
        await asyncio.gather(
            controller.select(_slow_upload(png_bytes, "first.png")),
            controller.select(_slow_upload(png_bytes, "second.png")),
        )

    asyncio.run(_run())
    assert client.calls == 1
    assert client.max_in_flight == 1
    assert controller.state.loading is False
    assert controller.state.analysis == SAMPLE_ANALYSIS


def test_reanalyze_during_upload_read_is_ignored(test_settings, png_bytes):
    client = _SlowClient()
    controller = ViewController(client, test_settings)
    controller.state.image = EncodedImage("data:image/png;base64,")

    async def _run():
        await asyncio.gather(
            controller.select(_slow_upload(png_bytes, "leaf.png")),
            controller.reanalyze(),
        )

    asyncio.run(_run())
    assert client.calls == 1
    assert client.max_in_flight == 1
    assert controller.state.image.uri.startswith("data:image/png;base64,iVBOR")


def test_loading_is_set_during_file_read(controller, png_bytes):
    seen: list[bool] = []

    async def _read() -> bytes:
        seen.append(controller.state.loading)
        return png_bytes

    upload = UploadedImage(media_type="image/png", size=len(png_bytes), reader=_read)
    asyncio.run(controller.select(upload))
    assert seen == [True]
    assert controller.state.loading is False


def test_loading_is_cleared_after_rejected_upload(controller, png_bytes):
    asyncio.run(controller.select(UploadedImage.from_bytes(b"x", "text/plain")))
    assert controller.state.loading is False

    asyncio.run(controller.select(_png(png_bytes)))
    assert controller.state.analysis == SAMPLE_ANALYSIS
