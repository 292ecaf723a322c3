"""ViewController: drives upload → encode → analyze and owns the UI state.

State machine: idle → loading → {loaded, failed}; any state may re-enter
loading on a new upload or re-analyze. Every LeafIdError is caught here and
stored in ``state.error``; nothing propagates to the caller.
"""

from __future__ import annotations

import logging
from pathlib import Path

from leafid.config import Settings, settings as default_settings
from leafid.errors import AnalysisError, BootstrapFailureError, InvalidTypeError, LeafIdError
from leafid.formatting import format_analysis
from leafid.intake import encode_image, validate_upload
from leafid.llm.client import AnalysisClient
from leafid.llm.prompts import DEFAULT_ANALYSIS, LEAF_PROMPT
from leafid.models.display import DisplayRecord
from leafid.models.images import EncodedImage, UploadedImage
from leafid.models.state import UIState

logger = logging.getLogger(__name__)


class ViewController:
    def __init__(self, client: AnalysisClient, config: Settings | None = None) -> None:
        self.client = client
        self.settings = config or default_settings
        self.state = UIState()

    @property
    def busy(self) -> bool:
        return self.state.loading

    def records(self) -> list[DisplayRecord]:
        """Formatted view of the current analysis; computed on demand."""
        return format_analysis(self.state.analysis)

    async def bootstrap(self, path: Path | None = None) -> UIState:
        """Load the default image and demo analysis without calling the model.

        The asset goes through the same validation as a user upload.
        """
        asset = path or self.settings.default_image_path
        self.state.loading = True
        try:
            upload = UploadedImage.from_path(asset)
            validate_upload(upload, self.settings.max_upload_bytes)
            image = await encode_image(upload)
        except (OSError, LeafIdError) as e:
            logger.error("Failed to load default image %s: %s", asset, e)
            self.state.error = BootstrapFailureError().message
        else:
            self.state.image = image
            self.state.analysis = DEFAULT_ANALYSIS
            logger.info("Loaded default image %s", asset)
        finally:
            self.state.loading = False
        return self.state

    async def select(self, upload: UploadedImage) -> UIState:
        """Handle a newly selected file.

        ``loading`` is set before the first await so a second trigger arriving
        during the file read is ignored. A rejected file sets ``error`` but
        leaves the previous image and analysis on screen.
        """
        if self.busy:
            logger.warning("Ignoring upload of %r: analysis in progress", upload.filename)
            return self.state

        self.state.loading = True
        try:
            try:
                validate_upload(upload, self.settings.max_upload_bytes)
                image = await encode_image(upload)
            except LeafIdError as e:
                self.state.error = e.message
                return self.state

            self.state.image = image
            self.state.error = None
            logger.info("Accepted %r (%s, %d bytes)", upload.filename, upload.media_type, upload.size)
            await self._analyze(image)
        finally:
            self.state.loading = False
        return self.state

    async def reanalyze(self) -> UIState:
        """Analyze the image already on screen again; no re-upload, no re-validation."""
        if self.busy:
            logger.warning("Ignoring re-analyze: analysis in progress")
            return self.state

        if self.state.image is None:
            self.state.error = InvalidTypeError().message
            return self.state

        self.state.loading = True
        try:
            await self._analyze(self.state.image)
        finally:
            self.state.loading = False
        return self.state

    async def _analyze(self, image: EncodedImage) -> None:
        """Call the model; the caller owns the ``loading`` flag."""
        self.state.error = None
        try:
            result = await self.client.analyze(image, LEAF_PROMPT)
        except AnalysisError as e:
            # The previous analysis stays visible under the new error.
            self.state.error = e.message
        except Exception as e:
            logger.exception("Unexpected failure from analysis client")
            self.state.error = AnalysisError.from_exception(e).message
        else:
            self.state.analysis = result
