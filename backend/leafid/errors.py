"""User-facing error taxonomy.

Every error carries the message shown in the page's error banner. The
ViewController catches all of them; none are meant to reach the HTTP layer.
"""

from __future__ import annotations

GENERIC_ANALYSIS_MESSAGE = "Failed to analyze image. Please try again."


class LeafIdError(Exception):
    """Base class. ``message`` is safe to show to the user."""

    default_message = "Something went wrong. Please try again."

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidTypeError(LeafIdError):
    default_message = "Please upload a valid image file"


class TooLargeError(LeafIdError):
    default_message = "Image size should be less than 20MB"


class ReadFailureError(LeafIdError):
    default_message = "Failed to read the image file. Please try again."


class AnalysisError(LeafIdError):
    default_message = GENERIC_ANALYSIS_MESSAGE

    @classmethod
    def from_exception(cls, exc: BaseException) -> AnalysisError:
        """Wrap a provider exception, keeping its message when it has one."""
        text = str(exc).strip()
        return cls(text or None)


class BootstrapFailureError(LeafIdError):
    default_message = "Failed to load default image"
