"""Upload policy: declared media type and byte length only."""

from __future__ import annotations

import logging

from leafid.config import settings
from leafid.errors import InvalidTypeError, TooLargeError
from leafid.models.images import UploadedImage

logger = logging.getLogger(__name__)

IMAGE_TYPE_PREFIX = "image/"

# Offered by the file picker; the validator itself only checks the prefix.
ACCEPTED_MEDIA_TYPES = ("image/jpeg", "image/png", "image/jpg")


def validate_upload(image: UploadedImage, max_bytes: int | None = None) -> None:
    """Raise on the first failing rule; return None when the file is acceptable.

    No magic-byte sniffing or dimension checks: downstream code only assumes
    the file claims to be an image and claims to be small enough.
    """
    limit = settings.max_upload_bytes if max_bytes is None else max_bytes

    if not image.media_type.startswith(IMAGE_TYPE_PREFIX):
        logger.info("Rejected %r: media type %r", image.filename, image.media_type)
        raise InvalidTypeError()

    if image.size > limit:
        logger.info("Rejected %r: %d bytes exceeds %d", image.filename, image.size, limit)
        raise TooLargeError(f"Image size should be less than {limit // (1024 * 1024)}MB")
