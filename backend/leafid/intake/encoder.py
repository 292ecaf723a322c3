"""Binary image → data URI."""

from __future__ import annotations

import base64
import logging

from leafid.errors import ReadFailureError
from leafid.models.images import EncodedImage, UploadedImage

logger = logging.getLogger(__name__)


def to_data_uri(data: bytes, media_type: str) -> EncodedImage:
    payload = base64.b64encode(data).decode("ascii")
    return EncodedImage(f"data:{media_type};base64,{payload}")


async def encode_image(image: UploadedImage) -> EncodedImage:
    """Read the upload and wrap it as a data URI.

    Any failure while reading (I/O error, closed handle) becomes
    ReadFailureError so the controller can show it.
    """
    try:
        data = await image.read()
    except (OSError, ValueError, RuntimeError) as e:
        logger.warning("Could not read %r: %s", image.filename, e)
        raise ReadFailureError() from e

    return to_data_uri(data, image.media_type)

