"""Image intake: upload validation and data URI encoding."""

from leafid.intake.encoder import encode_image, to_data_uri
from leafid.intake.validator import ACCEPTED_MEDIA_TYPES, validate_upload

__all__ = [
    "ACCEPTED_MEDIA_TYPES",
    "encode_image",
    "to_data_uri",
    "validate_upload",
]
