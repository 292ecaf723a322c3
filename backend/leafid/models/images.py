"""Image payloads flowing through intake: raw upload → data URI."""

from __future__ import annotations

import asyncio
import mimetypes
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from pathlib import Path

from fastapi import UploadFile

_FALLBACK_MEDIA_TYPE = "application/octet-stream"


@dataclass
class UploadedImage:
    """A user-selected file: declared media type, byte length, and a deferred read.

    Nothing is read at construction time; ``read()`` is the only suspend point.
    """

    media_type: str
    size: int
    reader: Callable[[], Awaitable[bytes]] = field(repr=False)
    filename: str = ""

    async def read(self) -> bytes:
        return await self.reader()

    @classmethod
    def from_bytes(cls, data: bytes, media_type: str, filename: str = "") -> UploadedImage:
        async def _read() -> bytes:
            return data

        return cls(media_type=media_type, size=len(data), reader=_read, filename=filename)

    @classmethod
    def from_upload(cls, upload: UploadFile) -> UploadedImage:
        size = upload.size
        if size is None:
            # Older Starlette does not record the size; measure the spooled file.
            upload.file.seek(0, 2)
            size = upload.file.tell()
            upload.file.seek(0)

        async def _read() -> bytes:
            await upload.seek(0)
            return await upload.read()

        return cls(
            media_type=upload.content_type or "",
            size=size,
            reader=_read,
            filename=upload.filename or "",
        )

    @classmethod
    def from_path(cls, path: Path) -> UploadedImage:
        """Wrap a file on disk. The media type is guessed from the extension."""
        media_type, _ = mimetypes.guess_type(path.name)
        size = path.stat().st_size

        async def _read() -> bytes:
            return await asyncio.to_thread(path.read_bytes)

        return cls(
            media_type=media_type or _FALLBACK_MEDIA_TYPE,
            size=size,
            reader=_read,
            filename=path.name,
        )


@dataclass(frozen=True)
class EncodedImage:
    """A ``data:<media-type>;base64,<payload>`` URI.

    Used as-is for the ``<img>`` preview and as the payload sent to the model.
    """

    uri: str

    @property
    def media_type(self) -> str:
        header, _, _ = self.uri.partition(",")
        return header.removeprefix("data:").removesuffix(";base64")

    @property
    def payload(self) -> str:
        return self.uri.partition(",")[2]

    def __str__(self) -> str:
        return self.uri
