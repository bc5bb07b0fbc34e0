"""Resume upload handling: extension gate and size-limited buffering."""

from __future__ import annotations

from pathlib import PurePath

from fastapi import UploadFile

from ....errors import DecodeError, UnsupportedFormat
from ....tools import SUPPORTED_EXTENSIONS
from ...errors import APIError

CHUNK_SIZE = 64 * 1024


async def read_resume_upload(file: UploadFile, max_bytes: int) -> tuple[bytes, str]:
    """Return the uploaded bytes and the filename's extension.

    The extension is checked before any content is read, and the stream is
    abandoned as soon as it grows past *max_bytes*.
    """
    extension = PurePath(file.filename or "").suffix.lower()
    if extension.lstrip(".") not in SUPPORTED_EXTENSIONS:
        raise UnsupportedFormat(extension, tuple(f".{e}" for e in SUPPORTED_EXTENSIONS))

    buffer = bytearray()
    while True:
        chunk = await file.read(CHUNK_SIZE)
        if not chunk:
            break
        if len(buffer) + len(chunk) > max_bytes:
            raise APIError(
                422,
                "UPLOAD_TOO_LARGE",
                "Uploaded file exceeds size limit",
                {"max_upload_bytes": max_bytes},
            )
        buffer.extend(chunk)

    if not buffer:
        raise DecodeError("Uploaded file is empty")
    return bytes(buffer), extension
