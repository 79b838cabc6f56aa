"""Shared upload handling for multipart routes."""

from fastapi import HTTPException, UploadFile

from rsvp_segmenter.config.settings import get_settings


async def read_upload(file: UploadFile) -> bytes:
    """Read an uploaded file, rejecting it with 413 when over the configured size."""
    limit = get_settings().max_upload_bytes
    data = await file.read(limit + 1)
    if len(data) > limit:
        raise HTTPException(status_code=413, detail=f"Upload exceeds {limit} bytes")
    return data
