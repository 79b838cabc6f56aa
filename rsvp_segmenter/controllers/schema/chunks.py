"""Request/response schemas for the chunk-list import/export endpoints."""

from pydantic import BaseModel, Field

from rsvp_segmenter.services.segmentation.models import Chunk


class ChunkListResponse(BaseModel):
    """POST /chunks/import response body. Ids are renumbered from zero."""

    chunks: list[Chunk] = Field(default_factory=list)
    count: int = Field(..., ge=0)


class ChunkExportRequest(BaseModel):
    """POST /chunks/export request body."""

    chunks: list[Chunk] = Field(..., description="Chunks in presentation order")
