"""Request/response schemas for POST /segment and POST /segment/upload."""

from pydantic import BaseModel, Field

from rsvp_segmenter.config.segmentation.models import PartialSegmentationSettings
from rsvp_segmenter.services.segmentation.models import Chunk


class SegmentRequest(BaseModel):
    """POST /segment request body. Settings are optional overrides on top of the profile."""

    text: str = Field(..., description="Raw text; paragraphs separated by newlines")
    profile: str = Field(default="active", min_length=1, description="Segmentation profile from static.json")
    settings: PartialSegmentationSettings | None = Field(
        default=None, description="Optional max_segment_chars / min_join_length overrides (clamped, never rejected)"
    )


class AppliedSettings(BaseModel):
    """The clamped settings actually used for a run."""

    max_segment_chars: int
    min_join_length: int
    soft_break_threshold: int


class SegmentResponse(BaseModel):
    """Segmentation result. An empty chunk list is a valid result."""

    chunks: list[Chunk] = Field(default_factory=list)
    count: int = Field(..., ge=0, description="Number of chunks")
    settings: AppliedSettings


class ProfilesResponse(BaseModel):
    """GET /segment/profiles response body."""

    active: str
    profiles: dict[str, PartialSegmentationSettings]
