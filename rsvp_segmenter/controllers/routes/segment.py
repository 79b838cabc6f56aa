"""POST /segment and /segment/upload: split raw text into reading chunks."""

from fastapi import APIRouter, File, Form, HTTPException, UploadFile

from rsvp_segmenter.config.logging import get_logger
from rsvp_segmenter.config.segmentation.models import PartialSegmentationSettings
from rsvp_segmenter.config.segmentation.static import (
    get_active_profile_name,
    load_segmentation_profiles,
    resolve_segmentation_settings,
)
from rsvp_segmenter.controllers.routes._uploads import read_upload
from rsvp_segmenter.controllers.schema.segment import (
    AppliedSettings,
    ProfilesResponse,
    SegmentResponse,
    SegmentRequest,
)
from rsvp_segmenter.resources.tokenizer.client import get_tokenizer
from rsvp_segmenter.services.segmentation.normalizer import (
    derive_soft_break_threshold,
    normalize_settings,
)
from rsvp_segmenter.services.segmentation.segmenter import segment_text
from rsvp_segmenter.services.tokenizer.base import TokenizerError

logger = get_logger(__name__)

router = APIRouter(prefix="/segment", tags=["segmentation"])


async def _run_segmentation(
    text: str, profile: str, overrides: PartialSegmentationSettings | None
) -> SegmentResponse:
    try:
        partial = resolve_segmentation_settings(profile, overrides)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e
    settings = normalize_settings(partial)

    try:
        chunks = await segment_text(text, get_tokenizer(), settings=partial)
    except TokenizerError as e:
        raise HTTPException(status_code=503, detail="Tokenizer unavailable") from e

    logger.info(
        "Segmentation complete",
        extra={"profile": profile, "chunks": len(chunks), "input_chars": len(text)},
    )
    return SegmentResponse(
        chunks=chunks,
        count=len(chunks),
        settings=AppliedSettings(
            max_segment_chars=settings.max_segment_chars,
            min_join_length=settings.min_join_length,
            soft_break_threshold=derive_soft_break_threshold(settings.max_segment_chars),
        ),
    )


@router.post("", response_model=SegmentResponse)
async def segment(body: SegmentRequest) -> SegmentResponse:
    """
    Segment the posted text. Profile defaults to the active one in static.json; inline
    settings override it field by field. Blank text yields an empty chunk list.
    """
    return await _run_segmentation(body.text, body.profile, body.settings)


@router.post("/upload", response_model=SegmentResponse)
async def segment_upload(
    file: UploadFile = File(..., description="UTF-8 plain-text file"),
    profile: str = Form(default="active"),
    max_segment_chars: str | None = Form(default=None),
    min_join_length: str | None = Form(default=None),
) -> SegmentResponse:
    """Segment an uploaded TXT file. A blank file is rejected rather than segmented."""
    data = await read_upload(file)
    try:
        text = data.decode("utf-8-sig")
    except UnicodeDecodeError as e:
        raise HTTPException(status_code=400, detail="TXT file must be UTF-8 encoded.") from e
    if not text.strip():
        raise HTTPException(status_code=400, detail="TXT file appears to be empty.")

    # Form values are raw strings; blank means "not set", anything else is clamped later
    overrides = PartialSegmentationSettings(
        max_segment_chars=max_segment_chars or None,
        min_join_length=min_join_length or None,
    )
    return await _run_segmentation(text, profile, overrides)


@router.get("/profiles", response_model=ProfilesResponse)
async def list_profiles() -> ProfilesResponse:
    """Configured segmentation profiles and the active profile name."""
    return ProfilesResponse(active=get_active_profile_name(), profiles=load_segmentation_profiles())
