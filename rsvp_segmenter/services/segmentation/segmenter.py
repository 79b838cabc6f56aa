"""
Segmenter: raw text + settings → final chunk list.
Orchestration: sanitize → split paragraphs → tokenize → build raw chunks → merge.
One call owns all of its buffers; the tokenizer is the only shared collaborator.
"""

from rsvp_segmenter.config.logging import get_logger
from rsvp_segmenter.config.segmentation.models import (
    PartialSegmentationSettings,
    SegmentationSettings,
)
from rsvp_segmenter.services.segmentation.builder import ChunkBuilder
from rsvp_segmenter.services.segmentation.cleaners import sanitize_input, split_paragraphs
from rsvp_segmenter.services.segmentation.merger import post_process_chunks
from rsvp_segmenter.services.segmentation.models import Chunk
from rsvp_segmenter.services.segmentation.normalizer import normalize_settings
from rsvp_segmenter.services.tokenizer.base import BaseTokenizer

logger = get_logger(__name__)


def segment_sanitized(
    text: str, settings: SegmentationSettings, tokenizer: BaseTokenizer
) -> list[Chunk]:
    """
    Segment already-sanitized text with a ready tokenizer and clamped settings.
    Blank paragraphs and paragraphs with no tokens only flush the builder.
    Tokenizer query errors propagate.
    """
    builder = ChunkBuilder(settings)
    paragraphs = split_paragraphs(text)
    for paragraph in paragraphs:
        trimmed = paragraph.strip()
        if not trimmed:
            builder.flush()
            continue
        builder.add_paragraph(tokenizer.query(trimmed))
    builder.flush()

    chunks = post_process_chunks(builder.chunks, settings)
    logger.debug(
        "Segmented text",
        extra={
            "paragraphs": len(paragraphs),
            "raw_chunks": len(builder.chunks),
            "chunks": len(chunks),
            "max_segment_chars": settings.max_segment_chars,
            "min_join_length": settings.min_join_length,
        },
    )
    return chunks


async def segment_text(
    raw_text: str,
    tokenizer: BaseTokenizer,
    settings: PartialSegmentationSettings | dict | None = None,
) -> list[Chunk]:
    """
    Segment raw text into reading chunks. Empty or whitespace-only input returns []
    without touching the tokenizer. Settings are normalized, never rejected.
    """
    if not raw_text or not raw_text.strip():
        return []
    await tokenizer.initialize()
    sanitized = sanitize_input(raw_text)
    if not sanitized:
        return []
    return segment_sanitized(sanitized, normalize_settings(settings), tokenizer)
