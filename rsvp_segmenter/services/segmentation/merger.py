"""
Post-processing merge pass over raw builder chunks.
Punctuation-only chunks join the previous chunk (with one character of slack), short
fragments join the previous chunk when the result still fits, and anything else is
appended through the oversize splitter. Output ids are renumbered from zero.
"""

from rsvp_segmenter.config.segmentation.models import SegmentationSettings
from rsvp_segmenter.services.segmentation.boundaries import is_punctuation_only
from rsvp_segmenter.services.segmentation.models import Chunk, renumber
from rsvp_segmenter.services.segmentation.splitter import split_oversized_text

# Punctuation may push the previous chunk this far past the maximum
PUNCTUATION_SLACK = 1


def _append(merged: list[str], text: str, max_segment_chars: int) -> None:
    merged.extend(split_oversized_text(text, max_segment_chars))


def merge_texts(raw_texts: list[str], settings: SegmentationSettings) -> list[str]:
    """Fold raw chunk texts into the merged text list."""
    max_chars = settings.max_segment_chars
    merged: list[str] = []
    for raw in raw_texts:
        text = raw.strip()
        if not text:
            continue

        if is_punctuation_only(text):
            if merged and len(merged[-1]) + len(text) <= max_chars + PUNCTUATION_SLACK:
                merged[-1] = merged[-1] + text
            else:
                _append(merged, text, max_chars)
            continue

        if (
            len(text) < settings.min_join_length
            and merged
            and len(merged[-1]) + len(text) <= max_chars
        ):
            merged[-1] = merged[-1] + text
            continue

        _append(merged, text, max_chars)
    return merged


def post_process_chunks(raw_chunks: list[Chunk], settings: SegmentationSettings) -> list[Chunk]:
    """Merge raw builder chunks and renumber the result."""
    return renumber(merge_texts([c.text for c in raw_chunks], settings))
