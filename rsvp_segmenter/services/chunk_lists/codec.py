"""Chunk-list exchange format: validate uploaded JSON and produce the download form."""

import json
from typing import Any

from rsvp_segmenter.config.logging import get_logger
from rsvp_segmenter.services.segmentation.models import Chunk, renumber

logger = get_logger(__name__)

EXPORT_FILENAME = "rsvp-segments.json"


class ChunkListError(ValueError):
    """Uploaded chunk list is structurally unusable. Message names the defect."""


def normalize_chunk_list(data: Any) -> list[Chunk]:
    """
    Accept a flat array of strings, or an array of objects with a string `text`.
    Object entries without usable text are dropped; incoming ids are ignored and
    the result is renumbered from zero.
    A flat string array is taken as-is: blank strings stay as blank chunks, so
    positions match the uploaded file one to one.
    """
    if not isinstance(data, list):
        raise ChunkListError("JSON must be an array.")

    if all(isinstance(item, str) for item in data):
        return renumber(data)

    texts: list[str] = []
    for item in data:
        if not isinstance(item, dict):
            continue
        text = item.get("text")
        if not isinstance(text, str) or not text.strip():
            continue
        texts.append(text)

    if not texts:
        raise ChunkListError("JSON does not contain valid segment entries.")
    return renumber(texts)


def parse_chunk_list(raw: bytes | str) -> list[Chunk]:
    """Decode a JSON document and normalize it. Raises ChunkListError on any defect."""
    try:
        data = json.loads(raw)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        logger.warning("Chunk list is not valid JSON", extra={"error": str(e)})
        raise ChunkListError(f"Invalid JSON: {e}") from e
    try:
        return normalize_chunk_list(data)
    except ChunkListError as e:
        logger.warning("Chunk list rejected", extra={"error": str(e)})
        raise


def export_chunk_texts(chunks: list[Chunk]) -> list[str]:
    """Flat ordered list of chunk texts (the download format)."""
    return [c.text for c in chunks]


def dump_chunk_texts(chunks: list[Chunk]) -> str:
    """Pretty-printed JSON array of chunk texts, non-ASCII kept as-is."""
    return json.dumps(export_chunk_texts(chunks), ensure_ascii=False, indent=2)
