"""Chunk record exchanged by the segmentation pipeline and the HTTP surface."""

from pydantic import BaseModel, Field


class Chunk(BaseModel):
    """One unit of text shown at a time. `id` is positional (0-based) within one list."""

    id: int = Field(..., ge=0, description="Dense 0-based position in the chunk list")
    text: str = Field(..., description="Whitespace-collapsed, trimmed chunk text")


def renumber(texts: list[str]) -> list[Chunk]:
    """Assign a fresh 0-based id sequence to texts, preserving order."""
    return [Chunk(id=i, text=t) for i, t in enumerate(texts)]
