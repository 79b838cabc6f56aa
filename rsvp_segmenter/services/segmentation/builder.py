"""
Chunk builder: greedy packing of one paragraph's tokens into raw chunks.

A chunk closes on a hard boundary, when it reaches the maximum length, on a soft
boundary once the soft-break threshold is met, or at the end of the paragraph.
A token that would overflow a non-empty buffer closes the buffer first, unless the
token is a hard boundary (punctuation stays with the text it ends).
"""

from collections.abc import Sequence

from rsvp_segmenter.config.segmentation.models import SegmentationSettings
from rsvp_segmenter.services.segmentation.boundaries import Boundary, classify_token
from rsvp_segmenter.services.segmentation.cleaners import collapse_whitespace
from rsvp_segmenter.services.segmentation.models import Chunk
from rsvp_segmenter.services.segmentation.normalizer import derive_soft_break_threshold
from rsvp_segmenter.services.tokenizer.base import Token


class ChunkBuilder:
    """Accumulates raw chunks across the paragraphs of one segmentation run."""

    def __init__(self, settings: SegmentationSettings) -> None:
        self.settings = settings
        self.soft_break_threshold = derive_soft_break_threshold(settings.max_segment_chars)
        self.chunks: list[Chunk] = []
        self._buffer: list[str] = []
        self._length = 0

    @property
    def buffered_length(self) -> int:
        return self._length

    def flush(self) -> Chunk | None:
        """
        Close the buffer. Empty text after collapsing whitespace is dropped silently.
        Safe to call with an empty buffer.
        """
        text = collapse_whitespace("".join(self._buffer))
        self._buffer = []
        self._length = 0
        if not text:
            return None
        chunk = Chunk(id=len(self.chunks), text=text)
        self.chunks.append(chunk)
        return chunk

    def add_token(self, token: Token, last_in_paragraph: bool = False) -> None:
        surface = (token.surface or "").strip()
        if not surface:
            return
        boundary = classify_token(token)
        token_length = len(surface)
        max_chars = self.settings.max_segment_chars

        if self._length > 0 and self._length + token_length > max_chars and boundary is not Boundary.HARD:
            self.flush()

        self._buffer.append(surface)
        self._length += token_length

        if (
            boundary is Boundary.HARD
            or self._length >= max_chars
            or (boundary is Boundary.SOFT and self._length >= self.soft_break_threshold)
            or last_in_paragraph
        ):
            self.flush()

    def add_paragraph(self, tokens: Sequence[Token] | None) -> None:
        """Feed one paragraph's tokens, then flush. No tokens means just a flush."""
        if not tokens:
            self.flush()
            return
        last_index = len(tokens) - 1
        for index, token in enumerate(tokens):
            self.add_token(token, last_in_paragraph=index == last_index)
        self.flush()


def build_raw_chunks(
    paragraphs: Sequence[Sequence[Token] | None], settings: SegmentationSettings
) -> list[Chunk]:
    """Run the builder over already-tokenized paragraphs. Ids are 0..n-1 in emission order."""
    builder = ChunkBuilder(settings)
    for tokens in paragraphs:
        builder.add_paragraph(tokens)
    builder.flush()
    return builder.chunks
