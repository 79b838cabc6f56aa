"""Oversize splitter: cut a text span into pieces of at most max_segment_chars code points."""


def split_oversized_text(text: str, max_segment_chars: int) -> list[str]:
    """
    Cut text every max_segment_chars code points. The final piece holds the remainder.
    Joining the pieces reproduces text exactly.
    """
    if max_segment_chars < 1:
        raise ValueError("max_segment_chars must be at least 1")
    return [text[i : i + max_segment_chars] for i in range(0, len(text), max_segment_chars)]
