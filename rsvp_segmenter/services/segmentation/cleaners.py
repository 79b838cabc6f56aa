"""Text cleaners for segmentation input. Normalize whitespace and split paragraphs."""

import re

_WHITESPACE_RUN = re.compile(r"\s+")
_PARAGRAPH_BREAK = re.compile(r"\n+")


def collapse_whitespace(text: str) -> str:
    """Collapse every whitespace run to a single space and trim."""
    if not text:
        return ""
    return _WHITESPACE_RUN.sub(" ", text).strip()


def sanitize_input(text: str) -> str:
    """
    Clean raw uploaded text before tokenizing: CRLF to LF, ideographic space and
    tab runs to a single space, then trim. Newlines are kept for paragraph splitting.
    """
    if not text or not isinstance(text, str):
        return ""
    text = text.replace("\r\n", "\n").replace("\u3000", " ")
    return re.sub(r"\t+", " ", text).strip()


def split_paragraphs(text: str) -> list[str]:
    """Split sanitized text on one-or-more newlines. Blank paragraphs are kept (they force a flush)."""
    return _PARAGRAPH_BREAK.split(text)
