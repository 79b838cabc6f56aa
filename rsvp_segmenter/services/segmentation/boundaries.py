"""Boundary classification: decide whether a token must, may, or must not end a chunk."""

from enum import Enum

from rsvp_segmenter.services.tokenizer.base import Token

# Ideographic full stop, fullwidth ! and ?, ASCII ? and !
HARD_PUNCTUATION = frozenset("。！？?!")
# Ideographic comma, fullwidth and ASCII comma, katakana middle dot, fullwidth and ASCII semicolon
SOFT_PUNCTUATION = frozenset("、，,・；;")
PUNCTUATION = HARD_PUNCTUATION | SOFT_PUNCTUATION

# IPADIC part-of-speech tags
POS_SYMBOL = "記号"
DETAIL_PERIOD = "句点"
DETAIL_COMMA = "読点"
POS_PARTICLE = "助詞"
DETAIL_ENDING_PARTICLE = "終助詞"
DETAIL_CASE_PARTICLE = "格助詞"
POS_AUX_VERB = "助動詞"
COPULA_DESU = "です"


class Boundary(str, Enum):
    HARD = "hard"
    SOFT = "soft"
    NONE = "none"


def _contains_any(text: str, charset: frozenset[str]) -> bool:
    return any(ch in charset for ch in text)


def is_punctuation_only(text: str) -> bool:
    """True when text is non-empty and every character is hard or soft punctuation."""
    return bool(text) and all(ch in PUNCTUATION for ch in text)


def is_hard_boundary(token: Token) -> bool:
    if token.pos == POS_SYMBOL and token.pos_detail1 in (DETAIL_PERIOD, DETAIL_COMMA):
        return True
    return _contains_any(token.surface, HARD_PUNCTUATION)


def is_soft_boundary(token: Token) -> bool:
    if token.pos == POS_PARTICLE and token.pos_detail1 in (DETAIL_ENDING_PARTICLE, DETAIL_CASE_PARTICLE):
        return True
    if token.pos == POS_AUX_VERB and token.surface.strip() == COPULA_DESU:
        return True
    return _contains_any(token.surface, SOFT_PUNCTUATION)


def classify_token(token: Token) -> Boundary:
    """Hard wins over soft; every token maps to exactly one outcome."""
    if is_hard_boundary(token):
        return Boundary.HARD
    if is_soft_boundary(token):
        return Boundary.SOFT
    return Boundary.NONE
