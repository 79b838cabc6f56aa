"""Tokenizer strategy implementations."""

from rsvp_segmenter.services.tokenizer.base import BaseTokenizer
from rsvp_segmenter.services.tokenizer.strategies.mock_strategy import MockTokenizer

STRATEGY_NAMES = ("mecab", "mock")


def get_tokenizer_strategy(strategy_name: str, mecab_args: str = "") -> BaseTokenizer | None:
    """Return a new tokenizer for the given strategy name, or None."""
    if strategy_name == "mock":
        return MockTokenizer()
    if strategy_name == "mecab":
        # fugashi loads a native library; import only when selected
        from rsvp_segmenter.services.tokenizer.strategies.mecab_strategy import MeCabTokenizer

        return MeCabTokenizer(extra_args=mecab_args)
    return None
