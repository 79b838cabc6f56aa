import asyncio

import pytest
from conftest import ScriptedTokenizer, noun, period

from rsvp_segmenter.services.segmentation.segmenter import segment_text
from rsvp_segmenter.services.tokenizer.base import Token
from rsvp_segmenter.services.tokenizer.strategies.mock_strategy import MockTokenizer

SENTENCE = "今日は晴れです。明日は雨。"
SENTENCE_TOKENS = [
    noun("今日"),
    Token("は", "助詞", "係助詞"),
    noun("晴れ"),
    Token("です", "助動詞"),
    period(),
    noun("明日"),
    Token("は", "助詞", "係助詞"),
    noun("雨"),
    period(),
]


def run(text, tokenizer, settings=None):
    return asyncio.run(segment_text(text, tokenizer, settings=settings))


def test_breaks_at_sentence_periods():
    tokenizer = ScriptedTokenizer({SENTENCE: SENTENCE_TOKENS})
    chunks = run(SENTENCE, tokenizer, {"max_segment_chars": 16, "min_join_length": 4})
    assert [c.text for c in chunks] == ["今日は晴れです。", "明日は雨。"]
    assert [c.id for c in chunks] == [0, 1]
    assert all(len(c.text) <= 16 for c in chunks)
    assert tokenizer.initialized


def test_mock_tokenizer_gives_same_sentence_breaks():
    chunks = run(SENTENCE, MockTokenizer())
    assert [c.text for c in chunks] == ["今日は晴れです。", "明日は雨。"]


@pytest.mark.parametrize("text", ["", "   ", "\n\n\t　\r\n"])
def test_blank_input_returns_empty_list(text):
    tokenizer = ScriptedTokenizer()
    assert run(text, tokenizer) == []
    assert tokenizer.queries == []


def test_paragraphs_are_segmented_separately():
    chunks = run("猫が好き。\n\n犬も好き", MockTokenizer())
    assert [c.text for c in chunks] == ["猫が好き。", "犬も好き"]


def test_paragraph_without_tokens_contributes_nothing():
    tokenizer = ScriptedTokenizer({"A": [noun("一二三四五")], "C": [noun("六七八九十")]})
    chunks = run("A\nB\nC", tokenizer)
    assert [c.text for c in chunks] == ["一二三四五", "六七八九十"]
    assert tokenizer.queries == ["A", "B", "C"]


def test_input_is_sanitized_before_tokenizing():
    tokenizer = ScriptedTokenizer({"猫 です": [noun("猫"), Token(" です", "助動詞")]})
    chunks = run("　猫\t\tです\r\n", tokenizer)
    assert tokenizer.queries == ["猫 です"]
    assert [c.text for c in chunks] == ["猫です"]


def test_out_of_range_settings_are_clamped():
    chunks = run("あ" * 100, MockTokenizer(), {"max_segment_chars": 1000})
    assert [len(c.text) for c in chunks] == [32, 32, 32, 4]


def test_chunks_stay_within_bounds():
    text = (
        "吾輩は猫である。名前はまだ無い。\n"
        "どこで生れたかとんと見当がつかぬ。何でも薄暗いじめじめした所でニャーニャー泣いていた事だけは記憶している。\n"
        "東京特許許可局長、今日急遽休暇許可拒否!"
    )
    for max_chars in (6, 10, 16, 32):
        chunks = run(text, MockTokenizer(), {"max_segment_chars": max_chars, "min_join_length": 3})
        assert chunks
        assert [c.id for c in chunks] == list(range(len(chunks)))
        # Trailing punctuation may extend a chunk by one character
        assert all(0 < len(c.text) <= max_chars + 1 for c in chunks)
        assert "".join(c.text for c in chunks) == text.replace("\n", "")


def test_tokenizer_errors_propagate():
    class BrokenTokenizer(ScriptedTokenizer):
        def query(self, text):
            raise RuntimeError("tagger crashed")

    with pytest.raises(RuntimeError, match="tagger crashed"):
        run("猫", BrokenTokenizer())
