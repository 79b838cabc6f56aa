import pytest

from rsvp_segmenter.services.segmentation.boundaries import (
    Boundary,
    classify_token,
    is_punctuation_only,
)
from rsvp_segmenter.services.tokenizer.base import Token


@pytest.mark.parametrize(
    "token, expected",
    [
        (Token("。", "記号", "句点"), Boundary.HARD),
        (Token("、", "記号", "読点"), Boundary.HARD),
        (Token("！"), Boundary.HARD),
        (Token("？"), Boundary.HARD),
        (Token("?"), Boundary.HARD),
        (Token("!"), Boundary.HARD),
        (Token("本当?"), Boundary.HARD),
        (Token("が", "助詞", "格助詞"), Boundary.SOFT),
        (Token("ね", "助詞", "終助詞"), Boundary.SOFT),
        (Token("です", "助動詞"), Boundary.SOFT),
        (Token(" です ", "助動詞"), Boundary.SOFT),
        (Token("、"), Boundary.SOFT),
        (Token("，"), Boundary.SOFT),
        (Token(","), Boundary.SOFT),
        (Token("・"), Boundary.SOFT),
        (Token("；"), Boundary.SOFT),
        (Token(";"), Boundary.SOFT),
        (Token("は", "助詞", "係助詞"), Boundary.NONE),
        (Token("ます", "助動詞"), Boundary.NONE),
        (Token("です", "名詞", "一般"), Boundary.NONE),
        (Token("「", "記号", "括弧開"), Boundary.NONE),
        (Token("猫", "名詞", "一般"), Boundary.NONE),
    ],
)
def test_classify_token(token, expected):
    assert classify_token(token) is expected


def test_hard_wins_over_soft():
    # A particle whose surface also carries a full stop
    assert classify_token(Token("よ。", "助詞", "終助詞")) is Boundary.HARD


@pytest.mark.parametrize(
    "text, expected",
    [
        ("。", True),
        ("。、!?", True),
        ("・；", True),
        ("", False),
        ("…", False),
        ("a。", False),
        ("です。", False),
    ],
)
def test_is_punctuation_only(text, expected):
    assert is_punctuation_only(text) is expected
