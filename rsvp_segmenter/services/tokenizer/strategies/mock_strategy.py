"""Mock tokenizer for tests and offline development. Dictionary-free and deterministic."""

import re

from rsvp_segmenter.services.tokenizer.base import BaseTokenizer, Token

_RUN = re.compile(
    r"(?P<kanji>[㐀-䶿一-鿿々〆]+)"
    r"|(?P<hira>[ぁ-ゟ]+)"
    r"|(?P<kata>[ァ-ヺー]+)"
    r"|(?P<alnum>[0-9A-Za-z０-９Ａ-Ｚａ-ｚ]+)"
    r"|(?P<space>\s+)"
    r"|(?P<symbol>.)",
    re.DOTALL,
)

# Function words recognized inside hiragana runs, with IPADIC tags (pos, detail1)
FUNCTION_WORDS: dict[str, tuple[str, str]] = {
    "から": ("助詞", "格助詞"),
    "より": ("助詞", "格助詞"),
    "です": ("助動詞", ""),
    "ます": ("助動詞", ""),
    "でした": ("助動詞", ""),
    "が": ("助詞", "格助詞"),
    "を": ("助詞", "格助詞"),
    "に": ("助詞", "格助詞"),
    "で": ("助詞", "格助詞"),
    "と": ("助詞", "格助詞"),
    "へ": ("助詞", "格助詞"),
    "は": ("助詞", "係助詞"),
    "も": ("助詞", "係助詞"),
    "ね": ("助詞", "終助詞"),
    "よ": ("助詞", "終助詞"),
    "か": ("助詞", "終助詞"),
    "だ": ("助動詞", ""),
}
_LONGEST_FIRST = sorted(FUNCTION_WORDS, key=len, reverse=True)

SYMBOL_DETAILS = {
    "。": "句点",
    "．": "句点",
    "、": "読点",
    "，": "読点",
}


def _split_hiragana(run: str) -> list[Token]:
    tokens: list[Token] = []
    pending = ""
    i = 0
    while i < len(run):
        word = next((w for w in _LONGEST_FIRST if run.startswith(w, i)), None)
        if word is None:
            pending += run[i]
            i += 1
            continue
        if pending:
            tokens.append(Token(surface=pending, pos="動詞", pos_detail1="自立"))
            pending = ""
        pos, detail = FUNCTION_WORDS[word]
        tokens.append(Token(surface=word, pos=pos, pos_detail1=detail))
        i += len(word)
    if pending:
        tokens.append(Token(surface=pending, pos="動詞", pos_detail1="自立"))
    return tokens


def mock_tokenize(text: str) -> list[Token]:
    """Split text into script runs; every symbol is its own token, whitespace is dropped."""
    tokens: list[Token] = []
    for m in _RUN.finditer(text):
        kind = m.lastgroup
        surface = m.group()
        if kind == "space":
            continue
        if kind == "hira":
            tokens.extend(_split_hiragana(surface))
        elif kind == "symbol":
            tokens.append(Token(surface=surface, pos="記号", pos_detail1=SYMBOL_DETAILS.get(surface, "一般")))
        else:
            tokens.append(Token(surface=surface, pos="名詞", pos_detail1="一般"))
    return tokens


class MockTokenizer(BaseTokenizer):
    """Script-run tokenizer tagging punctuation and a few particles with IPADIC tags."""

    def __init__(self) -> None:
        self._ready = False

    @property
    def strategy_name(self) -> str:
        return "mock"

    @property
    def ready(self) -> bool:
        return self._ready

    async def initialize(self) -> None:
        self._ready = True

    def query(self, text: str) -> list[Token]:
        if not text:
            return []
        return mock_tokenize(text)
