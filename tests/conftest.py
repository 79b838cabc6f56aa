import sys
from pathlib import Path

import pytest

# Repo root = one level above tests/
REPO_ROOT = Path(__file__).resolve().parents[1]

# Ensure repo root is on sys.path so `import rsvp_segmenter` works without installing.
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from rsvp_segmenter.services.tokenizer.base import BaseTokenizer, Token  # noqa: E402


def noun(surface: str) -> Token:
    return Token(surface=surface, pos="名詞", pos_detail1="一般")


def period(surface: str = "。") -> Token:
    return Token(surface=surface, pos="記号", pos_detail1="句点")


class ScriptedTokenizer(BaseTokenizer):
    """Returns pre-built token lists keyed by paragraph text; unknown paragraphs yield []."""

    def __init__(self, script: dict[str, list[Token]] | None = None) -> None:
        self.script = script or {}
        self.initialized = False
        self.queries: list[str] = []

    @property
    def strategy_name(self) -> str:
        return "scripted"

    @property
    def ready(self) -> bool:
        return self.initialized

    async def initialize(self) -> None:
        self.initialized = True

    def query(self, text: str) -> list[Token]:
        self.queries.append(text)
        return list(self.script.get(text, []))


@pytest.fixture
def scripted_tokenizer():
    return ScriptedTokenizer()


@pytest.fixture
def client():
    from fastapi.testclient import TestClient

    from rsvp_segmenter.main import app
    from rsvp_segmenter.resources.tokenizer.client import set_tokenizer
    from rsvp_segmenter.services.tokenizer.strategies.mock_strategy import MockTokenizer

    set_tokenizer(MockTokenizer())
    with TestClient(app) as c:
        yield c
    set_tokenizer(None)
