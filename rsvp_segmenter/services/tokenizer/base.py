"""Base tokenizer strategy and the token record it produces."""

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class Token:
    """
    One morpheme from the tokenizer. `surface` may carry surrounding whitespace;
    consumers trim it. Part-of-speech values follow the IPADIC tag set.
    """

    surface: str
    pos: str = ""
    pos_detail1: str = ""
    pos_detail2: str = ""
    pos_detail3: str = ""


class TokenizerError(Exception):
    """Raised when a tokenizer cannot be made ready (missing dictionary, bad arguments)."""

    def __init__(self, message: str, cause: Exception | None = None):
        super().__init__(message)
        self.cause = cause


class BaseTokenizer(ABC):
    """
    Abstract morphological tokenizer. `initialize` is awaited once before the first
    `query`; calling it again is a no-op. `query` never assumes a non-empty result.
    """

    @abstractmethod
    async def initialize(self) -> None:
        """Suspend until the tokenizer is ready to answer queries."""
        ...

    @abstractmethod
    def query(self, text: str) -> list[Token]:
        """Tokenize one paragraph. Returns tokens in text order; may be empty."""
        ...

    @property
    @abstractmethod
    def ready(self) -> bool:
        """True once initialize() has completed."""
        ...

    @property
    @abstractmethod
    def strategy_name(self) -> str:
        """Strategy identifier, e.g. 'mecab', 'mock'."""
        ...

    def close(self) -> None:
        """Release native resources. Default: nothing to release."""
        return None
