"""MeCab tokenizer strategy via fugashi over the IPADIC dictionary."""

import asyncio

import fugashi
import ipadic

from rsvp_segmenter.config.logging import get_logger
from rsvp_segmenter.services.tokenizer.base import BaseTokenizer, Token, TokenizerError

logger = get_logger(__name__)


def _feature_at(feature, index: int) -> str:
    if index >= len(feature):
        return ""
    value = feature[index]
    # IPADIC marks an empty field with "*"
    return "" if value in (None, "*") else str(value)


class MeCabTokenizer(BaseTokenizer):
    """
    IPADIC-tagged MeCab. The tagger is built once, off the event loop, on the first
    initialize(). Extra MeCab arguments are appended to the IPADIC dictionary arguments.
    """

    def __init__(self, extra_args: str = "") -> None:
        self._extra_args = extra_args.strip()
        self._tagger: fugashi.GenericTagger | None = None
        self._lock = asyncio.Lock()

    @property
    def strategy_name(self) -> str:
        return "mecab"

    @property
    def ready(self) -> bool:
        return self._tagger is not None

    def _build_tagger(self) -> fugashi.GenericTagger:
        args = ipadic.MECAB_ARGS
        if self._extra_args:
            args = f"{args} {self._extra_args}"
        return fugashi.GenericTagger(args)

    async def initialize(self) -> None:
        if self._tagger is not None:
            return
        async with self._lock:
            if self._tagger is not None:
                return
            try:
                self._tagger = await asyncio.to_thread(self._build_tagger)
            except RuntimeError as e:
                logger.error("MeCab tagger failed to initialize", extra={"error": str(e)})
                raise TokenizerError("MeCab tagger could not be initialized", cause=e) from e
            logger.info("MeCab tagger initialized", extra={"dictionary": "ipadic"})

    def query(self, text: str) -> list[Token]:
        if self._tagger is None:
            raise TokenizerError("MeCab tagger queried before initialize()")
        if not text:
            return []
        tokens: list[Token] = []
        for node in self._tagger(text):
            feature = node.feature
            tokens.append(
                Token(
                    surface=node.surface,
                    pos=_feature_at(feature, 0),
                    pos_detail1=_feature_at(feature, 1),
                    pos_detail2=_feature_at(feature, 2),
                    pos_detail3=_feature_at(feature, 3),
                )
            )
        return tokens

    def close(self) -> None:
        self._tagger = None
