"""Shared tokenizer instance with one-time readiness wait and shutdown."""

from typing import Any

from rsvp_segmenter.config.logging import get_logger
from rsvp_segmenter.config.settings import get_settings
from rsvp_segmenter.services.tokenizer.base import BaseTokenizer, TokenizerError
from rsvp_segmenter.services.tokenizer.strategies import get_tokenizer_strategy

logger = get_logger(__name__)

_tokenizer: BaseTokenizer | None = None


def get_tokenizer() -> BaseTokenizer:
    """Return the shared tokenizer. Creates it on first use; does not initialize it."""
    global _tokenizer
    if _tokenizer is None:
        settings = get_settings()
        tokenizer = get_tokenizer_strategy(settings.tokenizer_strategy, settings.mecab_args)
        if tokenizer is None:
            raise TokenizerError(f"Unknown tokenizer strategy: {settings.tokenizer_strategy!r}")
        _tokenizer = tokenizer
        logger.info("Tokenizer created", extra={"strategy": tokenizer.strategy_name})
    return _tokenizer


def set_tokenizer(tokenizer: BaseTokenizer | None) -> None:
    """Replace the shared tokenizer (tests, alternative backends). None resets to lazy creation."""
    global _tokenizer
    _tokenizer = tokenizer


async def init_tokenizer() -> BaseTokenizer:
    """Create the shared tokenizer if needed and wait until it is ready."""
    tokenizer = get_tokenizer()
    await tokenizer.initialize()
    return tokenizer


def ping_tokenizer() -> dict[str, Any]:
    """Readiness of the shared tokenizer. Returns dict with 'ok' bool and optional 'error' string."""
    if _tokenizer is None:
        return {"ok": False, "error": "not_created"}
    if not _tokenizer.ready:
        return {"ok": False, "error": "not_ready"}
    return {"ok": True, "strategy": _tokenizer.strategy_name}


def close_tokenizer() -> None:
    """Release the shared tokenizer. Call on app shutdown."""
    global _tokenizer
    if _tokenizer is not None:
        _tokenizer.close()
        logger.info("Tokenizer closed", extra={"strategy": _tokenizer.strategy_name})
        _tokenizer = None
