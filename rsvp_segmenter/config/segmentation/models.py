"""Segmentation configuration models. Read-only; no business logic."""

import math
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

DEFAULT_MAX_SEGMENT_CHARS = 16
DEFAULT_MIN_JOIN_LENGTH = 4


def _coerce_number(value: Any) -> float | None:
    """Map any input to a float, None (missing), NaN (unusable), or a signed infinity (too large)."""
    if value is None:
        return None
    try:
        return float(value)
    except OverflowError:
        # float(int) overflows instead of saturating
        return math.inf if value > 0 else -math.inf
    except (TypeError, ValueError):
        return float("nan")


class PartialSegmentationSettings(BaseModel):
    """
    Caller-supplied segmentation parameters. Missing fields fall back to defaults;
    values are not range-checked here (the normalizer clamps them).
    """

    max_segment_chars: float | None = Field(
        default=None,
        validation_alias=AliasChoices("max_segment_chars", "maxSegmentChars"),
        description="Maximum chunk length (code points)",
    )
    min_join_length: float | None = Field(
        default=None,
        validation_alias=AliasChoices("min_join_length", "minJoinLength"),
        description="Minimum length to keep a chunk separate",
    )

    @field_validator("max_segment_chars", "min_join_length", mode="before")
    @classmethod
    def _lenient_number(cls, value: Any) -> float | None:
        return _coerce_number(value)

    def merged_over(self, base: "PartialSegmentationSettings") -> "PartialSegmentationSettings":
        """Return base with every field set on self taking precedence."""
        overrides = self.model_dump(exclude_none=True)
        return base.model_copy(update=overrides)


class SegmentationSettings(BaseModel):
    """Fully populated, clamped settings. Only the normalizer builds these."""

    model_config = ConfigDict(frozen=True)

    max_segment_chars: int = Field(default=DEFAULT_MAX_SEGMENT_CHARS, ge=6, le=32)
    min_join_length: int = Field(default=DEFAULT_MIN_JOIN_LENGTH, ge=1, le=31)
