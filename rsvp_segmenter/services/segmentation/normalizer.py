"""Settings normalizer: clamp caller settings so the pipeline only sees in-range values."""

import math

from rsvp_segmenter.config.segmentation.models import (
    DEFAULT_MAX_SEGMENT_CHARS,
    DEFAULT_MIN_JOIN_LENGTH,
    PartialSegmentationSettings,
    SegmentationSettings,
)

MIN_MAX_SEGMENT_CHARS = 6
MAX_MAX_SEGMENT_CHARS = 32
MIN_SOFT_BREAK_THRESHOLD = 3


def _round_half_up(value: float) -> float:
    # Halves round away from zero on the positive side (2.5 -> 3), unlike round()
    if math.isnan(value) or math.isinf(value):
        return value
    return float(math.floor(value + 0.5))


def clamp(value: float, lower: float, upper: float) -> float:
    """Clamp value into [lower, upper]. NaN maps to lower."""
    if math.isnan(value):
        return lower
    return max(lower, min(upper, value))


def normalize_settings(
    settings: PartialSegmentationSettings | dict | None = None,
) -> SegmentationSettings:
    """
    Fill defaults, round, and clamp. Never raises: NaN and non-numeric values clamp
    to the lower bound, infinities to the nearest bound.
    """
    if settings is None:
        settings = PartialSegmentationSettings()
    elif isinstance(settings, dict):
        settings = PartialSegmentationSettings.model_validate(settings)

    raw_max = settings.max_segment_chars
    raw_min = settings.min_join_length
    if raw_max is None:
        raw_max = DEFAULT_MAX_SEGMENT_CHARS
    if raw_min is None:
        raw_min = DEFAULT_MIN_JOIN_LENGTH

    max_segment_chars = int(
        clamp(_round_half_up(raw_max), MIN_MAX_SEGMENT_CHARS, MAX_MAX_SEGMENT_CHARS)
    )
    min_join_length = int(clamp(_round_half_up(raw_min), 1, max(1, max_segment_chars - 1)))
    return SegmentationSettings(max_segment_chars=max_segment_chars, min_join_length=min_join_length)


def derive_soft_break_threshold(max_segment_chars: int) -> int:
    """Fill level at which a soft boundary may close a chunk: about a third of the maximum."""
    approx = _round_half_up(max_segment_chars / 3)
    upper = max(MIN_SOFT_BREAK_THRESHOLD, max_segment_chars - 2)
    return int(clamp(approx, MIN_SOFT_BREAK_THRESHOLD, upper))
