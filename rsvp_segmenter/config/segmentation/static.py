"""Static segmentation profile loader. Read-only; no business logic."""

import json
from pathlib import Path
from typing import Any

from rsvp_segmenter.config.segmentation.models import PartialSegmentationSettings

_config_dir = Path(__file__).resolve().parent
_config_path = _config_dir / "static.json"

_cached: dict[str, PartialSegmentationSettings] | None = None
_active_profile: str | None = None


def _load_raw_data() -> dict:
    """Load raw JSON; used to read both profiles and active."""
    raw = _config_path.read_text(encoding="utf-8")
    return json.loads(raw)


def load_segmentation_profiles() -> dict[str, PartialSegmentationSettings]:
    """Load segmentation profiles from static.json. Keys are profile names."""
    global _cached
    if _cached is not None:
        return _cached
    data = _load_raw_data()
    profiles = data.get("profiles", {})
    _cached = {k: PartialSegmentationSettings.model_validate(v) for k, v in profiles.items()}
    return _cached


def get_segmentation_profile(profile_name: str) -> PartialSegmentationSettings | None:
    """Return the profile with the given name, or None if missing."""
    return load_segmentation_profiles().get(profile_name)


def get_active_profile_name() -> str:
    """Return the profile name marked as active in static.json. Defaults to 'default' if missing."""
    global _active_profile
    if _active_profile is not None:
        return _active_profile
    data = _load_raw_data()
    _active_profile = data.get("active", "default")
    return _active_profile


def resolve_segmentation_settings(
    profile_name: str = "active",
    inline_settings: PartialSegmentationSettings | dict[str, Any] | None = None,
) -> PartialSegmentationSettings:
    """
    Resolve partial settings from a profile plus inline overrides.
    "active" selects the profile marked active in static.json. Inline fields that are
    set win over the profile's. Raises ValueError for an unknown profile name.
    The result is still partial and unclamped; pass it through normalize_settings.
    """
    name = get_active_profile_name() if profile_name == "active" else profile_name
    profile = get_segmentation_profile(name)
    if profile is None:
        raise ValueError(f"Unknown segmentation profile: {profile_name!r}")
    if not inline_settings:
        return profile
    if isinstance(inline_settings, dict):
        inline_settings = PartialSegmentationSettings.model_validate(inline_settings)
    return inline_settings.merged_over(profile)
