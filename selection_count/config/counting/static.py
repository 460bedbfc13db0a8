"""Static counting config loader. Read-only; no business logic."""

import json
from pathlib import Path
from typing import Any

from selection_count.config.counting.models import CountingConfig

_config_dir = Path(__file__).resolve().parent
_config_path = _config_dir / "static.json"

_cached: dict[str, CountingConfig] | None = None
_active_profile: str | None = None


def _load_raw_data() -> dict[str, Any]:
    """Load raw JSON; used to read both profiles and active."""
    raw = _config_path.read_text(encoding="utf-8")
    return json.loads(raw)


def load_counting_profiles() -> dict[str, CountingConfig]:
    """Load counting profiles from static.json. Keys are profile names."""
    global _cached
    if _cached is not None:
        return _cached
    data = _load_raw_data()
    profiles = data.get("profiles", {})
    _cached = {k: CountingConfig.model_validate(v) for k, v in profiles.items()}
    return _cached


def get_counting_config(profile_name: str) -> CountingConfig | None:
    """Return counting config for the given profile, or None if missing."""
    return load_counting_profiles().get(profile_name)


def get_active_profile_name() -> str:
    """Return the profile name marked as active in static.json. Defaults to 'default' if missing."""
    global _active_profile
    if _active_profile is not None:
        return _active_profile
    data = _load_raw_data()
    _active_profile = data.get("active", "default")
    return _active_profile


def resolve_counting_config(
    profile_name: str,
    inline_config: dict[str, Any] | None = None,
) -> CountingConfig:
    """
    Resolve counting config by profile name and optional inline overrides.
    If profile_name is "active", use the profile marked as active in static.json.
    Inline overrides are merged over the profile and validated again.
    Raises ValueError if the profile is missing.
    """
    name = get_active_profile_name() if profile_name == "active" else profile_name
    base = get_counting_config(name)
    if base is None:
        raise ValueError(f"Unknown counting profile: {name!r}")
    if not inline_config:
        return base
    merged = {**base.model_dump(), **inline_config}
    return CountingConfig.model_validate(merged)


def reset_counting_profiles() -> None:
    """Drop cached profiles (useful for testing)."""
    global _cached, _active_profile
    _cached = None
    _active_profile = None
