"""Tests for counting profiles and config resolution."""

import pytest
from pydantic import ValidationError

from selection_count.config.counting.models import CountingConfig
from selection_count.config.counting.patterns import DEFAULT_WORD_REGEX
from selection_count.config.counting.static import (
    get_active_profile_name,
    load_counting_profiles,
    resolve_counting_config,
)


class TestProfiles:
    def test_default_profile_present(self):
        profiles = load_counting_profiles()
        assert "default" in profiles
        assert profiles["default"] == CountingConfig()

    def test_active_profile(self):
        assert get_active_profile_name() == "default"
        assert resolve_counting_config("active") == CountingConfig()

    def test_named_profile(self):
        config = resolve_counting_config("letters")
        assert config.character_count_mode == "letters-only"

    def test_unknown_profile(self):
        with pytest.raises(ValueError, match="Unknown counting profile"):
            resolve_counting_config("nope")


class TestInlineOverrides:
    def test_overrides_merge_over_profile(self):
        config = resolve_counting_config("markdown", {"exclude_paths": True})
        assert config.exclude_paths is True
        assert config.exclude_code is True

    def test_list_becomes_tuple(self):
        config = resolve_counting_config("default", {"excluded_heading_sections": ["# A"]})
        assert config.excluded_heading_sections == ("# A",)

    def test_invalid_mode(self):
        with pytest.raises(ValidationError):
            resolve_counting_config("default", {"character_count_mode": "bytes"})

    def test_unknown_field(self):
        with pytest.raises(ValidationError):
            resolve_counting_config("default", {"exclude_everything": True})


class TestCountingConfig:
    def test_frozen(self):
        config = CountingConfig()
        with pytest.raises(ValidationError):
            config.exclude_code = True

    def test_defaults(self):
        config = CountingConfig()
        assert config.custom_word_regex == DEFAULT_WORD_REGEX
        assert config.unwrap_links is True
        assert config.exclude_paths is False
        assert ".pdf" in config.exclusion_list
