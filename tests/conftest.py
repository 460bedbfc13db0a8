"""Shared fixtures for the counting tests."""

import sys
from pathlib import Path

import pytest

# Ensure project root is on sys.path
PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from selection_count.config.counting.models import CountingConfig
from selection_count.config.counting.static import reset_counting_profiles


@pytest.fixture
def strict_config() -> CountingConfig:
    """Every exclusion group and sub-toggle switched on."""
    return CountingConfig(
        exclude_paths=True,
        exclude_windows_paths=True,
        exclude_unix_paths=True,
        exclude_unc_paths=True,
        exclude_environment_paths=True,
        exclude_code=True,
        exclude_comments=True,
        exclude_headings=True,
        exclude_heading_markers=True,
        exclude_words_phrases=True,
        excluded_words="lorem",
        excluded_phrases=("dolor sit",),
    )


@pytest.fixture
def path_config() -> CountingConfig:
    return CountingConfig(
        exclude_paths=True,
        exclude_windows_paths=True,
        exclude_unix_paths=True,
        exclude_unc_paths=True,
        exclude_environment_paths=True,
    )


@pytest.fixture(autouse=True)
def _reset_profiles():
    reset_counting_profiles()
    yield
    reset_counting_profiles()
