"""Tests for path detection and extension filtering (word count only)."""

import pytest

from selection_count.config.counting.models import CountingConfig
from selection_count.services.counting import paths
from selection_count.services.counting.paths import (
    has_excluded_extension,
    looks_like_path,
    parse_extension_list,
    remove_excluded_extensions,
    remove_paths,
)


# ── looks_like_path ────────────────────────────────────────────


class TestLooksLikePath:
    @pytest.mark.parametrize(
        "candidate",
        [
            "C:\\Users\\me",
            "d:/projects",
            "%APPDATA%\\Roaming",
            "%PATH%",
            "$HOME",
            "\\\\server\\share",
            "file:///home/me/doc.txt",
            "/usr/local/bin",
        ],
    )
    def test_recognized_paths(self, path_config, candidate):
        assert looks_like_path(candidate, path_config) is True

    @pytest.mark.parametrize("candidate", ["hello", "//host/x", "$5", "a/b", ""])
    def test_not_paths(self, path_config, candidate):
        assert looks_like_path(candidate, path_config) is False

    def test_master_toggle_off_makes_sub_toggles_inert(self):
        config = CountingConfig(exclude_paths=False, exclude_windows_paths=True)
        assert looks_like_path("C:\\Users", config) is False

    def test_sub_toggle_off(self):
        config = CountingConfig(exclude_paths=True, exclude_windows_paths=False)
        assert looks_like_path("C:\\Users", config) is False

    def test_env_path_with_separator_uses_windows_toggle(self):
        config = CountingConfig(exclude_paths=True, exclude_environment_paths=True)
        assert looks_like_path("%APPDATA%\\Roaming", config) is False
        assert looks_like_path("%APPDATA%", config) is True

    def test_file_protocol_needs_only_master_toggle(self):
        config = CountingConfig(exclude_paths=True)
        assert looks_like_path("file:///tmp/x", config) is True

    def test_first_matching_kind_decides(self):
        # A drive path is never retried as a Unix path.
        config = CountingConfig(exclude_paths=True, exclude_unix_paths=True)
        assert looks_like_path("C:/x", config) is False


# ── remove_paths ───────────────────────────────────────────────


class TestRemovePaths:
    def test_single_token_path_at_end(self, path_config):
        assert remove_paths("See C:\\Users\\me\\file.txt", path_config) == "See"

    def test_path_with_spaces(self, path_config):
        assert remove_paths("Open C:\\Program Files\\App\\app.exe", path_config) == "Open"

    def test_path_at_end_of_input(self, path_config):
        assert remove_paths("Open C:\\Program Files\\App", path_config) == "Open"

    def test_words_after_a_path_join_the_buffer(self, path_config):
        # The buffer keeps growing while it still classifies as a path.
        assert remove_paths("Copy C:\\Users\\me then restart", path_config).strip() == "Copy"

    def test_failed_continuation_flushes_words(self, path_config, monkeypatch):
        def classify(candidate, config, log=None):
            return candidate.startswith("/") and not candidate.endswith(" stop")

        monkeypatch.setattr(paths, "looks_like_path", classify)
        # "/one two stop" fails, so its words come back and only "/one" is dropped.
        assert remove_paths("a /one two stop /three", path_config) == "a two stop"

    def test_consecutive_paths(self, path_config):
        assert remove_paths("a /usr/bin /etc/hosts b", path_config) == "a"

    def test_decimal_preserved(self, path_config):
        assert remove_paths("Pi is 3.14 /usr/bin", path_config) == "Pi is 3.14"

    def test_decimal_after_path_kept(self, path_config):
        assert remove_paths("/usr/bin 2.5 x", path_config) == "2.5"

    def test_environment_variable(self, path_config):
        assert remove_paths("echo $HOME", path_config) == "echo"

    def test_unc_path(self, path_config):
        assert remove_paths("on \\\\nas\\media share", path_config) == "on"

    def test_file_protocol_stripped(self):
        config = CountingConfig(exclude_paths=True)
        assert remove_paths("link file:///home/me/doc here", config) == "link here"

    def test_surrounding_whitespace_kept(self, path_config):
        assert remove_paths("  a b /usr/bin  ", path_config) == "  a b  "

    def test_master_off_returns_input(self):
        text = "see /usr/bin"
        assert remove_paths(text, CountingConfig()) == text

    def test_disabled_kind_kept(self):
        config = CountingConfig(exclude_paths=True, exclude_windows_paths=True)
        assert remove_paths("x /usr/bin y C:\\a", config) == "x /usr/bin y"


# ── Extensions ─────────────────────────────────────────────────


class TestExtensions:
    def test_listed_extension_excluded(self):
        assert has_excluded_extension("report.pdf", [".pdf"]) is True

    def test_unlisted_extension_kept(self):
        assert has_excluded_extension("report.pdf", [".png"]) is False

    def test_decimal_never_excluded(self):
        assert has_excluded_extension("3.14", ["14", ".14"]) is False

    def test_case_insensitive_and_path_aware(self):
        assert has_excluded_extension("C:\\docs\\Report.PDF", ["pdf"]) is True

    def test_trailing_punctuation_ignored(self):
        assert has_excluded_extension("report.pdf.", [".pdf"]) is True

    def test_no_dot_in_filename(self):
        assert has_excluded_extension("docs.d/readme", [".d"]) is False

    def test_parse_extension_list(self):
        assert parse_extension_list(" .jpg, PNG ,, .Md") == [".jpg", ".png", ".md"]

    def test_remove_excluded_extensions(self):
        assert remove_excluded_extensions("see report.pdf and 3.14", [".pdf"]) == "see and 3.14"

    def test_remove_without_extensions_returns_input(self):
        assert remove_excluded_extensions("a.pdf", []) == "a.pdf"
