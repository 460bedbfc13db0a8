"""Counting configuration models. Read-only; no business logic."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from selection_count.config.counting.patterns import DEFAULT_EXCLUSION_LIST, DEFAULT_WORD_REGEX

CharacterCountMode = Literal["all", "no-spaces", "letters-only"]


class CountingConfig(BaseModel):
    """
    Toggles and parameters for the exclusion chain and tokenizers.
    Detail toggles only take effect when their group's master toggle is on.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    # Paths (word count only)
    exclude_paths: bool = Field(default=False, description="Master toggle for path exclusion")
    exclude_windows_paths: bool = Field(default=False, description="C:\\ and %VAR%\\ paths")
    exclude_unix_paths: bool = Field(default=False, description="/usr/local style paths")
    exclude_unc_paths: bool = Field(default=False, description="\\\\server\\share paths")
    exclude_environment_paths: bool = Field(default=False, description="%PATH% and $HOME references")

    # Code
    exclude_code: bool = Field(default=False, description="Master toggle for code exclusion")
    exclude_code_blocks: bool = Field(default=True)
    exclude_inline_code: bool = Field(default=True)

    # Comments
    exclude_comments: bool = Field(default=False, description="Master toggle for comment exclusion")
    exclude_obsidian_comments: bool = Field(default=True, description="%% ... %% comments")
    obsidian_comment_content: bool = Field(
        default=True, description="Remove content with the markers; False strips markers only"
    )
    exclude_html_comments: bool = Field(default=True, description="<!-- ... --> comments")
    html_comment_content: bool = Field(
        default=True, description="Remove content with the markers; False strips markers only"
    )

    # Links
    unwrap_links: bool = Field(default=True, description="Keep only the visible text of links")

    # Headings
    exclude_headings: bool = Field(default=False, description="Master toggle for heading exclusion")
    exclude_heading_markers: bool = Field(default=False, description="Strip # runs and Setext underlines")
    exclude_heading_lines: bool = Field(default=False, description="Delete heading lines entirely")
    excluded_heading_sections: tuple[str, ...] = Field(
        default=(), description="Full heading lines whose sections are removed"
    )

    # Words and phrases
    exclude_words_phrases: bool = Field(default=False, description="Master toggle for word/phrase exclusion")
    excluded_words: str = Field(default="", description="Comma-separated whole words")
    excluded_phrases: tuple[str, ...] = Field(default=(), description="Literal phrases")

    # Extensions (word count only)
    exclusion_list: str = Field(default=DEFAULT_EXCLUSION_LIST, description="Comma-separated extensions")

    # Tokenizers
    character_count_mode: CharacterCountMode = Field(default="all")
    enable_advanced_regex: bool = Field(default=False)
    custom_word_regex: str = Field(default=DEFAULT_WORD_REGEX)
    strip_emojis: bool = Field(default=True)

    enable_debug_logging: bool = Field(default=False)
