"""Request/response schemas for POST /count and GET /count/rules."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field


class CountRequest(BaseModel):
    """POST /count request body. Profile from static.json unless named; overrides merged on top."""

    text: str = Field(default="", description="Selected text to count")
    profile: str | None = Field(default=None, description="Counting profile name, or 'active'")
    counting_config: dict[str, Any] | None = Field(
        default=None,
        description="Optional overrides for toggles, heading sections, word lists, etc.",
    )
    excluded_extensions: list[str] | None = Field(
        default=None,
        description="Extensions to drop from the word count; defaults to the profile's exclusion_list",
    )
    strip_emojis: bool | None = Field(default=None, description="Defaults to the profile's strip_emojis")
    disabled_rules: list[str] = Field(default_factory=list, description="Rule ids to skip, or ['all']")
    document: str | None = Field(
        default=None,
        description="Full note content; its frontmatter `cswc-disable` adds to disabled_rules",
    )


class CountResponse(BaseModel):
    """POST /count response body."""

    words: int = Field(..., ge=0)
    characters: int = Field(..., ge=0)
    sentences: int = Field(..., ge=0)
    character_count_mode: str = Field(..., description="all|no-spaces|letters-only")
    disabled_rules: list[str] = Field(default_factory=list, description="Rule ids skipped for this count")
    counted_at: datetime


class RulesResponse(BaseModel):
    """GET /count/rules response body, in chain order."""

    rule_ids: list[str] = Field(default_factory=list)
