"""
Exclusion chain as data: an ordered tuple of rules, each a (predicate, transform)
pair tagged with the identifier used for per-document overrides. Order matters;
later rules see the output of earlier ones.
"""

import logging
from dataclasses import dataclass, field
from typing import Callable

from selection_count.config.counting.models import CountingConfig
from selection_count.config.logging import log_extra, null_logger
from selection_count.services.counting import filters
from selection_count.services.counting.paths import remove_excluded_extensions, remove_paths

ALL_RULES_SENTINEL = "all"


@dataclass(frozen=True)
class FilterContext:
    """Everything a rule may read. Built once per count."""

    config: CountingConfig
    excluded_extensions: tuple[str, ...] = ()
    disabled_rules: frozenset[str] = frozenset()
    log: logging.Logger = field(default_factory=null_logger)


@dataclass(frozen=True)
class ExclusionRule:
    rule_id: str
    predicate: Callable[[FilterContext], bool]
    transform: Callable[[str, FilterContext], str]


def _headings_enabled(ctx: FilterContext) -> bool:
    c = ctx.config
    return c.exclude_headings and bool(
        c.excluded_heading_sections or c.exclude_heading_markers or c.exclude_heading_lines
    )


def _process_headings(text: str, ctx: FilterContext) -> str:
    c = ctx.config
    return filters.process_headings(
        text,
        markers_only=c.exclude_heading_markers,
        entire_lines=c.exclude_heading_lines,
        sections=c.excluded_heading_sections,
    )


EXCLUSION_CHAIN: tuple[ExclusionRule, ...] = (
    ExclusionRule(
        "exclude-code-blocks",
        lambda ctx: ctx.config.exclude_code and ctx.config.exclude_code_blocks,
        lambda text, ctx: filters.remove_code_blocks(text),
    ),
    ExclusionRule(
        "exclude-inline-code",
        lambda ctx: ctx.config.exclude_code and ctx.config.exclude_inline_code,
        lambda text, ctx: filters.remove_inline_code(text),
    ),
    ExclusionRule(
        "exclude-obsidian-comments",
        lambda ctx: ctx.config.exclude_comments and ctx.config.exclude_obsidian_comments,
        lambda text, ctx: filters.remove_obsidian_comments(
            text, remove_content=ctx.config.obsidian_comment_content
        ),
    ),
    ExclusionRule(
        "exclude-html-comments",
        lambda ctx: ctx.config.exclude_comments and ctx.config.exclude_html_comments,
        lambda text, ctx: filters.remove_html_comments(
            text, remove_content=ctx.config.html_comment_content
        ),
    ),
    ExclusionRule(
        "exclude-links",
        lambda ctx: ctx.config.unwrap_links,
        lambda text, ctx: filters.unwrap_links(text),
    ),
    ExclusionRule("exclude-headings", _headings_enabled, _process_headings),
    ExclusionRule(
        "exclude-phrases",
        lambda ctx: ctx.config.exclude_words_phrases and bool(ctx.config.excluded_phrases),
        lambda text, ctx: filters.remove_phrases(text, ctx.config.excluded_phrases),
    ),
    ExclusionRule(
        "exclude-words",
        lambda ctx: ctx.config.exclude_words_phrases and bool(ctx.config.excluded_words.strip()),
        lambda text, ctx: filters.remove_words(text, ctx.config.excluded_words),
    ),
)

WORD_COUNT_RULES: tuple[ExclusionRule, ...] = (
    ExclusionRule(
        "exclude-paths",
        lambda ctx: ctx.config.exclude_paths,
        lambda text, ctx: remove_paths(text, ctx.config, ctx.log),
    ),
    ExclusionRule(
        "exclude-extensions",
        lambda ctx: bool(ctx.excluded_extensions),
        lambda text, ctx: remove_excluded_extensions(text, ctx.excluded_extensions),
    ),
)

WORD_COUNT_CHAIN: tuple[ExclusionRule, ...] = EXCLUSION_CHAIN + WORD_COUNT_RULES

RULE_IDS: tuple[str, ...] = tuple(r.rule_id for r in WORD_COUNT_CHAIN)


def apply_rules(text: str, rules: tuple[ExclusionRule, ...], ctx: FilterContext) -> str:
    """Run each rule whose predicate holds and whose id is not disabled for this document."""
    for rule in rules:
        if rule.rule_id in ctx.disabled_rules:
            ctx.log.debug("Rule disabled for document", **log_extra({"rule_id": rule.rule_id}))
            continue
        if not rule.predicate(ctx):
            continue
        text = rule.transform(text, ctx)
        ctx.log.debug("Rule applied", **log_extra({"rule_id": rule.rule_id, "length": len(text)}))
    return text


def normalize_rule_ids(rule_ids) -> frozenset[str]:
    """
    Expand a declared override list to known rule ids. The sentinel "all"
    disables every rule; unknown ids are dropped.
    """
    if not rule_ids:
        return frozenset()
    if isinstance(rule_ids, str):
        rule_ids = rule_ids.split(",")
    requested = {str(r).strip().lower() for r in rule_ids if str(r).strip()}
    if ALL_RULES_SENTINEL in requested:
        return frozenset(RULE_IDS)
    return frozenset(r for r in requested if r in RULE_IDS)
