"""
Counter: takes selected text + config and returns word, character, and sentence
counts. Pure and deterministic: override regions are split out, the exclusion
chain runs on the rest, and each tokenizer consumes the filtered text.
"""

import logging
from typing import Iterable, NamedTuple

from selection_count.config.counting.models import CountingConfig
from selection_count.config.logging import get_debug_logger, log_extra
from selection_count.services.counting.characters import count_characters
from selection_count.services.counting.paths import normalize_extensions
from selection_count.services.counting.regions import split_regions
from selection_count.services.counting.rules import (
    EXCLUSION_CHAIN,
    WORD_COUNT_CHAIN,
    FilterContext,
    apply_rules,
    normalize_rule_ids,
)
from selection_count.services.counting.sentences import count_sentences
from selection_count.services.counting.words import count_words


class CountResult(NamedTuple):
    words: int
    characters: int
    sentences: int


EMPTY_RESULT = CountResult(0, 0, 0)


def filter_text(text: str, ctx: FilterContext, for_words: bool = False) -> str:
    """Run the exclusion chain outside override regions. Word counting adds path/extension rules."""
    rules = WORD_COUNT_CHAIN if for_words else EXCLUSION_CHAIN
    return split_regions(text, lambda span: apply_rules(span, rules, ctx))


def build_context(
    config: CountingConfig,
    excluded_extensions: Iterable[str] = (),
    disabled_rule_ids: Iterable[str] = (),
    logger: logging.Logger | None = None,
) -> FilterContext:
    log = logger or get_debug_logger(__name__, config.enable_debug_logging)
    return FilterContext(
        config=config,
        excluded_extensions=normalize_extensions(excluded_extensions),
        disabled_rules=normalize_rule_ids(disabled_rule_ids),
        log=log,
    )


def count_selected_text(
    text: str,
    excluded_extensions: Iterable[str] = (),
    strip_emojis: bool = True,
    config: CountingConfig | None = None,
    disabled_rule_ids: Iterable[str] = (),
    logger: logging.Logger | None = None,
) -> CountResult:
    """
    Count words, characters, and sentences in text. Characters and sentences use
    the shared exclusion chain; words additionally drop paths and files with
    excluded extensions. Empty text short-circuits to zero counts.
    """
    if not text:
        return EMPTY_RESULT
    config = config or CountingConfig()
    ctx = build_context(config, excluded_extensions, disabled_rule_ids, logger)
    ctx.log.debug(
        "Counting selection",
        **log_extra({"length": len(text), "disabled_rules": sorted(ctx.disabled_rules)}),
    )

    filtered = filter_text(text, ctx)
    word_text = filter_text(text, ctx, for_words=True)

    result = CountResult(
        words=count_words(word_text, config, remove_emojis=strip_emojis, log=ctx.log),
        characters=count_characters(filtered, config.character_count_mode),
        sentences=count_sentences(filtered),
    )
    ctx.log.debug("Counted selection", **log_extra(result._asdict()))
    return result
