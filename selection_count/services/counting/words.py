"""Word tokenizer. Uses the `regex` library for Unicode properties and user patterns."""

import logging
from functools import lru_cache

import regex

from selection_count.config.counting.models import CountingConfig
from selection_count.config.counting.patterns import DEFAULT_WORD_REGEX, DOUBLE_QUOTES, EMOJI
from selection_count.config.logging import log_extra, null_logger

_FLAGS = regex.IGNORECASE | regex.UNICODE | regex.V0

_EMOJI_RE = regex.compile(EMOJI)
_DEFAULT_WORD_RE = regex.compile(DEFAULT_WORD_REGEX, _FLAGS)


@lru_cache(maxsize=64)
def _compile_user_pattern(pattern: str) -> regex.Pattern | None:
    try:
        return regex.compile(pattern, _FLAGS)
    except regex.error:
        return None


def get_word_pattern(config: CountingConfig, log: logging.Logger | None = None) -> regex.Pattern:
    """
    Return the custom pattern when advanced mode is on and it compiles,
    otherwise the default pattern. Never raises.
    """
    log = log or null_logger()
    if not config.enable_advanced_regex or not config.custom_word_regex:
        return _DEFAULT_WORD_RE
    compiled = _compile_user_pattern(config.custom_word_regex)
    if compiled is None:
        log.warning(
            "Invalid custom word pattern, falling back to default",
            **log_extra({"pattern": config.custom_word_regex}),
        )
        return _DEFAULT_WORD_RE
    return compiled


def strip_quotes(text: str) -> str:
    """Remove straight and curly double quotes. Apostrophes are kept for contractions."""
    return DOUBLE_QUOTES.sub("", text)


def strip_emojis(text: str) -> str:
    return _EMOJI_RE.sub("", text)


def count_words(
    text: str,
    config: CountingConfig,
    remove_emojis: bool = True,
    log: logging.Logger | None = None,
) -> int:
    """Count non-empty matches of the active word pattern in already-filtered text."""
    if not text:
        return 0
    text = strip_quotes(text)
    if remove_emojis:
        text = strip_emojis(text)
    pattern = get_word_pattern(config, log)
    return sum(1 for m in pattern.finditer(text) if m.group(0))
