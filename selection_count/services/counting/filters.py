"""
Exclusion filters. Each is a pure (text, enabled, ...params) -> text transform
that removes or unwraps one markup construct; a disabled filter returns its
input unchanged. Unbalanced markup is left as-is.
"""

import re
from typing import Iterable

from selection_count.config.counting import patterns
from selection_count.services.counting.sections import remove_heading_sections


def remove_code_blocks(text: str, enabled: bool = True) -> str:
    """Remove fenced ``` and ~~~ blocks including their content."""
    if not enabled or not text:
        return text
    return patterns.CODE_BLOCK.sub("", text)


def remove_inline_code(text: str, enabled: bool = True) -> str:
    """Remove `inline code` spans; escaped backticks inside a span do not close it."""
    if not enabled or not text:
        return text
    return patterns.INLINE_CODE.sub("", text)


def _remove_paired(pattern: re.Pattern, text: str, remove_content: bool) -> str:
    return pattern.sub("" if remove_content else r"\1", text)


def remove_obsidian_comments(text: str, enabled: bool = True, remove_content: bool = True) -> str:
    """Remove %% comments %%, or only the %% markers when remove_content is False."""
    if not enabled or not text:
        return text
    return _remove_paired(patterns.OBSIDIAN_COMMENT, text, remove_content)


def remove_html_comments(text: str, enabled: bool = True, remove_content: bool = True) -> str:
    """Remove <!-- comments -->, or only the markers when remove_content is False."""
    if not enabled or not text:
        return text
    return _remove_paired(patterns.HTML_COMMENT, text, remove_content)


def unwrap_links(text: str, enabled: bool = True) -> str:
    """
    Keep only the visible part of links: [[Target|Alias]] -> Alias,
    [[Target]] -> Target, [text](url) -> text.
    """
    if not enabled or not text:
        return text
    text = patterns.WIKI_LINK_ALIAS.sub(r"\1", text)
    text = patterns.WIKI_LINK.sub(r"\1", text)
    return patterns.MARKDOWN_LINK.sub(r"\1", text)


def strip_heading_markers(text: str) -> str:
    """Strip leading # runs from ATX headings and drop Setext underlines."""
    text = patterns.ATX_HEADING_MARKER.sub(r"\1", text)
    return patterns.SETEXT_UNDERLINE.sub(r"\1", text)


def remove_heading_lines(text: str) -> str:
    """Delete ATX heading lines and Setext heading/underline pairs."""
    text = patterns.ATX_HEADING_LINE.sub("", text)
    return patterns.SETEXT_HEADING_LINES.sub("", text)


def process_headings(
    text: str,
    enabled: bool = True,
    markers_only: bool = False,
    entire_lines: bool = False,
    sections: Iterable[str] = (),
) -> str:
    """
    Selective section removal first, then the global modes. Both global flags
    are applied in sequence when set; neither implies the other.
    """
    if not enabled or not text:
        return text
    sections = tuple(sections)
    if sections:
        text = remove_heading_sections(text, sections)
    if markers_only:
        text = strip_heading_markers(text)
    if entire_lines:
        text = remove_heading_lines(text)
    return text


def remove_phrases(text: str, phrases: Iterable[str], enabled: bool = True) -> str:
    """Remove each phrase as a literal, case-insensitive substring, in list order."""
    if not enabled or not text:
        return text
    for phrase in phrases:
        phrase = phrase.strip()
        if phrase:
            text = re.sub(re.escape(phrase), "", text, flags=re.IGNORECASE)
    return text


def parse_word_list(words: str) -> list[str]:
    """Split a comma-separated word list, dropping blanks."""
    return [w.strip() for w in words.split(",") if w.strip()]


def remove_words(text: str, words: str, enabled: bool = True) -> str:
    """Remove comma-separated words as whole words, case-insensitively."""
    if not enabled or not text:
        return text
    parsed = parse_word_list(words)
    if not parsed:
        return text
    alternatives = "|".join(re.escape(w) for w in sorted(parsed, key=len, reverse=True))
    return re.sub(rf"(?<!\w)(?:{alternatives})(?!\w)", "", text, flags=re.IGNORECASE)
