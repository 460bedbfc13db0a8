"""
Sentence counting. Splits on terminal punctuation, then drops candidates that
only look like sentence ends: abbreviations, decimals, file names and versions,
and fragments without letters.
"""

from selection_count.config.counting import patterns


def _strip_non_prose(text: str) -> str:
    """Remove code, heading lines, URLs, and drive paths so their periods do not count."""
    text = patterns.CODE_BLOCK.sub(" ", text)
    text = patterns.INLINE_CODE.sub(" ", text)
    text = patterns.ATX_HEADING_LINE.sub("", text)
    text = patterns.SENTENCE_URL.sub(" ", text)
    return patterns.SENTENCE_DRIVE_PATH.sub(" ", text)


def split_sentences(text: str) -> list[str]:
    """Split text after each run of terminal punctuation followed by whitespace or end."""
    segments: list[str] = []
    pos = 0
    for m in patterns.SENTENCE_BOUNDARY.finditer(text):
        segments.append(text[pos:m.end()])
        pos = m.end()
    segments.append(text[pos:])
    return [s.strip() for s in segments if s.strip()]


def is_false_sentence(segment: str) -> bool:
    """
    True when a candidate segment should not be counted as a sentence.

    Segments keep their boundary punctuation. A boundary needs whitespace or
    end of text after it, so "3.14" or "v1.2" inside a sentence never splits;
    the decimal and dotted-name checks catch a trailing unpunctuated fragment
    ending on one, while "The value is 3.14." stays a sentence.
    """
    if patterns.ABBREVIATION_TAIL.search(segment) or patterns.TLD_TAIL.search(segment):
        return True
    if patterns.DECIMAL_TAIL.search(segment):
        return True
    dotted = patterns.SHORT_DOTTED_TAIL.search(segment)
    if dotted and len(dotted.group(1)) < patterns.SHORT_DOTTED_MAX_LENGTH:
        return True
    return not patterns.ALPHABETIC.search(segment)


def count_sentences(text: str) -> int:
    if not text or not text.strip():
        return 0
    candidates = split_sentences(_strip_non_prose(text))
    return sum(1 for s in candidates if not is_false_sentence(s))
