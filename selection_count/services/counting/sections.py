"""Selective heading sections: drop an excluded heading and everything nested under it."""

from typing import Iterable

from selection_count.config.counting.models import CountingConfig
from selection_count.config.counting.patterns import ATX_HEADING


def _normalize_heading(heading: str) -> str:
    return heading.strip().lower()


def remove_heading_sections(text: str, sections: Iterable[str]) -> str:
    """
    Walk lines keeping a (skipping, skip_level) state. An excluded heading starts
    skipping at its level; a heading at the same or a shallower level ends the
    section and is itself kept unless excluded. Deeper headings and body lines
    inside the section are dropped.
    """
    excluded = {_normalize_heading(s) for s in sections if s and s.strip()}
    if not text or not excluded:
        return text

    kept: list[str] = []
    skipping = False
    skip_level = 0
    for line in text.split("\n"):
        m = ATX_HEADING.match(line)
        if m is None:
            if not skipping:
                kept.append(line)
            continue
        level = len(m.group(1))
        if _normalize_heading(line) in excluded:
            skipping = True
            skip_level = level
            continue
        if skipping:
            if level > skip_level:
                continue
            skipping = False
        kept.append(line)
    return "\n".join(kept)


def add_excluded_heading(config: CountingConfig, heading: str) -> CountingConfig:
    """
    Return a copy of config with heading appended to the excluded sections.
    Blank headings and case-insensitive duplicates leave config unchanged.
    """
    heading = heading.strip()
    if not heading:
        return config
    existing = {_normalize_heading(s) for s in config.excluded_heading_sections}
    if _normalize_heading(heading) in existing:
        return config
    return config.model_copy(
        update={"excluded_heading_sections": (*config.excluded_heading_sections, heading)}
    )
