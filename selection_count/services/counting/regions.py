"""Region overrides: text between cswc-disable / cswc-enable markers skips every filter."""

from typing import Callable

from selection_count.config.counting.patterns import REGION_MARKER


def split_regions(text: str, transform: Callable[[str], str]) -> str:
    """
    Apply transform to every span outside an override region and copy override
    spans verbatim. Markers are consumed. A disable marker only opens a region
    when none is open and an enable marker only closes an open one; redundant
    markers are dropped. A region still open at the end runs to the end of text.
    """
    if not text:
        return ""
    out: list[str] = []
    in_override = False
    pos = 0
    for m in REGION_MARKER.finditer(text):
        span = text[pos:m.start()]
        if span:
            out.append(span if in_override else transform(span))
        keyword = (m.group("html") or m.group("native")).lower()
        if keyword == "disable" and not in_override:
            in_override = True
        elif keyword == "enable" and in_override:
            in_override = False
        pos = m.end()
    tail = text[pos:]
    if tail:
        out.append(tail if in_override else transform(tail))
    return "".join(out)
