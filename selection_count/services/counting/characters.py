"""Character counting modes."""

from typing import Callable

from selection_count.config.counting.models import CharacterCountMode
from selection_count.config.counting.patterns import ASCII_LETTER, WHITESPACE_RUN


def count_all(text: str) -> int:
    return len(text)


def count_no_spaces(text: str) -> int:
    return len(WHITESPACE_RUN.sub("", text))


def count_letters(text: str) -> int:
    # ASCII only; accented and non-Latin letters are not counted.
    return len(ASCII_LETTER.findall(text))


MODE_REGISTRY: dict[str, Callable[[str], int]] = {
    "all": count_all,
    "no-spaces": count_no_spaces,
    "letters-only": count_letters,
}


def count_characters(text: str, mode: CharacterCountMode = "all") -> int:
    """Count characters of filtered text in the given mode. Unknown modes count everything."""
    if not text:
        return 0
    counter = MODE_REGISTRY.get(mode, count_all)
    return counter(text)
