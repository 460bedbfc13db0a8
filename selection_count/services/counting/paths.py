"""
Path and extension filtering for the word count. Paths may span several
whitespace-separated segments ("C:\\Program Files\\app.exe"), so segments are
buffered while the growing candidate still reads as a path.
"""

import logging
from typing import Iterable

from selection_count.config.counting import patterns
from selection_count.config.counting.models import CountingConfig
from selection_count.config.logging import log_extra, null_logger


def is_decimal_number(token: str) -> bool:
    return bool(patterns.DECIMAL_NUMBER.match(token))


def looks_like_path(
    candidate: str,
    config: CountingConfig,
    log: logging.Logger | None = None,
) -> bool:
    """
    Classify candidate as a path. Checks run in order and the first kind that
    matches decides the answer through its own toggle; later kinds are not tried.
    """
    log = log or null_logger()
    if not config.exclude_paths or not candidate:
        return False

    if patterns.WINDOWS_DRIVE_PATH.match(candidate):
        log.debug("Windows drive path", **log_extra({"candidate": candidate, "excluded": config.exclude_windows_paths}))
        return config.exclude_windows_paths

    if patterns.ENVIRONMENT_VARIABLE.match(candidate):
        if patterns.WINDOWS_ENVIRONMENT_PATH.match(candidate):
            log.debug(
                "Windows path with environment variable",
                **log_extra({"candidate": candidate, "excluded": config.exclude_windows_paths}),
            )
            return config.exclude_windows_paths
        log.debug(
            "Environment variable",
            **log_extra({"candidate": candidate, "excluded": config.exclude_environment_paths}),
        )
        return config.exclude_environment_paths

    if patterns.UNC_PATH.match(candidate):
        log.debug("UNC path", **log_extra({"candidate": candidate, "excluded": config.exclude_unc_paths}))
        return config.exclude_unc_paths

    if patterns.FILE_PROTOCOL.match(candidate):
        log.debug("file:/// protocol", **log_extra({"candidate": candidate}))
        return True

    if patterns.UNIX_PATH.match(candidate):
        log.debug("Unix path", **log_extra({"candidate": candidate, "excluded": config.exclude_unix_paths}))
        return config.exclude_unix_paths

    return False


def normalize_extensions(extensions: Iterable[str]) -> tuple[str, ...]:
    """Lower-case extensions and drop leading dots and blanks."""
    out: list[str] = []
    for ext in extensions:
        ext = ext.strip().lower().lstrip(".")
        if ext:
            out.append(ext)
    return tuple(out)


def parse_extension_list(exclusion_list: str) -> list[str]:
    """Split a comma-separated extension list into normalized '.ext' entries."""
    return [f".{ext}" for ext in normalize_extensions(exclusion_list.split(","))]


def has_excluded_extension(token: str, extensions: Iterable[str]) -> bool:
    """True when the token's file name ends in one of extensions. Decimals never do."""
    exts = normalize_extensions(extensions)
    if not exts or not token:
        return False
    token = token.rstrip(patterns.TOKEN_TRAILING_PUNCTUATION)
    if is_decimal_number(token):
        return False
    filename = patterns.PATH_SEPARATOR.split(token.lower())[-1]
    if "." not in filename:
        return False
    return any(filename.endswith(f".{ext}") for ext in exts)


def _rewrap(original: str, body: str) -> str:
    """Carry the original's leading/trailing whitespace over to body."""
    stripped = original.strip()
    if not stripped:
        return original
    lead = original[: len(original) - len(original.lstrip())]
    trail = original[len(original.rstrip()):]
    return f"{lead}{body}{trail}"


def strip_file_protocol(text: str, config: CountingConfig) -> str:
    """Replace file:/// URLs with a space when path exclusion is on."""
    if not config.exclude_paths or not text:
        return text
    return patterns.FILE_PROTOCOL_SPAN.sub(" ", text)


def remove_paths(text: str, config: CountingConfig, log: logging.Logger | None = None) -> str:
    """
    Drop path tokens, including paths that contain spaces. A path start opens a
    buffer that keeps taking segments while it still classifies as a path; on
    failure its words are flushed back and only those that are paths on their
    own are dropped. Decimal numbers are kept as-is. Surviving segments are
    re-joined with single spaces.
    """
    log = log or null_logger()
    if not config.exclude_paths or not text or not text.strip():
        return text
    text_without_urls = strip_file_protocol(text, config)

    segments: list[str] = []
    buffer = ""
    for segment in text_without_urls.split():
        if is_decimal_number(segment):
            segments.append(segment)
            continue
        if looks_like_path(segment, config, log):
            if buffer:
                log.debug("Excluding path", **log_extra({"path": buffer}))
            buffer = segment
        elif buffer:
            extended = f"{buffer} {segment}"
            if looks_like_path(extended, config, log):
                log.debug("Path continues", **log_extra({"segment": segment}))
                buffer = extended
            else:
                log.debug("Path continuation failed, reverting", **log_extra({"path": extended}))
                segments.extend(extended.split())
                buffer = ""
        else:
            segments.append(segment)

    if buffer:
        if looks_like_path(buffer, config, log):
            log.debug("Excluding final path", **log_extra({"path": buffer}))
        else:
            segments.extend(buffer.split())

    kept = [s for s in segments if is_decimal_number(s) or not looks_like_path(s, config, log)]
    return _rewrap(text, " ".join(kept))


def remove_excluded_extensions(text: str, extensions: Iterable[str]) -> str:
    """Drop whitespace-separated tokens whose file name has an excluded extension."""
    exts = normalize_extensions(extensions)
    if not exts or not text or not text.strip():
        return text
    kept = [t for t in text.split() if not has_excluded_extension(t, exts)]
    return _rewrap(text, " ".join(kept))
