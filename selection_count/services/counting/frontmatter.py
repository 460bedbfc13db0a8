"""Per-document rule overrides declared in YAML frontmatter under `cswc-disable`."""

import re
from typing import Any

import yaml

from selection_count.config.logging import get_logger
from selection_count.services.counting.rules import ALL_RULES_SENTINEL, RULE_IDS, normalize_rule_ids

logger = get_logger(__name__)

OVERRIDE_KEY = "cswc-disable"

_FRONTMATTER_RE = re.compile(r"\A\ufeff?---[ \t]*\r?\n(.*?)(?:\r?\n)?^---[ \t]*$", re.DOTALL | re.MULTILINE)


def parse_frontmatter(document: str) -> dict[str, Any]:
    """Return the leading YAML frontmatter as a dict; empty when absent or malformed."""
    if not document:
        return {}
    m = _FRONTMATTER_RE.match(document)
    if m is None:
        return {}
    try:
        data = yaml.safe_load(m.group(1))
    except yaml.YAMLError as e:
        logger.warning("Malformed frontmatter ignored", extra={"error": str(e)})
        return {}
    return data if isinstance(data, dict) else {}


def resolve_disabled_rules(document: str | None) -> frozenset[str]:
    """
    Map a document's declared overrides to rule ids. The value may be "all",
    a comma-separated string, or a list.
    """
    declared = parse_frontmatter(document or "").get(OVERRIDE_KEY)
    if not declared:
        return frozenset()
    if isinstance(declared, str):
        requested = [d.strip().lower() for d in declared.split(",") if d.strip()]
    elif isinstance(declared, list):
        requested = [str(d).strip().lower() for d in declared if str(d).strip()]
    else:
        logger.warning("Unsupported override value", extra={"value_type": type(declared).__name__})
        return frozenset()
    unknown = [r for r in requested if r != ALL_RULES_SENTINEL and r not in RULE_IDS]
    if unknown:
        logger.warning("Unknown rule ids in frontmatter", extra={"rule_ids": unknown})
    return normalize_rule_ids(requested)
