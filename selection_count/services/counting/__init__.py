"""Counting pipeline: region overrides, exclusion chain, and tokenizers."""

from selection_count.services.counting.counter import CountResult, count_selected_text
from selection_count.services.counting.rules import RULE_IDS, ExclusionRule, FilterContext

__all__ = ["CountResult", "count_selected_text", "RULE_IDS", "ExclusionRule", "FilterContext"]
