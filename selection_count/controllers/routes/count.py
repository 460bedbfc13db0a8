"""POST /count: word, character, and sentence counts for a selection."""

from fastapi import APIRouter, HTTPException
from pydantic import ValidationError

from selection_count.config.counting.static import resolve_counting_config
from selection_count.config.settings import get_settings
from selection_count.controllers.schema.count import CountRequest, CountResponse, RulesResponse
from selection_count.services.counting.counter import count_selected_text
from selection_count.services.counting.frontmatter import resolve_disabled_rules
from selection_count.services.counting.paths import parse_extension_list
from selection_count.services.counting.rules import RULE_IDS, normalize_rule_ids
from selection_count.utils.time import utc_now

router = APIRouter(prefix="/count", tags=["counting"])


@router.post("", response_model=CountResponse)
def count_text(body: CountRequest) -> CountResponse:
    """
    Count the selection with the requested (or configured) profile.
    Rule ids from the request and from the document's frontmatter are combined.
    """
    settings = get_settings()
    profile = body.profile or settings.counting_profile
    try:
        config = resolve_counting_config(profile, body.counting_config)
    except (ValueError, ValidationError) as e:
        raise HTTPException(status_code=400, detail=str(e)) from e

    if settings.enable_debug_logging and not config.enable_debug_logging:
        config = config.model_copy(update={"enable_debug_logging": True})

    extensions = (
        body.excluded_extensions
        if body.excluded_extensions is not None
        else parse_extension_list(config.exclusion_list)
    )
    strip_emojis = config.strip_emojis if body.strip_emojis is None else body.strip_emojis
    disabled = normalize_rule_ids(body.disabled_rules) | resolve_disabled_rules(body.document)

    result = count_selected_text(
        body.text,
        excluded_extensions=extensions,
        strip_emojis=strip_emojis,
        config=config,
        disabled_rule_ids=disabled,
    )
    return CountResponse(
        words=result.words,
        characters=result.characters,
        sentences=result.sentences,
        character_count_mode=config.character_count_mode,
        disabled_rules=[r for r in RULE_IDS if r in disabled],
        counted_at=utc_now(),
    )


@router.get("/rules", response_model=RulesResponse)
def list_rules() -> RulesResponse:
    """Rule ids accepted in disabled_rules and in frontmatter, in chain order."""
    return RulesResponse(rule_ids=list(RULE_IDS))
