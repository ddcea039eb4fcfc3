from __future__ import annotations

import logging

from pydantic import ValidationError

from app.schemas.capacity import CapacityRules
from db.store import RULES_FILE, JsonStore

_logger = logging.getLogger("uvicorn.error")


def _dump(rules: CapacityRules) -> dict:
    return rules.model_dump(mode="json", by_alias=True, exclude_none=True)


async def get_rules(store: JsonStore) -> CapacityRules:
    """Return the stored capacity rules for display and editing.

    Falls back to the defaults when nothing is stored yet, and also when the
    stored document no longer validates so the rules editor stays usable.
    """
    raw = await store.read_json(RULES_FILE, default=None)
    if raw is None:
        return CapacityRules.defaults()
    try:
        return CapacityRules.model_validate(raw)
    except ValidationError as exc:
        _logger.warning(
            "Stored capacity rules in %s are invalid, using defaults: %s",
            store.path_for(RULES_FILE),
            exc.errors(include_url=False, include_context=False, include_input=False),
        )
        return CapacityRules.defaults()


async def load_rules_strict(store: JsonStore) -> CapacityRules:
    """Return the stored rules for computation.

    Missing rules mean defaults. A malformed stored document raises
    ``ValidationError`` instead of silently forecasting with defaults.
    """
    raw = await store.read_json(RULES_FILE, default=None)
    if raw is None:
        return CapacityRules.defaults()
    return CapacityRules.model_validate(raw)


async def replace_rules(store: JsonStore, rules: CapacityRules) -> CapacityRules:
    """Replace the stored rules document in full and return it."""
    await store.write_json(RULES_FILE, _dump(rules))
    _logger.info(
        "Capacity rules replaced: %d overrides, %d exceptions",
        len(rules.staff_overrides),
        len(rules.exceptions),
    )
    return rules


async def ensure_rules_file(store: JsonStore) -> bool:
    return await store.ensure_file(RULES_FILE, _dump(CapacityRules.defaults()))
