"""Whole-form sanitization before validation and assembly.

Usage:
    from core.validation.form_sanitizer import sanitize_form

    clean = sanitize_form(raw_form)
"""

import logging

from core.contracts.types import DEFAULT_GOVERNING_LAW, ContractForm
from core.normalization.text_normalizer import capitalize_name, format_city_state, sanitize_text


logger = logging.getLogger("clausecraft.sanitizer")

# Proper names: sanitized then title-cased.
NAME_FIELDS = ("creator_name", "counterparty_name", "releasee_name")

# Descriptive free text: sanitized only.
TEXT_FIELDS = (
    "project_title",
    "project_description",
    "schedule_description",
    "platforms",
    "payment_schedule",
    "revenue_sources_text",
    "revenue_split_description",
    "deliverable_type",
    "allowed_uses_text",
    "license_duration_text",
    "description_of_appearance_or_content",
)


def resolve_governing_law(explicit: str | None, city_state: str | None) -> str:
    """Pick the governing law region.

    Precedence: the explicit value, then the state part of a "City, ST"
    location, then California.
    """
    if explicit and explicit.strip():
        return explicit.strip()

    if city_state:
        parts = city_state.split(",")
        if len(parts) > 1 and parts[1].strip():
            return parts[1].strip()

    return DEFAULT_GOVERNING_LAW


def sanitize_form(form: ContractForm) -> ContractForm:
    """Return a sanitized copy of the form.

    Names are sanitized and capitalized, the creator location is formatted
    as "City, ST", descriptive text is stripped of informal language and the
    governing law region is always resolved. All other fields pass through.
    Applying this twice gives the same form as applying it once.
    """
    updates: dict[str, str] = {}

    for name in NAME_FIELDS:
        updates[name] = capitalize_name(sanitize_text(getattr(form, name)))

    for name in TEXT_FIELDS:
        updates[name] = sanitize_text(getattr(form, name))

    city_state = format_city_state(form.creator_city_state)
    updates["creator_city_state"] = city_state
    updates["governing_law_region"] = resolve_governing_law(form.governing_law_region, city_state)

    logger.debug("Sanitized form for %s", form.contract_type)
    return form.model_copy(update=updates)
