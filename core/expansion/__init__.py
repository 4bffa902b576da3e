"""Vague input expansion into professional clause text."""

from core.expansion.input_expander import (
    apply_expansion_logic,
    expand_compensation,
    expand_deliverable_type,
    expand_exclusivity,
    expand_platforms,
    expand_timeline,
    expand_usage_rights,
    format_amount,
    sanitize_vague_input,
)

__all__ = [
    "apply_expansion_logic",
    "expand_compensation",
    "expand_deliverable_type",
    "expand_exclusivity",
    "expand_platforms",
    "expand_timeline",
    "expand_usage_rights",
    "format_amount",
    "sanitize_vague_input",
]
