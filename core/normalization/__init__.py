"""Text normalization for free-text wizard input."""

from core.normalization.text_normalizer import (
    capitalize_name,
    clean_text,
    format_city_state,
    has_unprofessional_language,
    is_empty,
    sanitize_text,
    standardize_date,
)

__all__ = [
    "capitalize_name",
    "clean_text",
    "format_city_state",
    "has_unprofessional_language",
    "is_empty",
    "sanitize_text",
    "standardize_date",
]
