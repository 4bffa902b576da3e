"""Form sanitization and per-contract-type validation."""

from core.validation.form_sanitizer import resolve_governing_law, sanitize_form
from core.validation.validator import (
    VALIDATION_RULES,
    ValidationResult,
    professionalism_warnings,
    validate_contract,
)

__all__ = [
    "VALIDATION_RULES",
    "ValidationResult",
    "professionalism_warnings",
    "resolve_governing_law",
    "sanitize_form",
    "validate_contract",
]
