"""Contract Form Validation.

Checks a (sanitized) contract form for the fields each contract family
needs and flags informal language in the headline fields. Validation never
raises and never mutates the form: problems come back as data in a
``ValidationResult``. Errors block export; warnings are advisory.

Usage:
    from core.validation.validator import validate_contract

    result = validate_contract(form, form.contract_type)
    if not result.valid:
        for error in result.errors:
            print(error)
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Callable

from core.contracts.types import ContractForm, ContractType, as_contract_type
from core.normalization.text_normalizer import has_unprofessional_language, is_empty


logger = logging.getLogger("clausecraft.validator")


@dataclass
class ValidationResult:
    """Outcome of validating one form against one contract type."""
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    @property
    def valid(self) -> bool:
        return not self.errors

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "valid": self.valid,
            "errors": list(self.errors),
            "warnings": list(self.warnings),
        }


# Form attribute -> label used in the informal-language warning.
PROFESSIONALISM_FIELDS: list[tuple[str, str]] = [
    ("creator_name", "Creator name"),
    ("counterparty_name", "Counterparty name"),
    ("project_title", "Project title"),
    ("project_description", "Project description"),
    ("schedule_description", "Schedule description"),
]


def _validate_revenue_share(form: ContractForm) -> list[str]:
    errors = []
    if is_empty(form.revenue_sources_text):
        errors.append("Revenue sources must be specified")
    if is_empty(form.revenue_split_description):
        errors.append("Revenue split details must be specified")
    if is_empty(form.payment_schedule):
        errors.append("Payment schedule must be specified")
    if is_empty(form.end_date_or_ongoing):
        errors.append("Contract term/duration must be specified")
    if is_empty(form.project_description) and is_empty(form.schedule_description):
        errors.append("Roles and responsibilities must be defined")
    return errors


def _validate_brand_deal(form: ContractForm) -> list[str]:
    errors = []
    if not form.deliverable_count or form.deliverable_count <= 0:
        errors.append("Deliverable count must be specified")
    if is_empty(form.deliverable_type):
        errors.append("Deliverable type must be specified")
    if is_empty(form.platforms):
        errors.append("Platforms must be specified")
    if is_empty(form.payment_schedule):
        errors.append("Payment schedule must be specified")
    if is_empty(form.license_duration_text):
        errors.append("Usage duration must be specified")
    return errors


def _validate_service_provider(form: ContractForm) -> list[str]:
    errors = []
    if is_empty(form.deliverable_type):
        errors.append("Deliverable type must be specified")
    # UNLIMITED_REVISIONS is internal and never comes from the wizard.
    if form.included_revisions is None or form.included_revisions < 0:
        errors.append("Revision count must be specified")
    if is_empty(form.fee_type):
        errors.append("Fee type must be specified")
    if not form.fee_amount or form.fee_amount <= 0:
        errors.append("Fee amount must be specified")
    return errors


def _validate_nda(form: ContractForm) -> list[str]:
    errors = []
    if is_empty(form.project_description):
        errors.append("Definition of confidential information must be specified")
    if is_empty(form.end_date_or_ongoing):
        errors.append("NDA duration must be specified")
    return errors


def _validate_release(form: ContractForm) -> list[str]:
    errors = []
    if is_empty(form.releasee_name) and is_empty(form.description_of_appearance_or_content):
        errors.append("Identification of person/property/content must be specified")
    if is_empty(form.allowed_uses_text):
        errors.append("Rights granted must be specified")
    return errors


ValidationRule = Callable[[ContractForm], list[str]]

# Contract types without an entry get the base checks only.
VALIDATION_RULES: dict[ContractType, ValidationRule] = {
    ContractType.REVENUE_SHARE_PROJECT: _validate_revenue_share,
    ContractType.BRAND_SPONSORSHIP: _validate_brand_deal,
    ContractType.UGC_PRODUCTION: _validate_brand_deal,
    ContractType.WHITELISTING_RIGHTS: _validate_brand_deal,
    ContractType.SERVICE_EDITOR: _validate_service_provider,
    ContractType.SERVICE_THUMBNAIL_DESIGNER: _validate_service_provider,
    ContractType.SERVICE_CLIPPER: _validate_service_provider,
    ContractType.SERVICE_CHANNEL_MANAGER: _validate_service_provider,
    ContractType.NDA_ONE_WAY: _validate_nda,
    ContractType.NDA_MUTUAL: _validate_nda,
    ContractType.MODEL_RELEASE: _validate_release,
    ContractType.GUEST_RELEASE: _validate_release,
    ContractType.LOCATION_RELEASE: _validate_release,
    ContractType.CONTRIBUTOR_CONTENT_RELEASE: _validate_release,
}


def professionalism_warnings(form: ContractForm) -> list[str]:
    """One warning per headline field containing emoji, slang or informal words."""
    return [
        f"{label} contains informal language. Please use professional terms."
        for attribute, label in PROFESSIONALISM_FIELDS
        if has_unprofessional_language(getattr(form, attribute))
    ]


def validate_contract(form: ContractForm, contract_type: str | None = None) -> ValidationResult:
    """Validate a form for the given contract type.

    Args:
        form: The contract form, normally already passed through
            ``sanitize_form``.
        contract_type: Type whose rule group applies. Defaults to the form's
            own ``contract_type``.

    Returns:
        ValidationResult with base errors, rule-group errors and
        informal-language warnings.
    """
    result = ValidationResult(warnings=professionalism_warnings(form))

    if is_empty(form.creator_name):
        result.errors.append("Creator name is required")
    if is_empty(form.counterparty_name):
        result.errors.append("Counterparty name is required")

    resolved = as_contract_type(contract_type if contract_type is not None else form.contract_type)
    rule = VALIDATION_RULES.get(resolved) if resolved else None
    if rule:
        result.errors.extend(rule(form))

    logger.debug(
        "Validated %s: %d errors, %d warnings",
        resolved.value if resolved else contract_type,
        len(result.errors),
        len(result.warnings),
    )
    return result
