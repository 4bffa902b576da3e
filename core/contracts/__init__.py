"""Contract form model and the static tables describing contract types."""

from core.contracts.types import (
    CATEGORY_TEMPLATES,
    CONTRACT_TITLES,
    UNLIMITED_REVISIONS,
    ContentOwner,
    ContractCategory,
    ContractForm,
    ContractTone,
    ContractType,
    FeeType,
    LicenseType,
    as_contract_type,
    category_for,
    title_for,
)

__all__ = [
    "CATEGORY_TEMPLATES",
    "CONTRACT_TITLES",
    "UNLIMITED_REVISIONS",
    "ContentOwner",
    "ContractCategory",
    "ContractForm",
    "ContractTone",
    "ContractType",
    "FeeType",
    "LicenseType",
    "as_contract_type",
    "category_for",
    "title_for",
]
