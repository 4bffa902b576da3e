"""Contract Assembler.

Selects the builder for a form's contract type and returns the finished
agreement text: a title line, contiguously numbered sections and the legal
disclaimer. Unknown or empty contract types fall back to a short generic
agreement instead of raising.

Usage:
    from core.assembly.assembler import generate_contract

    text = generate_contract(sanitize_form(form))
"""

import logging
from typing import Callable

from core.assembly.builders import (
    build_affiliate,
    build_brand_deal,
    build_collaboration,
    build_content_license,
    build_giveaway,
    build_joint_venture,
    build_moderator,
    build_nda,
    build_release,
    build_revenue_share,
    build_service_provider,
    build_talent_management,
    build_whitelisting,
)
from core.assembly.document import ContractDocument, RoleLabels
from core.contracts.types import GENERIC_CONTRACT_TITLE, ContractForm, ContractType, as_contract_type


logger = logging.getLogger("clausecraft.assembler")

ContractBuilder = Callable[[ContractForm, ContractType], str]


CONTRACT_BUILDERS: dict[ContractType, ContractBuilder] = {
    # Brand
    ContractType.BRAND_SPONSORSHIP: build_brand_deal,
    ContractType.UGC_PRODUCTION: build_brand_deal,
    ContractType.CONTENT_LICENSE: build_content_license,
    ContractType.WHITELISTING_RIGHTS: build_whitelisting,
    ContractType.AFFILIATE_PROMO: build_affiliate,
    # Creator collaborations
    ContractType.COLLAB_SINGLE_PROJECT: build_collaboration,
    ContractType.CO_CREATOR_ONGOING: build_collaboration,
    ContractType.REVENUE_SHARE_PROJECT: build_revenue_share,
    # Services
    ContractType.SERVICE_EDITOR: build_service_provider,
    ContractType.SERVICE_THUMBNAIL_DESIGNER: build_service_provider,
    ContractType.SERVICE_CLIPPER: build_service_provider,
    ContractType.SERVICE_CHANNEL_MANAGER: build_service_provider,
    # Releases
    ContractType.MODEL_RELEASE: build_release,
    ContractType.GUEST_RELEASE: build_release,
    ContractType.LOCATION_RELEASE: build_release,
    ContractType.CONTRIBUTOR_CONTENT_RELEASE: build_release,
    # Business
    ContractType.TALENT_MANAGEMENT: build_talent_management,
    ContractType.NDA_ONE_WAY: build_nda,
    ContractType.NDA_MUTUAL: build_nda,
    ContractType.JOINT_PROJECT_JV: build_joint_venture,
    # Community
    ContractType.GIVEAWAY_TERMS: build_giveaway,
    ContractType.COMMUNITY_MODERATOR_AGREEMENT: build_moderator,
}


def build_generic(form: ContractForm) -> str:
    """Minimal three-section agreement used for unrecognized contract types."""
    labels = RoleLabels.resolve(form, "Creator", "Client")
    doc = ContractDocument(GENERIC_CONTRACT_TITLE)
    doc.add_section(
        "PARTIES",
        f'This agreement is made between {form.creator_name} ("{labels.creator}") and '
        f'{form.counterparty_name} ("{labels.counterparty}").',
    )
    doc.add_section("TERMS", "The parties agree to the terms as mutually discussed and agreed upon.")
    doc.add_section("GOVERNING LAW", f"This Agreement shall be governed by the laws of {labels.governing_law}.")
    return doc.render()


def generate_contract(form: ContractForm) -> str:
    """Assemble the full contract text for a sanitized form.

    Args:
        form: Form already passed through ``sanitize_form``.

    Returns:
        The agreement text, ending with the legal disclaimer.
    """
    contract_type = as_contract_type(form.contract_type)
    builder = CONTRACT_BUILDERS.get(contract_type) if contract_type else None

    if builder is None:
        logger.warning("No builder for contract type %r, using generic agreement", form.contract_type)
        return build_generic(form)

    logger.debug("Assembling %s with %s", contract_type.value, builder.__name__)
    return builder(form, contract_type)
