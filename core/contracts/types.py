"""Contract Form Types and Static Lookup Tables.

This module defines the central ``ContractForm`` record consumed by the
sanitizer, validator and assembler, together with the closed enumerations of
contract categories and contract types and the fixed tables that describe
them (category templates, document titles).

Usage:
    from core.contracts.types import ContractForm, ContractType, category_for

    form = ContractForm.model_validate({"contractType": "nda_mutual", "creatorName": "Ana"})
    category_for(form.contract_type)
    # -> ContractCategory.BUSINESS_OPS
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ContractCategory(str, Enum):
    """Top-level groupings shown in the first wizard step."""
    BRAND = "brand"
    CREATOR_COLLAB = "creator_collab"
    SERVICE_PROVIDER = "service_provider"
    RIGHTS_RELEASE = "rights_release"
    BUSINESS_OPS = "business_ops"
    COMMUNITY = "community"


class ContractType(str, Enum):
    """The fixed set of contract templates."""
    # brand
    BRAND_SPONSORSHIP = "brand_sponsorship"
    UGC_PRODUCTION = "ugc_production"
    CONTENT_LICENSE = "content_license"
    WHITELISTING_RIGHTS = "whitelisting_rights"
    AFFILIATE_PROMO = "affiliate_promo"
    # creator <-> creator
    COLLAB_SINGLE_PROJECT = "collab_single_project"
    CO_CREATOR_ONGOING = "co_creator_ongoing"
    REVENUE_SHARE_PROJECT = "revenue_share_project"
    # services
    SERVICE_EDITOR = "service_editor"
    SERVICE_THUMBNAIL_DESIGNER = "service_thumbnail_designer"
    SERVICE_CLIPPER = "service_clipper"
    SERVICE_CHANNEL_MANAGER = "service_channel_manager"
    # rights / releases
    MODEL_RELEASE = "model_release"
    GUEST_RELEASE = "guest_release"
    LOCATION_RELEASE = "location_release"
    CONTRIBUTOR_CONTENT_RELEASE = "contributor_content_release"
    # business / ops
    TALENT_MANAGEMENT = "talent_management"
    NDA_ONE_WAY = "nda_one_way"
    NDA_MUTUAL = "nda_mutual"
    JOINT_PROJECT_JV = "joint_project_jv"
    # community / audience
    GIVEAWAY_TERMS = "giveaway_terms"
    COMMUNITY_MODERATOR_AGREEMENT = "community_moderator_agreement"


class ContractTone(str, Enum):
    """Requested register of the generated text."""
    CASUAL = "casual"
    NEUTRAL = "neutral"
    FORMAL = "formal"


class FeeType(str, Enum):
    """How a fee amount is charged."""
    FLAT = "flat"
    PER_DELIVERABLE = "per_deliverable"
    HOURLY = "hourly"
    COMMISSION = "commission"


class ContentOwner(str, Enum):
    """Who owns the content produced under the agreement."""
    CREATOR = "creator"
    CLIENT = "client"
    JOINT = "joint"


class LicenseType(str, Enum):
    """Kind of license granted over the content."""
    EXCLUSIVE = "exclusive"
    NON_EXCLUSIVE = "non_exclusive"
    LIMITED = "limited"


# Internal sentinel for included_revisions; the wizard only offers values >= 0.
UNLIMITED_REVISIONS = -1

CONTRACT_TYPE_VALUES: frozenset[str] = frozenset(t.value for t in ContractType)


# Category -> label and selectable templates, in wizard order.
CATEGORY_TEMPLATES: dict[ContractCategory, dict] = {
    ContractCategory.BRAND: {
        "label": "Work with a brand",
        "templates": [
            (ContractType.BRAND_SPONSORSHIP, "Sponsored content / brand deal"),
            (ContractType.UGC_PRODUCTION, "UGC / brand-owned content production"),
            (ContractType.CONTENT_LICENSE, "Content licensing (existing content)"),
            (ContractType.WHITELISTING_RIGHTS, "Whitelisting / paid media rights"),
            (ContractType.AFFILIATE_PROMO, "Affiliate / performance-based promotion"),
        ],
    },
    ContractCategory.CREATOR_COLLAB: {
        "label": "Work with another creator",
        "templates": [
            (ContractType.COLLAB_SINGLE_PROJECT, "Single-project collaboration"),
            (ContractType.CO_CREATOR_ONGOING, "Ongoing co-creator / co-host agreement"),
            (ContractType.REVENUE_SHARE_PROJECT, "Revenue-share agreement for a project/channel"),
        ],
    },
    ContractCategory.SERVICE_PROVIDER: {
        "label": "Hire or manage a team member",
        "templates": [
            (ContractType.SERVICE_EDITOR, "Editor agreement"),
            (ContractType.SERVICE_THUMBNAIL_DESIGNER, "Thumbnail / graphic designer agreement"),
            (ContractType.SERVICE_CLIPPER, "Short-form clipper / repurposing agreement"),
            (ContractType.SERVICE_CHANNEL_MANAGER, "Channel manager / VA / social media manager agreement"),
        ],
    },
    ContractCategory.RIGHTS_RELEASE: {
        "label": "Releases & permissions",
        "templates": [
            (ContractType.MODEL_RELEASE, "Model / talent release"),
            (ContractType.GUEST_RELEASE, "Guest / interview release"),
            (ContractType.LOCATION_RELEASE, "Location release"),
            (ContractType.CONTRIBUTOR_CONTENT_RELEASE, "Contributor content release (fan/community submissions)"),
        ],
    },
    ContractCategory.BUSINESS_OPS: {
        "label": "Business & legal basics",
        "templates": [
            (ContractType.TALENT_MANAGEMENT, "Talent management / agent agreement"),
            (ContractType.NDA_ONE_WAY, "NDA (one-way)"),
            (ContractType.NDA_MUTUAL, "NDA (mutual)"),
            (ContractType.JOINT_PROJECT_JV, "Joint project / joint venture agreement"),
        ],
    },
    ContractCategory.COMMUNITY: {
        "label": "Audience & community",
        "templates": [
            (ContractType.GIVEAWAY_TERMS, "Giveaway / contest terms"),
            (ContractType.COMMUNITY_MODERATOR_AGREEMENT, "Community moderator / staff agreement"),
        ],
    },
}

# Document title line per contract type.
CONTRACT_TITLES: dict[ContractType, str] = {
    ContractType.BRAND_SPONSORSHIP: "BRAND SPONSORSHIP AGREEMENT",
    ContractType.UGC_PRODUCTION: "UGC PRODUCTION AGREEMENT",
    ContractType.CONTENT_LICENSE: "CONTENT LICENSING AGREEMENT",
    ContractType.WHITELISTING_RIGHTS: "WHITELISTING RIGHTS AGREEMENT",
    ContractType.AFFILIATE_PROMO: "AFFILIATE PROMOTION AGREEMENT",
    ContractType.COLLAB_SINGLE_PROJECT: "SINGLE PROJECT COLLABORATION AGREEMENT",
    ContractType.CO_CREATOR_ONGOING: "CO-CREATOR AGREEMENT",
    ContractType.REVENUE_SHARE_PROJECT: "REVENUE SHARE AGREEMENT",
    ContractType.SERVICE_EDITOR: "EDITOR SERVICE AGREEMENT",
    ContractType.SERVICE_THUMBNAIL_DESIGNER: "THUMBNAIL DESIGNER SERVICE AGREEMENT",
    ContractType.SERVICE_CLIPPER: "CLIPPER SERVICE AGREEMENT",
    ContractType.SERVICE_CHANNEL_MANAGER: "CHANNEL MANAGER SERVICE AGREEMENT",
    ContractType.MODEL_RELEASE: "MODEL RELEASE",
    ContractType.GUEST_RELEASE: "GUEST RELEASE",
    ContractType.LOCATION_RELEASE: "LOCATION RELEASE",
    ContractType.CONTRIBUTOR_CONTENT_RELEASE: "CONTRIBUTOR CONTENT RELEASE",
    ContractType.TALENT_MANAGEMENT: "TALENT MANAGEMENT AGREEMENT",
    ContractType.NDA_ONE_WAY: "NON-DISCLOSURE AGREEMENT",
    ContractType.NDA_MUTUAL: "MUTUAL NON-DISCLOSURE AGREEMENT",
    ContractType.JOINT_PROJECT_JV: "JOINT VENTURE AGREEMENT",
    ContractType.GIVEAWAY_TERMS: "GIVEAWAY TERMS AND CONDITIONS",
    ContractType.COMMUNITY_MODERATOR_AGREEMENT: "COMMUNITY MODERATOR AGREEMENT",
}

GENERIC_CONTRACT_TITLE = "CONTRACT AGREEMENT"

DEFAULT_GOVERNING_LAW = "California"

_CATEGORY_BY_TYPE: dict[ContractType, ContractCategory] = {
    contract_type: category
    for category, entry in CATEGORY_TEMPLATES.items()
    for contract_type, _ in entry["templates"]
}


def as_contract_type(value: str | None) -> ContractType | None:
    """Map a raw contract type string to the enum, or None if unknown."""
    if isinstance(value, ContractType):
        return value
    if not isinstance(value, str) or value not in CONTRACT_TYPE_VALUES:
        return None
    return ContractType(value)


def category_for(contract_type: str | None) -> ContractCategory | None:
    """Return the category a contract type belongs to."""
    resolved = as_contract_type(contract_type)
    if resolved is None:
        return None
    return _CATEGORY_BY_TYPE[resolved]


def title_for(contract_type: str | None) -> str:
    """Return the document title line for a contract type."""
    resolved = as_contract_type(contract_type)
    if resolved is None:
        return GENERIC_CONTRACT_TITLE
    return CONTRACT_TITLES[resolved]


class ContractForm(BaseModel):
    """Flat record of everything the wizard collects.

    Attributes are snake_case; camelCase aliases let serialized wizard forms
    (``{"contractType": ..., "feeAmount": ...}``) load unchanged. Optional
    fields default to None, and None and "" both mean "not provided".
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    # Contract setup
    category: str = ContractCategory.BRAND.value
    contract_type: str = ContractType.BRAND_SPONSORSHIP.value
    tone: str = ContractTone.NEUTRAL.value

    # Parties
    creator_name: str = ""
    creator_role_label: str = "Creator"
    creator_city_state: str | None = None
    counterparty_name: str = ""
    counterparty_role_label: str = "Client"

    # Project / scope
    project_title: str | None = None
    project_description: str | None = None
    start_date: str | None = None
    end_date_or_ongoing: str | None = None
    deliverable_type: str | None = None
    deliverable_count: int | None = None
    platforms: str | None = None
    schedule_description: str | None = None

    # Compensation
    has_compensation: bool = True
    currency: str | None = None
    fee_type: str | None = None
    fee_amount: float | None = None
    commission_structure: str | None = None
    payment_schedule: str | None = None
    bonus_details: str | None = None

    # Rights & usage
    content_owner: str | None = None
    license_type: str | None = None
    license_duration_text: str | None = None
    allowed_uses_text: str | None = None
    allow_derivatives: bool | None = None

    # Revisions
    included_revisions: int | None = None
    extra_revision_fee_text: str | None = None

    # Exclusivity
    has_exclusivity: bool = False
    exclusivity_scope: str | None = None
    exclusivity_duration: str | None = None

    # Revenue share
    has_revenue_share: bool = False
    revenue_sources_text: str | None = None
    revenue_split_description: str | None = None

    # Releases
    releasee_name: str | None = None
    releasee_role: str | None = None
    description_of_appearance_or_content: str | None = None

    # Giveaway
    territory_text: str | None = None
    age_restrictions_text: str | None = None
    giveaway_start_date: str | None = None
    giveaway_end_date: str | None = None
    prize_description: str | None = None
    winner_selection_method: str | None = None
    approx_prize_value: str | None = None

    # Moderator
    moderator_duties_text: str | None = None
    moderator_perks_or_compensation_text: str | None = None

    # Legal / termination
    termination_notice_period_text: str | None = None
    non_payment_or_breach_consequences_text: str | None = None
    governing_law_region: str | None = None
    dispute_resolution_text: str | None = None
