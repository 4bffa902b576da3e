"""Contract builders, one module per contract family.

Every builder has the signature ``(form, contract_type) -> str``.
"""

from core.assembly.builders.brand import (
    build_affiliate,
    build_brand_deal,
    build_content_license,
    build_whitelisting,
)
from core.assembly.builders.business import build_joint_venture, build_nda, build_talent_management
from core.assembly.builders.community import build_giveaway, build_moderator
from core.assembly.builders.creator import build_collaboration, build_revenue_share
from core.assembly.builders.releases import RELEASE_PROFILES, build_release
from core.assembly.builders.services import build_service_provider

__all__ = [
    "RELEASE_PROFILES",
    "build_affiliate",
    "build_brand_deal",
    "build_collaboration",
    "build_content_license",
    "build_giveaway",
    "build_joint_venture",
    "build_moderator",
    "build_nda",
    "build_release",
    "build_revenue_share",
    "build_service_provider",
    "build_talent_management",
    "build_whitelisting",
]
