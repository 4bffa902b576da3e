"""Vague Input Expansion.

Turns terse or vague wizard answers ("any", "tbd", "asap", "full rights")
into complete professional clause text. Each expander takes the optional
user string plus the role labels to mention and returns prose; none of them
raise.

Usage:
    from core.expansion.input_expander import expand_platforms, expand_usage_rights

    expand_platforms("YouTube and TikTok")
    # -> "on YouTube and TikTok"
    expand_usage_rights(None, "12 months", "Creator", "Brand")
    # -> "Brand is granted a non-exclusive, worldwide license ... "
"""

from core.contracts.types import ContractForm


# Vague synonyms, compared against the trimmed lowercase input.
VAGUE_PLATFORMS = frozenset({"any", "all", "social media", "sm", "everywhere"})
VAGUE_DELIVERABLES = frozenset({"any", "tbd", "idk", "whatever", "na"})
URGENT_TIMELINES = frozenset({"asap", "soon", "quick", "fast"})
VAGUE_TIMELINES = frozenset({"idk", "tbd", "na"})
BROAD_USAGE_RIGHTS = frozenset({"perpetual", "any", "full rights", "all rights", "everything"})
OPEN_ENDED_DURATIONS = frozenset({"perpetual", "forever", "unlimited"})

VAGUE_TERMS: tuple[str, ...] = (
    "idk",
    "i don't know",
    "same as usual",
    "whatever",
    "any",
    "na",
    "n/a",
    "tbd",
    "to be determined",
    "none",
    "nothing",
    "no",
    "nope",
    "nah",
)

URGENT_TIMELINE_DEFAULT = "7 days"

DEFAULT_PLATFORMS_CLAUSE = (
    "across any social media platforms where the Creator currently publishes content "
    "or may publish content in the future, including but not limited to YouTube, "
    "TikTok, Instagram, Facebook, and similar digital platforms"
)

DEFAULT_USAGE_RIGHTS = "non-exclusive, worldwide license for marketing and promotional purposes"

USAGE_RIGHTS_BY_KEYWORD: dict[str, str] = {
    "exclusive": "exclusive, worldwide license to use the content for marketing and promotional purposes",
    "limited": "limited, non-exclusive license to use the content for specified purposes only",
    "non_exclusive": DEFAULT_USAGE_RIGHTS,
    "non-exclusive": DEFAULT_USAGE_RIGHTS,
}

PERPETUAL_USAGE_RIGHTS = (
    "non-exclusive, worldwide, perpetual license to use the content for marketing "
    "and promotional purposes across any digital platform"
)


def _normalized(value: str) -> str:
    return value.lower().strip()


def format_amount(amount: float) -> str:
    """Format a number with thousands separators and at most three decimals."""
    if float(amount).is_integer():
        return f"{int(amount):,}"
    return f"{amount:,.3f}".rstrip("0").rstrip(".")


def expand_platforms(platforms: str | None = None) -> str:
    """Expand a platform answer into a publication-scope phrase.

    Args:
        platforms: Raw platform list, e.g. "Instagram, TikTok".

    Returns:
        "on {platforms}" for specific input, otherwise the any-platform phrase.
    """
    if not platforms or _normalized(platforms) in VAGUE_PLATFORMS:
        return DEFAULT_PLATFORMS_CLAUSE
    return f"on {platforms}"


def expand_deliverable_type(
    deliverable_type: str | None = None,
    creator_role: str = "Creator",
    client_role: str = "Client",
) -> str:
    """Expand a deliverable description into a scope paragraph."""
    quality = (
        f"Deliverables will be created in a format appropriate for online publication, "
        f"edited to {creator_role}'s standard quality, and aligned with "
        f"{client_role}'s brand objectives."
    )

    if not deliverable_type or _normalized(deliverable_type) in VAGUE_DELIVERABLES:
        return f"{creator_role} will produce deliverables as mutually agreed upon by both parties. {quality}"

    return f"{creator_role} will produce the following deliverables: {deliverable_type}. {quality}"


def expand_timeline(
    timeline: str | None = None,
    for_creator: bool = True,
    creator_role: str = "Creator",
    client_role: str = "Client",
) -> str:
    """Expand a deadline answer into delivery or feedback wording.

    Args:
        timeline: Raw duration such as "2 weeks" or "asap".
        for_creator: True for the delivery clause, False for the client
            feedback clause.
        creator_role: Label of the delivering party.
        client_role: Label of the reviewing party.

    Returns:
        The timeline clause. Urgent words become "7 days"; vague or missing
        input falls back to a reasonable-timeframe clause.
    """
    if timeline:
        lowered = _normalized(timeline)
        if lowered in URGENT_TIMELINES:
            timeline = URGENT_TIMELINE_DEFAULT
        elif lowered in VAGUE_TIMELINES:
            timeline = None

    if not timeline:
        if for_creator:
            return (
                f"{creator_role} will deliver the agreed-upon content within a reasonable "
                f"timeframe unless otherwise mutually extended in writing."
            )
        return (
            f"{client_role} shall provide feedback within a reasonable timeframe. "
            f"Failure to respond will be deemed automatic approval."
        )

    if for_creator:
        return (
            f"{creator_role} will deliver the agreed-upon content within {timeline} "
            f"unless otherwise mutually extended in writing."
        )
    return (
        f"{client_role} shall provide feedback within {timeline} of receiving the deliverable. "
        f"Failure to respond within this timeframe will be deemed automatic approval."
    )


def expand_compensation(
    has_compensation: bool,
    fee_amount: float | None = None,
    currency: str | None = None,
    creator_role: str = "Creator",
    client_role: str = "Client",
) -> str:
    """Expand the fee answers into a payment clause.

    Args:
        has_compensation: False produces the unpaid-collaboration clause.
        fee_amount: Total fee; missing or zero gives a generic clause.
        currency: Currency code, "USD" when missing.
        creator_role: Label of the party being paid.
        client_role: Label of the paying party.

    Returns:
        The compensation clause.
    """
    if not has_compensation:
        return (
            f"This is an unpaid collaboration in which {creator_role} provides content in "
            f"exchange for non-monetary value such as exposure, product, or mutual benefit."
        )

    terms = "Payment shall be made through the specified method and within the agreed-upon timeline."

    if not fee_amount:
        return f"{client_role} agrees to compensate {creator_role} for the services described herein. {terms}"

    formatted = f"{currency or 'USD'} {format_amount(fee_amount)}"
    return (
        f"{client_role} agrees to pay {creator_role} a total fee of {formatted} "
        f"for the services described herein. {terms}"
    )


def expand_usage_rights(
    usage_rights: str | None = None,
    license_duration: str | None = None,
    creator_role: str = "Creator",
    client_role: str = "Client",
) -> str:
    """Expand a usage-rights answer into a license clause.

    ``creator_role`` is the party that keeps ownership; ``client_role`` is the
    grantee. The clause always ends with the ownership-retention sentence.
    """
    if not usage_rights:
        usage_rights = DEFAULT_USAGE_RIGHTS

    lowered = _normalized(usage_rights)
    if lowered in BROAD_USAGE_RIGHTS:
        usage_rights = PERPETUAL_USAGE_RIGHTS
    elif lowered in USAGE_RIGHTS_BY_KEYWORD:
        usage_rights = USAGE_RIGHTS_BY_KEYWORD[lowered]

    clause = f"{client_role} is granted a {usage_rights}."

    if license_duration and _normalized(license_duration) not in OPEN_ENDED_DURATIONS:
        clause += f" This license is valid for {license_duration}."

    clause += f" {creator_role} retains all underlying intellectual property rights and ownership of the content."
    return clause


def expand_exclusivity(
    has_exclusivity: bool,
    exclusivity_scope: str | None = None,
    exclusivity_duration: str | None = None,
    creator_role: str = "Creator",
    client_role: str = "Client",
) -> str:
    """Expand the exclusivity answers into a non-compete clause.

    Returns "" when exclusivity is off; callers omit the section then.
    """
    if not has_exclusivity:
        return ""

    if not exclusivity_scope or _normalized(exclusivity_scope) == "standard":
        exclusivity_scope = (
            f"{creator_role} agrees not to enter into any paid partnerships with direct "
            f"competitors of {client_role} for the duration of the exclusivity period"
        )

    clause = f"{exclusivity_scope}."
    duration = exclusivity_duration or "the duration of this Agreement"
    clause += f" This exclusivity provision is in effect for {duration}."
    clause += (
        f" This restriction applies only to direct competitors and does not prevent "
        f"{creator_role} from pursuing other business opportunities outside the scope of this project."
    )
    return clause


def sanitize_vague_input(value: str | None) -> str:
    """Blank out placeholder answers such as "idk", "n/a" or "tbd"."""
    if not value:
        return ""
    if _normalized(value) in VAGUE_TERMS:
        return ""
    return value.strip()


def apply_expansion_logic(form: ContractForm) -> ContractForm:
    """Return a copy of the form with vague placeholder answers blanked.

    Only the free-text fields that feed required-field checks are touched,
    so a vague answer is reported as missing instead of being accepted.
    """
    return form.model_copy(
        update={
            "project_description": sanitize_vague_input(form.project_description),
            "deliverable_type": sanitize_vague_input(form.deliverable_type),
            "schedule_description": sanitize_vague_input(form.schedule_description),
            "allowed_uses_text": sanitize_vague_input(form.allowed_uses_text),
            "exclusivity_scope": sanitize_vague_input(form.exclusivity_scope),
        }
    )
