"""Builders for creator-to-creator agreements (collaborations and revenue share)."""

from core.assembly.document import (
    ContractDocument,
    RoleLabels,
    breach_sentence,
    dispute_sentence,
    notice_sentence,
    parties_sentence,
    provided,
    schedule_sentence,
    term_opening,
)
from core.contracts.types import ContentOwner, ContractForm, ContractType, title_for
from core.expansion.input_expander import expand_compensation, expand_exclusivity


COLLAB_NAMES = {
    ContractType.COLLAB_SINGLE_PROJECT: "Collaboration Agreement",
    ContractType.CO_CREATOR_ONGOING: "Co-Creator Agreement",
}


def _content_ownership(form: ContractForm, labels: RoleLabels) -> str:
    creator, collaborator = labels.creator, labels.counterparty
    if form.content_owner == ContentOwner.JOINT.value:
        return (
            f"All content created as part of this collaboration shall be jointly owned by "
            f"{creator} and {collaborator}. Neither party may use, license, or distribute the "
            f"content without the other party's written consent."
        )
    if form.content_owner == ContentOwner.CREATOR.value:
        return (
            f"{creator} shall retain full ownership of all content created under this Agreement. "
            f"{collaborator} is granted a non-exclusive license to use the content for mutually "
            f"agreed purposes."
        )
    if form.content_owner == ContentOwner.CLIENT.value:
        return (
            f"{collaborator} shall own all rights to the content created under this Agreement. "
            f"{creator} grants {collaborator} full ownership upon project completion."
        )
    return "Content ownership shall be jointly held by both parties unless otherwise agreed in writing."


def build_collaboration(form: ContractForm, contract_type: ContractType) -> str:
    labels = RoleLabels.resolve(form, "Creator", "Collaborator")
    creator, collaborator = labels.creator, labels.counterparty
    doc = ContractDocument(title_for(contract_type))

    doc.add_section(
        "PARTIES & PURPOSE",
        parties_sentence(COLLAB_NAMES.get(contract_type, "Collaboration Agreement"), form, labels),
        "The parties agree to collaborate on a creative project and establish the terms "
        "governing their partnership, including responsibilities, ownership, and compensation.",
        "This Agreement ensures both parties understand their roles and obligations throughout "
        "the collaboration.",
    )

    doc.add_section(
        "PROJECT SCOPE",
        f"Project: {form.project_title}." if provided(form.project_title) else "",
        form.project_description
        if provided(form.project_description)
        else "The parties agree to collaborate on a creative project as mutually defined.",
        "Both parties commit to contributing their skills, creativity, and resources to ensure "
        "the project's success. The scope of work may be adjusted by mutual written agreement "
        "as the project evolves.",
    )

    doc.add_section(
        "RESPONSIBILITIES",
        form.schedule_description
        if provided(form.schedule_description)
        else "Each party's responsibilities shall be mutually agreed upon and may include content "
        "creation, editing, promotion, and other tasks necessary for project completion.",
        "Both parties agree to communicate openly, meet deadlines, and act in good faith "
        "throughout the collaboration. If either party is unable to fulfill their "
        "responsibilities, they agree to notify the other party promptly to discuss adjustments.",
    )

    doc.add_section(
        "CONTENT OWNERSHIP",
        _content_ownership(form, labels),
        "Each party retains the right to use the content for portfolio and promotional purposes "
        "unless restricted by mutual agreement.",
    )

    doc.add_section(
        "COMPENSATION",
        expand_compensation(form.has_compensation, form.fee_amount, form.currency, creator, collaborator),
        schedule_sentence(form, "Payment shall be made upon project completion and approval."),
        "All payments are non-refundable once work has been completed and delivered."
        if form.has_compensation
        else "",
    )

    doc.add_section(
        "TERM & TERMINATION",
        term_opening(
            form,
            "This Agreement begins upon execution and continues until the project is completed "
            "or terminated by either party.",
        ),
        notice_sentence(form, "seven (7) days"),
        "Upon termination, both parties shall retain rights to any work they individually "
        "created, and jointly created work shall remain jointly owned unless otherwise agreed.",
        breach_sentence(form),
    )

    doc.add_section(
        "LIABILITY & INDEMNIFICATION",
        "Each party agrees to indemnify the other from claims arising from their own actions or "
        "content. Both parties represent that their contributions are original or properly "
        "licensed and do not infringe on third-party rights. Neither party shall be liable for "
        "indirect or consequential damages arising from this Agreement.",
    )

    doc.add_section(
        "GOVERNING LAW & DISPUTE RESOLUTION",
        f"This Agreement shall be governed by the laws of {labels.governing_law}.",
        dispute_sentence(
            form,
            "Disputes shall first be resolved through good-faith negotiation. If unresolved, "
            "disputes may be submitted to mediation or arbitration as mutually agreed.",
        ),
    )

    doc.add_section(
        "MISCELLANEOUS",
        "This Agreement constitutes the entire understanding between the parties. Any "
        "modifications must be made in writing and signed by both parties. If any provision is "
        "found unenforceable, the remaining provisions shall continue in effect.",
    )
    return doc.render()


def build_revenue_share(form: ContractForm, contract_type: ContractType) -> str:
    labels = RoleLabels.resolve(form, "Creator", "Partner")
    creator, partner = labels.creator, labels.counterparty
    doc = ContractDocument(title_for(contract_type))

    doc.add_section(
        "PARTIES & PURPOSE",
        parties_sentence("Revenue Share Agreement", form, labels),
        "The parties agree to collaborate on a revenue-generating project and share profits "
        "according to the terms outlined herein.",
        "This Agreement establishes each party's responsibilities, revenue split, and the terms "
        "governing the partnership.",
    )

    doc.add_section(
        "PROJECT SCOPE & RESPONSIBILITIES",
        f"Project: {form.project_title}." if provided(form.project_title) else "",
        form.project_description
        if provided(form.project_description)
        else "The parties agree to collaborate on a joint project as mutually defined.",
        f"Responsibilities: {form.schedule_description}." if provided(form.schedule_description) else "",
        "Each party agrees to contribute their respective skills, resources, and efforts to the "
        "success of the project. Specific responsibilities shall be determined by mutual "
        "agreement and may evolve as the project progresses. Both parties commit to acting in "
        "good faith and maintaining open communication throughout the collaboration.",
    )

    doc.add_section(
        "REVENUE SHARE & PAYMENT TERMS",
        f"Revenue split: {form.revenue_split_description}."
        if provided(form.revenue_split_description)
        else f"Revenue shall be split equally (50/50) between {creator} and {partner} unless "
        f"otherwise agreed in writing.",
        f"Revenue sources include: {form.revenue_sources_text}."
        if provided(form.revenue_sources_text)
        else "Revenue includes all income generated from the project, including but not limited "
        "to sales, sponsorships, advertising, and licensing fees.",
        "Net revenue is defined as gross revenue minus reasonable business expenses directly "
        "related to the project, including platform fees, production costs, and marketing "
        "expenses.",
        f"Revenue distributions shall be made according to the following schedule: {form.payment_schedule}."
        if provided(form.payment_schedule)
        else "Revenue distributions shall be made monthly, within fifteen (15) days following the "
        "end of each month.",
        "Each party shall have the right to review financial records related to the project "
        "upon reasonable notice.",
    )

    doc.add_section(
        "OWNERSHIP & INTELLECTUAL PROPERTY",
        f"All intellectual property created as part of this collaboration shall be jointly owned "
        f"by {creator} and {partner} unless otherwise agreed in writing.",
        "Neither party may license, sell, or transfer their ownership interest without the "
        "written consent of the other party.",
        "Each party retains ownership of any pre-existing intellectual property they contribute "
        "to the project and grants the partnership a license to use such property for the "
        "duration of this Agreement.",
    )

    exclusivity = expand_exclusivity(
        form.has_exclusivity, form.exclusivity_scope, form.exclusivity_duration, creator, partner
    )
    if exclusivity:
        doc.add_section("EXCLUSIVITY", exclusivity)

    doc.add_section(
        "TERM & TERMINATION",
        term_opening(form, "This Agreement begins upon execution and continues until terminated by either party."),
        f"Term: {form.end_date_or_ongoing}."
        if provided(form.end_date_or_ongoing) and not provided(form.start_date)
        else "",
        notice_sentence(form, "thirty (30) days"),
        "Upon termination, both parties shall continue to receive their respective share of "
        "revenue from any content or products created during the term of this Agreement. The "
        "parties agree to work together in good faith to wind down the partnership and settle "
        "any outstanding financial obligations.",
        breach_sentence(form),
    )

    doc.add_section(
        "LIABILITY & INDEMNIFICATION",
        "Each party agrees to indemnify and hold harmless the other party from any claims, "
        "damages, or liabilities arising from their own actions or content contributed to the "
        "project.",
        "Neither party shall be liable for indirect, incidental, or consequential damages "
        "arising from this Agreement.",
        "Both parties represent that they have the authority to enter into this Agreement and "
        "that their contributions do not infringe on any third-party rights.",
    )

    doc.add_section(
        "GOVERNING LAW & DISPUTE RESOLUTION",
        f"This Agreement shall be governed by the laws of {labels.governing_law}.",
        dispute_sentence(
            form,
            "Any disputes arising under this Agreement shall first be attempted to be resolved "
            "through good-faith negotiation. If unresolved, disputes may be submitted to "
            "mediation or binding arbitration as mutually agreed by both parties.",
        ),
    )

    doc.add_section(
        "MISCELLANEOUS",
        "This Agreement constitutes the entire understanding between the parties and supersedes "
        "all prior agreements. Any modifications must be made in writing and signed by both "
        "parties. If any provision is found unenforceable, the remaining provisions shall "
        "continue in full force and effect.",
    )
    return doc.render()
