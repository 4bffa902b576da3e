"""Builders for the brand-facing contract family.

Covers sponsorship / UGC deals, content licensing, whitelisting and
affiliate promotion.
"""

from core.assembly.document import (
    ContractDocument,
    RoleLabels,
    breach_sentence,
    derivatives_sentence,
    dispute_sentence,
    notice_sentence,
    parties_sentence,
    provided,
    schedule_sentence,
    term_opening,
    usage_rights_input,
)
from core.contracts.types import ContentOwner, ContractForm, ContractType, title_for
from core.expansion.input_expander import (
    VAGUE_DELIVERABLES,
    expand_compensation,
    expand_deliverable_type,
    expand_exclusivity,
    expand_platforms,
    expand_timeline,
    expand_usage_rights,
)


BRAND_DEAL_NAMES = {
    ContractType.BRAND_SPONSORSHIP: "Brand Sponsorship Agreement",
    ContractType.UGC_PRODUCTION: "UGC Production Agreement",
}


def _deliverable_text(form: ContractForm) -> str | None:
    deliverable = form.deliverable_type
    if not provided(deliverable) or deliverable.strip().lower() in VAGUE_DELIVERABLES:
        return deliverable
    if form.deliverable_count and form.deliverable_count > 0:
        return f"{form.deliverable_count} {deliverable}"
    return deliverable


def _bonus_sentence(form: ContractForm) -> str:
    if form.has_compensation and provided(form.bonus_details):
        return f"Bonus terms: {form.bonus_details}."
    return ""


def build_brand_deal(form: ContractForm, contract_type: ContractType) -> str:
    labels = RoleLabels.resolve(form, "Creator", "Brand")
    creator, brand = labels.creator, labels.counterparty
    doc = ContractDocument(title_for(contract_type))

    doc.add_section(
        "PARTIES & PURPOSE",
        parties_sentence(BRAND_DEAL_NAMES.get(contract_type, "Brand Sponsorship Agreement"), form, labels),
        f"The purpose of this Agreement is to establish the terms under which {creator} will "
        f"create and publish sponsored content on behalf of {brand}.",
        "Both parties agree to the terms outlined herein and acknowledge that this Agreement "
        "constitutes the entire understanding between them regarding this collaboration.",
    )

    doc.add_section(
        "SCOPE OF WORK & DELIVERABLES",
        f"Project: {form.project_title}." if provided(form.project_title) else "",
        form.project_description or "",
        expand_deliverable_type(_deliverable_text(form), creator, brand),
        f"Content will be published {expand_platforms(form.platforms)}.",
        expand_timeline(form.schedule_description, True, creator, brand),
        f"{creator} retains creative control over the content, subject to {brand}'s reasonable "
        f"approval rights to ensure brand alignment. {brand} agrees to provide feedback within a "
        f"reasonable timeframe to avoid delays in publication.",
    )

    doc.add_section(
        "COMPENSATION & PAYMENT TERMS",
        expand_compensation(form.has_compensation, form.fee_amount, form.currency, creator, brand),
        schedule_sentence(form, "Payment shall be made within thirty (30) days of content delivery and approval."),
        _bonus_sentence(form),
        "All payments are non-refundable once the content has been delivered and approved. Late "
        "payments may incur interest charges or suspension of further deliverables until payment "
        "is received." if form.has_compensation else "",
    )

    if form.content_owner == ContentOwner.CLIENT.value:
        ownership = [
            f"Upon full payment, {brand} shall own all rights, title, and interest in the content "
            f"created under this Agreement.",
            f"{creator} retains the right to display the content in their portfolio unless "
            f"explicitly restricted by an exclusivity clause.",
        ]
    elif form.content_owner == ContentOwner.JOINT.value:
        ownership = [
            f"The content created under this Agreement shall be jointly owned by {creator} and {brand}.",
            "Neither party may license or sell the content to a third party without the other "
            "party's written consent.",
        ]
    else:
        ownership = [
            f"{creator} retains all intellectual property rights and ownership of the content "
            f"created under this Agreement.",
            expand_usage_rights(usage_rights_input(form), form.license_duration_text, creator, brand),
            f"{creator} may repurpose or reuse the content for their own portfolio, promotional "
            f"materials, or other projects unless explicitly restricted by an exclusivity clause.",
        ]
    doc.add_section("RIGHTS OWNERSHIP & USAGE", *ownership, derivatives_sentence(form, labels))

    exclusivity = expand_exclusivity(
        form.has_exclusivity, form.exclusivity_scope, form.exclusivity_duration, creator, brand
    )
    if exclusivity:
        doc.add_section("EXCLUSIVITY", exclusivity)

    doc.add_section(
        "TERM & TERMINATION",
        term_opening(
            form,
            "This Agreement begins upon execution by both parties and continues until all "
            "deliverables have been completed and approved.",
        ),
        notice_sentence(form, "seven (7) days"),
        f"In the event of termination, {creator} shall be compensated for any work completed up "
        f"to the date of termination. {brand}'s usage rights to any completed content shall "
        f"survive termination unless otherwise agreed.",
        breach_sentence(form),
    )

    doc.add_section(
        "LIABILITY & INDEMNIFICATION",
        "Each party agrees to indemnify and hold harmless the other party from any claims, "
        "damages, or liabilities arising from their own actions or content.",
        f"{creator} represents that all content created is original or properly licensed and "
        f"does not infringe on any third-party rights.",
        f"{brand} represents that all product information and brand materials provided are "
        f"accurate and authorized for use.",
    )

    doc.add_section(
        "GOVERNING LAW & DISPUTE RESOLUTION",
        f"This Agreement shall be governed by and construed in accordance with the laws of "
        f"{labels.governing_law}, without regard to its conflict of law principles.",
        dispute_sentence(
            form,
            "Any disputes arising under this Agreement shall first be attempted to be resolved "
            "through good-faith negotiation. If negotiation fails, disputes may be resolved "
            "through mediation or binding arbitration as mutually agreed by both parties.",
        ),
    )

    doc.add_section(
        "MISCELLANEOUS",
        "This Agreement constitutes the entire understanding between the parties and supersedes "
        "all prior agreements or understandings, whether written or oral.",
        "Any modifications to this Agreement must be made in writing and signed by both parties.",
        "If any provision of this Agreement is found to be unenforceable, the remaining "
        "provisions shall continue in full force and effect.",
    )
    return doc.render()


def build_content_license(form: ContractForm, contract_type: ContractType) -> str:
    labels = RoleLabels.resolve(form, "Licensor", "Licensee")
    licensor, licensee = labels.creator, labels.counterparty
    doc = ContractDocument(title_for(contract_type))

    doc.add_section(
        "PARTIES & PURPOSE",
        parties_sentence("Content Licensing Agreement", form, labels),
        f"{licensor} owns certain content and grants {licensee} a license to use that content "
        f"according to the terms outlined herein.",
        "This Agreement establishes the scope of the license, permitted uses, compensation, and "
        "responsibilities of both parties.",
    )

    if provided(form.project_description):
        licensed = f"The licensed content includes: {form.project_description}."
    else:
        licensed = (
            f"The licensed content includes existing creative works owned by {licensor} as "
            f"mutually agreed upon by both parties."
        )
    doc.add_section(
        "LICENSED CONTENT",
        licensed,
        f"{licensor} represents and warrants that they are the sole owner of the content and "
        f"have the full right and authority to grant this license. {licensor} further warrants "
        f"that the content does not infringe on any third-party intellectual property rights.",
    )

    doc.add_section(
        "SCOPE OF LICENSE",
        expand_usage_rights(usage_rights_input(form), form.license_duration_text, licensor, licensee),
        derivatives_sentence(form, labels),
        f"{licensee} may not sublicense, transfer, or assign this license without the prior "
        f"written consent of {licensor}. Any use of the content outside the scope of this "
        f"license requires separate written authorization from {licensor}.",
    )

    doc.add_section(
        "COMPENSATION & PAYMENT",
        expand_compensation(form.has_compensation, form.fee_amount, form.currency, licensor, licensee),
        schedule_sentence(form, "Payment is due within thirty (30) days of execution of this Agreement."),
        "Late payments may incur interest charges as permitted by law." if form.has_compensation else "",
    )

    doc.add_section(
        "TERM & TERMINATION",
        term_opening(
            form,
            "This Agreement begins upon execution and continues for the duration specified in "
            "the license terms.",
        ),
        notice_sentence(form, "thirty (30) days", " for material breach"),
        f"Upon termination, {licensee} shall immediately cease all use of the licensed content "
        f"unless otherwise agreed in writing.",
        breach_sentence(form),
    )

    doc.add_section(
        "LIABILITY & INDEMNIFICATION",
        f"{licensor} agrees to indemnify {licensee} from claims arising from any breach of the "
        f"warranties provided in this Agreement.",
        f"{licensee} agrees to indemnify {licensor} from claims arising from {licensee}'s use of "
        f"the content outside the scope of this license.",
        "Neither party shall be liable for indirect, incidental, or consequential damages.",
    )

    doc.add_section(
        "GOVERNING LAW",
        f"This Agreement shall be governed by the laws of {labels.governing_law}.",
        dispute_sentence(
            form,
            "Any disputes shall first be resolved through good-faith negotiation, and if "
            "unresolved, through mediation or arbitration as mutually agreed.",
        ),
    )

    doc.add_section(
        "MISCELLANEOUS",
        "This Agreement constitutes the entire understanding between the parties. Any "
        "modifications must be made in writing and signed by both parties. If any provision is "
        "found unenforceable, the remaining provisions shall continue in effect.",
    )
    return doc.render()


def build_whitelisting(form: ContractForm, contract_type: ContractType) -> str:
    labels = RoleLabels.resolve(form, "Creator", "Brand")
    creator, brand = labels.creator, labels.counterparty
    doc = ContractDocument(title_for(contract_type))

    doc.add_section(
        "PARTIES & PURPOSE",
        parties_sentence("Whitelisting Rights Agreement", form, labels),
        f"{creator} grants {brand} the right to use {creator}'s social media accounts and "
        f"content for paid advertising purposes.",
        "This Agreement establishes the terms, compensation, and limitations of such "
        "whitelisting rights.",
    )

    doc.add_section(
        "SCOPE OF WHITELISTING RIGHTS",
        form.project_description
        if provided(form.project_description)
        else f"{brand} is granted permission to run paid advertisements using {creator}'s social "
        f"media accounts and existing content.",
        f"Advertisements may run {expand_platforms(form.platforms)}." if provided(form.platforms) else "",
        expand_usage_rights(usage_rights_input(form), form.license_duration_text, creator, brand),
        f"{creator} retains the right to review and approve all advertisements before they are "
        f"published. {brand} agrees to provide {creator} with reasonable notice and opportunity "
        f"to review ad creative and targeting parameters.",
    )

    doc.add_section(
        "COMPENSATION",
        expand_compensation(form.has_compensation, form.fee_amount, form.currency, creator, brand),
        schedule_sentence(form, "Payment is due monthly based on the duration of whitelisting access."),
        "Payments are non-refundable once whitelisting access has been granted."
        if form.has_compensation
        else "",
    )

    doc.add_section(
        "CREATOR RIGHTS & CONTROL",
        f"{creator} retains full ownership and control of their social media accounts at all "
        f"times. {brand} may not post organic content, change account settings, or access "
        f"private messages without explicit written permission from {creator}.",
        f"{creator} reserves the right to revoke whitelisting access immediately if {brand} "
        f"violates the terms of this Agreement or publishes content that damages {creator}'s "
        f"reputation.",
    )

    doc.add_section(
        "TERM & TERMINATION",
        term_opening(
            form,
            "This Agreement begins upon execution and continues for the duration specified in "
            "the whitelisting terms.",
        ),
        notice_sentence(form, "seven (7) days"),
        f"Upon termination, {brand} shall immediately cease all paid advertising using "
        f"{creator}'s accounts and content.",
        breach_sentence(form),
    )

    doc.add_section(
        "LIABILITY & INDEMNIFICATION",
        f"{brand} agrees to indemnify {creator} from any claims arising from advertisements run "
        f"under this Agreement. {creator} is not liable for the performance or results of any "
        f"paid advertising campaigns.",
    )

    doc.add_section(
        "GOVERNING LAW",
        f"This Agreement shall be governed by the laws of {labels.governing_law}.",
        dispute_sentence(
            form,
            "Disputes shall be resolved through good-faith negotiation, mediation, or "
            "arbitration as mutually agreed.",
        ),
    )

    doc.add_section(
        "MISCELLANEOUS",
        "This Agreement constitutes the entire understanding between the parties. "
        "Modifications must be made in writing and signed by both parties.",
    )
    return doc.render()


def build_affiliate(form: ContractForm, contract_type: ContractType) -> str:
    labels = RoleLabels.resolve(form, "Affiliate", "Company")
    affiliate, company = labels.creator, labels.counterparty
    doc = ContractDocument(title_for(contract_type))

    doc.add_section(
        "PARTIES & PURPOSE",
        parties_sentence("Affiliate Promotion Agreement", form, labels),
        f"{affiliate} agrees to promote {company}'s products or services in exchange for "
        f"commission-based compensation as outlined herein.",
        "This Agreement establishes the terms of the affiliate relationship, commission "
        "structure, and responsibilities of both parties.",
    )

    doc.add_section(
        "AFFILIATE RESPONSIBILITIES",
        form.project_description
        if provided(form.project_description)
        else f"{affiliate} agrees to promote {company}'s products or services through their "
        f"content, social media channels, or other marketing efforts.",
        f"Promotion will take place {expand_platforms(form.platforms)}." if provided(form.platforms) else "",
        f"{affiliate} shall use their unique affiliate link or code provided by {company} to "
        f"track sales and conversions. {affiliate} agrees to comply with all applicable "
        f"advertising disclosure requirements and clearly disclose the affiliate relationship "
        f"to their audience.",
    )

    doc.add_section(
        "COMMISSION STRUCTURE",
        f"Commission structure: {form.commission_structure}."
        if provided(form.commission_structure)
        else f"{affiliate} will earn a commission on qualifying sales generated through their "
        f"unique affiliate link. The commission rate and qualifying criteria shall be as "
        f"mutually agreed upon by both parties.",
        _bonus_sentence(form),
        f"Commissions are calculated based on completed sales after any returns, refunds, or "
        f"chargebacks. {company} reserves the right to withhold commissions on fraudulent or "
        f"suspicious transactions.",
    )

    doc.add_section(
        "PAYMENT TERMS",
        f"Payment schedule: {form.payment_schedule}."
        if provided(form.payment_schedule)
        else "Commissions shall be paid monthly, within thirty (30) days following the end of "
        "each month.",
        f"{company} will provide {affiliate} with regular reports detailing sales, conversions, "
        f"and earned commissions. Payments may be subject to a minimum threshold as agreed upon "
        f"by both parties.",
    )

    exclusivity = expand_exclusivity(
        form.has_exclusivity, form.exclusivity_scope, form.exclusivity_duration, affiliate, company
    )
    if exclusivity:
        doc.add_section("EXCLUSIVITY", exclusivity)

    doc.add_section(
        "TERM & TERMINATION",
        term_opening(form, "This Agreement begins upon execution and continues until terminated by either party."),
        notice_sentence(form, "thirty (30) days"),
        f"Upon termination, {affiliate} shall receive payment for all commissions earned up to "
        f"the termination date.",
        breach_sentence(form),
    )

    doc.add_section(
        "LIABILITY & COMPLIANCE",
        f"{affiliate} is an independent contractor and not an employee of {company}. {affiliate} "
        f"agrees to comply with all applicable laws and regulations, including FTC disclosure "
        f"requirements.",
        f"{company} is not liable for any claims arising from {affiliate}'s promotional "
        f"activities beyond the scope of this Agreement.",
    )

    doc.add_section(
        "GOVERNING LAW",
        f"This Agreement shall be governed by the laws of {labels.governing_law}.",
        dispute_sentence(form, "Disputes shall be resolved through good-faith negotiation, mediation, or arbitration."),
    )

    doc.add_section(
        "MISCELLANEOUS",
        "This Agreement constitutes the entire understanding between the parties. "
        "Modifications must be made in writing and signed by both parties.",
    )
    return doc.render()
