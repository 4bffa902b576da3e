"""Builders for business basics: NDAs, talent management and joint ventures."""

from core.assembly.document import (
    ContractDocument,
    RoleLabels,
    breach_sentence,
    dispute_sentence,
    notice_sentence,
    parties_sentence,
    provided,
    term_opening,
)
from core.contracts.types import ContractForm, ContractType, title_for
from core.expansion.input_expander import expand_exclusivity


CONFIDENTIAL_SCOPE = (
    "Confidential information includes, but is not limited to, business plans, financial "
    "information, customer data, trade secrets, proprietary processes, and any other "
    "information marked as confidential or that a reasonable person would understand to be "
    "confidential."
)

DEFAULT_NDA_DURATION = "a period of three (3) years from the date of execution"


def build_nda(form: ContractForm, contract_type: ContractType) -> str:
    """Build a one-way or mutual NDA; both share the same section order."""
    mutual = contract_type == ContractType.NDA_MUTUAL
    if mutual:
        labels = RoleLabels.resolve(form, "Party A", "Party B")
    else:
        labels = RoleLabels.resolve(form, "Disclosing Party", "Receiving Party")
    discloser, recipient = labels.creator, labels.counterparty
    doc = ContractDocument(title_for(contract_type))

    if mutual:
        doc.add_section(
            "PARTIES & PURPOSE",
            parties_sentence("Mutual Non-Disclosure Agreement", form, labels),
            "Both parties may disclose confidential information to each other, and this "
            "Agreement establishes the terms governing the protection and use of such "
            "confidential information.",
        )
    else:
        doc.add_section(
            "PARTIES & PURPOSE",
            parties_sentence("Non-Disclosure Agreement", form, labels),
            f"{discloser} may disclose certain confidential information to {recipient}, and this "
            f"Agreement establishes the terms governing the protection and use of such "
            f"confidential information.",
        )

    if provided(form.project_description):
        definition = f"Confidential information includes: {form.project_description}."
    elif mutual:
        definition = (
            "Confidential information includes all non-public information disclosed by either "
            "party to the other, whether orally, in writing, or in any other form."
        )
    else:
        definition = (
            f"Confidential information includes all non-public information disclosed by "
            f"{discloser} to {recipient}, whether orally, in writing, or in any other form."
        )
    doc.add_section("DEFINITION OF CONFIDENTIAL INFORMATION", definition, CONFIDENTIAL_SCOPE)

    if mutual:
        doc.add_section(
            "MUTUAL OBLIGATIONS",
            "Each party agrees to hold all confidential information received from the other "
            "party in strict confidence and not to disclose it to any third party without the "
            "prior written consent of the disclosing party.",
            "Each party shall use the confidential information solely for the purpose of "
            "evaluating or engaging in a business relationship.",
            "Each party shall take reasonable measures to protect the confidential information, "
            "using at least the same degree of care as they use to protect their own "
            "confidential information.",
        )
        doc.add_section(
            "EXCEPTIONS",
            "The obligations of confidentiality do not apply to information that: (a) is or "
            "becomes publicly available through no breach of this Agreement; (b) was rightfully "
            "in the receiving party's possession prior to disclosure; (c) is independently "
            "developed by the receiving party without use of the confidential information; or "
            "(d) is required to be disclosed by law or court order, provided the receiving party "
            "gives the disclosing party prompt notice of such requirement.",
        )
    else:
        doc.add_section(
            "OBLIGATIONS OF RECEIVING PARTY",
            f"{recipient} agrees to hold all confidential information in strict confidence and "
            f"not to disclose it to any third party without the prior written consent of {discloser}.",
            f"{recipient} shall use the confidential information solely for the purpose of "
            f"evaluating or engaging in a business relationship with {discloser}.",
            f"{recipient} shall take reasonable measures to protect the confidential information, "
            f"using at least the same degree of care as {recipient} uses to protect their own "
            f"confidential information.",
        )
        doc.add_section(
            "EXCEPTIONS",
            f"The obligations of confidentiality do not apply to information that: (a) is or "
            f"becomes publicly available through no breach of this Agreement; (b) was rightfully "
            f"in {recipient}'s possession prior to disclosure by {discloser}; (c) is "
            f"independently developed by {recipient} without use of the confidential "
            f"information; or (d) is required to be disclosed by law or court order, provided "
            f"{recipient} gives {discloser} prompt notice of such requirement.",
        )

    # The wizard collects the NDA duration in the end-date field.
    duration = next(
        (value for value in (form.end_date_or_ongoing, form.license_duration_text) if provided(value)),
        DEFAULT_NDA_DURATION,
    )
    doc.add_section(
        "TERM & TERMINATION",
        f"This Agreement shall remain in effect for {duration}.",
        notice_sentence(form, "") if provided(form.termination_notice_period_text) else "",
        "The obligations of confidentiality shall survive termination of this Agreement and "
        "continue for the duration specified herein.",
    )

    if mutual:
        remedies = (
            "Each party acknowledges that any breach of this Agreement may cause irreparable harm "
            "to the other party for which monetary damages may be inadequate. Either party shall "
            "be entitled to seek injunctive relief in addition to any other remedies available at "
            "law or in equity."
        )
    else:
        remedies = (
            f"{recipient} acknowledges that any breach of this Agreement may cause irreparable "
            f"harm to {discloser} for which monetary damages may be inadequate. {discloser} shall "
            f"be entitled to seek injunctive relief in addition to any other remedies available "
            f"at law or in equity."
        )
    doc.add_section("REMEDIES", remedies, breach_sentence(form))

    doc.add_section(
        "GOVERNING LAW",
        f"This Agreement shall be governed by the laws of {labels.governing_law}.",
        dispute_sentence(form, "Disputes shall be resolved through good-faith negotiation, mediation, or arbitration."),
    )

    doc.add_section(
        "MISCELLANEOUS",
        "This Agreement constitutes the entire understanding between the parties regarding "
        "confidentiality. Modifications must be made in writing and signed by both parties. If "
        "any provision is found unenforceable, the remaining provisions shall continue in effect.",
    )
    return doc.render()


def build_talent_management(form: ContractForm, contract_type: ContractType) -> str:
    labels = RoleLabels.resolve(form, "Talent", "Manager")
    talent, manager = labels.creator, labels.counterparty
    doc = ContractDocument(title_for(contract_type))

    doc.add_section(
        "PARTIES & PURPOSE",
        parties_sentence("Talent Management Agreement", form, labels),
        f"{talent} engages {manager} to provide professional management services, including "
        f"career guidance, business development, and representation.",
        "This Agreement establishes the scope of services, compensation, and responsibilities "
        "of both parties.",
    )

    doc.add_section(
        "SCOPE OF MANAGEMENT SERVICES",
        form.project_description
        if provided(form.project_description)
        else f"{manager} agrees to provide professional management services to {talent}, "
        f"including but not limited to career guidance, contract negotiation, business "
        f"development, brand partnerships, and strategic planning.",
        f"{manager} shall use reasonable efforts to advance {talent}'s career and secure "
        f"opportunities consistent with {talent}'s goals and brand. {manager} shall act in "
        f"{talent}'s best interests and maintain professional standards in all dealings.",
    )

    doc.add_section(
        "COMPENSATION & COMMISSION",
        f"Commission structure: {form.commission_structure}."
        if provided(form.commission_structure)
        else f"{manager} shall receive a commission on all income earned by {talent} during the "
        f"term of this Agreement. The commission rate shall be as mutually agreed upon by both "
        f"parties.",
        f"Commissions are calculated based on gross income before expenses unless otherwise "
        f"agreed. {manager} is not entitled to commissions on income earned from opportunities "
        f"secured by {talent} independently, unless {manager} provided substantial assistance.",
    )

    doc.add_section(
        "PAYMENT TERMS",
        f"Payment schedule: {form.payment_schedule}."
        if provided(form.payment_schedule)
        else "Commissions shall be paid monthly, within fifteen (15) days following the end of "
        "each month.",
        f"{manager} shall provide {talent} with regular reports detailing income, commissions, "
        f"and expenses. {talent} retains the right to audit {manager}'s records upon reasonable "
        f"notice.",
    )

    exclusivity = expand_exclusivity(
        form.has_exclusivity, form.exclusivity_scope, form.exclusivity_duration, talent, manager
    )
    if exclusivity:
        doc.add_section("EXCLUSIVITY", exclusivity)

    doc.add_section(
        "TERM & TERMINATION",
        term_opening(form, "This Agreement begins upon execution and continues until terminated by either party."),
        notice_sentence(form, "ninety (90) days"),
        f"Upon termination, {manager} shall continue to receive commissions on deals negotiated "
        f"during the term of this Agreement, subject to a sunset period as mutually agreed.",
        breach_sentence(form),
    )

    doc.add_section(
        "LIABILITY & INDEMNIFICATION",
        f"{manager} is an independent contractor and not an employee of {talent}. Each party "
        f"agrees to indemnify the other from claims arising from their own actions or breach of "
        f"this Agreement.",
        f"{manager} is not liable for the success or failure of {talent}'s career, but agrees to "
        f"use reasonable efforts to advance {talent}'s interests.",
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


def build_joint_venture(form: ContractForm, contract_type: ContractType) -> str:
    labels = RoleLabels.resolve(form, "Party A", "Party B")
    party_a, party_b = labels.creator, labels.counterparty
    doc = ContractDocument(title_for(contract_type))

    doc.add_section(
        "PARTIES & PURPOSE",
        parties_sentence("Joint Venture Agreement", form, labels),
        "The parties agree to collaborate on a joint business venture and share profits, "
        "losses, and responsibilities according to the terms outlined herein.",
        "This Agreement establishes the structure, governance, and financial terms of the joint venture.",
    )

    doc.add_section(
        "VENTURE SCOPE & OBJECTIVES",
        f"Venture name: {form.project_title}." if provided(form.project_title) else "",
        form.project_description
        if provided(form.project_description)
        else "The parties agree to collaborate on a joint business venture as mutually defined.",
        "The venture's objectives, target market, and strategic goals shall be determined by "
        "mutual agreement. Both parties commit to contributing their respective skills, "
        "resources, and expertise to ensure the venture's success.",
    )

    doc.add_section(
        "CONTRIBUTIONS & RESPONSIBILITIES",
        f"Agreed contributions: {form.schedule_description}." if provided(form.schedule_description) else "",
        "Each party agrees to contribute resources, capital, expertise, or services as mutually "
        "agreed upon. Specific contributions and responsibilities shall be documented in writing "
        "and may be adjusted by mutual consent as the venture evolves.",
        "Both parties agree to act in good faith, maintain open communication, and make "
        "decisions collaboratively in the best interests of the joint venture.",
    )

    doc.add_section(
        "PROFIT & LOSS SHARING",
        f"Profit and loss split: {form.revenue_split_description}."
        if provided(form.revenue_split_description)
        else f"Profits and losses shall be split equally (50/50) between {party_a} and "
        f"{party_b} unless otherwise agreed in writing.",
        f"Revenue sources include: {form.revenue_sources_text}."
        if provided(form.revenue_sources_text)
        else "Revenue includes all income generated from the joint venture, including sales, "
        "licensing fees, and other business activities.",
        "Net profit is defined as gross revenue minus reasonable business expenses directly "
        "related to the venture.",
        f"Profit distributions shall be made according to the following schedule: {form.payment_schedule}."
        if provided(form.payment_schedule)
        else "Profit distributions shall be made quarterly, within fifteen (15) days following "
        "the end of each quarter.",
        "Each party shall have the right to review financial records related to the venture "
        "upon reasonable notice.",
    )

    doc.add_section(
        "DECISION MAKING & GOVERNANCE",
        "Major decisions affecting the joint venture shall require unanimous consent of both "
        "parties. Major decisions include, but are not limited to, significant capital "
        "expenditures, changes to the business model, hiring key personnel, and entering into "
        "material contracts.",
        "Day-to-day operational decisions may be made by either party within the scope of their "
        "responsibilities, provided such decisions do not materially affect the venture's "
        "direction or financial position.",
    )

    doc.add_section(
        "INTELLECTUAL PROPERTY",
        f"All intellectual property created as part of the joint venture shall be jointly owned "
        f"by {party_a} and {party_b} unless otherwise agreed in writing.",
        "Neither party may license, sell, or transfer their ownership interest without the "
        "written consent of the other party. Each party retains ownership of any pre-existing "
        "intellectual property they contribute to the venture.",
    )

    doc.add_section(
        "TERM & TERMINATION",
        term_opening(
            form,
            "This Agreement begins upon execution and continues until terminated by either party "
            "or until the venture's objectives have been achieved.",
        ),
        notice_sentence(form, "ninety (90) days"),
        "Upon termination, the parties agree to work together in good faith to wind down the "
        "venture, settle outstanding obligations, and distribute remaining assets according to "
        "the profit-sharing ratio.",
        breach_sentence(form),
    )

    doc.add_section(
        "LIABILITY & INDEMNIFICATION",
        "Each party agrees to indemnify the other from claims arising from their own actions or "
        "breach of this Agreement. Neither party shall be liable for indirect, incidental, or "
        "consequential damages arising from this Agreement.",
        "Both parties represent that they have the authority to enter into this Agreement and "
        "that their contributions do not infringe on any third-party rights.",
    )

    doc.add_section(
        "GOVERNING LAW",
        f"This Agreement shall be governed by the laws of {labels.governing_law}.",
        dispute_sentence(
            form,
            "Disputes shall be resolved through good-faith negotiation, mediation, or binding arbitration.",
        ),
    )

    doc.add_section(
        "MISCELLANEOUS",
        "This Agreement constitutes the entire understanding between the parties. Modifications "
        "must be made in writing and signed by both parties. If any provision is found "
        "unenforceable, the remaining provisions shall continue in effect.",
    )
    return doc.render()
