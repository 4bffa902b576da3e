"""Builder for hired-help agreements (editor, designer, clipper, channel manager)."""

from core.assembly.document import (
    ContractDocument,
    RoleLabels,
    breach_sentence,
    dispute_sentence,
    format_currency,
    notice_sentence,
    parties_sentence,
    provided,
    term_opening,
)
from core.contracts.types import UNLIMITED_REVISIONS, ContractForm, ContractType, FeeType, title_for
from core.expansion.input_expander import expand_compensation, expand_deliverable_type, expand_timeline


SERVICE_NAMES = {
    ContractType.SERVICE_EDITOR: "Editor Service Agreement",
    ContractType.SERVICE_THUMBNAIL_DESIGNER: "Thumbnail Designer Service Agreement",
    ContractType.SERVICE_CLIPPER: "Clipper Service Agreement",
    ContractType.SERVICE_CHANNEL_MANAGER: "Channel Manager Service Agreement",
}


def _fee_sentence(form: ContractForm, labels: RoleLabels) -> str:
    provider, client = labels.creator, labels.counterparty
    amount = format_currency(form.fee_amount, form.currency)

    if form.fee_type == FeeType.FLAT.value:
        return f"{client} agrees to pay {provider} a flat fee of {amount} for the services outlined in this Agreement."
    if form.fee_type == FeeType.HOURLY.value:
        return f"{client} agrees to pay {provider} an hourly rate of {amount} per hour for services rendered."
    if form.fee_type == FeeType.PER_DELIVERABLE.value:
        return f"{client} agrees to pay {provider} {amount} per deliverable as outlined in this Agreement."
    return f"{client} agrees to compensate {provider} {amount} for services rendered."


def _revisions_text(form: ContractForm, labels: RoleLabels) -> list[str]:
    provider, client = labels.creator, labels.counterparty
    revisions = form.included_revisions

    if revisions == 0:
        text = [
            "This Agreement does not include revisions. All deliverables are provided as-is, and "
            "any requested changes will be subject to additional fees as agreed upon by both parties."
        ]
    elif revisions == UNLIMITED_REVISIONS:
        text = [
            f"This Agreement includes unlimited revisions within the scope of the original "
            f"project. {client} may request changes to deliverables, and {provider} will "
            f"accommodate reasonable revision requests."
        ]
    else:
        text = [
            f"This Agreement includes up to {revisions} rounds of revisions. Additional revisions "
            f"beyond this limit may be subject to additional fees as agreed upon by both parties."
        ]

    if provided(form.extra_revision_fee_text) and revisions != UNLIMITED_REVISIONS:
        text.append(f"Fee for additional revisions: {form.extra_revision_fee_text}.")

    text.append(
        "Revisions must be requested within a reasonable timeframe and must not fundamentally "
        "alter the scope of the original project."
    )
    return text


def build_service_provider(form: ContractForm, contract_type: ContractType) -> str:
    labels = RoleLabels.resolve(form, "Service Provider", "Client")
    provider, client = labels.creator, labels.counterparty
    doc = ContractDocument(title_for(contract_type))

    doc.add_section(
        "PARTIES & PURPOSE",
        parties_sentence(SERVICE_NAMES.get(contract_type, "Service Provider Agreement"), form, labels),
        f"{provider} agrees to provide professional services to {client} as an independent contractor.",
        "This Agreement establishes the scope of services, compensation terms, and "
        "responsibilities of both parties.",
    )

    doc.add_section(
        "SCOPE OF SERVICES",
        f"Project: {form.project_title}." if provided(form.project_title) else "",
        form.project_description or "",
        expand_deliverable_type(form.deliverable_type, provider, client),
        expand_timeline(form.schedule_description, True, provider, client),
        f"{provider} agrees to perform services in a professional and timely manner, adhering to "
        f"industry standards and {client}'s reasonable specifications. {client} agrees to provide "
        f"all necessary materials, access, and information required for {provider} to complete "
        f"the services.",
    )

    if form.has_compensation and form.fee_amount:
        doc.add_section(
            "COMPENSATION & PAYMENT TERMS",
            _fee_sentence(form, labels),
            f"Payment schedule: {form.payment_schedule}."
            if provided(form.payment_schedule)
            else "Payment is due within fifteen (15) days of invoice submission.",
            f"Late payments may incur a fee of 1.5% per month or the maximum allowed by law. "
            f"{provider} reserves the right to suspend services until outstanding invoices are "
            f"paid in full.",
        )
    else:
        doc.add_section(
            "COMPENSATION & PAYMENT TERMS",
            expand_compensation(form.has_compensation, form.fee_amount, form.currency, provider, client),
        )

    if form.included_revisions is not None:
        doc.add_section("REVISIONS & CHANGES", *_revisions_text(form, labels))

    doc.add_section(
        "OWNERSHIP & RIGHTS",
        f"Upon full payment, {client} shall own all rights, title, and interest in the final "
        f"deliverables created under this Agreement.",
        f"{provider} retains the right to use the work in their portfolio and promotional "
        f"materials unless otherwise agreed.",
        f"{provider} represents that all work is original or properly licensed and does not "
        f"infringe on any third-party intellectual property rights.",
    )

    doc.add_section(
        "TERM & TERMINATION",
        term_opening(
            form,
            "This Agreement begins upon execution and continues until all services have been "
            "completed and payment has been made.",
        ),
        notice_sentence(form, "seven (7) days"),
        f"In the event of termination, {provider} shall be compensated for all work completed up "
        f"to the termination date. {client} shall have the right to use any completed work upon "
        f"payment.",
        breach_sentence(form),
    )

    doc.add_section(
        "LIABILITY & INDEMNIFICATION",
        f"{provider}'s liability under this Agreement is limited to the total amount paid by "
        f"{client} for the services.",
        f"{provider} is not liable for any indirect, incidental, or consequential damages arising "
        f"from the services provided.",
        "Each party agrees to indemnify the other from claims arising from their own actions or "
        "breach of this Agreement.",
    )

    doc.add_section(
        "GOVERNING LAW & DISPUTE RESOLUTION",
        f"This Agreement shall be governed by the laws of {labels.governing_law}.",
        dispute_sentence(
            form,
            "Any disputes shall first be resolved through good-faith negotiation. If unresolved, "
            "disputes may be submitted to mediation or arbitration as mutually agreed.",
        ),
    )

    doc.add_section(
        "MISCELLANEOUS",
        f"{provider} is an independent contractor and not an employee of {client}. This "
        f"Agreement constitutes the entire understanding between the parties. Any modifications "
        f"must be made in writing and signed by both parties.",
    )
    return doc.render()
