"""Section-list document model shared by all contract builders.

Builders never write section numbers themselves. They push
``(heading, body)`` entries onto a ``ContractDocument`` and the document
numbers them from 1 when rendered, so an optional section (exclusivity,
revisions, release details, ...) shifts every later number automatically.

Usage:
    doc = ContractDocument("MUTUAL NON-DISCLOSURE AGREEMENT")
    doc.add_section("PARTIES & PURPOSE", "This Agreement ...", "Both parties ...")
    if exclusivity:
        doc.add_section("EXCLUSIVITY", exclusivity)
    text = doc.render()
"""

from dataclasses import dataclass, field

from core.contracts.types import DEFAULT_GOVERNING_LAW, ContractForm
from core.expansion.input_expander import format_amount
from core.normalization.text_normalizer import clean_text, is_empty


LEGAL_DISCLAIMER = (
    "\n\nDISCLAIMER\n\n"
    "This contract template is provided for general informational purposes only and does "
    "not constitute legal advice. Parties should consider consulting with a licensed attorney "
    "for guidance tailored to their situation.\n"
)

DATE_PLACEHOLDER = "[DATE]"


def format_date(date_str: str | None) -> str:
    """Pass a date through unchanged, or the placeholder when missing."""
    if is_empty(date_str):
        return DATE_PLACEHOLDER
    return date_str


def format_currency(amount: float | None, currency: str | None = None) -> str:
    """Render a fee as ``"USD 1,500"``; "$0" when no amount is given."""
    if not amount:
        return "$0"
    return f"{currency or 'USD'} {format_amount(amount)}"


def provided(value: str | None) -> bool:
    return not is_empty(value)


@dataclass(frozen=True)
class RoleLabels:
    """Role labels with family defaults already applied."""
    creator: str
    counterparty: str
    governing_law: str = DEFAULT_GOVERNING_LAW

    @classmethod
    def resolve(
        cls,
        form: ContractForm,
        creator_default: str = "Creator",
        counterparty_default: str = "Client",
    ) -> "RoleLabels":
        """Resolve labels for one builder.

        Args:
            form: Sanitized contract form.
            creator_default: Label used when ``creator_role_label`` is blank.
            counterparty_default: Label used when ``counterparty_role_label``
                is blank.

        Returns:
            RoleLabels for the builder, with governing law resolved too.
        """
        creator = form.creator_role_label.strip() if provided(form.creator_role_label) else creator_default
        counterparty = (
            form.counterparty_role_label.strip()
            if provided(form.counterparty_role_label)
            else counterparty_default
        )
        governing_law = (
            form.governing_law_region.strip()
            if provided(form.governing_law_region)
            else DEFAULT_GOVERNING_LAW
        )
        return cls(creator=creator, counterparty=counterparty, governing_law=governing_law)


@dataclass
class ContractSection:
    """One numbered section: heading plus body text."""
    heading: str
    body: str


@dataclass
class ContractDocument:
    """Ordered list of sections that renders as a numbered agreement."""
    title: str
    sections: list[ContractSection] = field(default_factory=list)

    def add_section(self, heading: str, *parts: str) -> "ContractDocument":
        """Append a section whose body is the non-empty parts joined by spaces.

        Each part is collapsed onto a single line.
        """
        body = " ".join(clean_text(part) for part in parts if part and part.strip())
        self.sections.append(ContractSection(heading=heading, body=body))
        return self

    @property
    def headings(self) -> list[str]:
        return [section.heading for section in self.sections]

    def render(self) -> str:
        """Render the title, the sections numbered from 1 and the disclaimer."""
        chunks = [f"{self.title}\n\n"]
        for number, section in enumerate(self.sections, start=1):
            chunks.append(f"{number}. {section.heading}\n\n{section.body}\n\n")
        chunks.append(LEGAL_DISCLAIMER)
        return "".join(chunks)


# Clause helpers shared across contract families.

def parties_sentence(agreement_name: str, form: ContractForm, labels: RoleLabels) -> str:
    return (
        f'This {agreement_name} (the "Agreement") is entered into between '
        f'{form.creator_name} ("{labels.creator}") and {form.counterparty_name} ("{labels.counterparty}").'
    )


def notice_sentence(form: ContractForm, default_notice: str, suffix: str = "") -> str:
    """Termination-notice sentence using the form's notice period if given."""
    notice = form.termination_notice_period_text if provided(form.termination_notice_period_text) else default_notice
    return f"Either party may terminate this Agreement with {notice} written notice{suffix}."


def term_opening(form: ContractForm, default_sentence: str) -> str:
    """Opening sentence of a term section, naming the start date when known."""
    if not provided(form.start_date):
        return default_sentence
    end = form.end_date_or_ongoing
    if provided(end) and end.strip().lower() != "ongoing":
        return f"This Agreement begins on {format_date(form.start_date)} and ends on {format_date(end)}."
    return f"This Agreement begins on {format_date(form.start_date)} and continues until terminated by either party."


def breach_sentence(form: ContractForm) -> str:
    if not provided(form.non_payment_or_breach_consequences_text):
        return ""
    return f"In the event of non-payment or material breach: {form.non_payment_or_breach_consequences_text}."


def dispute_sentence(form: ContractForm, default_sentence: str) -> str:
    if provided(form.dispute_resolution_text):
        return f"Disputes arising under this Agreement shall be resolved as follows: {form.dispute_resolution_text}."
    return default_sentence


def schedule_sentence(form: ContractForm, default_sentence: str = "") -> str:
    """Payment-schedule sentence for paid agreements.

    The form's schedule wins; ``default_sentence`` is used only when a fee
    amount is known.
    """
    if not form.has_compensation:
        return ""
    if provided(form.payment_schedule):
        return f"Payment schedule: {form.payment_schedule}."
    if form.fee_amount:
        return default_sentence
    return ""


def derivatives_sentence(form: ContractForm, labels: RoleLabels) -> str:
    if form.allow_derivatives is None:
        return ""
    if form.allow_derivatives:
        return (
            f"{labels.counterparty} may edit, crop, or otherwise adapt the content "
            f"within the permitted uses."
        )
    return (
        f"{labels.counterparty} may not modify the content or create derivative works "
        f"without the prior written consent of {labels.creator}."
    )


def usage_rights_input(form: ContractForm) -> str | None:
    """Allowed uses text, falling back to the license type keyword."""
    if provided(form.allowed_uses_text):
        return form.allowed_uses_text
    if provided(form.license_type):
        return form.license_type
    return None
