"""Builders for audience-facing documents: giveaway rules and moderator agreements."""

from core.assembly.document import (
    ContractDocument,
    RoleLabels,
    breach_sentence,
    dispute_sentence,
    format_date,
    notice_sentence,
    parties_sentence,
    provided,
    schedule_sentence,
    term_opening,
)
from core.contracts.types import ContractForm, ContractType, title_for
from core.expansion.input_expander import expand_compensation


def _giveaway_period(form: ContractForm, sponsor: str) -> str:
    start = form.giveaway_start_date if provided(form.giveaway_start_date) else form.start_date
    end = form.giveaway_end_date if provided(form.giveaway_end_date) else form.end_date_or_ongoing

    if provided(start) and provided(end):
        return f"The Giveaway begins on {format_date(start)} and ends on {format_date(end)}."
    if provided(start):
        return f"The Giveaway begins on {format_date(start)} and continues until {sponsor} announces the end date."
    return f"The Giveaway period shall be announced by {sponsor} and will run for a specified duration."


def _prize_information(form: ContractForm) -> list[str]:
    prize = []
    if provided(form.prize_description):
        prize.append(f"Prize: {form.prize_description}.")
    if provided(form.approx_prize_value):
        prize.append(f"Approximate retail value of the prize: {form.approx_prize_value}.")
    return prize


def build_giveaway(form: ContractForm, contract_type: ContractType) -> str:
    labels = RoleLabels.resolve(form, "Sponsor", "Participant")
    sponsor = labels.creator
    doc = ContractDocument(title_for(contract_type))

    residents = f"legal residents of {form.territory_text}" if provided(form.territory_text) else "legal residents"
    age = form.age_restrictions_text if provided(form.age_restrictions_text) else "18 years of age or older"

    doc.add_section(
        "SPONSOR & ELIGIBILITY",
        f'This giveaway (the "Giveaway") is sponsored by {form.creator_name} ("{sponsor}").',
        f"The Giveaway is open to {residents} who are {age} at the time of entry. Employees of "
        f"{sponsor} and their immediate family members are not eligible to participate.",
        f"Void where prohibited by law. By entering, participants agree to be bound by these "
        f"Official Rules and the decisions of {sponsor}, which are final and binding.",
    )

    doc.add_section(
        "GIVEAWAY PERIOD",
        _giveaway_period(form, sponsor),
        f"All entries must be received by the end of the Giveaway period to be eligible. "
        f"{sponsor} reserves the right to extend, modify, or terminate the Giveaway at any time "
        f"without prior notice.",
    )

    doc.add_section(
        "HOW TO ENTER",
        form.project_description
        if provided(form.project_description)
        else f"To enter the Giveaway, participants must follow the entry instructions provided "
        f"by {sponsor}. Entry methods may include, but are not limited to, commenting on a post, "
        f"sharing content, subscribing to a channel, or submitting a form.",
        f"Limit one entry per person unless otherwise specified. Multiple entries from the same "
        f"person using different accounts or identities will be disqualified. {sponsor} is not "
        f"responsible for lost, late, incomplete, or misdirected entries.",
    )

    prize = _prize_information(form)
    if prize:
        doc.add_section("PRIZE INFORMATION", *prize)

    if provided(form.winner_selection_method):
        selection = f"Winner(s) will be selected as follows: {form.winner_selection_method}."
    else:
        selection = (
            f"Winner(s) will be selected randomly from all eligible entries received during the "
            f"Giveaway period. The selection will be conducted by {sponsor} or a designated "
            f"representative."
        )
    doc.add_section(
        "WINNER SELECTION & NOTIFICATION",
        selection,
        "Winner(s) will be notified via the contact information provided at the time of entry. "
        "Winner(s) must respond within seven (7) days of notification to claim their prize. "
        "Failure to respond within this timeframe may result in forfeiture of the prize and "
        "selection of an alternate winner.",
    )

    doc.add_section(
        "PRIZE & DELIVERY",
        f"The prize(s) will be as described by {sponsor} at the time of the Giveaway "
        f"announcement. Prizes are awarded \"as is\" with no warranty or guarantee, express or "
        f"implied.",
        f"{sponsor} is not responsible for any taxes, fees, or other costs associated with prize "
        f"acceptance or use. Winner(s) are solely responsible for all applicable taxes.",
        f"Prizes are non-transferable and may not be substituted or exchanged for cash. {sponsor} "
        f"reserves the right to substitute a prize of equal or greater value if the advertised "
        f"prize becomes unavailable.",
    )

    doc.add_section(
        "GENERAL CONDITIONS",
        f"By entering, participants agree to release and hold harmless {sponsor} from any "
        f"liability, loss, or damage arising from participation in the Giveaway or acceptance of "
        f"any prize.",
        f"{sponsor} reserves the right to disqualify any participant who violates these Official "
        f"Rules, tampers with the entry process, or acts in an unsportsmanlike or disruptive "
        f"manner.",
        f"Winner(s) may be required to sign an affidavit of eligibility and liability release. "
        f"{sponsor} may use winner names and likenesses for promotional purposes without "
        f"additional compensation.",
    )

    doc.add_section(
        "PRIVACY & DATA USE",
        f"Personal information collected during the Giveaway will be used solely for the purpose "
        f"of administering the Giveaway and notifying winners. {sponsor} will not sell or share "
        f"participant information with third parties except as required by law.",
    )

    doc.add_section(
        "GOVERNING LAW",
        f"This Giveaway and these Official Rules shall be governed by the laws of "
        f"{labels.governing_law}.",
        dispute_sentence(
            form,
            f"Any disputes arising from the Giveaway shall be resolved in accordance with the "
            f"laws of {labels.governing_law}.",
        ),
    )
    return doc.render()


def build_moderator(form: ContractForm, contract_type: ContractType) -> str:
    labels = RoleLabels.resolve(form, "Creator", "Moderator")
    creator, moderator = labels.creator, labels.counterparty
    doc = ContractDocument(title_for(contract_type))

    doc.add_section(
        "PARTIES & PURPOSE",
        parties_sentence("Community Moderator Agreement", form, labels),
        f"{creator} engages {moderator} to provide community moderation services for {creator}'s "
        f"online community, social media channels, or other platforms.",
        "This Agreement establishes the scope of responsibilities, compensation, and terms "
        "governing the moderator relationship.",
    )

    doc.add_section(
        "MODERATOR RESPONSIBILITIES",
        form.project_description
        if provided(form.project_description)
        else f"{moderator} agrees to moderate {creator}'s online community by enforcing community "
        f"guidelines, responding to member inquiries, removing inappropriate content, and "
        f"maintaining a positive and respectful environment.",
        f"{moderator} shall use reasonable judgment in applying community guidelines and shall "
        f"escalate complex or sensitive issues to {creator} for guidance. {moderator} agrees to "
        f"act professionally, impartially, and in accordance with {creator}'s values and brand "
        f"standards.",
    )

    if provided(form.moderator_duties_text):
        doc.add_section(
            "MODERATOR DUTIES",
            f"Specific duties include: {form.moderator_duties_text}.",
            f"Moderation will take place on {form.platforms}." if provided(form.platforms) else "",
        )

    doc.add_section(
        "COMPENSATION",
        expand_compensation(form.has_compensation, form.fee_amount, form.currency, moderator, creator),
        schedule_sentence(form, "Payment shall be made monthly based on hours worked or a flat monthly fee as agreed."),
        f"Additional perks or compensation: {form.moderator_perks_or_compensation_text}."
        if provided(form.moderator_perks_or_compensation_text)
        else "",
        f"{moderator} shall submit invoices or time reports as required by {creator}."
        if form.has_compensation
        else "",
    )

    doc.add_section(
        "CONFIDENTIALITY & CONDUCT",
        f"{moderator} agrees to maintain the confidentiality of all non-public information "
        f"accessed during the course of moderation duties, including member data, private "
        f"communications, and business information.",
        f"{moderator} shall not use their moderator position for personal gain, favoritism, or "
        f"any purpose other than fulfilling their responsibilities under this Agreement.",
        f"{moderator} agrees to comply with all applicable laws and platform terms of service "
        f"while performing moderation duties.",
    )

    doc.add_section(
        "TERM & TERMINATION",
        term_opening(form, "This Agreement begins upon execution and continues until terminated by either party."),
        notice_sentence(form, "seven (7) days"),
        f"{creator} reserves the right to terminate this Agreement immediately for cause, "
        f"including but not limited to breach of confidentiality, abuse of moderator privileges, "
        f"or conduct that damages {creator}'s reputation.",
        breach_sentence(form),
    )

    doc.add_section(
        "LIABILITY & INDEMNIFICATION",
        f"{moderator} is an independent contractor and not an employee of {creator}. {moderator} "
        f"agrees to indemnify {creator} from claims arising from {moderator}'s actions or breach "
        f"of this Agreement.",
        f"{creator} is not liable for any claims arising from {moderator}'s moderation decisions "
        f"made in good faith and in accordance with community guidelines.",
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
