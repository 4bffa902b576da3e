"""Builder for the release family (model, guest, location, contributor).

The four releases share one layout. What differs per type (the releasee's
defined term, the wording of the grant, the responsibilities section) lives
in ``RELEASE_PROFILES``.
"""

from dataclasses import dataclass

from core.assembly.document import ContractDocument, RoleLabels, dispute_sentence, provided
from core.contracts.types import ContractForm, ContractType, title_for
from core.expansion.input_expander import expand_compensation, expand_usage_rights


@dataclass(frozen=True)
class ReleaseProfile:
    """Per-type wording for a release."""
    agreement_name: str
    releasee_label: str
    creator_default: str
    grant_heading: str
    purpose: str
    description_label: str
    default_grant: str
    waiver: str
    warranties_heading: str
    warranties: str
    liability: str
    establishes: str = (
        "This Agreement establishes the scope of permitted uses, compensation, and rights of "
        "both parties."
    )
    closing: str = (
        "This Agreement constitutes the entire understanding between the parties. "
        "Modifications must be made in writing and signed by both parties."
    )


# Templates use {creator} for the resolved creator label.
RELEASE_PROFILES: dict[ContractType, ReleaseProfile] = {
    ContractType.MODEL_RELEASE: ReleaseProfile(
        agreement_name="Model Release Agreement",
        releasee_label="Model",
        creator_default="Photographer",
        grant_heading="GRANT OF RIGHTS",
        purpose=(
            "Model grants {creator} the right to use photographs, videos, or other media "
            "featuring Model's likeness for the purposes outlined herein."
        ),
        description_label="Media description",
        default_grant=(
            "Model grants {creator} the right to use all photographs, videos, and other media "
            "captured during the session."
        ),
        waiver=(
            "Model waives any right to inspect or approve the finished media or any written copy "
            "that may be used in connection with the media. Model releases {creator} from any "
            "claims arising from the use of the media in accordance with this Agreement."
        ),
        warranties_heading="WARRANTIES & REPRESENTATIONS",
        warranties=(
            "Model represents that they are of legal age and have the full right and authority to "
            "enter into this Agreement. Model warrants that the grant of rights does not conflict "
            "with any existing agreements or obligations. {creator} represents that the media "
            "will be used in a lawful and professional manner."
        ),
        liability=(
            "Model agrees to indemnify {creator} from any claims arising from Model's breach of "
            "this Agreement. {creator} agrees to indemnify Model from claims arising from "
            "{creator}'s unlawful or defamatory use of the media."
        ),
        closing=(
            "This Agreement constitutes the entire understanding between the parties. "
            "Modifications must be made in writing and signed by both parties. This release is "
            "binding upon Model's heirs, legal representatives, and assigns."
        ),
    ),
    ContractType.GUEST_RELEASE: ReleaseProfile(
        agreement_name="Guest Appearance Release Agreement",
        releasee_label="Guest",
        creator_default="Creator",
        grant_heading="GRANT OF RIGHTS",
        purpose=(
            "Guest grants {creator} the right to use Guest's appearance, voice, likeness, and "
            "contributions in {creator}'s content."
        ),
        description_label="Content description",
        default_grant=(
            "Guest grants {creator} the right to use all content featuring Guest's appearance, "
            "voice, and contributions."
        ),
        waiver=(
            "Guest waives any right to inspect or approve the final content before publication. "
            "Guest releases {creator} from any claims arising from the use of Guest's appearance "
            "in accordance with this Agreement."
        ),
        warranties_heading="WARRANTIES & REPRESENTATIONS",
        warranties=(
            "Guest represents that they have the full right and authority to enter into this "
            "Agreement and that their appearance does not violate any existing agreements. "
            "{creator} represents that the content will be used in a lawful and professional "
            "manner and will not be used in a defamatory or misleading context."
        ),
        liability=(
            "Guest agrees to indemnify {creator} from claims arising from Guest's breach of this "
            "Agreement or any content provided by Guest. {creator} agrees to indemnify Guest from "
            "claims arising from {creator}'s unlawful use of the content."
        ),
    ),
    ContractType.LOCATION_RELEASE: ReleaseProfile(
        agreement_name="Location Release Agreement",
        releasee_label="Property Owner",
        creator_default="Creator",
        grant_heading="GRANT OF PERMISSION",
        purpose=(
            "Property Owner grants {creator} permission to use their property for filming, "
            "photography, or content creation purposes."
        ),
        description_label="Location description",
        default_grant=(
            "Property Owner grants {creator} permission to access and use the property for "
            "content creation purposes."
        ),
        waiver=(
            "Property Owner waives any right to inspect or approve the final content featuring "
            "the property. Property Owner releases {creator} from any claims arising from the use "
            "of the property in accordance with this Agreement."
        ),
        warranties_heading="CREATOR RESPONSIBILITIES",
        warranties=(
            "{creator} agrees to use the property in a respectful manner and to restore the "
            "property to its original condition upon completion of filming. {creator} shall be "
            "responsible for any damage caused to the property during the production. {creator} "
            "agrees to comply with all applicable laws and regulations while on the property and "
            "to obtain any necessary permits or licenses."
        ),
        liability=(
            "{creator} agrees to indemnify Property Owner from any claims, damages, or liabilities "
            "arising from {creator}'s use of the property. Property Owner is not liable for any "
            "injuries or damages sustained by {creator} or their crew while on the property, "
            "except in cases of Property Owner's gross negligence."
        ),
        establishes=(
            "This Agreement establishes the terms of use, compensation, and responsibilities of "
            "both parties."
        ),
    ),
    ContractType.CONTRIBUTOR_CONTENT_RELEASE: ReleaseProfile(
        agreement_name="Contributor Release Agreement",
        releasee_label="Contributor",
        creator_default="Creator",
        grant_heading="GRANT OF RIGHTS",
        purpose=(
            "Contributor grants {creator} the right to use Contributor's submissions, ideas, or "
            "contributions in {creator}'s content."
        ),
        description_label="Contribution description",
        default_grant=(
            "Contributor grants {creator} the right to use all submissions, ideas, feedback, or "
            "other contributions provided by Contributor."
        ),
        waiver=(
            "Contributor waives any right to inspect or approve the final content incorporating "
            "their contributions. Contributor releases {creator} from any claims arising from the "
            "use of the contributions in accordance with this Agreement."
        ),
        warranties_heading="WARRANTIES & REPRESENTATIONS",
        warranties=(
            "Contributor represents that all contributions are original or properly licensed and "
            "do not infringe on any third-party rights. Contributor warrants that they have the "
            "full right and authority to grant the rights outlined in this Agreement. {creator} "
            "represents that the contributions will be used in a lawful and professional manner."
        ),
        liability=(
            "Contributor agrees to indemnify {creator} from any claims arising from Contributor's "
            "breach of the warranties provided in this Agreement. {creator} agrees to indemnify "
            "Contributor from claims arising from {creator}'s unlawful use of the contributions."
        ),
    ),
}


def _release_details(form: ContractForm, releasee: str) -> list[str]:
    details = []
    if provided(form.releasee_name):
        role = f", appearing as {form.releasee_role}" if provided(form.releasee_role) else ""
        details.append(f"{releasee}: {form.releasee_name}{role}.")
    if provided(form.description_of_appearance_or_content):
        details.append(f"Description of appearance or content: {form.description_of_appearance_or_content}.")
    return details


def build_release(form: ContractForm, contract_type: ContractType) -> str:
    profile = RELEASE_PROFILES[contract_type]
    labels = RoleLabels.resolve(form, profile.creator_default, profile.releasee_label)
    creator = labels.creator
    releasee = profile.releasee_label

    releasee_name = next(
        (name for name in (form.releasee_name, form.counterparty_name) if provided(name)),
        releasee,
    )

    doc = ContractDocument(title_for(contract_type))

    doc.add_section(
        "PARTIES & PURPOSE",
        f'This {profile.agreement_name} (the "Agreement") is entered into between '
        f'{form.creator_name} ("{creator}") and {releasee_name} ("{releasee}").',
        profile.purpose.format(creator=creator),
        profile.establishes,
    )

    details = _release_details(form, releasee)
    if details:
        doc.add_section("RELEASE DETAILS", *details)

    doc.add_section(
        profile.grant_heading,
        f"{profile.description_label}: {form.project_description}."
        if provided(form.project_description)
        else profile.default_grant.format(creator=creator),
        expand_usage_rights(form.allowed_uses_text, form.license_duration_text, releasee, creator),
        profile.waiver.format(creator=creator),
    )

    doc.add_section(
        "COMPENSATION",
        expand_compensation(form.has_compensation, form.fee_amount, form.currency, releasee, creator),
    )

    doc.add_section(profile.warranties_heading, profile.warranties.format(creator=creator))
    doc.add_section("LIABILITY & INDEMNIFICATION", profile.liability.format(creator=creator))

    doc.add_section(
        "GOVERNING LAW",
        f"This Agreement shall be governed by the laws of {labels.governing_law}.",
        dispute_sentence(form, "Disputes shall be resolved through good-faith negotiation, mediation, or arbitration."),
    )

    doc.add_section("MISCELLANEOUS", profile.closing)
    return doc.render()
