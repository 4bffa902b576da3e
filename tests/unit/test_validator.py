"""Unit tests for contract form validation.

Tests cover:
- Base party-name checks for every contract type
- Rule groups: brand deal, service provider, revenue share, NDA, release
- Types with base checks only and unknown types
- Informal-language warnings
- ValidationResult serialization
"""

import pytest

from core.contracts.types import ContractForm, ContractType, UNLIMITED_REVISIONS
from core.validation.validator import (
    VALIDATION_RULES,
    ValidationResult,
    professionalism_warnings,
    validate_contract,
)


@pytest.fixture
def parties():
    """Minimal form fields every contract needs."""
    return {"creator_name": "Ana Lima", "counterparty_name": "Acme Co"}


def make_form(contract_type: ContractType, **fields) -> ContractForm:
    return ContractForm(contract_type=contract_type.value, **fields)


class TestBaseChecks:
    """Tests for the checks applied to every contract."""

    @pytest.mark.parametrize("contract_type", list(ContractType))
    def test_missing_names_reported(self, contract_type):
        result = validate_contract(make_form(contract_type))

        assert "Creator name is required" in result.errors
        assert "Counterparty name is required" in result.errors
        assert result.valid is False

    def test_whitespace_names_are_missing(self):
        form = make_form(ContractType.CONTENT_LICENSE, creator_name="   ", counterparty_name="Acme")
        result = validate_contract(form)
        assert result.errors == ["Creator name is required"]

    @pytest.mark.parametrize("contract_type", [
        ContractType.CONTENT_LICENSE,
        ContractType.AFFILIATE_PROMO,
        ContractType.COLLAB_SINGLE_PROJECT,
        ContractType.CO_CREATOR_ONGOING,
        ContractType.TALENT_MANAGEMENT,
        ContractType.JOINT_PROJECT_JV,
        ContractType.GIVEAWAY_TERMS,
        ContractType.COMMUNITY_MODERATOR_AGREEMENT,
    ])
    def test_base_only_types_valid_with_names(self, contract_type, parties):
        assert contract_type not in VALIDATION_RULES
        assert validate_contract(make_form(contract_type, **parties)).valid is True

    def test_unknown_type_gets_base_checks_only(self, parties):
        form = ContractForm(contract_type="mystery_deal", **parties)
        result = validate_contract(form)
        assert result.valid is True

    def test_explicit_type_overrides_form_type(self, parties):
        form = make_form(ContractType.CONTENT_LICENSE, **parties)
        result = validate_contract(form, ContractType.NDA_MUTUAL.value)
        assert "NDA duration must be specified" in result.errors


class TestBrandDealRules:
    """Tests for sponsorship, UGC and whitelisting checks."""

    def test_all_missing(self, parties):
        result = validate_contract(make_form(ContractType.BRAND_SPONSORSHIP, **parties))

        assert result.errors == [
            "Deliverable count must be specified",
            "Deliverable type must be specified",
            "Platforms must be specified",
            "Payment schedule must be specified",
            "Usage duration must be specified",
        ]

    def test_zero_deliverables_is_missing(self, parties):
        form = make_form(ContractType.UGC_PRODUCTION, deliverable_count=0, **parties)
        assert "Deliverable count must be specified" in validate_contract(form).errors

    def test_complete(self, parties):
        form = make_form(
            ContractType.WHITELISTING_RIGHTS,
            deliverable_count=2,
            deliverable_type="TikTok videos",
            platforms="TikTok",
            payment_schedule="50% upfront",
            license_duration_text="6 months",
            **parties,
        )
        assert validate_contract(form).valid is True


class TestServiceProviderRules:
    """Tests for editor, designer, clipper and manager checks."""

    def test_all_missing(self, parties):
        result = validate_contract(make_form(ContractType.SERVICE_EDITOR, **parties))

        assert result.errors == [
            "Deliverable type must be specified",
            "Revision count must be specified",
            "Fee type must be specified",
            "Fee amount must be specified",
        ]

    def test_zero_revisions_is_valid(self, parties):
        form = make_form(
            ContractType.SERVICE_CLIPPER,
            deliverable_type="Shorts",
            included_revisions=0,
            fee_type="flat",
            fee_amount=300,
            **parties,
        )
        assert validate_contract(form).valid is True

    def test_unlimited_sentinel_rejected(self, parties):
        form = make_form(
            ContractType.SERVICE_THUMBNAIL_DESIGNER,
            deliverable_type="Thumbnails",
            included_revisions=UNLIMITED_REVISIONS,
            fee_type="flat",
            fee_amount=300,
            **parties,
        )
        assert validate_contract(form).errors == ["Revision count must be specified"]

    def test_zero_fee_is_missing(self, parties):
        form = make_form(
            ContractType.SERVICE_CHANNEL_MANAGER,
            deliverable_type="Channel management",
            included_revisions=2,
            fee_type="hourly",
            fee_amount=0,
            **parties,
        )
        assert validate_contract(form).errors == ["Fee amount must be specified"]


class TestRevenueShareRules:
    """Tests for revenue-share checks."""

    def test_all_missing(self, parties):
        result = validate_contract(make_form(ContractType.REVENUE_SHARE_PROJECT, **parties))

        assert result.errors == [
            "Revenue sources must be specified",
            "Revenue split details must be specified",
            "Payment schedule must be specified",
            "Contract term/duration must be specified",
            "Roles and responsibilities must be defined",
        ]

    def test_schedule_counts_as_roles(self, parties):
        form = make_form(
            ContractType.REVENUE_SHARE_PROJECT,
            revenue_sources_text="AdSense",
            revenue_split_description="50/50",
            payment_schedule="Monthly",
            end_date_or_ongoing="Ongoing",
            schedule_description="Ana edits, Ben hosts",
            **parties,
        )
        assert validate_contract(form).valid is True


class TestNdaAndReleaseRules:
    """Tests for NDA and release checks."""

    @pytest.mark.parametrize("contract_type", [ContractType.NDA_ONE_WAY, ContractType.NDA_MUTUAL])
    def test_nda_missing(self, contract_type, parties):
        assert validate_contract(make_form(contract_type, **parties)).errors == [
            "Definition of confidential information must be specified",
            "NDA duration must be specified",
        ]

    def test_release_missing(self, parties):
        assert validate_contract(make_form(ContractType.GUEST_RELEASE, **parties)).errors == [
            "Identification of person/property/content must be specified",
            "Rights granted must be specified",
        ]

    def test_release_identified_by_description(self, parties):
        form = make_form(
            ContractType.LOCATION_RELEASE,
            description_of_appearance_or_content="Rooftop studio",
            allowed_uses_text="Filming for YouTube",
            **parties,
        )
        assert validate_contract(form).valid is True


class TestWarnings:
    """Tests for informal-language warnings."""

    def test_one_warning_per_field(self):
        form = ContractForm(
            creator_name="Ana lol",
            counterparty_name="Acme",
            project_title="Summer vibes 🔥",
            project_description="we wanna shoot",
        )
        assert professionalism_warnings(form) == [
            "Creator name contains informal language. Please use professional terms.",
            "Project title contains informal language. Please use professional terms.",
            "Project description contains informal language. Please use professional terms.",
        ]

    def test_warnings_do_not_invalidate(self, parties):
        form = make_form(ContractType.CONTENT_LICENSE, schedule_description="asap", **parties)
        result = validate_contract(form)
        assert result.valid is True
        assert len(result.warnings) == 1


class TestValidationResult:
    """Tests for the result container."""

    def test_to_dict(self):
        result = ValidationResult(errors=["x"], warnings=["y"])
        assert result.to_dict() == {"valid": False, "errors": ["x"], "warnings": ["y"]}

    def test_empty_is_valid(self):
        assert ValidationResult().valid is True
