"""Integration tests for the end-to-end contract pipeline.

Tests cover:
- Raw wizard forms through sanitize, validate, assemble and parse
- Vague placeholder answers reported as missing
- Warnings computed from the raw input
- Export gating on validation
- Pipeline configuration flags
"""

from datetime import datetime, timezone

import pytest

from core.assembly.document import LEGAL_DISCLAIMER
from core.contracts.types import ContractForm, ContractType
from core.export.plain_text import export_plain_text
from core.pipeline import ContractPipeline, contract_pipeline


# Raw wizard payloads, as the frontend posts them.
SAMPLE_FORMS = {
    "brand_sponsorship": {
        "category": "brand",
        "contractType": "brand_sponsorship",
        "creatorName": "jane doe",
        "creatorCityState": "los angeles, ca",
        "counterpartyName": "glow skincare",
        "counterpartyRoleLabel": "Brand",
        "projectTitle": "Summer Glow Campaign",
        "deliverableType": "Instagram Reels",
        "deliverableCount": 3,
        "platforms": "Instagram and TikTok",
        "scheduleDescription": "2 weeks",
        "feeAmount": 3000,
        "currency": "USD",
        "paymentSchedule": "50% upfront, 50% on delivery",
        "licenseDurationText": "6 months",
        "hasExclusivity": True,
        "exclusivityScope": "standard",
        "exclusivityDuration": "60 days",
    },
    "service_editor": {
        "category": "service_provider",
        "contractType": "service_editor",
        "creatorName": "sam park",
        "creatorRoleLabel": "Editor",
        "counterpartyName": "river media",
        "deliverableType": "Four long-form YouTube edits per month",
        "includedRevisions": 2,
        "extraRevisionFeeText": "USD 40 per round",
        "feeType": "per_deliverable",
        "feeAmount": 250,
    },
    "guest_release": {
        "category": "rights_release",
        "contractType": "guest_release",
        "creatorName": "ana lima",
        "counterpartyName": "ben ortiz",
        "releaseeName": "ben ortiz",
        "releaseeRole": "podcast guest",
        "allowedUsesText": "Podcast episodes and promotional clips",
        "hasCompensation": False,
    },
}


@pytest.fixture
def pipeline() -> ContractPipeline:
    """Pipeline with default settings."""
    return ContractPipeline()


def load(name: str, **overrides) -> ContractForm:
    return ContractForm.model_validate({**SAMPLE_FORMS[name], **overrides})


class TestPreview:
    """Tests for the full preview flow."""

    @pytest.mark.parametrize("name", list(SAMPLE_FORMS))
    def test_sample_forms_are_valid(self, pipeline, name):
        preview = pipeline.preview(load(name))

        assert preview.validation.valid is True, preview.validation.errors
        assert preview.contract.startswith(preview.title)
        assert preview.contract.endswith(LEGAL_DISCLAIMER)
        assert preview.sections[-1].title == "DISCLAIMER"

    def test_brand_deal_content(self, pipeline):
        preview = pipeline.preview(load("brand_sponsorship"))
        contract = preview.contract

        assert preview.title == "BRAND SPONSORSHIP AGREEMENT"
        assert 'Jane Doe ("Creator") and Glow Skincare ("Brand")' in contract
        assert "Creator will produce the following deliverables: 3 Instagram Reels." in contract
        assert "Content will be published on Instagram and TikTok." in contract
        assert "a total fee of USD 3,000" in contract
        assert "in effect for 60 days" in contract
        assert "laws of CA" in contract
        assert [s.title for s in preview.sections if s.number][4] == "EXCLUSIVITY"

    def test_service_contract_content(self, pipeline):
        contract = pipeline.preview(load("service_editor")).contract

        assert 'Sam Park ("Editor") and River Media ("Client")' in contract
        assert "Client agrees to pay Editor USD 250 per deliverable" in contract
        assert "up to 2 rounds of revisions" in contract

    def test_unpaid_release(self, pipeline):
        preview = pipeline.preview(load("guest_release"))

        assert "unpaid collaboration in which Guest provides content" in preview.contract
        assert "Guest: Ben Ortiz, appearing as podcast guest." in preview.contract
        assert "USD" not in preview.contract

    def test_preview_to_dict(self, pipeline):
        data = pipeline.preview(load("guest_release")).to_dict()

        assert data["form"]["creatorName"] == "Ana Lima"
        assert data["validation"]["valid"] is True
        assert data["title"] == "GUEST RELEASE"
        assert data["sections"][0]["number"] == "1"


class TestValidationFlow:
    """Tests for validation inside the pipeline."""

    def test_vague_answers_reported_missing(self, pipeline):
        result = pipeline.validate(load("service_editor", deliverableType="tbd"))
        assert result.errors == ["Deliverable type must be specified"]

    def test_vague_answers_kept_when_flag_off(self):
        lenient = ContractPipeline(flag_vague_inputs=False)
        assert lenient.validate(load("service_editor", deliverableType="tbd")).valid is True

    def test_warnings_from_raw_input(self, pipeline):
        preview = pipeline.preview(load("brand_sponsorship", projectTitle="Summer Glow lol"))

        assert preview.form.project_title == "Summer Glow"
        assert preview.validation.warnings == [
            "Project title contains informal language. Please use professional terms."
        ]
        assert preview.validation.valid is True

    def test_errors_do_not_block_preview(self, pipeline):
        preview = pipeline.preview(ContractForm(contract_type=ContractType.REVENUE_SHARE_PROJECT.value))

        assert preview.validation.valid is False
        assert preview.contract.startswith("REVENUE SHARE AGREEMENT")


class TestExport:
    """Tests for export gating."""

    def test_export_valid(self, pipeline):
        preview, exported = pipeline.export(load("service_editor"))

        assert exported is not None
        assert exported.filename.startswith("service-editor-")
        assert exported.content.startswith(preview.contract.rstrip())
        assert "Sam Park\nEditor" in exported.content

    def test_export_blocked_when_invalid(self, pipeline):
        preview, exported = pipeline.export(load("service_editor", feeAmount=None))

        assert exported is None
        assert preview.validation.errors == ["Fee amount must be specified"]

    def test_export_without_signatures(self):
        quiet = ContractPipeline(include_signatures=False)
        _, exported = quiet.export(load("guest_release"))
        assert "SIGNATURES" not in exported.content

    def test_export_is_deterministic_for_fixed_time(self, pipeline):
        preview = pipeline.preview(load("guest_release"))
        moment = datetime(2025, 1, 1, tzinfo=timezone.utc)

        first = export_plain_text(preview.contract, preview.form, now=moment)
        second = export_plain_text(preview.contract, preview.form, now=moment)
        assert first == second


def test_singleton_pipeline():
    """Test the module-level pipeline uses default settings."""
    assert contract_pipeline.flag_vague_inputs is True
    assert contract_pipeline.include_signatures is True
