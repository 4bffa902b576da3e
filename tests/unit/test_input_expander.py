"""Unit tests for vague input expansion.

Tests cover:
- Platform, deliverable and timeline expansion
- Paid and unpaid compensation clauses
- Usage rights keywords and license duration handling
- Exclusivity clause defaults
- Vague placeholder blanking on whole forms
"""

import pytest

from core.contracts.types import ContractForm
from core.expansion.input_expander import (
    DEFAULT_PLATFORMS_CLAUSE,
    apply_expansion_logic,
    expand_compensation,
    expand_deliverable_type,
    expand_exclusivity,
    expand_platforms,
    expand_timeline,
    expand_usage_rights,
    format_amount,
    sanitize_vague_input,
)


class TestExpandPlatforms:
    """Tests for platform expansion."""

    def test_specific_platforms(self):
        assert expand_platforms("YouTube and TikTok") == "on YouTube and TikTok"

    @pytest.mark.parametrize("value", [None, "", "any", "ALL", " social media ", "sm", "everywhere"])
    def test_vague_platforms(self, value):
        assert expand_platforms(value) == DEFAULT_PLATFORMS_CLAUSE


class TestExpandDeliverableType:
    """Tests for deliverable scope expansion."""

    def test_specific_deliverable(self):
        text = expand_deliverable_type("3 Instagram Reels", "Creator", "Brand")
        assert text.startswith("Creator will produce the following deliverables: 3 Instagram Reels.")
        assert "aligned with Brand's brand objectives" in text

    @pytest.mark.parametrize("value", [None, "tbd", "whatever", "NA"])
    def test_vague_deliverable(self, value):
        text = expand_deliverable_type(value, "Editor", "Client")
        assert text.startswith("Editor will produce deliverables as mutually agreed upon by both parties.")


class TestExpandTimeline:
    """Tests for timeline expansion."""

    def test_specific_creator_timeline(self):
        text = expand_timeline("2 weeks", True, "Creator", "Brand")
        assert text == (
            "Creator will deliver the agreed-upon content within 2 weeks "
            "unless otherwise mutually extended in writing."
        )

    @pytest.mark.parametrize("value", ["asap", "Soon", "quick", "FAST"])
    def test_urgent_becomes_seven_days(self, value):
        assert "within 7 days" in expand_timeline(value)

    def test_vague_creator_timeline(self):
        assert "within a reasonable timeframe" in expand_timeline("tbd")

    def test_client_feedback_timeline(self):
        text = expand_timeline("5 days", False, "Creator", "Brand")
        assert text.startswith("Brand shall provide feedback within 5 days of receiving the deliverable.")

    def test_client_feedback_missing(self):
        text = expand_timeline(None, False, "Creator", "Brand")
        assert text == (
            "Brand shall provide feedback within a reasonable timeframe. "
            "Failure to respond will be deemed automatic approval."
        )


class TestExpandCompensation:
    """Tests for compensation clauses."""

    def test_unpaid(self):
        text = expand_compensation(False, 500, "USD", "Creator", "Brand")
        assert text.startswith("This is an unpaid collaboration in which Creator provides content")
        assert "USD" not in text

    def test_paid_with_amount(self):
        text = expand_compensation(True, 2500, "EUR", "Creator", "Brand")
        assert "Brand agrees to pay Creator a total fee of EUR 2,500" in text

    def test_paid_default_currency(self):
        assert "USD 1,000" in expand_compensation(True, 1000)

    def test_paid_without_amount(self):
        text = expand_compensation(True, None, None, "Creator", "Brand")
        assert text.startswith("Brand agrees to compensate Creator for the services described herein.")

    def test_format_amount(self):
        assert format_amount(1500) == "1,500"
        assert format_amount(1500.0) == "1,500"
        assert format_amount(99.5) == "99.5"
        assert format_amount(1234.125) == "1,234.125"


class TestExpandUsageRights:
    """Tests for usage rights expansion."""

    def test_default_rights(self):
        text = expand_usage_rights(None, None, "Creator", "Brand")
        assert text.startswith("Brand is granted a non-exclusive, worldwide license for marketing")
        assert text.endswith(
            "Creator retains all underlying intellectual property rights and ownership of the content."
        )

    def test_broad_rights_become_perpetual(self):
        assert "perpetual license" in expand_usage_rights("full rights")

    def test_keyword_rights(self):
        assert "exclusive, worldwide license" in expand_usage_rights("exclusive")
        assert "limited, non-exclusive license" in expand_usage_rights("Limited")

    def test_custom_rights_kept(self):
        text = expand_usage_rights("license to repost on owned channels")
        assert "is granted a license to repost on owned channels." in text

    def test_duration_appended(self):
        assert "This license is valid for 12 months." in expand_usage_rights(None, "12 months")

    @pytest.mark.parametrize("duration", ["perpetual", "Forever", "unlimited"])
    def test_open_ended_duration_omitted(self, duration):
        assert "This license is valid for" not in expand_usage_rights(None, duration)


class TestExpandExclusivity:
    """Tests for exclusivity expansion."""

    def test_disabled(self):
        assert expand_exclusivity(False, "anything", "1 year") == ""

    def test_standard_scope(self):
        text = expand_exclusivity(True, "standard", None, "Creator", "Brand")
        assert text.startswith("Creator agrees not to enter into any paid partnerships with direct competitors of Brand")
        assert "in effect for the duration of this Agreement." in text

    def test_custom_scope_and_duration(self):
        text = expand_exclusivity(True, "No energy drink sponsorships", "90 days")
        assert text.startswith("No energy drink sponsorships.")
        assert "in effect for 90 days." in text


class TestVagueInputs:
    """Tests for placeholder blanking."""

    @pytest.mark.parametrize("value", ["idk", "N/A", " tbd ", "none", "Whatever", "nah"])
    def test_vague_terms_blanked(self, value):
        assert sanitize_vague_input(value) == ""

    def test_real_value_trimmed(self):
        assert sanitize_vague_input("  Two vlogs  ") == "Two vlogs"
        assert sanitize_vague_input(None) == ""

    def test_apply_expansion_logic(self):
        form = ContractForm(
            creator_name="Ana",
            project_description="tbd",
            deliverable_type="3 reels",
            allowed_uses_text="n/a",
            platforms="any",
        )

        expanded = apply_expansion_logic(form)

        assert expanded.project_description == ""
        assert expanded.deliverable_type == "3 reels"
        assert expanded.allowed_uses_text == ""
        # Fields outside the vague-check set pass through untouched.
        assert expanded.platforms == "any"
        assert form.project_description == "tbd"
