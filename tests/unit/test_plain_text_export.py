"""Unit tests for plain-text export.

Tests cover:
- Signature block with names, roles and placeholders
- Effective date line
- Export filename format
- Export content with and without signatures
"""

from datetime import datetime, timezone

import pytest

from core.contracts.types import ContractForm
from core.export.plain_text import (
    DATE_LINE,
    SIGNATURE_LINE,
    export_filename,
    export_plain_text,
    signature_block,
)


@pytest.fixture
def form():
    """A sanitized brand deal form."""
    return ContractForm(
        contract_type="brand_sponsorship",
        creator_name="ana  lima",
        creator_role_label="Creator",
        counterparty_name="Acme Co",
        counterparty_role_label="Brand",
        start_date="2025-03-01",
    )


class TestSignatureBlock:
    """Tests for signature_block."""

    def test_names_and_roles(self, form):
        block = signature_block(form)

        assert block.startswith("SIGNATURES\n\n")
        assert "Effective Date: March 1, 2025" in block
        assert "Ana Lima\nCreator" in block
        assert "Acme Co\nBrand" in block
        assert block.count(SIGNATURE_LINE) == 2
        assert block.count(DATE_LINE) == 2

    def test_placeholders_when_missing(self):
        block = signature_block(ContractForm(creator_role_label="", counterparty_role_label=""))

        assert "[Creator Name]\nCreator" in block
        assert "[Counterparty Name]\nClient" in block
        assert "Effective Date" not in block


class TestExportFilename:
    """Tests for export_filename."""

    def test_format(self):
        moment = datetime(2025, 1, 1, tzinfo=timezone.utc)
        assert export_filename("brand_sponsorship", "txt", moment) == "brand-sponsorship-1735689600000.txt"

    def test_missing_type(self):
        moment = datetime(2025, 1, 1, tzinfo=timezone.utc)
        assert export_filename("", "pdf", moment).startswith("contract-")


class TestExportPlainText:
    """Tests for export_plain_text."""

    def test_with_signatures(self, form):
        exported = export_plain_text("TITLE\n\n1. TERMS\n\nText.\n\n", form)

        assert exported.media_type == "text/plain"
        assert exported.filename.startswith("brand-sponsorship-")
        assert exported.filename.endswith(".txt")
        assert exported.content.startswith("TITLE\n\n1. TERMS\n\nText.\n\nSIGNATURES")

    def test_without_signatures(self, form):
        exported = export_plain_text("TITLE\n\nText.\n\n\n", form, include_signatures=False)
        assert exported.content == "TITLE\n\nText.\n"
