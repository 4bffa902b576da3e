"""End-to-end contract pipeline.

Runs the stages in the order the wizard uses them:

    raw form -> sanitize_form -> (apply_expansion_logic) -> validate_contract
             -> generate_contract -> parse_contract_sections

Validation never blocks assembly; errors are reported alongside the text
and only gate export.

Usage:
    from core.pipeline import contract_pipeline

    preview = contract_pipeline.preview(form)
    print(preview.validation.valid, preview.contract)
"""

import logging
from dataclasses import dataclass, field
from typing import Any

from core.assembly.assembler import generate_contract
from core.contracts.types import ContractForm, title_for
from core.expansion.input_expander import apply_expansion_logic
from core.export.plain_text import ExportedContract, export_plain_text
from core.export.section_parser import ParsedSection, parse_contract_sections
from core.validation.form_sanitizer import sanitize_form
from core.validation.validator import ValidationResult, professionalism_warnings, validate_contract


logger = logging.getLogger("clausecraft.pipeline")


@dataclass
class ContractPreview:
    """Everything the UI shows for one render of the review step."""
    form: ContractForm
    validation: ValidationResult
    title: str
    contract: str
    sections: list[ParsedSection] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "form": self.form.model_dump(by_alias=True),
            "validation": self.validation.to_dict(),
            "title": self.title,
            "contract": self.contract,
            "sections": [section.to_dict() for section in self.sections],
        }


class ContractPipeline:
    """Sanitize, validate and assemble contract forms.

    Args:
        flag_vague_inputs: Blank vague placeholder answers ("idk", "tbd")
            before validation so they are reported as missing.
        include_signatures: Append a signature block on export.
    """

    def __init__(self, flag_vague_inputs: bool = True, include_signatures: bool = True):
        self.flag_vague_inputs = flag_vague_inputs
        self.include_signatures = include_signatures

    def prepare(self, form: ContractForm) -> ContractForm:
        """Sanitize the form and, if enabled, blank vague answers."""
        prepared = sanitize_form(form)
        if self.flag_vague_inputs:
            prepared = apply_expansion_logic(prepared)
        return prepared

    def _validate(self, raw: ContractForm, prepared: ContractForm) -> ValidationResult:
        result = validate_contract(prepared, prepared.contract_type)
        # Sanitizing removes what the warnings flag, so they come from the raw input.
        result.warnings = professionalism_warnings(raw)
        return result

    def validate(self, form: ContractForm) -> ValidationResult:
        return self._validate(form, self.prepare(form))

    def preview(self, form: ContractForm) -> ContractPreview:
        """Run every stage and return the review-step preview."""
        prepared = self.prepare(form)
        validation = self._validate(form, prepared)

        contract = generate_contract(prepared)
        sections = parse_contract_sections(contract)

        logger.info(
            "Generated %s: %d sections, %d errors, %d warnings",
            prepared.contract_type,
            len(sections),
            len(validation.errors),
            len(validation.warnings),
        )
        return ContractPreview(
            form=prepared,
            validation=validation,
            title=title_for(prepared.contract_type),
            contract=contract,
            sections=sections,
        )

    def export(self, form: ContractForm) -> tuple[ContractPreview, ExportedContract | None]:
        """Build the preview and, when the form is valid, the plain-text export."""
        preview = self.preview(form)
        if not preview.validation.valid:
            logger.info("Export blocked for %s: %s", preview.form.contract_type, preview.validation.errors)
            return preview, None
        exported = export_plain_text(preview.contract, preview.form, include_signatures=self.include_signatures)
        return preview, exported


# Singleton instance for convenience
contract_pipeline = ContractPipeline()
