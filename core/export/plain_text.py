"""Plain-text contract export with a signature block.

Usage:
    from core.export.plain_text import export_plain_text

    exported = export_plain_text(contract_text, form)
    Path(exported.filename).write_text(exported.content)
"""

import logging
from dataclasses import dataclass
from datetime import datetime

from core.contracts.types import ContractForm
from core.normalization.text_normalizer import capitalize_name, clean_text, is_empty, standardize_date


logger = logging.getLogger("clausecraft.export")

SIGNATURE_LINE = "_" * 60
DATE_LINE = "Date: ___________________"


@dataclass
class ExportedContract:
    """A rendered file ready for download."""
    filename: str
    content: str
    media_type: str = "text/plain"


def _signature_entry(name: str | None, role_label: str | None, placeholder: str, default_role: str) -> list[str]:
    display_name = capitalize_name(clean_text(name)) or placeholder
    role = clean_text(role_label) or default_role
    return [SIGNATURE_LINE, display_name, role, DATE_LINE]


def signature_block(form: ContractForm) -> str:
    """Signature lines for both parties, with name placeholders when missing."""
    lines = ["SIGNATURES", ""]
    if not is_empty(form.start_date):
        lines.extend([f"Effective Date: {standardize_date(form.start_date)}", ""])
    lines.extend(_signature_entry(form.creator_name, form.creator_role_label, "[Creator Name]", "Creator"))
    lines.append("")
    lines.extend(
        _signature_entry(form.counterparty_name, form.counterparty_role_label, "[Counterparty Name]", "Client")
    )
    return "\n".join(lines) + "\n"


def export_filename(contract_type: str, extension: str = "txt", now: datetime | None = None) -> str:
    """Build ``{contract-type}-{epoch millis}.{extension}``."""
    moment = now or datetime.now()
    stamp = int(moment.timestamp() * 1000)
    slug = (contract_type or "contract").replace("_", "-")
    return f"{slug}-{stamp}.{extension}"


def export_plain_text(
    contract: str,
    form: ContractForm,
    include_signatures: bool = True,
    now: datetime | None = None,
) -> ExportedContract:
    """Render assembled contract text as a downloadable text file.

    Args:
        contract: Output of ``generate_contract``.
        form: The sanitized form the contract was built from.
        include_signatures: Append the signature block.
        now: Timestamp for the filename; defaults to the current time.

    Returns:
        ExportedContract with filename and file content.
    """
    content = contract.rstrip() + "\n"
    if include_signatures:
        content += "\n" + signature_block(form)

    filename = export_filename(form.contract_type, "txt", now)
    logger.info("Exported %s (%d chars)", filename, len(content))
    return ExportedContract(filename=filename, content=content)
