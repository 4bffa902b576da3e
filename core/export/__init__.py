"""Export helpers: section parsing and plain-text rendering."""

from core.export.plain_text import ExportedContract, export_filename, export_plain_text, signature_block
from core.export.section_parser import ParsedSection, is_placeholder, parse_contract_sections

__all__ = [
    "ExportedContract",
    "ParsedSection",
    "export_filename",
    "export_plain_text",
    "is_placeholder",
    "parse_contract_sections",
    "signature_block",
]
