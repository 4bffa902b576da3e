"""Contract assembly: builder dispatch and the numbered document model."""

from core.assembly.assembler import CONTRACT_BUILDERS, build_generic, generate_contract
from core.assembly.document import LEGAL_DISCLAIMER, ContractDocument, RoleLabels, format_date

__all__ = [
    "CONTRACT_BUILDERS",
    "LEGAL_DISCLAIMER",
    "ContractDocument",
    "RoleLabels",
    "build_generic",
    "format_date",
    "generate_contract",
]
