"""Re-segment assembled contract text into sections.

Export renderers lay out each section themselves, so they need the
contract as structured data rather than one string. The parser skips a
known title line, splits on numbered headings and drops placeholder lines
and empty sections.

Usage:
    from core.export.section_parser import parse_contract_sections

    for section in parse_contract_sections(contract_text):
        print(section.number, section.title, len(section.content))
"""

import re
from dataclasses import asdict, dataclass, field
from typing import Any

from core.contracts.types import CONTRACT_TITLES, GENERIC_CONTRACT_TITLE


NUMBERED_HEADING = re.compile(r"^(\d+)\.\s+([A-Z\s&]+)$")
UNNUMBERED_HEADING = re.compile(r"^[A-Z][A-Z\s&]{3,}$")

PLACEHOLDER_PATTERNS = [
    re.compile(r"^\[.*\]$"),
    re.compile(r"^_+$"),
]
PLACEHOLDER_VALUES = frozenset({"N/A", "TBD"})

# Renderers draw their own signature block.
SKIPPED_SECTIONS = frozenset({"SIGNATURES"})

KNOWN_TITLES = frozenset(CONTRACT_TITLES.values()) | {GENERIC_CONTRACT_TITLE}


@dataclass
class ParsedSection:
    """A section recovered from contract text."""
    number: str | None
    title: str
    content: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def is_placeholder(text: str) -> bool:
    """True for blank lines, bracketed placeholders, underscores, N/A and TBD."""
    trimmed = text.strip()
    if not trimmed:
        return True
    if trimmed in PLACEHOLDER_VALUES:
        return True
    return any(pattern.match(trimmed) for pattern in PLACEHOLDER_PATTERNS)


def parse_contract_sections(contract_text: str) -> list[ParsedSection]:
    """Split contract text into sections.

    Numbered headings ("3. COMPENSATION") start numbered sections. Any
    other all-caps line (such as the closing DISCLAIMER) starts an
    unnumbered section, unless it only repeats the current heading.

    Args:
        contract_text: Output of ``generate_contract``.

    Returns:
        Sections in document order, each with at least one content line.
    """
    lines = contract_text.split("\n")
    if lines and lines[0].strip() in KNOWN_TITLES:
        lines = lines[1:]

    sections: list[ParsedSection] = []
    current: ParsedSection | None = None

    for line in lines:
        trimmed = line.strip()
        if not trimmed:
            continue

        match = NUMBERED_HEADING.match(trimmed)
        if match:
            title = match.group(2).strip()
            current = None if title in SKIPPED_SECTIONS else ParsedSection(number=match.group(1), title=title)
            if current:
                sections.append(current)
            continue

        if UNNUMBERED_HEADING.match(trimmed):
            if current and trimmed == current.title:
                continue
            current = None if trimmed in SKIPPED_SECTIONS else ParsedSection(number=None, title=trimmed)
            if current:
                sections.append(current)
            continue

        if current and not is_placeholder(trimmed):
            current.content.append(trimmed)

    return [section for section in sections if section.content]
