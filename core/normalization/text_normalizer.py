"""Text Normalization Utilities for Contract Form Input.

This module provides the pure string transforms applied to free-text wizard
fields before validation and assembly: emoji stripping, informal-word
substitution, slang removal, and name / city-state capitalization. Every
function is total: it accepts None and never raises.

Usage:
    from core.normalization.text_normalizer import sanitize_text, capitalize_name

    sanitize_text("yeah we're gonna post lol")
    # -> "yes we're going to post"
    capitalize_name("mary-jane smith")
    # -> "Mary-Jane Smith"
"""

import re
from datetime import datetime
from typing import Any


# Informal token -> formal replacement ("" removes the token).
INFORMAL_WORDS: dict[str, str] = {
    "nah": "no",
    "nope": "no",
    "yeah": "yes",
    "yep": "yes",
    "idk": "",
    "i don't know": "",
    "maybe": "",
    "maybe later": "",
    "probably": "",
    "i guess": "",
    "dunno": "",
    "gonna": "going to",
    "wanna": "want to",
    "gotta": "have to",
    "kinda": "kind of",
    "sorta": "sort of",
}

# Slang acronyms removed outright.
SLANG_TERMS: tuple[str, ...] = (
    "lol", "lmao", "omg", "wtf", "tbh", "imo", "fyi", "asap", "brb", "btw",
)

# Supplementary-plane pictographs plus the Misc Symbols / Dingbats block.
EMOJI_PATTERN = re.compile(r"[\U00010000-\U0010FFFF☀-➿]")

WHITESPACE_PATTERN = re.compile(r"\s+")

# Longest phrases first so "maybe later" wins over "maybe".
_INFORMAL_PATTERNS: list[tuple[re.Pattern, str]] = [
    (re.compile(r"\b" + re.escape(word) + r"\b", re.IGNORECASE), INFORMAL_WORDS[word])
    for word in sorted(INFORMAL_WORDS, key=len, reverse=True)
]

_SLANG_PATTERNS: list[re.Pattern] = [
    re.compile(r"\b" + term + r"\b", re.IGNORECASE) for term in SLANG_TERMS
]

DATE_INPUT_FORMATS = ("%Y-%m-%d", "%m/%d/%Y", "%B %d %Y", "%b %d %Y")


def sanitize_text(text: str | None) -> str:
    """Remove emoji, slang and informal language from free text.

    Args:
        text: Raw user input.

    Returns:
        The cleaned text with whitespace collapsed, or "" for empty input.
        Sanitizing the result again returns it unchanged.
    """
    if not text:
        return ""

    sanitized = EMOJI_PATTERN.sub("", text)
    for pattern in _SLANG_PATTERNS:
        sanitized = pattern.sub("", sanitized)
    sanitized = WHITESPACE_PATTERN.sub(" ", sanitized).strip()

    # Removing a phrase can join its neighbours into another one ("i maybe guess").
    previous = None
    while sanitized != previous:
        previous = sanitized
        for pattern, replacement in _INFORMAL_PATTERNS:
            sanitized = pattern.sub(replacement, sanitized)
        sanitized = WHITESPACE_PATTERN.sub(" ", sanitized).strip()

    return sanitized


def _capitalize_word(word: str) -> str:
    if not word:
        return ""
    return word[0].upper() + word[1:].lower()


def capitalize_name(name: str | None) -> str:
    """Title-case a personal or place name.

    Hyphenated words are capitalized part by part, so ``"mary-jane"``
    becomes ``"Mary-Jane"``.
    """
    if not name:
        return ""

    words = []
    for word in name.strip().split(" "):
        if "-" in word:
            words.append("-".join(_capitalize_word(part) for part in word.split("-")))
        else:
            words.append(_capitalize_word(word))
    return " ".join(words)


def format_city_state(city_state: str | None) -> str:
    """Format a "city, state" string as ``"City, ST"``.

    Input that does not split into exactly two comma-separated parts is
    returned sanitized and title-cased as a whole.
    """
    if not city_state:
        return ""

    sanitized = sanitize_text(city_state)
    parts = [part.strip() for part in sanitized.split(",")]

    if len(parts) == 2:
        return f"{capitalize_name(parts[0])}, {parts[1].upper()}"

    return capitalize_name(sanitized)


def has_unprofessional_language(text: str | None) -> bool:
    """Check raw text for emoji, slang acronyms or informal words."""
    if not text:
        return False

    if EMOJI_PATTERN.search(text):
        return True

    if any(pattern.search(text) for pattern in _SLANG_PATTERNS):
        return True

    return any(pattern.search(text) for pattern, _ in _INFORMAL_PATTERNS)


def is_empty(value: Any) -> bool:
    """Return True when a form value counts as "not provided".

    Numbers (including 0) are always considered provided; strings are empty
    when blank after trimming; None, booleans and other types are empty.
    """
    if value is None:
        return True
    if isinstance(value, bool):
        return True
    if isinstance(value, str):
        return len(value.strip()) == 0
    if isinstance(value, (int, float)):
        return False
    return True


def clean_text(text: str | None) -> str:
    """Collapse runs of whitespace and trim."""
    if not text:
        return ""
    return WHITESPACE_PATTERN.sub(" ", text.strip())


def standardize_date(date_str: str | None) -> str:
    """Render a date as ``"Month D, YYYY"``.

    Unrecognized input is returned unchanged so free-text dates such as
    "end of Q3" survive.
    """
    if not date_str:
        return ""

    candidate = date_str.strip().replace(",", "")
    for fmt in DATE_INPUT_FORMATS:
        try:
            parsed = datetime.strptime(candidate, fmt)
        except ValueError:
            continue
        return f"{parsed:%B} {parsed.day}, {parsed.year}"
    return date_str
