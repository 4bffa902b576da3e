"""Unit tests for the text normalizer.

Tests cover:
- Emoji, slang and informal-word removal
- Whole-word matching (names containing informal tokens survive)
- Name and city/state capitalization
- Unprofessional language detection
- Emptiness rules for form values
- Whitespace cleanup and date standardization
"""

import pytest

from core.normalization.text_normalizer import (
    capitalize_name,
    clean_text,
    format_city_state,
    has_unprofessional_language,
    is_empty,
    sanitize_text,
    standardize_date,
)


class TestSanitizeText:
    """Tests for free-text sanitization."""

    def test_empty_input(self):
        """None and empty strings give an empty string."""
        assert sanitize_text(None) == ""
        assert sanitize_text("") == ""

    def test_strips_emoji(self):
        """Supplementary-plane emoji are removed."""
        assert sanitize_text("Great video 🔥🔥") == "Great video"

    def test_strips_misc_symbols(self):
        """Misc symbol and dingbat characters are removed."""
        assert sanitize_text("Sunny ☀ day ✨") == "Sunny day"

    def test_replaces_informal_words(self):
        """Informal words map to their formal replacements."""
        assert sanitize_text("yeah we're gonna post") == "yes we're going to post"
        assert sanitize_text("Nope") == "no"

    def test_removes_filler_phrases(self):
        """Hedging words are removed entirely."""
        assert sanitize_text("maybe two videos") == "two videos"
        assert sanitize_text("idk three posts") == "three posts"

    def test_removes_slang(self):
        """Slang acronyms are removed and whitespace collapsed."""
        assert sanitize_text("post it asap lol") == "post it"
        assert sanitize_text("OMG   this is   great") == "this is great"

    def test_whole_word_only(self):
        """Informal tokens inside other words are left alone."""
        assert sanitize_text("Noah") == "Noah"
        assert sanitize_text("Yeardley") == "Yeardley"
        assert sanitize_text("Pineapple lollipop") == "Pineapple lollipop"

    @pytest.mark.parametrize("text, expected", [
        ("i lol guess it works", "it works"),
        ("i 😊 guess so", "so"),
        ("i lol don't know", ""),
        ("maybe lol later we post", "we post"),
        ("i maybe guess it works", "it works"),
    ])
    def test_phrases_exposed_by_removal(self, text, expected):
        """Phrases joined up by removing slang, emoji or fillers are removed too."""
        assert sanitize_text(text) == expected

    @pytest.mark.parametrize("text", [
        "i lol guess it works",
        "i 😊 guess so",
        "yeah   gonna omg wanna 🔥 post",
        "Summer launch maybe later lol",
        "i maybe guess idk",
    ])
    def test_idempotent(self, text):
        once = sanitize_text(text)
        assert sanitize_text(once) == once

    def test_professional_text_unchanged(self):
        """Clean text passes through apart from trimming."""
        assert sanitize_text("  Three Instagram Reels  ") == "Three Instagram Reels"


class TestCapitalizeName:
    """Tests for name capitalization."""

    def test_simple_name(self):
        assert capitalize_name("jane doe") == "Jane Doe"

    def test_hyphenated_name(self):
        assert capitalize_name("mary-jane smith") == "Mary-Jane Smith"

    def test_uppercase_name_lowered(self):
        assert capitalize_name("JOHN O'NEIL") == "John O'neil"

    def test_empty(self):
        assert capitalize_name(None) == ""
        assert capitalize_name("") == ""


class TestFormatCityState:
    """Tests for city/state formatting."""

    def test_city_and_state(self):
        assert format_city_state("los angeles, ca") == "Los Angeles, CA"

    def test_single_part(self):
        assert format_city_state("new york city") == "New York City"

    def test_three_parts_capitalized_whole(self):
        """Input that is not exactly two parts is capitalized as a whole."""
        assert format_city_state("austin, tx, usa") == "Austin, Tx, Usa"

    def test_empty(self):
        assert format_city_state(None) == ""

    def test_idempotent(self):
        once = format_city_state("portland, or")
        assert format_city_state(once) == once


class TestUnprofessionalLanguage:
    """Tests for unprofessional language detection."""

    @pytest.mark.parametrize("text", [
        "lol this is great",
        "nah",
        "Great work 🎉",
        "we wanna collab",
        "I guess it works",
    ])
    def test_flags_informal_text(self, text):
        assert has_unprofessional_language(text) is True

    @pytest.mark.parametrize("text", [
        "Professional video content",
        "Noah Williams",
        None,
        "",
    ])
    def test_accepts_professional_text(self, text):
        assert has_unprofessional_language(text) is False


class TestIsEmpty:
    """Tests for the not-provided rules."""

    def test_none_is_empty(self):
        assert is_empty(None) is True

    def test_blank_strings(self):
        assert is_empty("") is True
        assert is_empty("   ") is True
        assert is_empty("x") is False

    def test_numbers_are_provided(self):
        assert is_empty(0) is False
        assert is_empty(0.0) is False
        assert is_empty(12) is False

    def test_other_types_are_empty(self):
        assert is_empty(True) is True
        assert is_empty([]) is True
        assert is_empty({"a": 1}) is True


class TestCleanupHelpers:
    """Tests for whitespace cleanup and date formatting."""

    def test_clean_text(self):
        assert clean_text("  a   b\n c ") == "a b c"
        assert clean_text(None) == ""

    def test_standardize_iso_date(self):
        assert standardize_date("2025-03-01") == "March 1, 2025"

    def test_standardize_us_date(self):
        assert standardize_date("12/25/2024") == "December 25, 2024"

    def test_unparseable_date_unchanged(self):
        assert standardize_date("end of Q3") == "end of Q3"

    def test_empty_date(self):
        assert standardize_date(None) == ""
