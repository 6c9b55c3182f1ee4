"""Tests for filename utilities."""

import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from clickup_export.filename_utils import sanitize_filename, generate_slug


class TestSanitizeFilename:
    """Tests for sanitize_filename function."""

    def test_simple_title(self):
        """Titles should be lowercased with spaces turned into dashes."""
        assert sanitize_filename("Release Notes") == "release-notes"
        assert sanitize_filename("Handbook") == "handbook"

    def test_forbidden_characters(self):
        """Each forbidden character should become a dash."""
        assert sanitize_filename('a<b>c:d"e/f\\g|h?i*j') == "a-b-c-d-e-f-g-h-i-j"

    def test_control_characters(self):
        """Control characters should be removed from the output."""
        result = sanitize_filename("Tab\there\x00null\x1fend")
        assert result == "tab-here-null-end"
        assert not any(ord(c) < 32 for c in result)

    def test_underscores_and_whitespace_runs(self):
        """Runs of whitespace and underscores should collapse to one dash."""
        assert sanitize_filename("snake_case   and\n\nlines") == "snake-case-and-lines"

    def test_no_consecutive_dashes(self):
        """Consecutive dashes should be collapsed."""
        assert sanitize_filename("Q3 -- Plans: Draft?") == "q3-plans-draft"

    def test_strips_leading_and_trailing_dashes(self):
        """Leading and trailing dashes should be removed."""
        assert sanitize_filename("  --Hello--  ") == "hello"
        assert sanitize_filename("?What?") == "what"

    def test_length_limit(self):
        """Names should be cut to 100 characters."""
        result = sanitize_filename("a" * 250)
        assert len(result) == 100

    def test_truncation_does_not_leave_trailing_dash(self):
        """A dash at the cut point should be dropped."""
        result = sanitize_filename("a" * 99 + " rest of title")
        assert result == "a" * 99
        assert not result.endswith("-")

    def test_empty_fallback(self):
        """Titles with nothing usable should become 'unnamed'."""
        assert sanitize_filename("") == "unnamed"
        assert sanitize_filename("   ") == "unnamed"
        assert sanitize_filename("???///") == "unnamed"

    def test_unicode_is_kept(self):
        """Non-ASCII letters are safe and should be kept."""
        assert sanitize_filename("Café Menü") == "café-menü"

    def test_properties_hold_for_mixed_titles(self):
        """Every output should satisfy the safe-name rules."""
        titles = [
            'Weird <<title>> with "quotes"',
            "___leading underscores",
            "trailing dashes ---",
            "Tabs\t\tand\r\nnewlines",
            "x" * 98 + " :: " + "y" * 10,
        ]
        for title in titles:
            result = sanitize_filename(title)
            assert result == result.lower()
            assert not any(c in result for c in '<>:"/\\|?*')
            assert "--" not in result
            assert not result.startswith("-")
            assert not result.endswith("-")
            assert 0 < len(result) <= 100


class TestGenerateSlug:
    """Tests for generate_slug function."""

    def test_simple_title(self):
        """Simple titles should become dash-separated slugs."""
        assert generate_slug("Team Wiki") == "team-wiki"

    def test_drops_punctuation(self):
        """Non-word characters should be dropped, not replaced."""
        assert generate_slug("Team Wiki (2024)!") == "team-wiki-2024"

    def test_collapses_separators(self):
        """Underscores, spaces and dashes should collapse to one dash."""
        assert generate_slug("a_b - c") == "a-b-c"

    def test_empty_fallback(self):
        """Slugs with nothing left should become 'unnamed'."""
        assert generate_slug("!!!") == "unnamed"
