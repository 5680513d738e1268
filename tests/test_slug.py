"""Tests for slug sanitization."""

import pytest

from presspack.slug import remove_accents, sanitize_title_with_dashes


class TestSanitizeTitleWithDashes:
    """Test slug sanitization rules."""

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("akismet", "akismet"),
            ("Hello Dolly", "hello-dolly"),
            ("my_plugin", "my_plugin"),
            ("jetpack.beta", "jetpack-beta"),
            ("  spaced   out  ", "spaced-out"),
            ("--edge--", "edge"),
            ("a & b", "a-b"),
            ("Tom &amp; Jerry", "tom-jerry"),
            ("<b>bold</b> move", "bold-move"),
            ("café-crème", "cafe-creme"),
            ("100% free!", "100-free"),
        ],
    )
    def test_rules(self, raw: str, expected: str) -> None:
        """Test documented transformation rules."""
        assert sanitize_title_with_dashes(raw) == expected

    def test_only_disallowed(self) -> None:
        """Test input made only of disallowed characters."""
        assert sanitize_title_with_dashes("!!!") == ""

    def test_slash_removed(self) -> None:
        """Test that nested directory separators are dropped."""
        assert sanitize_title_with_dashes("vendor/plugin") == "vendorplugin"


class TestRemoveAccents:
    """Test accent folding."""

    def test_fold(self) -> None:
        """Test folding accented letters."""
        assert remove_accents("Ångström") == "Angstrom"

    def test_plain(self) -> None:
        """Test ASCII input is untouched."""
        assert remove_accents("plain") == "plain"
