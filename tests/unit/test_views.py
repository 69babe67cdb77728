"""Tests for web view utility functions."""

from meetnotes.api.web.views import preview


class TestPreview:
    """Tests for preview."""

    def test_short_text_unchanged(self):
        assert preview("Short summary.") == "Short summary."

    def test_collapses_whitespace(self):
        assert preview("- one\n- two\n\n- three") == "- one - two - three"

    def test_cuts_on_word_boundary(self):
        result = preview("alpha beta gamma delta", limit=12)
        assert result == "alpha beta…"

    def test_single_long_word(self):
        result = preview("x" * 30, limit=10)
        assert result == "x" * 10 + "…"

    def test_exact_limit_not_cut(self):
        assert preview("abcde", limit=5) == "abcde"

    def test_empty(self):
        assert preview("") == ""
