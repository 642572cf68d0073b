"""Tests for viewer embed reference extraction and validation."""

import pytest

from heritage_archive.embeds import (
    ALLOWED_VIEWER_HOST,
    EmbedResolution,
    extract_reference,
    is_valid_reference,
    resolve_reference,
)

VIEWER_URL = "https://superspl.at/s?id=eec7679f"


class TestExtractReference:
    """Tests for extract_reference."""

    def test_url_returned_unchanged(self):
        """Input starting with http is returned as-is."""
        assert extract_reference(VIEWER_URL) == VIEWER_URL

    def test_non_viewer_url_returned_unchanged(self):
        """Extraction does not judge the host; validation does."""
        assert extract_reference("https://example.com/x") == "https://example.com/x"

    def test_iframe_src_extracted(self):
        """The src of a viewer iframe is extracted."""
        snippet = f'<iframe width="800" height="500" src="{VIEWER_URL}" frameborder="0"></iframe>'
        assert extract_reference(snippet) == VIEWER_URL

    def test_iframe_with_single_quotes(self):
        snippet = f"<iframe src='{VIEWER_URL}' allowfullscreen></iframe>"
        assert extract_reference(snippet) == VIEWER_URL

    def test_iframe_tag_case_insensitive(self):
        snippet = f'<IFRAME SRC="{VIEWER_URL}"></IFRAME>'
        assert extract_reference(snippet) == VIEWER_URL

    def test_first_matching_iframe_wins(self):
        snippet = (
            '<iframe src="https://superspl.at/s?id=first"></iframe>'
            '<iframe src="https://superspl.at/s?id=second"></iframe>'
        )
        assert extract_reference(snippet) == "https://superspl.at/s?id=first"

    def test_iframe_for_other_host_not_extracted(self):
        """Only iframes pointing at the viewer host are extracted."""
        snippet = '<iframe src="https://example.com/embed"></iframe>'
        assert extract_reference(snippet) == snippet

    def test_plain_text_returned_unchanged(self):
        assert extract_reference("not a url") == "not a url"

    def test_empty_string(self):
        assert extract_reference("") == ""


class TestIsValidReference:
    """Tests for is_valid_reference."""

    def test_viewer_url_valid(self):
        assert is_valid_reference(VIEWER_URL) is True

    def test_http_viewer_url_valid(self):
        assert is_valid_reference("http://superspl.at/s?id=1") is True

    def test_host_compared_exactly(self):
        """Subdomains and look-alike hosts are rejected."""
        assert is_valid_reference("https://www.superspl.at/s?id=1") is False
        assert is_valid_reference("https://superspl.at.evil.com/s?id=1") is False

    def test_host_case_insensitive(self):
        assert is_valid_reference("https://SUPERSPL.AT/s?id=1") is True

    def test_other_host_invalid(self):
        assert is_valid_reference("https://example.com/s?id=1") is False

    @pytest.mark.parametrize("value", ["", "not a url", "superspl.at/s?id=1", "//superspl.at/x"])
    def test_non_absolute_urls_invalid(self, value):
        assert is_valid_reference(value) is False

    def test_malformed_url_invalid(self):
        """Unparseable input is reported as invalid, not raised."""
        assert is_valid_reference("http://[superspl.at") is False


class TestResolveReference:
    """Tests for resolve_reference."""

    def test_resolves_iframe(self):
        result = resolve_reference(f'<iframe src="{VIEWER_URL}"></iframe>')
        assert result == EmbedResolution(url=VIEWER_URL, valid=True)

    def test_reports_invalid_input(self):
        result = resolve_reference("hello world")
        assert result.url == "hello world"
        assert result.valid is False

    def test_allowed_host_constant(self):
        assert ALLOWED_VIEWER_HOST == "superspl.at"
