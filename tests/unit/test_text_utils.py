"""
Unit tests for escaping and description building.
"""

from preview_core.text_utils import (
    MAX_DESCRIPTION_LENGTH,
    build_description,
    escape_html,
    strip_tags,
)


class TestEscapeHtml:
    """Tests for escape_html()"""

    def test_all_five_characters(self):
        assert escape_html('<>&"\'') == '&lt;&gt;&amp;&quot;&#x27;'

    def test_ampersand_escaped_first(self):
        # Existing entities are escaped again, not preserved
        assert escape_html('&lt;') == '&amp;lt;'

    def test_plain_text_unchanged(self):
        assert escape_html('Hello World') == 'Hello World'

    def test_none(self):
        assert escape_html(None) == ''

    def test_script_injection(self):
        escaped = escape_html('"><script>alert(1)</script>')
        assert '<' not in escaped
        assert '"' not in escaped


class TestStripTags:
    """Tests for strip_tags()"""

    def test_removes_tags(self):
        assert strip_tags('<p>Hello <strong>World</strong></p>') == 'Hello World'

    def test_tags_with_attributes(self):
        assert strip_tags('<a href="https://x.com">link</a>') == 'link'

    def test_empty(self):
        assert strip_tags('') == ''
        assert strip_tags(None) == ''


class TestBuildDescription:
    """Tests for build_description()"""

    def test_uses_excerpt_without_markup(self):
        assert build_description('<p>Short <em>summary</em></p>', 'Title') == 'Short summary'

    def test_truncated_to_limit(self):
        excerpt = 'word ' * 100
        description = build_description(excerpt, 'Title')
        assert len(description) == MAX_DESCRIPTION_LENGTH
        assert MAX_DESCRIPTION_LENGTH == 160

    def test_truncates_after_stripping(self):
        excerpt = '<p>' + 'a' * 200 + '</p>'
        assert build_description(excerpt, 'Title') == 'a' * 160

    def test_falls_back_to_title(self):
        assert build_description(None, 'Hello <World>') == 'Hello <World>'

    def test_empty_excerpt_falls_back_to_title(self):
        assert build_description('', 'Title') == 'Title'
