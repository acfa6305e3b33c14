"""
Basic renderer tests - input handling and standard markdown

Tests non-string input, plain text, and the CommonMark/GFM constructs the
site's content relies on.
"""

import pytest

from markfolio.lib.renderer import render, renderer_get, MarkdownRenderer


class TestInputHandling:
    """Test that render() is total over its input"""

    @pytest.mark.parametrize("value", [None, 42, 3.14, {}, [], ("a",), b"bytes", object()])
    def test_non_string_renders_empty(self, value):
        """Anything that is not a str renders to the empty string"""
        assert render(value) == ""

    def test_empty_string(self):
        """Empty source renders to empty output"""
        assert render("") == ""

    def test_plain_text(self):
        """Text without markdown syntax comes back as one paragraph"""
        assert render("Just some plain words") == "<p>Just some plain words</p>\n"

    def test_plain_text_is_escaped(self):
        """Bare special characters are escaped, not interpreted"""
        assert render("a < b & c") == "<p>a &lt; b &amp; c</p>\n"

    def test_repeated_calls_identical(self):
        """Same input, same output"""
        source = "# Title\n\nSome *text* with !![Saved](toast:ok)!!"
        assert render(source) == render(source)

    def test_renderer_is_shared(self):
        """The process-wide renderer is built once"""
        assert renderer_get() is renderer_get()

    def test_independent_renderers_agree(self):
        """A separately built renderer produces the same HTML"""
        source = "## Section\n\n| a |\n|---|\n| 1 |\n"
        assert MarkdownRenderer().render(source) == render(source)


class TestStandardMarkdown:
    """Test conventional markdown translation"""

    def test_soft_breaks_stay_soft(self):
        """Single newlines inside a paragraph are not turned into <br>"""
        html = render("line one\nline two")
        assert html == "<p>line one\nline two</p>\n"
        assert "<br" not in html

    def test_emphasis(self):
        html = render("**bold** and _italic_")
        assert "<strong>bold</strong>" in html
        assert "<em>italic</em>" in html

    def test_strikethrough(self):
        assert "<s>old</s>" in render("~~old~~")

    def test_unordered_list(self):
        assert render("- a\n- b") == "<ul>\n<li>a</li>\n<li>b</li>\n</ul>\n"

    def test_link(self):
        assert '<a href="https://example.com">site</a>' in render("[site](https://example.com)")

    def test_autolink(self):
        """Bare URLs become links"""
        html = render("Visit https://example.com today")
        assert '<a href="https://example.com">https://example.com</a>' in html

    def test_raw_inline_html_passthrough(self):
        """Inline HTML is kept as-is"""
        assert "<kbd>Ctrl</kbd>" in render("Press <kbd>Ctrl</kbd>")

    def test_raw_block_html_passthrough(self):
        html = render('<div class="note">Hi</div>')
        assert '<div class="note">Hi</div>' in html

    def test_blockquote(self):
        assert "<blockquote>" in render("> quoted")


class TestFailureAbsorption:
    """Test that internal failures never reach the caller"""

    def test_parser_exception_renders_empty(self, monkeypatch):
        """An exception inside markdown-it yields empty output"""
        renderer = MarkdownRenderer()

        def boom(*args, **kwargs):
            raise RuntimeError("parser exploded")

        monkeypatch.setattr(renderer.md, "render", boom)
        assert renderer.render("# anything") == ""
