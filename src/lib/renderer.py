"""
Markdown renderer for markfolio content

Turns stored markdown (posts, project READMEs, excerpts) into HTML:

- CommonMark plus GFM tables, strikethrough and autolinks; raw HTML passes
  through and soft line breaks stay soft (no <br>)
- every heading gets an id: lowercased text, runs of non-word characters
  collapsed to a single '-'
- fenced code with a language Pygments knows is highlighted with token
  classes; anything else renders as an empty <pre><code></code></pre>
  unless escape_unknown_languages is set
- every table is wrapped once in a horizontally scrollable container
- !![label](type:value:extra)!! directives become widget placeholders

render() never raises. Non-string input gives '', and any failure inside
markdown-it or Pygments is logged (debug verbosity) and absorbed.

Example:
    >>> render("# Hello, World!")
    '<h1 id="hello-world-">Hello, World!</h1>\\n'
"""

import re
from html import unescape
from typing import Any, Optional, Sequence
from urllib.parse import quote

from markdown_it import MarkdownIt
from markdown_it.common.utils import escapeHtml, unescapeAll
from markdown_it.token import Token
from pygments import highlight
from pygments.formatters import HtmlFormatter
from pygments.lexer import Lexer
from pygments.lexers import get_lexer_by_name
from pygments.util import ClassNotFound

from ..config import appsettings, AppSettings
from .directives import DirectiveRegistry
from .lexer import MarkfolioLexer
from .log import LOG
from .parser import directive_plugin, DIRECTIVE_TOKEN


# Characters kept by encodeURIComponent besides ASCII alphanumerics and "_.-~"
URI_COMPONENT_SAFE = "!*'()"

SLUG_PATTERN = re.compile(r'[^\w]+', re.ASCII)
TAG_PATTERN = re.compile(r'<[^>]*>')
WHITESPACE_PATTERN = re.compile(r'\s+')

EMPTY_CODE_BLOCK = '<pre><code></code></pre>\n'


def slug_make(text: str) -> str:
    """
    Derive a heading anchor from heading text

    Lowercases, then replaces each run of characters outside [A-Za-z0-9_]
    with one hyphen. Leading/trailing hyphens are kept.

    Example:
        >>> slug_make("Hello, World!")
        'hello-world-'
    """
    return SLUG_PATTERN.sub('-', text.lower())


def text_trim(text: str, limit: int) -> str:
    """Cut text to limit characters, marking the cut with '...'"""
    if limit <= 0:
        return ''
    if len(text) <= limit:
        return text
    return text[:limit].rstrip() + '...'


class MarkdownRenderer:
    """
    Configured markdown-it instance with markfolio's rendering rules

    Built once and reused; render() does not mutate the instance.

    Responsibilities:
    - Heading anchors
    - Code highlighting via Pygments
    - Table scroll containers
    - Directive placeholder markup (via DirectiveRegistry)
    """

    def __init__(
        self,
        settings: Optional[AppSettings] = None,
        registry: Optional[DirectiveRegistry] = None,
    ) -> None:
        """
        Initialize renderer

        Args:
            settings: Settings to read (defaults to the appsettings singleton)
            registry: Directive dispatch table (defaults to the built-in one)
        """
        self.settings = settings or appsettings
        self.registry = registry or DirectiveRegistry(self.settings.icon_default_size)
        self.formatter = HtmlFormatter(nowrap=True)

        self.md = MarkdownIt("gfm-like", {"breaks": False}).use(directive_plugin)

        rules = self.md.renderer.rules
        rules["heading_open"] = self.heading_open
        rules["table_open"] = self.table_open
        rules["table_close"] = self.table_close
        rules["fence"] = self.fence
        rules["code_block"] = self.code_block
        rules[DIRECTIVE_TOKEN] = self.ui_directive

    def render(self, text: Any) -> str:
        """
        Render markdown to HTML

        Args:
            text: Markdown source; anything but a non-empty str renders to ''

        Returns:
            HTML string (never raises)
        """
        if not isinstance(text, str) or not text:
            return ''

        try:
            return self.md.render(text)
        except Exception as e:
            LOG(f"Markdown rendering failed, returning empty output: {e!r}", level=3)
            return ''

    def heading_open(self, tokens: Sequence[Token], idx: int, options: Any, env: Any) -> str:
        """Open a heading with an id derived from its source text"""
        token = tokens[idx]
        text = tokens[idx + 1].content if idx + 1 < len(tokens) else ''
        return f'<{token.tag} id="{escapeHtml(slug_make(text))}">'

    def table_open(self, tokens: Sequence[Token], idx: int, options: Any, env: Any) -> str:
        container_class = escapeHtml(self.settings.table_container_class)
        opening = self.md.renderer.renderToken(tokens, idx, options, env)
        return f'<div class="{container_class}">{opening}'

    def table_close(self, tokens: Sequence[Token], idx: int, options: Any, env: Any) -> str:
        closing = self.md.renderer.renderToken(tokens, idx, options, env)
        return f'{closing.rstrip()}</div>\n'

    def fence(self, tokens: Sequence[Token], idx: int, options: Any, env: Any) -> str:
        """Fenced block: the first word of the info string is the language"""
        token = tokens[idx]
        info = unescapeAll(token.info).strip() if token.info else ''
        language = info.split(maxsplit=1)[0] if info else ''
        return self.codeblock_render(token.content, language)

    def code_block(self, tokens: Sequence[Token], idx: int, options: Any, env: Any) -> str:
        """Indented block: never has a language"""
        return self.codeblock_render(tokens[idx].content, '')

    def ui_directive(self, tokens: Sequence[Token], idx: int, options: Any, env: Any) -> str:
        return self.registry.markup_render(tokens[idx].meta['directive'])

    def lexer_get(self, language: str) -> Lexer:
        """
        Resolve a fence language to a Pygments lexer

        Raises:
            ClassNotFound: If no lexer is registered under that name
        """
        if language.lower() in MarkfolioLexer.aliases:
            return MarkfolioLexer()
        return get_lexer_by_name(language)

    def code_highlight(self, code: str, language: str) -> Optional[str]:
        """
        Highlight code as token-classed spans

        Args:
            code: Source of the code block
            language: Fence language (may be empty)

        Returns:
            Highlighted HTML without a <pre> wrapper, or None when the
            language is missing, unknown, or Pygments fails
        """
        if not language:
            return None

        try:
            lexer = self.lexer_get(language)
        except ClassNotFound:
            LOG(f"No lexer for '{language}', code block left empty", level=3)
            return None

        try:
            return highlight(code, lexer, self.formatter)
        except Exception as e:
            LOG(f"Highlighting '{language}' failed: {e!r}", level=3)
            return None

    def codeblock_render(self, code: str, language: str) -> str:
        """
        Render a code block

        Highlighted blocks get a header with the language label and a
        copy-button mount point carrying the URI-encoded source.
        """
        highlighted = self.code_highlight(code, language)

        if highlighted is None:
            if self.settings.escape_unknown_languages:
                return f'<pre><code>{escapeHtml(code)}</code></pre>\n'
            return EMPTY_CODE_BLOCK

        lang = escapeHtml(language)
        block = f'<pre class="language-{lang}"><code>{highlighted}</code></pre>'
        if not self.settings.code_header:
            return block + '\n'

        return (
            '<div class="code-block-wrapper">'
            '<div class="code-block-header">'
            f'<span class="code-lang">{lang}</span>'
            f'<span class="code-copy-btn-wrapper" data-code="{quote(code, safe=URI_COMPONENT_SAFE)}"></span>'
            '</div>'
            f'{block}'
            '</div>\n'
        )


_renderer: Optional[MarkdownRenderer] = None


def renderer_get() -> MarkdownRenderer:
    """
    Process-wide renderer, built on first use from appsettings

    Building twice under a race is harmless: both instances are identical
    and neither is mutated afterwards.
    """
    global _renderer
    if _renderer is None:
        _renderer = MarkdownRenderer()
    return _renderer


def render(text: Any) -> str:
    """
    Render markdown to HTML with the process-wide renderer

    Args:
        text: Markdown source; non-strings render to ''

    Returns:
        HTML string (never raises)
    """
    return renderer_get().render(text)


def excerpt_make(text: Any, limit: Optional[int] = None) -> str:
    """
    Plain-text preview of markdown content for cards

    Renders the markdown, drops the tags, and trims to limit characters.

    Args:
        text: Markdown source; non-strings give ''
        limit: Maximum length (defaults to appsettings.excerpt_length)

    Returns:
        Excerpt, with '...' appended when it was cut

    Example:
        >>> excerpt_make("**Hello** _world_", 8)
        'Hello wo...'
    """
    if limit is None:
        limit = appsettings.excerpt_length

    html = render(text)
    if not html:
        return ''

    plain = WHITESPACE_PATTERN.sub(' ', unescape(TAG_PATTERN.sub('', html))).strip()
    return text_trim(plain, limit)
