"""
markfolio - Markdown rendering for a portfolio site

Renders stored markdown content to HTML with heading anchors, highlighted
code, scrollable tables and inline UI directives.
"""

__version__ = "1.0.0"

from .renderer import MarkdownRenderer, render, renderer_get, excerpt_make, slug_make
from .parser import directive_match, directives_find, directive_plugin
from .directives import DirectiveRegistry
from .log import LOG, state_connectToLogger

__all__ = [
    "MarkdownRenderer",
    "render",
    "renderer_get",
    "excerpt_make",
    "slug_make",
    "directive_match",
    "directives_find",
    "directive_plugin",
    "DirectiveRegistry",
    "LOG",
    "state_connectToLogger",
    "__version__",
]
