"""
markfolio - Markdown rendering for a portfolio site

Turns post, project and excerpt markdown into HTML, including the
!![label](type:value:extra)!! directives that the site hydrates into
toasts, drawers, tooltips, badges, labels and icons.
"""

__version__ = "1.0.0"

from .lib import render, excerpt_make, directives_find, MarkdownRenderer, DirectiveRegistry, LOG, state_connectToLogger

__all__ = [
    "render",
    "excerpt_make",
    "directives_find",
    "MarkdownRenderer",
    "DirectiveRegistry",
    "LOG",
    "state_connectToLogger",
    "__version__",
]
