"""
Helpers for the admin markdown editor

The editor toolbar wraps the current selection in markup and highlights
the buttons whose construct surrounds the cursor. Both are plain string
operations, kept here so the toolbar behaves the same wherever it is
rendered.
"""

import re
from typing import Dict, Optional, Pattern, Tuple

from ..config import appsettings
from ..models.editor import InsertResult


# Toolbar action -> (prefix, suffix) inserted around the selection
TOOLBAR_ACTIONS: Dict[str, Tuple[str, str]] = {
    'heading': ('# ', ''),
    'bold': ('**', '**'),
    'italic': ('_', '_'),
    'underline': ('<u>', '</u>'),
    'list': ('- ', ''),
    'link': ('[', '](url)'),
    'quote': ('> ', ''),
    'image': ('![alt](', ')'),
    'table': (
        '\n| Header 1 | Header 2 | Header 3 |\n'
        '|----------|----------|----------|\n'
        '| Cell 1   | Cell 2   | Cell 3   |\n',
        '',
    ),
    'hr': ('\n---\n', ''),
    'code': ('`', '`'),
    'codeBlock': ('\n```\n', '\n```\n'),
    'toast': ('!![', '](toast:message)!!'),
    'tooltip': ('!![', '](tooltip:text)!!'),
    'badge': ('!![', '](badge:default)!!'),
}

# Toolbar state -> construct pattern, matched against the text around the cursor
CURSOR_STYLE_PATTERNS: Dict[str, Pattern[str]] = {
    'bold': re.compile(r'\*\*(?!\s)([^*]+?)(?!\s)\*\*'),
    'italic': re.compile(r'_(?!\s)([^_]+?)(?!\s)_'),
    'underline': re.compile(r'<u>(.*?)</u>'),
    'quote': re.compile(r'^>\s.*$', re.MULTILINE),
    'list': re.compile(r'(^|\n)-\s.*$', re.MULTILINE),
    'heading': re.compile(r'(^|\n)#+\s.*$', re.MULTILINE),
    'link': re.compile(r'\[(.*?)\]\((.*?)\)'),
    'image': re.compile(r'!\[(.*?)\]\((.*?)\)'),
    'table': re.compile(r'^\|.+\|\n\|[ -:|]+\n(?:\|.*\n)*', re.MULTILINE),
    'hr': re.compile(r'(^|\n)(\*\s?){3,}|(-\s?){3,}|(_\s?){3,}'),
    'code': re.compile(r'`[^`]+`'),
    'codeBlock': re.compile(r'```[\s\S]*?```'),
}


def markdown_insert(source: str, start: int, end: int, prefix: str, suffix: str = '') -> InsertResult:
    """
    Wrap the selection [start:end] in prefix/suffix

    Offsets outside the text are clamped; an inverted selection collapses
    to its start.

    Args:
        source: Current editor text
        start: Selection start
        end: Selection end
        prefix: Markup inserted before the selection
        suffix: Markup inserted after the selection

    Returns:
        InsertResult with the new text and the cursor placed just after the
        wrapped selection (before the suffix)

    Example:
        >>> markdown_insert("say hi", 4, 6, "**", "**")
        InsertResult(text='say **hi**', cursor=8)
    """
    start = max(0, min(start, len(source)))
    end = max(start, min(end, len(source)))
    selected = source[start:end]

    text = f"{source[:start]}{prefix}{selected}{suffix}{source[end:]}"
    return InsertResult(text=text, cursor=start + len(prefix) + len(selected))


def toolbar_apply(source: str, start: int, end: int, action: str) -> InsertResult:
    """
    Apply a named toolbar action to the selection

    Raises:
        KeyError: If action is not in TOOLBAR_ACTIONS
    """
    prefix, suffix = TOOLBAR_ACTIONS[action]
    return markdown_insert(source, start, end, prefix, suffix)


def cursor_styles(source: str, cursor: int, window: Optional[int] = None) -> Dict[str, bool]:
    """
    Report which markdown constructs surround the cursor

    Only `window` characters on each side of the cursor are inspected. A
    construct counts when the cursor sits after its first character and
    no further than its end.

    Args:
        source: Current editor text
        cursor: Cursor offset
        window: Context size on each side (defaults to editor_context_window)

    Returns:
        Dict of toolbar state name -> active
    """
    if window is None:
        window = appsettings.editor_context_window

    cursor = max(0, min(cursor, len(source)))
    start = max(0, cursor - window)
    end = min(len(source), cursor + window)
    context = source[start:end]
    relative = cursor - start

    return {
        name: any(
            match.start() < relative <= match.end()
            for match in pattern.finditer(context)
        )
        for name, pattern in CURSOR_STYLE_PATTERNS.items()
    }
