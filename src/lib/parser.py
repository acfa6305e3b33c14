"""
Scanner for the !![label](type:value:extra)!! directive syntax

Directives are inline tokens embedded in markdown that become placeholder
markup for interactive widgets. The grammar:

    !![label](type:value)!!
    !![label](type:value:extra)!!

- label: one or more characters, none of them ']'
- type:  one or more characters, none of them ':' or ')'
- value: one or more characters, none of them ':' or ')'
- extra: optional, one or more characters, none of them ')'

Matching is anchored at the '!!' marker. A marker that does not start a
full match is ordinary text: nothing is consumed except what the normal
markdown rules consume.

The scanner is used two ways:
1. Standalone: directive_match() / directives_find() over a plain string
2. Inside markdown-it: directive_plugin() registers an inline rule that
   emits `ui_directive` tokens, so directives inside code spans and code
   blocks are left alone

Example:
    >>> directives_find("Press !![Save](toast:saved)!! now")[0].type
    'toast'
"""

import re
from typing import List, Optional

from markdown_it import MarkdownIt
from markdown_it.rules_inline import StateInline

from ..models.parser import Directive


DIRECTIVE_MARKER = '!!'

DIRECTIVE_PATTERN = re.compile(
    r'!!\[(?P<label>[^\]]+)\]'
    r'\((?P<type>[^:)]+):(?P<value>[^:)]+)(?::(?P<extra>[^)]+))?\)'
    r'!!'
)

# Token type emitted into the markdown-it stream
DIRECTIVE_TOKEN = 'ui_directive'


def directive_match(source: str, pos: int = 0, endpos: Optional[int] = None) -> Optional[Directive]:
    """
    Match a directive exactly at a position

    Args:
        source: Text to scan
        pos: Position of the expected '!!' marker
        endpos: Optional end bound for the match (defaults to len(source))

    Returns:
        Directive if the full grammar matches at pos, None otherwise

    Example:
        >>> directive_match("!![New](badge:green:star)!!").extra
        'star'
        >>> directive_match("!![New](badge)!!") is None
        True
    """
    if not source.startswith(DIRECTIVE_MARKER, pos):
        return None

    if endpos is None:
        endpos = len(source)

    match = DIRECTIVE_PATTERN.match(source, pos, endpos)
    if match is None:
        return None

    return Directive(
        label=match.group('label'),
        type=match.group('type'),
        value=match.group('value'),
        extra=match.group('extra'),
        raw=match.group(0),
        start=match.start(),
        end=match.end(),
    )


def directives_find(source: str) -> List[Directive]:
    """
    Find every directive in a string, left to right

    Each step either jumps past a full match or moves to the next '!!'
    marker after a failed attempt, so the scan always terminates.

    Args:
        source: Text to scan (non-strings yield no directives)

    Returns:
        Directives in source order
    """
    if not isinstance(source, str):
        return []

    found: List[Directive] = []
    pos = source.find(DIRECTIVE_MARKER)

    while pos != -1:
        directive = directive_match(source, pos)
        if directive is not None:
            found.append(directive)
            pos = source.find(DIRECTIVE_MARKER, directive.end)
        else:
            pos = source.find(DIRECTIVE_MARKER, pos + 1)

    return found


def directive_inlineRule(state: StateInline, silent: bool) -> bool:
    """
    markdown-it inline rule for directives

    Tried at every position the text rule stops on ('!' is a terminator
    character). Returns False on anything short of a full match so the
    remaining rules (image, plain text fallback...) handle the position.
    """
    directive = directive_match(state.src, state.pos, state.posMax)
    if directive is None:
        return False

    if not silent:
        token = state.push(DIRECTIVE_TOKEN, '', 0)
        token.content = directive.raw
        token.meta = {'directive': directive}

    state.pos = directive.end
    return True


def directive_plugin(md: MarkdownIt) -> None:
    """
    Register the directive inline rule with a markdown-it instance

    The rule runs before emphasis and links so that the bracketed label is
    not picked up as a link or image first.

    Usage:
        md = MarkdownIt("gfm-like").use(directive_plugin)
    """
    md.inline.ruler.before('emphasis', DIRECTIVE_TOKEN, directive_inlineRule)
