"""
Parser-specific data models

Type-safe structures for directive scanning results.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Directive:
    """
    A single inline UI directive found in markdown source

    Produced by the directive scanner for every full match of
    `!![label](type:value:extra)!!`. Directives are transient: they live for
    one render call, the markdown string is what gets stored.

    Attributes:
        label: Display text (between the brackets)
        type: Directive type (e.g., "toast", "badge"); may be unknown
        value: Widget-specific payload (message key, variant, icon name...)
        extra: Optional third segment (icon name, icon size), None if absent
        raw: The exact matched source text, trailing `!!` included
        start: Position of the leading `!!` in the scanned string
        end: Position just past the trailing `!!`

    Example:
        For source "Click !![Saved](toast:success)!!":
        Directive(label="Saved", type="toast", value="success", extra=None,
                  raw="!![Saved](toast:success)!!", start=6, end=32)
    """
    label: str
    type: str
    value: str
    extra: Optional[str]
    raw: str
    start: int
    end: int
