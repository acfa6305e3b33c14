"""
Directive specification and metadata models

Defines the kinds of inline UI directives and the structure of the
registry entries that turn them into placeholder markup.
"""

from enum import Enum
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Set


class DirectiveKind(Enum):
    """
    Kinds of inline UI directives

    The value is the `type` segment written in the source, e.g. the
    `toast` in `!![Saved](toast:success)!!`.
    """
    TOAST = "toast"        # clickable control that shows a toast
    DRAWER = "drawer"      # clickable control that opens a drawer
    TOOLTIP = "tooltip"    # inline span with hover text
    BADGE = "badge"        # inline badge, variant + optional icon
    LABEL = "label"        # inline label, variant + optional icon
    ICON = "icon"          # icon placeholder, name + optional size


@dataclass
class DirectiveSpec:
    """
    Specification for an inline UI directive

    Defines metadata and the markup handler for one directive kind.
    Used by DirectiveRegistry to manage the dispatch table.

    Attributes:
        kind: Directive kind this spec handles
        description: Human-readable description
        handler: Markup function (directive, registry) -> str
        accepts_extra: Whether the optional third segment is meaningful
        default_extra: Value used when the third segment is omitted
        examples: Example usage strings
    """
    kind: DirectiveKind
    description: str
    handler: Callable
    accepts_extra: bool = False
    default_extra: Optional[str] = None
    examples: List[str] = field(default_factory=list)

    @property
    def name(self) -> str:
        """Type name as written in the source"""
        return self.kind.value

    def matches(self, directive_type: str) -> bool:
        """
        Check if this spec handles a directive type

        Matching is exact and case-sensitive: `Toast` is not `toast`.

        Args:
            directive_type: Type segment of a parsed directive

        Returns:
            True if this spec handles the directive
        """
        return self.kind.value == directive_type


# Every type segment the renderer knows how to turn into markup
KNOWN_DIRECTIVE_TYPES: Set[str] = {kind.value for kind in DirectiveKind}


def known_is(directive_type: str) -> bool:
    """Check if a directive type is one of the known kinds"""
    return directive_type in KNOWN_DIRECTIVE_TYPES
