"""
Directive implementations for markfolio

Each directive kind turns a parsed Directive into placeholder markup that
the site's UI layer finds and hydrates: buttons tagged with
`markdown-ui-btn` for toasts and drawers, spans tagged with
`markdown-ui-<kind>` for the rest. Labels and attribute values are
HTML-escaped.
"""

from html import escape
from typing import Callable, Dict, List, Optional, Any

from ..config import appsettings
from ..models.directives import DirectiveSpec, DirectiveKind
from ..models.parser import Directive


def attr(value: Optional[str]) -> str:
    """Escape a value for use inside a double-quoted attribute"""
    return escape(value or '', quote=True)


class DirectiveRegistry:
    """
    Registry of directive specifications and handlers

    Maps directive type names to DirectiveSpec objects containing metadata
    and markup handlers.
    """

    def __init__(self, icon_default_size: Optional[str] = None) -> None:
        """
        Initialize the directive registry and register all built-in directives

        Args:
            icon_default_size: Size used by icon directives without an extra
                segment (defaults to the configured icon_default_size)
        """
        self.specs: Dict[str, DirectiveSpec] = {}
        self.icon_default_size = icon_default_size or appsettings.icon_default_size
        self.triggerDirectives_register()
        self.inlineDirectives_register()
        self.iconDirectives_register()

    def register(self, spec: DirectiveSpec) -> None:
        """Register a directive specification"""
        self.specs[spec.name] = spec

    def get(self, name: str) -> Optional[Callable[[Directive, Any], str]]:
        """
        Get directive handler by type name

        Args:
            name: Directive type to look up

        Returns:
            Handler function or None if not found
        """
        spec = self.specs.get(name)
        return spec.handler if spec is not None else None

    def spec_get(self, name: str) -> Optional[DirectiveSpec]:
        """Get full directive specification by type name"""
        return self.specs.get(name)

    def specs_list(self) -> List[DirectiveSpec]:
        """All registered specs, in DirectiveKind order"""
        return [self.specs[kind.value] for kind in DirectiveKind if kind.value in self.specs]

    def markup_render(self, directive: Directive) -> str:
        """
        Dispatch a directive to its handler

        Unknown types come back as their original source text, escaped so
        they display literally.

        Args:
            directive: Parsed directive

        Returns:
            Placeholder markup for the UI layer
        """
        handler = self.get(directive.type)
        if handler is None:
            return escape(directive.raw, quote=False)
        return handler(directive, self)

    def triggerDirectives_register(self) -> None:
        """Register clickable trigger directives (toast, drawer)"""

        def make_trigger(kind: DirectiveKind) -> Callable[[Directive, Any], str]:
            """Factory for button triggers that differ only in data-ui-type"""
            def handler(directive: Directive, registry: Any) -> str:
                return (
                    f'<button class="markdown-ui-btn" data-ui-type="{kind.value}" '
                    f'data-ui-value="{attr(directive.value)}">{escape(directive.label)}</button>'
                )
            return handler

        self.register(DirectiveSpec(
            kind=DirectiveKind.TOAST,
            description='Button that shows a toast with the given message',
            handler=make_trigger(DirectiveKind.TOAST),
            examples=['!![Saved](toast:success)!!'],
        ))

        self.register(DirectiveSpec(
            kind=DirectiveKind.DRAWER,
            description='Button that opens a drawer with the given content',
            handler=make_trigger(DirectiveKind.DRAWER),
            examples=['!![Open](drawer:settings)!!'],
        ))

    def inlineDirectives_register(self) -> None:
        """Register inline span directives (tooltip, badge, label)"""

        def tooltip_handler(directive: Directive, registry: Any) -> str:
            """Handle tooltip - label shown inline, value on hover"""
            return (
                f'<span class="markdown-ui-tooltip" data-ui-text="{attr(directive.value)}">'
                f'{escape(directive.label)}</span>'
            )

        def make_variant(kind: DirectiveKind) -> Callable[[Directive, Any], str]:
            """Factory for variant spans with an optional icon"""
            def handler(directive: Directive, registry: Any) -> str:
                return (
                    f'<span class="markdown-ui-{kind.value}" data-ui-variant="{attr(directive.value)}" '
                    f'data-ui-icon="{attr(directive.extra)}">{escape(directive.label)}</span>'
                )
            return handler

        self.register(DirectiveSpec(
            kind=DirectiveKind.TOOLTIP,
            description='Inline text with a hover tooltip',
            handler=tooltip_handler,
            examples=['!![Info](tooltip:This is a tip)!!'],
        ))

        self.register(DirectiveSpec(
            kind=DirectiveKind.BADGE,
            description='Inline badge with a variant and optional icon',
            handler=make_variant(DirectiveKind.BADGE),
            accepts_extra=True,
            default_extra='',
            examples=['!![New](badge:green:star)!!', '!![Beta](badge:default)!!'],
        ))

        self.register(DirectiveSpec(
            kind=DirectiveKind.LABEL,
            description='Inline label with a variant and optional icon',
            handler=make_variant(DirectiveKind.LABEL),
            accepts_extra=True,
            default_extra='',
            examples=['!![Python](label:primary:code)!!'],
        ))

    def iconDirectives_register(self) -> None:
        """Register the icon placeholder directive"""

        def icon_handler(directive: Directive, registry: Any) -> str:
            """Handle icon - value is the icon name, extra the size"""
            size = directive.extra or registry.icon_default_size
            return (
                f'<span class="markdown-ui-icon" data-ui-name="{attr(directive.value)}" '
                f'data-ui-size="{attr(size)}"></span>'
            )

        self.register(DirectiveSpec(
            kind=DirectiveKind.ICON,
            description='Icon placeholder, optional size in pixels',
            handler=icon_handler,
            accepts_extra=True,
            default_extra=self.icon_default_size,
            examples=['!![ ](icon:github)!!', '!![ ](icon:star:32)!!'],
        ))
