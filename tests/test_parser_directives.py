"""
Directive scanner and registry tests

Tests the grammar on its own, outside of markdown rendering.
"""

import pytest

from markfolio.lib.parser import directive_match, directives_find
from markfolio.lib.directives import DirectiveRegistry
from markfolio.models.directives import DirectiveKind, KNOWN_DIRECTIVE_TYPES, known_is
from markfolio.models.parser import Directive


class TestDirectiveMatch:
    """Test matching a directive at a given position"""

    def test_two_segments(self):
        directive = directive_match("!![Saved](toast:success)!!")

        assert directive is not None
        assert directive.label == "Saved"
        assert directive.type == "toast"
        assert directive.value == "success"
        assert directive.extra is None
        assert directive.raw == "!![Saved](toast:success)!!"
        assert (directive.start, directive.end) == (0, 26)

    def test_three_segments(self):
        directive = directive_match("!![New](badge:green:star)!!")
        assert directive.extra == "star"

    def test_extra_may_contain_colons(self):
        directive = directive_match("!![a](badge:green:star:big)!!")
        assert directive.value == "green"
        assert directive.extra == "star:big"

    def test_value_may_contain_spaces(self):
        directive = directive_match("!![Info](tooltip:This is a tip)!!")
        assert directive.value == "This is a tip"

    def test_match_at_offset(self):
        source = "xx!![a](toast:b)!! tail"
        directive = directive_match(source, 2)
        assert directive.start == 2
        assert source[directive.end:] == " tail"

    def test_not_at_marker(self):
        assert directive_match("xx!![a](toast:b)!!", 0) is None

    @pytest.mark.parametrize("source", [
        "!![](toast:x)!!",          # empty label
        "!![a](toast:)!!",          # empty value
        "!![a](:x)!!",              # empty type
        "!![a](toast)!!",           # no value
        "!![a](toast:x)!",          # single closing mark
        "!![a](toast:x)",           # no closing mark
        "!![a](to)st:b)!!",         # ')' in type
        "!! [a](toast:x)!!",        # space after marker
        "![a](toast:x)!!",          # single opening mark
    ])
    def test_malformed(self, source):
        assert directive_match(source) is None

    def test_label_runs_to_first_bracket(self):
        """A label may contain '!![', it only stops at ']'"""
        directive = directive_match("!![a!![b](toast:x)!!")
        assert directive.label == "a!![b"


class TestDirectivesFind:
    """Test scanning a whole string"""

    def test_in_order(self):
        found = directives_find("!![a](toast:b)!! then !![c](icon:d:24)!!")
        assert [d.type for d in found] == ["toast", "icon"]
        assert found[1].extra == "24"

    def test_skips_broken_markers(self):
        found = directives_find("!! !![bad](x)!! !![ok](label:blue)!! !!")
        assert [d.label for d in found] == ["ok"]

    def test_includes_unknown_types(self):
        """Scanning is grammar-only; dispatch decides what is known"""
        found = directives_find("!![a](mystery:b)!!")
        assert len(found) == 1
        assert not known_is(found[0].type)

    def test_adjacent_directives(self):
        found = directives_find("!![a](toast:b)!!!![c](toast:d)!!")
        assert [d.label for d in found] == ["a", "c"]

    def test_no_directives(self):
        assert directives_find("plain text, no markers") == []

    @pytest.mark.parametrize("value", [None, 12, ["!![a](toast:b)!!"]])
    def test_non_string(self, value):
        assert directives_find(value) == []


class TestRegistry:
    """Test the directive dispatch table"""

    def test_all_kinds_registered(self):
        registry = DirectiveRegistry()
        assert [spec.kind for spec in registry.specs_list()] == list(DirectiveKind)
        assert {spec.name for spec in registry.specs_list()} == KNOWN_DIRECTIVE_TYPES

    def test_get_unknown(self):
        assert DirectiveRegistry().get("mystery") is None

    def test_spec_metadata(self):
        registry = DirectiveRegistry()
        assert registry.spec_get("badge").accepts_extra is True
        assert registry.spec_get("toast").accepts_extra is False
        assert registry.spec_get("tooltip").examples

    def test_icon_size_from_constructor(self):
        registry = DirectiveRegistry(icon_default_size="16")
        directive = directive_match("!![x](icon:star)!!")
        assert 'data-ui-size="16"' in registry.markup_render(directive)
        assert registry.spec_get("icon").default_extra == "16"

    def test_unknown_returns_escaped_raw(self):
        directive = Directive(
            label="<x>", type="mystery", value="v", extra=None,
            raw="!![<x>](mystery:v)!!", start=0, end=20,
        )
        assert DirectiveRegistry().markup_render(directive) == "!![&lt;x&gt;](mystery:v)!!"

    def test_spec_matches_exact_type(self):
        spec = DirectiveRegistry().spec_get("drawer")
        assert spec.matches("drawer")
        assert not spec.matches("Drawer")
