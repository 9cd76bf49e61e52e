"""Tests for the stylesheet model dataclasses."""

import pytest

from domstyle.stylesheet import (
    Color,
    Declaration,
    Keyword,
    Length,
    Rule,
    SimpleSelector,
    Stylesheet,
    Unit,
    parse_stylesheet,
)


class TestColor:
    def test_alpha_defaults_opaque(self):
        assert Color(1, 2, 3).a == 255

    @pytest.mark.parametrize("channels", [(256, 0, 0), (0, -1, 0), (0, 0, 0, 300)])
    def test_out_of_range_rejected(self, channels: tuple[int, ...]):
        with pytest.raises(ValueError):
            Color(*channels)

    def test_str_is_lowercase_hex(self):
        assert str(Color(170, 187, 204)) == "#aabbcc"


class TestValueText:
    def test_length(self):
        assert str(Length(10.0, Unit.PX)) == "10px"
        assert str(Length(2.5, Unit.PX)) == "2.5px"

    def test_keyword(self):
        assert str(Keyword("inherit")) == "inherit"

    def test_unit_lookup(self):
        assert Unit("px") is Unit.PX


class TestSelectorText:
    def test_compound(self):
        sel = SimpleSelector(tag_name="div", id="main", classes=("a", "b"))
        assert str(sel) == "div#main.a.b"

    def test_empty(self):
        assert str(SimpleSelector()) == ""


class TestRuleText:
    def test_rule_with_declarations(self):
        rule = Rule(
            selectors=(SimpleSelector(tag_name="h1"), SimpleSelector(id="foo")),
            declarations=(
                Declaration("padding", Length(10.0, Unit.PX)),
                Declaration("color", Color(0, 0, 0)),
            ),
        )
        assert str(rule) == "h1, #foo { padding: 10px; color: #000000; }"

    def test_empty_rule(self):
        assert str(Rule(selectors=(SimpleSelector(tag_name="p"),))) == "p {}"

    def test_parse_then_print(self):
        source = "h1, div.bar, #foo { padding: 10px; color: inherit; }"
        assert str(parse_stylesheet(source).rules[0]) == source


class TestFrozen:
    def test_stylesheet_is_frozen(self):
        ss = parse_stylesheet("h1 { color: red; }")
        with pytest.raises(AttributeError):
            ss.rules = ()  # type: ignore[misc]

    def test_selector_is_frozen(self):
        sel = SimpleSelector(tag_name="h1")
        with pytest.raises(AttributeError):
            sel.tag_name = "h2"  # type: ignore[misc]

    def test_models_are_hashable(self):
        ss = parse_stylesheet("h1.a { color: #010203; margin: 1px; }")
        assert hash(ss) == hash(parse_stylesheet("h1.a { color: #010203; margin: 1px; }"))
        assert Stylesheet() == Stylesheet(rules=())
