import pytest

from safehtml.style import Style, style_from_constant
from safehtml.stylesheet import (
    StyleSheet,
    css_rule,
    has_balanced_brackets,
    style_sheet_from_constant,
)


@pytest.mark.parametrize(
    "selector, style, want",
    [
        ("#id", style_from_constant("top:0;left:0;"), "#id{top:0;left:0;}"),
        (".class", style_from_constant("margin-left:5px;"), ".class{margin-left:5px;}"),
        (
            "tag #id, .class",
            style_from_constant("color:black !important;"),
            "tag #id, .class{color:black !important;}",
        ),
        ("[title='son\\'s']", Style(), "[title='son\\'s']{}"),
        ('[title="{"]', Style(), '[title="{"]{}'),
        (":nth-child(1)", Style(), ":nth-child(1){}"),
    ],
)
def test_css_rule_valid(selector, style, want):
    assert str(css_rule(selector, style)) == want


@pytest.mark.parametrize(
    "selector, message",
    [
        (
            "tag{color:black;}",
            'selector "tag{color:black;}" contains "{", which is disallowed outside of CSS strings',
        ),
        ("]", 'selector "]" contains unbalanced () or [] brackets'),
        ("[title", 'selector "[title" contains unbalanced () or [] brackets'),
        ("[foo)bar]", 'selector "[foo)bar]" contains unbalanced () or [] brackets'),
        ("[foo[bar]", 'selector "[foo[bar]" contains unbalanced () or [] brackets'),
        ("foo(bar(baz)", 'selector "foo(bar(baz)" contains unbalanced () or [] brackets'),
        (":nth-child(1", 'selector ":nth-child(1" contains unbalanced () or [] brackets'),
        (
            '[type="a]',
            'selector "[type=\\"a]" contains "\\"", which is disallowed outside of CSS strings',
        ),
        (
            "[type=\\'a]",
            "selector \"[type=\\\\'a]\" contains \"\\\\\", which is disallowed outside of CSS strings",
        ),
        ("<", "selector \"<\" contains '<'"),
        (
            '@import "foo";#id',
            'selector "@import \\"foo\\";#id" contains "@", which is disallowed outside of CSS strings',
        ),
        ("/* ", 'selector "/* " contains "/", which is disallowed outside of CSS strings'),
    ],
)
def test_css_rule_invalid(selector, message):
    with pytest.raises(ValueError) as info:
        css_rule(selector, Style())
    assert str(info.value) == message


@pytest.mark.parametrize(
    "text, want",
    [
        ("", True),
        ("()[]", True),
        ("([])", True),
        ("(]", False),
        ("((", False),
        (")", False),
        ("a[b(c)d]e", True),
    ],
)
def test_has_balanced_brackets(text, want):
    assert has_balanced_brackets(text) is want


def test_style_sheet_from_constant():
    text = "P { text: <not a valid safehtml.StyleSheet> }"
    assert str(style_sheet_from_constant(text)) == text
    assert style_sheet_from_constant(text) == StyleSheet(text)