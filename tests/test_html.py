import pytest

from safehtml.html import (
    HTML,
    coerce_to_utf8_interchange_valid,
    escape_and_coerce_to_interchange_valid,
    html_concat,
    html_escaped,
    html_from_constant,
)

RAW_HTML = "<>'\"&"
ESCAPED_HTML = "&lt;&gt;&#39;&#34;&amp;"


def test_html_escaped():
    assert str(html_escaped(RAW_HTML)) == ESCAPED_HTML


def test_escape_and_coerce():
    assert escape_and_coerce_to_interchange_valid("<\x00>") == "&lt;\ufffd&gt;"


def test_html_from_constant():
    assert str(html_from_constant("<b>hi</b>")) == "<b>hi</b>"


@pytest.mark.parametrize(
    "parts, want",
    [
        ([], ""),
        ([""], ""),
        (["Hello world!"], "Hello world!"),
        (["Hello", " ", "world!"], "Hello world!"),
    ],
)
def test_html_concat(parts, want):
    assert str(html_concat(*(HTML(p) for p in parts))) == want


@pytest.mark.parametrize(
    "text, replaced",
    [
        ("\x00", True),
        ("\x04", True),
        ("\x08", True),
        ("\t", False),
        ("\n", False),
        ("\v", True),
        ("\f", False),
        ("\r", False),
        ("\x0e", True),
        ("\x0f", True),
        ("\ufdcf", False),
        ("\ufdd0", True),
        ("\ufdef", True),
        ("\ufdf0", False),
        ("\ufffe", True),
        ("\uffff", True),
        ("\U0001fffe", True),
        ("\U0001ffff", True),
        ("\U0002fffe", True),
        ("\U0002ffff", True),
        ("\U0003fffe", True),
        ("\U0003ffff", True),
        ("\U0004fffe", True),
        ("\U0004ffff", True),
        ("\U0005fffe", True),
        ("\U0005ffff", True),
        ("\U0006fffe", True),
        ("\U0006ffff", True),
        ("\U0007fffe", True),
        ("\U0007ffff", True),
        ("\U0008fffe", True),
        ("\U0008ffff", True),
        ("\U0009fffe", True),
        ("\U0009ffff", True),
        ("\U000afffe", True),
        ("\U000affff", True),
        ("\U000bfffe", True),
        ("\U000bffff", True),
        ("\U000cfffe", True),
        ("\U000cffff", True),
        ("\U000dfffe", True),
        ("\U000dffff", True),
        ("\U000efffe", True),
        ("\U000effff", True),
        ("\U000ffffe", True),
        ("\U000fffff", True),
        ("\U0010fffe", True),
        ("\U0010ffff", True),
        (b"\xed", True),
        (" ", False),
        ("\ufffd", False),
    ],
)
def test_coerce_single_characters(text, replaced):
    coerced = coerce_to_utf8_interchange_valid(text)
    if replaced:
        assert coerced == "\ufffd"
    else:
        assert coerced == text


@pytest.mark.parametrize(
    "text, want",
    [
        ("abcd", "abcd"),
        ("丄ê𐒖t", "丄ê𐒖t"),
        (
            "\n丄".encode() + b"\xed" + " \x00\U0001fffea\ufffd".encode(),
            "\n丄\ufffd \ufffd\ufffda\ufffd",
        ),
        (b"\xff\x7e", "\ufffd\x7e"),
        (b"\xed\xa0\x80", "\ufffd\ufffd\ufffd"),
        (b"\xed\xa1\x8c\xed\xbe\xb4", "\ufffd" * 6),
        (b"\xc0\x80", "\ufffd\ufffd"),
    ],
)
def test_coerce_strings(text, want):
    assert coerce_to_utf8_interchange_valid(text) == want


def test_coerce_lone_surrogate_in_str():
    assert coerce_to_utf8_interchange_valid("a\ud800b") == "a\ufffdb"


def test_html_is_immutable():
    value = HTML("x")
    with pytest.raises(AttributeError):
        value.value = "y"
    assert str(value) == "x"