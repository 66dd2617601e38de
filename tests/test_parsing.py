"""Tests for value decoding, key paths and input classification."""

import pytest

from pageopts.domain.models import BooleanValue, NumberValue, StringListValue, StringValue
from pageopts.utils.parsing import decode_value, looks_like_markup, resolve_key_path


# ---------------------------------------------------------------------------
# decode_value: booleans
# ---------------------------------------------------------------------------

@pytest.mark.parametrize("raw, expected", [
    ("true", True),
    ("false", False),
    ("TRUE", True),
    ("False", False),
])
def test_decode_boolean(raw, expected):
    assert decode_value(raw) == BooleanValue(expected)

def test_decode_boolean_unwraps_to_bool():
    assert decode_value("false").unwrap() is False


# ---------------------------------------------------------------------------
# decode_value: numbers
# ---------------------------------------------------------------------------

def test_decode_integer():
    value = decode_value("100")
    assert value == NumberValue(100)
    assert isinstance(value.unwrap(), int)

def test_decode_fraction_keeps_precision():
    assert decode_value("2.5").unwrap() == 2.5

def test_decode_signed_numbers():
    assert decode_value("-5").unwrap() == -5
    assert decode_value("+0.25").unwrap() == 0.25

def test_decode_number_ignores_surrounding_whitespace():
    assert decode_value(" 42 ") == NumberValue(42)

@pytest.mark.parametrize("raw", ["1.", ".5", "1e3", "1,000", "12px", "0x10", "٣", "１２"])
def test_decode_number_like_strings_stay_strings(raw):
    assert decode_value(raw) == StringValue(raw)


# ---------------------------------------------------------------------------
# decode_value: lists
# ---------------------------------------------------------------------------

def test_decode_single_quoted_list():
    assert decode_value("['--a','--b']").unwrap() == ["--a", "--b"]

def test_decode_mixed_quotes_and_spacing():
    assert decode_value(""" [ "--a" , '--b' ] """) == StringListValue(("--a", "--b"))

def test_decode_list_keeps_commas_inside_items():
    assert decode_value("['a,b', 'c']").unwrap() == ["a,b", "c"]

def test_decode_empty_list():
    assert decode_value("[]") == StringListValue(())

def test_decode_list_with_escaped_quotes():
    assert decode_value("[&quot;--disable-gpu&quot;]").unwrap() == ["--disable-gpu"]

def test_decode_list_unwrap_returns_fresh_list():
    value = decode_value("['a']")
    first = value.unwrap()
    first.append("b")
    assert value.unwrap() == ["a"]

@pytest.mark.parametrize("raw", ["['a',]", "[a, b]", "['a' 'b']", "['a", "'a', 'b'"])
def test_decode_malformed_list_falls_back_to_string(raw):
    assert decode_value(raw) == StringValue(raw)


# ---------------------------------------------------------------------------
# decode_value: strings
# ---------------------------------------------------------------------------

def test_decode_unescapes_entities():
    assert decode_value("&quot;quotes&quot;") == StringValue('"quotes"')

def test_decode_preserves_markup():
    raw = "<div class='text'>Footer with &quot;quotes&quot; in it</div>"
    assert decode_value(raw).unwrap() == """<div class='text'>Footer with "quotes" in it</div>"""

def test_decode_string_is_not_trimmed():
    assert decode_value("  load ") == StringValue("  load ")

def test_decode_empty_string():
    assert decode_value("") == StringValue("")

def test_decode_other_entities():
    assert decode_value("a &amp; b &lt;c&gt; &#39;d&#39;").unwrap() == "a & b <c> 'd'"


# ---------------------------------------------------------------------------
# resolve_key_path
# ---------------------------------------------------------------------------

@pytest.mark.parametrize("key, expected", [
    ("viewport-width", ("viewport", "width")),
    ("viewport-height", ("viewport", "height")),
    ("viewport-device_scale_factor", ("viewport", "device_scale_factor")),
    ("viewport-device-scale-factor", ("viewport", "device_scale_factor")),
])
def test_resolve_viewport_group(key, expected):
    assert resolve_key_path(key) == expected

@pytest.mark.parametrize("key, expected", [
    ("display_header_footer", ("display_header_footer",)),
    ("display-header-footer", ("display_header_footer",)),
    ("launch_args", ("launch_args",)),
    ("footer_template", ("footer_template",)),
    ("margin-top", ("margin_top",)),
    ("quality", ("quality",)),
])
def test_resolve_flat_keys(key, expected):
    assert resolve_key_path(key) == expected

def test_resolve_bare_group_name_is_flat():
    assert resolve_key_path("viewport") == ("viewport",)

def test_resolve_only_allow_listed_groups_nest():
    assert resolve_key_path("margin-top") != ("margin", "top")

def test_resolve_keys_are_case_sensitive():
    assert resolve_key_path("Viewport-width") == ("Viewport_width",)


# ---------------------------------------------------------------------------
# looks_like_markup
# ---------------------------------------------------------------------------

@pytest.mark.parametrize("text", [
    "https://google.com",
    "http://example.com/page?a=1&b=2",
    "file:///tmp/report.html",
    "report.html",
    "a < b",
    "a < b > c",
    "",
])
def test_locators_are_not_markup(text):
    assert looks_like_markup(text) is False

@pytest.mark.parametrize("text", [
    "<html><head></head><body></body></html>",
    "<!DOCTYPE html><p>hi</p>",
    "  <meta name='grover-scale' content='0.5'>",
    "Hello <b>world</b>",
])
def test_fragments_are_markup(text):
    assert looks_like_markup(text) is True
