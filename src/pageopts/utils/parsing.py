from __future__ import annotations

import re
from html import unescape
from typing import Optional

from pageopts.domain.models import (
    BooleanValue,
    DecodedValue,
    NumberValue,
    StringListValue,
    StringValue,
)
from pageopts.domain.schema import KEY_DELIMITER, LEAF_DELIMITER, NESTED_OPTION_GROUPS

_NUMBER_RE = re.compile(r"[+-]?[0-9]+(\.[0-9]+)?")
_LIST_ITEM_RE = re.compile(r"""\s*(?:'([^']*)'|"([^"]*)")\s*""")
_TAG_RE = re.compile(r"<[A-Za-z!/][^<>]*>")


# ------------------ Value decoding ------------------

def decode_value(raw: str) -> DecodedValue:
    """
    Decode a meta tag's content string into a typed value.

    Order: boolean, number, list of quoted strings, then plain string.
    Entities are unescaped first, so `[&quot;a&quot;]` decodes as a list too.
    Never raises: anything that is not clearly typed comes back as a string.

    Args:
        raw (str): The content attribute as written in the document.

    Returns:
        (DecodedValue): One of BooleanValue, NumberValue, StringListValue, StringValue.
    """
    text = unescape(raw)
    stripped = text.strip()

    lowered = stripped.lower()
    if lowered == "true":
        return BooleanValue(True)
    if lowered == "false":
        return BooleanValue(False)

    number = _match_number(stripped)
    if number is not None:
        return NumberValue(number)

    items = _match_string_list(stripped)
    if items is not None:
        return StringListValue(tuple(items))

    return StringValue(text)


def _match_number(text: str) -> Optional[int | float]:
    m = _NUMBER_RE.fullmatch(text)
    if m is None:
        return None
    if m.group(1) is not None:
        return float(text)
    return int(text)


def _match_string_list(text: str) -> Optional[list[str]]:
    """
    Parse `['a', "b"]`. Returns None on anything malformed so the caller falls
    back to a plain string.
    """
    if not (text.startswith("[") and text.endswith("]")):
        return None

    inner = text[1:-1]
    if not inner.strip():
        return []

    items: list[str] = []
    pos = 0
    while True:
        m = _LIST_ITEM_RE.match(inner, pos)
        if m is None:
            return None
        items.append(m.group(1) if m.group(1) is not None else m.group(2))
        pos = m.end()
        if pos == len(inner):
            return items
        if inner[pos] != ",":
            return None
        pos += 1


# ------------------ Key paths ------------------

def resolve_key_path(key: str) -> tuple[str, ...]:
    """
    Turn a prefix-stripped metadata key into an option path.

    Only the groups in NESTED_OPTION_GROUPS nest:
      viewport-width                -> ("viewport", "width")
      viewport-device_scale_factor  -> ("viewport", "device_scale_factor")
      display-header-footer         -> ("display_header_footer",)
    """
    group, sep, leaf = key.partition(KEY_DELIMITER)
    if sep and leaf and group in NESTED_OPTION_GROUPS:
        return (group, _normalize(leaf))
    return (_normalize(key),)


def _normalize(name: str) -> str:
    return name.replace(KEY_DELIMITER, LEAF_DELIMITER)


# ------------------ Input classification ------------------

def looks_like_markup(url_or_html: str) -> bool:
    """
    True when the input contains at least one HTML tag. URLs, file paths and
    other identifiers are opaque locators and are never scanned.
    """
    return _TAG_RE.search(url_or_html) is not None
