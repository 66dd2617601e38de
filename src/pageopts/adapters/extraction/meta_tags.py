from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from html.parser import HTMLParser
from typing import Optional

from pageopts.domain.models import MetadataEntry
from pageopts.domain.schema import DEFAULT_META_PREFIX

logger = logging.getLogger(__name__)

# Elements whose contents are text, never tags
_RAW_TEXT_ELEMENTS = frozenset({"script", "style", "textarea", "title"})

# Attributes of a single start tag, as written in the source
_ATTR_RE = re.compile(
    r"""([^\s"'=/>]+)(?:\s*=\s*(?:"([^"]*)"|'([^']*)'|([^\s"'>]+)))?"""
)
_TAG_NAME_RE = re.compile(r"<\s*[^\s/>]+")


def _raw_attribute(starttag_text: str, wanted: str) -> Optional[str]:
    """
    Value of `wanted` exactly as it appears in the tag source (entities still
    escaped). The first occurrence wins, as in browsers.
    """
    body = _TAG_NAME_RE.sub("", starttag_text, count=1)
    for m in _ATTR_RE.finditer(body):
        if m.group(1).lower() != wanted:
            continue
        return next((g for g in m.group(2, 3, 4) if g is not None), "")
    return None


class _MetaTagParser(HTMLParser):
    def __init__(self, prefix: str) -> None:
        super().__init__(convert_charrefs=False)
        self.prefix = prefix
        self.entries: list[MetadataEntry] = []
        self.in_raw_text: Optional[str] = None

    def handle_starttag(self, tag, attrs):
        if self.in_raw_text is not None:
            return
        if tag in _RAW_TEXT_ELEMENTS:
            self.in_raw_text = tag
            return
        if tag == "meta":
            self._collect(attrs)

    def handle_startendtag(self, tag, attrs):
        if self.in_raw_text is None and tag == "meta":
            self._collect(attrs)

    def handle_endtag(self, tag):
        if tag == self.in_raw_text:
            self.in_raw_text = None

    def _collect(self, attrs: list[tuple[str, Optional[str]]]) -> None:
        values: dict[str, Optional[str]] = {}
        for key, value in attrs:
            values.setdefault(key, value)

        name = values.get("name")
        if not name or not name.startswith(self.prefix) or name == self.prefix:
            return
        if values.get("content") is None:
            logger.debug("Skipping meta tag %r without content", name)
            return

        content = _raw_attribute(self.get_starttag_text() or "", "content")
        if content is None:
            return
        self.entries.append(MetadataEntry(name=name, content=content, prefix=self.prefix))


@dataclass(frozen=True, slots=True)
class MetaTagExtractor:
    """
    Finds <meta name="<prefix>..." content="..."> tags in HTML.

    - tags are located with html.parser, so comments and the contents of
      <script>, <style>, <textarea> and <title> are never read as tags
    - content is returned as written in the source (entities still escaped);
      decoding happens later
    """
    prefix: str = DEFAULT_META_PREFIX

    def extract(self, markup: str) -> list[MetadataEntry]:
        parser = _MetaTagParser(self.prefix)
        parser.feed(markup)
        parser.close()

        logger.debug("Extracted %d meta option entries (prefix=%r)", len(parser.entries), self.prefix)
        return parser.entries
