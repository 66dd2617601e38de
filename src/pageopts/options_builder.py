from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Mapping, Optional

from pageopts.adapters.defaults.static import StaticDefaults
from pageopts.adapters.extraction.meta_tags import MetaTagExtractor
from pageopts.domain.models import OptionLayers, OptionMapping
from pageopts.domain.schema import DEFAULT_META_PREFIX
from pageopts.merge import merge_layers
from pageopts.ports import DefaultsProvider, MetadataExtractor
from pageopts.utils.mappings import assign_path
from pageopts.utils.parsing import decode_value, looks_like_markup, resolve_key_path

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class OptionsBuilder:
    """
    Resolves the option mapping for one render:

        defaults < call-site options < <meta name="grover-..."> tags

    Meta tags are only read when the input is markup; a URL or other locator
    is passed through untouched and contributes no metadata layer.
    """
    defaults: DefaultsProvider
    extractor: MetadataExtractor

    def build(self, url_or_html: str, options: Optional[OptionMapping] = None) -> dict[str, Any]:
        return merge_layers(*self.layers(url_or_html, options).as_tuple())

    def layers(self, url_or_html: str, options: Optional[OptionMapping] = None) -> OptionLayers:
        if looks_like_markup(url_or_html):
            logger.debug("Input classified as markup; scanning meta tags")
            metadata = self.metadata_options(url_or_html)
        else:
            logger.debug("Input classified as locator; skipping meta tags")
            metadata = {}

        return OptionLayers(
            defaults=self.defaults.options(),
            call_site=options or {},
            document_metadata=metadata,
        )

    def metadata_options(self, markup: str) -> dict[str, Any]:
        meta_opts: dict[str, Any] = {}
        for entry in self.extractor.extract(markup):
            path = resolve_key_path(entry.key)
            assign_path(meta_opts, path, decode_value(entry.content).unwrap())
        return meta_opts


def build_options(
    url_or_html: str,
    options: Optional[OptionMapping] = None,
    *,
    defaults: Optional[Mapping[str, Any]] = None,
    meta_prefix: str = DEFAULT_META_PREFIX,
) -> dict[str, Any]:
    """
    One-shot helper: resolve options without wiring a builder by hand.
    """
    builder = OptionsBuilder(
        defaults=StaticDefaults(defaults or {}),
        extractor=MetaTagExtractor(prefix=meta_prefix),
    )
    return builder.build(url_or_html, options)
