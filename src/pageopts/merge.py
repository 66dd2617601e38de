from __future__ import annotations

import logging
from typing import Any, Mapping

from pageopts.domain.models import OptionMapping
from pageopts.utils.mappings import thaw_options

logger = logging.getLogger(__name__)


def deep_merge(lower: OptionMapping, higher: OptionMapping) -> dict[str, Any]:
    """
    Merge two option mappings; `higher` wins.

    Nested mappings present on both sides are merged key by key. Any other
    collision (scalar vs mapping, list vs list) is a wholesale replacement.
    None values in `higher` are ignored, so a caller can pass `{"quality": None}`
    without erasing a default. Inputs are never mutated and never aliased.
    """
    merged: dict[str, Any] = thaw_options(lower)
    for key, value in higher.items():
        if value is None:
            continue
        key = str(key)
        existing = merged.get(key)
        if isinstance(value, Mapping) and isinstance(existing, dict):
            merged[key] = deep_merge(existing, value)
        else:
            merged[key] = thaw_options(value)
    return merged


def merge_layers(
    defaults: OptionMapping,
    call_site: OptionMapping,
    document_metadata: OptionMapping,
) -> dict[str, Any]:
    """
    defaults < call_site < document_metadata.
    """
    merged = deep_merge(defaults, call_site)
    merged = deep_merge(merged, document_metadata)
    logger.debug(
        "Merged options: %d default, %d call-site, %d metadata keys -> %d keys",
        len(defaults), len(call_site), len(document_metadata), len(merged),
    )
    return merged
