from __future__ import annotations

from typing import Protocol

from pageopts.domain.models import MetadataEntry


class MetadataExtractor(Protocol):
    """
    Finds option-override entries embedded in document markup, in document order.
    """

    prefix: str

    def extract(self, markup: str) -> list[MetadataEntry]:
        ...
