from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Union

from pageopts.domain.schema import DEFAULT_META_PREFIX

OptionMapping = Mapping[str, Any]


# -------------------------
# Decoded metadata values
# -------------------------

@dataclass(frozen=True, slots=True)
class BooleanValue:
    value: bool

    def unwrap(self) -> bool:
        return self.value


@dataclass(frozen=True, slots=True)
class NumberValue:
    """
    int when the literal has no fractional part, float otherwise.
    """
    value: int | float

    def unwrap(self) -> int | float:
        return self.value


@dataclass(frozen=True, slots=True)
class StringListValue:
    value: tuple[str, ...]

    def unwrap(self) -> list[str]:
        return list(self.value)


@dataclass(frozen=True, slots=True)
class StringValue:
    value: str

    def unwrap(self) -> str:
        return self.value


DecodedValue = Union[BooleanValue, NumberValue, StringListValue, StringValue]


# -------------------------
# Extraction / layering
# -------------------------

@dataclass(frozen=True, slots=True)
class MetadataEntry:
    """
    One override tag found in a document, e.g.
    <meta name="grover-viewport-width" content="200">.

    content is kept exactly as written in the attribute (entities still escaped).
    """
    name: str
    content: str
    prefix: str = DEFAULT_META_PREFIX

    @property
    def key(self) -> str:
        if self.name.startswith(self.prefix):
            return self.name[len(self.prefix):]
        return self.name


@dataclass(frozen=True, slots=True)
class OptionLayers:
    """
    The three option sources for one build, lowest precedence first.
    """
    defaults: OptionMapping = field(default_factory=dict)
    call_site: OptionMapping = field(default_factory=dict)
    document_metadata: OptionMapping = field(default_factory=dict)

    def as_tuple(self) -> tuple[OptionMapping, OptionMapping, OptionMapping]:
        return (self.defaults, self.call_site, self.document_metadata)
