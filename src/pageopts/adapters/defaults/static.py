from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

from pageopts.domain.models import OptionMapping
from pageopts.utils.mappings import freeze_options


@dataclass(frozen=True, slots=True)
class StaticDefaults:
    """
    Process-wide defaults held as a read-only snapshot.

    The input mapping is copied and frozen on construction, so later changes
    to it (or attempts to mutate options()) never leak into a build.
    """
    values: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "values", freeze_options(self.values))

    def options(self) -> OptionMapping:
        return self.values
