from __future__ import annotations

from typing import Protocol

from pageopts.domain.models import OptionMapping


class DefaultsProvider(Protocol):
    """
    Supplies the process-wide default options. Read-only: callers never mutate
    the returned mapping.
    """

    def options(self) -> OptionMapping:
        ...
