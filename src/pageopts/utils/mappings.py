from __future__ import annotations

from types import MappingProxyType
from typing import Any, Mapping, Sequence


def freeze_options(x: Any) -> Any:
    """
    Read-only snapshot of an option value.
    - mappings -> MappingProxyType over str keys (recursively frozen)
    - list/tuple -> tuple
    - None values inside mappings are dropped
    """
    if isinstance(x, Mapping):
        return MappingProxyType(
            {str(k): freeze_options(v) for k, v in x.items() if v is not None}
        )
    if isinstance(x, (list, tuple)):
        return tuple(freeze_options(v) for v in x)
    return x


def thaw_options(x: Any) -> Any:
    """
    Plain, independently mutable copy of an option value.
    - mappings -> dict over str keys, None values dropped
    - list/tuple -> list
    """
    if isinstance(x, Mapping):
        return {str(k): thaw_options(v) for k, v in x.items() if v is not None}
    if isinstance(x, (list, tuple)):
        return [thaw_options(v) for v in x]
    return x


def assign_path(target: dict[str, Any], path: Sequence[str], value: Any) -> None:
    """
    Set target[path[0]][path[1]]... = value, creating groups on the way.
    A non-dict sitting where a group is needed gets replaced (last write wins).
    """
    node = target
    for segment in path[:-1]:
        child = node.get(segment)
        if not isinstance(child, dict):
            child = {}
            node[segment] = child
        node = child
    node[path[-1]] = value
