"""Built-in container families.

    HashMap    dict                         key/value   capacity hint
    SortedMap  sortedcontainers.SortedDict  key/value
    HashSet    set                          value       capacity hint
    SortedSet  sortedcontainers.SortedSet   value

Each family takes an optional container_type so the same literal can target
another container with the same insertion protocol (item assignment for maps,
add() for sets).
"""

from __future__ import annotations
from typing import Any, Callable

from sortedcontainers import SortedDict, SortedSet

from litmaps import constants
from .interface import EntryShape, Ordering


class _BuiltinFamily:
    name: str = ""
    shape: EntryShape
    ordering: Ordering
    supports_capacity: bool = False
    default_container: Callable[[], Any]

    def __init__(self, container_type: Callable[..., Any] | None = None) -> None:
        self.container_type = container_type or type(self).default_container

    def with_container(self, container_type: Callable[..., Any]) -> '_BuiltinFamily':
        """Return a family of the same kind that builds container_type."""
        return type(self)(container_type)

    def new(self, capacity: int) -> Any:
        if self.supports_capacity:
            with_capacity = getattr(self.container_type, constants.CAPACITY_CONSTRUCTOR, None)
            if with_capacity is not None:
                return with_capacity(capacity)
        # dict and set expose no presizing, the hint stops here
        return self.container_type()

    def __eq__(self, other: object) -> bool:
        return type(other) is type(self) and other.container_type is self.container_type

    def __hash__(self) -> int:
        return hash((type(self), self.container_type))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({getattr(self.container_type, '__name__', self.container_type)})"


class _MapFamily(_BuiltinFamily):
    shape = EntryShape.PAIR

    def insert(self, container: Any, entry: tuple[Any, Any]) -> None:
        key, value = entry
        container[key] = value


class _SetFamily(_BuiltinFamily):
    shape = EntryShape.VALUE

    def insert(self, container: Any, entry: Any) -> None:
        container.add(entry)


class HashMapFamily(_MapFamily):
    """Hash map literal, a dict by default."""
    name = constants.HASH_MAP
    ordering = Ordering.HASH
    supports_capacity = True
    default_container = dict


class SortedMapFamily(_MapFamily):
    """Sorted map literal. Iteration follows ascending key order."""
    name = constants.SORTED_MAP
    ordering = Ordering.SORTED
    default_container = SortedDict


class HashSetFamily(_SetFamily):
    """Hash set literal, a set by default."""
    name = constants.HASH_SET
    ordering = Ordering.HASH
    supports_capacity = True
    default_container = set


class SortedSetFamily(_SetFamily):
    """Sorted set literal. Iteration follows ascending value order."""
    name = constants.SORTED_SET
    ordering = Ordering.SORTED
    default_container = SortedSet
