"""ContainerFamily protocol and supporting types.

This module defines the plugin interface for container families. A family
describes one kind of target container for a literal:
- Entry shape (key/value pairs or bare values)
- Ordering discipline (hash or sorted)
- How to create an empty container, with or without a capacity hint
- How to insert one entry
"""

from __future__ import annotations
from enum import Enum
from typing import Any, Protocol


class EntryShape(str, Enum):
    PAIR = "pair"
    VALUE = "value"


class Ordering(str, Enum):
    HASH = "hash"
    SORTED = "sorted"


class ContainerFamily(Protocol):
    """Plugin interface for container families.

    Families are registered with the FamilyRegistry and looked up by name
    when a literal is built from a family name rather than a family object.

    Example implementation for a Counter-backed multiset:

        class CounterFamily:
            name = "Counter"
            shape = EntryShape.VALUE
            ordering = Ordering.HASH
            supports_capacity = False

            def new(self, capacity: int) -> Counter:
                return Counter()

            def insert(self, container: Counter, entry: Any) -> None:
                container[entry] += 1

    A family may also define with_container(container_type) returning a
    family of the same kind that builds container_type. LiteralBuilder.into()
    needs it and raises ContainerTargetError for families without one. The
    container new() returns need not be Sized.
    """

    @property
    def name(self) -> str:
        """Return the family name (e.g., "HashMap", "SortedSet")."""
        ...

    @property
    def shape(self) -> EntryShape:
        """Return the shape each literal entry must have."""
        ...

    @property
    def ordering(self) -> Ordering:
        """Return the iteration order discipline of the built container."""
        ...

    @property
    def supports_capacity(self) -> bool:
        """Return True if new() forwards the capacity hint to the container."""
        ...

    def new(self, capacity: int) -> Any:
        """Create an empty container.

        Args:
            capacity: Number of entries about to be inserted, duplicates
                included. Families without a capacity concept ignore it.
        """
        ...

    def insert(self, container: Any, entry: Any) -> None:
        """Insert one prepared entry.

        For PAIR families the entry is a (key, value) tuple and an equal key
        is overwritten. For VALUE families an equal value is a no-op.
        """
        ...
