"""Container family system.

Key components:
- ContainerFamily: Protocol interface for target containers
- FamilyRegistry: Central registry for looking families up by name
- EntryShape, Ordering: Family descriptors

Families:
- HashMapFamily, SortedMapFamily, HashSetFamily, SortedSetFamily (in .builtin)
"""

from .interface import ContainerFamily, EntryShape, Ordering
from .registry import FamilyRegistry
from .builtin import HashMapFamily, HashSetFamily, SortedMapFamily, SortedSetFamily

__all__ = [
    'ContainerFamily',
    'EntryShape',
    'FamilyRegistry',
    'HashMapFamily',
    'HashSetFamily',
    'Ordering',
    'SortedMapFamily',
    'SortedSetFamily',
    'register_builtin_families',
]


def register_builtin_families() -> None:
    """Register the four built-in families with their default containers."""
    for family_cls in (HashMapFamily, SortedMapFamily, HashSetFamily, SortedSetFamily):
        FamilyRegistry.register(family_cls())


register_builtin_families()
