from collections import Counter

import pytest

from litmaps import EntryShape, Ordering, UnknownFamilyError, build
from litmaps.families import (
    FamilyRegistry,
    HashMapFamily,
    HashSetFamily,
    SortedMapFamily,
    SortedSetFamily,
)


class CounterFamily:
    name = "Counter"
    shape = EntryShape.VALUE
    ordering = Ordering.HASH
    supports_capacity = False

    def new(self, capacity):
        return Counter()

    def insert(self, container, entry):
        container[entry] += 1


def test_builtin_families_registered():
    registered = FamilyRegistry.get_all_registered()
    assert registered["HashMap"] == HashMapFamily()
    assert registered["SortedMap"] == SortedMapFamily()
    assert registered["HashSet"] == HashSetFamily()
    assert registered["SortedSet"] == SortedSetFamily()


@pytest.mark.parametrize("family_cls, shape, ordering, capacity", [
    (HashMapFamily, EntryShape.PAIR, Ordering.HASH, True),
    (SortedMapFamily, EntryShape.PAIR, Ordering.SORTED, False),
    (HashSetFamily, EntryShape.VALUE, Ordering.HASH, True),
    (SortedSetFamily, EntryShape.VALUE, Ordering.SORTED, False),
])
def test_family_descriptors(family_cls, shape, ordering, capacity):
    family = family_cls()
    assert family.shape is shape
    assert family.ordering is ordering
    assert family.supports_capacity is capacity


def test_register_custom_family(clean_registry):
    clean_registry.register(CounterFamily())
    assert clean_registry.is_registered("Counter")
    assert build("Counter", ["a", "b", "a"]) == Counter({"a": 2, "b": 1})


def test_register_replaces(clean_registry):
    clean_registry.register(HashMapFamily(dict))
    replacement = HashSetFamily(frozenset)
    replacement.name = "HashMap"
    clean_registry.register(replacement)
    assert clean_registry.get("HashMap") is replacement


def test_unregister(clean_registry):
    clean_registry.unregister("SortedSet")
    assert not clean_registry.is_registered("SortedSet")
    assert clean_registry.get_provider("SortedSet") is None
    with pytest.raises(UnknownFamilyError):
        clean_registry.get("SortedSet")
    clean_registry.unregister("SortedSet")


def test_with_container():
    family = HashMapFamily().with_container(dict)
    assert family == HashMapFamily()
    assert family != SortedMapFamily()
    assert HashSetFamily(frozenset) != HashSetFamily()
    assert "HashSetFamily(frozenset)" == repr(HashSetFamily(frozenset))
