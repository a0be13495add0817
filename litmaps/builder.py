"""Literal construction of maps and sets.

One routine, build(), fills any container family from a sequence of entries:

1. Count the entries written at the call site
2. Create an empty container, passing that count as the capacity hint
3. Insert every entry in listed order (later keys overwrite earlier ones,
   repeated set values collapse)
4. Hand the container to the caller

The named constructors are LiteralBuilder instances bound to the built-in
families:

    hashmap((1, "one"), (2, "two"))      -> {1: 'one', 2: 'two'}
    sortedmap(("b", 2), ("a", 1))        -> SortedDict({'a': 1, 'b': 2})
    hashset("a", "b", "a")               -> {'a', 'b'}
    sortedset(3, 1, 2)                   -> SortedSet([1, 2, 3])
"""

from __future__ import annotations
import logging
from collections.abc import Sized
from typing import Any, Callable, Optional, Sequence, Union

from litmaps import constants
from litmaps.families import ContainerFamily, EntryShape, FamilyRegistry
from litmaps.internals.errors import ContainerTargetError, ConversionShapeError, MalformedEntryError

log = logging.getLogger(__name__)

Converter = Callable[[Any], Any]
FamilyRef = Union[str, ContainerFamily]


def _resolve(family: FamilyRef) -> ContainerFamily:
    if isinstance(family, str):
        return FamilyRegistry.get(family)
    return family


def _check_converters(family: ContainerFamily, values: Optional[Converter]) -> None:
    if values is not None and family.shape is EntryShape.VALUE:
        raise ConversionShapeError("LE0003", family=family.name)


def _prepare(
    family: ContainerFamily,
    entries: Sequence[Any],
    keys: Optional[Converter],
    values: Optional[Converter],
) -> list[Any]:
    """Validate and convert every entry before the container exists."""
    if family.shape is EntryShape.VALUE:
        if keys is None:
            return list(entries)
        return [keys(entry) for entry in entries]

    prepared = []
    for index, entry in enumerate(entries):
        if not isinstance(entry, (tuple, list)) or len(entry) != constants.PAIR_ARITY:
            raise MalformedEntryError("LE0001", index=index, family=family.name, got=repr(entry))
        key, value = entry
        if keys is not None:
            key = keys(key)
        if values is not None:
            value = values(value)
        prepared.append((key, value))
    return prepared


def build(
    family: FamilyRef,
    entries: Sequence[Any],
    *,
    keys: Optional[Converter] = None,
    values: Optional[Converter] = None,
) -> Any:
    """Build a populated container from literal entries.

    Args:
        family: A ContainerFamily or the name of a registered one.
        entries: (key, value) pairs for map families, bare values for sets.
        keys: Optional converter applied to every key (or set element).
        values: Optional converter applied to every map value.

    Returns:
        A new container owned by the caller.

    Raises:
        UnknownFamilyError: family is a name nobody registered.
        MalformedEntryError: a map entry is not a (key, value) pair.
        ConversionShapeError: values converter given for a set family.
    """
    family = _resolve(family)
    _check_converters(family, values)
    prepared = _prepare(family, entries, keys, values)

    container = family.new(len(prepared))
    for entry in prepared:
        family.insert(container, entry)

    if log.isEnabledFor(logging.DEBUG):
        if isinstance(container, Sized):
            log.debug("built %s literal: %d entries, %d distinct",
                      family.name, len(prepared), len(container))
        else:
            log.debug("built %s literal: %d entries", family.name, len(prepared))
    return container


def _compose(inner: Optional[Converter], outer: Optional[Converter]) -> Optional[Converter]:
    if inner is None:
        return outer
    if outer is None:
        return inner
    return lambda item: inner(outer(item))


class LiteralBuilder:
    """Callable literal for one container family.

    Calling the builder with entries as positional arguments returns a new
    container; a trailing comma in the call is harmless.
    """

    __slots__ = ("_family", "_keys", "_values")

    def __init__(
        self,
        family: FamilyRef,
        *,
        keys: Optional[Converter] = None,
        values: Optional[Converter] = None,
    ) -> None:
        self._family = _resolve(family)
        _check_converters(self._family, values)
        self._keys = keys
        self._values = values

    @property
    def family(self) -> ContainerFamily:
        return self._family

    @property
    def keys(self) -> Optional[Converter]:
        return self._keys

    @property
    def values(self) -> Optional[Converter]:
        return self._values

    def __call__(self, *entries: Any) -> Any:
        return build(self._family, entries, keys=self._keys, values=self._values)

    def into(self, container_type: Callable[..., Any]) -> 'LiteralBuilder':
        """Return a builder for the same family that fills container_type.

        Raises:
            ContainerTargetError: the family has no with_container() method.
        """
        with_container = getattr(self._family, "with_container", None)
        if with_container is None:
            target = getattr(container_type, "__name__", repr(container_type))
            raise ContainerTargetError("LE0004", family=self._family.name, target=target)
        return LiteralBuilder(with_container(container_type),
                              keys=self._keys, values=self._values)

    def __repr__(self) -> str:
        return f"LiteralBuilder({self.family!r})"


def convert_args(
    builder: Union[LiteralBuilder, FamilyRef],
    keys: Optional[Converter] = None,
    values: Optional[Converter] = None,
) -> LiteralBuilder:
    """Wrap a literal so every key and/or value goes through a converter.

        convert_args(hashmap, keys=str)((1, "a"), (2, "b"))  -> {'1': 'a', '2': 'b'}
        convert_args(hashset, keys=str.lower)("A", "a")      -> {'a'}

    Converters added by an outer convert_args run before the ones already on
    the builder. For set families only keys applies.
    """
    if not isinstance(builder, LiteralBuilder):
        builder = LiteralBuilder(builder)
    return LiteralBuilder(builder.family,
                          keys=_compose(builder.keys, keys),
                          values=_compose(builder.values, values))


hashmap = LiteralBuilder(constants.HASH_MAP)
sortedmap = LiteralBuilder(constants.SORTED_MAP)
hashset = LiteralBuilder(constants.HASH_SET)
sortedset = LiteralBuilder(constants.SORTED_SET)
