"""Registry for container families.

The FamilyRegistry maps family names to ContainerFamily objects so a literal
can be built from a name:

    # Register a family (typically at module load time)
    FamilyRegistry.register(HashMapFamily())

    # Look it up when building
    family = FamilyRegistry.get("HashMap")
"""

from __future__ import annotations
import logging
from typing import Optional, TYPE_CHECKING

from litmaps.internals.errors import UnknownFamilyError

if TYPE_CHECKING:
    from .interface import ContainerFamily

log = logging.getLogger(__name__)


class FamilyRegistry:
    """Central registry for container families.

    The registry uses class-level state, so registrations are visible to every
    builder in the process. Registering a name again replaces the previous
    family.
    """

    # All registered families by name
    _families: dict[str, 'ContainerFamily'] = {}

    @classmethod
    def register(cls, family: 'ContainerFamily') -> None:
        """Register a container family under its name."""
        if family.name in cls._families:
            log.debug("replacing container family %s", family.name)
        cls._families[family.name] = family
        log.debug("registered container family %s (%s, %s)",
                  family.name, family.shape.value, family.ordering.value)

    @classmethod
    def unregister(cls, name: str) -> None:
        """Unregister a family by name.

        Primarily used for testing.
        """
        cls._families.pop(name, None)

    @classmethod
    def get(cls, name: str) -> 'ContainerFamily':
        """Get a family by name.

        Raises:
            UnknownFamilyError: If no family is registered under name.
        """
        family = cls._families.get(name)
        if family is None:
            raise UnknownFamilyError("LE0002", name=name)
        return family

    @classmethod
    def get_provider(cls, name: str) -> Optional['ContainerFamily']:
        """Get a family by name, or None if it is not registered."""
        return cls._families.get(name)

    @classmethod
    def is_registered(cls, name: str) -> bool:
        """Check if a family is registered."""
        return name in cls._families

    @classmethod
    def get_all_registered(cls) -> dict[str, 'ContainerFamily']:
        """Get all registered families."""
        return cls._families.copy()
