"""litmaps - map and set literals for Python containers."""
import logging
from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("litmaps")
except PackageNotFoundError:
    # Development mode - read from pyproject.toml
    import tomllib
    from pathlib import Path
    try:
        pyproject = Path(__file__).parent.parent / "pyproject.toml"
        with open(pyproject, "rb") as f:
            __version__ = tomllib.load(f).get("project", {}).get("version", "unknown")
    except (OSError, tomllib.TOMLDecodeError):
        __version__ = "unknown"

logging.getLogger(__name__).addHandler(logging.NullHandler())

from litmaps.builder import (  # noqa: E402
    LiteralBuilder,
    build,
    convert_args,
    hashmap,
    hashset,
    sortedmap,
    sortedset,
)
from litmaps.families import ContainerFamily, EntryShape, FamilyRegistry, Ordering  # noqa: E402
from litmaps.internals.errors import (  # noqa: E402
    ContainerTargetError,
    ConversionShapeError,
    LiteralError,
    MalformedEntryError,
    UnknownFamilyError,
)

__all__ = [
    'ContainerFamily',
    'ContainerTargetError',
    'ConversionShapeError',
    'EntryShape',
    'FamilyRegistry',
    'LiteralBuilder',
    'LiteralError',
    'MalformedEntryError',
    'Ordering',
    'UnknownFamilyError',
    'build',
    'convert_args',
    'hashmap',
    'hashset',
    'sortedmap',
    'sortedset',
]
