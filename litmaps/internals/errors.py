# litmaps/internals/errors.py
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Dict


class Category(str, Enum):
    ENTRY   = "entry"
    FAMILY  = "family"
    CONVERT = "convert"


@dataclass(frozen=True)
class ErrorMessage:
    code: str
    text: str
    category: Category
    doc: str = ""


REGISTRY: Dict[str, ErrorMessage] = {}


class LiteralError(Exception):
    """Base class for errors raised while building a literal.

    Attributes:
        code: Catalog code (e.g., "LE0001").
        message: Formatted one-line message.
        category: Catalog category of the code.
        doc: Longer explanation from the catalog.
    """

    def __init__(self, code: str, **kwargs) -> None:
        em = _get(code)
        self.code = code
        self.message = _fmt(code, **kwargs)
        self.category = em.category
        self.doc = em.doc
        super().__init__(f"{code}: {self.message}")


class MalformedEntryError(LiteralError, TypeError):
    """A map entry is not a (key, value) pair."""


class UnknownFamilyError(LiteralError, LookupError):
    """No container family is registered under the requested name."""


class ConversionShapeError(LiteralError, TypeError):
    """A converter does not apply to the family's entry shape."""


class ContainerTargetError(LiteralError, TypeError):
    """The family cannot be retargeted to another container type."""


#
# --- Helpers
#

def _add(msg: ErrorMessage) -> None:
    if msg.code in REGISTRY:
        raise ValueError(f"duplicate error code {REGISTRY[msg.code]} in {msg}")
    REGISTRY[msg.code] = msg

def _get(code: str) -> ErrorMessage:
    try:
        return REGISTRY[code]
    except KeyError:
        raise KeyError(f"unknown error code: {code}")

def _fmt(code: str, **kwargs) -> str:
    msg = _get(code)
    try:
        return msg.text.format(**kwargs)
    except KeyError as key_error:
        missing = key_error.args[0]
        raise KeyError(f"missing text key '{missing}' for {code} "
                       f"(needed by: {msg.text!r})") from None

#
# --- Registry population
#

_add(ErrorMessage("LE0001",
    "entry {index} of {family} literal must be a (key, value) pair, got {got}",
    Category.ENTRY, "Map literals take two-item tuples or lists; nothing is inserted when one is malformed."))

_add(ErrorMessage("LE0002",
    "unknown container family '{name}'",
    Category.FAMILY, "The family name is not registered with FamilyRegistry."))

_add(ErrorMessage("LE0003",
    "{family} holds bare values; only a keys converter applies",
    Category.CONVERT, "Set literals have no values to convert."))

_add(ErrorMessage("LE0004",
    "{family} family cannot build into {target}",
    Category.FAMILY, "Only families with a with_container() method can be retargeted."))
