"""Named enumerations that enum-type script arguments can be bound to."""
import logging
from enum import Enum, StrEnum
from threading import Lock
from typing import Iterable

from PySide6.QtCore import QCoreApplication

logger = logging.getLogger(__name__)

# The `QCoreApplication.translate` context for strings in this file
TR_ID = 'script.enum_types'


def _tr(*args):
    """Helper to make `QCoreApplication.translate` more concise."""
    return QCoreApplication.translate(TR_ID, *args)


class PaintMode(StrEnum):
    """Brush and layer paint modes, in the order scripts refer to them by index."""
    NORMAL = _tr('Normal')
    MULTIPLY = _tr('Multiply')
    SCREEN = _tr('Screen')
    OVERLAY = _tr('Overlay')
    DARKEN = _tr('Darken')
    LIGHTEN = _tr('Lighten')
    COLOR_DODGE = _tr('Color Dodge')
    COLOR_BURN = _tr('Color Burn')
    HARD_LIGHT = _tr('Hard Light')
    SOFT_LIGHT = _tr('Soft Light')
    DIFFERENCE = _tr('Difference')
    COLOR = _tr('Color')
    LUMINOSITY = _tr('Luminosity')
    HUE = _tr('Hue')
    SATURATION = _tr('Saturation')
    PLUS = _tr('Plus')


_enum_types: dict[str, list[str]] = {}
_enum_lock = Lock()


def register_enum_type(type_name: str, values: Iterable[str] | type[Enum]) -> None:
    """Registers a named enumeration, replacing any previous registration with the same name.

    Parameters
    ----------
    type_name: str
        Name scripts use to refer to the enumeration.
    values: Iterable[str] or Enum class
        Value nicknames in index order. Enum classes contribute their member names, lower-cased, with
        underscores replaced by dashes.
    """
    if isinstance(values, type) and issubclass(values, Enum):
        nicks = [_member_nick(member) for member in values]
    else:
        nicks = [str(value) for value in values]
    if len(nicks) == 0:
        raise ValueError(f'Enum type {type_name} has no values')
    with _enum_lock:
        if type_name in _enum_types:
            logger.info(f'Replacing enum type {type_name}')
        _enum_types[type_name] = nicks


def is_enum_type(type_name: str) -> bool:
    """Returns whether an enumeration was registered under a name."""
    with _enum_lock:
        return type_name in _enum_types


def get_enum_values(type_name: str) -> list[str]:
    """Returns the value nicknames of a registered enumeration, raising KeyError if it isn't registered."""
    with _enum_lock:
        if type_name not in _enum_types:
            raise KeyError(f'Unknown enum type "{type_name}"')
        return [*_enum_types[type_name]]


def get_enum_index(type_name: str, value_nick: str) -> int:
    """Returns the index of a value nickname within a registered enumeration."""
    values = get_enum_values(type_name)
    if value_nick not in values:
        raise ValueError(f'"{value_nick}" is not a value of enum type {type_name}, expected one of {values}')
    return values.index(value_nick)


def _member_nick(member: Enum) -> str:
    return member.name.lower().replace('_', '-')


register_enum_type('PaintMode', PaintMode)
