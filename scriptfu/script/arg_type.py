"""Closed set of script argument types, with the per-type naming used when exporting procedures."""
from enum import StrEnum


class ArgType(StrEnum):
    """Script argument types, valued by the token scripts use to declare them."""
    IMAGE = 'SF-IMAGE'
    DRAWABLE = 'SF-DRAWABLE'
    LAYER = 'SF-LAYER'
    CHANNEL = 'SF-CHANNEL'
    VECTORS = 'SF-VECTORS'
    DISPLAY = 'SF-DISPLAY'
    COLOR = 'SF-COLOR'
    TOGGLE = 'SF-TOGGLE'
    VALUE = 'SF-VALUE'
    STRING = 'SF-STRING'
    TEXT = 'SF-TEXT'
    ADJUSTMENT = 'SF-ADJUSTMENT'
    FILENAME = 'SF-FILENAME'
    DIRNAME = 'SF-DIRNAME'
    FONT = 'SF-FONT'
    PALETTE = 'SF-PALETTE'
    PATTERN = 'SF-PATTERN'
    GRADIENT = 'SF-GRADIENT'
    BRUSH = 'SF-BRUSH'
    OPTION = 'SF-OPTION'
    ENUM = 'SF-ENUM'

    @property
    def is_item_type(self) -> bool:
        """Returns whether values of this type are session-scoped image, item or display identifiers."""
        return self in ITEM_TYPES

    @property
    def param_name(self) -> str:
        """Returns the base machine-readable name used for exported parameters of this type."""
        match self:
            case ArgType.IMAGE:
                return 'image'
            case ArgType.DRAWABLE:
                return 'drawable'
            case ArgType.LAYER:
                return 'layer'
            case ArgType.CHANNEL:
                return 'channel'
            case ArgType.VECTORS:
                return 'vectors'
            case ArgType.DISPLAY:
                return 'display'
            case ArgType.COLOR:
                return 'color'
            case ArgType.TOGGLE:
                return 'toggle'
            case ArgType.VALUE:
                return 'value'
            case ArgType.STRING:
                return 'string'
            case ArgType.TEXT:
                return 'text'
            case ArgType.ADJUSTMENT:
                return 'adjustment'
            case ArgType.FILENAME:
                return 'filename'
            case ArgType.DIRNAME:
                return 'dirname'
            case ArgType.FONT:
                return 'font'
            case ArgType.PALETTE:
                return 'palette'
            case ArgType.PATTERN:
                return 'pattern'
            case ArgType.GRADIENT:
                return 'gradient'
            case ArgType.BRUSH:
                return 'brush'
            case ArgType.OPTION:
                return 'option'
            case ArgType.ENUM:
                return 'enum'
        raise ValueError(f'Unhandled argument type {self}')

    @property
    def param_nick(self) -> str:
        """Returns the base human-readable nickname used for exported parameters of this type."""
        return self.param_name.capitalize()


ITEM_TYPES = frozenset({ArgType.IMAGE, ArgType.DRAWABLE, ArgType.LAYER, ArgType.CHANNEL, ArgType.VECTORS,
                        ArgType.DISPLAY})
