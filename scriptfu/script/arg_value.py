"""Typed argument payloads.

Every argument type is bound to exactly one payload class. Payload classes own their text and lists exclusively,
and each one defines, next to its fields, how it is copied, released, rendered as a command token, and updated
from the value a host passes in for it when a procedure is invoked.
"""
from dataclasses import dataclass, field, replace
from typing import Any, Optional

from PySide6.QtGui import QColor

from scriptfu.script.arg_type import ArgType
from scriptfu.script.enum_types import get_enum_values
from scriptfu.util.shared_constants import NO_ITEM_ID
from scriptfu.util.text_utils import quote_string, format_float
from scriptfu.util.validation import assert_valid_index


def _expect_param(param: Any, expected_type: type | tuple[type, ...], allow_none: bool = False) -> None:
    if param is None and allow_none:
        return
    if isinstance(param, bool) and expected_type in (int, float, (int, float)):
        raise TypeError(f'Expected {expected_type} parameter, got bool {param}')
    if not isinstance(param, expected_type):
        raise TypeError(f'Expected {expected_type} parameter, got {type(param)}: {param}')


class ArgValue:
    """Interface shared by all argument payload classes."""

    def copy(self) -> 'ArgValue':
        """Returns an independent copy of this payload."""
        raise NotImplementedError()

    def release(self) -> None:
        """Drops any text or lists owned by this payload."""
        raise NotImplementedError()

    def to_token(self, float_precision: int) -> str:
        """Returns this payload as a single command token."""
        raise NotImplementedError()

    def updated_from_param(self, param: Any) -> 'ArgValue':
        """Returns a new payload holding a host parameter value, keeping any fixed properties of this payload."""
        raise NotImplementedError()

    def token_from_param(self, param: Any, float_precision: int) -> str:
        """Renders a host parameter value the way this payload type renders its own value."""
        return self.updated_from_param(param).to_token(float_precision)


@dataclass
class ItemIdValue(ArgValue):
    """Session-scoped identifier of an image, drawable, layer, channel, vectors object, or display."""
    item_id: Optional[int] = NO_ITEM_ID

    def copy(self) -> 'ItemIdValue':
        return ItemIdValue(self.item_id)

    def release(self) -> None:
        """Identifiers own nothing."""

    def to_token(self, float_precision: int) -> str:
        return str(NO_ITEM_ID if self.item_id is None else self.item_id)

    def updated_from_param(self, param: Any) -> 'ItemIdValue':
        """Accepts any host object with an integer `id` attribute, or None if nothing is referenced."""
        if param is None:
            return ItemIdValue(NO_ITEM_ID)
        item_id = getattr(param, 'id', None)
        if isinstance(item_id, bool) or not isinstance(item_id, int):
            raise TypeError(f'Expected an image, item or display parameter, got {param}')
        return ItemIdValue(item_id)


@dataclass
class ColorValue(ArgValue):
    """An RGB color."""
    color: QColor = field(default_factory=lambda: QColor(0, 0, 0))

    def copy(self) -> 'ColorValue':
        return ColorValue(QColor(self.color))

    def release(self) -> None:
        """Colors own nothing."""

    def to_token(self, float_precision: int) -> str:
        return f"'({self.color.red()} {self.color.green()} {self.color.blue()})"

    def updated_from_param(self, param: Any) -> 'ColorValue':
        _expect_param(param, QColor)
        return ColorValue(QColor(param))


@dataclass
class ToggleValue(ArgValue):
    """A boolean toggle."""
    active: bool = False

    def copy(self) -> 'ToggleValue':
        return ToggleValue(self.active)

    def release(self) -> None:
        """Toggles own nothing."""

    def to_token(self, float_precision: int) -> str:
        return 'TRUE' if self.active else 'FALSE'

    def updated_from_param(self, param: Any) -> 'ToggleValue':
        _expect_param(param, (bool, int))
        return ToggleValue(bool(param))


@dataclass
class RawTextValue(ArgValue):
    """Text inserted into commands exactly as written, so scripts can pass arbitrary expressions."""
    text: Optional[str] = None

    def copy(self) -> 'RawTextValue':
        return RawTextValue(self.text)

    def release(self) -> None:
        self.text = None

    def to_token(self, float_precision: int) -> str:
        # An empty token would shift every following argument.
        if self.text is None or len(self.text) == 0:
            return '""'
        return self.text

    def updated_from_param(self, param: Any) -> 'RawTextValue':
        _expect_param(param, str, allow_none=True)
        return RawTextValue(param)


@dataclass
class TextValue(ArgValue):
    """Single or multi-line text, escaped and quoted in commands."""
    text: Optional[str] = None

    def copy(self) -> 'TextValue':
        return TextValue(self.text)

    def release(self) -> None:
        self.text = None

    def to_token(self, float_precision: int) -> str:
        return quote_string(self.text)

    def updated_from_param(self, param: Any) -> 'TextValue':
        _expect_param(param, str, allow_none=True)
        return TextValue(param)


@dataclass
class AdjustmentValue(ArgValue):
    """A numeric value, with the range and step sizes used when editing it."""
    value: float = 0.0
    lower: float = 0.0
    upper: float = 100.0
    step: float = 1.0
    page: float = 10.0
    digits: int = 0
    slider: bool = True

    def copy(self) -> 'AdjustmentValue':
        return replace(self)

    def release(self) -> None:
        """Adjustments own nothing."""

    def to_token(self, float_precision: int) -> str:
        return format_float(self.value, float_precision)

    def updated_from_param(self, param: Any) -> 'AdjustmentValue':
        _expect_param(param, (int, float))
        return replace(self, value=float(param))


@dataclass
class FileValue(ArgValue):
    """A file or directory path."""
    filename: Optional[str] = None

    def copy(self) -> 'FileValue':
        return FileValue(self.filename)

    def release(self) -> None:
        self.filename = None

    def to_token(self, float_precision: int) -> str:
        return quote_string(self.filename)

    def updated_from_param(self, param: Any) -> 'FileValue':
        _expect_param(param, str, allow_none=True)
        return FileValue(param)


@dataclass
class ResourceValue(ArgValue):
    """The name of a font, palette, pattern, or gradient resource."""
    name: Optional[str] = None

    def copy(self) -> 'ResourceValue':
        return ResourceValue(self.name)

    def release(self) -> None:
        self.name = None

    def to_token(self, float_precision: int) -> str:
        return quote_string(self.name)

    def updated_from_param(self, param: Any) -> 'ResourceValue':
        _expect_param(param, str, allow_none=True)
        return ResourceValue(param)


@dataclass
class BrushValue(ArgValue):
    """A brush resource name, with the opacity, spacing, and paint mode it should be used with."""
    name: Optional[str] = None
    opacity: float = 100.0
    spacing: int = 20
    paint_mode: int = 0

    def copy(self) -> 'BrushValue':
        return replace(self)

    def release(self) -> None:
        self.name = None

    def to_token(self, float_precision: int) -> str:
        return (f"'({quote_string(self.name)} {format_float(self.opacity, float_precision)} {self.spacing}"
                f" {self.paint_mode})")

    def updated_from_param(self, param: Any) -> 'BrushValue':
        """Hosts pass brushes by name only, unless they provide a complete BrushValue."""
        if isinstance(param, BrushValue):
            return param.copy()
        _expect_param(param, str, allow_none=True)
        return replace(self, name=param)

    def token_from_param(self, param: Any, float_precision: int) -> str:
        if isinstance(param, BrushValue):
            return param.to_token(float_precision)
        _expect_param(param, str, allow_none=True)
        return quote_string(param)


@dataclass
class OptionValue(ArgValue):
    """A selected index into a fixed list of option labels."""
    options: list[str] = field(default_factory=list)
    history: int = 0

    def __post_init__(self) -> None:
        assert_valid_index(self.history, self.options)

    def copy(self) -> 'OptionValue':
        return OptionValue([*self.options], self.history)

    def release(self) -> None:
        self.options = []

    def to_token(self, float_precision: int) -> str:
        return str(self.history)

    def updated_from_param(self, param: Any) -> 'OptionValue':
        _expect_param(param, int)
        return OptionValue([*self.options], param)


@dataclass
class EnumValue(ArgValue):
    """A selected index into the values of a named enumeration."""
    type_name: str = ''
    history: int = 0

    def __post_init__(self) -> None:
        try:
            enum_values = get_enum_values(self.type_name)
        except KeyError as err:
            raise ValueError(f'Enum argument bound to unknown enum type "{self.type_name}"') from err
        assert_valid_index(self.history, enum_values)

    def copy(self) -> 'EnumValue':
        return EnumValue(self.type_name, self.history)

    def release(self) -> None:
        """The enumeration itself belongs to the enum type registry."""

    def to_token(self, float_precision: int) -> str:
        return str(self.history)

    def updated_from_param(self, param: Any) -> 'EnumValue':
        _expect_param(param, int)
        return EnumValue(self.type_name, param)


def value_class_for(arg_type: ArgType) -> type[ArgValue]:
    """Returns the payload class bound to an argument type."""
    match arg_type:
        case ArgType.IMAGE | ArgType.DRAWABLE | ArgType.LAYER | ArgType.CHANNEL | ArgType.VECTORS | ArgType.DISPLAY:
            return ItemIdValue
        case ArgType.COLOR:
            return ColorValue
        case ArgType.TOGGLE:
            return ToggleValue
        case ArgType.VALUE:
            return RawTextValue
        case ArgType.STRING | ArgType.TEXT:
            return TextValue
        case ArgType.ADJUSTMENT:
            return AdjustmentValue
        case ArgType.FILENAME | ArgType.DIRNAME:
            return FileValue
        case ArgType.FONT | ArgType.PALETTE | ArgType.PATTERN | ArgType.GRADIENT:
            return ResourceValue
        case ArgType.BRUSH:
            return BrushValue
        case ArgType.OPTION:
            return OptionValue
        case ArgType.ENUM:
            return EnumValue
    raise ValueError(f'Unhandled argument type {arg_type}')
