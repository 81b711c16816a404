"""Creates scripts from the declarations scripts make when they register themselves.

A registration supplies the script name, menu label, documentation, accepted image types, and a sequence of
argument declarations. Each declaration is a (type, label, default) triple, where the type is an ArgType or its
token (e.g. "SF-ADJUSTMENT") and the default takes a form that depends on the type:

    SF-IMAGE, SF-DRAWABLE, SF-LAYER,        int identifier, or None
    SF-CHANNEL, SF-VECTORS, SF-DISPLAY
    SF-COLOR                                (r, g, b) with 0-255 components, a QColor, or a color name
    SF-TOGGLE                               bool or int
    SF-VALUE, SF-STRING, SF-TEXT,           str, or None
    SF-FILENAME, SF-DIRNAME, SF-FONT,
    SF-PALETTE, SF-PATTERN, SF-GRADIENT
    SF-ADJUSTMENT                           (value, lower, upper, step, page, digits[, type]), where type 0 shows a
                                            slider and 1 a spin box
    SF-BRUSH                                (name, opacity, spacing, paint mode)
    SF-OPTION                               non-empty list of option labels, the first one selected
    SF-ENUM                                 (enum type name, value nickname)
"""
import logging
from typing import Any, Sequence, TypeAlias

from PySide6.QtGui import QColor

from scriptfu.script.arg_type import ArgType
from scriptfu.script.arg_value import ArgValue, ItemIdValue, ColorValue, ToggleValue, RawTextValue, TextValue, \
    AdjustmentValue, FileValue, ResourceValue, BrushValue, OptionValue, EnumValue
from scriptfu.script.enum_types import get_enum_index
from scriptfu.script.script import Script
from scriptfu.script.script_arg import ScriptArg
from scriptfu.util.shared_constants import NO_ITEM_ID
from scriptfu.util.validation import assert_type, assert_types

logger = logging.getLogger(__name__)

ArgDeclaration: TypeAlias = tuple[ArgType | str, str, Any]

ADJUSTMENT_SLIDER = 0
ADJUSTMENT_SPINNER = 1


def _sequence(default: Any, lengths: tuple[int, ...]) -> Sequence[Any]:
    if isinstance(default, (str, bytes)) or not isinstance(default, Sequence):
        raise TypeError(f'Expected a list of {" or ".join(str(n) for n in lengths)} values, got {default}')
    if len(default) not in lengths:
        raise ValueError(f'Expected {" or ".join(str(n) for n in lengths)} values, got {len(default)}')
    return default


def _optional_str(default: Any) -> str | None:
    if default is not None:
        assert_type(default, str)
    return default


def _number(value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f'Expected a number, got {value}')
    return float(value)


def _integer(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f'Expected an integer, got {value}')
    return value


def _parse_color(default: Any) -> QColor:
    if isinstance(default, QColor):
        color = QColor(default)
    elif isinstance(default, str):
        color = QColor(default)
    else:
        components = _sequence(default, (3,))
        for component in components:
            if not 0 <= _integer(component) <= 255:
                raise ValueError(f'Color component {component} is not within 0-255')
        color = QColor(*components)
    if not color.isValid():
        raise ValueError(f'Invalid color {default}')
    return color


def parse_default(arg_type: ArgType, default: Any) -> ArgValue:
    """Converts a declared default into the payload for an argument type.

    Raises
    ------
    TypeError
        If the default has the wrong type for the argument type.
    ValueError
        If the default has the right type but an invalid value.
    """
    match arg_type:
        case ArgType.IMAGE | ArgType.DRAWABLE | ArgType.LAYER | ArgType.CHANNEL | ArgType.VECTORS | ArgType.DISPLAY:
            return ItemIdValue(NO_ITEM_ID if default is None else _integer(default))
        case ArgType.COLOR:
            return ColorValue(_parse_color(default))
        case ArgType.TOGGLE:
            assert_type(default, (bool, int))
            return ToggleValue(bool(default))
        case ArgType.VALUE:
            return RawTextValue(_optional_str(default))
        case ArgType.STRING | ArgType.TEXT:
            return TextValue(_optional_str(default))
        case ArgType.ADJUSTMENT:
            values = _sequence(default, (6, 7))
            value, lower, upper, step, page = (_number(n) for n in values[:5])
            digits = _integer(values[5])
            slider_type = ADJUSTMENT_SLIDER if len(values) == 6 else _integer(values[6])
            if slider_type not in (ADJUSTMENT_SLIDER, ADJUSTMENT_SPINNER):
                raise ValueError(f'Invalid adjustment type {slider_type}')
            if lower > upper:
                raise ValueError(f'Adjustment lower bound {lower} is greater than upper bound {upper}')
            return AdjustmentValue(value, lower, upper, step, page, digits, slider_type == ADJUSTMENT_SLIDER)
        case ArgType.FILENAME | ArgType.DIRNAME:
            return FileValue(_optional_str(default))
        case ArgType.FONT | ArgType.PALETTE | ArgType.PATTERN | ArgType.GRADIENT:
            return ResourceValue(_optional_str(default))
        case ArgType.BRUSH:
            name, opacity, spacing, paint_mode = _sequence(default, (4,))
            return BrushValue(_optional_str(name), _number(opacity), _integer(spacing), _integer(paint_mode))
        case ArgType.OPTION:
            if isinstance(default, str) or not isinstance(default, Sequence) or len(default) == 0:
                raise ValueError(f'Expected a non-empty list of option labels, got {default}')
            options = list(default)
            assert_types(options, str)
            return OptionValue(options, 0)
        case ArgType.ENUM:
            type_name, value_nick = _sequence(default, (2,))
            assert_type(type_name, str)
            assert_type(value_nick, str)
            try:
                history = get_enum_index(type_name, value_nick)
            except KeyError as err:
                raise ValueError(f'Unknown enum type "{type_name}"') from err
            return EnumValue(type_name, history)
    raise ValueError(f'Unhandled argument type {arg_type}')


def parse_declaration(script_name: str, index: int, declaration: ArgDeclaration) -> ScriptArg:
    """Creates the argument for one declaration, raising ValueError if the declaration is invalid."""
    try:
        type_token, label, default = declaration
    except (TypeError, ValueError) as err:
        raise ValueError(f'{script_name}: argument {index + 1} is not a (type, label, default) declaration')\
            from err
    try:
        arg_type = ArgType(type_token)
    except ValueError as err:
        raise ValueError(f'{script_name}: argument {index + 1} has unknown type "{type_token}"') from err
    if not isinstance(label, str):
        raise ValueError(f'{script_name}: argument {index + 1} label must be a string, got {label}')
    try:
        return ScriptArg(arg_type, label, parse_default(arg_type, default))
    except (TypeError, ValueError) as err:
        raise ValueError(f'{script_name}: argument {index + 1} ({arg_type}, "{label}"): invalid default'
                         f' {default}: {err}') from err


def register_script(name: str,
                    menu_label: str,
                    blurb: str,
                    author: str,
                    copyright_notice: str,
                    date: str,
                    image_types: str,
                    arg_declarations: Sequence[ArgDeclaration]) -> Script:
    """Creates a script from its registration.

    Raises
    ------
    ValueError
        If the name is empty or any argument declaration is invalid.
    """
    if not isinstance(name, str) or len(name) == 0:
        raise ValueError(f'Invalid script name {name}')
    for field_name, value in (('menu label', menu_label), ('blurb', blurb), ('author', author),
                              ('copyright', copyright_notice), ('date', date), ('image types', image_types)):
        if not isinstance(value, str):
            raise ValueError(f'{name}: {field_name} must be a string, got {value}')
    script = Script(name, menu_label, blurb, author, copyright_notice, date, image_types, len(arg_declarations))
    for i, declaration in enumerate(arg_declarations):
        script.set_arg(i, parse_declaration(name, i, declaration))
    logger.info(f'Registered script {name} with {script.n_args} arguments')
    return script
