"""A single config value, loaded from a JSON definition."""
import logging
from typing import Any, Optional

from PySide6.QtCore import QCoreApplication

from scriptfu.util.parameter import Parameter, ParamType, TYPE_FLOAT

logger = logging.getLogger(__name__)

# The `QCoreApplication.translate` context for strings in this file
TR_ID = 'config.config_entry'


def _tr(*args):
    """Helper to make `QCoreApplication.translate` more concise."""
    return QCoreApplication.translate(TR_ID, *args)


INVALID_DEFINITION_TYPE_ERROR = _tr('{key}: unsupported definition type "{type_name}"')
MISSING_DEFINITION_FIELD_ERROR = _tr('{key}: definition is missing "{field}"')
INVALID_SAVED_VALUE_ERROR = _tr('{key}: ignoring invalid saved value {value}')


class DefinitionKey:
    """Config definition key constants."""
    TYPE = 'type'
    DEFAULT = 'default'
    LABEL = 'label'
    CATEGORY = 'category'
    TOOLTIP = 'description'
    RANGE = 'range_options'
    SAVED = 'saved'


class RangeKey:
    """Config definition range key constants."""
    MIN = 'min'
    MAX = 'max'


# Definition type names, mapped to the value used when no default is given:
_EMPTY_VALUES: dict[str, ParamType] = {
    'bool': False,
    'int': 0,
    'float': 0.0,
    'string': ''
}


def _coerce(type_name: str, value: Any) -> ParamType:
    match type_name:
        case 'bool':
            return bool(value)
        case 'int':
            return int(value)
        case 'float':
            return float(value)
        case _:
            return str(value)


class ConfigEntry(Parameter):
    """A config value with its definition: label, category, range, and whether it is saved to disk."""

    def __init__(self,
                 key: str,
                 default_value: ParamType,
                 label: str,
                 category: str,
                 tooltip: str,
                 minimum: Optional[int | float] = None,
                 maximum: Optional[int | float] = None,
                 save_json: bool = True) -> None:
        super().__init__(label, default_value, tooltip, minimum, maximum)
        self._key = key
        self._category = category
        self._value = default_value
        self.save_json = save_json

    @staticmethod
    def from_definition(key: str, definition: dict[str, Any]) -> 'ConfigEntry':
        """Creates an entry from its JSON definition, raising RuntimeError if the definition is incomplete."""
        for required_field in (DefinitionKey.TYPE, DefinitionKey.LABEL, DefinitionKey.CATEGORY,
                               DefinitionKey.TOOLTIP):
            if required_field not in definition:
                raise RuntimeError(MISSING_DEFINITION_FIELD_ERROR.format(key=key, field=required_field))
        type_name = definition[DefinitionKey.TYPE]
        if type_name not in _EMPTY_VALUES:
            raise RuntimeError(INVALID_DEFINITION_TYPE_ERROR.format(key=key, type_name=type_name))
        empty_value = _EMPTY_VALUES[type_name]
        default_value = _coerce(type_name, definition.get(DefinitionKey.DEFAULT, empty_value))
        range_options = definition.get(DefinitionKey.RANGE, {})
        minimum = range_options.get(RangeKey.MIN, None)
        maximum = range_options.get(RangeKey.MAX, None)
        return ConfigEntry(key, default_value, definition[DefinitionKey.LABEL], definition[DefinitionKey.CATEGORY],
                           definition[DefinitionKey.TOOLTIP],
                           None if minimum is None else _coerce(type_name, minimum),
                           None if maximum is None else _coerce(type_name, maximum),
                           bool(definition.get(DefinitionKey.SAVED, False)))

    @property
    def key(self) -> str:
        """Returns the key used to look up this entry."""
        return self._key

    @property
    def category(self) -> str:
        """Returns the entry's category name."""
        return self._category

    @property
    def value(self) -> ParamType:
        """Returns the current value."""
        return self._value

    def set_value(self, value: Any) -> bool:
        """Replaces the current value after validating it, returning whether the value changed."""
        self.validate(value, True)
        value_changed = self._value != value
        self._value = value
        return value_changed

    def restore_default(self) -> None:
        """Replaces the current value with the default value."""
        self._value = self.default_value

    def save_to_json_dict(self, json_dict: dict[str, Any]) -> None:
        """Adds the value to a dict that will be written to the saved value file, if this entry is saved."""
        if self.save_json:
            json_dict[self._key] = self._value

    def load_from_json_dict(self, json_dict: dict[str, Any]) -> None:
        """Reads the value from a dict loaded from the saved value file. Invalid values are logged and ignored."""
        if self._key not in json_dict:
            return
        json_value = json_dict[self._key]
        # JSON doesn't distinguish 2.0 from 2:
        if self.type_name == TYPE_FLOAT and isinstance(json_value, int) and not isinstance(json_value, bool):
            json_value = float(json_value)
        if self.validate(json_value):
            self._value = json_value
        else:
            logger.error(INVALID_SAVED_VALUE_ERROR.format(key=self._key, value=json_value))
