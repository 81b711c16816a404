"""Typed, optionally range-limited values with descriptive metadata."""
from typing import Any, Optional, TypeAlias

# Accepted parameter types:
TYPE_BOOL = 'bool'
TYPE_INT = 'int'
TYPE_FLOAT = 'float'
TYPE_STR = 'str'

PARAMETER_TYPES = (TYPE_BOOL, TYPE_INT, TYPE_FLOAT, TYPE_STR)
NUMERIC_TYPES = (TYPE_INT, TYPE_FLOAT)

ParamType: TypeAlias = bool | int | float | str


def get_parameter_type(value: Any) -> str:
    """Returns the parameter type name of a value, raising TypeError if it isn't a supported type.

    Bools are checked first, so they are never treated as ints."""
    for type_name, python_type in ((TYPE_BOOL, bool), (TYPE_INT, int), (TYPE_FLOAT, float), (TYPE_STR, str)):
        if isinstance(value, python_type):
            return type_name
    raise TypeError(f'Unsupported parameter value {value} of type {type(value)}')


class Parameter:
    """A named value type with a default, a description, and an optional numeric range."""

    def __init__(self,
                 name: str,
                 default_value: ParamType,
                 description: str = '',
                 minimum: Optional[int | float] = None,
                 maximum: Optional[int | float] = None) -> None:
        assert len(name) > 0
        self._name = name
        self._type = get_parameter_type(default_value)
        self._default_value = default_value
        self._description = description
        if (minimum is not None or maximum is not None) and self._type not in NUMERIC_TYPES:
            raise TypeError(f'{name}: {self._type} values can\'t have a range')
        for limit in (minimum, maximum):
            if limit is not None and get_parameter_type(limit) != self._type:
                raise TypeError(f'{name}: range limit {limit} doesn\'t match value type {self._type}')
        if minimum is not None and maximum is not None and minimum > maximum:
            raise ValueError(f'{name}: minimum {minimum} is greater than maximum {maximum}')
        self._minimum = minimum
        self._maximum = maximum
        self.validate(default_value, True)

    @property
    def name(self) -> str:
        """Returns the parameter's display name."""
        return self._name

    @property
    def type_name(self) -> str:
        """Returns the parameter's type name."""
        return self._type

    @property
    def default_value(self) -> ParamType:
        """Returns the parameter's default value."""
        return self._default_value

    @property
    def description(self) -> str:
        """Returns the parameter's description string."""
        return self._description

    @property
    def minimum(self) -> Optional[int | float]:
        """Returns the smallest accepted value, or None if there is no lower limit."""
        return self._minimum

    @property
    def maximum(self) -> Optional[int | float]:
        """Returns the largest accepted value, or None if there is no upper limit."""
        return self._maximum

    def validate(self, test_value: Any, raise_on_failure: bool = False) -> bool:
        """Returns whether a value has this parameter's type and lies within its range.

        Raises
        ------
        TypeError
            If raise_on_failure is True and the value has the wrong type.
        ValueError
            If raise_on_failure is True and the value is out of range.
        """
        try:
            test_type = get_parameter_type(test_value)
        except TypeError:
            test_type = str(type(test_value))
        if test_type != self._type:
            if raise_on_failure:
                raise TypeError(f'{self._name}: expected {self._type}, got {test_value} ({test_type})')
            return False
        if (self._minimum is not None and test_value < self._minimum) \
                or (self._maximum is not None and test_value > self._maximum):
            if raise_on_failure:
                raise ValueError(f'{self._name}: {test_value} is not within {self._minimum}-{self._maximum}')
            return False
        return True
