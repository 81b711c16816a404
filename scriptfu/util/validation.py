"""Provides convenience functions for miscellaneous validation."""
from typing import Any, Iterable


def assert_type(value: Any, expected_type: Any) -> None:
    """Checks if a value has an expected type.

    Parameters
    ----------
    value : Any
        The value to validate
    expected_type : type or class or tuple of types or classes
        Valid type or types that the value could match.
    Raises
    ------
    TypeError
        If the value is not of the expected type.
    """
    if not isinstance(value, expected_type):
        raise TypeError(f'Expected value of type {expected_type}, got value {value}')


def assert_types(values: Iterable[Any], expected_type: Any) -> None:
    """Checks if a group of values all have certain expected types.

    Parameters
    ----------
    values : iterable
        A collection of values to validate
    expected_type : type or class or tuple of types or classes
        Valid type or types that the value could match.
    Raises
    ------
    TypeError
        If any value is not of the expected type.
    """
    for value in values:
        assert_type(value, expected_type)


def assert_valid_index(index: Any, list_value: list[Any], allow_end: bool = False) -> None:
    """Checks if a value is a valid index into a list.

    Parameters
    ----------
    index : int
        Index to validate
    list_value : list
        The list being indexed
    allow_end : bool, default=False
        If true, also accept the index one past the end of the list.
    Raises
    ------
    TypeError
        If the index is not an int, or list_value is not a list.
    ValueError
        If the index is not within the list bounds.
    """
    if isinstance(index, bool) or not isinstance(index, int):
        raise TypeError(f'Expected int index, got {index}')
    if not isinstance(list_value, list):
        raise TypeError(f'Expected list, got {list_value}')
    if not 0 <= index < (len(list_value) + 1 if allow_end else len(list_value)):
        raise ValueError(f'index {index} is invalid, expected (0 <= index < {len(list_value)})')
