"""A single declared script argument: its type, label, default, and current value."""
from scriptfu.script.arg_type import ArgType
from scriptfu.script.arg_value import ArgValue, value_class_for


class ScriptArg:
    """A single declared script argument.

    The default and current values always hold the payload class bound to the argument type, and each holds its
    own copy of any text or lists it contains.
    """

    def __init__(self, arg_type: ArgType, label: str, default_value: ArgValue) -> None:
        self._type = ArgType(arg_type)
        self._label = label
        self._check_payload(default_value)
        self._default_value = default_value
        self._value = default_value.copy()

    def _check_payload(self, payload: ArgValue) -> None:
        expected_class = value_class_for(self._type)
        if type(payload) is not expected_class:
            raise TypeError(f'Argument "{self._label}" has type {self._type}, expected {expected_class.__name__}'
                            f' value but got {type(payload).__name__}')

    @property
    def arg_type(self) -> ArgType:
        """Returns the argument's type."""
        return self._type

    @property
    def label(self) -> str:
        """Returns the argument's display label."""
        return self._label

    @property
    def default_value(self) -> ArgValue:
        """Returns the argument's default value. Treat it as read-only."""
        return self._default_value

    @property
    def value(self) -> ArgValue:
        """Returns the argument's current value."""
        return self._value

    @value.setter
    def value(self, new_value: ArgValue) -> None:
        self._check_payload(new_value)
        self._value = new_value

    def set_from_param(self, param) -> None:
        """Replaces the current value with a value passed in by the host."""
        self._value = self._value.updated_from_param(param)

    def reset(self, reset_ids: bool) -> None:
        """Restores the default value. Identifier arguments are only restored if reset_ids is True."""
        if self._type.is_item_type and not reset_ids:
            return
        self._value.release()
        self._value = self._default_value.copy()

    def release(self) -> None:
        """Drops the text and lists owned by the default and current values."""
        self._label = ''
        self._default_value.release()
        self._value.release()
