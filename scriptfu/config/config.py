"""
Shared typed settings backed by JSON files.

A definition file declares every accepted key, with its type, default, label, category, description, optional
range, and whether it is saved. Current values are kept in an optional second file that is rewritten whenever a
saved value changes. Other objects can subscribe to changes to individual keys with `connect`.
"""
import json
import logging
import os.path
from inspect import signature
from threading import Lock
from typing import Any, Callable, Optional

from scriptfu.config.config_entry import ConfigEntry
from scriptfu.util.validation import assert_type

logger = logging.getLogger(__name__)


class Config:
    """Shared typed settings backed by JSON files.

    Common Exceptions Raised
    ------------------------
    KeyError
        When any function with the `key` parameter is called with an unknown key.
    """

    def __init__(self, definition_path: str, saved_value_path: Optional[str], child_class: type) -> None:
        """Loads definitions, then loads saved values or saves the defaults.

        Parameters
        ----------
        definition_path: str
            Path to the JSON file defining accepted keys.
        saved_value_path: str, optional
            Path where values are saved. Missing files are created with default values, and saved values that
            aren't valid are replaced with defaults. If None, nothing is read from or written to disk.
        child_class: type
            Class that receives an upper-case attribute for each key (e.g. `MAX_HISTORY = 'max_history'`), so keys
            can be referenced without string literals.
        """
        self._entries: dict[str, ConfigEntry] = {}
        self._connected: dict[str, dict[Any, Callable[..., None]]] = {}
        self._json_path = saved_value_path
        self._lock = Lock()

        if not os.path.isfile(definition_path):
            raise RuntimeError(f'Config definition file not found at {definition_path}')
        try:
            with open(definition_path, encoding='utf-8') as file:
                definitions = json.load(file)
        except json.JSONDecodeError as err:
            raise RuntimeError(f'Reading config definitions from {definition_path} failed: {err}') from err
        assert_type(definitions, dict)
        for key, definition in definitions.items():
            assert_type(definition, dict)
            if key in self._entries:
                raise KeyError(f'Duplicate config key "{key}"')
            self._entries[key] = ConfigEntry.from_definition(key, definition)
            self._connected[key] = {}
            if not hasattr(child_class, key.upper()):
                setattr(child_class, key.upper(), key)

        if self._json_path is not None:
            if os.path.isfile(self._json_path):
                self._read_from_json()
            else:
                self._write_to_json()

    def _entry(self, key: str) -> ConfigEntry:
        if key not in self._entries:
            raise KeyError(f'Unknown config key "{key}"')
        return self._entries[key]

    def get(self, key: str) -> Any:
        """Returns the current value for a key. Each key always returns the same type."""
        entry = self._entry(key)
        with self._lock:
            return entry.value

    def get_label(self, key: str) -> str:
        """Returns the display label of a key."""
        return self._entry(key).name

    def get_tooltip(self, key: str) -> str:
        """Returns the description of a key."""
        return self._entry(key).description

    def get_category(self, key: str) -> str:
        """Returns the category a key belongs to."""
        return self._entry(key).category

    def get_keys(self) -> list[str]:
        """Returns all defined keys."""
        return list(self._entries.keys())

    def set(self, key: str, value: Any, save_change: bool = True) -> None:
        """Changes the value of a key, then runs any callbacks connected to it.

        Parameters
        ----------
        key : str
            A defined key.
        value : bool or int or float or str
            The new value, which must have the key's type.
        save_change: bool, default=True
            If True, write all saved values to disk immediately. Otherwise the change is written the next time
            a saved change is made.

        Raises
        ------
        TypeError
            If the value has the wrong type.
        ValueError
            If the value is outside the key's range.
        """
        entry = self._entry(key)
        with self._lock:
            value_changed = entry.set_value(value)
        if not value_changed:
            return
        if save_change:
            self._write_to_json()
        for callback in list(self._connected[key].values()):
            if len(signature(callback).parameters) == 0:
                callback()
            else:
                callback(value)

    def connect(self, connected_object: Any, key: str, on_change_fn: Callable[..., None]) -> None:
        """Registers a function to run when a key's value changes.

        Parameters
        ----------
        connected_object: object
            Owner of the connection. Each object can have one connection per key, and connecting again replaces
            the previous function.
        key: str
            A defined key.
        on_change_fn: function() or function(new_value)
            The function to run after the value changes.
        """
        self._entry(key)
        num_args = len(signature(on_change_fn).parameters)
        if num_args > 1:
            raise RuntimeError(f'Callback connected to {key} takes {num_args} parameters, expected 0 or 1')
        self._connected[key][connected_object] = on_change_fn

    def disconnect(self, connected_object: Any, key: str) -> None:
        """Removes a function registered through connect()."""
        self._entry(key)
        self._connected[key].pop(connected_object, None)

    def _reset(self) -> None:
        """Restores every value to its default without saving or running callbacks."""
        with self._lock:
            for entry in self._entries.values():
                entry.restore_default()

    def _write_to_json(self) -> None:
        if self._json_path is None:
            return
        saved_values: dict[str, Any] = {}
        with self._lock:
            for entry in self._entries.values():
                entry.save_to_json_dict(saved_values)
            with open(self._json_path, 'w', encoding='utf-8') as file:
                json.dump(saved_values, file, ensure_ascii=False, indent=4)

    def _read_from_json(self) -> None:
        if self._json_path is None:
            return
        try:
            with open(self._json_path, encoding='utf-8') as file:
                saved_values = json.load(file)
        except json.JSONDecodeError as err:
            logger.error(f'Reading saved config from {self._json_path} failed, restoring defaults: {err}')
            self._write_to_json()
            return
        if not isinstance(saved_values, dict):
            logger.error(f'Saved config at {self._json_path} is not a JSON object, restoring defaults')
            self._write_to_json()
            return
        with self._lock:
            for entry in self._entries.values():
                entry.load_from_json_dict(saved_values)
