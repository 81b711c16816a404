"""Metaclass for classes that should only ever have one instance."""
from threading import Lock
from typing import Any


class Singleton(type):
    """Returns the same instance every time a class using this metaclass is constructed.

    Constructor parameters are only used the first time the class is constructed."""
    _instances: dict[type, Any] = {}
    _lock = Lock()

    def __call__(cls, *args, **kwargs):
        with Singleton._lock:
            if cls not in Singleton._instances:
                Singleton._instances[cls] = super().__call__(*args, **kwargs)
            return Singleton._instances[cls]

    def clear_instance(cls) -> None:
        """Discard the shared instance, so the next constructor call creates a new one."""
        with Singleton._lock:
            Singleton._instances.pop(cls, None)
