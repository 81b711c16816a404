"""Holds registered scripts by name and keeps their installed procedures in sync."""
import logging
from threading import Lock
from typing import Optional

from PySide6.QtCore import QObject, Signal

from scriptfu.procedure.procedure_metadata import ProcedureType
from scriptfu.procedure.procedure_registry import ProcedureRegistry, install_script, uninstall_script
from scriptfu.script.script import Script

logger = logging.getLogger(__name__)


class ScriptTable(QObject):
    """Holds registered scripts by name.

    Adding a script installs its procedure. Adding a script under a name that is already in use destroys the
    previous script and replaces its procedure. Removing a script uninstalls its procedure and destroys it.
    """

    script_added = Signal(str)
    script_removed = Signal(str)

    def __init__(self, registry: ProcedureRegistry,
                 proc_type: ProcedureType = ProcedureType.TEMPORARY) -> None:
        super().__init__()
        self._registry = registry
        self._proc_type = proc_type
        self._scripts: dict[str, Script] = {}
        self._lock = Lock()

    @property
    def registry(self) -> ProcedureRegistry:
        """Returns the registry where script procedures are installed."""
        return self._registry

    def add(self, script: Script) -> None:
        """Adds a script and installs its procedure, replacing any script with the same name."""
        assert script is not None
        name = script.name
        with self._lock:
            previous = self._scripts.get(name, None)
            self._scripts[name] = script
        if previous is not None and previous is not script:
            logger.info(f'Redefining script {name}')
            uninstall_script(self._registry, previous)
            previous.destroy()
        install_script(self._registry, script, self._proc_type)
        self.script_added.emit(name)

    def remove(self, name: str) -> None:
        """Uninstalls and destroys a script, raising KeyError if no script has that name."""
        with self._lock:
            if name not in self._scripts:
                raise KeyError(f'No script named "{name}"')
            script = self._scripts.pop(name)
        uninstall_script(self._registry, script)
        script.destroy()
        self.script_removed.emit(name)

    def clear(self) -> None:
        """Removes every script."""
        for name in self.names():
            self.remove(name)

    def get(self, name: str) -> Optional[Script]:
        """Returns the script with a given name, or None if there isn't one."""
        with self._lock:
            return self._scripts.get(name, None)

    def names(self) -> list[str]:
        """Returns the names of all scripts, sorted alphabetically."""
        with self._lock:
            return sorted(self._scripts.keys())

    def __len__(self) -> int:
        with self._lock:
            return len(self._scripts)

    def __contains__(self, name: str) -> bool:
        with self._lock:
            return name in self._scripts
