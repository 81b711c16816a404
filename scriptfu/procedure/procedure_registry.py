"""Tracks procedures installed for scripts, standing in for the host's procedure database."""
import logging
from threading import Lock
from typing import Optional

from PySide6.QtCore import QObject, Signal

from scriptfu.procedure.procedure_builder import build_procedure
from scriptfu.procedure.procedure_metadata import ProcedureMetadata, ProcedureType
from scriptfu.script.script import Script

logger = logging.getLogger(__name__)


class ProcedureRegistry(QObject):
    """Holds installed procedures by name, and signals when procedures are installed or removed."""

    procedure_installed = Signal(str)
    procedure_uninstalled = Signal(str)

    def __init__(self) -> None:
        super().__init__()
        self._procedures: dict[str, ProcedureMetadata] = {}
        self._lock = Lock()

    def install(self, metadata: ProcedureMetadata) -> None:
        """Installs a procedure, replacing any procedure with the same name."""
        with self._lock:
            replaced = metadata.name in self._procedures
            self._procedures[metadata.name] = metadata
        if replaced:
            logger.info(f'Replaced procedure {metadata.name}')
        else:
            logger.info(f'Installed procedure {metadata.name}')
        self.procedure_installed.emit(metadata.name)

    def uninstall(self, name: str) -> None:
        """Removes an installed procedure. Unknown names are ignored."""
        with self._lock:
            if name not in self._procedures:
                logger.warning(f'Tried to uninstall unknown procedure {name}')
                return
            del self._procedures[name]
        logger.info(f'Uninstalled procedure {name}')
        self.procedure_uninstalled.emit(name)

    def get(self, name: str) -> Optional[ProcedureMetadata]:
        """Returns an installed procedure, or None if no procedure has that name."""
        with self._lock:
            return self._procedures.get(name, None)

    def names(self) -> list[str]:
        """Returns the names of all installed procedures."""
        with self._lock:
            return list(self._procedures.keys())

    def __contains__(self, name: str) -> bool:
        with self._lock:
            return name in self._procedures


def install_script(registry: ProcedureRegistry, script: Script,
                   proc_type: ProcedureType = ProcedureType.TEMPORARY) -> ProcedureMetadata:
    """Builds a script's procedure and installs it."""
    assert registry is not None and script is not None
    metadata = build_procedure(script, proc_type)
    registry.install(metadata)
    return metadata


def uninstall_script(registry: ProcedureRegistry, script: Script) -> None:
    """Removes a script's procedure."""
    assert registry is not None and script is not None
    registry.uninstall(script.name)
