"""Bounded history of the script commands that were run."""
import logging
from threading import Lock
from typing import List, Optional

from PySide6.QtCore import QObject, Signal

logger = logging.getLogger(__name__)

DEFAULT_MAX_HISTORY = 50


class CommandHistory:
    """Keeps the most recent script commands, oldest first."""

    def __init__(self, max_size: int = DEFAULT_MAX_HISTORY) -> None:
        assert max_size > 0
        self._commands: List[str] = []
        self._max_size = max_size
        self._access_lock = Lock()

        class _SignalManager(QObject):
            command_added = Signal(str)
            cleared = Signal()
        self._signal_manager = _SignalManager()

    @property
    def command_added(self) -> Signal:
        """Returns the signal emitted with each command added to the history."""
        return self._signal_manager.command_added

    @property
    def cleared(self) -> Signal:
        """Returns the signal emitted when the history is cleared."""
        return self._signal_manager.cleared

    @property
    def max_size(self) -> int:
        """Returns the maximum number of commands kept."""
        return self._max_size

    @max_size.setter
    def max_size(self, max_size: int) -> None:
        assert max_size > 0
        with self._access_lock:
            self._max_size = max_size
            self._trim()

    def add(self, command: str) -> None:
        """Appends a command, discarding the oldest commands if the history is full."""
        with self._access_lock:
            self._commands.append(command)
            self._trim()
        self.command_added.emit(command)

    def last_command(self) -> Optional[str]:
        """Returns the most recent command, or None if the history is empty."""
        with self._access_lock:
            return None if len(self._commands) == 0 else self._commands[-1]

    def commands(self) -> List[str]:
        """Returns all saved commands, oldest first."""
        with self._access_lock:
            return [*self._commands]

    def clear(self) -> None:
        """Removes all saved commands."""
        with self._access_lock:
            self._commands.clear()
        self.cleared.emit()

    def __len__(self) -> int:
        with self._access_lock:
            return len(self._commands)

    def _trim(self) -> None:
        if len(self._commands) > self._max_size:
            logger.debug(f'Discarding {len(self._commands) - self._max_size} old commands')
            del self._commands[:len(self._commands) - self._max_size]
