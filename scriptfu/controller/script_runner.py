"""Runs script procedures: binds invocation values to script arguments, renders commands, and passes them to the
script interpreter."""
import logging
from typing import Any, Callable, Optional, Sequence

from scriptfu.config.script_fu_config import ScriptFuConfig
from scriptfu.controller.command_history import CommandHistory
from scriptfu.procedure.host_types import RunMode
from scriptfu.script.command import get_command, get_command_from_params
from scriptfu.script.script import Script
from scriptfu.script.standard_args import collect_standard_args

logger = logging.getLogger(__name__)

# Evaluates a command string, returning its result:
Interpreter = Callable[[str], Any]

# Lets the user edit script arguments after the given number of leading standard arguments. Returns False if the
# user cancelled:
ArgumentDialog = Callable[[Script, int], bool]


class ScriptRunner:
    """Runs script procedures invoked by the host.

    Each invocation is a sequence holding the run mode followed by one value for each script argument.
    """

    def __init__(self,
                 interpreter: Interpreter,
                 config: Optional[ScriptFuConfig] = None,
                 history: Optional[CommandHistory] = None,
                 argument_dialog: Optional[ArgumentDialog] = None) -> None:
        """
        Parameters
        ----------
        interpreter: Callable[[str], Any]
            Evaluates rendered commands.
        config: ScriptFuConfig, optional
            Source of command formatting and history settings. The shared config is used if not provided.
        history: CommandHistory, optional
            Where executed commands are recorded. A new history is created if not provided.
        argument_dialog: Callable[[Script, int], bool], optional
            Used in interactive mode to let the user edit argument values. If not provided, interactive runs use
            the stored argument values as they are.
        """
        self._interpreter = interpreter
        self._config = config if config is not None else ScriptFuConfig()
        self._history = history if history is not None else CommandHistory(self._config.get(
            ScriptFuConfig.MAX_HISTORY))
        self._argument_dialog = argument_dialog

        def _update_history_size(max_size: int) -> None:
            self._history.max_size = max_size
        self._config.connect(self, ScriptFuConfig.MAX_HISTORY, _update_history_size)

    @property
    def history(self) -> CommandHistory:
        """Returns the history of executed commands."""
        return self._history

    def run(self, script: Script, invocation: Sequence[Any]) -> Optional[Any]:
        """Runs a script procedure.

        Interactive runs read leading standard arguments from the invocation and then let the argument dialog edit
        the rest. Non-interactive runs must supply a value for every argument; those values are rendered and then
        stored in the script. Runs with last values read leading standard arguments and reuse everything else.

        Returns
        -------
        The interpreter's result, or None if the argument dialog was cancelled.

        Raises
        ------
        ValueError
            If a non-interactive invocation doesn't supply exactly one value for each argument.
        """
        assert script is not None
        assert invocation is not None and len(invocation) > 0, 'Invocations must start with a run mode'
        run_mode = RunMode(invocation[0])
        precision = self._config.get(ScriptFuConfig.COMMAND_FLOAT_PRECISION)
        logger.debug(f'Running {script.name} in mode {run_mode.name}')
        match run_mode:
            case RunMode.INTERACTIVE:
                consumed = collect_standard_args(script, invocation)
                if consumed < script.n_args and self._argument_dialog is not None:
                    if not self._argument_dialog(script, consumed):
                        logger.info(f'{script.name}: cancelled')
                        return None
                command = get_command(script, precision)
            case RunMode.NONINTERACTIVE:
                if len(invocation) != script.n_args + 1:
                    raise ValueError(f'{script.name}: expected {script.n_args} arguments after the run mode, got'
                                     f' {len(invocation) - 1}')
                command = get_command_from_params(script, invocation, precision)
                self._store_params(script, invocation)
            case RunMode.WITH_LAST_VALS:
                collect_standard_args(script, invocation)
                command = get_command(script, precision)
            case _:
                raise ValueError(f'Unhandled run mode {run_mode}')
        return self._execute(command)

    def rerun_last(self) -> Any:
        """Runs the most recent command again, raising RuntimeError if no command was run yet."""
        command = self._history.last_command()
        if command is None:
            raise RuntimeError('No command to repeat')
        return self._execute(command)

    def reset_script(self, script: Script) -> None:
        """Restores a script's argument defaults, resetting identifier arguments only if configured to."""
        script.reset(self._config.get(ScriptFuConfig.RESET_IDS_ON_RESET))

    @staticmethod
    def _store_params(script: Script, invocation: Sequence[Any]) -> None:
        with script.exclusive_access():
            for i, arg in enumerate(script.args):
                arg.set_from_param(invocation[i + 1])

    def _execute(self, command: str) -> Any:
        if self._config.get(ScriptFuConfig.LOG_COMMANDS):
            logger.info(f'Running command: {command}')
        self._history.add(command)
        try:
            return self._interpreter(command)
        except Exception as err:
            logger.error(f'Command {command} failed: {err}')
            raise
