"""Tests running scripts in each run mode."""
import sys
import unittest
from unittest.mock import MagicMock

from PySide6.QtCore import QCoreApplication

from scriptfu.config.script_fu_config import ScriptFuConfig
from scriptfu.controller.command_history import CommandHistory
from scriptfu.controller.script_runner import ScriptRunner
from scriptfu.procedure.host_types import RunMode, Image, Drawable, Layer
from scriptfu.script.arg_value import AdjustmentValue, ItemIdValue
from scriptfu.script.registration import register_script
from scriptfu.script.script import Script

app = QCoreApplication.instance() or QCoreApplication(sys.argv)


def _create_script() -> Script:
    return register_script('test-run', 'Test', '', '', '', '', 'RGB*', [
        ('SF-IMAGE', 'Image', None),
        ('SF-DRAWABLE', 'Drawable', None),
        ('SF-ADJUSTMENT', 'Radius', (3.5, 0, 10, 0.5, 1, 1)),
        ('SF-TOGGLE', 'Invert', False)
    ])


class ScriptRunnerTest(unittest.TestCase):
    """Tests running scripts in each run mode."""

    def setUp(self) -> None:
        ScriptFuConfig.clear_instance()
        self.config = ScriptFuConfig(None)
        self.interpreter = MagicMock(return_value='result')
        self.runner = ScriptRunner(self.interpreter, self.config)
        self.script = _create_script()

    def tearDown(self) -> None:
        ScriptFuConfig.clear_instance()

    def test_interactive_without_dialog(self) -> None:
        """Interactive runs read standard arguments and keep stored values for the rest."""
        result = self.runner.run(self.script, [RunMode.INTERACTIVE, Image(7), Drawable(3), 1.0, True])
        self.assertEqual(result, 'result')
        self.interpreter.assert_called_once_with('(test-run 7 3 3.500000 FALSE)')
        self.assertEqual(self.runner.history.last_command(), '(test-run 7 3 3.500000 FALSE)')

    def test_interactive_dialog(self) -> None:
        """The argument dialog can edit the arguments that follow the standard arguments."""
        dialog_calls = []

        def _dialog(script: Script, first_editable: int) -> bool:
            dialog_calls.append(first_editable)
            script.get_arg(2).value = AdjustmentValue(8.0, 0.0, 10.0, 0.5, 1.0, 1, True)
            return True
        runner = ScriptRunner(self.interpreter, self.config, argument_dialog=_dialog)
        runner.run(self.script, [RunMode.INTERACTIVE, Image(7), Drawable(3), 1.0, True])
        self.assertEqual(dialog_calls, [2])
        self.interpreter.assert_called_once_with('(test-run 7 3 8.000000 FALSE)')

    def test_interactive_dialog_cancelled(self) -> None:
        """Cancelling the argument dialog runs nothing."""
        runner = ScriptRunner(self.interpreter, self.config, argument_dialog=lambda script, index: False)
        self.assertIsNone(runner.run(self.script, [RunMode.INTERACTIVE, Image(7), Drawable(3), 1.0, True]))
        self.interpreter.assert_not_called()
        self.assertEqual(len(runner.history), 0)

    def test_noninteractive(self) -> None:
        """Non-interactive runs render the invocation values and then store them."""
        self.runner.run(self.script, [RunMode.NONINTERACTIVE, Image(1), Layer(2), 2, True])
        self.interpreter.assert_called_once_with('(test-run 1 2 2.000000 TRUE)')
        self.assertEqual(self.script.get_arg(1).value, ItemIdValue(2))
        self.assertEqual(self.script.get_arg(2).value, AdjustmentValue(2.0, 0.0, 10.0, 0.5, 1.0, 1, True))
        self.assertTrue(self.script.get_arg(3).value.active)

    def test_noninteractive_argument_count(self) -> None:
        """Non-interactive runs need exactly one value per argument."""
        with self.assertRaises(ValueError):
            self.runner.run(self.script, [RunMode.NONINTERACTIVE, Image(1), Layer(2), 2])
        with self.assertRaises(ValueError):
            self.runner.run(self.script, [RunMode.NONINTERACTIVE, Image(1), Layer(2), 2, True, 'extra'])
        self.interpreter.assert_not_called()

    def test_with_last_values(self) -> None:
        """Runs with last values reuse values stored by an earlier run."""
        self.runner.run(self.script, [RunMode.NONINTERACTIVE, Image(1), Layer(2), 6.5, True])
        self.runner.run(self.script, [RunMode.WITH_LAST_VALS, Image(4), Drawable(5), 0.0, False])
        self.assertEqual(self.interpreter.call_args.args[0], '(test-run 4 5 6.500000 TRUE)')

    def test_float_precision(self) -> None:
        """Commands use the configured float precision."""
        self.config.set(ScriptFuConfig.COMMAND_FLOAT_PRECISION, 2)
        self.runner.run(self.script, [RunMode.WITH_LAST_VALS, Image(1), Drawable(2), 0.0, False])
        self.interpreter.assert_called_once_with('(test-run 1 2 3.50 FALSE)')

    def test_history_size_follows_config(self) -> None:
        """Changing the configured history size resizes the history."""
        self.config.set(ScriptFuConfig.MAX_HISTORY, 3)
        self.assertEqual(self.runner.history.max_size, 3)

    def test_shared_history(self) -> None:
        """Runners record commands in a provided history."""
        history = CommandHistory(5)
        runner = ScriptRunner(self.interpreter, self.config, history)
        runner.run(self.script, [RunMode.WITH_LAST_VALS])
        self.assertEqual(history.commands(), ['(test-run -1 -1 3.500000 FALSE)'])

    def test_rerun_last(self) -> None:
        """The most recent command can be run again."""
        with self.assertRaises(RuntimeError):
            self.runner.rerun_last()
        self.runner.run(self.script, [RunMode.WITH_LAST_VALS, Image(1)])
        self.runner.rerun_last()
        self.assertEqual(self.interpreter.call_count, 2)
        self.assertEqual(self.interpreter.call_args.args[0], '(test-run 1 -1 3.500000 FALSE)')

    def test_interpreter_errors(self) -> None:
        """Interpreter errors are logged and passed on."""
        self.interpreter.side_effect = RuntimeError('unbound variable')
        with self.assertLogs('scriptfu.controller.script_runner', level='ERROR'):
            with self.assertRaises(RuntimeError):
                self.runner.run(self.script, [RunMode.WITH_LAST_VALS])
        self.assertEqual(len(self.runner.history), 1)

    def test_reset_script(self) -> None:
        """Resets follow the configured identifier reset setting."""
        self.runner.run(self.script, [RunMode.NONINTERACTIVE, Image(1), Layer(2), 6.5, True])
        self.runner.reset_script(self.script)
        self.assertEqual(self.script.get_arg(0).value, ItemIdValue(1))
        self.assertEqual(self.script.get_arg(2).value.value, 3.5)
        self.config.set(ScriptFuConfig.RESET_IDS_ON_RESET, True)
        self.runner.reset_script(self.script)
        self.assertEqual(self.script.get_arg(0).value, ItemIdValue(-1))
