"""Tests installing and removing script procedures."""
import sys
import unittest

from PySide6.QtCore import QCoreApplication

from scriptfu.procedure.procedure_registry import ProcedureRegistry, install_script, uninstall_script
from scriptfu.script.registration import register_script

app = QCoreApplication.instance() or QCoreApplication(sys.argv)


class ProcedureRegistryTest(unittest.TestCase):
    """Tests installing and removing script procedures."""

    def setUp(self) -> None:
        self.registry = ProcedureRegistry()
        self.installed: list[str] = []
        self.uninstalled: list[str] = []
        self.registry.procedure_installed.connect(self.installed.append)
        self.registry.procedure_uninstalled.connect(self.uninstalled.append)
        self.script = register_script('script-fu-test', 'Test', '', '', '', '', '',
                                      [('SF-STRING', 'Text', 'hello')])

    def test_install(self) -> None:
        """Installed procedures can be looked up by name."""
        metadata = install_script(self.registry, self.script)
        self.assertIn('script-fu-test', self.registry)
        self.assertIs(self.registry.get('script-fu-test'), metadata)
        self.assertEqual(self.registry.names(), ['script-fu-test'])
        self.assertEqual(self.installed, ['script-fu-test'])

    def test_reinstall(self) -> None:
        """Installing a procedure again replaces it."""
        install_script(self.registry, self.script)
        replacement = install_script(self.registry, self.script)
        self.assertIs(self.registry.get('script-fu-test'), replacement)
        self.assertEqual(self.installed, ['script-fu-test', 'script-fu-test'])

    def test_uninstall(self) -> None:
        """Uninstalled procedures are removed, and unknown names are ignored with a warning."""
        install_script(self.registry, self.script)
        uninstall_script(self.registry, self.script)
        self.assertNotIn('script-fu-test', self.registry)
        self.assertIsNone(self.registry.get('script-fu-test'))
        self.assertEqual(self.uninstalled, ['script-fu-test'])
        with self.assertLogs('scriptfu.procedure.procedure_registry', level='WARNING'):
            self.registry.uninstall('script-fu-test')
        self.assertEqual(self.uninstalled, ['script-fu-test'])
