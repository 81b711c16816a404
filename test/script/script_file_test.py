"""Tests loading script registrations from JSON files."""
import json
import os
import sys
import tempfile
import unittest

from PySide6.QtCore import QCoreApplication

from scriptfu.script.arg_type import ArgType
from scriptfu.script.script_file import load_scripts

app = QCoreApplication.instance() or QCoreApplication(sys.argv)

DROP_SHADOW = {
    'name': 'script-fu-drop-shadow',
    'menu_label': '<Image>/Filters/Light and Shadow/_Drop Shadow...',
    'blurb': 'Add a drop shadow to the selected region',
    'author': 'Sven Neumann',
    'copyright': 'Sven Neumann',
    'date': '1999/12/21',
    'image_types': 'RGB* GRAY*',
    'args': [
        ['SF-IMAGE', 'Image', 0],
        ['SF-DRAWABLE', 'Drawable', 0],
        ['SF-ADJUSTMENT', 'Offset X', [4, -4096, 4096, 1, 10, 0, 1]],
        ['SF-ADJUSTMENT', 'Blur radius', [15, 0, 1024, 1, 10, 0, 1]],
        ['SF-COLOR', 'Color', [0, 0, 0]],
        ['SF-TOGGLE', 'Allow resizing', True]
    ]
}


class ScriptFileTest(unittest.TestCase):
    """Tests loading script registrations from JSON files."""

    def setUp(self) -> None:
        self._temp_dir = tempfile.TemporaryDirectory()
        self._path = os.path.join(self._temp_dir.name, 'scripts.json')

    def tearDown(self) -> None:
        self._temp_dir.cleanup()

    def _write(self, content: str) -> None:
        with open(self._path, 'w', encoding='utf-8') as file:
            file.write(content)

    def test_load(self) -> None:
        """Each registration in the file becomes a script."""
        self._write(json.dumps([DROP_SHADOW, {'name': 'minimal'}]))
        scripts = load_scripts(self._path)
        self.assertEqual([script.name for script in scripts], ['script-fu-drop-shadow', 'minimal'])
        shadow = scripts[0]
        self.assertEqual(shadow.get_title(), 'Drop Shadow')
        self.assertEqual([arg.arg_type for arg in shadow.args],
                         [ArgType.IMAGE, ArgType.DRAWABLE, ArgType.ADJUSTMENT, ArgType.ADJUSTMENT, ArgType.COLOR,
                          ArgType.TOGGLE])
        self.assertEqual(scripts[1].n_args, 0)
        self.assertEqual(scripts[1].menu_label, '')

    def test_invalid_json(self) -> None:
        """Unreadable files are rejected."""
        self._write('[{"name": ')
        with self.assertRaises(RuntimeError):
            load_scripts(self._path)

    def test_invalid_structure(self) -> None:
        """Files must hold a list of registrations that each have a name."""
        for content in ({'name': 'not-a-list'}, ['not-a-registration'], [{'blurb': 'no name'}]):
            self._write(json.dumps(content))
            with self.assertRaises(RuntimeError):
                load_scripts(self._path)

    def test_invalid_arguments(self) -> None:
        """Invalid argument declarations are reported with the script name."""
        self._write(json.dumps([{'name': 'bad-args', 'args': [['SF-ADJUSTMENT', 'Radius', [1, 2]]]}]))
        with self.assertRaisesRegex(ValueError, 'bad-args'):
            load_scripts(self._path)

    def test_missing_file(self) -> None:
        """Missing files raise OSError."""
        with self.assertRaises(OSError):
            load_scripts(os.path.join(self._temp_dir.name, 'missing.json'))
