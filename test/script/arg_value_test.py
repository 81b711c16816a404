"""Tests argument payload rendering, copying, and host parameter conversion."""
import sys
import unittest

from PySide6.QtCore import QCoreApplication
from PySide6.QtGui import QColor

from scriptfu.procedure.host_types import Layer, Image, Display
from scriptfu.script.arg_type import ArgType
from scriptfu.script.arg_value import ItemIdValue, ColorValue, ToggleValue, RawTextValue, TextValue, \
    AdjustmentValue, FileValue, ResourceValue, BrushValue, OptionValue, EnumValue, value_class_for, ArgValue

app = QCoreApplication.instance() or QCoreApplication(sys.argv)


class ArgValueTest(unittest.TestCase):
    """Tests argument payload rendering, copying, and host parameter conversion."""

    def test_item_id_tokens(self) -> None:
        """Identifiers render as plain integers, with -1 for missing items."""
        self.assertEqual(ItemIdValue(7).to_token(6), '7')
        self.assertEqual(ItemIdValue().to_token(6), '-1')
        self.assertEqual(ItemIdValue(None).to_token(6), '-1')

    def test_item_id_from_param(self) -> None:
        """Identifiers are read from any host object with an id."""
        self.assertEqual(ItemIdValue().updated_from_param(Layer(5)), ItemIdValue(5))
        self.assertEqual(ItemIdValue().updated_from_param(Image(2)), ItemIdValue(2))
        self.assertEqual(ItemIdValue().updated_from_param(Display(9)), ItemIdValue(9))
        self.assertEqual(ItemIdValue(3).updated_from_param(None), ItemIdValue(-1))
        with self.assertRaises(TypeError):
            ItemIdValue().updated_from_param(5)

    def test_color_token(self) -> None:
        """Colors render as quoted lists of 8-bit components."""
        self.assertEqual(ColorValue(QColor(255, 128, 0)).to_token(6), "'(255 128 0)")
        self.assertEqual(ColorValue().token_from_param(QColor(1, 2, 3), 6), "'(1 2 3)")
        with self.assertRaises(TypeError):
            ColorValue().updated_from_param((1, 2, 3))

    def test_toggle_token(self) -> None:
        """Toggles render as TRUE or FALSE."""
        self.assertEqual(ToggleValue(True).to_token(6), 'TRUE')
        self.assertEqual(ToggleValue(False).to_token(6), 'FALSE')
        self.assertEqual(ToggleValue().token_from_param(1, 6), 'TRUE')
        with self.assertRaises(TypeError):
            ToggleValue().updated_from_param('yes')

    def test_raw_text_token(self) -> None:
        """Raw text is inserted as written, with empty text rendered as an empty string."""
        self.assertEqual(RawTextValue('(+ 1 2)').to_token(6), '(+ 1 2)')
        self.assertEqual(RawTextValue('').to_token(6), '""')
        self.assertEqual(RawTextValue(None).to_token(6), '""')

    def test_text_token(self) -> None:
        """Text is escaped and quoted."""
        self.assertEqual(TextValue('say "hi"').to_token(6), '"say \\"hi\\""')
        self.assertEqual(TextValue('line 1\nline 2').to_token(6), '"line 1\\\nline 2"')
        self.assertEqual(TextValue(None).to_token(6), '""')
        self.assertEqual(TextValue().token_from_param('a\\b', 6), '"a\\\\b"')

    def test_adjustment_token(self) -> None:
        """Adjustments render with the requested precision."""
        self.assertEqual(AdjustmentValue(3.5).to_token(6), '3.500000')
        self.assertEqual(AdjustmentValue(3.5).to_token(2), '3.50')
        self.assertEqual(AdjustmentValue(0.0).token_from_param(12, 1), '12.0')
        with self.assertRaises(TypeError):
            AdjustmentValue().updated_from_param(True)

    def test_adjustment_from_param_keeps_range(self) -> None:
        """Updating an adjustment's value keeps its range and step sizes."""
        adjustment = AdjustmentValue(1.0, -10.0, 10.0, 0.5, 2.0, 1, False)
        updated = adjustment.updated_from_param(4)
        self.assertEqual(updated, AdjustmentValue(4.0, -10.0, 10.0, 0.5, 2.0, 1, False))
        self.assertEqual(adjustment.value, 1.0)

    def test_file_and_resource_tokens(self) -> None:
        """Paths and resource names are escaped and quoted."""
        self.assertEqual(FileValue('/tmp/a "b".png').to_token(6), '"/tmp/a \\"b\\".png"')
        self.assertEqual(ResourceValue('Sans "Bold"').to_token(6), '"Sans \\"Bold\\""')
        self.assertEqual(ResourceValue(None).to_token(6), '""')

    def test_brush_token(self) -> None:
        """Brushes render as a quoted list, but brush parameters render as their name only."""
        brush = BrushValue('Circle (11)', 100.0, 20, 0)
        self.assertEqual(brush.to_token(6), '\'("Circle (11)" 100.000000 20 0)')
        self.assertEqual(brush.token_from_param('Star', 6), '"Star"')
        self.assertEqual(brush.token_from_param('Star "5"', 6), '"Star \\"5\\""')
        self.assertEqual(BrushValue('C:\\brushes').to_token(1), '\'("C:\\\\brushes" 100.0 20 0)')
        self.assertEqual(brush.token_from_param(BrushValue('Star', 50.0, 10, 3), 1), '\'("Star" 50.0 10 3)')
        self.assertEqual(brush.updated_from_param('Star'), BrushValue('Star', 100.0, 20, 0))

    def test_option_value(self) -> None:
        """Options render as the selected index, which must be valid."""
        self.assertEqual(OptionValue(['Small', 'Large'], 1).to_token(6), '1')
        self.assertEqual(OptionValue(['Small', 'Large']).token_from_param(0, 6), '0')
        with self.assertRaises(ValueError):
            OptionValue([], 0)
        with self.assertRaises(ValueError):
            OptionValue(['Small', 'Large'], 2)
        with self.assertRaises(TypeError):
            OptionValue(['Small'], 0).updated_from_param(True)

    def test_enum_value(self) -> None:
        """Enum values render as the selected index, and must belong to a registered enum type."""
        self.assertEqual(EnumValue('PaintMode', 6).to_token(6), '6')
        with self.assertRaises(ValueError):
            EnumValue('NotAnEnum', 0)
        with self.assertRaises(ValueError):
            EnumValue('PaintMode', 99)

    def test_copies_are_independent(self) -> None:
        """Copies don't share lists or colors with the original."""
        option = OptionValue(['a', 'b'], 1)
        option_copy = option.copy()
        self.assertEqual(option, option_copy)
        option.release()
        self.assertEqual(option_copy.options, ['a', 'b'])

        color = ColorValue(QColor(10, 20, 30))
        color_copy = color.copy()
        color.color.setRed(200)
        self.assertEqual(color_copy.color.red(), 10)

    def test_release(self) -> None:
        """Releasing drops owned text."""
        text = TextValue('hello')
        text.release()
        self.assertIsNone(text.text)
        brush = BrushValue('Circle')
        brush.release()
        self.assertIsNone(brush.name)

    def test_every_type_has_a_value_class(self) -> None:
        """Each argument type is bound to a payload class."""
        for arg_type in ArgType:
            self.assertTrue(issubclass(value_class_for(arg_type), ArgValue))
        self.assertIs(value_class_for(ArgType.TEXT), TextValue)
        self.assertIs(value_class_for(ArgType.VALUE), RawTextValue)
        self.assertIs(value_class_for(ArgType.DISPLAY), ItemIdValue)
