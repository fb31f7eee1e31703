"""
Styled text model tests (styles, concatenation, rendering).

Scope
- Style: predefined categories, custom colors, validation, equality.
- StyledText: empty value, concatenation order, no merging, str/rich rendering.
- Palette overrides through __main__.__styles__.

Conventions
- Test method names follow CamelCase per project convention.
"""
import unittest
from unittest import TestCase
from unittest.mock import patch

from rich.style import Style as RichStyle
from rich.text import Text

from bosun import Category, Style, StyledText, styled
from bosun.text import palette


class TestStyle(TestCase):
    """Behavioral tests for Style."""

    def testPredefinedCategories(self):
        self.assertIs(Style.INFO.category, Category.INFO)
        self.assertIs(Style.ERROR.category, Category.ERROR)
        self.assertIsNone(Style.PLAIN.color)

    def testCustomCarriesColor(self):
        style = Style.custom("bright_red")
        self.assertIs(style.category, Category.CUSTOM)
        self.assertEqual(style.color, "bright_red")
        self.assertEqual(style.resolve(), RichStyle(color="bright_red"))

    def testCustomRejectsUnknownColor(self):
        with self.assertRaises(ValueError):
            Style.custom("not-a-color")

    def testCustomRequiresColor(self):
        with self.assertRaises(TypeError):
            Style(Category.CUSTOM)

    def testCategoryStyleRejectsColor(self):
        with self.assertRaises(TypeError):
            Style(Category.INFO, color="red")

    def testUnknownCategoryRejected(self):
        with self.assertRaises(ValueError):
            Style("shiny")

    def testEqualityAndHash(self):
        self.assertEqual(Style(Category.WARNING), Style.WARNING)
        self.assertEqual(hash(Style.custom("#FF4DA6")), hash(Style.custom("#FF4DA6")))
        self.assertNotEqual(Style.custom("red"), Style.custom("blue"))

    def testImmutable(self):
        with self.assertRaises(AttributeError):
            Style.INFO.foo = 1

    def testPaletteOverride(self):
        main = __import__("__main__")
        with patch.object(main, "__styles__", {"info": "bold magenta"}, create=True):
            self.assertEqual(palette()[Category.INFO], "bold magenta")
            self.assertEqual(Style.INFO.resolve(), RichStyle.parse("bold magenta"))
        self.assertEqual(palette()[Category.INFO], "cyan")


class TestStyledText(TestCase):
    """Behavioral tests for StyledText."""

    def testEmptyIsValid(self):
        text = StyledText()
        self.assertEqual(len(text), 0)
        self.assertEqual(str(text), "")
        self.assertEqual(text + text, StyledText())

    def testConcatenationKeepsOrderAndStyles(self):
        text = StyledText("1: ", Style.INFO) + StyledText("Pink") + StyledText("!", Style.ERROR)
        self.assertEqual(text.fragments, (
            ("1: ", Style.INFO),
            ("Pink", Style.PLAIN),
            ("!", Style.ERROR),
        ))

    def testConcatenationNeverMerges(self):
        text = StyledText("a", Style.INFO) + StyledText("b", Style.INFO)
        self.assertEqual(len(text), 2)
        self.assertEqual(str(text), "ab")

    def testStringsOnEitherSide(self):
        text = "[ " + StyledText("x", Style.WARNING) + " ]"
        self.assertEqual(str(text), "[ x ]")
        self.assertEqual([style for _, style in text], [Style.PLAIN, Style.WARNING, Style.PLAIN])

    def testConcatenationRejectsOtherTypes(self):
        with self.assertRaises(TypeError):
            StyledText("a") + 1

    def testOperandsUnchanged(self):
        left = StyledText("a")
        left + StyledText("b")
        self.assertEqual(str(left), "a")

    def testRichRendering(self):
        rendered = (StyledText("ok", Style.SUCCESS) + " done").__rich__()
        self.assertIsInstance(rendered, Text)
        self.assertEqual(rendered.plain, "ok done")
        self.assertEqual(len(rendered.spans), 1)

    def testStyledCoercion(self):
        self.assertEqual(styled("x", Style.INFO), StyledText("x", Style.INFO))
        text = StyledText("y", Style.ERROR)
        self.assertIs(styled(text, Style.INFO), text)
        with self.assertRaises(TypeError):
            styled(3)


if __name__ == "__main__":
    unittest.main()
