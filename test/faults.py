"""
Faults tests (CommandError, report, abort).

Conventions
- Test method names follow CamelCase per project convention.
"""
import unittest
from unittest import TestCase
from unittest.mock import patch

import __main__

from bosun import CommandError, ErrorIdentifier, RecordingConsole, Style, StyledText, abort, report


class TestCommandError(TestCase):
    """Behavioral tests for CommandError."""

    def testFields(self):
        error = CommandError(ErrorIdentifier.EXCESS_INPUT, "Too many arguments")
        self.assertEqual(error.identifier, "excessInput")
        self.assertEqual(error.reason, "Too many arguments")
        self.assertEqual(str(error), "Too many arguments")

    def testIdentifiersAreStable(self):
        self.assertEqual(ErrorIdentifier.ARGUMENT_REQUIRED, "argumentRequired")
        self.assertEqual(ErrorIdentifier.OPTION_REQUIRED, "optionRequired")
        self.assertEqual(ErrorIdentifier.EXCESS_INPUT, "excessInput")

    def testHostIdentifiers(self):
        self.assertEqual(CommandError("notFound", "No such file.").identifier, "notFound")

    def testValidation(self):
        with self.assertRaises(TypeError):
            CommandError(1, "reason")
        with self.assertRaises(ValueError):
            CommandError("", "reason")
        with self.assertRaises(TypeError):
            CommandError("id", None)

    def testRepr(self):
        self.assertEqual(repr(CommandError("custom", "Oops.")), "CommandError('custom', 'Oops.')")

    def testRichRendering(self):
        rendered = CommandError(ErrorIdentifier.OPTION_REQUIRED, "Option `bar` is required.").__rich__()
        self.assertEqual(rendered.plain, "[ optionRequired ] Option `bar` is required.")

    def testRichStylesOverride(self):
        with patch.object(__main__, "__styles__", {"fault-identifier": "red"}, create=True):
            rendered = CommandError("custom", "Oops.").__rich__()
        self.assertIn("red", [str(span.style) for span in rendered.spans])


class TestReport(TestCase):
    """Behavioral tests for report()."""

    def testWritesReasonToErrorChannel(self):
        console = RecordingConsole()
        report(console, CommandError("custom", "Oops."))
        self.assertEqual(console.errors, ["Oops."])
        self.assertEqual(console.outputs, [])

    def testRejectsOtherExceptions(self):
        with self.assertRaises(TypeError):
            report(RecordingConsole(), ValueError("nope"))


class TestAbort(TestCase):
    """Behavioral tests for abort()."""

    def testExitsWithStatus(self):
        console = RecordingConsole()
        with self.assertRaises(SystemExit) as caught:
            abort(console, "fatal")
        self.assertEqual(caught.exception.code, 1)
        self.assertEqual(console.errors, ["fatal"])
        self.assertEqual(console.lines, ["fatal"])

    def testOutputIsErrorStyled(self):
        console = RecordingConsole()
        outputs = []
        console.output = lambda text, new_line=True: outputs.append(text)
        with self.assertRaises(SystemExit) as caught:
            abort(console, "fatal", status=3)
        self.assertEqual(caught.exception.code, 3)
        self.assertEqual(outputs, [StyledText("fatal", Style.ERROR)])


if __name__ == "__main__":
    unittest.main()
