"""
Interactive prompt tests (choose, ask, confirm).

Scope
- choose: rendering, retry on invalid answers, exact clears, returned item,
  end-of-stream abort, empty item list.
- ask/confirm: rendering, answers, retries, end-of-stream abort.

Conventions
- Test method names follow CamelCase per project convention.
- Every interaction runs against RecordingConsole so the visible screen can be
  compared before and after the call.
"""
import unittest
from unittest import TestCase

from bosun import ClearUnit, RecordingConsole, Style, StyledText, ask, choose, confirm


class TestChoose(TestCase):
    """Behavioral tests for the selection protocol."""

    def testRendersPromptAndItems(self):
        console = RecordingConsole(["2"])
        choose(console, "Favorite color?", ["Pink", "Blue"])
        self.assertEqual(console.outputs[:6], [
            "Favorite color?\n",
            "1: ",
            "Pink\n",
            "2: ",
            "Blue\n",
            "> ",
        ])

    def testIndexPrefixUsesInfoStyle(self):
        console = RecordingConsole(["1"])
        outputs = []
        console.output = lambda text, new_line=True: outputs.append(text)
        console.choose("Pick", ["a"])
        self.assertEqual(outputs[1], StyledText("1: ", Style.INFO))
        self.assertEqual(outputs[3], StyledText("> ", Style.INFO))

    def testReturnsChosenItem(self):
        console = RecordingConsole(["2"])
        self.assertEqual(console.choose("Favorite color?", ["Pink", "Blue"]), "Blue")

    def testScreenRestoredAfterChoice(self):
        console = RecordingConsole(["2"])
        console.print("before")
        chosen = console.choose("Favorite color?", ["Pink", "Blue"])
        console.output("You chose: " + StyledText(chosen, Style.INFO))
        self.assertEqual(console.lines, ["before", "You chose: Blue"])

    def testClearsItemsPlusTwoLines(self):
        console = RecordingConsole(["3"])
        console.choose("Pick", ["a", "b", "c", "d"])
        self.assertEqual(console.clears, [ClearUnit.LINE] * 6)

    def testInvalidAnswersClearOneLineEach(self):
        console = RecordingConsole(["blue", "0", "3", "-1", "1.5", "2"])
        console.print("before")
        self.assertEqual(console.choose("Favorite color?", ["Pink", "Blue"]), "Blue")
        # five retries, then items + title + input line
        self.assertEqual(console.clears, [ClearUnit.LINE] * (5 + 4))
        self.assertEqual(console.lines, ["before"])

    def testListIsNotReprinted(self):
        console = RecordingConsole(["x", "1"])
        console.choose("Pick", ["a", "b"])
        self.assertEqual(console.outputs.count("a\n"), 1)
        self.assertEqual(console.outputs.count("> "), 2)

    def testOnlyAsciiDigitsAccepted(self):
        items = [str(number) for number in range(1, 12)]
        for answer in ("1_0", "\uff12", " 1 0 ", "0x2"):
            with self.subTest(answer=answer):
                console = RecordingConsole([answer, "3"])
                self.assertEqual(console.choose("Pick", items), "3")
                self.assertEqual(console.clears, [ClearUnit.LINE] * (1 + 13))

    def testSignedIndexAccepted(self):
        self.assertEqual(RecordingConsole(["+2"]).choose("Pick", ["a", "b"]), "b")

    def testWhitespaceAroundIndexAccepted(self):
        console = RecordingConsole([" 1 "])
        self.assertEqual(console.choose("Pick", ["a", "b"]), "a")

    def testCustomDisplay(self):
        console = RecordingConsole(["1"])
        item = console.choose("Pick", [{"name": "alpha"}], lambda item: StyledText(item["name"], Style.SUCCESS))
        self.assertEqual(item, {"name": "alpha"})
        self.assertIn("alpha\n", console.outputs)

    def testEndOfStreamAborts(self):
        console = RecordingConsole(["nope"])
        with self.assertRaises(SystemExit) as context:
            console.choose("Pick", ["a"])
        self.assertNotEqual(context.exception.code, 0)
        self.assertEqual(console.errors, ["EOF trying to read selection, we have to crash here."])
        self.assertIn(console.errors[0] + "\n", console.outputs)

    def testEmptyItemsRetryUntilEndOfStream(self):
        console = RecordingConsole(["1", "0"])
        with self.assertRaises(SystemExit):
            console.choose("Pick", [])
        self.assertEqual(console.outputs[:2], ["Pick\n", "> "])
        self.assertEqual(console.clears, [ClearUnit.LINE] * 2)


class TestAsk(TestCase):
    """Behavioral tests for free-form questions."""

    def testReturnsAnswer(self):
        console = RecordingConsole(["Vapor"])
        self.assertEqual(ask(console, "Name?"), "Vapor")
        self.assertEqual(console.lines, ["Name?", "> Vapor"])

    def testSecureAnswerIsNotEchoed(self):
        console = RecordingConsole(["hunter2"])
        self.assertEqual(console.ask("Password?", secure=True), "hunter2")
        self.assertEqual(console.transcript[-1], ("input", True, "hunter2"))
        self.assertEqual(console.lines, ["Password?", "> "])

    def testEndOfStreamAborts(self):
        console = RecordingConsole()
        with self.assertRaises(SystemExit):
            ask(console, "Name?")
        self.assertEqual(console.errors, ["EOF trying to read answer, we have to crash here."])


class TestConfirm(TestCase):
    """Behavioral tests for yes/no questions."""

    def testAnswers(self):
        for answer, expected in (("y", True), ("YES", True), (" n ", False), ("No", False)):
            with self.subTest(answer=answer):
                self.assertIs(confirm(RecordingConsole([answer]), "Continue?"), expected)

    def testRetriesUntilRecognized(self):
        console = RecordingConsole(["maybe", "", "yes"])
        self.assertTrue(console.confirm("Continue?"))
        self.assertEqual(console.clears, [ClearUnit.LINE] * 2)
        self.assertEqual(console.lines, ["Continue?", "y/n> yes"])

    def testEndOfStreamAborts(self):
        console = RecordingConsole(["what"])
        with self.assertRaises(SystemExit):
            confirm(console, "Continue?")
        self.assertEqual(console.errors, ["EOF trying to read confirmation, we have to crash here."])


if __name__ == "__main__":
    unittest.main()
