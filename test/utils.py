"""
Tests for the internal helpers.

This module verifies:
- The `Unset` sentinel: singleton identity, falsy semantics, representation,
  finality.
- coalesce(): only Unset is replaced.
- rename(): both call forms and their argument checks.
- mirror(): read-only properties returning copies of containers.
"""
import unittest
from unittest import TestCase

from bosun.utils import *


class UnsetTest(TestCase):
    """
    Test suite for the `UnsetType` singleton.
    """

    def testSingleton(self) -> None:
        self.assertIs(UnsetType(), Unset)

    def testFalsyButNotNone(self) -> None:
        self.assertFalse(Unset)
        self.assertIsNot(Unset, None)
        self.assertNotEqual(Unset, None)

    def testRepr(self) -> None:
        self.assertEqual(repr(Unset), "Unset")

    def testFinal(self) -> None:
        with self.assertRaises(TypeError):
            type("Subclass", (UnsetType,), {})


class CoalesceTest(TestCase):

    def testOnlyUnsetIsReplaced(self) -> None:
        self.assertEqual(coalesce(Unset, "fallback"), "fallback")
        self.assertIsNone(coalesce(Unset))
        self.assertIsNone(coalesce(None, "fallback"))
        self.assertEqual(coalesce("", "fallback"), "")
        self.assertEqual(coalesce(0, 1), 0)


class RenameTest(TestCase):

    def testDirectForm(self) -> None:
        def function():
            pass

        self.assertIs(rename(function, "other"), function)
        self.assertEqual(function.__name__, "other")
        self.assertEqual(function.__qualname__, "other")

    def testDecoratorForm(self) -> None:
        @rename("other")
        def function():
            pass

        self.assertEqual(function.__name__, "other")

    def testArgumentChecks(self) -> None:
        with self.assertRaises(TypeError):
            rename(1, "name")
        with self.assertRaises(TypeError):
            rename(len, 1)
        with self.assertRaises(TypeError):
            rename(1)
        with self.assertRaises(TypeError):
            rename()


class MirrorTest(TestCase):

    def setUp(self) -> None:
        class Holder:
            items = mirror("items")
            mapping = mirror("mapping")
            name = mirror("name")

            def __init__(self):
                self._items = ["a", "b"]
                self._mapping = {"x": ["y"]}
                self._name = "holder"

        self.holder = Holder()

    def testValues(self) -> None:
        self.assertEqual(self.holder.items, ["a", "b"])
        self.assertEqual(self.holder.mapping, {"x": ["y"]})
        self.assertEqual(self.holder.name, "holder")

    def testContainersAreCopies(self) -> None:
        self.holder.items.append("c")
        self.holder.mapping["x"].append("z")
        self.assertEqual(self.holder.items, ["a", "b"])
        self.assertEqual(self.holder.mapping, {"x": ["y"]})

    def testReadOnly(self) -> None:
        with self.assertRaises(AttributeError):
            self.holder.name = "other"

    def testArgumentCheck(self) -> None:
        with self.assertRaises(TypeError):
            mirror(1)


if __name__ == "__main__":
    unittest.main()
