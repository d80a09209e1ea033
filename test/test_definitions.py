"""
Definitions module behavioral tests (records, cells, default textualization).

Scope
- Validate alias sanitizing (order, duplicates, empty and whitespace names).
- Validate read-only fields and representations.
- Validate Cell tri-state tracking, marking and resets.
- Validate textual forms of typed defaults.

Conventions
- Test method names follow CamelCase per project convention.
"""

from __future__ import annotations

import unittest
from unittest import TestCase

from arger.definitions import Definition, Cell, textualize


class TestDefinition(TestCase):
    """Behavioral tests for Definition records."""

    def testSingleStringAlias(self):
        definition = Definition("--name", "a name")
        self.assertEqual(definition.aliases, ("--name",))
        self.assertEqual(definition.label, "--name")

    def testAliasOrderPreserved(self):
        definition = Definition(["-b", "--bool"], "A bool", False, flag=True)
        self.assertEqual(definition.aliases, ("-b", "--bool"))
        self.assertEqual(definition.label, "-b --bool")

    def testAliasesMustBeStrings(self):
        with self.assertRaises(TypeError):
            Definition(["-b", 2])

    def testAliasesMustBeIterable(self):
        with self.assertRaises(TypeError):
            Definition(3)

    def testEmptyAliasRejected(self):
        with self.assertRaises(ValueError):
            Definition(["-b", "  "])

    def testWhitespaceAliasRejected(self):
        with self.assertRaises(ValueError):
            Definition("--two words")

    def testFieldsAreReadOnly(self):
        definition = Definition("--name", "a name", "x")
        with self.assertRaises(AttributeError):
            definition.aliases = ("--other",)

    def testDescriptionTrimmed(self):
        self.assertEqual(Definition("--name", "  a name ").description, "a name")

    def testDescriptionMustBeString(self):
        with self.assertRaises(TypeError):
            Definition("--name", 42)

    def testRequiredDefinitionStartsPending(self):
        definition = Definition("--name", required=True)
        self.assertTrue(definition.required)
        self.assertFalse(definition.flag)
        self.assertIs(definition.cell.found, False)

    def testRepr(self):
        definition = Definition(("-b", "--bool"), "A bool", False, flag=True)
        self.assertEqual(
            repr(definition),
            "definition(aliases=('-b', '--bool'), description='A bool', default='false', flag=True, required=False)"
        )


class TestCell(TestCase):
    """Behavioral tests for runtime value cells."""

    def testOptionalCellIgnoresTracking(self):
        cell = Cell("x", False)
        cell.mark("y")
        self.assertEqual(cell.text, "y")
        self.assertIsNone(cell.found)
        self.assertFalse(cell.pending)

    def testRequiredCellBecomesSatisfied(self):
        cell = Cell("", True)
        self.assertTrue(cell.pending)
        cell.mark("y")
        self.assertIs(cell.found, True)
        self.assertFalse(cell.pending)

    def testResetRestoresDefault(self):
        cell = Cell("x", True)
        cell.mark("y")
        cell.reset()
        self.assertEqual(cell.text, "x")
        self.assertIs(cell.found, False)


class TestTextualize(TestCase):
    """Behavioral tests for default textual forms."""

    def testForms(self):
        self.assertEqual(textualize("abc"), "abc")
        self.assertEqual(textualize(""), "")
        self.assertEqual(textualize(True), "true")
        self.assertEqual(textualize(False), "false")
        self.assertEqual(textualize(-3), "-3")
        self.assertEqual(textualize(1.5), "1.5")

    def testUnsupportedType(self):
        with self.assertRaises(TypeError):
            textualize(None)


if __name__ == "__main__":
    unittest.main()
