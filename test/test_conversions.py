"""
Conversions module behavioral tests (text → typed values).

Scope
- Validate built-in converters (str, bool, int, float).
- Validate custom converters and the Failure path for malformed text.

Conventions
- Test method names follow CamelCase per project convention.
"""

from __future__ import annotations

import unittest
from unittest import TestCase

from arger.conversions import convert
from arger.faults import Failure


class TestConvert(TestCase):
    """Behavioral tests for convert()."""

    def testStringIsIdentity(self):
        self.assertEqual(convert(" spaced "), " spaced ")
        self.assertEqual(convert("", str), "")

    def testBooleanSpellings(self):
        for text in ("true", "TRUE", "yes", "on", "1", " True "):
            self.assertIs(convert(text, bool), True, text)
        for text in ("false", "False", "no", "off", "0"):
            self.assertIs(convert(text, bool), False, text)

    def testBooleanMalformed(self):
        failure = convert("maybe", bool)
        self.assertIsInstance(failure, Failure)
        self.assertEqual(failure.text, "maybe")
        self.assertIs(failure.type, bool)

    def testInteger(self):
        self.assertEqual(convert("42", int), 42)
        self.assertEqual(convert(" -7 ", int), -7)
        self.assertIsInstance(convert("4.2", int), Failure)
        self.assertIsInstance(convert("", int), Failure)

    def testFloat(self):
        self.assertEqual(convert("1.5", float), 1.5)
        self.assertEqual(convert("3", float), 3.0)
        self.assertIsInstance(convert("one", float), Failure)

    def testCustomConverter(self):
        self.assertEqual(convert("a,b", lambda text: text.split(",")), ["a", "b"])

    def testCustomConverterErrorsBecomeFailures(self):
        def strict(text):
            raise ValueError("never valid")

        failure = convert("x", strict)
        self.assertFalse(failure)
        self.assertEqual(failure.reason, "never valid")

    def testNonCallableTypeRejected(self):
        with self.assertRaises(TypeError):
            convert("x", 3)

    def testNonStringTextRejected(self):
        with self.assertRaises(TypeError):
            convert(3, int)


if __name__ == "__main__":
    unittest.main()
