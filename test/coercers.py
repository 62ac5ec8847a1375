"""
Value coercer behavioral tests.

Scope
- Validate strict base-10 integer parsing and its fault.
- Validate verbatim string handling.

Conventions
- Test method names follow CamelCase per project convention.
"""

from __future__ import annotations

import sys
import unittest
from unittest import TestCase

from ggopts import coercers
from ggopts.faults import MalformedValueError, FaultCode


class TestInteger(TestCase):
    """Behavioral tests for coercers.integer()."""

    def testPlainAndSigned(self):
        self.assertEqual(coercers.integer("7"), 7)
        self.assertEqual(coercers.integer("+7"), 7)
        self.assertEqual(coercers.integer("-12"), -12)

    def testLeadingZerosAreDecimal(self):
        self.assertEqual(coercers.integer("0042"), 42)

    def testRejectsWhatIntWouldTolerate(self):
        for token in (" 7", "7 ", "1_000", "٣", "0x10", "1.5", "", "-", "seven"):
            with self.subTest(token=token):
                with self.assertRaises(MalformedValueError) as caught:
                    coercers.integer(token)
                self.assertEqual(caught.exception.options["token"], token)
                self.assertEqual(caught.exception.code, FaultCode.MALFORMED_VALUE)

    def testMessageNamesOptionAndPosition(self):
        with self.assertRaises(MalformedValueError) as caught:
            coercers.integer("x", name="--count", index=2)
        self.assertEqual(
            str(caught.exception),
            "invalid integer value 'x' for option '--count' at second position",
        )

    def testOverTheDigitLimit(self):
        limit = sys.get_int_max_str_digits()
        self.addCleanup(sys.set_int_max_str_digits, limit)
        sys.set_int_max_str_digits(4300)
        token = "1" * 5000
        with self.assertRaises(MalformedValueError) as caught:
            coercers.integer(token, name="--count", index=2)
        self.assertEqual(caught.exception.options["token"], token)
        self.assertEqual(caught.exception.options["index"], 2)
        self.assertNotIn(token, str(caught.exception))

    def testLongTokenWithinLimit(self):
        self.assertEqual(coercers.integer("9" * 40), int("9" * 40))

    def testNonStringRejected(self):
        with self.assertRaises(TypeError):
            coercers.integer(7)


class TestString(TestCase):
    """Behavioral tests for coercers.string() and coercers.presence()."""

    def testVerbatim(self):
        self.assertEqual(coercers.string("  a, 'b' "), "  a, 'b' ")

    def testEmptyStringKept(self):
        self.assertEqual(coercers.string(""), "")

    def testNonStringRejected(self):
        with self.assertRaises(TypeError):
            coercers.string(None)

    def testPresence(self):
        self.assertIs(coercers.presence(), True)


if __name__ == "__main__":
    unittest.main()
