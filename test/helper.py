"""
Help renderer behavioral tests.

Scope
- Validate the fixed-width plain listing and inline reports for malformed declarations.
- Validate the rich display (plain and fancy) on a captured console.

Conventions
- Test method names follow CamelCase per project convention.
"""

from __future__ import annotations

import io
import unittest
from unittest import TestCase

from rich.console import Console

from ggopts import render, display, flag, integer, string, strings


def capture():
    return Console(file=io.StringIO(), width=120, color_system=None, force_terminal=False)


class TestRender(TestCase):
    """Behavioral tests for render()."""

    def testShortAndLong(self):
        self.assertEqual(
            render([string("description,d", "Add a description.")]),
            "   -d [ --description" + " " * 5 + "] Add a description.",
        )

    def testLongOnly(self):
        self.assertEqual(
            render([flag("help", "Print this help message.")]),
            "      [ --help" + " " * 12 + "] Print this help message.",
        )

    def testShortOnly(self):
        self.assertEqual(
            render([flag("v,", "Talk more.")]),
            "      [ --v" + " " * 15 + "] Talk more.",
        )

    def testNoDescriptionHasNoTrailingSpace(self):
        self.assertEqual(render([flag("v,verbose")]), "   -v [ --verbose" + " " * 9 + "]")

    def testDeclarationOrder(self):
        lines = render([flag("v,verbose", "V."), integer("c,count", "C."), strings("f,files", "F.")]).splitlines()
        self.assertEqual(len(lines), 3)
        self.assertIn("--verbose", lines[0])
        self.assertIn("--count", lines[1])
        self.assertIn("--files", lines[2])

    def testMalformedDeclarationsReportedInline(self):
        lines = render([flag("a,b,c", "Bad."), flag("v,verbose", "Good."), flag(" , ")]).splitlines()
        self.assertEqual(lines[0], "  invalid option at position 0")
        self.assertIn("--verbose", lines[1])
        self.assertEqual(lines[2], "  invalid option at position 2")

    def testDuplicatesDoNotMatterForHelp(self):
        self.assertEqual(len(render([flag("v"), flag("v")]).splitlines()), 2)

    def testEmpty(self):
        self.assertEqual(render([]), "")

    def testNonOptionRejected(self):
        with self.assertRaises(TypeError):
            render(["v,verbose"])


class TestDisplay(TestCase):
    """Behavioral tests for display()."""

    def testPlainMatchesRender(self):
        options = [string("description,d", "Add a description."), flag("a,b,c"), flag("help", "Help.")]
        console = capture()
        display(options, console=console, colorful=False)
        output = console.file.getvalue()
        for line in render(options).splitlines():
            self.assertIn(line, output)

    def testColorfulDoesNotChangeText(self):
        options = [flag("v,verbose", "Talk more.")]
        console = capture()
        display(options, console=console)
        self.assertIn(render(options), console.file.getvalue())

    def testFancyPanelTitle(self):
        console = capture()
        display([flag("v,verbose", "Talk more.")], console=console, fancy=True, title="ggist")
        output = console.file.getvalue()
        self.assertIn("GGIST HELP", output)
        self.assertIn("--verbose", output)


if __name__ == "__main__":
    unittest.main()
