"""
Command-line entry point tests (ggist option table).

Scope
- Validate the option table builds and renders.
- Validate main(): help, parsed runs, stray positionals and fault exit status.

Conventions
- Test method names follow CamelCase per project convention.
- Both consoles are captured; stdout is redirected for help and pretty output.
"""

from __future__ import annotations

import contextlib
import io
import unittest
from unittest import TestCase, mock

from rich.console import Console

from ggopts import Registry, render, faults, reports
from ggopts.__main__ import main, OPTIONS


def capture():
    return Console(file=io.StringIO(), width=120, color_system=None, force_terminal=False)


class TestOptionTable(TestCase):
    """Behavioral tests for the ggist declarations."""

    def testTableBuilds(self):
        registry = Registry(OPTIONS)
        self.assertIs(registry["h"], registry["history"])
        self.assertIs(registry["l"], registry["line-numbers"])

    def testTableRenders(self):
        lines = render(OPTIONS).splitlines()
        self.assertEqual(len(lines), len(OPTIONS))
        self.assertNotIn("invalid option", render(OPTIONS))


class TestMain(TestCase):
    """Behavioral tests for main()."""

    def setUp(self):
        self.errors = capture()
        self.reports = capture()
        for patcher in (
            mock.patch.object(faults, "console", self.errors),
            mock.patch.object(reports, "console", self.reports),
        ):
            patcher.start()
            self.addCleanup(patcher.stop)

    def run_main(self, argv):
        stdout = io.StringIO()
        with contextlib.redirect_stdout(stdout):
            status = main(argv)
        return status, stdout.getvalue()

    def testHelp(self):
        status, stdout = self.run_main(["--help"])
        self.assertEqual(status, 0)
        self.assertIn("--description", stdout)
        self.assertIn("--line-numbers", stdout)
        self.assertNotIn("GGIST HELP", stdout)

    def testFiles(self):
        status, stdout = self.run_main(["-f", "a.py", "b.py", "-d", "two files"])
        self.assertEqual(status, 0)
        self.assertIn("a.py", stdout)
        self.assertNotIn("nothing to do", self.reports.file.getvalue())

    def testStrayPositionalIsReported(self):
        status, _ = self.run_main(["stray", "-h"])
        self.assertEqual(status, 0)
        self.assertIn("** WARNING: ignoring positional argument 'stray'", self.reports.file.getvalue())

    def testNothingToDo(self):
        status, _ = self.run_main([])
        self.assertEqual(status, 0)
        self.assertIn("** INFO: nothing to do", self.reports.file.getvalue())

    def testVerboseEnablesDebug(self):
        self.run_main(["-v", "-u", "someone"])
        self.assertIn("** DEBUG:", self.reports.file.getvalue())

    def testVerbosityDoesNotLeakAcrossCalls(self):
        self.assertFalse(reports.verbose)
        self.run_main(["-v", "-u", "someone"])
        self.assertFalse(reports.verbose)
        self.run_main(["-u", "someone"])
        self.assertEqual(self.reports.file.getvalue().count("** DEBUG:"), 1)

    def testFaultExitsWithStatusOne(self):
        with self.assertRaises(SystemExit) as caught:
            self.run_main(["--index", "seven"])
        self.assertEqual(caught.exception.code, 1)
        self.assertIn("invalid integer value 'seven'", self.errors.file.getvalue())

    def testCommandLineString(self):
        status, stdout = self.run_main('-g abc -n "my file.py"')
        self.assertEqual(status, 0)
        self.assertIn("my file.py", stdout)


if __name__ == "__main__":
    unittest.main()
